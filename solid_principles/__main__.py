from solid_principles.cli.cli import app

if __name__ == "__main__":
    app()
