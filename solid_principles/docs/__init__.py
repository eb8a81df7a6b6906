from .markdown import render_example, render_markdown, source_of, write_markdown

__all__ = ["render_markdown", "render_example", "write_markdown", "source_of"]
