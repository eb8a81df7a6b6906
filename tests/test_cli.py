# tests/test_cli.py
"""
Tests for the `solid` CLI.
"""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from solid_principles.cli.cli import app
from solid_principles.cli.context import CLIContext

runner = CliRunner()

pytestmark = pytest.mark.tier2


# ---------------------------------------------------------
# Smoke
# ---------------------------------------------------------


def test_cli_root_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "SOLID" in result.output


def test_all_top_level_commands_help():
    for cmd in app.registered_commands:
        name = cmd.name
        if name is None:
            continue

        result = runner.invoke(app, [name, "--help"])
        assert result.exit_code == 0, f"Help failed for '{name}'"


# ---------------------------------------------------------
# list
# ---------------------------------------------------------


def test_list_shows_every_principle():
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    for key in ("single_responsibility", "open_closed", "dependency_inversion"):
        assert key in result.output


# ---------------------------------------------------------
# run
# ---------------------------------------------------------


class TestRunCommand:
    """Tests for solid run."""

    def test_run_adhering(self):
        result = runner.invoke(app, ["run", "dip", "--variant", "adhering"])

        assert result.exit_code == 0
        assert "SMS to +1-555-0100: Your order has shipped" in result.output
        assert "--- violating ---" not in result.output

    def test_run_defaults_to_both(self):
        result = runner.invoke(app, ["run", "S"])

        assert result.exit_code == 0
        assert "--- violating ---" in result.output
        assert "--- adhering ---" in result.output

    def test_run_unknown_principle_exits_1(self):
        result = runner.invoke(app, ["run", "xyz"])

        assert result.exit_code == 1
        assert "Unknown principle" in result.output

    def test_run_unknown_variant_exits_1(self):
        result = runner.invoke(app, ["run", "srp", "-V", "sideways"])

        assert result.exit_code == 1
        assert "Unknown variant" in result.output

    def test_run_violation_output_kept_verbatim(self):
        result = runner.invoke(app, ["run", "ocp", "-V", "violating"])

        assert result.exit_code == 0
        assert "Error: Unsupported payment method: 'bank_transfer'" in result.output


# ---------------------------------------------------------
# show
# ---------------------------------------------------------


def test_show_prints_source():
    result = runner.invoke(app, ["show", "isp", "--variant", "violating"])

    assert result.exit_code == 0
    assert "class Robot(Worker)" in result.output
    assert "class RobotWorker" not in result.output


def test_show_unknown_principle_exits_1():
    result = runner.invoke(app, ["show", "nope"])
    assert result.exit_code == 1


# ---------------------------------------------------------
# doc
# ---------------------------------------------------------


def test_doc_to_stdout():
    result = runner.invoke(app, ["doc", "--no-source"])

    assert result.exit_code == 0
    assert result.output.startswith("# SOLID Principles")
    assert "```python" not in result.output


def test_doc_to_file(tmp_path):
    target = tmp_path / "SOLID.md"
    result = runner.invoke(app, ["doc", "--output", str(target)])

    assert result.exit_code == 0
    assert target.exists()
    assert "class UserRepository" in target.read_text(encoding="utf-8")


# ---------------------------------------------------------
# config
# ---------------------------------------------------------


class TestConfigCommand:
    """Tests for solid config."""

    def test_config_shows_effective_values(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "default_variant: both" in result.output

    def test_config_path(self, isolated_config):
        result = runner.invoke(app, ["config", "--path"])

        assert result.exit_code == 0
        assert isolated_config.name in result.output
        assert "package defaults" in result.output

    def test_user_override_visible(self, isolated_config):
        isolated_config.write_text("output:\n  theme: friendly\n")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "theme: friendly" in result.output

    def test_broken_config_exits_1(self, isolated_config):
        isolated_config.write_text("output:\n  colour: red\n")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 1
        assert "validation failed" in result.output.lower()

    def test_context_records_user_config_path(self, isolated_config):
        ctx = CLIContext.load()

        assert ctx.config_path == isolated_config
        assert ctx.has_user_config is False
        assert CLIContext(config=ctx.config).config_path is None

    @pytest.mark.parametrize("body", ["solid: 5\n", "solid: [a]\n"])
    def test_non_mapping_solid_section_exits_1(self, isolated_config, body):
        isolated_config.write_text(body)

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 1
        assert "must be a mapping" in result.output


# ---------------------------------------------------------
# logging
# ---------------------------------------------------------


def test_verbose_sets_debug_level():
    result = runner.invoke(app, ["--verbose", "list"])

    assert result.exit_code == 0
    assert logging.getLogger("solid_principles").level == logging.DEBUG


def test_configured_level_applied(isolated_config):
    isolated_config.write_text("logging:\n  level: info\n")

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert logging.getLogger("solid_principles").level == logging.INFO
