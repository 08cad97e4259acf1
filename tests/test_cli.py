"""Tests for the atomsmith CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from atomsmith.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolate(isolated_home):
    yield


class TestBuildCommand:
    def test_writes_output_file(self, corpus: Path, tmp_path: Path):
        out = tmp_path / "atoms.css"
        result = runner.invoke(app, ["build", str(corpus), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "Wrote" in result.output
        css = out.read_text()
        assert ".D\\(b\\) {" in css
        assert ".Bgc\\(\\#0af\\) {" in css

    def test_second_build_reports_unchanged(self, corpus: Path, tmp_path: Path):
        out = tmp_path / "atoms.css"
        runner.invoke(app, ["build", str(corpus), "-o", str(out)])
        before = out.read_text()

        result = runner.invoke(app, ["build", str(corpus), "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert "unchanged" in result.output
        assert out.read_text() == before

    def test_stdout_without_output(self, corpus: Path):
        result = runner.invoke(app, ["build", str(corpus / "index.html")])
        assert result.exit_code == 0, result.output
        assert "display: block;" in result.output
        assert "background-color: #0af;" in result.output

    def test_recursive_and_rtl(self, corpus: Path, tmp_path: Path):
        out = tmp_path / "atoms.css"
        result = runner.invoke(app, ["build", str(corpus), "-R", "--rtl", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "float: right;" in out.read_text()

    def test_namespace(self, corpus: Path, tmp_path: Path):
        out = tmp_path / "atoms.css"
        result = runner.invoke(
            app, ["build", str(corpus / "index.html"), "-n", "#atomic", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.read_text().startswith("#atomic .")

    def test_exclude_option(self, corpus: Path, tmp_path: Path):
        out = tmp_path / "atoms.css"
        result = runner.invoke(app, ["build", str(corpus), "-x", "*.min.js", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "excluded" in result.output
        assert "opacity" not in out.read_text()

    def test_config_file_supplies_defaults(self, corpus: Path, isolated_home: Path):
        (isolated_home / "atomsmith.yaml").write_text(
            "exclude: ['*.min.js']\n"
            "class_names: ['P(10px)']\n"
            "output:\n  path: dist/atoms.css\n"
        )
        result = runner.invoke(app, ["build", str(corpus)])
        assert result.exit_code == 0, result.output
        css = (isolated_home / "dist" / "atoms.css").read_text()
        assert css.startswith(".P\\(10px\\) {")
        assert "opacity" not in css

    def test_missing_input_fails(self, tmp_path: Path):
        result = runner.invoke(app, ["build", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Cannot scan" in result.output

    def test_no_inputs_fails(self):
        result = runner.invoke(app, ["build"])
        assert result.exit_code == 1
        assert "no input" in result.output

    def test_bad_rules_file_fails(self, corpus: Path, isolated_home: Path):
        (isolated_home / "atomsmith.yaml").write_text("rules_file: missing-rules.yaml\n")
        result = runner.invoke(app, ["build", str(corpus)])
        assert result.exit_code == 1
        assert "rules file not found" in result.output


class TestGlobalOptions:
    def test_missing_config_path_fails(self, corpus: Path):
        result = runner.invoke(app, ["-c", "nope.yaml", "build", str(corpus)])
        assert result.exit_code == 1
        assert "file not found" in result.output

    def test_explicit_config_path(self, corpus: Path, isolated_home: Path):
        cfg = isolated_home / "alt.yaml"
        cfg.write_text("options:\n  namespace: '#root'\n")
        out = isolated_home / "atoms.css"
        result = runner.invoke(app, ["-c", str(cfg), "build", str(corpus), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_text().startswith("#root .")


class TestRulesCommand:
    def test_lists_rules(self):
        result = runner.invoke(app, ["rules"])
        assert result.exit_code == 0, result.output
        assert "Rules (" in result.output
        assert "Bgc" in result.output
        assert "helper" in result.output


class TestConfigCommands:
    def test_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0, result.output
        assert "log_level" in result.output

    def test_init_creates_file(self, isolated_home: Path):
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0, result.output
        assert (isolated_home / "atomsmith.yaml").exists()

    def test_init_refuses_to_overwrite(self, isolated_home: Path):
        (isolated_home / "atomsmith.yaml").write_text("recursive: true\n")
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (isolated_home / "atomsmith.yaml").read_text() == "recursive: true\n"

    def test_init_force(self, isolated_home: Path):
        (isolated_home / "atomsmith.yaml").write_text("recursive: true\n")
        result = runner.invoke(app, ["config", "init", "--force"])
        assert result.exit_code == 0, result.output
        assert "breakpoints:" in (isolated_home / "atomsmith.yaml").read_text()
