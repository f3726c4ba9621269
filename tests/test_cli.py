"""Tests for the pyvext command-line interface."""

from pathlib import Path

from click.testing import CliRunner

from pyvider.extensions.cli import cli


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("pyvext version ")


def test_info_describes_extension(sample_ext_dir: Path) -> None:
    result = CliRunner().invoke(cli, ["info", str(sample_ext_dir)])

    assert result.exit_code == 0, result.output
    assert "Name: fixture-ext" in result.output
    assert "Version: 1.0.0" in result.output
    assert "Display name: Fixture Extension" in result.output
    assert "PREINSTALL.md: not present" in result.output


def test_info_prints_preinstall(sample_ext_preinstall_dir: Path) -> None:
    result = CliRunner().invoke(
        cli, ["info", str(sample_ext_preinstall_dir), "--preinstall"]
    )

    assert result.exit_code == 0, result.output
    assert "PREINSTALL.md: present" in result.output
    assert result.output.endswith("This is a PREINSTALL file for testing with.\n")


def test_info_failures(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(cli, ["info"])
        assert result.exit_code != 0
        assert "No extension.yaml found" in result.output

        Path("extension.yaml").write_text("name: foo\nunknownkey\nother: value")
        result = runner.invoke(cli, ["info"])
        assert result.exit_code != 0
        assert "YAML Error" in result.output
        assert "line 2" in result.output


def test_info_reads_directory_from_pyproject(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("ext").mkdir()
        Path("ext/extension.yaml").write_text("name: configured\nversion: 2.0.0\n")
        Path("pyproject.toml").write_text(
            '[tool.pyvider.extensions]\ndirectory = "ext"\n'
        )

        result = runner.invoke(cli, ["info"])

        assert result.exit_code == 0, result.output
        assert "Name: configured" in result.output


def test_bundle_command(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("bundle.yaml").write_text(
            "version: v1alpha\n"
            "server:\n"
            "  start:\n"
            "    cmd: [npm, run, start]\n"
            "    runtime: nodejs18\n"
        )

        result = runner.invoke(cli, ["bundle"])

        assert result.exit_code == 0, result.output
        assert "is valid (v1alpha)" in result.output
        assert "Start: npm run start" in result.output
        assert "Dir: .bundle/server" in result.output


def test_bundle_command_uses_configured_path(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        Path("app").mkdir()
        Path("app/apphosting.yaml").write_text("version: v1alpha\n")
        Path("pyproject.toml").write_text(
            '[tool.pyvider.extensions]\nbundle = "app/apphosting.yaml"\n'
        )

        result = runner.invoke(cli, ["bundle"])

        assert result.exit_code == 0, result.output
        assert "No server configured." in result.output


def test_bundle_command_failures(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=tmp_path):
        result = runner.invoke(cli, ["bundle"])
        assert result.exit_code != 0
        assert "Bundle file not found" in result.output

        Path("bundle.yaml").write_text(
            "version: v1alpha\nserver:\n  start:\n    cmd: []\n    runtime: nodejs18\n"
        )
        result = runner.invoke(cli, ["bundle"])
        assert result.exit_code != 0
        assert "❌ Invalid bundle" in result.output
        assert "at least the executable" in result.output

        Path("pyproject.toml").write_text("[tool.pyvider\n")
        result = runner.invoke(cli, ["bundle"])
        assert result.exit_code != 0
        assert "Could not parse" in result.output
