"""The `pyvext` command-line interface."""

import asyncio
import importlib.metadata
from pathlib import Path
import tomllib
from typing import Any

import click

from .compose.bundle import DEFAULT_BUNDLE_FILE, load_app_bundle
from .exceptions import ExtensionsError
from .local import get_local_extension_spec

try:
    __version__ = importlib.metadata.version("pyvider-extensions")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0-dev"


def _load_config(pyproject_path: Path) -> dict[str, Any]:
    """Returns the [tool.pyvider.extensions] table, or {} when there is none."""
    if not pyproject_path.is_file():
        return {}
    try:
        with pyproject_path.open("rb") as f:
            pyproject_data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise click.UsageError(f"Could not parse {pyproject_path}: {e}") from e
    return pyproject_data.get("tool", {}).get("pyvider", {}).get("extensions", {})


manifest_option = click.option(
    "--manifest",
    "pyproject_toml_path",
    default="pyproject.toml",
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Path to the pyproject.toml holding [tool.pyvider.extensions] defaults.",
)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="pyvext",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Pyvider extension and app bundle tool."""
    pass


@cli.command("info")
@click.argument("directory", required=False, type=click.Path(file_okay=False))
@click.option("--preinstall", is_flag=True, help="Print the PREINSTALL.md content.")
@manifest_option
def info_command(
    directory: str | None, preinstall: bool, pyproject_toml_path: str
) -> None:
    """Resolves and describes the extension in DIRECTORY."""
    manifest_path = Path(pyproject_toml_path)
    config = _load_config(manifest_path)
    if directory:
        final_directory = Path(directory)
    else:
        final_directory = manifest_path.parent / config.get("directory", ".")

    try:
        spec = asyncio.run(get_local_extension_spec(final_directory))
    except ExtensionsError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        raise click.Abort() from e

    click.echo(f"Name: {spec.name}")
    click.echo(f"Version: {spec.version}")
    if spec.display_name:
        click.echo(f"Display name: {spec.display_name}")
    if spec.preinstall_content is None:
        click.echo("PREINSTALL.md: not present")
    else:
        click.echo("PREINSTALL.md: present")
        if preinstall:
            click.echo(spec.preinstall_content, nl=False)


@cli.command("bundle")
@click.argument("bundle_file", required=False, type=click.Path(dir_okay=False))
@manifest_option
def bundle_command(bundle_file: str | None, pyproject_toml_path: str) -> None:
    """Validates the app bundle in BUNDLE_FILE."""
    manifest_path = Path(pyproject_toml_path)
    config = _load_config(manifest_path)
    if bundle_file:
        final_bundle = Path(bundle_file)
    else:
        final_bundle = manifest_path.parent / config.get("bundle", DEFAULT_BUNDLE_FILE)

    try:
        bundle = load_app_bundle(final_bundle)
    except ExtensionsError as e:
        click.secho(f"❌ Invalid bundle:\n{e}", fg="red", err=True)
        raise click.Abort() from e

    click.secho(f"✅ Bundle '{final_bundle}' is valid ({bundle.version}).", fg="green")
    if bundle.server is None:
        click.echo("No server configured.")
        return
    start = bundle.server.start
    click.echo(f"  Start: {' '.join(start.cmd)}")
    click.echo(f"  Runtime: {start.runtime}")
    click.echo(f"  Dir: {start.dir}")


main = cli

if __name__ == "__main__":
    main()
