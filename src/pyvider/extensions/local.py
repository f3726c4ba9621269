"""Resolution of extensions that live in a local directory."""

import asyncio
import os
from pathlib import Path

import attrs
from pyvider.telemetry import logger
import yaml

from .exceptions import ManifestNotFoundError, ManifestParseError
from .models import PREINSTALL_CONTENT_KEY, ExtensionSpec
from .yaml_loader import load_yaml

EXTENSION_MANIFEST_FILE = "extension.yaml"
PREINSTALL_FILE = "PREINSTALL.md"


def read_file(path_to_file: Path | str) -> str:
    """Reads a file as UTF-8 text, exactly as stored on disk."""
    path = Path(path_to_file)
    try:
        # newline="" keeps line endings untranslated.
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ManifestNotFoundError(
            f'Could not find "{path}"', path=path
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestNotFoundError(
            f'Failed to read file at "{path}": {e}', path=path
        ) from e


def parse_manifest(source: str, path: Path | str | None = None) -> object:
    """Parses manifest text, converting every parser failure to ManifestParseError."""
    try:
        return load_yaml(source)
    except yaml.YAMLError as e:
        location = f" in {path}" if path is not None else ""
        raise ManifestParseError(f"YAML Error{location}: {e}", path=path) from e
    except Exception as e:
        raise ManifestParseError(str(e), path=path) from e


def is_local_extension(path: Path | str) -> bool:
    """Returns True if `path` is a directory that can be listed."""
    try:
        os.listdir(path)
    except (OSError, TypeError, ValueError) as e:
        logger.debug("Path is not a local extension", path=str(path), error=str(e))
        return False
    return True


async def get_local_extension_spec(directory: Path | str) -> ExtensionSpec:
    """
    Resolves the extension in `directory` from its extension.yaml and an
    optional PREINSTALL.md.

    Raises ManifestNotFoundError when the manifest cannot be read and
    ManifestParseError when it cannot be parsed. PREINSTALL.md is only read
    once the manifest has parsed successfully.
    """
    directory = Path(directory)
    manifest_path = directory / EXTENSION_MANIFEST_FILE
    try:
        source = await asyncio.to_thread(read_file, manifest_path)
    except ManifestNotFoundError as e:
        raise ManifestNotFoundError(
            f"No {EXTENSION_MANIFEST_FILE} found at {manifest_path}. "
            "Is this directory the root of an extension?",
            path=manifest_path,
        ) from e.__cause__

    manifest = parse_manifest(source, manifest_path)
    if isinstance(manifest, dict):
        manifest.pop(PREINSTALL_CONTENT_KEY, None)
    spec = ExtensionSpec.from_manifest(manifest, path=manifest_path)

    try:
        preinstall_content = await asyncio.to_thread(
            read_file, directory / PREINSTALL_FILE
        )
    except ManifestNotFoundError:
        logger.debug(f"No {PREINSTALL_FILE} found in directory {directory}.")
        return spec
    return attrs.evolve(spec, preinstall_content=preinstall_content)
