"""Loading of app bundle files from disk."""

from pathlib import Path

from pyvider.telemetry import logger
import yaml

from ..exceptions import BundleValidationError
from ..yaml_loader import load_yaml
from .models import AppBundle

DEFAULT_BUNDLE_FILE = "bundle.yaml"


def load_app_bundle(bundle_path: Path | str) -> AppBundle:
    """Reads and structurally validates an app bundle YAML file."""
    path = Path(bundle_path)
    if not path.is_file():
        raise BundleValidationError(f"Bundle file not found at: {path}", path=path)

    logger.debug("Loading app bundle", path=str(path))
    try:
        data = load_yaml(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise BundleValidationError(f"YAML Error in {path}: {e}", path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise BundleValidationError(
            f'Failed to read file at "{path}": {e}', path=path
        ) from e

    try:
        return AppBundle.from_dict(data)
    except BundleValidationError as e:
        raise BundleValidationError(f"{path}: {e}", path=path) from e.__cause__
