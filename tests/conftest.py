"""Pytest fixtures for the entire pyvider-extensions test suite."""

from pathlib import Path

import pytest

from pyvider.extensions.compose.models import AppSpec

ASSETS_DIR = Path(__file__).parent / "assets"


@pytest.fixture(scope="session")
def sample_ext_dir() -> Path:
    """An extension directory with only an extension.yaml."""
    return ASSETS_DIR / "sample-ext"


@pytest.fixture(scope="session")
def sample_ext_preinstall_dir() -> Path:
    """An extension directory with an extension.yaml and a PREINSTALL.md."""
    return ASSETS_DIR / "sample-ext-preinstall"


@pytest.fixture
def app_spec() -> AppSpec:
    return AppSpec(
        base_image="us-docker.pkg.dev/serverless-runtimes/google-22/runtimes/nodejs18",
        package_manager_install_command="npm install -g pnpm",
        environment_variables={"NODE_ENV": "production"},
        install_command="pnpm install",
        build_command="pnpm run build",
        start_command="pnpm run start",
    )
