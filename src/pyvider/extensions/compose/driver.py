"""Base driver and registry of the backends that act on an AppSpec."""

from collections.abc import Callable

from pyvider.telemetry import logger

from ..exceptions import DriverNotFoundError, DriverNotImplementedError
from .models import AppSpec


class Driver:
    """
    Turns an AppSpec into install, build and start actions.

    The base class supplies no behavior: every capability raises
    DriverNotImplementedError until a concrete backend overrides it.
    """

    def __init__(self, spec: AppSpec) -> None:
        self._spec = spec

    @property
    def spec(self) -> AppSpec:
        return self._spec

    def install(self) -> None:
        raise DriverNotImplementedError("install() not implemented")

    def build(self) -> None:
        raise DriverNotImplementedError("build() not implemented")

    def start(self) -> None:
        raise DriverNotImplementedError("start() not implemented")


_DRIVERS: dict[str, type[Driver]] = {}


def register_driver(name: str) -> Callable[[type[Driver]], type[Driver]]:
    """Class decorator registering a Driver subclass under `name`."""

    def decorator(driver_cls: type[Driver]) -> type[Driver]:
        if not issubclass(driver_cls, Driver):
            raise TypeError(f"{driver_cls.__name__} is not a Driver subclass.")
        existing = _DRIVERS.get(name)
        if existing is not None and existing is not driver_cls:
            raise ValueError(
                f"Driver '{name}' is already registered to {existing.__name__}."
            )
        _DRIVERS[name] = driver_cls
        return driver_cls

    return decorator


def available_drivers() -> list[str]:
    return sorted(_DRIVERS)


def get_driver(name: str, spec: AppSpec) -> Driver:
    driver_cls = _DRIVERS.get(name)
    if driver_cls is None:
        known = ", ".join(available_drivers()) or "none"
        raise DriverNotFoundError(
            f"No driver registered under '{name}'. Available drivers: {known}."
        )
    return driver_cls(spec)


def run_lifecycle(driver: Driver) -> None:
    """Installs then builds. A missing capability propagates to the caller."""
    name = type(driver).__name__
    logger.info(f"Running install for {name}", command=driver.spec.install_command)
    driver.install()
    logger.info(f"Running build for {name}", command=driver.spec.build_command)
    driver.build()
