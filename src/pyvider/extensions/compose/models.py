from collections.abc import Mapping
import enum
from types import MappingProxyType
from typing import Any, Self

from attrs import define, field, validators

from ..exceptions import BundleValidationError

BUNDLE_VERSION = "v1alpha"
DEFAULT_SERVER_DIR = ".bundle/server"


class MemorySize(str, enum.Enum):
    MIB_256 = "256MiB"
    MIB_512 = "512MiB"
    GIB_1 = "1GiB"
    GIB_2 = "2GiB"
    GIB_4 = "4GiB"
    GIB_8 = "8GiB"
    GIB_16 = "16GiB"


def _non_empty(instance: Any, attribute: Any, value: str) -> None:
    if not value:
        raise ValueError(f"'{attribute.name}' must be a non-empty string.")


def _non_negative(instance: Any, attribute: Any, value: float | None) -> None:
    if value is not None and value < 0:
        raise ValueError(f"'{attribute.name}' must be non-negative, got {value}.")


def _memory(value: MemorySize | str | None) -> MemorySize | str | None:
    if value is None or isinstance(value, MemorySize):
        return value
    try:
        return MemorySize(value)
    except ValueError:
        # Free-form sizes are allowed.
        return value


def _env(value: Mapping[str, str] | None) -> Mapping[str, str] | None:
    return None if value is None else MappingProxyType(dict(value))


_number = validators.optional(validators.instance_of((int, float)))
_integer = validators.optional(validators.instance_of(int))


@define(frozen=True, slots=True)
class StartConfig:
    cmd: tuple[str, ...] = field(
        converter=tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(str)
        ),
    )
    runtime: str = field(validator=[validators.instance_of(str), _non_empty])
    dir: str = field(default=DEFAULT_SERVER_DIR, validator=validators.instance_of(str))

    @cmd.validator
    def _check_cmd(self, attribute: Any, value: tuple[str, ...]) -> None:
        if not value or not value[0]:
            raise ValueError("'cmd' must contain at least the executable.")


@define(frozen=True, slots=True)
class ServerConfig:
    start: StartConfig = field(validator=validators.instance_of(StartConfig))
    concurrency: int | None = field(default=None, validator=[_integer, _non_negative])
    cpu: float | None = field(default=None, validator=[_number, _non_negative])
    memory: MemorySize | str | None = field(
        default=None,
        converter=_memory,
        validator=validators.optional(validators.instance_of(str)),
    )
    timeout_seconds: int | None = field(
        default=None, validator=[_integer, _non_negative]
    )
    min_instances: int | None = field(default=None, validator=[_integer, _non_negative])
    max_instances: int | None = field(default=None, validator=[_integer, _non_negative])


# On-disk (camelCase) key -> ServerConfig attribute.
_SERVER_KEYS = {
    "concurrency": "concurrency",
    "cpu": "cpu",
    "memory": "memory",
    "timeoutSeconds": "timeout_seconds",
    "minInstances": "min_instances",
    "maxInstances": "max_instances",
}


def _section(data: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise BundleValidationError(f"'{where}' must be a mapping.")
    return data


def _reject_bools(values: Mapping[str, Any], where: str) -> None:
    # bool is an int subclass; a YAML `true` is never a valid resource hint.
    for key, value in values.items():
        if isinstance(value, bool):
            raise BundleValidationError(f"'{where}.{key}' must not be a boolean.")


@define(frozen=True, slots=True)
class AppBundle:
    """The user-authored description of a deployable application."""

    version: str = field(default=BUNDLE_VERSION, validator=validators.in_([BUNDLE_VERSION]))
    server: ServerConfig | None = field(
        default=None, validator=validators.optional(validators.instance_of(ServerConfig))
    )

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Builds a bundle from its on-disk form, raising BundleValidationError."""
        data = _section(data, "bundle")
        version = data.get("version")
        if version != BUNDLE_VERSION:
            raise BundleValidationError(
                f"Unsupported bundle version {version!r}; expected '{BUNDLE_VERSION}'."
            )

        server = None
        if data.get("server") is not None:
            server_data = _section(data["server"], "server")
            if server_data.get("start") is None:
                raise BundleValidationError("'server.start' is required.")
            start_data = _section(server_data["start"], "server.start")
            cmd = start_data.get("cmd")
            if isinstance(cmd, str) or not isinstance(cmd, list):
                raise BundleValidationError(
                    "'server.start.cmd' must be a list of strings."
                )
            present = {
                key: server_data[key]
                for key in _SERVER_KEYS
                if server_data.get(key) is not None
            }
            _reject_bools(present, "server")
            hints = {_SERVER_KEYS[key]: value for key, value in present.items()}
            try:
                start = StartConfig(
                    cmd=cmd,
                    runtime=start_data.get("runtime"),
                    dir=start_data.get("dir") or DEFAULT_SERVER_DIR,
                )
            except (TypeError, ValueError) as e:
                raise BundleValidationError(f"Invalid 'server.start': {e}") from e
            try:
                server = ServerConfig(start=start, **hints)
            except (TypeError, ValueError) as e:
                raise BundleValidationError(f"Invalid 'server': {e}") from e

        return cls(version=version, server=server)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"version": self.version}
        if self.server is not None:
            server: dict[str, Any] = {
                "start": {
                    "cmd": list(self.server.start.cmd),
                    "runtime": self.server.start.runtime,
                    "dir": self.server.start.dir,
                }
            }
            for key, attr in _SERVER_KEYS.items():
                value = getattr(self.server, attr)
                if value is not None:
                    server[key] = value.value if isinstance(value, MemorySize) else value
            result["server"] = server
        return result


@define(frozen=True, slots=True)
class AppSpec:
    """The normalized specification a Driver is built from."""

    base_image: str = field(validator=[validators.instance_of(str), _non_empty])
    install_command: str = field(validator=[validators.instance_of(str), _non_empty])
    build_command: str = field(validator=[validators.instance_of(str), _non_empty])
    start_command: str = field(validator=[validators.instance_of(str), _non_empty])
    package_manager_install_command: str | None = field(
        default=None, validator=validators.optional(validators.instance_of(str))
    )
    environment_variables: Mapping[str, str] | None = field(
        default=None,
        converter=_env,
        hash=False,
        validator=validators.optional(
            validators.deep_mapping(
                key_validator=validators.instance_of(str),
                value_validator=validators.instance_of(str),
            )
        ),
    )
