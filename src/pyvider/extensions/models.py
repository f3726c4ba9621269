from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Self

from attrs import define, field

from .exceptions import ManifestValidationError

# Key under which the companion document is exposed alongside manifest fields.
PREINSTALL_CONTENT_KEY = "preinstallContent"

REQUIRED_MANIFEST_FIELDS = ("name", "version")


def _freeze(fields: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(fields))


@define(frozen=True, slots=True)
class ExtensionSpec:
    """An extension manifest resolved from a local directory.

    `fields` holds the whole parsed manifest; keys beyond `name` and
    `version` are passed through without any schema enforcement.
    """

    name: str
    version: str
    fields: Mapping[str, Any] = field(
        factory=dict, converter=_freeze, repr=False, hash=False
    )
    preinstall_content: str | None = None

    @classmethod
    def from_manifest(
        cls,
        manifest: Any,
        preinstall_content: str | None = None,
        *,
        path: Path | str | None = None,
    ) -> Self:
        if not isinstance(manifest, Mapping):
            raise ManifestValidationError(
                "extension.yaml must contain a mapping at the top level, "
                f"got {type(manifest).__name__}.",
                path=path,
            )
        for key in REQUIRED_MANIFEST_FIELDS:
            value = manifest.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ManifestValidationError(
                    f"extension.yaml is missing required field '{key}'.",
                    path=path,
                )
        return cls(
            name=manifest["name"],
            version=manifest["version"],
            fields=manifest,
            preinstall_content=preinstall_content,
        )

    @property
    def display_name(self) -> str | None:
        return self.fields.get("displayName")

    @property
    def description(self) -> str | None:
        return self.fields.get("description")

    @property
    def spec_version(self) -> str | None:
        return self.fields.get("specVersion")

    def to_dict(self) -> dict[str, Any]:
        merged = dict(self.fields)
        if self.preinstall_content is not None:
            merged[PREINSTALL_CONTENT_KEY] = self.preinstall_content
        return merged

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())
