import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from pathier import Pathier
from typing_extensions import Any, Self

from .errors import InvalidClassNameError, MalformedAutoloadError

NAMESPACE_SEPARATOR = "\\"

identifier = re.compile(r"[A-Za-z_\x80-\U0010ffff][A-Za-z0-9_\x80-\U0010ffff]*")


@dataclass(frozen=True)
class TargetClass:
    namespace: str
    name: str

    @classmethod
    def parse(cls, fqcn: str) -> Self:
        """Split `fqcn` into its namespace and class name.

        A single leading separator is allowed and dropped.

        Raises `InvalidClassNameError` if `fqcn` is empty or any segment isn't a valid identifier.
        """
        stripped = fqcn.strip()
        if stripped.startswith(NAMESPACE_SEPARATOR):
            stripped = stripped[1:]
        if not stripped:
            raise InvalidClassNameError(fqcn, "name is empty")
        segments = stripped.split(NAMESPACE_SEPARATOR)
        for segment in segments:
            if not segment:
                raise InvalidClassNameError(fqcn, "empty namespace segment")
            if not identifier.fullmatch(segment):
                raise InvalidClassNameError(
                    fqcn, f"`{segment}` is not a valid identifier"
                )
        return cls(NAMESPACE_SEPARATOR.join(segments[:-1]), segments[-1])

    @property
    def fqcn(self) -> str:
        if not self.namespace:
            return self.name
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.name}"

    @property
    def segments(self) -> list[str]:
        """The namespace segments, not including the class name."""
        return self.namespace.split(NAMESPACE_SEPARATOR) if self.namespace else []

    def __str__(self) -> str:
        return self.fqcn


@dataclass(frozen=True)
class AutoloadMap:
    """Immutable mapping of PSR-4 namespace prefixes to base directories.

    Keys always end with a namespace separator, except for the empty fallback prefix."""

    prefixes: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "prefixes", MappingProxyType(dict(self.prefixes)))

    @classmethod
    def from_untyped(cls, data: Any) -> Self:
        """Validate the raw `autoload.psr-4` value from a parsed manifest.

        Raises `MalformedAutoloadError` unless `data` is a mapping of strings to strings
        whose non-empty keys end with a namespace separator."""
        if not isinstance(data, dict):
            raise MalformedAutoloadError(
                f"expected an object, got `{type(data).__name__}`"
            )
        prefixes: dict[str, str] = {}
        for prefix, base_dir in data.items():
            if not isinstance(prefix, str) or not isinstance(base_dir, str):
                raise MalformedAutoloadError(
                    f"`{prefix}` must map to a single directory string"
                )
            if prefix and not prefix.endswith(NAMESPACE_SEPARATOR):
                raise MalformedAutoloadError(
                    f"prefix `{prefix}` must end with a namespace separator"
                )
            prefixes[prefix] = base_dir
        return cls(prefixes)

    @staticmethod
    def normalize(prefix: str) -> str:
        """Returns `prefix` without a leading separator."""
        return prefix[1:] if prefix.startswith(NAMESPACE_SEPARATOR) else prefix

    def __len__(self) -> int:
        return len(self.prefixes)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self.prefixes

    def __getitem__(self, prefix: str) -> str:
        return self.prefixes[prefix]

    def items(self):
        return self.prefixes.items()


@dataclass(frozen=True)
class ResolvedTarget:
    namespace: str
    class_name: str
    path: Pathier

    @property
    def directory(self) -> Pathier:
        return self.path.parent

    @property
    def fqcn(self) -> str:
        return str(TargetClass(self.namespace, self.class_name))
