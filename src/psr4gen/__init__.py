from .errors import (
    AmbiguousNamespaceError,
    ClassAlreadyExistsError,
    DirectoryCreationError,
    FileWriteError,
    GenerationError,
    InvalidClassNameError,
    MalformedAutoloadError,
    ManifestNotFoundError,
    ManifestParseError,
    MissingAutoloadError,
    NoMatchingNamespaceError,
)
from .generator import CLASS_SKELETON, HandlerGenerator, render
from .manifest import load_autoload_map, read_manifest
from .models import NAMESPACE_SEPARATOR, AutoloadMap, ResolvedTarget, TargetClass
from .resolver import match_prefix, resolve

__version__ = "0.1.0"
__all__ = [
    "HandlerGenerator",
    "CLASS_SKELETON",
    "render",
    "load_autoload_map",
    "read_manifest",
    "match_prefix",
    "resolve",
    "NAMESPACE_SEPARATOR",
    "AutoloadMap",
    "TargetClass",
    "ResolvedTarget",
    "GenerationError",
    "InvalidClassNameError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "MissingAutoloadError",
    "MalformedAutoloadError",
    "NoMatchingNamespaceError",
    "AmbiguousNamespaceError",
    "DirectoryCreationError",
    "ClassAlreadyExistsError",
    "FileWriteError",
]
