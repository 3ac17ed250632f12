import json

from pathier import Pathier, Pathish
from typing_extensions import Any

from .errors import (
    ManifestNotFoundError,
    ManifestParseError,
    MissingAutoloadError,
)
from .models import AutoloadMap

MANIFEST_NAME = "composer.json"


def read_manifest(project_root: Pathish, manifest_name: str = MANIFEST_NAME) -> dict[str, Any]:
    """Read and parse the manifest in `project_root`.

    Raises `ManifestNotFoundError` if the file doesn't exist
    and `ManifestParseError` if it isn't a JSON object."""
    manifest = Pathier(project_root) / manifest_name
    if not manifest.is_file():
        raise ManifestNotFoundError(manifest_name, project_root)
    try:
        data = json.loads(manifest.read_text())
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestParseError(manifest, str(e)) from e
    except json.JSONDecodeError as e:
        raise ManifestParseError(manifest, e.msg) from e
    if not isinstance(data, dict):
        raise ManifestParseError(manifest, "top level value is not an object")
    return data


def load_autoload_map(
    project_root: Pathish, manifest_name: str = MANIFEST_NAME
) -> AutoloadMap:
    """Returns the validated `autoload.psr-4` mapping from the manifest in `project_root`."""
    manifest = read_manifest(project_root, manifest_name)
    autoload = manifest.get("autoload")
    if not isinstance(autoload, dict) or "psr-4" not in autoload:
        raise MissingAutoloadError(Pathier(project_root) / manifest_name)
    return AutoloadMap.from_untyped(autoload["psr-4"])
