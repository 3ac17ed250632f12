from pathier import Pathier, Pathish

from .errors import AmbiguousNamespaceError, NoMatchingNamespaceError
from .models import NAMESPACE_SEPARATOR, AutoloadMap, ResolvedTarget, TargetClass


def match_prefix(target: TargetClass, autoload: AutoloadMap) -> tuple[str, str]:
    """Returns the most specific `(prefix, base_dir)` pair in `autoload` that `target` lives under.

    Prefixes only match on whole namespace segments,
    i.e. `Foo\\` matches `Foo\\Bar\\Baz` but not `FooBar\\Baz`.
    The empty prefix matches everything.

    Keys that only differ by a leading separator compete as equals.
    If they map to the same directory the first in sorted order is used,
    otherwise `AmbiguousNamespaceError` is raised."""
    namespace = target.namespace + NAMESPACE_SEPARATOR if target.namespace else ""
    candidates = [
        (prefix, base_dir)
        for prefix, base_dir in autoload.items()
        if namespace.startswith(AutoloadMap.normalize(prefix))
    ]
    if not candidates:
        raise NoMatchingNamespaceError(target.fqcn)
    longest = max(len(AutoloadMap.normalize(prefix)) for prefix, _ in candidates)
    best = sorted(
        (prefix, base_dir)
        for prefix, base_dir in candidates
        if len(AutoloadMap.normalize(prefix)) == longest
    )
    if len({Pathier(base_dir) for _, base_dir in best}) > 1:
        raise AmbiguousNamespaceError(target.fqcn, [prefix for prefix, _ in best])
    return best[0]


def resolve(
    target: TargetClass,
    autoload: AutoloadMap,
    project_root: Pathish,
    extension: str = ".php",
) -> ResolvedTarget:
    """Compute where the class file for `target` belongs.

    The path is `project_root / base_dir / <namespace after the prefix> / <class name><extension>`."""
    prefix, base_dir = match_prefix(target, autoload)
    remainder = target.namespace[len(AutoloadMap.normalize(prefix)) :]
    subpath = [segment for segment in remainder.split(NAMESPACE_SEPARATOR) if segment]
    directory = Pathier(project_root).absolute() / base_dir
    for segment in subpath:
        directory = directory / segment
    return ResolvedTarget(
        target.namespace, target.name, directory / f"{target.name}{extension}"
    )
