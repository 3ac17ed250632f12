from pathier import Pathier, Pathish

from .errors import (
    ClassAlreadyExistsError,
    DirectoryCreationError,
    FileWriteError,
)
from .manifest import MANIFEST_NAME, load_autoload_map
from .models import ResolvedTarget, TargetClass
from .resolver import resolve

root = Pathier(__file__).parent

CLASS_SKELETON = (root / "templates" / "handler.php").read_text()

NAMESPACE_PLACEHOLDER = "%namespace%"
CLASS_PLACEHOLDER = "%class%"


def render(skeleton: str, target: ResolvedTarget | TargetClass) -> str:
    """Substitute the namespace and class name placeholders in `skeleton`."""
    if isinstance(target, ResolvedTarget):
        namespace, class_name = target.namespace, target.class_name
    else:
        namespace, class_name = target.namespace, target.name
    return skeleton.replace(NAMESPACE_PLACEHOLDER, namespace).replace(
        CLASS_PLACEHOLDER, class_name
    )


class HandlerGenerator:
    """Create new class files in the directory a project's PSR-4 autoloaders map them to.

    e.g. with a `composer.json` mapping `"Foo\\\\": "src/Foo/"`
    >>> HandlerGenerator(project_root="my_project").process("Foo\\Bar\\BazHandler")
    >>> Pathier("my_project/src/Foo/Bar/BazHandler.php")"""

    def __init__(
        self,
        skeleton: str = CLASS_SKELETON,
        project_root: Pathish | None = None,
        extension: str = ".php",
        manifest_name: str = MANIFEST_NAME,
    ):
        """
        :params:
        * `skeleton`: The template to render new classes from.
        `%namespace%` and `%class%` are replaced with the class's namespace and name.
        * `project_root`: The directory containing the manifest. Defaults to the current working directory.
        * `extension`: Suffix for created class files.
        * `manifest_name`: The manifest file name within `project_root`.
        """
        self.skeleton = skeleton
        self.project_root = Pathier(project_root) if project_root else Pathier.cwd()
        self.extension = extension
        self.manifest_name = manifest_name

    def get_class_path(self, fqcn: str) -> ResolvedTarget:
        """Resolve where `fqcn` would be written without creating anything."""
        target = TargetClass.parse(fqcn)
        autoload = load_autoload_map(self.project_root, self.manifest_name)
        return resolve(target, autoload, self.project_root, self.extension)

    @staticmethod
    def ensure_directory(directory: Pathier):
        """Create `directory` and any missing parents."""
        try:
            directory.mkdir(mode=0o775, parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(directory) from e
        if not directory.is_dir():
            raise DirectoryCreationError(directory)

    @staticmethod
    def check_collision(resolved: ResolvedTarget):
        """Raise `ClassAlreadyExistsError` if the class file is already there."""
        try:
            exists = resolved.path.exists()
        except OSError as e:
            raise FileWriteError(resolved.path) from e
        if exists:
            raise ClassAlreadyExistsError(resolved.class_name, resolved.path)

    def write(self, resolved: ResolvedTarget) -> Pathier:
        """Render `self.skeleton` for `resolved` and write it, never replacing an existing file."""
        content = render(self.skeleton, resolved)
        try:
            with resolved.path.open("x", encoding="utf-8") as file:
                file.write(content)
        except FileExistsError as e:
            raise ClassAlreadyExistsError(resolved.class_name, resolved.path) from e
        except OSError as e:
            raise FileWriteError(resolved.path) from e
        return resolved.path

    def process(self, fqcn: str) -> Pathier:
        """Create the class file for `fqcn` and return its path.

        1. load the manifest's PSR-4 autoloaders
        2. match the most specific namespace prefix
        3. create the target directory
        4. make sure the class doesn't exist yet
        5. render and write the skeleton"""
        resolved = self.get_class_path(fqcn)
        self.ensure_directory(resolved.directory)
        self.check_collision(resolved)
        return self.write(resolved)
