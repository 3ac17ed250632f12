class GenerationError(RuntimeError):
    """Base class for every failure while generating a class file.

    `code` identifies the failure kind so callers can branch on it without
    matching on the message."""

    code: str = "generation"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidClassNameError(GenerationError):
    code = "invalid_class_name"

    def __init__(self, fqcn: str, reason: str):
        super().__init__(f"Invalid class name `{fqcn}`: {reason}.")


class ManifestNotFoundError(GenerationError):
    code = "manifest_not_found"

    def __init__(self, manifest_name: str, project_root: object):
        super().__init__(
            f"Unable to find a {manifest_name} in the project root `{project_root}`."
        )


class ManifestParseError(GenerationError):
    code = "manifest_parse"

    def __init__(self, manifest: object, reason: str):
        super().__init__(f"Unable to parse `{manifest}`: {reason}.")


class MissingAutoloadError(GenerationError):
    code = "missing_autoload"

    def __init__(self, manifest: object):
        super().__init__(f"`{manifest}` does not define any PSR-4 autoloaders.")


class MalformedAutoloadError(GenerationError):
    code = "malformed_autoload"

    def __init__(self, reason: str):
        super().__init__(f"Malformed PSR-4 autoloaders: {reason}.")


class NoMatchingNamespaceError(GenerationError):
    code = "no_matching_namespace"

    def __init__(self, fqcn: str):
        super().__init__(
            f"Unable to match `{fqcn}` to any autoloadable PSR-4 namespace."
        )


class AmbiguousNamespaceError(GenerationError):
    code = "ambiguous_namespace"

    def __init__(self, fqcn: str, prefixes: list[str]):
        listing = ", ".join(f"`{prefix}`" for prefix in prefixes)
        super().__init__(
            f"`{fqcn}` matches several PSR-4 namespaces mapped to different directories: {listing}."
        )


class DirectoryCreationError(GenerationError):
    code = "directory_creation"

    def __init__(self, directory: object):
        super().__init__(f"Unable to create the directory `{directory}`.")


class ClassAlreadyExistsError(GenerationError):
    code = "class_already_exists"

    def __init__(self, class_name: str, path: object):
        super().__init__(f"Class {class_name} already exists at `{path}`.")


class FileWriteError(GenerationError):
    code = "file_write"

    def __init__(self, path: object):
        super().__init__(f"Unable to write the class file `{path}`.")
