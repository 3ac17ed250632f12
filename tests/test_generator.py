import json
import re

import pytest
from pathier import Pathier

import psr4gen
from psr4gen import HandlerGenerator

psr4 = {"App\\": "src/App/", "Foo\\": "src/Foo/"}


@pytest.fixture
def project(tmp_path) -> Pathier:
    return Pathier(tmp_path)


def write_manifest(project: Pathier, psr4: dict[str, str]):
    (project / "composer.json").write_text(
        json.dumps({"name": "some/project", "autoload": {"psr-4": psr4}})
    )


def assert_handler(content: str, namespace: str, class_name: str):
    assert re.match(r"<\?php", content)
    assert re.search(rf"^namespace {re.escape(namespace)};$", content, re.M)
    assert re.search(
        rf"^class {class_name} implements RequestHandlerInterface$", content, re.M
    )
    assert re.search(
        r"^\s{4}public function handle\(ServerRequestInterface \$request\) : ResponseInterface$",
        content,
        re.M,
    )


def test__render():
    target = psr4gen.TargetClass.parse("Foo\\Bar\\BazHandler")
    content = psr4gen.render("namespace %namespace%; class %class% {} // %class%", target)
    assert content == "namespace Foo\\Bar; class BazHandler {} // BazHandler"


def test__render_without_placeholders():
    target = psr4gen.TargetClass.parse("Foo\\BarHandler")
    assert psr4gen.render("class Foo\\Bar\\BazHandler", target) == (
        "class Foo\\Bar\\BazHandler"
    )


def test__create_in_namespace_root(project: Pathier):
    write_manifest(project, psr4)
    path = HandlerGenerator(project_root=project).process("Foo\\BarHandler")
    assert path == project.absolute() / "src" / "Foo" / "BarHandler.php"
    assert path.is_absolute()
    assert_handler(path.read_text(), "Foo", "BarHandler")


def test__create_in_sub_namespace(project: Pathier):
    write_manifest(project, psr4)
    path = HandlerGenerator(project_root=project).process("Foo\\Bar\\BazHandler")
    assert path == project.absolute() / "src" / "Foo" / "Bar" / "BazHandler.php"
    assert_handler(path.read_text(), "Foo\\Bar", "BazHandler")


def test__create_in_module_namespace_root(project: Pathier):
    write_manifest(project, {"App\\": "src/App/", "Foo\\": "src/Foo/src/"})
    (project / "src" / "Foo" / "src").mkdir(parents=True, exist_ok=True)
    path = HandlerGenerator(project_root=project).process("Foo\\BarHandler")
    assert path == project.absolute() / "src" / "Foo" / "src" / "BarHandler.php"
    assert_handler(path.read_text(), "Foo", "BarHandler")


def test__create_in_module_sub_namespace(project: Pathier):
    write_manifest(project, {"App\\": "src/App/", "Foo\\": "src/Foo/src/"})
    path = HandlerGenerator(project_root=project).process("Foo\\Bar\\BazHandler")
    assert path == project.absolute() / "src" / "Foo" / "src" / "Bar" / "BazHandler.php"
    assert_handler(path.read_text(), "Foo\\Bar", "BazHandler")


def test__create_under_longest_prefix(project: Pathier):
    write_manifest(project, {"Foo\\": "src/Foo/", "Foo\\Bar\\": "modules/bar/src/"})
    path = HandlerGenerator(project_root=project).process("Foo\\Bar\\BazHandler")
    assert path == project.absolute() / "modules" / "bar" / "src" / "BazHandler.php"
    assert_handler(path.read_text(), "Foo\\Bar", "BazHandler")


def test__skeleton_override(project: Pathier):
    write_manifest(project, psr4)
    generator = HandlerGenerator("class Foo\\Bar\\BazHandler", project)
    path = generator.process("Foo\\Bar\\BazHandler")
    assert path == project.absolute() / "src" / "Foo" / "Bar" / "BazHandler.php"
    assert "class Foo\\Bar\\BazHandler" in path.read_text()


def test__custom_extension(project: Pathier):
    write_manifest(project, psr4)
    path = HandlerGenerator(project_root=project, extension=".inc").process(
        "App\\PingHandler"
    )
    assert path.name == "PingHandler.inc"
    assert path.exists()


def test__defaults_to_cwd(project: Pathier, monkeypatch: pytest.MonkeyPatch):
    write_manifest(project, psr4)
    monkeypatch.chdir(project)
    path = HandlerGenerator().process("App\\PingHandler")
    assert path.resolve() == (project / "src" / "App" / "PingHandler.php").resolve()


def test__class_already_exists(project: Pathier):
    write_manifest(project, {"App\\": "src/App/"})
    existing = project / "src" / "App" / "Foo" / "BarHandler.php"
    existing.parent.mkdir(parents=True, exist_ok=True)
    existing.write_text("App\\Foo\\BarHandler")
    with pytest.raises(
        psr4gen.ClassAlreadyExistsError, match="Class BarHandler already exists"
    ) as e:
        HandlerGenerator(project_root=project).process("App\\Foo\\BarHandler")
    assert e.value.code == "class_already_exists"
    assert existing.read_text() == "App\\Foo\\BarHandler"


def test__write_never_overwrites(project: Pathier):
    write_manifest(project, {"App\\": "src/App/"})
    generator = HandlerGenerator(project_root=project)
    resolved = generator.get_class_path("App\\BarHandler")
    generator.ensure_directory(resolved.directory)
    resolved.path.write_text("original")
    with pytest.raises(psr4gen.ClassAlreadyExistsError):
        generator.write(resolved)
    assert resolved.path.read_text() == "original"


def test__unable_to_create_sub_path(project: Pathier):
    write_manifest(project, {"App\\": "src/App/", "Foo\\": "src/Foo/src/"})
    blocker = project / "src" / "Foo" / "src"
    blocker.parent.mkdir(parents=True, exist_ok=True)
    blocker.write_text("not a directory")
    with pytest.raises(
        psr4gen.DirectoryCreationError, match="Unable to create the directory"
    ) as e:
        HandlerGenerator(project_root=project).process("Foo\\Bar\\BazHandler")
    assert e.value.code == "directory_creation"


def test__target_directory_is_a_file(project: Pathier):
    write_manifest(project, psr4)
    (project / "src").mkdir(parents=True, exist_ok=True)
    (project / "src" / "Foo").write_text("not a directory")
    with pytest.raises(psr4gen.DirectoryCreationError):
        HandlerGenerator(project_root=project).process("Foo\\BarHandler")


def test__get_class_path_creates_nothing(project: Pathier):
    write_manifest(project, psr4)
    resolved = HandlerGenerator(project_root=project).get_class_path(
        "Foo\\Bar\\BazHandler"
    )
    assert resolved.fqcn == "Foo\\Bar\\BazHandler"
    assert resolved.path == project.absolute() / "src" / "Foo" / "Bar" / "BazHandler.php"
    assert not (project / "src").exists()


def test__failures_are_generation_errors(project: Pathier):
    generator = HandlerGenerator(project_root=project)
    with pytest.raises(psr4gen.GenerationError) as e:
        generator.process("Foo\\BarHandler")
    assert e.value.code == "manifest_not_found"
    write_manifest(project, psr4)
    with pytest.raises(psr4gen.GenerationError) as e:
        generator.process("Bar\\BazHandler")
    assert e.value.code == "no_matching_namespace"
    with pytest.raises(psr4gen.GenerationError) as e:
        generator.process("Foo\\")
    assert e.value.code == "invalid_class_name"
    assert not (project / "src").exists()


def test__class_name_too_long_for_filesystem(project: Pathier):
    write_manifest(project, psr4)
    with pytest.raises(psr4gen.FileWriteError, match="Unable to write") as e:
        HandlerGenerator(project_root=project).process("App\\" + "A" * 300)
    assert e.value.code == "file_write"
    assert isinstance(e.value.__cause__, OSError)


def test__write_failure(project: Pathier):
    write_manifest(project, psr4)
    generator = HandlerGenerator(project_root=project)
    resolved = generator.get_class_path("App\\" + "A" * 300)
    generator.ensure_directory(resolved.directory)
    with pytest.raises(psr4gen.FileWriteError) as e:
        generator.write(resolved)
    assert e.value.code == "file_write"
    assert not isinstance(e.value.__cause__, FileExistsError)
