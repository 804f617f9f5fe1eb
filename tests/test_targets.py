"""Tests for target path resolution."""

from pathlib import Path

from apibuilder_sync.codegen.models import GeneratedFile
from apibuilder_sync.codegen.targets import base_path, is_directory_target, resolve_target


class TestBasePath:
    def test_dir_appended_when_creating_directories(self):
        f = GeneratedFile(name="User.scala", dir="models/user")
        assert base_path("gen", f, True) == Path("gen/models/user")

    def test_dir_ignored_without_create_directories(self):
        f = GeneratedFile(name="User.scala", dir="models/user")
        assert base_path("gen", f, False) == Path("gen")

    def test_empty_dir(self):
        f = GeneratedFile(name="User.scala", dir="")
        assert base_path("gen", f, True) == Path("gen")


class TestResolveTarget:
    def test_existing_file_target_is_overwritten_in_place(self, workspace):
        (workspace / "api" / "conf").mkdir(parents=True)
        (workspace / "api" / "conf" / "routes").write_text("GET / old")
        f = GeneratedFile(name="routes", dir="")

        resolved = resolve_target("api/conf/routes", f, create_directories=False)

        assert resolved.path == Path("api/conf/routes")
        assert resolved.is_directory is False

    def test_path_ending_in_file_name_is_file_target(self, workspace):
        f = GeneratedFile(name="routes", dir="")
        resolved = resolve_target("api/conf/routes", f)
        assert resolved.path == Path("api/conf/routes")
        assert resolved.is_directory is False
        assert not (workspace / "api" / "conf" / "routes").exists()

    def test_directory_target_is_created(self, workspace):
        f = GeneratedFile(name="Foo.scala", dir="")

        resolved = resolve_target("api/app/generated", f, create_directories=True)

        assert resolved.path == Path("api/app/generated/Foo.scala")
        assert resolved.is_directory is True
        assert (workspace / "api" / "app" / "generated").is_dir()

    def test_existing_directory_is_reused(self, workspace):
        (workspace / "generated").mkdir()
        (workspace / "generated" / "Old.scala").write_text("old")
        f = GeneratedFile(name="Foo.scala")

        resolved = resolve_target("generated", f)

        assert resolved.path == Path("generated/Foo.scala")
        assert (workspace / "generated" / "Old.scala").read_text() == "old"

    def test_file_dir_creates_nested_directories(self, workspace):
        f = GeneratedFile(name="User.scala", dir="acme/models")

        resolved = resolve_target("gen", f, create_directories=True)

        assert resolved.path == Path("gen/acme/models/User.scala")
        assert (workspace / "gen" / "acme" / "models").is_dir()

    def test_explicit_file_kind(self, workspace):
        f = GeneratedFile(name="Constants.ts")
        resolved = resolve_target("web/src/constants.ts", f, kind="file")
        assert resolved.path == Path("web/src/constants.ts")
        assert resolved.is_directory is False
        assert not (workspace / "web").exists()

    def test_explicit_directory_kind_overrides_name_match(self, workspace):
        f = GeneratedFile(name="routes")
        resolved = resolve_target("conf/routes", f, kind="directory")
        assert resolved.path == Path("conf/routes/routes")
        assert resolved.is_directory is True
        assert (workspace / "conf" / "routes").is_dir()

    def test_conf_root_with_existing_routes_file(self, workspace):
        (workspace / "api" / "conf").mkdir(parents=True)
        (workspace / "api" / "conf" / "routes").write_text("GET / old")
        f = GeneratedFile(name="routes", dir="")

        resolved = resolve_target("api/conf", f, create_directories=False)

        assert resolved.path == Path("api/conf/routes")
        assert (workspace / "api" / "conf" / "routes").read_text() == "GET / old"


class TestIsDirectoryTarget:
    def test_plain_file_at_base(self, tmp_path):
        (tmp_path / "routes.txt").write_text("")
        assert not is_directory_target(tmp_path / "routes.txt", GeneratedFile(name="routes"))

    def test_missing_base(self, tmp_path):
        assert is_directory_target(tmp_path / "generated", GeneratedFile(name="A.scala"))
