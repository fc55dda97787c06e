from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from devkit.config.models import DEFAULT_LICENSE_HEADER, ScaffoldConfig
from devkit.scaffold import (
    ExistingFilePolicy,
    FileKind,
    MissingArgumentsError,
    MissingDirectoryArgError,
    ScaffoldFileExistsError,
    ScaffoldIOError,
    Scaffolder,
    TooManyArgumentsError,
    UnrecognizedExtensionError,
    UnsafePathError,
    WriteMode,
    infer_file_kind,
    select_path_argument,
)

HEADER = "/*\nLicensed for tests.\n*/\n\n\n"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    return root.resolve()


@pytest.fixture
def scaffolder(project_root: Path) -> Scaffolder:
    return Scaffolder(ScaffoldConfig(license_header=HEADER), project_root)


def _tree(root: Path) -> list[Path]:
    return sorted(path.relative_to(root) for path in root.rglob("*"))


def test_default_header_wraps_license_notice_in_block_comment() -> None:
    assert DEFAULT_LICENSE_HEADER.startswith("/*\nCopyright 2021 David Karrick\n")
    assert DEFAULT_LICENSE_HEADER.endswith("except according to those terms.\n*/\n\n\n")


@pytest.mark.parametrize(
    ("name", "expected"),
    [("lib", FileKind.NONE), ("lib.rs", FileKind.SOURCE)],
)
def test_infer_file_kind(name: str, expected: FileKind) -> None:
    assert infer_file_kind(name, "rs").unwrap() is expected


def test_infer_file_kind_uses_everything_after_first_dot() -> None:
    result = infer_file_kind("parser.test.rs", "rs")

    assert is_err(result)
    assert result.unwrap_err().extension == "test.rs"


def test_name_without_extension_gets_canonical_extension(scaffolder: Scaffolder, project_root: Path) -> None:
    result = scaffolder.scaffold("parser")

    assert is_ok(result)
    created = result.unwrap()
    assert created.path == Path("src/parser.rs")
    assert created.mode is WriteMode.CREATED
    assert created.directory is None
    assert (project_root / "src" / "parser.rs").read_text(encoding="utf-8") == HEADER


def test_canonical_extension_is_kept_as_is(scaffolder: Scaffolder, project_root: Path) -> None:
    result = scaffolder.scaffold("lexer.rs")

    assert result.unwrap().path == Path("src/lexer.rs")
    assert (project_root / "src" / "lexer.rs").read_text(encoding="utf-8").startswith(HEADER)
    assert not (project_root / "src" / "lexer.rs.rs").exists()


@pytest.mark.parametrize("requested", ["notes.txt", "nested/dir/script.py", "archive.tar.gz"])
def test_other_extensions_are_rejected_without_writes(
    scaffolder: Scaffolder, project_root: Path, requested: str
) -> None:
    before = _tree(project_root)

    result = scaffolder.scaffold(requested)

    assert is_err(result)
    assert isinstance(result.unwrap_err(), UnrecognizedExtensionError)
    assert _tree(project_root) == before


@pytest.mark.parametrize("requested", ["/tmp/evil.rs", "~/evil", "$HOME/evil", "../evil.rs"])
def test_unsafe_paths_are_rejected_without_writes(scaffolder: Scaffolder, project_root: Path, requested: str) -> None:
    before = _tree(project_root.parent)

    result = scaffolder.scaffold(requested)

    assert is_err(result)
    assert isinstance(result.unwrap_err(), UnsafePathError)
    assert _tree(project_root.parent) == before


def test_missing_parent_directories_are_created_and_reported(scaffolder: Scaffolder, project_root: Path) -> None:
    result = scaffolder.scaffold("net/tcp/socket")

    created = result.unwrap()
    assert created.path == Path("src/net/tcp/socket.rs")
    assert created.directory == Path("src/net/tcp")
    assert (project_root / "src" / "net" / "tcp" / "socket.rs").is_file()


def test_directory_mode_creates_index_file(scaffolder: Scaffolder, project_root: Path) -> None:
    result = scaffolder.scaffold("drivers/backlight", directory_mode=True)

    created = result.unwrap()
    assert created.path == Path("src/drivers/backlight/mod.rs")
    assert created.directory == Path("src/drivers/backlight")
    assert (project_root / "src" / "drivers" / "backlight" / "mod.rs").read_text(encoding="utf-8") == HEADER


def test_directory_mode_without_path_fails(scaffolder: Scaffolder) -> None:
    result = scaffolder.scaffold(None, directory_mode=True)

    assert isinstance(result.unwrap_err(), MissingDirectoryArgError)


@pytest.mark.parametrize("requested", [None, ""])
def test_missing_path_fails(scaffolder: Scaffolder, requested: str | None) -> None:
    result = scaffolder.scaffold(requested)

    assert isinstance(result.unwrap_err(), MissingArgumentsError)


@pytest.mark.parametrize(("paths", "expected"), [([], None), (["parser"], "parser")])
def test_select_path_argument_accepts_zero_or_one(paths: list[str], expected: str | None) -> None:
    assert select_path_argument(paths, directory_mode=False).unwrap() == expected
    assert select_path_argument(paths, directory_mode=True).unwrap() == expected


def test_select_path_argument_rejects_extra_paths() -> None:
    directory_error = select_path_argument(["a", "b"], directory_mode=True).unwrap_err()
    file_error = select_path_argument(["a", "b", "c"], directory_mode=False).unwrap_err()

    assert isinstance(directory_error, MissingDirectoryArgError)
    assert isinstance(file_error, TooManyArgumentsError)
    assert file_error.count == 3


def test_existing_file_fails_by_default_and_is_untouched(scaffolder: Scaffolder, project_root: Path) -> None:
    target = project_root / "src" / "main.rs"
    target.write_text("fn main() {}\n", encoding="utf-8")

    result = scaffolder.scaffold("main")

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ScaffoldFileExistsError)
    assert error.path == Path("src/main.rs")
    assert target.read_text(encoding="utf-8") == "fn main() {}\n"


def test_append_policy_duplicates_header_on_second_run(scaffolder: Scaffolder, project_root: Path) -> None:
    scaffolder.scaffold("dup", if_exists=ExistingFilePolicy.APPEND).unwrap()
    result = scaffolder.scaffold("dup", if_exists=ExistingFilePolicy.APPEND)

    assert result.unwrap().mode is WriteMode.APPENDED
    assert (project_root / "src" / "dup.rs").read_text(encoding="utf-8") == HEADER * 2


def test_overwrite_policy_leaves_single_header(scaffolder: Scaffolder, project_root: Path) -> None:
    target = project_root / "src" / "lib.rs"
    target.write_text("pub mod old;\n", encoding="utf-8")

    result = scaffolder.scaffold("lib.rs", if_exists=ExistingFilePolicy.OVERWRITE)

    assert result.unwrap().mode is WriteMode.OVERWRITTEN
    assert target.read_text(encoding="utf-8") == HEADER


def test_target_that_is_a_directory_fails(scaffolder: Scaffolder, project_root: Path) -> None:
    (project_root / "src" / "taken.rs").mkdir()

    result = scaffolder.scaffold("taken.rs")

    assert isinstance(result.unwrap_err(), ScaffoldIOError)


def test_configured_extension_and_index_are_used(project_root: Path) -> None:
    config = ScaffoldConfig(source_dir="lib", extension="py", index_filename="__init__.py", license_header="# header\n")
    scaffolder = Scaffolder(config, project_root)

    module = scaffolder.scaffold("tools").unwrap()
    package = scaffolder.scaffold("pkg", directory_mode=True).unwrap()

    assert module.path == Path("lib/tools.py")
    assert package.path == Path("lib/pkg/__init__.py")
    assert (project_root / "lib" / "pkg" / "__init__.py").read_text(encoding="utf-8") == "# header\n"
