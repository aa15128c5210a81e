"""Tests for ``#load`` graph resolution."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from scriptdeps.exceptions import InputError, LoadTargetIsDirectoryError, ScriptFileNotFoundError
from scriptdeps.model import PackageReference
from scriptdeps.project import resolve_graph, resolve_graph_from_code


def test_script_without_directives_resolves_to_root_only(write_script: Callable[..., Path]) -> None:
    root = write_script("main.csx", "var x = 1;\n")

    graph = resolve_graph(root)

    assert graph.files == (root.resolve(),)
    assert graph.declarations.is_empty


def test_cyclic_loads_terminate_and_visit_each_file_once(write_script: Callable[..., Path]) -> None:
    a = write_script("a.csx", '#load "b.csx"\n#r "package:FromA, 1.0.0"\n')
    b = write_script("b.csx", '#load "a.csx"\n#r "package:FromB, 1.0.0"\n')

    graph = resolve_graph(a)

    assert graph.files == (a.resolve(), b.resolve())
    assert {ref.id for ref in graph.declarations.package_references} == {"FromA", "FromB"}


def test_loads_resolve_relative_to_referencing_file(write_script: Callable[..., Path]) -> None:
    root = write_script("main.csx", '#load "lib/helpers.csx"\n')
    helpers = write_script("lib/helpers.csx", '#load "../shared/common.csx"\n')
    common = write_script("shared/common.csx", '#r "package:Common, 2.0.0"\n')

    graph = resolve_graph(root)

    assert graph.files == (root.resolve(), helpers.resolve(), common.resolve())
    assert graph.declarations.package_references == (PackageReference("Common", "2.0.0"),)


def test_alpha_scenario_collapses_to_single_reference(write_script: Callable[..., Path]) -> None:
    root = write_script("main.csx", '#load "other.csx"\n#r "package:Alpha, 1.0.0"\n')
    write_script("other.csx", '#r "package:Alpha, 1.0.0"\n')

    graph = resolve_graph(root)

    assert graph.declarations.package_references == (PackageReference("Alpha", "1.0.0"),)


def test_last_processed_sdk_wins(write_script: Callable[..., Path]) -> None:
    root = write_script("main.csx", '#r "sdk:Microsoft.NET.Sdk.Web"\n#load "child.csx"\n')
    write_script("child.csx", "// no sdk here\n")

    graph = resolve_graph(root)

    assert graph.declarations.sdk == "Microsoft.NET.Sdk.Web"


def test_remote_load_targets_are_recorded_not_fetched(write_script: Callable[..., Path]) -> None:
    root = write_script("main.csx", '#load "https://example.com/remote.csx"\n')

    graph = resolve_graph(root)

    assert graph.files == (root.resolve(),)
    assert graph.remote_loads == ("https://example.com/remote.csx",)


def test_file_uri_load_target_is_followed(write_script: Callable[..., Path]) -> None:
    child = write_script("child.csx", '#r "package:Child, 1.0.0"\n')
    root = write_script("main.csx", f'#load "{child.resolve().as_uri()}"\n')

    graph = resolve_graph(root)

    assert child.resolve() in graph.files


def test_missing_load_target_raises(write_script: Callable[..., Path]) -> None:
    root = write_script("main.csx", '#load "missing.csx"\n')

    with pytest.raises(ScriptFileNotFoundError, match="missing.csx"):
        resolve_graph(root)


def test_directory_load_target_raises(tmp_path: Path, write_script: Callable[..., Path]) -> None:
    (tmp_path / "folder").mkdir()
    root = write_script("main.csx", '#load "folder"\n')

    with pytest.raises(LoadTargetIsDirectoryError):
        resolve_graph(root)


@pytest.mark.parametrize("root_path", ["", "   "], ids=["empty", "blank"])
def test_empty_root_path_raises(root_path: str) -> None:
    with pytest.raises(InputError):
        resolve_graph(root_path)


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(ScriptFileNotFoundError):
        resolve_graph(tmp_path / "nope.csx")


def test_graph_from_code_resolves_against_working_dir(tmp_path: Path, write_script: Callable[..., Path]) -> None:
    lib = write_script("lib.csx", '#r "package:Lib, 3.0.0"\n')

    graph = resolve_graph_from_code('#load "lib.csx"\n#r "package:Inline, 1.0.0"\n', tmp_path)

    assert graph.files == (lib.resolve(),)
    assert graph.root == tmp_path.resolve()
    assert [ref.id for ref in graph.declarations.package_references] == ["Inline", "Lib"]


def test_graph_from_code_requires_existing_directory(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="not a directory"):
        resolve_graph_from_code("var x = 1;", tmp_path / "missing")


def test_root_loads_resolve_beside_root_script(tmp_path: Path) -> None:
    (tmp_path / "other.csx").write_bytes(b'// \xff\n#r "package:Other, 2.0.0"\n')
    root = tmp_path / "main.csx"
    root.write_text('#load "other.csx"\n', encoding="utf-8")

    graph = resolve_graph(root)

    assert graph.files == (root.resolve(), (tmp_path / "other.csx").resolve())
    assert graph.declarations.package_references == (PackageReference("Other", "2.0.0"),)
