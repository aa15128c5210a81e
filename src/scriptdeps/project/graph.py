"""Transitive ``#load`` resolution into a script graph."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from urllib.parse import unquote, urlparse

from scriptdeps.constants.directives import FILE_URI_SCHEME, MIN_URI_SCHEME_LENGTH
from scriptdeps.exceptions import InputError, LoadTargetIsDirectoryError, ScriptFileNotFoundError
from scriptdeps.model import PackageReference, ParsedDeclarations, ScriptGraph
from scriptdeps.parsers import parse_script_file, parse_script_text

logger = logging.getLogger(__name__)


def resolve_graph(root_path: Path | str) -> ScriptGraph:
    """Follow ``#load`` directives from *root_path* and merge all declarations.

    Each file is parsed once, keyed by its resolved absolute path, so cyclic
    loads terminate. Declarations merge in processing order (last SDK wins).
    """
    if isinstance(root_path, str) and not root_path.strip():
        raise InputError("Script root path must not be empty")
    root = _check_file(Path(root_path).expanduser().resolve())
    declarations = parse_script_file(root)
    return _walk(root, root.parent, declarations)


def resolve_graph_from_code(code: str, working_dir: Path) -> ScriptGraph:
    """Resolve the graph for in-memory *code* whose loads are relative to *working_dir*.

    The returned ``files`` only contain loaded files; the code itself has no path.
    """
    base = working_dir.expanduser().resolve()
    if not base.is_dir():
        raise InputError(f"Working directory does not exist or is not a directory: {base}")
    declarations = parse_script_text(code)
    return _walk(None, base, declarations)


def merge_declarations(parsed: Iterable[ParsedDeclarations]) -> ParsedDeclarations:
    """Union declarations in order; duplicates collapse and the last SDK wins."""
    references: dict[tuple[str, str], PackageReference] = {}
    loads: dict[str, None] = {}
    sdk = ""
    for declarations in parsed:
        for reference in declarations.package_references:
            references.setdefault(reference.key, reference)
        for target in declarations.loads:
            loads.setdefault(target, None)
        if declarations.sdk:
            sdk = declarations.sdk
    return ParsedDeclarations(package_references=tuple(references.values()), sdk=sdk, loads=tuple(loads))


def _walk(root: Path | None, base_dir: Path, root_declarations: ParsedDeclarations) -> ScriptGraph:
    visited: dict[Path, ParsedDeclarations] = {}
    remote_loads: list[str] = []
    if root is not None:
        visited[root] = root_declarations

    # Depth-first, in directive order: push children reversed.
    stack: list[tuple[str, Path]] = [(target, base_dir) for target in reversed(root_declarations.loads)]
    while stack:
        target, referencing_dir = stack.pop()
        resolved = _resolve_load_target(target, referencing_dir)
        if isinstance(resolved, str):
            if resolved not in remote_loads:
                logger.debug("Recording remote load target without fetching: %s", resolved)
                remote_loads.append(resolved)
            continue
        if resolved in visited:
            continue
        declarations = parse_script_file(resolved)
        visited[resolved] = declarations
        stack.extend((child, resolved.parent) for child in reversed(declarations.loads))

    processed = list(visited.values()) if root is not None else [root_declarations, *visited.values()]
    merged = merge_declarations(processed)
    return ScriptGraph(
        root=root if root is not None else base_dir,
        files=tuple(visited),
        declarations=merged,
        remote_loads=tuple(remote_loads),
    )


def _resolve_load_target(target: str, referencing_dir: Path) -> Path | str:
    """Return an absolute, existing file path, or the URI itself for remote targets."""
    parsed = urlparse(target)
    if len(parsed.scheme) >= MIN_URI_SCHEME_LENGTH:
        if parsed.scheme.lower() != FILE_URI_SCHEME:
            return target
        candidate = Path(unquote(parsed.path))
    else:
        candidate = Path(target).expanduser()
        if not candidate.is_absolute():
            candidate = referencing_dir / candidate
    return _check_file(candidate.resolve())


def _check_file(path: Path) -> Path:
    if path.is_dir():
        raise LoadTargetIsDirectoryError(f"Load target is a directory, not a script file: {path}")
    if not path.exists():
        raise ScriptFileNotFoundError(f"Script file not found: {path}")
    return path
