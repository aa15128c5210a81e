"""Comment-aware scanner for ``#r`` and ``#load`` script directives."""

from __future__ import annotations

import logging
from pathlib import Path

from scriptdeps.constants.directives import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    BYTE_ORDER_MARK,
    DIRECTIVE_PATTERN,
    LINE_COMMENT,
    LOAD_DIRECTIVE,
    PACKAGE_ID_PATTERN,
    PACKAGE_SCHEME,
    SCHEME_VALUE_PATTERN,
    SDK_SCHEME,
    SHEBANG_PREFIX,
    SUPPORTED_SDKS,
)
from scriptdeps.exceptions import ScriptFileNotFoundError, UnsupportedSdkError
from scriptdeps.model import PackageReference, ParsedDeclarations

logger = logging.getLogger(__name__)


def parse(source: Path | str) -> ParsedDeclarations:
    """Parse a script file (``Path``) or in-memory script text (``str``)."""
    if isinstance(source, Path):
        return parse_script_file(source)
    return parse_script_text(source)


def parse_script_file(path: Path) -> ParsedDeclarations:
    """Read *path* as UTF-8 and extract its directives.

    Undecodable bytes are replaced; directives themselves are ASCII.
    """
    logger.debug("Parsing directives from %s", path)
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as exc:
        raise ScriptFileNotFoundError(f"Script file not found: {path}") from exc
    return parse_script_text(text, source=str(path))


def parse_script_text(text: str, *, source: str = "<code>") -> ParsedDeclarations:
    """Extract package, SDK and load declarations from script source text.

    Directives hidden in ``//`` or ``/* */`` comments are not recognized.
    Unknown schemes and malformed values are skipped without raising.
    """
    lines = text.lstrip(BYTE_ORDER_MARK).splitlines()
    if lines and lines[0].startswith(SHEBANG_PREFIX):
        lines = lines[1:]

    references: dict[tuple[str, str], PackageReference] = {}
    loads: list[str] = []
    sdk = ""

    in_block_comment = False
    for line in lines:
        code, in_block_comment = _strip_comments(line, in_block_comment)
        match = DIRECTIVE_PATTERN.match(code)
        if match is None:
            continue

        kind = match.group("kind").lower()
        value = match.group("value")
        if kind == LOAD_DIRECTIVE:
            target = _load_target(value, source)
            if target and target not in loads:
                loads.append(target)
            continue

        scheme_match = SCHEME_VALUE_PATTERN.match(value)
        if scheme_match is None:
            logger.debug("Skipping reference without scheme in %s: %r", source, value)
            continue
        scheme = scheme_match.group("scheme").lower()
        body = scheme_match.group("body")
        if scheme == PACKAGE_SCHEME:
            reference = _package_reference(body, source)
            if reference is not None:
                references.setdefault(reference.key, reference)
        elif scheme == SDK_SCHEME:
            sdk = _sdk_name(body)
        else:
            logger.debug("Skipping reference with unknown scheme %r in %s", scheme, source)

    return ParsedDeclarations(
        package_references=tuple(references.values()),
        sdk=sdk,
        loads=tuple(loads),
    )


def _strip_comments(line: str, in_block_comment: bool) -> tuple[str, bool]:
    """Return the code portion of *line* and the block-comment state after it."""
    kept: list[str] = []
    index = 0
    length = len(line)
    while index < length:
        if in_block_comment:
            end = line.find(BLOCK_COMMENT_CLOSE, index)
            if end == -1:
                return "".join(kept), True
            in_block_comment = False
            index = end + len(BLOCK_COMMENT_CLOSE)
            kept.append(" ")
            continue

        char = line[index]
        if char == '"':
            end = _string_end(line, index)
            kept.append(line[index:end])
            index = end
            continue
        if line.startswith(LINE_COMMENT, index):
            break
        if line.startswith(BLOCK_COMMENT_OPEN, index):
            in_block_comment = True
            index += len(BLOCK_COMMENT_OPEN)
            continue
        kept.append(char)
        index += 1
    return "".join(kept), in_block_comment


def _string_end(line: str, start: int) -> int:
    """Return the index just past the string literal opening at *start*."""
    index = start + 1
    while index < len(line):
        if line[index] == "\\":
            index += 2
            continue
        if line[index] == '"':
            return index + 1
        index += 1
    return len(line)


def _package_reference(body: str, source: str) -> PackageReference | None:
    package_id, _, version = body.partition(",")
    package_id = package_id.strip()
    if not PACKAGE_ID_PATTERN.match(package_id):
        logger.debug("Skipping package reference with invalid id in %s: %r", source, body)
        return None
    return PackageReference(id=package_id, version=version.strip())


def _sdk_name(body: str) -> str:
    name = body.partition(",")[0].strip()
    if name not in SUPPORTED_SDKS:
        raise UnsupportedSdkError(
            f"The sdk '{name}' is not supported. Supported SDKs: {', '.join(sorted(SUPPORTED_SDKS))}"
        )
    return name


def _load_target(value: str, source: str) -> str | None:
    target = value.strip()
    if not target:
        return None
    scheme_match = SCHEME_VALUE_PATTERN.match(target)
    if scheme_match is not None and scheme_match.group("scheme").lower() == PACKAGE_SCHEME:
        logger.debug("Ignoring package load directive in %s: %r", source, target)
        return None
    return target
