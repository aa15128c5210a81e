"""Parsers for script source text."""

from __future__ import annotations

from .directives import parse, parse_script_file, parse_script_text

__all__ = ["parse", "parse_script_file", "parse_script_text"]
