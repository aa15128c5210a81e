"""Constants for script directive scanning."""

from __future__ import annotations

import re

PACKAGE_SCHEME: str = "package"
SDK_SCHEME: str = "sdk"

SHEBANG_PREFIX: str = "#!"
BYTE_ORDER_MARK: str = "\ufeff"

LINE_COMMENT: str = "//"
BLOCK_COMMENT_OPEN: str = "/*"
BLOCK_COMMENT_CLOSE: str = "*/"

LOAD_DIRECTIVE: str = "load"

# ``#r "..."`` / ``#load "..."`` with optional whitespace after ``#``.
DIRECTIVE_PATTERN: re.Pattern[str] = re.compile(
    r'^\s*#\s*(?P<kind>r|load)\s*"(?P<value>[^"]*)"\s*;?\s*$',
    re.IGNORECASE,
)
SCHEME_VALUE_PATTERN: re.Pattern[str] = re.compile(r"^\s*(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*)\s*:\s*(?P<body>.*?)\s*$")
PACKAGE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")

# URI schemes shorter than this are drive letters (``C:\scripts\a.csx``).
MIN_URI_SCHEME_LENGTH: int = 2
FILE_URI_SCHEME: str = "file"

DEFAULT_PROJECT_SDK: str = "Microsoft.NET.Sdk"
WEB_SDK: str = "Microsoft.NET.Sdk.Web"

# Closed allow-list: any other ``sdk:`` value is rejected.
SUPPORTED_SDKS: frozenset[str] = frozenset({WEB_SDK})
