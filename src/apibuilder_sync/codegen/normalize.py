"""Strip version-stamp lines from generated code before comparing it.

Generators embed their own version and the service version in headers and
constants. Those lines change on every generator release even when the code
itself is identical, so they are blanked out before comparison.
"""

from __future__ import annotations

import re

_COMMENT = r"(?:#|//|/\*|\*|--)"
_MODIFIERS = r"(?:[\w.\[\]]+\s+)*"
_TYPE_ASCRIPTION = r"(?:\s*:\s*[\w.\[\]]+)?"

# Evaluated in order against each stripped line; a match blanks the line.
IGNORED_LINE_PATTERNS: list[tuple[str, re.Pattern]] = [
    (
        "service_version",
        re.compile(rf"^{_COMMENT}.*\bservice version:", re.IGNORECASE),
    ),
    (
        "apibuilder_header",
        re.compile(rf"^{_COMMENT}\s*apibuilder(?::|\s+\d)", re.IGNORECASE),
    ),
    (
        "user_agent",
        re.compile(
            rf"^{_MODIFIERS}\w*user_?agent\w*{_TYPE_ASCRIPTION}\s*=\s*[\"']",
            re.IGNORECASE,
        ),
    ),
    (
        "version_constant",
        re.compile(rf"^{_MODIFIERS}(?:\w*_)?(?:VERSION|Version){_TYPE_ASCRIPTION}\s*=\s*[\"']"),
    ),
]


def is_ignored_line(line: str) -> bool:
    """True if the line only carries version metadata."""
    stripped = line.strip()
    return any(pattern.search(stripped) for _, pattern in IGNORED_LINE_PATTERNS)


def normalize(text: str) -> str:
    """Blank out version-stamp lines and trim the result.

    Idempotent: normalize(normalize(t)) == normalize(t).
    """
    lines = ["" if is_ignored_line(line) else line for line in text.splitlines()]
    return "\n".join(lines).strip()
