"""License string normalization for depscheck.

Turns free-text license names into the token format used as keys by the
alias and category tables: lowercase, trimmed, with every run of
separator characters collapsed into a single hyphen.
"""

import re
from typing import Optional

SEPARATOR = "-"

# Whitespace, hyphens and their typographic variants, underscores,
# slashes and commas all count as separators.
_SEPARATOR_RUN = re.compile(r"[\s\-\u2010-\u2015\u2212_/,]+")


def normalize(raw: Optional[str]) -> str:
    """Normalize a raw license string into a lookup token.

    Examples: "Apache 2.0" -> "apache-2.0", "BSD_3 Clause" -> "bsd-3-clause",
    "  All Rights  Reserved " -> "all-rights-reserved".

    Idempotent: ``normalize(normalize(s)) == normalize(s)``.

    Args:
        raw: License text as found in metadata, or None.

    Returns:
        Normalized token; empty string for None or blank input.
    """
    if raw is None:
        return ""
    token = _SEPARATOR_RUN.sub(SEPARATOR, raw.lower())
    return token.strip(SEPARATOR)
