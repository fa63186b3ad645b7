"""License alias resolution for depscheck.

Maps known spelling variants of a normalized license token (for example
"apache-v2.0", "gplv2", "apl-2.0") to one canonical token. Keys and values
are in the format produced by :func:`depscheck.analysis.normalize.normalize`.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from depscheck.analysis.normalize import normalize

_ALIASES: dict[str, str] = {
    # Apache 2.0
    "apache-v2.0": "apache-2.0",
    "apache-v2-0": "apache-2.0",
    "apache-v2": "apache-2.0",
    "apache2": "apache-2.0",
    "apache2.0": "apache-2.0",
    "apache-2": "apache-2.0",
    "apache-license-2.0": "apache-2.0",
    "apache-license-version-2.0": "apache-2.0",
    "apache-software-license": "apache-2.0",
    "apache-software-license-2.0": "apache-2.0",
    # APL is a common misspelling of Apache
    "apl-2.0": "apache-2.0",
    "apl-v2.0": "apache-2.0",
    "apl-v2-0": "apache-2.0",
    "apl-v2": "apache-2.0",
    "apl2": "apache-2.0",
    "apl2.0": "apache-2.0",
    # MIT
    "mit-license": "mit",
    "the-mit-license": "mit",
    "expat": "mit",
    # BSD
    "bsdv2": "bsd-2-clause",
    "bsd-2": "bsd-2-clause",
    "simplified-bsd": "bsd-2-clause",
    "bsdv3": "bsd-3-clause",
    "bsd-3": "bsd-3-clause",
    "new-bsd": "bsd-3-clause",
    "modified-bsd": "bsd-3-clause",
    "bsdv4": "bsd-4-clause",
    "bsd-4": "bsd-4-clause",
    # ISC
    "isc-license": "isc",
    "iscl": "isc",
    # Unlicense (not to be confused with the proprietary "Unlicensed")
    "the-unlicense": "unlicense",
    # GPL-2.0
    "gplv2": "gpl-2.0",
    "gpl-v2": "gpl-2.0",
    "gpl-v2.0": "gpl-2.0",
    "gpl-v2-0": "gpl-2.0",
    "gpl2": "gpl-2.0",
    "gpl2.0": "gpl-2.0",
    "gpl-2": "gpl-2.0",
    "gpl-2.0-only": "gpl-2.0",
    "gpl-2.0-or-later": "gpl-2.0",
    "gpl-2.0+": "gpl-2.0",
    "gplv2+": "gpl-2.0",
    # GPL-3.0
    "gplv3": "gpl-3.0",
    "gpl-v3": "gpl-3.0",
    "gpl-v3.0": "gpl-3.0",
    "gpl-v3-0": "gpl-3.0",
    "gpl3": "gpl-3.0",
    "gpl3.0": "gpl-3.0",
    "gpl-3": "gpl-3.0",
    "gpl-3.0-only": "gpl-3.0",
    "gpl-3.0-or-later": "gpl-3.0",
    "gpl-3.0+": "gpl-3.0",
    "gplv3+": "gpl-3.0",
    # LGPL-2.0
    "lgplv2": "lgpl-2.0",
    "lgpl-v2": "lgpl-2.0",
    "lgpl2": "lgpl-2.0",
    "lgpl-2.0-only": "lgpl-2.0",
    "lgpl-2.0-or-later": "lgpl-2.0",
    "lgpl-2.0+": "lgpl-2.0",
    # LGPL-2.1
    "lgplv2.1": "lgpl-2.1",
    "lgpl-v2.1": "lgpl-2.1",
    "lgpl-v2-1": "lgpl-2.1",
    "lgpl2.1": "lgpl-2.1",
    "lgpl-2.1-only": "lgpl-2.1",
    "lgpl-2.1-or-later": "lgpl-2.1",
    "lgpl-2.1+": "lgpl-2.1",
    # LGPL-3.0
    "lgplv3": "lgpl-3.0",
    "lgpl-v3": "lgpl-3.0",
    "lgpl-v3.0": "lgpl-3.0",
    "lgpl-v3-0": "lgpl-3.0",
    "lgpl3": "lgpl-3.0",
    "lgpl3.0": "lgpl-3.0",
    "lgpl-3": "lgpl-3.0",
    "lgpl-3.0-only": "lgpl-3.0",
    "lgpl-3.0-or-later": "lgpl-3.0",
    "lgpl-3.0+": "lgpl-3.0",
    # AGPL-3.0
    "agplv3": "agpl-3.0",
    "agpl-v3": "agpl-3.0",
    "agpl-v3.0": "agpl-3.0",
    "agpl-v3-0": "agpl-3.0",
    "agpl3": "agpl-3.0",
    "agpl3.0": "agpl-3.0",
    "agpl-3": "agpl-3.0",
    "agpl-3.0-only": "agpl-3.0",
    "agpl-3.0-or-later": "agpl-3.0",
    "agpl-3.0+": "agpl-3.0",
    # MPL-2.0
    "mplv2": "mpl-2.0",
    "mpl-v2": "mpl-2.0",
    "mpl-v2.0": "mpl-2.0",
    "mpl-v2-0": "mpl-2.0",
    "mpl2": "mpl-2.0",
    "mpl2.0": "mpl-2.0",
    "mpl-2": "mpl-2.0",
    # EPL-2.0
    "eplv2": "epl-2.0",
    "epl-v2": "epl-2.0",
    "epl2": "epl-2.0",
    "epl-2": "epl-2.0",
    # Proprietary
    "all-rights-reserved.": "all-rights-reserved",
    "commercial": "proprietary",
}

ALIASES: Mapping[str, str] = MappingProxyType(_ALIASES)


def resolve(token: str) -> str:
    """Resolve a normalized license token to its canonical form.

    Unmatched tokens are returned unchanged; they fall through to
    classification as unknown.

    Args:
        token: Token produced by ``normalize``.

    Returns:
        Canonical token.
    """
    return ALIASES.get(token, token)


def canonicalize(raw: Optional[str]) -> str:
    """Normalize and alias-resolve a raw license string."""
    return resolve(normalize(raw))
