"""Tests for license alias resolution."""

import pytest

from depscheck.analysis.aliases import ALIASES, canonicalize, resolve
from depscheck.analysis.normalize import normalize


class TestResolve:
    """Tests for resolve function."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("apache-v2.0", "apache-2.0"),
            ("apl-2.0", "apache-2.0"),
            ("gplv2", "gpl-2.0"),
            ("gpl-v2", "gpl-2.0"),
            ("gpl2", "gpl-2.0"),
            ("gplv3", "gpl-3.0"),
            ("lgpl-v2-1", "lgpl-2.1"),
            ("agpl3", "agpl-3.0"),
            ("bsd-3", "bsd-3-clause"),
            ("mpl2.0", "mpl-2.0"),
            ("gpl-3.0-or-later", "gpl-3.0"),
            ("lgpl-2.1-only", "lgpl-2.1"),
        ],
    )
    def test_known_aliases(self, token: str, expected: str) -> None:
        """Test that known spelling variants resolve to the canonical token."""
        assert resolve(token) == expected

    def test_unmatched_token_unchanged(self) -> None:
        """Test that unknown tokens pass through unchanged."""
        assert resolve("unknown-license") == "unknown-license"
        assert resolve("") == ""

    def test_canonical_token_unchanged(self) -> None:
        """Test that canonical tokens resolve to themselves."""
        assert resolve("apache-2.0") == "apache-2.0"
        assert resolve("mit") == "mit"

    def test_stable(self) -> None:
        """Test resolve(resolve(t)) == resolve(t) for every table entry."""
        for token in list(ALIASES) + list(ALIASES.values()):
            once = resolve(token)
            assert resolve(once) == once, token

    def test_table_keys_and_values_are_normalized(self) -> None:
        """Test that the table is keyed in normalize() format."""
        for key, value in ALIASES.items():
            assert normalize(key) == key
            assert normalize(value) == value

    def test_table_is_read_only(self) -> None:
        """Test that the alias table cannot be modified."""
        with pytest.raises(TypeError):
            ALIASES["mit"] = "gpl-3.0"  # type: ignore[index]


class TestCanonicalize:
    """Tests for canonicalize function."""

    def test_case_and_spacing_variants_collapse(self) -> None:
        """Test that normalization runs before alias lookup."""
        assert canonicalize("GPL v2") == "gpl-2.0"
        assert canonicalize("GPLv2") == "gpl-2.0"
        assert canonicalize("Apache v2.0") == "apache-2.0"
        assert canonicalize("APL 2.0") == "apache-2.0"

    def test_long_names(self) -> None:
        """Test that common long license names resolve."""
        assert canonicalize("Apache License, Version 2.0") == "apache-2.0"
        assert canonicalize("The MIT License") == "mit"

    def test_none(self) -> None:
        """Test that None canonicalizes to the empty token."""
        assert canonicalize(None) == ""
