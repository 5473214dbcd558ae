"""
Tests for comparison key derivation per search style.
"""
import pytest

from dupfinder.core.keys import build_key_deriver, derive_by_size
from dupfinder.core.models import SearchStyle


class TestBuildKeyDeriver:

    def test_size_key_is_decimal_size_and_never_hashes(self):
        def hasher(path):
            raise AssertionError("size keys must not hash")

        derive = build_key_deriver(SearchStyle.BY_SIZE, hasher)

        assert derive is derive_by_size
        assert derive("/a", 4) == "4"
        assert derive("/b", 0) == "0"

    def test_content_key_comes_from_the_hasher(self):
        derive = build_key_deriver(SearchStyle.BY_CONTENTS, lambda path: f"digest:{path}")
        assert derive("/a", 4) == "digest:/a"

    def test_unknown_style_is_rejected(self):
        with pytest.raises(ValueError, match="Unsupported search style"):
            build_key_deriver("name", lambda path: path)
