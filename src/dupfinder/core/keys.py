"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/keys.py
Comparison key derivation, one function per search style.
"""

from functools import partial
from typing import Callable, Dict

from dupfinder.core.interfaces import KeyDeriver
from dupfinder.core.models import SearchStyle


def derive_by_size(path: str, size: int) -> str:
    """Decimal byte size from filesystem metadata; the file is not read."""
    return str(size)


def derive_by_contents(path: str, size: int, hasher: Callable[[str], str]) -> str:
    """Hex digest of the whole file. Read errors propagate to the caller."""
    return hasher(path)


# Only content derivation needs the hasher
KEY_DERIVERS: Dict[SearchStyle, Callable[[Callable[[str], str]], KeyDeriver]] = {
    SearchStyle.BY_SIZE: lambda hasher: derive_by_size,
    SearchStyle.BY_CONTENTS: lambda hasher: partial(derive_by_contents, hasher=hasher),
}


def build_key_deriver(search_style: SearchStyle, hasher: Callable[[str], str]) -> KeyDeriver:
    """Resolve the deriver for a search style once, before the walk starts."""
    try:
        make_deriver = KEY_DERIVERS[search_style]
    except KeyError:
        raise ValueError(f"Unsupported search style: {search_style!r}") from None
    return make_deriver(hasher)
