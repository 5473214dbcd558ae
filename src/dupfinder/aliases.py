from dupfinder.core.models import HashAlgorithmName, SearchStyle

SEARCH_STYLE_ALIASES = {
    "size": SearchStyle.BY_SIZE,
    "contents": SearchStyle.BY_CONTENTS,
    "content": SearchStyle.BY_CONTENTS,
    "hash": SearchStyle.BY_CONTENTS,
}

SEARCH_STYLE_CHOICES = list(SEARCH_STYLE_ALIASES.keys())

SEARCH_STYLE_HELP_TEXT = (
    "Comparison key used to group files:\n"
    f"  size     : {SearchStyle.BY_SIZE.description}\n"
    f"  contents : {SearchStyle.BY_CONTENTS.description}\n"
    "Default: size\n"
)

ALGORITHM_ALIASES = {
    "sha1": HashAlgorithmName.SHA1,
    "xxhash64": HashAlgorithmName.XXHASH64,
    "xxhash": HashAlgorithmName.XXHASH64,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Digest used with --by contents:\n"
    "  sha1     : 160-bit SHA-1 (default)\n"
    "  xxhash64 : 64-bit xxHash, faster but not collision resistant\n"
)

EPILOG_TEXT = (
    "Examples:\n"
    "  %(prog)s -i ~/Downloads\n"
    "  %(prog)s -i ~/Pictures --by contents --prefilter\n"
    "  %(prog)s -i /data --by contents --algorithm xxhash64 -m 1M\n"
)
