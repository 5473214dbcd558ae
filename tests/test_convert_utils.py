"""
Tests for size conversion utilities used by --min-size / --max-size and report output.
"""
import pytest
from dupfinder.utils.convert_utils import ConvertUtils


class TestHumanToBytes:

    def test_bytes_without_suffix(self):
        assert ConvertUtils.human_to_bytes("0") == 0
        assert ConvertUtils.human_to_bytes("1024") == 1024

    def test_bytes_with_b_suffix(self):
        assert ConvertUtils.human_to_bytes("1B") == 1

    def test_binary_multiples(self):
        assert ConvertUtils.human_to_bytes("1KB") == 1024
        assert ConvertUtils.human_to_bytes("1K") == 1024
        assert ConvertUtils.human_to_bytes("1.5KB") == 1536
        assert ConvertUtils.human_to_bytes("1M") == 1024 ** 2
        assert ConvertUtils.human_to_bytes("0.5GB") == 512 * 1024 ** 2
        assert ConvertUtils.human_to_bytes("2T") == 2 * 1024 ** 4

    def test_case_and_whitespace_insensitive(self):
        assert ConvertUtils.human_to_bytes(" 1kb ") == 1024
        assert ConvertUtils.human_to_bytes("1 Mb") == 1024 ** 2

    @pytest.mark.parametrize("value", ["", "abc", "KB", "1XB", "1.2.3K"])
    def test_invalid_formats(self, value):
        with pytest.raises(ValueError):
            ConvertUtils.human_to_bytes(value)
        assert not ConvertUtils.is_valid_size_format(value)

    def test_negative_sizes(self):
        with pytest.raises(ValueError, match="Negative"):
            ConvertUtils.human_to_bytes("-1K")


class TestBytesToHuman:

    def test_formats(self):
        assert ConvertUtils.bytes_to_human(4) == "4.00B"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"
        assert ConvertUtils.bytes_to_human(1024 ** 3) == "1.00GB"

    def test_negative_is_zero(self):
        assert ConvertUtils.bytes_to_human(-5) == "0B"
