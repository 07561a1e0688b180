"""Tests for input classification."""

import pytest

from epochctl.domain.classify import MILLIS_THRESHOLD, classify_input
from epochctl.domain.errors import ClassificationError
from epochctl.domain.types import InputKind, TimeUnit


class TestNumeric:
    @pytest.mark.parametrize("raw", ["0", "1700000000", "9999999999", "-86400", "+42"])
    def test_seconds(self, raw: str) -> None:
        assert classify_input(raw) is InputKind.UNIX_SECONDS

    @pytest.mark.parametrize("raw", ["1700000000000", "-1700000000000", "+1000000000000"])
    def test_millis(self, raw: str) -> None:
        assert classify_input(raw) is InputKind.UNIX_MILLIS

    def test_threshold_boundary(self) -> None:
        assert classify_input(str(MILLIS_THRESHOLD - 1)) is InputKind.UNIX_SECONDS
        assert classify_input(str(MILLIS_THRESHOLD)) is InputKind.UNIX_MILLIS
        assert classify_input(str(-MILLIS_THRESHOLD)) is InputKind.UNIX_MILLIS

    def test_leading_zeros_do_not_count(self) -> None:
        assert classify_input("00000000000001") is InputKind.UNIX_SECONDS

    def test_huge_literal_is_millis(self) -> None:
        assert classify_input("9" * 40) is InputKind.UNIX_MILLIS

    def test_surrounding_whitespace_ignored(self) -> None:
        assert classify_input("  1700000000\n") is InputKind.UNIX_SECONDS

    def test_forced_millis(self) -> None:
        assert classify_input("1700000000", unit=TimeUnit.MILLIS) is InputKind.UNIX_MILLIS

    def test_forced_seconds(self) -> None:
        kind = classify_input("1700000000000", unit=TimeUnit.SECONDS)
        assert kind is InputKind.UNIX_SECONDS

    def test_forced_unit_ignored_for_formatted(self) -> None:
        kind = classify_input("2024/01/01 00:00:00", unit=TimeUnit.MILLIS)
        assert kind is InputKind.FORMATTED


class TestFormatted:
    @pytest.mark.parametrize(
        "raw",
        ["2024/02/29 12:00:00", "2024/2/9 1:2:3", "1970/01/01 00:00:00"],
    )
    def test_formatted(self, raw: str) -> None:
        assert classify_input(raw) is InputKind.FORMATTED

    def test_wrong_separators_still_formatted(self) -> None:
        """Structure is the parser's job; only the character set matters here."""
        assert classify_input("2024/02/29 12:00") is InputKind.FORMATTED


class TestRejected:
    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_empty(self, raw: str) -> None:
        with pytest.raises(ClassificationError, match="Empty input"):
            classify_input(raw)

    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-date",
            "2025-12-20 11:10:11",
            "2024-02-29T12:00:00Z",
            "1700000000.5",
            "12:00:00",
            "--5",
            "0x1F",
        ],
    )
    def test_unrecognized(self, raw: str) -> None:
        with pytest.raises(ClassificationError, match="Unrecognized input"):
            classify_input(raw)

    def test_error_code(self) -> None:
        with pytest.raises(ClassificationError) as exc_info:
            classify_input("nope")
        assert exc_info.value.code == "CLASSIFICATION"


class TestNonAsciiDigits:
    @pytest.mark.parametrize(
        "raw",
        [
            "١٧٠٠٠٠٠٠٠٠",  # Arabic-Indic
            "１７００００００００",  # full-width
            "-१२",  # Devanagari
            "٢٠٢٤/01/01 00:00:00",
            "2024/01/01 １２:00:00",
        ],
    )
    def test_rejected(self, raw: str) -> None:
        with pytest.raises(ClassificationError):
            classify_input(raw)
