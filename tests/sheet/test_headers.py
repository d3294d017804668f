"""Tests for header-based column lookup"""

import pytest

from hqdelta_app.errors import HeaderNotFoundError
from hqdelta_app.sheet.accessor import SheetAccessor
from hqdelta_app.sheet.headers import HEADER_SCAN_LIMIT, MatchMode, resolve_column


def _header_sheet(headers):
    return SheetAccessor.from_rows([headers])


class TestResolveColumn:
    """Test header resolution"""

    def test_exact_match(self, report_sheet):
        assert resolve_column(report_sheet, "Symbol") == 0
        assert resolve_column(report_sheet, "Share Price", MatchMode.EXACT) == 1

    def test_contains_match(self, report_sheet):
        assert resolve_column(report_sheet, "undervalued", MatchMode.CONTAINS) == 2
        assert resolve_column(report_sheet, "SI Criteria", MatchMode.CONTAINS) == 3

    def test_exact_does_not_match_substring(self):
        sheet = _header_sheet(["Symbol Name", "Symbol"])
        assert resolve_column(sheet, "Symbol", MatchMode.EXACT) == 1

    def test_contains_first_match_wins(self):
        sheet = _header_sheet(["Name", "% undervalued (1y)", "% undervalued (5y)"])
        assert resolve_column(sheet, "undervalued", MatchMode.CONTAINS) == 1

    def test_match_is_case_sensitive(self):
        sheet = _header_sheet(["symbol", "UNDERVALUED"])
        with pytest.raises(HeaderNotFoundError):
            resolve_column(sheet, "Symbol")
        with pytest.raises(HeaderNotFoundError):
            resolve_column(sheet, "undervalued", MatchMode.CONTAINS)

    def test_non_text_headers_ignored(self):
        sheet = _header_sheet([8, None, "8"])
        assert resolve_column(sheet, "8") == 2

    def test_not_found(self, report_sheet):
        with pytest.raises(HeaderNotFoundError) as exc_info:
            resolve_column(report_sheet, "Market Cap", MatchMode.CONTAINS)
        assert exc_info.value.label == "Market Cap"
        assert exc_info.value.match_mode == "contains"
        assert exc_info.value.recoverable is False
        assert "Market Cap" in str(exc_info.value)

    def test_last_column_in_scan_range(self):
        headers = [None] * (HEADER_SCAN_LIMIT - 1) + ["Symbol"]
        assert resolve_column(_header_sheet(headers), "Symbol") == HEADER_SCAN_LIMIT - 1

    def test_column_beyond_scan_range(self):
        """Headers past the scan ceiling are never found"""
        headers = [None] * HEADER_SCAN_LIMIT + ["Symbol"]
        with pytest.raises(HeaderNotFoundError):
            resolve_column(_header_sheet(headers), "Symbol")

    def test_deterministic(self, report_sheet):
        results = {resolve_column(report_sheet, "SI", MatchMode.CONTAINS) for _ in range(5)}
        assert results == {3}
