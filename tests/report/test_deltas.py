"""Tests for delta computation and table rendering"""

import io

import pytest

from hqdelta_app.models import DeltaRow
from hqdelta_app.report.deltas import (
    CHEAPER_MARKER,
    REPORT_HEADER,
    align_columns,
    build_delta_rows,
    format_delta_row,
    percent_delta,
    print_deltas,
    render_deltas,
)


class TestPercentDelta:
    """Test signed percentage delta"""

    def test_cheaper_now(self):
        assert percent_delta(100.0, 90.0) == pytest.approx(-10.0)

    def test_more_expensive_now(self):
        assert percent_delta(100.0, 110.0) == pytest.approx(10.0)

    def test_unchanged(self):
        assert percent_delta(42.0, 42.0) == 0.0

    @pytest.mark.parametrize("report, current", [(50.0, 45.0), (20.0, 31.0), (3.3, 1.1), (7.0, 7.7)])
    def test_matches_relative_change(self, report, current):
        assert percent_delta(report, current) == pytest.approx((current - report) / report * 100)

    def test_no_current_price(self):
        assert percent_delta(100.0, None) is None

    def test_zero_report_price(self):
        assert percent_delta(0.0, 5.0) is None


class TestBuildDeltaRows:
    """Test pairing report and current prices"""

    def test_rows_follow_report_order(self):
        rows = build_delta_rows({"BBB": 20.0, "AAA": 100.0}, {"AAA": 90.0, "BBB": 22.0})
        assert [row.symbol for row in rows] == ["BBB", "AAA"]

    def test_cheaper_flag(self):
        cheaper, pricier = build_delta_rows({"AAA": 100.0, "BBB": 100.0}, {"AAA": 90.0, "BBB": 110.0})
        assert cheaper.cheaper_now is True
        assert cheaper.percent_delta == pytest.approx(-10.0)
        assert pricier.cheaper_now is False
        assert pricier.percent_delta == pytest.approx(10.0)

    def test_missing_current_price_is_kept(self):
        """Symbols without a current quote stay in the table, flagged"""
        (row,) = build_delta_rows({"AAA": 100.0}, {})
        assert row.current_price is None
        assert row.percent_delta is None
        assert row.has_current_price is False
        assert row.cheaper_now is False

    def test_current_only_symbols_ignored(self):
        rows = build_delta_rows({"AAA": 100.0}, {"AAA": 99.0, "ZZZ": 1.0})
        assert [row.symbol for row in rows] == ["AAA"]


class TestFormatDeltaRow:
    """Test table cell formatting"""

    def test_cheaper_row(self):
        row = DeltaRow("AAA", 10.0, 9.0, percent_delta(10.0, 9.0))
        assert format_delta_row(row) == ("AAA", "$10.00", "->", "$9.00", "(-10.00%)", CHEAPER_MARKER)

    def test_pricier_row_has_explicit_plus(self):
        row = DeltaRow("BBB", 100.0, 110.0, percent_delta(100.0, 110.0))
        assert format_delta_row(row) == ("BBB", "$100.00", "->", "$110.00", "(+10.00%)", "")

    def test_unchanged_row(self):
        row = DeltaRow("CCC", 5.0, 5.0, 0.0)
        assert format_delta_row(row)[4] == "(+0.00%)"

    def test_no_current_data(self):
        row = DeltaRow("DDD", 12.5)
        assert format_delta_row(row) == ("DDD", "$12.50", "->", "n/a", "(no current data)", "")

    def test_currency_prefix(self):
        row = DeltaRow("EEE", 1.0, 2.0, 100.0)
        assert format_delta_row(row, currency="€")[1:4] == ("€1.00", "->", "€2.00")


class TestAlignColumns:
    """Test column alignment"""

    def test_single_row(self):
        lines = align_columns([("AAA", "$10.00", "->", "$9.00", "(-10.00%)", "**CHEAPER**")])
        assert lines == ["  AAA  $10.00  ->  $9.00  (-10.00%)  **CHEAPER**"]

    def test_columns_padded_to_widest_cell(self):
        rows = [
            ("AAA", "$10.00", "->", "$9.00", "(-10.00%)", "**CHEAPER**"),
            ("BRK.B", "$300.00", "->", "$330.00", "(+10.00%)", ""),
        ]
        lines = align_columns(rows)
        assert lines == [
            "  AAA    $10.00   ->  $9.00    (-10.00%)  **CHEAPER**",
            "  BRK.B  $300.00  ->  $330.00  (+10.00%)             ",
        ]
        assert len({len(line) for line in lines}) == 1

    def test_column_starts_line_up(self):
        rows = [("A", "$1.00", "->", "$1.00", "(+0.00%)", ""), ("LONGER", "$1000.00", "->", "$2.00", "(-99.80%)", "x")]
        lines = align_columns(rows)
        assert all(line.startswith("  ") and not line.startswith("   ") for line in lines)
        assert lines[0].index("->") == lines[1].index("->")
        assert lines[0].index("(") == lines[1].index("(")

    def test_empty(self):
        assert align_columns([]) == []


class TestRenderDeltas:
    """Test the full console block"""

    def test_block_layout(self):
        lines = render_deltas({"AAA": 50.0}, {"AAA": 45.0})
        assert lines[0] == ""
        assert lines[1] == REPORT_HEADER
        assert lines[-1] == ""
        assert lines[2] == "  AAA  $50.00  ->  $45.00  (-10.00%)  **CHEAPER**"

    def test_missing_current_price_rendered(self):
        lines = render_deltas({"AAA": 50.0, "BBB": 20.0}, {"AAA": 45.0})
        assert "(no current data)" in lines[3]
        assert "nan" not in "".join(lines).lower()

    def test_no_symbols(self):
        assert render_deltas({}, {}) == ["", REPORT_HEADER, ""]

    def test_print_deltas(self):
        stream = io.StringIO()
        print_deltas({"AAA": 100.0}, {"AAA": 110.0}, stream=stream)
        assert stream.getvalue() == f"\n{REPORT_HEADER}\n  AAA  $100.00  ->  $110.00  (+10.00%)  \n\n"
