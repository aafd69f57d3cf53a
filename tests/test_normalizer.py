"""Unit tests for sheet row normalization"""

import pytest

from courtcaller.core.normalizer import (
    map_status,
    match_id,
    normalize_row,
    normalize_rows,
    parse_match_number,
)
from courtcaller.models.match import MatchStatus, SheetRow


def make_row(**overrides):
    """Sheet row with sensible defaults"""
    row = {
        "Match": "7",
        "Player A": "Alice",
        "Player B": "Bob",
        "Score": "",
        "Winner": "",
        "Status": "next",
    }
    row.update(overrides)
    return row


@pytest.mark.unit
class TestParseMatchNumber:
    """Test match number parsing"""

    def test_plain_integer(self):
        assert parse_match_number("12") == 12

    def test_surrounding_whitespace(self):
        assert parse_match_number("  12 ") == 12

    def test_numeric_cell(self):
        """Sheets may hand numbers back as numbers"""
        assert parse_match_number(12) == 12
        assert parse_match_number(12.0) == 12

    def test_leading_digits_are_used(self):
        assert parse_match_number("12b") == 12

    @pytest.mark.parametrize("value", ["abc", "", None, "  ", "#4"])
    def test_unparseable_values(self, value):
        assert parse_match_number(value) is None

    def test_non_ascii_digits_are_rejected(self):
        """Only 0-9 count as base-10 digits"""
        assert parse_match_number("\u0661\u0662") is None
        assert parse_match_number("\uff11\uff12") is None

    def test_oversized_number_is_unparseable(self):
        assert parse_match_number("9" * 5000) is None


@pytest.mark.unit
class TestMapStatus:
    """Test raw status mapping"""

    def test_past_is_completed(self):
        assert map_status("past") == MatchStatus.COMPLETED

    def test_next_is_upcoming(self):
        assert map_status("next") == MatchStatus.UPCOMING

    def test_case_and_whitespace_are_ignored(self):
        assert map_status("  PAST ") == MatchStatus.COMPLETED

    @pytest.mark.parametrize("value", ["", None, "live", "done", "tomorrow"])
    def test_anything_else_is_upcoming(self, value):
        assert map_status(value) == MatchStatus.UPCOMING


@pytest.mark.unit
class TestNormalizeRow:
    """Test single row normalization"""

    def test_valid_row(self):
        """Test a complete upcoming row"""
        match = normalize_row(make_row())

        assert match is not None
        assert match.id == "sheet-7"
        assert match.match_number == 7
        assert match.player1 == "Alice"
        assert match.player2 == "Bob"
        assert match.status == MatchStatus.UPCOMING
        assert match.score == ""
        assert match.category == "u13"

    def test_free_text_is_trimmed(self):
        match = normalize_row(
            make_row(**{"Player A": "  Alice ", "Score": " 21-10 ", "Winner": " Alice", "Status": "past"})
        )

        assert match.player1 == "Alice"
        assert match.score == "21-10"
        assert match.winner == "Alice"
        assert match.status == MatchStatus.COMPLETED

    def test_non_integer_match_is_dropped(self):
        assert normalize_row(make_row(Match="abc")) is None

    def test_missing_match_is_dropped(self):
        row = make_row()
        del row["Match"]
        assert normalize_row(row) is None

    def test_explicit_category_wins(self):
        match = normalize_row(make_row(Match="1", Category="Under 11 (U11)"))
        assert match.category == "u11"

    def test_unrecognised_category_falls_back_to_rotation(self):
        match = normalize_row(make_row(Match="2", Category="Open"))
        assert match.category == "u11"

    def test_missing_players_become_empty_strings(self):
        row = make_row()
        del row["Player A"]
        del row["Player B"]
        match = normalize_row(row)

        assert match.player1 == ""
        assert match.player2 == ""

    def test_id_is_stable_for_same_match_number(self):
        first = normalize_row(make_row(**{"Player A": "Alice"}))
        second = normalize_row(make_row(**{"Player A": "Someone Else"}))
        assert first.id == second.id == match_id(7)

    def test_accepts_sheet_row_model(self):
        row = SheetRow.model_validate(make_row())
        assert normalize_row(row).match_number == 7

    def test_row_that_is_not_an_object_is_dropped(self):
        assert normalize_row(["7", "Alice", "Bob"]) is None


@pytest.mark.unit
class TestNormalizeRows:
    """Test batch normalization"""

    def test_only_non_integer_rows(self):
        assert list(normalize_rows([{"Match": "abc"}])) == []

    def test_drops_bad_rows_and_keeps_order(self):
        rows = [make_row(Match="3"), make_row(Match="x"), make_row(Match="1")]
        numbers = [m.match_number for m in normalize_rows(rows)]
        assert numbers == [3, 1]

    def test_oversized_match_number_row_is_dropped(self):
        rows = [make_row(Match="9" * 5000), make_row(Match="2")]
        assert [m.match_number for m in normalize_rows(rows)] == [2]

    def test_is_lazy(self):
        """Rows are pulled one at a time"""

        def rows():
            yield make_row(Match="1")
            raise AssertionError("second row should not be read")

        matches = normalize_rows(rows())
        assert next(matches).match_number == 1
