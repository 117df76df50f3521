"""Tests for row tokenizers and reference coercion."""

import pytest

from m2json.formats.tokenizers import (
    AttributeRowMatch,
    CommonRowMatch,
    InvalidReferenceError,
    coerce_reference,
    iter_attribute_rows,
    iter_common_rows,
    iter_group_entries,
    iter_group_graph_entries,
)


class TestGroupEntries:
    """Tests for group member lines."""

    def test_member_lines(self) -> None:
        """Test that the last column of each member line is the vnum."""
        body = '\n\tVnum\t1\n\tLeader\t"L"\t10\n\t1\t"m"\t20\n\t2\t"m"\t21\n'
        assert list(iter_group_entries(body)) == [(1, 20), (2, 21)]

    def test_header_lines_are_ignored(self) -> None:
        """Test that Vnum and Leader lines never match."""
        body = '\tVnum\t1\n\tLeader\t"L"\t10\n'
        assert list(iter_group_entries(body)) == []

    def test_unquoted_label(self) -> None:
        """Test member lines without quotes."""
        assert list(iter_group_entries("1\tWolf\t102\n")) == [(1, 102)]


class TestGroupGraphEntries:
    """Tests for three-integer lines."""

    def test_rows(self) -> None:
        """Test that three-integer lines are yielded as triples."""
        body = "\tVnum\t1\n\t1\t101\t5\n\t2\t102\t6\n"
        assert list(iter_group_graph_entries(body)) == [(1, 101, 5), (2, 102, 6)]

    def test_two_columns_do_not_match(self) -> None:
        """Test that shorter lines are ignored."""
        assert list(iter_group_graph_entries("\t1\t101\n")) == []


class TestCommonRows:
    """Tests for drop entry lines."""

    def test_full_row(self) -> None:
        """Test a row with every column."""
        rows = list(iter_common_rows("\t1\texp\t3\t50\t10\n"))
        assert rows == [CommonRowMatch(1, "exp", 3, 50, 10)]

    def test_optional_columns_default_to_zero(self) -> None:
        """Test that missing probability columns default to 0."""
        rows = list(iter_common_rows("\t1\t27001\t5\t60\n\t2\t27002\t1\n"))

        assert rows[0] == CommonRowMatch(1, "27001", 5, 60, 0)
        assert rows[1] == CommonRowMatch(2, "27002", 1, 0, 0)

    def test_header_lines_are_ignored(self) -> None:
        """Test that Vnum, Type and Effect lines never match."""
        body = '\tVnum\t5\n\tType\tPCT\n\tEffect\t"d:/ymir work/a.mse"\n'
        assert list(iter_common_rows(body)) == []

    def test_leading_label_is_skipped(self) -> None:
        """Test that label text before the first tab is not parsed."""
        rows = list(iter_common_rows("Item\t1\t27001\t1\t100\n"))
        assert rows == [CommonRowMatch(1, "27001", 1, 100, 0)]

    def test_rows_do_not_cross_lines(self) -> None:
        """Test that a match is confined to one line."""
        rows = list(iter_common_rows("\t1\texp\n\t3\t50\n"))
        assert rows == []


class TestAttributeRows:
    """Tests for apply lines."""

    def test_three_columns(self) -> None:
        """Test the index, type, value form."""
        rows = list(iter_attribute_rows("\t1\t1\t500\n\t2\t7\t30\n"))
        assert rows == [AttributeRowMatch(1, 1, 500), AttributeRowMatch(2, 7, 30)]

    def test_missing_value_is_none(self) -> None:
        """Test that a two-column line surfaces a missing value."""
        rows = list(iter_attribute_rows("\t2\t7\n"))
        assert rows == [AttributeRowMatch(2, 7, None)]

    def test_vnum_line_is_ignored(self) -> None:
        """Test that the Vnum line is not mistaken for a row."""
        assert list(iter_attribute_rows("\tVnum\t50003\n\tType\tATTR\n")) == []


class TestCoerceReference:
    """Tests for reference column classification."""

    def test_numeric(self) -> None:
        """Test plain vnums."""
        assert coerce_reference("27001") == 27001

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("exp", "exp"),
            ("경험치", "exp"),
            ("gold", "gold"),
            ("돈꾸러미", "gold"),
            ("group", "group"),
            ("poison", "poison"),
            ("mob", "mob"),
            ("slow", "slow"),
            ("drain_hp", "drain_hp"),
        ],
    )
    def test_keywords(self, token: str, expected: str) -> None:
        """Test every symbolic keyword and its alias."""
        assert coerce_reference(token) == expected

    def test_surrounding_spaces(self) -> None:
        """Test that padding around the token is ignored."""
        assert coerce_reference(" 27001 ") == 27001
        assert coerce_reference(" exp ") == "exp"

    def test_unknown_token(self) -> None:
        """Test that unknown text is rejected."""
        with pytest.raises(InvalidReferenceError) as exc_info:
            coerce_reference("unknown")
        assert exc_info.value.token == "unknown"

    def test_zero_is_rejected(self) -> None:
        """Test that a zero vnum counts as invalid."""
        with pytest.raises(InvalidReferenceError):
            coerce_reference("0")

    def test_keywords_are_case_sensitive(self) -> None:
        """Test that only the exact keyword spelling is accepted."""
        with pytest.raises(InvalidReferenceError):
            coerce_reference("EXP")

    @pytest.mark.parametrize("token", ["1_000", "٣", "２７", "12.5", "1e3", "0x10", ""])
    def test_non_plain_integers_are_rejected(self, token: str) -> None:
        """Test that only plain ASCII integers count as vnums."""
        with pytest.raises(InvalidReferenceError):
            coerce_reference(token)
