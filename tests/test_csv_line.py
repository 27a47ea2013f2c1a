"""Tests for CSV line tokenizing, escaping and record splitting."""

import pytest

from asset_ledger.parsers.csv_line import escape_value, parse_line, split_records


class TestParseLine:
    def test_splits_on_commas(self):
        assert parse_line("2024-03-20,Salary,1000.00") == [
            "2024-03-20",
            "Salary",
            "1000.00",
        ]

    def test_trims_whitespace_around_fields(self):
        assert parse_line("  a , b ,c  ") == ["a", "b", "c"]

    def test_keeps_commas_inside_quotes(self):
        assert parse_line('Cash,"Monthly salary, including bonus"') == [
            "Cash",
            "Monthly salary, including bonus",
        ]

    def test_doubled_quote_inside_quotes_is_literal(self):
        assert parse_line('"say ""hi""",x') == ['say "hi"', "x"]

    def test_empty_fields_are_preserved(self):
        assert parse_line("a,,b") == ["a", "", "b"]
        assert parse_line("a,") == ["a", ""]

    def test_empty_line_is_one_empty_field(self):
        assert parse_line("") == [""]

    def test_quoted_empty_value(self):
        assert parse_line('a,"",b') == ["a", "", "b"]

    @pytest.mark.parametrize(
        "line",
        ['a,"b,c', '"', '""",', 'a"b"c,"', ',,,"",,"'],
    )
    def test_malformed_quoting_never_raises(self, line):
        result = parse_line(line)

        assert isinstance(result, list)
        assert all(isinstance(value, str) for value in result)

    def test_unterminated_quote_swallows_rest_of_line(self):
        assert parse_line('a,"b,c') == ["a", "b,c"]

    def test_quote_inside_unquoted_value_is_literal(self):
        assert parse_line('2024-03-20,5" screen,10') == ["2024-03-20", '5" screen', "10"]

    def test_quote_after_leading_whitespace_opens_quoted_value(self):
        assert parse_line('a,  "b, c"  ,d') == ["a", "b, c", "d"]

    def test_quote_after_closed_section_is_literal(self):
        assert parse_line('"ab"c"d,e') == ['abc"d', "e"]


class TestEscapeValue:
    def test_plain_value_is_unchanged(self):
        assert escape_value("Groceries") == "Groceries"
        assert escape_value("") == ""

    def test_value_with_comma_is_quoted(self):
        assert escape_value("a, b") == '"a, b"'

    def test_embedded_quotes_are_doubled(self):
        assert escape_value('say "hi"') == '"say ""hi"""'

    def test_line_breaks_are_quoted(self):
        assert escape_value("one\ntwo") == '"one\ntwo"'
        assert escape_value("one\rtwo") == '"one\rtwo"'

    @pytest.mark.parametrize(
        "value",
        [
            "plain",
            "Monthly salary, including bonus",
            'say "hi"',
            '"hi"',
            '""',
            "",
            ",",
            "trailing comma,",
            "Café ☕",
        ],
    )
    def test_parse_inverts_escape(self, value):
        assert parse_line(escape_value(value)) == [value.strip()]

    def test_escaped_values_join_into_a_parsable_line(self):
        values = ["2024-03-20", 'The "best", pizza', "-12.5", "Food", "Cash", ""]

        line = ",".join(escape_value(value) for value in values)

        assert parse_line(line) == values


class TestSplitRecords:
    def test_numbers_records_by_physical_line(self):
        text = "Date,Name\n2024-03-20,Salary\n2024-03-21,Rent\n"

        assert split_records(text) == [
            (1, "Date,Name"),
            (2, "2024-03-20,Salary"),
            (3, "2024-03-21,Rent"),
        ]

    def test_skips_blank_lines_but_keeps_numbering(self):
        text = "header\n\n   \nrow\n"

        assert split_records(text) == [(1, "header"), (4, "row")]

    def test_handles_crlf_line_endings(self):
        assert split_records("header\r\nrow\r\n") == [(1, "header"), (2, "row")]

    def test_joins_lines_inside_quoted_value(self):
        text = 'header\n2024-03-20,"first line\nsecond line",x\nnext,row\n'

        records = split_records(text)

        assert records == [
            (1, "header"),
            (2, '2024-03-20,"first line\nsecond line",x'),
            (4, "next,row"),
        ]
        assert parse_line(records[1][1])[1] == "first line\nsecond line"

    def test_escaped_quotes_do_not_open_a_record(self):
        text = 'a,"say ""hi"""\nb,c\n'

        assert split_records(text) == [(1, 'a,"say ""hi"""'), (2, "b,c")]

    def test_quote_open_at_end_of_text_falls_back_to_single_lines(self):
        text = 'header\nrow,"never closed\n2024-03-21,ok\n'

        assert split_records(text) == [
            (1, "header"),
            (2, 'row,"never closed'),
            (3, "2024-03-21,ok"),
        ]

    def test_empty_text_has_no_records(self):
        assert split_records("") == []
        assert split_records("\n\n") == []

    def test_stray_quote_does_not_join_following_lines(self):
        text = (
            "header\n"
            '2024-03-20,5" screen,10,Tech,Cash,x\n'
            "2024-03-21,Lunch,-12,Food,Cash,\n"
        )

        assert [number for number, _ in split_records(text)] == [1, 2, 3]

    def test_keeps_original_line_breaks_inside_quoted_value(self):
        text = 'header\r\nrow,"one\r\ntwo"\r\n'

        records = split_records(text)

        assert records == [(1, "header"), (2, 'row,"one\r\ntwo"')]
        assert parse_line(records[1][1])[1] == "one\r\ntwo"

    @pytest.mark.parametrize(
        "separator", ["\u2028", "\u2029", "\x0b", "\x0c", "\x1c", "\x1e", "\x85"]
    )
    def test_only_cr_and_lf_break_lines(self, separator):
        text = f"header\nrow,a{separator}b\n"

        assert split_records(text) == [(1, "header"), (2, f"row,a{separator}b")]
