import datetime

import pytest

from locale_schema.errors import LocaleValueTooLong
from locale_schema.params import TemplateParser, parse_params, parse_template


def test_single_placeholder():
    assert parse_params("Hello {name}") == ["name"]


def test_empty_string():
    assert parse_params("") == []


def test_no_placeholder():
    assert parse_params("Hello world") == []


def test_placeholders_in_order_with_duplicates():
    assert parse_params("{a} and {b}, then {a} again") == ["a", "b", "a"]


def test_braces_do_not_nest():
    assert parse_params("x {a{b} y}") == ["a{b"]


def test_unclosed_brace_is_ignored():
    assert parse_params("{a} {b") == ["a"]


def test_empty_braces_are_skipped():
    parsed = parse_template("a {} b {c}")
    assert parsed.params == ("c",)
    assert parsed.empty_placeholders == 1


def test_non_string_values_have_no_params():
    assert parse_params(3) == []
    assert parse_params(None) == []
    assert parse_params(True) == []
    assert parse_params(datetime.date(2024, 1, 1)) == []


def test_two_clause_plural_directive():
    assert parse_params("{n, plural, =0 {no items} other {{n} items}}") == ["n", "n"]


def test_three_clause_plural_directive():
    value = "{count, plural, =0 {No cat} =1 {{name}'s cat} other {{count} cats of {name}}}"
    assert parse_params(value) == ["count", "name", "count", "name"]
    directive = parse_template(value).directive
    assert directive is not None
    assert [c.selector for c in directive.clauses] == ["=0", "=1", "other"]


def test_directive_selection():
    directive = TemplateParser.match_directive("{n, plural, =0 {none} =1 {one} other {many}}")
    assert directive is not None
    assert directive.select(0).content == "none"
    assert directive.select(1).content == "one"
    assert directive.select(7).content == "many"


def test_directive_without_other_selects_nothing_for_unmatched_count():
    directive = TemplateParser.match_directive("{n, plural, =0 {none} =1 {one}}")
    assert directive is not None
    assert directive.select(5) is None


def test_four_clauses_fall_back_to_flat_scan():
    value = "{n, plural, =0 {a} =1 {b} =2 {c} other {d}}"
    parsed = parse_template(value)
    assert parsed.directive is None
    assert parsed.malformed
    assert parsed.params == ("n, plural, =0 {a", "b", "c", "d")


def test_one_clause_is_not_a_directive():
    parsed = parse_template("{n, plural, other {{n} items}}")
    assert parsed.directive is None
    assert parsed.malformed


def test_bad_selector_is_not_a_directive():
    assert TemplateParser.match_directive("{n, plural, one {a} other {b}}") is None
    assert TemplateParser.match_directive("{n, plural, =x {a} other {b}}") is None


def test_spacing_must_match_exactly():
    assert TemplateParser.match_directive("{n, plural, =0 {a}  other {b}}") is None
    assert TemplateParser.match_directive("{n,plural, =0 {a} other {b}}") is None
    assert TemplateParser.match_directive("{n, plural, =0 {a} other {b}} ") is None


def test_directive_inside_text_is_scanned_flatly():
    parsed = parse_template("You have {n, plural, =0 {none} other {{n}}}")
    assert parsed.directive is None
    assert parsed.malformed
    assert parsed.params == ("n, plural, =0 {none", "{n")


def test_plain_text_is_not_malformed():
    assert not parse_template("Hello {name}").malformed


def test_duplicates():
    assert parse_template("{a} {b} {a} {b} {a}").duplicates == ("a", "b")


def test_length_guard():
    with pytest.raises(LocaleValueTooLong):
        parse_template("x" * 11, max_length=10)
    assert parse_template("x" * 10, max_length=10).params == ()


def test_empty_braces_name_no_parameter():
    assert parse_params("a {} b") == []
    assert TemplateParser.scan("{}{x}{}") == (["x"], 2)
