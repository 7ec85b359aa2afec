"""Tests for the leaf value tokenizer."""

from oping.tokenizer import split_values


# ---------------------------------------------------------------------------
# Separators and blanks
# ---------------------------------------------------------------------------

def test_mixed_quoted_and_empty():
    assert split_values("a, b, 'c,d', ,e") == ["a", "b", "c,d", "", "e"]

def test_no_trailing_empty_value():
    assert split_values("a,b,") == ["a", "b"]

def test_empty_text():
    assert split_values("") == []

def test_interior_empty_value():
    assert split_values("a,,b") == ["a", "", "b"]

def test_single_value():
    assert split_values("42") == ["42"]

def test_leading_blanks_dropped():
    assert split_values(" \t x") == ["x"]

def test_inner_whitespace_kept():
    assert split_values("hello world") == ["hello world"]

def test_trailing_whitespace_kept():
    assert split_values("a  ,b") == ["a  ", "b"]

def test_duplicates_kept():
    assert split_values("x, x, x") == ["x", "x", "x"]

def test_only_separator():
    assert split_values(",") == [""]


# ---------------------------------------------------------------------------
# Quoting
# ---------------------------------------------------------------------------

def test_quoted_comma_and_space():
    assert split_values("'hi, there'") == ["hi, there"]

def test_quoted_leading_blanks_kept():
    assert split_values("'  padded'") == ["  padded"]

def test_quote_inside_token_is_dropped():
    assert split_values("it's, ok'") == ["its, ok"]

def test_empty_quotes_emit_nothing_at_end():
    assert split_values("a, ''") == ["a"]

def test_unterminated_quote_runs_to_end():
    assert split_values("'a, b") == ["a, b"]
