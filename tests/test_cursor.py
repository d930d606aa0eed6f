# =============================================================================
# test_cursor.py - Cursor and Character Class Tests
# =============================================================================
# Tests for the character cursor (lookahead window, movement, line/column
# tracking, underrun faults), the character predicates, and the token
# boundary rule.
# =============================================================================

import pytest

from tildec.lexer import (
    CharacterCursor,
    CursorUnderrunError,
    ends_token,
    is_comment_delimiter,
    is_digit,
    is_operator,
    is_string_delimiter,
    is_symbol,
    is_whitespace,
)


# =============================================================================
# Cursor Tests
# =============================================================================

class TestCharacterCursor:
    """Test the character window and its movement."""

    def test_initial_window(self):
        cursor = CharacterCursor("abc")
        assert cursor.previous == ""
        assert cursor.current == "a"
        assert cursor.next == "b"

    def test_advance_shifts_window(self):
        cursor = CharacterCursor("abc").advance()
        assert (cursor.previous, cursor.current, cursor.next) == ("a", "b", "c")

    def test_advance_returns_new_cursor(self):
        cursor = CharacterCursor("abc")
        moved = cursor.advance()
        assert cursor.index == 0
        assert moved.index == 1

    def test_peek_offsets(self):
        cursor = CharacterCursor("abcd").advance()
        assert cursor.peek(-1) == "a"
        assert cursor.peek() == "b"
        assert cursor.peek(2) == "d"

    def test_lookahead(self):
        cursor = CharacterCursor("abc")
        assert cursor.has_lookahead
        assert cursor.advance().has_lookahead
        assert not cursor.advance().advance().has_lookahead

    def test_at_end(self):
        cursor = CharacterCursor("ab").advance().advance()
        assert cursor.at_end
        assert not CharacterCursor("ab").at_end

    def test_line_and_column(self):
        cursor = CharacterCursor("a\nbc")
        cursor = cursor.advance()
        assert (cursor.line, cursor.column) == (1, 2)
        cursor = cursor.advance()
        assert (cursor.line, cursor.column) == (2, 1)
        cursor = cursor.advance()
        assert (cursor.line, cursor.column) == (2, 2)

    def test_location(self):
        cursor = CharacterCursor("x\n y").advance().advance().advance()
        assert str(cursor.location("f.tl")) == "f.tl:2:2"

    def test_line_text(self):
        cursor = CharacterCursor("first\nsecond line\nthird")
        for _ in range(9):
            cursor = cursor.advance()
        assert cursor.line_text() == "second line"


class TestCursorUnderrun:
    """Reading past the text is a fault."""

    def test_next_past_end(self):
        cursor = CharacterCursor("ab").advance()
        with pytest.raises(CursorUnderrunError):
            cursor.next

    def test_current_at_end(self):
        cursor = CharacterCursor("a").advance()
        with pytest.raises(CursorUnderrunError):
            cursor.current

    def test_advance_past_end(self):
        cursor = CharacterCursor("a").advance()
        with pytest.raises(CursorUnderrunError):
            cursor.advance()

    def test_empty_text(self):
        with pytest.raises(CursorUnderrunError):
            CharacterCursor("").current

    def test_is_index_error(self):
        with pytest.raises(IndexError):
            CharacterCursor("a").peek(5)

    def test_message(self):
        with pytest.raises(CursorUnderrunError, match="index 3 is outside"):
            CharacterCursor("abc").peek(3)


# =============================================================================
# Character Predicate Tests
# =============================================================================

class TestCharacterPredicates:
    """Test the single-character classifiers."""

    @pytest.mark.parametrize("char", ["[", "]", ")", "(", ".", ";", "=", "'", '"'])
    def test_symbols(self, char):
        assert is_symbol(char)

    @pytest.mark.parametrize("char", ["a", "b", "7", "8", "~", "+", " ", "#", "&", "?"])
    def test_not_symbols(self, char):
        assert not is_symbol(char)

    @pytest.mark.parametrize("char", ["+", "-", "*", "^", "/", ">", "<"])
    def test_operators(self, char):
        assert is_operator(char)

    @pytest.mark.parametrize("char", ["a", "(", "7", "]", "="])
    def test_not_operators(self, char):
        assert not is_operator(char)

    @pytest.mark.parametrize("char", [" ", "\t", "\n"])
    def test_whitespace(self, char):
        assert is_whitespace(char)

    @pytest.mark.parametrize("char", ["a", "(", "7", "]", "\r"])
    def test_not_whitespace(self, char):
        assert not is_whitespace(char)

    def test_digits(self):
        for char in "13579":
            assert is_digit(char)
        for char in "a(]+n²":
            assert not is_digit(char)

    def test_delimiters(self):
        assert is_comment_delimiter("~")
        assert not is_comment_delimiter("a")
        assert is_string_delimiter('"')
        assert not is_string_delimiter("'")

    def test_empty_string(self):
        """Predicates are total: the empty string is in no class."""
        for predicate in (is_whitespace, is_symbol, is_operator, is_digit):
            assert not predicate("")


# =============================================================================
# Boundary Rule Tests
# =============================================================================

class TestEndsToken:
    """Test the lexeme boundary rule."""

    @pytest.mark.parametrize("current,next_char", [
        ("a", " "),     # whitespace follows
        ("a", "\n"),
        (";", "a"),     # symbol just appended
        ("a", ";"),     # symbol follows
        ("+", "a"),     # operator just appended
        ("a", "-"),     # operator follows
        ("(", ")"),
        ("a", '"'),     # quote is a symbol
    ])
    def test_boundary(self, current, next_char):
        assert ends_token(current, next_char)

    @pytest.mark.parametrize("current,next_char", [
        ("a", "b"),
        ("1", "2"),
        ("x", "1"),
        ("a", "~"),     # comment marker is not a symbol
        ("a", "#"),     # markers never split words
        ("&", "b"),
        (" ", "a"),
    ])
    def test_no_boundary(self, current, next_char):
        assert not ends_token(current, next_char)

    def test_pure(self):
        results = {ends_token("a", "=") for _ in range(5)}
        assert results == {True}
