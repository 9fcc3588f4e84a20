"""
Tests for truthtab/lexer.py tokenization.
"""

import dataclasses

import pytest

from truthtab.lexer import Lexer, Token, TokenKind, tokenize


def _kinds(source):
    return [t.kind for t in tokenize(source)]


class TestTokens:
    """Test token kinds, literals and positions."""

    def test_full_formula(self):
        source = 'A v (Bv~C) → [false]'
        assert tokenize(source) == [
            Token('A', 1, TokenKind.IDENTIFIER),
            Token('v', 3, TokenKind.OPERATOR),
            Token('(', 5, TokenKind.OPEN_PAREN),
            Token('B', 6, TokenKind.IDENTIFIER),
            Token('v', 7, TokenKind.OPERATOR),
            Token('~', 8, TokenKind.OPERATOR),
            Token('C', 9, TokenKind.IDENTIFIER),
            Token(')', 10, TokenKind.CLOSE_PAREN),
            Token('→', 12, TokenKind.OPERATOR),
            Token('false', 14, TokenKind.BOOLEAN_LITERAL),
            Token('', 20, TokenKind.END_OF_INPUT),
        ]

    def test_all_operators(self):
        tokens = tokenize('~∧v⊻→↔')
        assert [t.literal for t in tokens[:-1]] == list('~∧v⊻→↔')
        assert all(t.kind is TokenKind.OPERATOR for t in tokens[:-1])

    def test_whitespace_is_skipped(self):
        assert tokenize(' \t\nA') == [
            Token('A', 4, TokenKind.IDENTIFIER),
            Token('', 4, TokenKind.END_OF_INPUT),
        ]

    def test_whitespace_runs_are_skipped(self):
        assert tokenize('A \t\n  v\tB') == [
            Token('A', 1, TokenKind.IDENTIFIER),
            Token('v', 7, TokenKind.OPERATOR),
            Token('B', 9, TokenKind.IDENTIFIER),
            Token('', 9, TokenKind.END_OF_INPUT),
        ]

    def test_empty_source(self):
        assert tokenize('') == [Token('', 0, TokenKind.END_OF_INPUT)]
        assert tokenize('   ') == [Token('', 3, TokenKind.END_OF_INPUT)]

    def test_exactly_one_end_of_input(self):
        assert _kinds('A ∧ B').count(TokenKind.END_OF_INPUT) == 1
        assert _kinds('A ∧ B')[-1] is TokenKind.END_OF_INPUT

    def test_relex_is_identical(self):
        source = 'A ∧ (B ↔ [true]) ⊻ ~C'
        assert tokenize(source) == tokenize(source)


class TestBooleanLiterals:
    """Test bracketed boolean literals."""

    def test_true(self):
        assert tokenize('[true]') == [
            Token('true', 1, TokenKind.BOOLEAN_LITERAL),
            Token('', 6, TokenKind.END_OF_INPUT),
        ]

    def test_position_is_opening_bracket(self):
        assert tokenize('A ∧ [false]')[2] == Token(
            'false', 5, TokenKind.BOOLEAN_LITERAL)

    def test_unknown_word_is_illegal(self):
        assert tokenize('[maybe]') == [
            Token('[maybe', 1, TokenKind.ILLEGAL),
            Token('', 7, TokenKind.END_OF_INPUT),
        ]

    def test_unterminated_runs_to_end(self):
        assert tokenize('[true ∧ A') == [
            Token('[true ∧ A', 1, TokenKind.ILLEGAL),
            Token('', 9, TokenKind.END_OF_INPUT),
        ]

    def test_empty_brackets(self):
        assert tokenize('[]')[0] == Token('[', 1, TokenKind.ILLEGAL)

    def test_case_sensitive(self):
        assert tokenize('[True]')[0].kind is TokenKind.ILLEGAL

    def test_lexing_continues_after_bad_literal(self):
        tokens = tokenize('[yes] v A')
        assert tokens[1] == Token('v', 7, TokenKind.OPERATOR)
        assert tokens[2] == Token('A', 9, TokenKind.IDENTIFIER)


class TestIllegal:
    """Test that unknown characters become illegal tokens."""

    def test_unknown_character(self):
        assert tokenize('A # B') == [
            Token('A', 1, TokenKind.IDENTIFIER),
            Token('#', 3, TokenKind.ILLEGAL),
            Token('B', 5, TokenKind.IDENTIFIER),
            Token('', 5, TokenKind.END_OF_INPUT),
        ]

    def test_lowercase_letter(self):
        assert tokenize('a')[0] == Token('a', 1, TokenKind.ILLEGAL)

    def test_closing_bracket_alone(self):
        assert tokenize(']')[0] == Token(']', 1, TokenKind.ILLEGAL)

    def test_carriage_return_is_not_whitespace(self):
        assert tokenize('\r')[0] == Token('\r', 1, TokenKind.ILLEGAL)


class TestLexer:
    """Test the pull-based interface."""

    def test_next_token(self):
        lexer = Lexer('A v B')
        assert lexer.next_token() == Token('A', 1, TokenKind.IDENTIFIER)
        assert lexer.next_token() == Token('v', 3, TokenKind.OPERATOR)
        assert lexer.next_token() == Token('B', 5, TokenKind.IDENTIFIER)
        assert lexer.next_token().kind is TokenKind.END_OF_INPUT

    def test_end_of_input_repeats(self):
        lexer = Lexer('A')
        lexer.next_token()
        assert lexer.next_token() == Token('', 1, TokenKind.END_OF_INPUT)
        assert lexer.next_token() == Token('', 1, TokenKind.END_OF_INPUT)

    def test_tokens_is_lazy(self):
        stream = Lexer('A ∧ B').tokens()
        assert next(stream) == Token('A', 1, TokenKind.IDENTIFIER)
        assert [t.literal for t in stream] == ['∧', 'B', '']

    def test_tokens_are_immutable(self):
        token = tokenize('A')[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.literal = 'B'
