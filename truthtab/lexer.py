__all__ = ['TokenKind', 'Token', 'Lexer', 'tokenize']

import enum
import logging
from dataclasses import dataclass
from typing import Final, Generator, List

from funcparserlib.lexer import Token as RawToken
from funcparserlib.lexer import TokenSpec, make_tokenizer

from .chars import is_identifier, is_operator, is_whitespace

logger = logging.getLogger(__name__)


class TokenKind(enum.Enum):
    END_OF_INPUT = 0
    IDENTIFIER = 1
    OPERATOR = 2
    BOOLEAN_LITERAL = 3
    OPEN_PAREN = 4
    CLOSE_PAREN = 5
    ILLEGAL = -1


@dataclass(frozen=True)
class Token:
    literal: str
    position: int
    kind: TokenKind


_BOOLEAN_WORDS: Final = ('true', 'false')

_scan = make_tokenizer([
    # an unterminated bracket runs to the end of the input
    TokenSpec('bracket', r'\[[^\]]*\]?'),
    TokenSpec('char', r'[\s\S]'),
])


class Lexer:
    """Pull-based tokenizer over a single formula string.

    Every call to `next_token` yields the next token; once the input is
    exhausted it keeps returning END_OF_INPUT. Malformed input never raises,
    it comes out as ILLEGAL tokens instead.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._raw = iter(_scan(source))
        self._offset = 0

    def next_token(self) -> Token:
        for raw in self._raw:
            position = self._offset + 1
            self._offset += len(raw.value)
            if is_whitespace(raw.value):
                continue
            token = self._classify(raw, position)
            if token.kind is TokenKind.ILLEGAL:
                logger.debug('illegal token %r at %d', token.literal, position)
            return token
        return Token('', self._offset, TokenKind.END_OF_INPUT)

    def tokens(self) -> Generator[Token, None, None]:
        token = self.next_token()
        while token.kind is not TokenKind.END_OF_INPUT:
            yield token
            token = self.next_token()
        yield token

    @staticmethod
    def _classify(raw: RawToken, position: int) -> Token:
        char = raw.value
        if raw.type == 'bracket':
            word = char[1:-1] if char.endswith(']') else None
            if word in _BOOLEAN_WORDS:
                return Token(word, position, TokenKind.BOOLEAN_LITERAL)
            return Token('[' + char[1:].rstrip(']'), position,
                         TokenKind.ILLEGAL)
        if is_identifier(char):
            return Token(char, position, TokenKind.IDENTIFIER)
        if is_operator(char):
            return Token(char, position, TokenKind.OPERATOR)
        if char == '(':
            return Token(char, position, TokenKind.OPEN_PAREN)
        if char == ')':
            return Token(char, position, TokenKind.CLOSE_PAREN)
        return Token(char, position, TokenKind.ILLEGAL)


def tokenize(s: str) -> List[Token]:
    return list(Lexer(s).tokens())
