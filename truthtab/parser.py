__all__ = [
    'PRECEDENCE', 'get_precedence', 'to_postfix',
    'FormulaSyntaxError', 'check_syntax', 'parse']

import logging
from typing import Final, Iterable, List, Optional, Sequence

from funcparserlib.parser import (
    NoParseError, Parser, finished, forward_decl, many, some)

from .lexer import Token, TokenKind

logger = logging.getLogger(__name__)

PRECEDENCE: Final = {
    '~': 6,
    '∧': 5,
    'v': 4,
    '⊻': 3,
    '→': 2,
    '↔': 1,
}
_PREFIX: Final = frozenset('~')


def get_precedence(token: Token) -> int:
    return PRECEDENCE.get(token.literal, 0)


def to_postfix(tokens: Iterable[Token]) -> List[Token]:
    """Reorder infix tokens into postfix order (shunting-yard).

    Nothing is validated here: an unmatched ``)`` empties the operator
    stack, an unmatched ``(`` ends up in the output, and tokens of any
    other kind (end of input, illegal) are dropped.
    """
    queue: List[Token] = []
    ops: List[Token] = []

    for token in tokens:
        if token.kind in (TokenKind.IDENTIFIER, TokenKind.BOOLEAN_LITERAL):
            queue.append(token)
        elif token.kind is TokenKind.OPEN_PAREN:
            ops.append(token)
        elif token.kind is TokenKind.OPERATOR:
            precedence = get_precedence(token)
            prefix = token.literal in _PREFIX
            while ops:
                top = get_precedence(ops[-1])
                # a prefix operator stacks on top of an equal one (~~A is A ~ ~)
                if top < precedence or (prefix and top == precedence):
                    break
                queue.append(ops.pop())
            ops.append(token)
        elif token.kind is TokenKind.CLOSE_PAREN:
            while ops and ops[-1].kind is not TokenKind.OPEN_PAREN:
                queue.append(ops.pop())
            if ops:
                ops.pop()

    while ops:
        queue.append(ops.pop())

    logger.debug('postfix: %s', ' '.join(t.literal for t in queue))
    return queue


class FormulaSyntaxError(ValueError):
    def __init__(self, message: str, position: Optional[int] = None,
                 literal: Optional[str] = None) -> None:
        if position is not None:
            message = f'{message} (at {position})'
        super().__init__(message)
        self.position = position
        self.literal = literal


def _kind(kind: TokenKind) -> Parser:
    return some(lambda t: t.kind is kind)


def _op(literal: str) -> Parser:
    return some(lambda t: t.kind is TokenKind.OPERATOR and t.literal == literal)


def _grammar() -> Parser:
    expr = forward_decl()

    atom = _kind(TokenKind.IDENTIFIER) | _kind(TokenKind.BOOLEAN_LITERAL)
    paren = -_kind(TokenKind.OPEN_PAREN) + expr + -_kind(TokenKind.CLOSE_PAREN)
    primary = forward_decl()
    neg = _op('~') + primary
    primary.define(atom | neg | paren)

    # binary tiers from the tightest binding to the loosest
    level = primary
    for op in sorted(PRECEDENCE, key=PRECEDENCE.__getitem__, reverse=True):
        if op not in _PREFIX:
            level = level + many(_op(op) + level)
    expr.define(level)

    return expr + -finished


_document: Final = _grammar()


def check_syntax(tokens: Sequence[Token]) -> None:
    """Raise `FormulaSyntaxError` unless *tokens* form a well-formed formula.

    A trailing END_OF_INPUT token is accepted and ignored.
    """
    body = [t for t in tokens if t.kind is not TokenKind.END_OF_INPUT]
    for token in body:
        if token.kind is TokenKind.ILLEGAL:
            raise FormulaSyntaxError(
                f'illegal token {token.literal!r}', token.position,
                token.literal)

    try:
        _document.parse(body)
    except NoParseError as e:
        index = e.state.max
        if index < len(body):
            bad = body[index]
            raise FormulaSyntaxError(
                f'unexpected {bad.literal!r}', bad.position,
                bad.literal) from None
        raise FormulaSyntaxError('unexpected end of formula') from None


def parse(tokens: Sequence[Token]) -> List[Token]:
    check_syntax(tokens)
    return to_postfix(tokens)


if __name__ == '__main__':
    from .lexer import tokenize
    while True:
        print(' '.join(t.literal for t in parse(tokenize(input('? ')))))
