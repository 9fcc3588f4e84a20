__all__ = [
    'TRUE_SYMBOL', 'FALSE_SYMBOL',
    'get_variables', 'substitute',
    'EvaluationError', 'evaluate',
    'generate_truth_table',
]

import logging
from typing import Callable, Dict, Final, Generator, Iterable, List, Sequence

from .lexer import Token, TokenKind

logger = logging.getLogger(__name__)

TRUE_SYMBOL: Final = 'V'
FALSE_SYMBOL: Final = 'F'


class EvaluationError(RuntimeError):
    pass


def get_variables(tokens: Iterable[Token]) -> List[str]:
    seen = set()
    variables = []
    for token in tokens:
        if token.kind is TokenKind.IDENTIFIER and token.literal not in seen:
            seen.add(token.literal)
            variables.append(token.literal)
    return variables


def substitute(tokens: Iterable[Token], variables: Sequence[str],
               values: Sequence[bool]) -> Generator[Token, None, None]:
    """Replace every identifier with the boolean literal it is assigned."""
    for token in tokens:
        if token.kind is TokenKind.IDENTIFIER:
            try:
                value = values[variables.index(token.literal)]
            except ValueError:
                raise EvaluationError(
                    f'unbound variable {token.literal!r}') from None
            yield Token(
                'true' if value else 'false', token.position,
                TokenKind.BOOLEAN_LITERAL)
        else:
            yield token


_BINARY_OPS: Final[Dict[str, Callable[[bool, bool], bool]]] = {
    '∧': lambda left, right: left and right,
    'v': lambda left, right: left or right,
    '⊻': lambda left, right: left != right,
    '→': lambda left, right: not (left and not right),
    '↔': lambda left, right: left == right,
}


def evaluate(tokens: Iterable[Token]) -> bool:
    stack: List[bool] = []

    def pop(token: Token) -> bool:
        if not stack:
            raise EvaluationError(
                f'missing operand for {token.literal!r} at {token.position}')
        return stack.pop()

    for token in tokens:
        if token.kind is TokenKind.BOOLEAN_LITERAL:
            stack.append(token.literal == 'true')
        elif token.kind is TokenKind.OPERATOR:
            if token.literal == '~':
                stack.append(not pop(token))
                continue
            try:
                op = _BINARY_OPS[token.literal]
            except KeyError:
                raise EvaluationError(
                    f'unknown operator {token.literal!r}') from None
            right = pop(token)
            left = pop(token)
            stack.append(op(left, right))
        elif token.kind is TokenKind.IDENTIFIER:
            raise EvaluationError(f'unbound variable {token.literal!r}')

    if len(stack) != 1:
        raise EvaluationError(
            f'expected a single result, got {len(stack)} values')
    return stack[0]


def _symbol(value: bool) -> str:
    return TRUE_SYMBOL if value else FALSE_SYMBOL


def generate_truth_table(tokens: Sequence[Token]) -> List[List[str]]:
    """Evaluate postfix *tokens* under every assignment of their variables.

    The first row holds the variable names. Each following row holds one
    symbol per variable plus the result, starting from all-true and counting
    down, with the first variable as the most significant bit.
    """
    variables = get_variables(tokens)
    n = len(variables)
    table = [variables]
    logger.debug('generating %d rows over %s', 2 ** n, variables)

    for i in range(2 ** n - 1, -1, -1):
        values = [bool((i >> j) & 1) for j in range(n - 1, -1, -1)]
        row = [_symbol(v) for v in values]
        row.append(_symbol(evaluate(substitute(tokens, variables, values))))
        table.append(row)

    return table
