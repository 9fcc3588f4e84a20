__all__ = [
    'WHITESPACE', 'OPERATORS',
    'is_whitespace', 'is_identifier', 'is_operator']

from typing import Final

WHITESPACE: Final = ' \t\n'
# negation, disjunction, conjunction, implication, biconditional, xor
OPERATORS: Final = '~v∧→↔⊻'


def is_whitespace(char: str) -> bool:
    return len(char) == 1 and char in WHITESPACE


def is_identifier(char: str) -> bool:
    """Only single uppercase ASCII letters name variables."""
    return len(char) == 1 and 'A' <= char <= 'Z'


def is_operator(char: str) -> bool:
    return len(char) == 1 and char in OPERATORS
