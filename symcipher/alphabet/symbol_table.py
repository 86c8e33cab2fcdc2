"""
Symbol Table

This module builds the cipher alphabet and converts text to and from
sequences of alphabet indices. Only the space character, lowercase
letters and digits are accepted.
"""

import string
from typing import Dict, Iterable, List


def build_alphabet() -> str:
    """
    Build the alphabet string: a space, then 'a'..'z', then '0'..'9'.

    Returns:
        The 37-symbol alphabet in index order
    """
    return ' ' + string.ascii_lowercase + string.digits


ALPHABET = build_alphabet()
ALPHABET_SIZE = len(ALPHABET)

# Reverse table for O(1) symbol -> index lookup
_SYMBOL_INDEX: Dict[str, int] = {symbol: i for i, symbol in enumerate(ALPHABET)}


class InvalidSymbol(ValueError):
    """Raised when a character is not part of the alphabet."""

    def __init__(self, symbol: str, position: int = -1):
        self.symbol = symbol
        self.position = position
        if position >= 0:
            message = f"Symbol {symbol!r} at position {position} is not in the alphabet"
        else:
            message = f"Symbol {symbol!r} is not in the alphabet"
        super().__init__(message)


def symbol_to_index(symbol: str) -> int:
    """
    Look up the alphabet index of a single symbol.

    Args:
        symbol: A one-character string

    Returns:
        The index of the symbol in the alphabet (0..36)

    Raises:
        InvalidSymbol: If the symbol is not in the alphabet
    """
    try:
        return _SYMBOL_INDEX[symbol]
    except KeyError:
        raise InvalidSymbol(symbol) from None


def index_to_symbol(index: int) -> str:
    """
    Look up the symbol stored at an alphabet index.

    Args:
        index: An index in [0, ALPHABET_SIZE)

    Returns:
        The symbol at that index
    """
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"Index must be in [0, {ALPHABET_SIZE}), got {index}")
    return ALPHABET[index]


def to_indices(text: str) -> List[int]:
    """
    Convert text to a list of alphabet indices, preserving order.

    Args:
        text: The text to convert

    Returns:
        One index per character of text

    Raises:
        InvalidSymbol: For the first character not in the alphabet
    """
    indices = []
    for position, symbol in enumerate(text):
        index = _SYMBOL_INDEX.get(symbol)
        if index is None:
            raise InvalidSymbol(symbol, position)
        indices.append(index)
    return indices


def to_text(indices: Iterable[int]) -> str:
    """
    Convert a sequence of alphabet indices back to text.

    Args:
        indices: Indices in [0, ALPHABET_SIZE)

    Returns:
        The concatenated symbols
    """
    return ''.join(index_to_symbol(i) for i in indices)


def is_valid_text(text: str) -> bool:
    """Return True if every character of text is in the alphabet."""
    return all(symbol in _SYMBOL_INDEX for symbol in text)


if __name__ == "__main__":
    print(f"Alphabet ({ALPHABET_SIZE} symbols): {ALPHABET!r}")

    indices = to_indices("hello world")
    print(f"'hello world' -> {indices}")
    assert to_text(indices) == "hello world"

    try:
        to_indices("Hello")
        print("ERROR: uppercase symbol not rejected!")
    except InvalidSymbol as e:
        print(f"Correctly rejected invalid symbol: {e}")

    print("Symbol table tests completed successfully!")
