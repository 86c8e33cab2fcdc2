"""
Alphabet Package

This package implements the fixed 37-symbol alphabet (space, lowercase
letters and digits) and the conversion between symbols and indices.
"""

from .symbol_table import (
    ALPHABET,
    ALPHABET_SIZE,
    InvalidSymbol,
    build_alphabet,
    index_to_symbol,
    is_valid_text,
    symbol_to_index,
    to_indices,
    to_text,
)

__all__ = ['ALPHABET', 'ALPHABET_SIZE', 'InvalidSymbol', 'build_alphabet',
           'index_to_symbol', 'is_valid_text', 'symbol_to_index',
           'to_indices', 'to_text']
