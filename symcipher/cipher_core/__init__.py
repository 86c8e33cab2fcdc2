"""
Cipher Core Package

This package implements the SymbolCipher stream cipher engine: keystream
generation over the scheduled permutation and combination with message
symbols.
"""

from .stream_cipher import CIPHER_DEFAULT_PARAMS, SymbolCipher, generate_keystream, transform

__all__ = ['CIPHER_DEFAULT_PARAMS', 'SymbolCipher', 'generate_keystream', 'transform']
