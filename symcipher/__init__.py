"""
SymCipher - Alphabet Stream Cipher Library

This library implements a small RC4-style stream cipher over a
restricted alphabet of 37 symbols (space, lowercase letters and digits).
Messages and keys are drawn from the alphabet, and the output is text of
the same alphabet and length.

The cipher is a teaching and compatibility tool. It is NOT secure.

Key Features:
- 37-symbol alphabet with O(1) symbol/index lookup
- RC4-style key schedule over a 32-entry permutation
- Keystream combination reduced modulo the alphabet size
- Keystream statistics (chi-square, entropy, key sensitivity)
- Command-line front end with key-length policy

"""

__version__ = '0.1.0'
__author__ = 'SymCipher Team'
