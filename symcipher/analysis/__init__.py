"""
Analysis Package

This package implements statistical measurements of the keystream and
cipher output, used to spot scheduling defects such as keys that
collide or skewed keystream distributions.
"""

from .keystream_stats import (
    calculate_chi_square,
    calculate_key_sensitivity,
    calculate_shannon_entropy,
    evaluate_keystream,
    keystream_histogram,
    symbol_histogram,
)

__all__ = ['calculate_chi_square', 'calculate_key_sensitivity',
           'calculate_shannon_entropy', 'evaluate_keystream',
           'keystream_histogram', 'symbol_histogram']
