"""
Keystream Statistics

This module scores keystreams and cipher outputs with simple
distribution statistics: symbol histograms, a chi-square distance from
the uniform distribution, Shannon entropy, and key sensitivity.
"""

import logging
from itertools import combinations
from typing import Dict, Iterable, Sequence

import numpy as np

from ..alphabet.symbol_table import ALPHABET_SIZE, to_indices
from ..cipher_core.stream_cipher import CIPHER_DEFAULT_PARAMS, SymbolCipher, generate_keystream

logger = logging.getLogger(__name__)


def symbol_histogram(text: str) -> np.ndarray:
    """
    Count how often each alphabet symbol occurs in text.

    Args:
        text: Text over the alphabet

    Returns:
        An array of ALPHABET_SIZE counts, indexed by alphabet index
    """
    indices = np.asarray(to_indices(text), dtype=np.int64)
    return np.bincount(indices, minlength=ALPHABET_SIZE)


def keystream_histogram(values: Iterable[int],
                        state_size: int = CIPHER_DEFAULT_PARAMS['state_size']) -> np.ndarray:
    """
    Count how often each keystream value occurs.

    Args:
        values: Keystream values in [0, state_size)
        state_size: Number of entries in the permutation state

    Returns:
        An array of state_size counts
    """
    values = np.asarray(list(values), dtype=np.int64)
    if values.size and (values.min() < 0 or values.max() >= state_size):
        raise ValueError(f"Keystream values must be in [0, {state_size})")
    return np.bincount(values, minlength=state_size)


def calculate_chi_square(counts: Sequence[int]) -> float:
    """
    Calculate the chi-square statistic of counts against a uniform distribution.

    Lower values indicate a flatter distribution.

    Args:
        counts: Observed count per category

    Returns:
        The chi-square statistic
    """
    observed = np.asarray(counts, dtype=np.float64)
    total = observed.sum()
    if total == 0:
        raise ValueError("Counts must not all be zero")

    expected = total / observed.size
    return float(np.sum((observed - expected) ** 2) / expected)


def calculate_shannon_entropy(counts: Sequence[int]) -> float:
    """
    Calculate the Shannon entropy of a count distribution.

    Higher values indicate better entropy properties.

    Args:
        counts: Observed count per category

    Returns:
        The entropy in bits
    """
    observed = np.asarray(counts, dtype=np.float64)
    total = observed.sum()
    if total == 0:
        raise ValueError("Counts must not all be zero")

    probabilities = observed[observed > 0] / total
    return float(-np.sum(probabilities * np.log2(probabilities)))


def calculate_key_sensitivity(message: str, keys: Sequence[str]) -> float:
    """
    Measure how often distinct keys give distinct ciphertexts.

    Args:
        message: A non-empty message to encrypt under every key
        keys: At least two distinct keys

    Returns:
        Fraction of key pairs whose ciphertexts differ (1.0 is ideal)
    """
    if not message:
        raise ValueError("Message must not be empty")

    distinct_keys = list(dict.fromkeys(keys))
    if len(distinct_keys) < 2:
        raise ValueError("At least two distinct keys are required")

    cipher = SymbolCipher()
    outputs = {key: cipher.transform(message, key) for key in distinct_keys}

    pairs = list(combinations(distinct_keys, 2))
    differing = 0
    for key1, key2 in pairs:
        if outputs[key1] != outputs[key2]:
            differing += 1
        else:
            logger.warning("Keys %r and %r produce identical output", key1, key2)

    return differing / len(pairs)


def evaluate_keystream(key: str, length: int = 1024,
                       state_size: int = CIPHER_DEFAULT_PARAMS['state_size']) -> Dict[str, float]:
    """
    Evaluate the keystream produced by a key.

    Args:
        key: Non-empty text over the alphabet
        length: Number of keystream values to sample
        state_size: Number of entries in the permutation state

    Returns:
        A dictionary of scores
    """
    if length <= 0:
        raise ValueError("Length must be positive")

    values = generate_keystream(key, length, state_size=state_size)
    counts = keystream_histogram(values, state_size=state_size)

    return {
        'chi_square': calculate_chi_square(counts),
        'entropy': calculate_shannon_entropy(counts),
        'max_entropy': float(np.log2(state_size)),
        'unique_values': int(np.count_nonzero(counts)),
    }


if __name__ == "__main__":
    metrics = evaluate_keystream("key1", 4096)

    print(f"Chi-square: {metrics['chi_square']:.2f}")
    print(f"Entropy: {metrics['entropy']:.4f} / {metrics['max_entropy']:.4f} bits")
    print(f"Unique values: {metrics['unique_values']}")

    sensitivity = calculate_key_sensitivity("attack at dawn", ["key1", "key2", "key3", "yek1"])
    print(f"Key sensitivity: {sensitivity:.2f}")
