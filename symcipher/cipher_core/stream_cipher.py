"""
Stream Cipher Implementation

This module provides the SymbolCipher, an RC4-style stream cipher that
maps text over the 37-symbol alphabet to text of the same alphabet and
length. The permutation state has 32 entries and each output index is
reduced modulo the alphabet size.

This cipher is not secure and must not be used to protect data.
"""

import logging
from itertools import islice
from typing import Dict, Iterator, List

from ..alphabet.symbol_table import ALPHABET, to_indices
from ..key_schedule.permutation_schedule import STATE_SIZE, schedule_permutation, swap

logger = logging.getLogger(__name__)

# Default engine parameters
CIPHER_DEFAULT_PARAMS: Dict[str, int] = {
    'state_size': STATE_SIZE,  # Entries in the permutation state
}


class SymbolCipher:
    """
    Stream cipher over the space/lowercase/digit alphabet.

    No state survives between calls: every transform schedules a fresh
    permutation, so one instance can be shared freely.
    """

    def __init__(self, state_size: int = CIPHER_DEFAULT_PARAMS['state_size']):
        """
        Initialize the cipher.

        Args:
            state_size: Number of entries in the permutation state (default: 32)
        """
        if state_size <= 0:
            raise ValueError("State size must be positive")

        self.alphabet = ALPHABET
        self.state_size = state_size

    def schedule(self, key: str) -> List[int]:
        """
        Run the key schedule for a key.

        Args:
            key: The key text

        Returns:
            A fresh key-dependent permutation state
        """
        return schedule_permutation(to_indices(key), self.state_size)

    def keystream(self, state: List[int]) -> Iterator[int]:
        """
        Generate keystream values from a scheduled state.

        The state is modified in place as values are drawn.

        Args:
            state: A permutation state returned by schedule()

        Yields:
            Keystream values in [0, state_size)
        """
        size = self.state_size
        i = j = 0
        while True:
            i = (i + 1) % size
            j = (j + state[i]) % size
            swap(state, i, j)
            yield state[(state[i] + state[j]) % size]

    def transform(self, message: str, key: str) -> str:
        """
        Encrypt a message with a key.

        Args:
            message: Text over the alphabet (may be empty)
            key: Non-empty text over the alphabet

        Returns:
            Text over the alphabet with the same length as message

        Raises:
            InvalidSymbol: If message or key contains a symbol outside the alphabet
            ValueError: If key is empty
        """
        plain = to_indices(message)
        state = self.schedule(key)

        size = len(self.alphabet)
        cipher = [(p ^ rand) % size for p, rand in zip(plain, self.keystream(state))]

        logger.debug("Transformed %d symbols", len(cipher))
        return ''.join(self.alphabet[c] for c in cipher)

    # Alias
    encrypt = transform


def transform(message: str, key: str,
              state_size: int = CIPHER_DEFAULT_PARAMS['state_size']) -> str:
    """
    Convenience function to encrypt a message.

    Args:
        message: Text over the alphabet
        key: Non-empty text over the alphabet
        state_size: Number of entries in the permutation state (default: 32)

    Returns:
        The encrypted text
    """
    cipher = SymbolCipher(state_size=state_size)
    return cipher.transform(message, key)


def generate_keystream(key: str, length: int,
                       state_size: int = CIPHER_DEFAULT_PARAMS['state_size']) -> List[int]:
    """
    Return the first keystream values produced for a key.

    Args:
        key: Non-empty text over the alphabet
        length: Number of values to produce
        state_size: Number of entries in the permutation state (default: 32)

    Returns:
        A list of length keystream values
    """
    if length < 0:
        raise ValueError("Length must not be negative")

    cipher = SymbolCipher(state_size=state_size)
    state = cipher.schedule(key)
    return list(islice(cipher.keystream(state), length))


if __name__ == "__main__":
    message = "hello world"
    key = "key1"

    ciphertext = transform(message, key)
    print(f"Message: {message!r}")
    print(f"Key: {key!r}")
    print(f"Ciphertext: {ciphertext!r}")

    assert ciphertext == "31y4c4res0s"
    assert len(ciphertext) == len(message)
    assert transform(message, key) == ciphertext
    assert transform("", "keykey") == ""

    print("Stream cipher tests completed successfully!")
