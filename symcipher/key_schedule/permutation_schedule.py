"""
Permutation Key Schedule Implementation

This module implements an RC4-style key-scheduling algorithm over a
small permutation state (32 entries by default). Key values are alphabet
indices (0..36), so values at or above the state size still add their
full magnitude before the modulo reduction.
"""

import logging
from typing import List, Sequence

logger = logging.getLogger(__name__)

# Number of entries in the permutation state
STATE_SIZE = 32


def swap(state: List[int], index1: int, index2: int) -> None:
    """
    Swap two entries of the state in place.

    Args:
        state: The permutation state
        index1: The first index
        index2: The second index
    """
    state[index1], state[index2] = state[index2], state[index1]


def identity_state(state_size: int = STATE_SIZE) -> List[int]:
    """
    Create the identity permutation [0, 1, ..., state_size - 1].

    Args:
        state_size: Number of entries in the state

    Returns:
        The identity permutation
    """
    if state_size <= 0:
        raise ValueError("State size must be positive")
    return list(range(state_size))


def schedule_permutation(key_indices: Sequence[int], state_size: int = STATE_SIZE) -> List[int]:
    """
    Initialize the permutation state from a key.

    One pass over the state: j accumulates state[i] and the key value at
    i mod key length, and state[i] is swapped with state[j].

    Args:
        key_indices: The key as alphabet indices, consumed cyclically
        state_size: Number of entries in the state (default: 32)

    Returns:
        The key-dependent permutation of [0, state_size)
    """
    if len(key_indices) == 0:
        raise ValueError("Key must contain at least one symbol")

    state = identity_state(state_size)
    key_length = len(key_indices)

    j = 0
    for i in range(state_size):
        j = (j + state[i] + key_indices[i % key_length]) % state_size
        swap(state, i, j)

    logger.debug("Scheduled %d-entry permutation from %d-symbol key", state_size, key_length)
    return state


def is_permutation(state: Sequence[int], state_size: int = STATE_SIZE) -> bool:
    """
    Check that the state is a bijection on [0, state_size).

    Args:
        state: The state to check
        state_size: Expected number of entries

    Returns:
        True if every value in [0, state_size) appears exactly once
    """
    return len(state) == state_size and sorted(state) == list(range(state_size))


def test_key_schedule():
    """
    Test the key schedule implementation.
    """
    # "key1" as alphabet indices
    state = schedule_permutation([11, 5, 25, 28])

    assert is_permutation(state), "Scheduled state is not a permutation"
    assert state != identity_state(), "Schedule left the identity untouched"

    # A repeated key schedules exactly like its period
    assert schedule_permutation([1, 2]) == schedule_permutation([1, 2, 1, 2])

    print(f"Scheduled state: {state}")
    print("Key schedule test passed!")


if __name__ == "__main__":
    test_key_schedule()
