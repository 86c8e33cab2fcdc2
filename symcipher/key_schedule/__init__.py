"""
Key Schedule Package

This package implements the key-scheduling algorithm that turns the
identity permutation into a key-dependent permutation state.
"""

from .permutation_schedule import (
    STATE_SIZE,
    identity_state,
    is_permutation,
    schedule_permutation,
    swap,
)

__all__ = ['STATE_SIZE', 'identity_state', 'is_permutation',
           'schedule_permutation', 'swap']
