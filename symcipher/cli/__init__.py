"""
Command-Line Package

This package implements the command-line front end that collects a
message and key, applies the key-length policy, and reports results.
"""

from .main import (
    DEFAULT_MIN_KEY_LENGTH,
    RequestError,
    build_parser,
    key_information,
    main,
    resolve_min_key_length,
    run_encrypt,
    validate_request,
)

__all__ = ['DEFAULT_MIN_KEY_LENGTH', 'RequestError', 'build_parser',
           'key_information', 'main', 'resolve_min_key_length',
           'run_encrypt', 'validate_request']
