"""
Core domain models, digit-sequence arithmetic, and invariants.

This module contains the foundational building blocks of the BigInt engine:
pure functions and immutable values with no I/O and no shared state.
"""
