"""Type definitions for multi-precision computing and hashing operations."""

from typing import NewType
from gmpy2 import mpz as _mpz, random_state as _random_state

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)
RandomState = NewType("RandomState", _random_state)

# Fixed-length output of the digest primitive
DigestBytes = NewType("DigestBytes", bytes)
