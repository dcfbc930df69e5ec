"""
Time-lock proof of storage.

An owner who knows the factorization of an RSA modulus commits to a data
blob through a chain of delay function evaluations, using the trapdoor to
skip the sequential squarings. Anyone holding the same data and only the
public modulus can recompute the chain the slow way and compare.
"""

__version__ = "0.1.0"

from .chain import ChainRound, Commitment, CommitmentChain
from .exceptions import ParameterGenerationError, TimeLockStorageError
from .storage_proof import StorageProof

setup = StorageProof.setup
store = StorageProof.store
prove = StorageProof.prove
verify = StorageProof.verify

__all__ = [
    "ChainRound",
    "Commitment",
    "CommitmentChain",
    "ParameterGenerationError",
    "StorageProof",
    "TimeLockStorageError",
    "setup",
    "store",
    "prove",
    "verify",
    "__version__",
]
