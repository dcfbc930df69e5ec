"""Commitment chain construction."""

from .Commitment import ChainRound, Commitment
from .CommitmentChain import CommitmentChain

__all__ = ["ChainRound", "Commitment", "CommitmentChain"]
