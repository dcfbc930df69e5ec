"""Digest and keyed-hash primitives."""

from .Digest import Digest, DIGEST_SIZE
from .abstract.IDigest import IDigest

__all__ = ["Digest", "IDigest", "DIGEST_SIZE"]
