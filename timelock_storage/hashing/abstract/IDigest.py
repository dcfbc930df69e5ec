from abc import ABC, abstractmethod
from ...mpc.types import DigestBytes


class IDigest(ABC):
    """Abstract base class defining the interface for the digest primitives."""

    @staticmethod
    @abstractmethod
    def hash(data: bytes) -> DigestBytes:
        """Collision resistant digest of a byte sequence.

        Args:
            data (bytes): Message to hash

        Returns:
            DigestBytes: Fixed-length digest
        """

    @staticmethod
    @abstractmethod
    def keyed_hash(key: bytes, message: bytes) -> DigestBytes:
        """Keyed digest binding a key to a message.

        Args:
            key (bytes): The key, here the current chain challenge
            message (bytes): The message, here the stored data blob

        Returns:
            DigestBytes: Fixed-length keyed digest
        """
