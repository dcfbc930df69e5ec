import hashlib

from ..mpc.types import DigestBytes
from .abstract.IDigest import IDigest

DIGEST_SIZE = hashlib.sha3_256().digest_size


class Digest(IDigest):
    """SHA3-256 digest and key-prefix MAC.

    Keccak has no length-extension weakness, so hashing key || message is a
    sound MAC and the nested HMAC construction is not needed. Swapping in a
    Merkle-Damgard hash (SHA-2) would require HMAC instead.
    """

    @staticmethod
    def hash(data: bytes) -> DigestBytes:
        return hashlib.sha3_256(data).digest()

    @staticmethod
    def keyed_hash(key: bytes, message: bytes) -> DigestBytes:
        hasher = hashlib.sha3_256()
        hasher.update(key)
        hasher.update(message)
        return hasher.digest()
