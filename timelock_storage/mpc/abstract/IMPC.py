from abc import ABC, abstractmethod
from ..types import MPZ, RandomState


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: int) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            MPZ: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a random state from a seed.

        Args:
            seed (int): Seed value for random state

        Returns:
            RandomState: Random state object
        """

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        """Generate a uniformly random integer in [0, 2^bit_count).

        Args:
            state (RandomState): Random state to use
            bit_count (int): Number of bits in result

        Returns:
            MPZ: Random integer
        """

    @staticmethod
    @abstractmethod
    def next_prime(value: MPZ) -> MPZ:
        """Find the next probable prime strictly greater than the given value.

        Args:
            value (MPZ): Starting value

        Returns:
            MPZ: Next probable prime
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value
            mod (MPZ): Modulus value

        Returns:
            MPZ: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def square_mod(value: MPZ, mod: MPZ) -> MPZ:
        """Compute a single modular squaring (value * value) % mod.

        Args:
            value (MPZ): Value to square
            mod (MPZ): Modulus value

        Returns:
            MPZ: Result of the squaring
        """

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp.

        Args:
            base (MPZ): Base value
            exp (MPZ): Exponent value

        Returns:
            MPZ: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def bit_length(value: MPZ) -> int:
        """Number of significant bits of a non-negative value (0 for 0)."""

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes) -> MPZ:
        """Interpret bytes as an unsigned big-endian integer.

        Args:
            data (bytes): Big-endian encoding, may be empty

        Returns:
            MPZ: The decoded integer
        """

    @staticmethod
    @abstractmethod
    def to_bytes(value: MPZ) -> bytes:
        """Encode a non-negative integer as its minimal big-endian bytes.

        Zero encodes to the empty byte string.

        Args:
            value (MPZ): Value to encode

        Returns:
            bytes: Minimal big-endian encoding
        """
