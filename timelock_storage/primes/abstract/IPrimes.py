from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @staticmethod
    @abstractmethod
    def get_prime(bit_size: int) -> MPZ:
        """Get a random probable prime of exactly bit_size bits.

        Args:
            bit_size (int): Number of bits for the prime number, at least 2.

        Returns:
            MPZ: A random probable prime

        Raises:
            ParameterGenerationError: If no prime exists above the random
                starting point within bit_size bits.
        """
