from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IRSA(ABC):
    """Abstract base class defining the interface for the RSA trapdoor parameters."""

    @abstractmethod
    def get_p(self) -> MPZ:
        """Get the first prime factor p.

        Returns:
            MPZ: The prime number p
        """

    @abstractmethod
    def get_q(self) -> MPZ:
        """Get the second prime factor q.

        Returns:
            MPZ: The prime number q
        """

    @abstractmethod
    def get_N(self) -> MPZ:
        """Get the public modulus N = p * q.

        Returns:
            MPZ: The modulus N
        """

    @abstractmethod
    def get_phi(self) -> MPZ:
        """Get Euler's totient φ(N) = (p-1)(q-1).

        Returns:
            MPZ: The value of Euler's totient function
        """

    @abstractmethod
    def get_trapdoor_exponent(self, delay_depth: int) -> MPZ:
        """Get the reduced exponent e with x^e ≡ x^(2^(2^T)) (mod N).

        Args:
            delay_depth (int): The delay depth T

        Returns:
            MPZ: 2^(2^T) reduced modulo φ(N)
        """
