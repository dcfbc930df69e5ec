from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class IDelayStep(ABC):
    """Abstract base class for one evaluation of the delay function x -> x^(2^(2^T)) mod N.

    Implementations differ only in how the result is reached; for the same
    modulus and delay depth every implementation returns identical bytes.
    """

    @abstractmethod
    def step(self, x: bytes) -> bytes:
        """Evaluate the delay function once.

        Args:
            x (bytes): Input interpreted as an unsigned big-endian integer

        Returns:
            bytes: Minimal big-endian encoding of the result
        """

    @abstractmethod
    def get_N(self) -> MPZ:
        """Get the public modulus N.

        Returns:
            MPZ: The modulus N
        """
