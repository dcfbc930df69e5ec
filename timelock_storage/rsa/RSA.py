import logging
from typing import Self

from ..exceptions import ParameterGenerationError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..primes import Primes
from ..protocol_constants import MIN_BIT_SIZE
from ..utils.validation import check_delay_depth
from .abstract.IRSA import IRSA

logger = logging.getLogger(__name__)

TWO = MPC.mpz(2)


class RSA(IRSA):
    """RSA modulus together with its factorization, the owner-only trapdoor."""

    def __init__(self, bit_size: int) -> None:
        """Initialize RSA by generating two random prime numbers.

        Args:
            bit_size (int): Number of bits for RSA modulus.
                          Each prime will be bit_size // 2 bits.

        Raises:
            ValueError: If bit_size is too small to split into two primes.
            ParameterGenerationError: If prime generation fails.
        """
        if bit_size < MIN_BIT_SIZE:
            raise ValueError(
                f"Modulus bit size must be at least {MIN_BIT_SIZE}, got {bit_size}"
            )

        prime_size = bit_size >> 1
        p = Primes.get_prime(prime_size)
        q = Primes.get_prime(prime_size)
        self._set_primes(p, q)
        logger.debug("Generated %d-bit RSA modulus", MPC.bit_length(self._N))

    @classmethod
    def from_primes(cls, p: MPZ, q: MPZ) -> Self:
        """Build the trapdoor from already known primes.

        Args:
            p (MPZ): First prime factor
            q (MPZ): Second prime factor, distinct from p

        Returns:
            RSA: Instance holding p, q, N and φ(N)
        """
        instance = cls.__new__(cls)
        instance._set_primes(MPC.mpz(p), MPC.mpz(q))
        return instance

    def get_p(self) -> MPZ:
        return self._p

    def get_q(self) -> MPZ:
        return self._q

    def get_N(self) -> MPZ:
        return self._N

    def get_phi(self) -> MPZ:
        return self._phi

    def get_trapdoor_exponent(self, delay_depth: int) -> MPZ:
        check_delay_depth(delay_depth)

        # 2^(2^T) mod φ, computed without building the 2^T-bit power itself
        squarings = MPC.pow(TWO, delay_depth)
        exponent = MPC.powmod(TWO, squarings, self._phi)

        # Only 0 when φ divides 2^(2^T); φ is the congruent non-zero exponent
        if exponent == 0:
            return self._phi
        return exponent

    # Private methods
    # --------------

    def _set_primes(self, p: MPZ, q: MPZ) -> None:
        if p == q:
            raise ParameterGenerationError("The two RSA primes must be distinct")
        self._p = p
        self._q = q

        # Calculate modulus N and Euler's totient
        self._N = self._calculate_N()
        self._phi = self._calculate_phi()

    def _calculate_N(self) -> MPZ:
        """Calculate the RSA modulus N = p * q."""
        return MPC.mpz(self._p * self._q)

    def _calculate_phi(self) -> MPZ:
        """Calculate Euler's totient φ(N) = (p-1)(q-1)."""
        return MPC.mpz((self._p - 1) * (self._q - 1))
