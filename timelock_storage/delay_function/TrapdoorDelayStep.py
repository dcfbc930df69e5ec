from typing import Self

from ..mpc import MPC
from ..mpc.types import MPZ
from ..rsa.abstract.IRSA import IRSA
from ..utils.validation import check_modulus
from .abstract.IDelayStep import IDelayStep


class TrapdoorDelayStep(IDelayStep):
    """Efficient delay step using the trapdoor exponent.

    One modular exponentiation by e = 2^(2^T) mod φ(N) replaces the 2^T
    sequential squarings. The result is only correct when e was derived
    from the factorization of this same N.
    """

    def __init__(self, N: MPZ, e: MPZ) -> None:
        check_modulus(N)
        self._N = MPC.mpz(N)
        self._e = MPC.mpz(e)

    @classmethod
    def from_rsa(cls, rsa: IRSA, delay_depth: int) -> Self:
        """Derive the step from the owner's RSA parameters.

        Args:
            rsa (IRSA): RSA instance with private parameters
            delay_depth (int): The delay depth T

        Returns:
            TrapdoorDelayStep: Step bound to rsa.get_N()
        """
        return cls(rsa.get_N(), rsa.get_trapdoor_exponent(delay_depth))

    def step(self, x: bytes) -> bytes:
        y = MPC.powmod(MPC.from_bytes(x), self._e, self._N)
        return MPC.to_bytes(y)

    def get_N(self) -> MPZ:
        return self._N

    def get_e(self) -> MPZ:
        return self._e
