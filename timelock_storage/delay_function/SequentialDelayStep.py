from ..mpc import MPC
from ..mpc.types import MPZ
from ..utils.validation import check_delay_depth, check_modulus
from .abstract.IDelayStep import IDelayStep


class SequentialDelayStep(IDelayStep):
    """Delay step by literal repeated squaring, using only the public modulus.

    Performs exactly 2^T modular squarings per call. This is the verifier
    path; there is no shortcut without the factorization of N.
    """

    def __init__(self, N: MPZ, delay_depth: int) -> None:
        check_modulus(N)
        check_delay_depth(delay_depth)
        self._N = MPC.mpz(N)
        self._delay_depth = delay_depth
        self._squarings = 1 << delay_depth

    def step(self, x: bytes) -> bytes:
        result = MPC.from_bytes(x)
        for _ in range(self._squarings):
            result = MPC.square_mod(result, self._N)
        return MPC.to_bytes(result)

    def get_N(self) -> MPZ:
        return self._N

    def get_delay_depth(self) -> int:
        return self._delay_depth
