import secrets
from ..mpc import MPC
from ..mpc.types import RandomState
from ..protocol_constants import SEED_SIZE
from .abstract.IRandom import IRandom


class Random(IRandom):
    """Implementation of secure random number generation."""

    @staticmethod
    def get_random(bit_size: int) -> RandomState:
        secure_seed = secrets.randbits(bit_size)
        return MPC.random_state(secure_seed)

    @staticmethod
    def get_seed(size: int = SEED_SIZE) -> bytes:
        if size <= 0:
            raise ValueError(f"Seed size must be positive, got {size}")
        return secrets.token_bytes(size)
