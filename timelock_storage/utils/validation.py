"""Argument checks shared by the store and prove paths."""

from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import MAX_DELAY_DEPTH, SEED_SIZE


def check_delay_depth(delay_depth: int) -> None:
    if not isinstance(delay_depth, int) or isinstance(delay_depth, bool):
        raise ValueError(f"Delay depth must be an integer, got {delay_depth!r}")
    if not 0 <= delay_depth <= MAX_DELAY_DEPTH:
        raise ValueError(
            f"Delay depth must be between 0 and {MAX_DELAY_DEPTH}, got {delay_depth}"
        )


def check_round_count(round_count: int) -> None:
    if not isinstance(round_count, int) or isinstance(round_count, bool):
        raise ValueError(f"Round count must be an integer, got {round_count!r}")
    if round_count < 0:
        raise ValueError(f"Round count must be non-negative, got {round_count}")


def check_seed(seed: bytes) -> None:
    if not isinstance(seed, (bytes, bytearray)):
        raise ValueError(f"Seed must be bytes, got {type(seed).__name__}")
    if len(seed) != SEED_SIZE:
        raise ValueError(f"Seed must be {SEED_SIZE} bytes, got {len(seed)}")


def check_modulus(N: MPZ) -> None:
    if isinstance(N, bool) or not isinstance(N, (int, type(MPC.mpz(0)))):
        raise ValueError(f"Modulus must be an integer, got {type(N).__name__}")
    # N = 1 would make every evaluation collapse to 0
    if N < 2:
        raise ValueError(f"Modulus must be at least 2, got {N}")
