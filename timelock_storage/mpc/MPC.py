import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, RandomState


class MPC(IMPC):
    """gmpy2 backed implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: int) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def random_state(seed: int) -> RandomState:
        return gmpy2.random_state(seed)

    @staticmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        return gmpy2.mpz_urandomb(state, bit_count)

    @staticmethod
    def next_prime(value: MPZ) -> MPZ:
        return gmpy2.next_prime(value)

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def square_mod(value: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.f_mod(value * value, mod)

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return base**exp

    @staticmethod
    def bit_length(value: MPZ) -> int:
        return gmpy2.bit_length(value)

    @staticmethod
    def from_bytes(data: bytes) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, "big"))

    @staticmethod
    def to_bytes(value: MPZ) -> bytes:
        number = int(value)
        return number.to_bytes((number.bit_length() + 7) // 8, "big")
