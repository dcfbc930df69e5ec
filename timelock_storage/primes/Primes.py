import logging

from ..exceptions import ParameterGenerationError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..random import Random
from .abstract.IPrimes import IPrimes

logger = logging.getLogger(__name__)


class Primes(IPrimes):
    """Implementation of prime number generation."""

    @staticmethod
    def get_prime(bit_size: int) -> MPZ:
        if bit_size < 2:
            raise ValueError(f"Prime bit size must be at least 2, got {bit_size}")

        # Get random state for generating random numbers
        rand = Random.get_random(bit_size)

        # Force the top two bits so a product of two such primes has exactly
        # twice as many bits
        top_bits = MPC.pow(MPC.mpz(2), bit_size - 1)
        free_bits = bit_size - 1
        if bit_size >= 3:
            top_bits += MPC.pow(MPC.mpz(2), bit_size - 2)
            free_bits = bit_size - 2
        random_num = MPC.mpz_urandomb(rand, free_bits) + top_bits

        # Get next prime after the random number
        prime = MPC.next_prime(random_num)
        if MPC.bit_length(prime) != bit_size:
            raise ParameterGenerationError(
                f"Prime search exhausted the {bit_size}-bit range"
            )

        logger.debug("Generated %d-bit prime", bit_size)
        return prime
