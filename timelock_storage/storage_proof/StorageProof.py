import hmac
import logging
import time
from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple

from ..chain import Commitment, CommitmentChain
from ..delay_function import SequentialDelayStep, TrapdoorDelayStep
from ..mpc import MPC
from ..mpc.types import MPZ
from ..rsa import RSA
from ..utils.SystemSpecs import SystemSpecs
from ..utils.validation import (
    check_delay_depth,
    check_modulus,
    check_round_count,
    check_seed,
)

logger = logging.getLogger(__name__)

# (seed, data, p, q, delay_depth, round_count)
StoreJob = Tuple[bytes, bytes, MPZ, MPZ, int, int]
# (seed, data, N, delay_depth, round_count)
ProveJob = Tuple[bytes, bytes, MPZ, int, int]


class StorageProof:
    """Owner and verifier operations of the time-lock proof of storage.

    The owner runs setup to get the trapdoor and store to commit to data
    cheaply. A verifier who only knows N runs prove, which repeats the same
    chain with sequential squaring, and compares the two commitments.
    """

    @staticmethod
    def setup(bit_size: int) -> Tuple[MPZ, MPZ]:
        """Generate fresh trapdoor primes.

        Args:
            bit_size (int): Bit size of the modulus N = p * q

        Returns:
            Tuple[MPZ, MPZ]: The primes (p, q), each bit_size // 2 bits

        Raises:
            ParameterGenerationError: If prime generation fails
        """
        rsa = RSA(bit_size)
        return rsa.get_p(), rsa.get_q()

    @staticmethod
    def store(
        seed: bytes,
        data: bytes,
        p: MPZ,
        q: MPZ,
        delay_depth: int,
        round_count: int,
    ) -> Commitment:
        """Commit to data on the fast path using the factorization of N.

        Args:
            seed (bytes): 32-byte initial challenge
            data (bytes): The data blob
            p (MPZ): First prime factor
            q (MPZ): Second prime factor
            delay_depth (int): T, 2^T squarings per round
            round_count (int): k, rounds 0..k are performed

        Returns:
            Commitment: The (C, V) pair
        """
        check_seed(seed)
        check_delay_depth(delay_depth)
        check_round_count(round_count)

        rsa = RSA.from_primes(p, q)
        step = TrapdoorDelayStep.from_rsa(rsa, delay_depth)

        logger.debug(
            "Storing %d bytes with T=%d, k=%d", len(data), delay_depth, round_count
        )
        start_time = time.perf_counter()
        commitment = CommitmentChain.run(seed, data, step, round_count)
        logger.info(
            "Store finished %d rounds in %.3fs",
            round_count + 1, time.perf_counter() - start_time,
        )
        return commitment

    @staticmethod
    def prove(
        seed: bytes,
        data: bytes,
        N: MPZ,
        delay_depth: int,
        round_count: int,
    ) -> Commitment:
        """Recompute the commitment by sequential squaring, without the trapdoor.

        Args:
            seed (bytes): 32-byte initial challenge
            data (bytes): The data blob
            N (MPZ): Public modulus
            delay_depth (int): T, 2^T squarings per round
            round_count (int): k, rounds 0..k are performed

        Returns:
            Commitment: The (C, V) pair
        """
        check_seed(seed)
        check_modulus(N)
        check_round_count(round_count)

        step = SequentialDelayStep(MPC.mpz(N), delay_depth)

        logger.debug(
            "Proving %d bytes with T=%d, k=%d", len(data), delay_depth, round_count
        )
        start_time = time.perf_counter()
        commitment = CommitmentChain.run(seed, data, step, round_count)
        logger.info(
            "Prove finished %d rounds in %.3fs",
            round_count + 1, time.perf_counter() - start_time,
        )
        return commitment

    @staticmethod
    def verify(
        seed: bytes,
        data: bytes,
        N: MPZ,
        delay_depth: int,
        round_count: int,
        commitment: Tuple[bytes, bytes],
    ) -> bool:
        """Run prove and compare against a published commitment.

        Returns:
            bool: True if both digests match
        """
        expected = StorageProof.prove(seed, data, N, delay_depth, round_count)
        challenges, responses = commitment
        matches = hmac.compare_digest(expected.challenges, challenges) and \
            hmac.compare_digest(expected.responses, responses)
        if not matches:
            logger.info(
                "Commitment mismatch for modulus of %d bits",
                MPC.bit_length(MPC.mpz(N)),
            )
        return matches

    @staticmethod
    def store_many(
        jobs: Sequence[StoreJob], processes: Optional[int] = None
    ) -> List[Commitment]:
        """
        Run independent store jobs in parallel using multiprocessing.

        Args:
            jobs: (seed, data, p, q, delay_depth, round_count) tuples
            processes: Worker count, defaults to the host based estimate

        Returns:
            List of commitments in the same order as input jobs
        """
        if not jobs:
            return []
        num_workers = processes or SystemSpecs.get_num_parallel_processes(len(jobs))
        with Pool(num_workers) as pool:
            return pool.map(StorageProof._store_single, jobs)

    @staticmethod
    def prove_many(
        jobs: Sequence[ProveJob], processes: Optional[int] = None
    ) -> List[Commitment]:
        """
        Run independent prove jobs in parallel using multiprocessing.

        Args:
            jobs: (seed, data, N, delay_depth, round_count) tuples
            processes: Worker count, defaults to the host based estimate

        Returns:
            List of commitments in the same order as input jobs
        """
        if not jobs:
            return []
        num_workers = processes or SystemSpecs.get_num_parallel_processes(len(jobs))
        with Pool(num_workers) as pool:
            return pool.map(StorageProof._prove_single, jobs)

    # Private Methods
    # --------------

    @staticmethod
    def _store_single(args: StoreJob) -> Commitment:
        """Helper method to run a single store job for multiprocessing."""
        return StorageProof.store(*args)

    @staticmethod
    def _prove_single(args: ProveJob) -> Commitment:
        """Helper method to run a single prove job for multiprocessing."""
        return StorageProof.prove(*args)
