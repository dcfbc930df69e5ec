import logging
from typing import Iterator

from ..delay_function.abstract.IDelayStep import IDelayStep
from ..hashing import Digest
from ..utils.validation import check_round_count
from .Commitment import ChainRound, Commitment

logger = logging.getLogger(__name__)


class CommitmentChain:
    """Binds a seed and a data blob into a chain of delay-separated challenges.

    Each round computes v_i = KeyedHash(c_i, D) and the next challenge
    c_{i+1} = Digest(step(Digest(v_i))). Rounds 0 through round_count are
    all performed, so round_count = 0 still runs one round. The chain is
    identical for every IDelayStep; only the cost of step differs.
    """

    @staticmethod
    def rounds(
        seed: bytes, data: bytes, step: IDelayStep, round_count: int
    ) -> Iterator[ChainRound]:
        """Yield every round of the chain in order.

        The delay step for round i runs when round i+1 is requested, and
        once more after the last round, as every round ends with one step.

        Args:
            seed (bytes): The initial challenge c_0
            data (bytes): The data blob D, read but never copied
            step (IDelayStep): Delay function evaluator
            round_count (int): Index k of the last round

        Yields:
            ChainRound: (i, c_i, v_i) for i in 0..k
        """
        check_round_count(round_count)

        challenge = bytes(seed)
        for index in range(round_count + 1):
            response = Digest.keyed_hash(challenge, data)
            yield ChainRound(index, challenge, response)
            challenge = Digest.hash(step.step(Digest.hash(response)))
            logger.debug("Completed chain round %d/%d", index, round_count)

    @staticmethod
    def run(
        seed: bytes, data: bytes, step: IDelayStep, round_count: int
    ) -> Commitment:
        """Run the whole chain and fold it into its commitment pair.

        Args:
            seed (bytes): The initial challenge c_0
            data (bytes): The data blob D
            step (IDelayStep): Delay function evaluator
            round_count (int): Index k of the last round

        Returns:
            Commitment: (Digest(c_0..c_k), Digest(v_0..v_k))
        """
        challenges = bytearray()
        responses = bytearray()
        for chain_round in CommitmentChain.rounds(seed, data, step, round_count):
            challenges += chain_round.challenge
            responses += chain_round.response
        return Commitment(Digest.hash(challenges), Digest.hash(responses))
