from typing import NamedTuple, Tuple

from ..mpc.types import DigestBytes


class Commitment(NamedTuple):
    """Final output of a chain run.

    challenges is the digest of c_0 || ... || c_k and responses the digest
    of v_0 || ... || v_k. Compares equal to a plain (C, V) tuple.
    """

    challenges: DigestBytes
    responses: DigestBytes

    def hex(self) -> Tuple[str, str]:
        return self.challenges.hex(), self.responses.hex()

    @classmethod
    def from_hex(cls, challenges_hex: str, responses_hex: str) -> "Commitment":
        return cls(bytes.fromhex(challenges_hex), bytes.fromhex(responses_hex))


class ChainRound(NamedTuple):
    """Challenge and data-keyed response of one chain round."""

    index: int
    challenge: bytes
    response: DigestBytes
