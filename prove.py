"""Script for recomputing a storage commitment without the private key."""

import argparse
import logging
import time

from dotenv import load_dotenv

from timelock_storage import Commitment, StorageProof
from timelock_storage.mpc import MPC
from timelock_storage.utils import EnvironmentManager, EnvironmentVariables

load_dotenv()


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Recompute a storage commitment using sequential squaring (no private key)."
    )
    parser.add_argument(
        "seed",
        type=str,
        help="The 32-byte seed c_0 (hex string)",
    )
    parser.add_argument(
        "data",
        type=str,
        help="Path of the stored data file",
    )
    parser.add_argument(
        "N",
        type=str,
        help="The modulus N (hex string)",
    )
    parser.add_argument(
        "k",
        type=int,
        help="The round count k (rounds 0..k)",
    )
    parser.add_argument(
        "--delay-depth",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.DELAY_DEPTH),
        help="T, each round performs 2^T sequential squarings",
    )
    parser.add_argument(
        "--expect",
        nargs=2,
        metavar=("C", "V"),
        help="Published commitment to check against (hex strings)",
    )
    return parser.parse_args()


def main() -> int:
    """Recompute the commitment and optionally check it."""
    args = parse_args()
    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    )

    # Parse inputs
    print("Parsing parameters...")
    seed = bytes.fromhex(args.seed)
    N = MPC.mpz(int(args.N, 16))
    with open(args.data, "rb") as f:
        data = f.read()

    print(f"seed = {seed.hex()}")
    print(f"N = {hex(N)}")
    print(f"T = {args.delay_depth}")
    print(f"k = {args.k}")
    print(f"data = {len(data)} bytes")

    print("\nRecomputing commitment using sequential squaring (no private key)...")
    print("This may take a while...")
    start_time = time.time()

    commitment = StorageProof.prove(seed, data, N, args.delay_depth, args.k)

    total_time = time.time() - start_time

    challenges_hex, responses_hex = commitment.hex()
    print(f"\nCommitment computed in {total_time:.2f} seconds")
    print(f"C = {challenges_hex}")
    print(f"V = {responses_hex}")

    if args.expect:
        expected = Commitment.from_hex(*args.expect)
        if commitment == expected:
            print("\nCommitment matches ✓")
            return 0
        print("\nCommitment does not match ✗")
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
