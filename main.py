"""
Benchmark harness for the time-lock proof of storage.

For every combination of storage period (months) and data size it generates
fresh trapdoor parameters and a random seed, then times the owner's store
(trapdoor) path against the verifier's prove (sequential squaring) path and
checks that both produce the same commitment.
"""

import argparse
import logging
import time

from dotenv import load_dotenv

from timelock_storage import StorageProof
from timelock_storage.protocol_constants import ROUNDS_PER_MONTH, SEED_SIZE
from timelock_storage.random import Random
from timelock_storage.utils import EnvironmentManager, EnvironmentVariables

load_dotenv()

MEGABYTE = 1024 * 1024


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Benchmark trapdoor store against sequential prove."
    )
    parser.add_argument(
        "--months",
        type=int,
        default=4,
        help="Benchmark storage periods 1..months",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=[64, 128, 192, 256],
        help="Data sizes in MB",
    )
    parser.add_argument(
        "--rounds-per-month",
        type=int,
        default=ROUNDS_PER_MONTH,
        help="Chain rounds per month of storage",
    )
    parser.add_argument(
        "--bit-size",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.BIT_SIZE),
        help="RSA modulus bit size",
    )
    parser.add_argument(
        "--delay-depth",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.DELAY_DEPTH),
        help="T, each round performs 2^T sequential squarings",
    )
    return parser.parse_args()


def main() -> int:
    """Run the benchmark and report timings."""
    args = parse_args()
    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL).upper()
    )

    print("=" * 80)
    print("TIME-LOCK PROOF OF STORAGE BENCHMARK")
    print("=" * 80)
    print(f"  Bit size: {args.bit_size}")
    print(f"  Delay depth: {args.delay_depth}")
    print(f"  Rounds per month: {args.rounds_per_month}")

    failures = 0
    for months in range(1, args.months + 1):
        for size in args.sizes:
            print(f"\n{months} month(s), {size} MB")

            seed = Random.get_seed(SEED_SIZE)
            data = bytes(size * MEGABYTE)
            round_count = months * args.rounds_per_month

            p, q = StorageProof.setup(args.bit_size)

            start_time = time.time()
            stored = StorageProof.store(
                seed, data, p, q, args.delay_depth, round_count
            )
            print(f"store: {time.time() - start_time:.3f}s")

            start_time = time.time()
            proved = StorageProof.prove(
                seed, data, p * q, args.delay_depth, round_count
            )
            print(f"prove: {time.time() - start_time:.3f}s")

            if stored == proved:
                print("commitments match ✓")
            else:
                failures += 1
                print("commitments differ ✗")
                print(f"  store: {stored.hex()}")
                print(f"  prove: {proved.hex()}")

    return 1 if failures else 0


if __name__ == "__main__":
    exit(main())
