# protocol_constants.py

BIT_SIZE = 2048  # RSA modulus bit size, each prime is BIT_SIZE // 2 bits
DELAY_DEPTH = 28  # T - each chain round performs 2^T sequential squarings
MAX_DELAY_DEPTH = 64  # Largest accepted T
MIN_BIT_SIZE = 16  # Smallest modulus whose half-size range holds enough distinct primes
SEED_SIZE = 32  # Bytes in the initial challenge c_0
ROUNDS_PER_MONTH = 720  # Benchmark convention: round_count = months * ROUNDS_PER_MONTH
