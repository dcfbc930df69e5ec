import hashlib

import pytest
from unittest.mock import patch
from gmpy2 import mpz

import timelock_storage
from timelock_storage import Commitment, StorageProof
from timelock_storage.exceptions import ParameterGenerationError
from timelock_storage.primes import Primes
from timelock_storage.protocol_constants import MIN_BIT_SIZE
from timelock_storage.random import Random

BIT_SIZE = 128  # Smaller size for quicker testing


def sha3(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


@pytest.fixture(scope="module")
def primes():
    """Fixture with one set of fresh trapdoor primes for the module."""
    return StorageProof.setup(BIT_SIZE)


@pytest.fixture
def seed():
    return Random.get_seed()


@pytest.fixture
def data():
    return bytes(range(256)) * 64


def test_setup_returns_distinct_primes(primes):
    p, q = primes
    assert p != q
    assert (p * q).bit_length() == BIT_SIZE


def test_setup_with_mocked_primes():
    with patch.object(Primes, "get_prime", side_effect=[mpz(61), mpz(53)]):
        p, q = StorageProof.setup(16)
    assert (p, q) == (mpz(61), mpz(53))


def test_setup_at_minimum_bit_size():
    """The smallest accepted modulus size can still produce a key."""
    generated = []
    for _ in range(50):
        try:
            generated.append(StorageProof.setup(MIN_BIT_SIZE))
        except ParameterGenerationError:
            continue
    assert generated
    for p, q in generated:
        assert p != q
        assert (p * q).bit_length() == MIN_BIT_SIZE


def test_setup_below_minimum_bit_size():
    with pytest.raises(ValueError):
        StorageProof.setup(MIN_BIT_SIZE - 1)


@pytest.mark.parametrize("delay_depth", [0, 1, 3])
@pytest.mark.parametrize("round_count", [0, 1, 3])
def test_store_matches_prove(primes, seed, data, delay_depth, round_count):
    p, q = primes
    stored = StorageProof.store(seed, data, p, q, delay_depth, round_count)
    proved = StorageProof.prove(seed, data, p * q, delay_depth, round_count)
    assert stored == proved


def test_store_matches_prove_concrete():
    """Zero seed, 16 zero bytes, N = 61 * 53, T = 2, k = 1."""
    seed = bytes(32)
    data = bytes(16)
    stored = StorageProof.store(seed, data, mpz(61), mpz(53), 2, 1)
    proved = StorageProof.prove(seed, data, mpz(3233), 2, 1)
    assert stored == proved

    v0 = sha3(seed + data)
    assert StorageProof.store(seed, data, mpz(61), mpz(53), 2, 0) == (
        sha3(seed),
        sha3(v0),
    )


def test_determinism(primes, seed, data):
    p, q = primes
    first = StorageProof.store(seed, data, p, q, 2, 2)
    second = StorageProof.store(seed, data, p, q, 2, 2)
    assert first == second
    assert StorageProof.prove(seed, data, p * q, 2, 2) == StorageProof.prove(
        seed, data, p * q, 2, 2
    )


def test_data_sensitivity(primes, seed, data):
    p, q = primes
    changed = bytearray(data)
    changed[-1] ^= 0x01
    original = StorageProof.store(seed, data, p, q, 2, 2)
    modified = StorageProof.store(seed, bytes(changed), p, q, 2, 2)
    assert original.responses != modified.responses
    assert original.challenges != modified.challenges


def test_seed_sensitivity(primes, data):
    p, q = primes
    first = StorageProof.store(bytes(32), data, p, q, 2, 1)
    second = StorageProof.store(bytes(31) + b"\x01", data, p, q, 2, 1)
    assert first.challenges != second.challenges
    assert first.responses != second.responses


def test_empty_data(primes, seed):
    p, q = primes
    assert StorageProof.store(seed, b"", p, q, 1, 1) == StorageProof.prove(
        seed, b"", p * q, 1, 1
    )


def test_wrong_modulus_does_not_verify(primes, seed, data):
    p, q = primes
    other_p, other_q = StorageProof.setup(BIT_SIZE)
    commitment = StorageProof.store(seed, data, p, q, 2, 2)
    assert StorageProof.verify(seed, data, p * q, 2, 2, commitment)
    assert not StorageProof.verify(seed, data, other_p * other_q, 2, 2, commitment)


def test_verify_rejects_other_data(primes, seed, data):
    p, q = primes
    commitment = StorageProof.store(seed, data, p, q, 1, 1)
    assert not StorageProof.verify(seed, data[:-1], p * q, 1, 1, commitment)
    assert StorageProof.verify(seed, data, p * q, 1, 1, commitment)


def test_verify_accepts_plain_tuple(primes, seed, data):
    p, q = primes
    challenges, responses = StorageProof.store(seed, data, p, q, 1, 0)
    assert StorageProof.verify(seed, data, p * q, 1, 0, (challenges, responses))


@pytest.mark.parametrize("bad_seed", [b"", bytes(31), bytes(33), "00" * 32])
def test_rejects_bad_seed(primes, data, bad_seed):
    p, q = primes
    with pytest.raises(ValueError):
        StorageProof.store(bad_seed, data, p, q, 1, 1)
    with pytest.raises(ValueError):
        StorageProof.prove(bad_seed, data, p * q, 1, 1)


def test_rejects_bad_parameters(primes, seed, data):
    p, q = primes
    with pytest.raises(ValueError):
        StorageProof.store(seed, data, p, q, 1, -1)
    with pytest.raises(ValueError):
        StorageProof.store(seed, data, p, q, 65, 1)
    with pytest.raises(ValueError):
        StorageProof.prove(seed, data, p * q, -1, 1)
    with pytest.raises(ValueError):
        StorageProof.prove(seed, data, mpz(1), 1, 1)


def test_store_many_and_prove_many(primes, data):
    p, q = primes
    other_p, other_q = StorageProof.setup(BIT_SIZE)
    seeds = [Random.get_seed() for _ in range(3)]
    store_jobs = [
        (seeds[0], data, p, q, 1, 1),
        (seeds[1], data[:100], other_p, other_q, 2, 0),
        (seeds[2], b"", p, q, 0, 2),
    ]
    prove_jobs = [
        (job_seed, blob, job_p * job_q, delay_depth, round_count)
        for job_seed, blob, job_p, job_q, delay_depth, round_count in store_jobs
    ]

    stored = StorageProof.store_many(store_jobs)
    proved = StorageProof.prove_many(prove_jobs, processes=1)

    assert stored == [StorageProof.store(*job) for job in store_jobs]
    assert proved == stored
    assert all(isinstance(commitment, Commitment) for commitment in proved)


def test_many_with_no_jobs():
    assert StorageProof.store_many([]) == []
    assert StorageProof.prove_many([]) == []


def test_package_level_operations(primes, seed, data):
    p, q = primes
    commitment = timelock_storage.store(seed, data, p, q, 1, 1)
    assert timelock_storage.prove(seed, data, p * q, 1, 1) == commitment
    assert timelock_storage.verify(seed, data, p * q, 1, 1, commitment)


def test_store_many_with_explicit_processes(primes, seed, data):
    p, q = primes
    jobs = [(seed, data, p, q, 1, 1), (seed, data[:10], p, q, 0, 0)]
    assert StorageProof.store_many(jobs, processes=2) == [
        StorageProof.store(*job) for job in jobs
    ]


@pytest.mark.parametrize("bad_modulus", ["3233", 3233.0, True, None])
def test_prove_rejects_non_integer_modulus(seed, data, bad_modulus):
    with pytest.raises(ValueError):
        StorageProof.prove(seed, data, bad_modulus, 1, 1)


def test_prove_accepts_plain_int_modulus(seed, data):
    assert StorageProof.prove(seed, data, 3233, 1, 1) == StorageProof.store(
        seed, data, mpz(61), mpz(53), 1, 1
    )
