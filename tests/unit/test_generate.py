"""
로컬 유닛 테스트 - 무작위 문자열 생성
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from g60.alphabet import encoded_size
from g60.codec import decode, encode
from g60.generate import random_bytes, random_str, unsecure_random_bytes
from g60.verification import is_canonical


def test_random_bytes():
    for byte_count in range(0, 40):
        encoded = random_bytes(byte_count)
        assert len(encoded) == encoded_size(byte_count)
        assert len(decode(encoded)) == byte_count
        assert is_canonical(encoded)


def test_random_bytes_custom_rng():
    assert random_bytes(5, rng=lambda n: b"\x00" * n) == "0" * 7
    assert random_bytes(13, rng=lambda n: b"Hello, world!"[:n]) == "Gt4CGFiHehzRzjCF16"


def test_random_bytes_rng_wrong_size():
    with pytest.raises(ValueError):
        random_bytes(4, rng=lambda n: b"\x00")


def test_unsecure_random_bytes_is_reproducible():
    assert unsecure_random_bytes(20, seed=7) == unsecure_random_bytes(20, seed=7)
    assert is_canonical(unsecure_random_bytes(20, seed=7))


@pytest.mark.parametrize("length", [0, 2, 3, 5, 6, 7, 9, 10, 11, 13, 33, 42])
def test_random_str_valid_length(length):
    encoded = random_str(length)
    assert len(encoded) == length
    assert encode(decode(encoded)) == encoded


@pytest.mark.parametrize("length", [1, 4, 8, 12, 15, 19, 45])
def test_random_str_invalid_length(length):
    encoded = random_str(length)
    assert len(encoded) == length - 1
    assert is_canonical(encoded)


def test_negative_counts():
    with pytest.raises(ValueError):
        random_bytes(-1)
    with pytest.raises(ValueError):
        random_str(-1)
