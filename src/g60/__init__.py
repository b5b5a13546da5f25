"""
G60: 바이너리 <-> 60문자 텍스트 인코딩 (확장률 37.5%)
"""

from g60.alphabet import ALPHABET, PARTIAL_LENGTHS, encoded_size
from g60.codec import decode, decode_to_string, decoded_size, encode, encode_str
from g60.errors import (
    G60Error,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidTextError,
    ValueOutOfRangeError,
)
from g60.g60_string import G60String
from g60.generate import random_bytes, random_str, unsecure_random_bytes
from g60.verification import canonicalize, is_canonical, is_valid, verify

__all__ = [
    "ALPHABET",
    "PARTIAL_LENGTHS",
    "G60Error",
    "G60String",
    "InvalidCharacterError",
    "InvalidLengthError",
    "InvalidTextError",
    "ValueOutOfRangeError",
    "canonicalize",
    "decode",
    "decode_to_string",
    "decoded_size",
    "encode",
    "encode_str",
    "encoded_size",
    "is_canonical",
    "is_valid",
    "random_bytes",
    "random_str",
    "unsecure_random_bytes",
    "verify",
]
