"""
무작위 정규 G60 문자열 생성
"""

import random
import secrets
from typing import Callable, Optional

from g60.alphabet import remainder_bytes
from g60.codec import decoded_size, encode

RandomSource = Callable[[int], bytes]


def random_bytes(byte_count: int, rng: Optional[RandomSource] = None) -> str:
    """
    byte_count 바이트의 무작위 데이터를 인코딩한 문자열을 반환합니다.
    rng는 n -> bytes 함수이며, 없으면 secrets.token_bytes를 사용합니다.
    """
    if byte_count < 0:
        raise ValueError("byte_count는 0 이상이어야 합니다.")
    rng = rng or secrets.token_bytes
    data = bytes(rng(byte_count))
    if len(data) != byte_count:
        raise ValueError(f"rng가 {byte_count}바이트 대신 {len(data)}바이트를 반환했습니다.")
    return encode(data)


def unsecure_random_bytes(byte_count: int, seed=None) -> str:
    """random.Random 기반 (재현 가능, 보안 용도 X)"""
    gen = random.Random(seed)
    return random_bytes(byte_count, rng=gen.randbytes)


def random_str(length: int, rng: Optional[RandomSource] = None) -> str:
    """
    최대 length 문자의 무작위 정규 문자열.
    length가 유효한 길이가 아니면(나머지 1, 4, 8) length - 1 문자를 만듭니다.
    """
    if length < 0:
        raise ValueError("length는 0 이상이어야 합니다.")
    if remainder_bytes(length) is None:
        length -= 1
    return random_bytes(decoded_size(length), rng=rng)
