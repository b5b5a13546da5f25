"""
G60 문자열 검증 및 정규화
"""

from g60.codec import decode, decode_lenient, encode
from g60.errors import G60Error


def verify(encoded: str) -> None:
    """decode와 같은 조건으로 검증합니다. 실패 시 G60Error 하위 예외."""
    decode(encoded)


def is_valid(encoded: str) -> bool:
    try:
        verify(encoded)
    except G60Error:
        return False
    return True


def canonicalize(encoded: str) -> str:
    """
    비정규 문자열을 같은 길이의 정규 형태로 바꿉니다.
    예: "001" -> "000"
    잘못된 문자나 길이는 그대로 예외가 발생합니다.
    """
    return encode(decode_lenient(encoded))


def is_canonical(encoded: str) -> bool:
    """encode(decode(encoded)) == encoded 인지 여부. 예외를 발생시키지 않습니다."""
    try:
        return canonicalize(encoded) == encoded
    except G60Error:
        return False
