"""
G60 인코딩/디코딩
8바이트 블록 -> 11문자 그룹. 마지막 부분 블록은 PARTIAL_LENGTHS 길이로 잘라서 씁니다.
"""

import logging

from g60.alphabet import (
    ALPHABET,
    BLOCK_BYTES,
    GROUP_SYMBOLS,
    PARTIAL_LENGTHS,
    encoded_size,
    remainder_bytes,
    symbol_value,
)
from g60.errors import (
    InvalidCharacterError,
    InvalidLengthError,
    InvalidTextError,
    ValueOutOfRangeError,
)

logger = logging.getLogger(__name__)

_TEXT_ENCODING = "utf-8"


def _pack_block(block: bytes) -> list:
    """
    최대 8바이트 블록 -> 11개 숫자(0~59).
    부족한 뒤쪽 바이트는 0으로 취급합니다.
    """
    a, b, c, d, e, f, g, h = bytes(block).ljust(BLOCK_BYTES, b"\0")

    q2, r2 = divmod(b, 20)
    d0, d1 = divmod(14 * a + q2, 60)
    q3, r3 = divmod(c, 90)
    d3, r4 = divmod((r3 << 1) + (d >> 7), 3)
    q6, r6 = divmod(e, 30)
    q5, d5 = divmod(9 * (d & 0x7F) + q6, 60)
    q7, r7 = divmod(f, 150)
    q8, r8a = divmod(g, 144)
    d7, r8 = divmod((r7 << 1) + q8, 5)
    q9, r9 = divmod(r8a, 12)
    q10, d10 = divmod(h, 60)

    return [
        d0,
        d1,
        3 * r2 + q3,
        d3,
        20 * r4 + q5,
        d5,
        (r6 << 1) + q7,
        d7,
        12 * r8 + q9,
        5 * r9 + q10,
        d10,
    ]


def _unpack_group(digits: list) -> list:
    """
    11개 숫자 -> 8개 바이트 필드.
    정규 그룹이 아니면 255를 넘는 필드가 나올 수 있습니다.
    """
    c0, c1, c2, c3, c4, c5, c6, c7, c8, c9, c10 = digits

    b1, r1 = divmod(60 * c0 + c1, 14)
    b2, r2 = divmod(c2, 3)
    b3, r3 = divmod(c4, 20)
    aux = 3 * c3 + b3
    b4, r4 = divmod(60 * r3 + c5, 9)
    b6, r6 = divmod(60 * c7 + c8, 24)
    b7, r7 = divmod(c9, 5)

    return [
        b1,
        r1 * 20 + b2,
        r2 * 90 + (aux >> 1),
        ((aux & 1) << 7) + b4,
        r4 * 30 + (c6 >> 1),
        (c6 & 1) * 150 + b6,
        r6 * 12 + b7,
        60 * r7 + c10,
    ]


def _groups(symbol_count: int):
    """(시작 위치, 문자 수, 바이트 수)를 그룹 순서대로 생성합니다."""
    full, rest = divmod(symbol_count, GROUP_SYMBOLS)
    for i in range(full):
        yield i * GROUP_SYMBOLS, GROUP_SYMBOLS, BLOCK_BYTES
    if rest:
        yield full * GROUP_SYMBOLS, rest, remainder_bytes(symbol_count)


def _to_digits(encoded: str) -> list:
    """문자열 -> 숫자 목록. 첫 번째 잘못된 문자에서 InvalidCharacterError."""
    if not isinstance(encoded, str):
        raise TypeError(f"G60 문자열은 str이어야 합니다: {type(encoded).__name__}")
    digits = []
    for index, char in enumerate(encoded):
        value = symbol_value(char)
        if value < 0:
            raise InvalidCharacterError(index, char)
        digits.append(value)
    return digits


def decoded_size(symbol_count: int) -> int:
    """문자 수 -> 디코딩 결과 바이트 수"""
    if symbol_count < 0:
        raise ValueError("symbol_count는 0 이상이어야 합니다.")
    rest = remainder_bytes(symbol_count)
    if rest is None:
        raise InvalidLengthError(symbol_count)
    return symbol_count // GROUP_SYMBOLS * BLOCK_BYTES + rest


def _decode(encoded: str, strict: bool) -> bytes:
    digits = _to_digits(encoded)
    decoded_size(len(digits))

    out = bytearray()
    for offset, symbols, byte_count in _groups(len(digits)):
        group = digits[offset:offset + symbols]
        fields = _unpack_group(group + [0] * (GROUP_SYMBOLS - symbols))

        if not strict:
            # 비정규 그룹은 바이트 범위로 자르고 남는 바이트는 버림
            out += bytes(v & 0xFF for v in fields[:byte_count])
            continue

        if max(fields) > 0xFF or any(fields[byte_count:]):
            raise ValueOutOfRangeError(offset, encoded[offset:offset + symbols])
        block = bytes(fields[:byte_count])
        if _pack_block(block)[:symbols] != group:
            raise ValueOutOfRangeError(offset, encoded[offset:offset + symbols])
        out += block

    return bytes(out)


def encode(content: bytes) -> str:
    """바이트열 -> G60 문자열. 실패하지 않습니다."""
    if isinstance(content, (str, int)):
        raise TypeError(f"bytes 류 객체가 필요합니다: {type(content).__name__}")
    content = bytes(content)
    out = []
    for start in range(0, len(content), BLOCK_BYTES):
        block = content[start:start + BLOCK_BYTES]
        digits = _pack_block(block)
        if len(block) < BLOCK_BYTES:
            digits = digits[:PARTIAL_LENGTHS[len(block)]]
        out.extend(ALPHABET[d] for d in digits)

    logger.debug("encoded %d bytes into %d symbols", len(content), encoded_size(len(content)))
    return "".join(out)


def decode(encoded: str) -> bytes:
    """
    G60 문자열 -> 바이트열.
    잘못된 문자, 길이, 비정규 그룹이면 G60Error 하위 예외를 발생시킵니다.
    """
    result = _decode(encoded, strict=True)
    logger.debug("decoded %d symbols into %d bytes", len(encoded), len(result))
    return result


def decode_lenient(encoded: str) -> bytes:
    """
    비정규 그룹도 받아들이는 디코딩 (canonicalize 용).
    문자와 길이 오류는 그대로 발생합니다.
    """
    return _decode(encoded, strict=False)


def encode_str(text: str) -> str:
    """문자열의 UTF-8 바이트를 인코딩합니다."""
    return encode(text.encode(_TEXT_ENCODING))


def decode_to_string(encoded: str) -> str:
    """디코딩 후 UTF-8 문자열로 변환합니다. 텍스트가 아니면 InvalidTextError."""
    data = decode(encoded)
    try:
        return data.decode(_TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidTextError(data) from e
