"""
G60 알파벳 및 길이 테이블
문자集: 0-9, A-Z(I, O 제외), a-z (60자)
"""

ALPHABET = "0123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

# 블록 = 8바이트, 그룹 = 11문자
BLOCK_BYTES = 8
GROUP_SYMBOLS = 11

# 마지막 부분 블록의 바이트 수 -> 그룹 문자 수
PARTIAL_LENGTHS = {1: 2, 2: 3, 3: 5, 4: 6, 5: 7, 6: 9, 7: 10}
# 그룹 문자 수 -> 바이트 수 (역방향)
PARTIAL_BYTES = {symbols: n for n, symbols in PARTIAL_LENGTHS.items()}

# 문자 코드 -> 숫자 값 (알파벳 외 문자는 -1)
SYMBOL_VALUES = [-1] * 128
for _value, _symbol in enumerate(ALPHABET):
    SYMBOL_VALUES[ord(_symbol)] = _value
SYMBOL_VALUES = tuple(SYMBOL_VALUES)
del _value, _symbol


def symbol_value(char: str) -> int:
    """문자 -> 숫자 값. 알파벳에 없으면 -1."""
    code = ord(char)
    if code >= len(SYMBOL_VALUES):
        return -1
    return SYMBOL_VALUES[code]


def encoded_size(byte_count: int) -> int:
    """바이트 수 -> 인코딩 결과 문자 수"""
    if byte_count < 0:
        raise ValueError("byte_count는 0 이상이어야 합니다.")
    full, rest = divmod(byte_count, BLOCK_BYTES)
    return full * GROUP_SYMBOLS + PARTIAL_LENGTHS.get(rest, 0)


def remainder_bytes(symbol_count: int):
    """
    마지막 그룹의 바이트 수를 반환합니다.
    나머지가 0이면 0, 유효하지 않은 길이(1, 4, 8)면 None.
    """
    rest = symbol_count % GROUP_SYMBOLS
    if rest == 0:
        return 0
    return PARTIAL_BYTES.get(rest)
