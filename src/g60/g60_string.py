"""
검증된 G60 문자열 값 타입
"""

from g60 import codec
from g60.verification import is_valid, verify


class G60String:
    """생성 시점에 검증된(정규) G60 문자열. 불변 값 객체입니다."""

    __slots__ = ("_value",)

    def __init__(self, value: str):
        verify(value)
        self._value = value

    @classmethod
    def encode(cls, content: bytes) -> "G60String":
        obj = cls.__new__(cls)
        obj._value = codec.encode(content)
        return obj

    @classmethod
    def encode_str(cls, text: str) -> "G60String":
        return cls.encode(text.encode("utf-8"))

    @staticmethod
    def is_valid(value: str) -> bool:
        return is_valid(value)

    @property
    def value(self) -> str:
        return self._value

    def decode(self) -> bytes:
        return codec.decode(self._value)

    def to_text(self) -> str:
        return codec.decode_to_string(self._value)

    def byte_length(self) -> int:
        return codec.decoded_size(len(self._value))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"G60String({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other):
        if isinstance(other, G60String):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)
