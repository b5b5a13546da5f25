"""
G60 디코딩 예외
모두 ValueError 하위 클래스이므로 기존 `except ValueError` 처리와 호환됩니다.
"""


class G60Error(ValueError):
    """G60 문자열 처리 중 발생하는 모든 오류의 기본 클래스."""


class InvalidCharacterError(G60Error):
    """알파벳에 없는 문자가 포함된 경우."""

    def __init__(self, index: int, character: str):
        self.index = index
        self.character = character
        super().__init__(f"{index}번째 문자 {character!r}는 G60 문자가 아닙니다.")


class InvalidLengthError(G60Error):
    """11자 그룹을 제외한 나머지 길이가 1, 4, 8인 경우."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"길이 {length}는 유효한 G60 문자열 길이가 아닙니다.")


class ValueOutOfRangeError(G60Error):
    """형식은 맞지만 어떤 바이트열의 인코딩 결과도 아닌 그룹."""

    def __init__(self, offset: int, group: str):
        self.offset = offset
        self.group = group
        super().__init__(f"{offset}번째 위치의 그룹 {group!r}는 정규 인코딩이 아닙니다.")


class InvalidTextError(G60Error):
    """디코딩 결과가 올바른 텍스트(UTF-8)가 아닌 경우."""

    def __init__(self, data: bytes):
        self.data = data
        super().__init__("디코딩된 바이트가 올바른 UTF-8 텍스트가 아닙니다.")
