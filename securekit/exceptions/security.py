"""
솔트 생성 및 해싱 관련 예외 클래스들
"""

from .base import SecurityException


class RandomSourceUnavailableException(SecurityException):
    """보안 난수 소스를 사용할 수 없는 예외 (치명적)"""

    def __init__(
        self,
        detail: str = "보안 난수 소스를 사용할 수 없습니다. 솔트를 생성할 수 없습니다.",
    ):
        super().__init__(detail=detail, error_code="RANDOM_SOURCE_UNAVAILABLE")


class UnsupportedAlgorithmException(SecurityException):
    """지원하지 않는 다이제스트 알고리즘 예외"""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm

        detail = f"지원하지 않는 해시 알고리즘입니다: {algorithm}"

        super().__init__(detail=detail, error_code="UNSUPPORTED_ALGORITHM")


class EncodingFailureException(SecurityException):
    """문자열을 바이트로 인코딩할 수 없는 예외"""

    def __init__(self, encoding: str, reason: str | None = None):
        self.encoding = encoding
        self.reason = reason

        detail = f"문자열을 {encoding}(으)로 인코딩할 수 없습니다."
        if reason:
            detail += f" ({reason})"

        super().__init__(detail=detail, error_code="ENCODING_FAILURE")


class InvalidSaltLengthException(SecurityException, ValueError):
    """솔트 길이가 양의 정수가 아닌 예외"""

    def __init__(self, length: object):
        self.length = length

        detail = f"솔트 길이는 양의 정수여야 합니다: {length!r}"

        super().__init__(detail=detail, error_code="INVALID_SALT_LENGTH")
