"""
예외 클래스 패키지

- base: 기본 예외 클래스
- security: 솔트 생성 및 해싱 관련 예외
"""

from .base import SecurityException
from .security import (
    EncodingFailureException,
    InvalidSaltLengthException,
    RandomSourceUnavailableException,
    UnsupportedAlgorithmException,
)

__all__ = [
    # Base exceptions
    "SecurityException",
    # Hashing exceptions
    "RandomSourceUnavailableException",
    "UnsupportedAlgorithmException",
    "EncodingFailureException",
    "InvalidSaltLengthException",
]
