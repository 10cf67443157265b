"""
비밀번호 생성 및 해싱 유틸리티
bcrypt(cost factor: 설정값, 기본 12) 기반 플루언트 비밀번호 객체
"""

import base64
import hashlib
import logging
import uuid
from typing import Optional

import bcrypt

from securekit.constants import PasswordConstants, SecurityConstants
from securekit.core.config import get_settings
from securekit.utils.randomize import random_between, random_char_from_string

logger = logging.getLogger(__name__)

settings = get_settings()


def _bcrypt_input(password: str) -> bytes:
    """
    bcrypt 입력 바이트 생성

    72바이트를 넘는 비밀번호는 SHA-256 다이제스트를 base64로 인코딩하여
    bcrypt 길이 제한 안에 들어오도록 변환
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= SecurityConstants.BCRYPT_MAX_PASSWORD_BYTES:
        return password_bytes
    return base64.b64encode(hashlib.sha256(password_bytes).digest())


def generate_friendly_password(
    min_length: Optional[int] = None, max_length: Optional[int] = None
) -> str:
    """
    사용자 친화적인 비밀번호 생성

    일회용이거나 폼에 직접 입력해야 하는 짧은 수명의 비밀번호용.
    대문자 A-Z와 숫자 1-9만 사용하며 0과 O는 제외됩니다.
    비보안 난수를 사용하므로 보안성은 낮습니다.

    Args:
        min_length: 최소 길이 (기본값: 6)
        max_length: 최대 길이 (기본값: 8)

    Returns:
        생성된 비밀번호
    """
    if min_length is None:
        min_length = settings.friendly_password_min_length
    if max_length is None:
        max_length = settings.friendly_password_max_length

    password_length = random_between(min_length, max_length)

    return "".join(
        random_char_from_string(PasswordConstants.FRIENDLY_CHARACTERS)
        for _ in range(password_length)
    )


class Password:
    """해싱 전 비밀번호를 보관하는 플루언트 객체"""

    def __init__(self, value: Optional[str] = None):
        self._value = value if value is not None else ""

    def set(self, value: str) -> "Password":
        """사용자가 입력한 비밀번호로 설정"""
        self._value = value if value is not None else ""
        return self

    def generate_friendly(self) -> "Password":
        """친화적인 비밀번호 생성 (A-Z, 1-9, 6~8자)"""
        self._value = generate_friendly_password()
        return self

    def generate_secure(self) -> "Password":
        """보안 난수 기반 UUID4 비밀번호 생성"""
        self._value = str(uuid.uuid4())
        return self

    def to_upper_case(self) -> "Password":
        """대문자로 변환"""
        self._value = self._value.upper()
        return self

    def to_lower_case(self) -> "Password":
        """소문자로 변환"""
        self._value = self._value.lower()
        return self

    def hash(self, rounds: Optional[int] = None) -> str:
        """
        비밀번호를 bcrypt로 해싱

        Args:
            rounds: cost factor (기본값: 설정의 bcrypt_rounds)

        Returns:
            해싱된 비밀번호 ($2b$ 형식)
        """
        if rounds is None:
            rounds = settings.bcrypt_rounds

        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(_bcrypt_input(self._value), salt)
        return hashed.decode("utf-8")

    def verify(self, hashed_password: str) -> bool:
        """
        bcrypt 해시와 일치하는지 검증

        Args:
            hashed_password: 해싱된 비밀번호

        Returns:
            검증 결과 (형식이 잘못된 해시는 False)
        """
        try:
            return bcrypt.checkpw(
                _bcrypt_input(self._value), hashed_password.encode("utf-8")
            )
        except (ValueError, TypeError, AttributeError):
            logger.warning("잘못된 형식의 bcrypt 해시로 검증 시도")
            return False

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        # 평문 노출 방지
        return f"Password(length={len(self._value)})"
