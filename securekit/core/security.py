"""
보안 서비스 통합 모듈
솔트 해싱, 비밀번호, 토큰 생성 기능을 하나로 묶음
"""

import logging
import uuid
from typing import Optional, Tuple

from securekit.core.config import get_settings
from securekit.utils.password import Password, generate_friendly_password
from securekit.utils.salted_hasher import salted_hasher

logger = logging.getLogger(__name__)

settings = get_settings()


class SecurityService:
    """보안 서비스 통합 클래스"""

    def __init__(
        self, algorithm: Optional[str] = None, salt_length: Optional[int] = None
    ):
        self.salted_hasher = salted_hasher
        self.algorithm = algorithm if algorithm is not None else settings.hash_algorithm
        self.salt_length = (
            salt_length if salt_length is not None else settings.salt_length
        )

    def create_credential(self, plaintext: str) -> Tuple[str, bytes]:
        """
        새 솔트를 생성하여 평문을 해싱

        솔트 생성에 실패하면 예외가 전파되어 자격 증명 생성이 중단됩니다.

        Args:
            plaintext: 평문

        Returns:
            (16진수 해시, 솔트)
        """
        salt = self.salted_hasher.generate_salt(self.salt_length)
        hashed = self.salted_hasher.hash(plaintext, salt, self.algorithm)

        logger.debug(f"자격 증명 생성 완료 (algorithm={self.algorithm})")
        return hashed, salt

    def verify_credential(self, candidate: str, hashed: str, salt: bytes) -> bool:
        """
        저장된 해시/솔트 쌍으로 평문 검증

        Args:
            candidate: 검증할 평문
            hashed: 저장된 해시
            salt: 저장된 솔트

        Returns:
            검증 결과
        """
        return self.salted_hasher.validate_hash(
            candidate, hashed, salt, self.algorithm
        )

    @staticmethod
    def generate_friendly_password() -> str:
        """친화적인 일회용 비밀번호 생성"""
        return generate_friendly_password()

    @staticmethod
    def generate_token() -> str:
        """
        고유 토큰 생성 (UUID4)

        Returns:
            생성된 토큰
        """
        return str(uuid.uuid4())

    @staticmethod
    def new_password(value: Optional[str] = None) -> Password:
        """플루언트 비밀번호 객체 생성"""
        return Password(value)


# 전역 보안 서비스 인스턴스
security_service = SecurityService()


def create_credential(plaintext: str) -> Tuple[str, bytes]:
    """
    자격 증명 생성 (전역 함수)

    Args:
        plaintext: 평문

    Returns:
        (16진수 해시, 솔트)
    """
    return security_service.create_credential(plaintext)


def verify_credential(candidate: str, hashed: str, salt: bytes) -> bool:
    """
    자격 증명 검증 (전역 함수)

    Args:
        candidate: 검증할 평문
        hashed: 저장된 해시
        salt: 저장된 솔트

    Returns:
        검증 결과
    """
    return security_service.verify_credential(candidate, hashed, salt)


def generate_token() -> str:
    """토큰 생성 (전역 함수)"""
    return security_service.generate_token()
