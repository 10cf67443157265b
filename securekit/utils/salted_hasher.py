"""
솔트 해싱 유틸리티
보안 난수 솔트 생성, 솔트 다이제스트 계산 및 검증

주의: 반복 횟수(work factor)가 없는 단일 다이제스트이므로 비밀번호 저장에는
Password(bcrypt)를 사용하고, 이 모듈은 식별자/토큰 해싱 등에 사용합니다.
"""

import hashlib
import hmac
import logging
import secrets
from typing import Optional

from securekit.core.config import get_settings
from securekit.exceptions import (
    EncodingFailureException,
    InvalidSaltLengthException,
    RandomSourceUnavailableException,
    UnsupportedAlgorithmException,
)

logger = logging.getLogger(__name__)

settings = get_settings()


def _candidate_names(algorithm: str) -> list[str]:
    """
    알고리즘 이름을 hashlib 이름 후보로 변환

    "SHA-256" -> "sha256", "SHA3-256" -> "sha3_256", "SHA-512/256" -> "sha512_256"
    """
    name = algorithm.strip().lower()
    return [
        name,
        name.replace("-", ""),
        name.replace("-", "_"),
        name.replace("-", "").replace("/", "_"),
    ]


def _new_digest(algorithm: str):
    """
    이름에 해당하는 다이제스트 객체 생성

    Raises:
        UnsupportedAlgorithmException: 런타임에서 지원하지 않는 알고리즘인 경우
    """
    if not isinstance(algorithm, str) or not algorithm.strip():
        raise UnsupportedAlgorithmException(str(algorithm))

    for name in _candidate_names(algorithm):
        try:
            digest = hashlib.new(name)
        except (ValueError, TypeError):
            continue
        # SHAKE 계열은 출력 길이가 고정되지 않음
        if digest.digest_size == 0:
            break
        return digest

    logger.error(f"지원하지 않는 해시 알고리즘 요청: {algorithm}")
    raise UnsupportedAlgorithmException(algorithm)


def _encode(text: str, encoding: str) -> bytes:
    """문자열을 바이트로 인코딩 (실패 시 EncodingFailureException)"""
    try:
        return text.encode(encoding)
    except (UnicodeError, LookupError) as e:
        logger.error(f"문자열 인코딩 실패 ({encoding}): {type(e).__name__}")
        raise EncodingFailureException(encoding, reason=type(e).__name__) from e


class SaltedHasher:
    """솔트 해싱 클래스 (상태 없음)"""

    @staticmethod
    def generate_salt(length: Optional[int] = None) -> bytes:
        """
        보안 난수 솔트 생성

        Args:
            length: 솔트 길이 (바이트, 기본값: 설정의 salt_length = 128)

        Returns:
            보안 난수 바이트열

        Raises:
            InvalidSaltLengthException: 길이가 양의 정수가 아닌 경우
            RandomSourceUnavailableException: 보안 난수 소스를 사용할 수 없는 경우
        """
        if length is None:
            length = settings.salt_length

        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise InvalidSaltLengthException(length)

        try:
            salt = secrets.token_bytes(length)
        except (NotImplementedError, OSError) as e:
            logger.error(f"솔트 생성 중 보안 난수 소스 오류: {e}")
            raise RandomSourceUnavailableException() from e

        if len(salt) != length:
            raise RandomSourceUnavailableException(
                f"보안 난수 소스가 {length}바이트 대신 {len(salt)}바이트를 반환했습니다."
            )

        return salt

    @staticmethod
    def hash(
        plaintext: str,
        salt: bytes,
        algorithm: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> str:
        """
        솔트를 적용한 다이제스트 계산

        digest(salt || encode(plaintext)) 를 소문자 16진수로 반환

        Args:
            plaintext: 평문 (빈 문자열 허용)
            salt: 솔트 바이트열
            algorithm: 다이제스트 알고리즘 (기본값: SHA-256)
            encoding: 텍스트 인코딩 (기본값: UTF-8)

        Returns:
            16진수 해시 문자열

        Raises:
            UnsupportedAlgorithmException: 지원하지 않는 알고리즘인 경우
            EncodingFailureException: 평문을 인코딩할 수 없는 경우
        """
        if algorithm is None:
            algorithm = settings.hash_algorithm
        if encoding is None:
            encoding = settings.text_encoding

        digest = _new_digest(algorithm)
        plaintext_bytes = _encode(plaintext, encoding)

        digest.update(salt)
        digest.update(plaintext_bytes)

        return digest.hexdigest()

    @staticmethod
    def validate_hash(
        candidate: str,
        stored_hash: str,
        salt: bytes,
        algorithm: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> bool:
        """
        후보 문자열이 저장된 해시와 일치하는지 검증

        Args:
            candidate: 검증할 평문
            stored_hash: 저장된 16진수 해시
            salt: 저장된 해시에 사용된 솔트
            algorithm: 다이제스트 알고리즘 (저장 시와 동일해야 함)
            encoding: 텍스트 인코딩

        Returns:
            일치 여부 (불일치는 예외가 아닌 False)
        """
        if not isinstance(stored_hash, str):
            return False

        computed = SaltedHasher.hash(candidate, salt, algorithm, encoding)

        # 타이밍 공격 방지를 위한 상수 시간 비교
        return hmac.compare_digest(
            computed.encode("ascii"), stored_hash.encode("utf-8", "surrogatepass")
        )


# 전역 인스턴스
salted_hasher = SaltedHasher()


def generate_salt(length: Optional[int] = None) -> bytes:
    """
    보안 난수 솔트 생성 (전역 함수)

    Args:
        length: 솔트 길이 (바이트)

    Returns:
        솔트 바이트열
    """
    return salted_hasher.generate_salt(length)


def hash_value(plaintext: str, salt: bytes, algorithm: Optional[str] = None) -> str:
    """
    솔트 해싱 (전역 함수)

    Args:
        plaintext: 평문
        salt: 솔트
        algorithm: 다이제스트 알고리즘

    Returns:
        16진수 해시 문자열
    """
    return salted_hasher.hash(plaintext, salt, algorithm)


def validate_hash(
    candidate: str, stored_hash: str, salt: bytes, algorithm: Optional[str] = None
) -> bool:
    """
    솔트 해시 검증 (전역 함수)

    Args:
        candidate: 검증할 평문
        stored_hash: 저장된 해시
        salt: 솔트
        algorithm: 다이제스트 알고리즘

    Returns:
        검증 결과
    """
    return salted_hasher.validate_hash(candidate, stored_hash, salt, algorithm)
