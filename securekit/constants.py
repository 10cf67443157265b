"""
상수 정의 모듈

라이브러리 전반에서 사용되는 상수들을 중앙 집중식으로 관리
"""

from enum import Enum


class HashAlgorithm(str, Enum):
    """자주 사용하는 다이제스트 알고리즘 이름"""

    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"
    SHA3_256 = "SHA3-256"
    SHA3_512 = "SHA3-512"


class SecurityConstants:
    """해싱 관련 기본값"""

    DEFAULT_HASH_ALGORITHM = HashAlgorithm.SHA256.value
    DEFAULT_TEXT_ENCODING = "utf-8"
    DEFAULT_SALT_LENGTH = 128

    # bcrypt cost factor
    BCRYPT_ROUNDS = 12
    BCRYPT_MIN_ROUNDS = 4
    BCRYPT_MAX_ROUNDS = 31
    # bcrypt가 처리하는 최대 입력 길이 (바이트)
    BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordConstants:
    """친화적 비밀번호 생성 규칙"""

    # 0과 O는 서로 혼동되므로 제외
    FRIENDLY_CHARACTERS = "ABCDEFGHIJKLMNPQRSTUVWXYZ123456789"
    FRIENDLY_MIN_LENGTH = 6
    FRIENDLY_MAX_LENGTH = 8


class ValidationConstants:
    """입력 검증 관련 상수"""

    # 부호 없는 64비트 정수 최대값
    MAX_PHONE_NUMBER = 2**64 - 1
    MIN_EMAIL_DOMAIN_LENGTH = 4
    # 공백으로 취급하는 문자 (U+0000 ~ U+0020)
    BLANK_CHARACTERS = "".join(chr(code) for code in range(0x21))
