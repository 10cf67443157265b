"""라이브러리 설정"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings

from securekit.constants import PasswordConstants, SecurityConstants


class Settings(BaseSettings):
    """라이브러리 설정"""

    # 기본 설정
    log_level: str = "INFO"

    # 솔트 해싱 설정
    hash_algorithm: str = SecurityConstants.DEFAULT_HASH_ALGORITHM
    salt_length: int = SecurityConstants.DEFAULT_SALT_LENGTH
    text_encoding: str = SecurityConstants.DEFAULT_TEXT_ENCODING

    # bcrypt 설정
    bcrypt_rounds: int = SecurityConstants.BCRYPT_ROUNDS

    # 친화적 비밀번호 설정
    friendly_password_min_length: int = PasswordConstants.FRIENDLY_MIN_LENGTH
    friendly_password_max_length: int = PasswordConstants.FRIENDLY_MAX_LENGTH

    @field_validator("salt_length")
    @classmethod
    def validate_salt_length(cls, v: int) -> int:
        """솔트 길이는 양수여야 함"""
        if v <= 0:
            raise ValueError("SALT_LENGTH는 양의 정수여야 합니다.")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt cost factor 범위 검증"""
        if not SecurityConstants.BCRYPT_MIN_ROUNDS <= v <= SecurityConstants.BCRYPT_MAX_ROUNDS:
            raise ValueError(
                f"BCRYPT_ROUNDS는 {SecurityConstants.BCRYPT_MIN_ROUNDS}~"
                f"{SecurityConstants.BCRYPT_MAX_ROUNDS} 사이여야 합니다."
            )
        return v

    @model_validator(mode="after")
    def validate_friendly_lengths(self) -> "Settings":
        """친화적 비밀번호 길이 범위 검증"""
        if self.friendly_password_min_length <= 0:
            raise ValueError("친화적 비밀번호 최소 길이는 양수여야 합니다.")
        if self.friendly_password_min_length > self.friendly_password_max_length:
            raise ValueError("친화적 비밀번호 최소 길이가 최대 길이보다 클 수 없습니다.")
        return self

    model_config = {"env_file": ".env", "case_sensitive": False, "extra": "ignore"}


@lru_cache()
def get_settings() -> Settings:
    """설정 싱글톤 인스턴스 반환"""
    return Settings()


# 전역 settings 객체 생성
settings = get_settings()
