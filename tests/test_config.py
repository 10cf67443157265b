"""
설정 테스트
"""

import pytest
from pydantic import ValidationError

from securekit.core.config import Settings, get_settings


class TestSettings:
    """설정 클래스 테스트"""

    def test_defaults(self, monkeypatch):
        """기본값 테스트"""
        for name in ("HASH_ALGORITHM", "SALT_LENGTH", "TEXT_ENCODING", "BCRYPT_ROUNDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.hash_algorithm == "SHA-256"
        assert settings.salt_length == 128
        assert settings.text_encoding == "utf-8"
        assert settings.bcrypt_rounds == 12
        assert settings.friendly_password_min_length == 6
        assert settings.friendly_password_max_length == 8

    def test_env_override(self, monkeypatch):
        """환경변수로 설정을 덮어쓸 수 있는지 테스트"""
        monkeypatch.setenv("HASH_ALGORITHM", "SHA-512")
        monkeypatch.setenv("SALT_LENGTH", "64")

        settings = Settings(_env_file=None)

        assert settings.hash_algorithm == "SHA-512"
        assert settings.salt_length == 64

    @pytest.mark.parametrize("salt_length", [0, -16])
    def test_invalid_salt_length(self, salt_length):
        """양수가 아닌 솔트 길이는 거부하는지 테스트"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, salt_length=salt_length)

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_invalid_bcrypt_rounds(self, rounds):
        """범위를 벗어난 bcrypt cost factor는 거부하는지 테스트"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, bcrypt_rounds=rounds)

    def test_invalid_friendly_lengths(self):
        """최소 길이가 최대 길이보다 크면 거부하는지 테스트"""
        with pytest.raises(ValidationError):
            Settings(
                _env_file=None,
                friendly_password_min_length=9,
                friendly_password_max_length=8,
            )

    def test_get_settings_cached(self):
        """설정 싱글톤 테스트"""
        assert get_settings() is get_settings()
