"""
테스트용 공통 설정 및 픽스처
"""

import pytest

from securekit.utils.salted_hasher import SaltedHasher


@pytest.fixture
def salt():
    """테스트용 128바이트 솔트"""
    return SaltedHasher.generate_salt(128)


@pytest.fixture
def fixed_salt():
    """결정적 결과 확인용 고정 솔트"""
    return bytes(range(16))


@pytest.fixture
def fast_bcrypt_rounds():
    """테스트 속도를 위한 최소 bcrypt cost factor"""
    return 4
