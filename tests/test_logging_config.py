"""
로깅 설정 테스트
"""

import logging

import pytest

from securekit.core.logging_config import setup_logging
from securekit.exceptions import UnsupportedAlgorithmException
from securekit.utils.salted_hasher import SaltedHasher


@pytest.fixture(autouse=True)
def restore_package_logger():
    """테스트 후 패키지 로거의 핸들러와 레벨 복원"""
    logger = logging.getLogger("securekit")
    handlers = list(logger.handlers)
    level = logger.level

    yield

    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """로깅 설정 테스트"""

    def test_setup_logging_level(self):
        """지정한 레벨로 패키지 로거가 설정되는지 테스트"""
        logger = setup_logging("DEBUG")

        assert logger.name == "securekit"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logging_idempotent(self):
        """여러 번 호출해도 핸들러가 중복되지 않는지 테스트"""
        setup_logging("INFO")
        logger = setup_logging("INFO")

        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_failure_is_logged(self, caplog):
        """해싱 실패가 에러 레벨로 기록되는지 테스트"""
        with caplog.at_level(logging.ERROR, logger="securekit"):
            with pytest.raises(UnsupportedAlgorithmException):
                SaltedHasher.hash("secret123", b"salt", "MD2-FAKE")

        assert any("MD2-FAKE" in record.getMessage() for record in caplog.records)
        # 평문은 기록하지 않음
        assert not any("secret123" in record.getMessage() for record in caplog.records)
