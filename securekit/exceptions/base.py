"""
기본 예외 클래스
"""


class SecurityException(Exception):
    """보안 유틸리티 관련 예외 기본 클래스"""

    def __init__(
        self,
        detail: str = "보안 처리 중 오류가 발생했습니다.",
        error_code: str | None = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code
