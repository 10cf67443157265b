"""securekit - 솔트 해싱, 비밀번호, 입력 검증 유틸리티"""

__version__ = "0.1.0"
