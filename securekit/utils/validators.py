"""
공통 입력 검증 유틸리티 함수들
"""

from typing import Optional, Union

from securekit.constants import ValidationConstants


def is_null_or_empty(value: Optional[Union[str, bytes, bytearray]]) -> bool:
    """
    값에 실제 내용이 있는지 확인

    None, 빈 값, 공백만 있는 문자열이면 True
    공백은 U+0020 이하 문자만 해당하며 전각 공백(U+3000) 등은 내용으로 취급

    Args:
        value: 검사할 문자열 또는 바이트열

    Returns:
        비어 있으면 True, 내용이 있으면 False
    """
    if value is None:
        return True
    if isinstance(value, (bytes, bytearray)):
        return len(value) == 0
    return not value.strip(ValidationConstants.BLANK_CHARACTERS)


def is_valid_phone_number(phone_number: Optional[str]) -> bool:
    """
    전화번호 형식 검증

    국가 코드용 '+'로 시작하거나 숫자로만 구성되어야 함

    Args:
        phone_number: 검증할 전화번호

    Returns:
        유효하면 True
    """
    if is_null_or_empty(phone_number):
        return False

    digits = phone_number[1:] if phone_number.startswith("+") else phone_number

    # str.isdigit()은 유니코드 숫자도 허용하므로 ASCII로 제한
    if not digits or not digits.isascii() or not digits.isdigit():
        return False

    return int(digits) <= ValidationConstants.MAX_PHONE_NUMBER


def is_valid_email(email: Optional[str]) -> bool:
    """
    이메일 주소 형식 검증

    완전한 문법 검사가 아닌 흔한 오류만 걸러냄
    https://en.wikipedia.org/wiki/Email_address#Local-part

    Args:
        email: 검증할 이메일

    Returns:
        유효하면 True
    """
    if is_null_or_empty(email):
        return False

    parts = email.split("@")
    # '@'는 정확히 하나
    if len(parts) != 2:
        return False

    local, domain = parts

    return (
        len(local) > 0
        and "." in domain
        # '.'와 한 글자 도메인, 한 글자 최상위 도메인
        and len(domain) >= ValidationConstants.MIN_EMAIL_DOMAIN_LENGTH
        and not local.startswith(".")
        and not local.endswith(".")
        and not domain.startswith(".")
        and not domain.endswith(".")
        and ".." not in local
        and ".." not in domain
        and " " not in local
        and " " not in domain
    )
