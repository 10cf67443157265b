"""
난수 편의 유틸리티

주의: random 모듈(비보안 난수)을 사용하므로 솔트나 토큰 생성에 사용하지 말 것.
보안 난수가 필요하면 salted_hasher.generate_salt 를 사용합니다.
"""

import random


def random_between(min_value: int, max_value: int) -> int:
    """
    두 값 사이의 난수 생성 (양 끝 포함)

    Args:
        min_value: 최소값 (포함)
        max_value: 최대값 (포함)

    Returns:
        난수

    Raises:
        ValueError: 최소값이 최대값보다 큰 경우
    """
    if min_value > max_value:
        raise ValueError(f"최소값({min_value})이 최대값({max_value})보다 큽니다.")
    return random.randint(min_value, max_value)


def random_char_from_string(value: str) -> str:
    """
    문자열에서 임의의 문자 하나 추출

    Args:
        value: 후보 문자열

    Returns:
        임의의 문자

    Raises:
        ValueError: 빈 문자열인 경우
    """
    if not value:
        raise ValueError("빈 문자열에서는 문자를 추출할 수 없습니다.")
    return random.choice(value)
