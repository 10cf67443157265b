"""
난수 편의 유틸리티 테스트
"""

import pytest

from securekit.utils.randomize import random_between, random_char_from_string


class TestRandomBetween:
    """범위 난수 테스트"""

    def test_inclusive_bounds(self):
        """양 끝 값이 모두 포함되는지 테스트"""
        results = {random_between(1, 3) for _ in range(300)}

        assert results == {1, 2, 3}

    def test_single_value(self):
        """최소값과 최대값이 같은 경우 테스트"""
        assert random_between(5, 5) == 5

    def test_negative_range(self):
        """음수 범위 테스트"""
        for _ in range(20):
            assert -3 <= random_between(-3, -1) <= -1

    def test_invalid_range(self):
        """최소값이 최대값보다 큰 경우 테스트"""
        with pytest.raises(ValueError):
            random_between(8, 6)


class TestRandomCharFromString:
    """임의 문자 추출 테스트"""

    def test_char_from_input(self):
        """입력 문자열의 문자를 반환하는지 테스트"""
        for _ in range(20):
            char = random_char_from_string("ABC")
            assert len(char) == 1
            assert char in "ABC"

    def test_single_char(self):
        """한 글자 문자열 테스트"""
        assert random_char_from_string("Z") == "Z"

    def test_empty_string(self):
        """빈 문자열은 거부하는지 테스트"""
        with pytest.raises(ValueError):
            random_char_from_string("")
