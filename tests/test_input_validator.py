"""
input_validator.pyのテスト
"""
import pytest
from src.input_validator import (
    InvalidInputError,
    check_value,
    check_month,
    check_year,
    check_period,
    NOT_AN_INTEGER,
    MONTH_OUT_OF_RANGE,
    YEAR_OUT_OF_RANGE,
    NOT_POSITIVE
)


class TestCheckValue:
    """整数判定のテスト"""

    @pytest.mark.parametrize("value, expected", [
        (5, 5),
        ("12", 12),
        (" 7 ", 7),
        ("-3", -3),
        (0, 0),
    ])
    def test_accepts_integers(self, value, expected):
        assert check_value(value) == expected

    @pytest.mark.parametrize("value", [True, 3.5, "abc", "1.5", "", None, [1]])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidInputError) as exc_info:
            check_value(value)

        assert exc_info.value.value == value
        assert exc_info.value.constraint == NOT_AN_INTEGER

    def test_diagnostic_message(self):
        """エラーメッセージの形式"""
        error = InvalidInputError("abc")

        assert error.diagnostic() == "Error: abc - is not an integer"
        assert str(error) == "abc - is not an integer"

    def test_is_value_error(self):
        """ValueErrorとして捕捉できること"""
        with pytest.raises(ValueError):
            check_value("x")


class TestRangeChecks:
    """範囲チェックのテスト"""

    def test_check_month(self):
        assert check_month(1) == 1
        assert check_month("12") == 12

        for value in (0, 13, "-1"):
            with pytest.raises(InvalidInputError) as exc_info:
                check_month(value)
            assert exc_info.value.constraint == MONTH_OUT_OF_RANGE

    def test_check_month_non_integer(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_month("jan")

        assert exc_info.value.constraint == NOT_AN_INTEGER

    def test_check_year(self):
        assert check_year(2023) == 2023

        with pytest.raises(InvalidInputError) as exc_info:
            check_year(0)
        assert exc_info.value.constraint == YEAR_OUT_OF_RANGE

    def test_check_period(self):
        assert check_period(1) == 1
        assert check_period("6") == 6

        for value in (0, -2):
            with pytest.raises(InvalidInputError) as exc_info:
                check_period(value)
            assert exc_info.value.constraint == NOT_POSITIVE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
