"""NumericId 值对象测试"""

import pytest

from domain.common.exceptions import InvalidValueObjectException
from domain.common.value_objects.numeric_id import MAX_NUMERIC_ID, NumericId
from domain.user.value_objects.user_id import UserId
from domain.verification.value_objects.image_id import ImageId


class TestNumericIdCreate:
    """NumericId.create() 测试"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (0, 0),
            (7, 7),
            (3.0, 3),
            ("12", 12),
            (" 5 ", 5),
            ("4.0", 4),
        ],
    )
    def test_valid_inputs(self, raw, expected):
        result = NumericId.create(raw)

        assert result.ok is True
        assert result.value.value == expected

    def test_from_id_value_objects(self):
        assert NumericId.create(UserId("42")).value.value == 42
        assert NumericId.create(ImageId("9")).value.value == 9

    @pytest.mark.parametrize("raw", ["abc", "", None, True, float("nan"), object()])
    def test_not_a_number(self, raw):
        result = NumericId.create(raw)

        assert result.ok is False
        assert result.error.message == "ID cannot be interpreted as a number"

    @pytest.mark.parametrize("raw", [1.5, "2.25"])
    def test_non_integral(self, raw):
        result = NumericId.create(raw)

        assert result.ok is False
        assert result.error.message == "ID must be an integer"

    @pytest.mark.parametrize("raw", [-1, "-3"])
    def test_negative(self, raw):
        result = NumericId.create(raw)

        assert result.ok is False
        assert result.error.message == "Numeric ID must be a non-negative integer"

    def test_upper_bound(self):
        """超出 64 位有符号整数的值无法作为存储主键"""
        assert NumericId.create(MAX_NUMERIC_ID).ok is True

        for raw in [MAX_NUMERIC_ID + 1, 10**20, str(10**20), 1e30]:
            result = NumericId.create(raw)
            assert result.ok is False
            assert result.error.message == "Numeric ID is out of range"

    def test_non_numeric_user_id_is_rejected(self):
        result = NumericId.create(UserId("user-abc"))

        assert result.ok is False
        assert isinstance(result.error, InvalidValueObjectException)


class TestNumericIdBehaviour:
    """NumericId 行为测试"""

    def test_zero_is_unassigned(self):
        assert NumericId(0).is_unassigned is True
        assert NumericId(1).is_unassigned is False

    def test_int_and_str(self):
        numeric_id = NumericId(15)

        assert int(numeric_id) == 15
        assert str(numeric_id) == "15"
