"""UserRole 值对象测试"""

import pytest

from domain.user.value_objects.user_role import UserRole


class TestUserRole:
    """UserRole 测试"""

    @pytest.mark.parametrize("raw, expected", [("USER", UserRole.USER), ("ADMIN", UserRole.ADMIN)])
    def test_create_valid(self, raw, expected):
        result = UserRole.create(raw)

        assert result.ok is True
        assert result.value is expected

    @pytest.mark.parametrize("raw", ["admin", "ROOT", "", None])
    def test_create_invalid(self, raw):
        result = UserRole.create(raw)

        assert result.ok is False
        assert result.error.message == "Invalid user role"

    def test_str_is_literal(self):
        assert str(UserRole.ADMIN) == "ADMIN"
