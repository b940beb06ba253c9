"""ReviewVerificationRequestHandler 测试"""

from unittest.mock import Mock

import pytest

from application.commands.verification.review_verification_request import (
    ReviewVerificationRequestCommand,
    ReviewVerificationRequestHandler,
)
from domain.common.repository_error import RepositoryError
from domain.common.result import Err, Ok
from domain.user.entities.user import User
from domain.user.value_objects.email import Email
from domain.user.value_objects.user_id import UserId
from domain.user.value_objects.user_role import UserRole
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.value_objects.image_id import ImageId
from domain.verification.value_objects.verification_status import VerificationStatus


def make_admin(role: UserRole = UserRole.ADMIN) -> User:
    return User.create(
        id=UserId("2"), email=Email("admin@example.com"), name="Admin", role=role
    ).unwrap()


def make_pending(request_id: int = 5) -> VerificationRequest:
    return VerificationRequest.create_pending(UserId("1"), ImageId("10"), id=request_id)


class TestReviewVerificationRequestHandler:
    """ReviewVerificationRequestHandler 处理器测试"""

    @pytest.fixture
    def mock_user_repo(self):
        repo = Mock()
        repo.find_by_id.return_value = Ok(make_admin())
        return repo

    @pytest.fixture
    def mock_request_repo(self):
        repo = Mock()
        repo.find_by_id.return_value = Ok(make_pending())
        repo.save.side_effect = lambda request: Ok(request)
        return repo

    @pytest.fixture
    def handler(self, mock_user_repo, mock_request_repo):
        return ReviewVerificationRequestHandler(
            user_repo=mock_user_repo,
            request_repo=mock_request_repo,
        )

    def test_approve(self, handler, mock_request_repo):
        """测试批准请求"""
        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action="approve", admin_id="2")
        )

        assert result.success is True
        assert result.message == "Verification request approved"
        assert result.request.status == VerificationStatus.APPROVED
        assert result.request.reviewed_by == UserId("2")
        assert result.request.reviewed_at is not None
        mock_request_repo.find_by_id.assert_called_once_with(5)

    def test_reject_with_comment(self, handler):
        """测试附带理由驳回"""
        result = handler.handle(
            ReviewVerificationRequestCommand(
                request_id=5, action="reject", admin_id=2, comment="Face not visible"
            )
        )

        assert result.success is True
        assert result.message == "Verification request rejected"
        assert result.request.status == VerificationStatus.REJECTED
        assert result.request.comment == "Face not visible"

    @pytest.mark.parametrize("request_id", ["abc", "-1", "1.5", None])
    def test_invalid_request_id(self, handler, mock_user_repo, request_id):
        """测试无效的请求 ID"""
        result = handler.handle(
            ReviewVerificationRequestCommand(
                request_id=request_id, action="approve", admin_id="2"
            )
        )

        assert result.success is False
        assert result.error_code == "INVALID_REQUEST_ID"
        mock_user_repo.find_by_id.assert_not_called()

    @pytest.mark.parametrize("admin_id", [None, ""])
    def test_missing_admin_id(self, handler, admin_id):
        """测试缺少管理员 ID"""
        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action="approve", admin_id=admin_id)
        )

        assert result.success is False
        assert result.error_code == "MISSING_ADMIN_ID"

    @pytest.mark.parametrize("action", [None, "", "APPROVE", "cancel"])
    def test_invalid_action(self, handler, action):
        """测试无效动作"""
        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action=action, admin_id="2")
        )

        assert result.success is False
        assert result.error_code == "INVALID_ACTION"

    @pytest.mark.parametrize("comment", [None, "", "   "])
    def test_reject_without_comment(self, handler, mock_request_repo, comment):
        """测试驳回时缺少理由"""
        result = handler.handle(
            ReviewVerificationRequestCommand(
                request_id="5", action="reject", admin_id="2", comment=comment
            )
        )

        assert result.success is False
        assert result.error_code == "MISSING_COMMENT"
        assert result.message == "Rejection reason is required"
        mock_request_repo.save.assert_not_called()

    def test_invalid_admin_id(self, handler):
        """测试空白管理员 ID"""
        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action="approve", admin_id="  ")
        )

        assert result.success is False
        assert result.error_code == "INVALID_ADMIN_ID"

    def test_admin_not_found(self, handler, mock_user_repo, mock_request_repo):
        """测试管理员不存在"""
        mock_user_repo.find_by_id.return_value = Ok(None)

        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action="approve", admin_id="99")
        )

        assert result.success is False
        assert result.error_code == "ADMIN_NOT_FOUND"
        mock_request_repo.find_by_id.assert_not_called()

    def test_admin_repository_failure(self, handler, mock_user_repo):
        """测试加载管理员时仓储失败"""
        mock_user_repo.find_by_id.return_value = Err(RepositoryError.invalid_id_format())

        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action="approve", admin_id="x")
        )

        assert result.success is False
        assert result.error_code == "REPOSITORY_ERROR"

    def test_non_admin_is_forbidden(self, handler, mock_user_repo, mock_request_repo):
        """测试普通用户无审核权限"""
        mock_user_repo.find_by_id.return_value = Ok(make_admin(role=UserRole.USER))

        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action="approve", admin_id="2")
        )

        assert result.success is False
        assert result.error_code == "FORBIDDEN"
        mock_request_repo.find_by_id.assert_not_called()

    def test_request_not_found(self, handler, mock_request_repo):
        """测试请求不存在"""
        mock_request_repo.find_by_id.return_value = Ok(None)

        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="404", action="approve", admin_id="2")
        )

        assert result.success is False
        assert result.error_code == "REQUEST_NOT_FOUND"

    def test_already_reviewed(self, handler, mock_request_repo):
        """测试已审核的请求不能再次审核"""
        approved = make_pending().approve(UserId("2")).unwrap()
        mock_request_repo.find_by_id.return_value = Ok(approved)

        result = handler.handle(
            ReviewVerificationRequestCommand(
                request_id="5", action="reject", admin_id="2", comment="Too late"
            )
        )

        assert result.success is False
        assert result.error_code == "INVALID_TRANSITION"
        assert result.message == "Only pending requests can be rejected"
        mock_request_repo.save.assert_not_called()

    def test_save_failure(self, handler, mock_request_repo):
        """测试保存失败"""
        mock_request_repo.save.side_effect = None
        mock_request_repo.save.return_value = Err(RepositoryError.database_error())

        result = handler.handle(
            ReviewVerificationRequestCommand(request_id="5", action="approve", admin_id="2")
        )

        assert result.success is False
        assert result.error_code == "REPOSITORY_ERROR"
