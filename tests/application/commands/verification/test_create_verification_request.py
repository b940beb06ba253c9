"""CreateVerificationRequestHandler 测试"""

from unittest.mock import Mock

import pytest

from application.commands.verification.create_verification_request import (
    CreateVerificationRequestCommand,
    CreateVerificationRequestHandler,
)
from domain.common.repository_error import RepositoryError
from domain.common.result import Err, Ok
from domain.user.entities.user import User
from domain.user.value_objects.email import Email
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.entities.verification_request import VerificationRequest
from domain.verification.value_objects.image_id import ImageId
from domain.verification.value_objects.verification_status import VerificationStatus


def make_user(user_id: str = "1") -> User:
    return User.create(
        id=UserId(user_id), email=Email("alice@example.com"), name="Alice"
    ).unwrap()


def make_image(image_id: str = "10", user_id: str = "1") -> VerificationImage:
    return VerificationImage.create(
        id=ImageId(image_id),
        user_id=UserId(user_id),
        image_url="data:image/jpeg;base64,AAAA",
    ).unwrap()


class TestCreateVerificationRequestHandler:
    """CreateVerificationRequestHandler 处理器测试"""

    @pytest.fixture
    def mock_user_repo(self):
        repo = Mock()
        repo.find_by_id.return_value = Ok(make_user())
        return repo

    @pytest.fixture
    def mock_image_repo(self):
        repo = Mock()
        repo.find_by_id.return_value = Ok(make_image())
        return repo

    @pytest.fixture
    def mock_request_repo(self):
        repo = Mock()
        repo.find_by_image_id.return_value = Ok([])
        # 模拟存储层分配主键
        repo.save.side_effect = lambda request: Ok(request.evolve(id=7))
        return repo

    @pytest.fixture
    def handler(self, mock_user_repo, mock_image_repo, mock_request_repo):
        return CreateVerificationRequestHandler(
            user_repo=mock_user_repo,
            image_repo=mock_image_repo,
            request_repo=mock_request_repo,
        )

    def test_create_success(self, handler, mock_request_repo):
        """测试成功创建 PENDING 请求"""
        result = handler.handle(CreateVerificationRequestCommand(user_id="1", image_id="10"))

        assert result.success is True
        assert result.error_code is None
        assert result.request.id == 7
        assert result.request.status == VerificationStatus.PENDING
        assert result.request.user_id == UserId("1")
        assert result.request.image_id == ImageId("10")
        mock_request_repo.save.assert_called_once()

    def test_numeric_ids_are_accepted(self, handler, mock_user_repo):
        """测试数字形式的 ID"""
        result = handler.handle(CreateVerificationRequestCommand(user_id=1, image_id=10))

        assert result.success is True
        mock_user_repo.find_by_id.assert_called_once_with(UserId("1"))

    @pytest.mark.parametrize(
        "user_id,image_id",
        [(None, "10"), ("1", None), ("", "10"), ("1", "")],
    )
    def test_missing_fields(self, handler, mock_user_repo, user_id, image_id):
        """测试缺少必填字段"""
        result = handler.handle(
            CreateVerificationRequestCommand(user_id=user_id, image_id=image_id)
        )

        assert result.success is False
        assert result.error_code == "MISSING_FIELDS"
        mock_user_repo.find_by_id.assert_not_called()

    def test_invalid_user_id(self, handler):
        """测试空白用户 ID"""
        result = handler.handle(CreateVerificationRequestCommand(user_id="   ", image_id="10"))

        assert result.success is False
        assert result.error_code == "INVALID_USER_ID"

    def test_user_not_found(self, handler, mock_user_repo, mock_image_repo):
        """测试用户不存在"""
        mock_user_repo.find_by_id.return_value = Ok(None)

        result = handler.handle(CreateVerificationRequestCommand(user_id="99", image_id="10"))

        assert result.success is False
        assert result.error_code == "USER_NOT_FOUND"
        assert result.message == "User not found"
        mock_image_repo.find_by_id.assert_not_called()

    def test_user_repository_failure(self, handler, mock_user_repo):
        """测试用户仓储失败"""
        mock_user_repo.find_by_id.return_value = Err(RepositoryError.invalid_id_format())

        result = handler.handle(CreateVerificationRequestCommand(user_id="abc", image_id="10"))

        assert result.success is False
        assert result.error_code == "REPOSITORY_ERROR"

    def test_image_not_found(self, handler, mock_image_repo, mock_request_repo):
        """测试照片不存在"""
        mock_image_repo.find_by_id.return_value = Ok(None)

        result = handler.handle(CreateVerificationRequestCommand(user_id="1", image_id="404"))

        assert result.success is False
        assert result.error_code == "IMAGE_NOT_FOUND"
        mock_request_repo.save.assert_not_called()

    def test_duplicate_request(self, handler, mock_request_repo):
        """测试同一照片重复申请"""
        existing = VerificationRequest.create_pending(UserId("1"), ImageId("10"), id=3)
        mock_request_repo.find_by_image_id.return_value = Ok([existing])

        result = handler.handle(CreateVerificationRequestCommand(user_id="1", image_id="10"))

        assert result.success is False
        assert result.error_code == "DUPLICATE_REQUEST"
        mock_request_repo.save.assert_not_called()

    def test_save_failure(self, handler, mock_request_repo):
        """测试保存失败"""
        mock_request_repo.save.side_effect = None
        mock_request_repo.save.return_value = Err(RepositoryError.database_error())

        result = handler.handle(CreateVerificationRequestCommand(user_id="1", image_id="10"))

        assert result.success is False
        assert result.error_code == "REPOSITORY_ERROR"
        assert result.request is None
