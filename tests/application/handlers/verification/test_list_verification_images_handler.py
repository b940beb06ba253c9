"""ListVerificationImagesHandler 测试"""

from unittest.mock import Mock

import pytest

from application.handlers.verification.list_verification_images_handler import (
    ListVerificationImagesHandler,
)
from application.queries.verification.list_verification_images import (
    ListVerificationImagesQuery,
)
from domain.common.repository_error import RepositoryError
from domain.common.result import Err, Ok
from domain.user.entities.user import User
from domain.user.value_objects.email import Email
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.value_objects.image_id import ImageId


def make_image(image_id: str) -> VerificationImage:
    return VerificationImage.create(
        id=ImageId(image_id),
        user_id=UserId("1"),
        image_url=f"https://example.com/{image_id}.jpg",
    ).unwrap()


class TestListVerificationImagesHandler:
    """ListVerificationImagesHandler 处理器测试"""

    @pytest.fixture
    def mock_user_repo(self):
        repo = Mock()
        repo.find_by_id.return_value = Ok(
            User.create(id=UserId("1"), email=Email("alice@example.com"), name="Alice").unwrap()
        )
        return repo

    @pytest.fixture
    def mock_image_repo(self):
        repo = Mock()
        repo.find_by_id.return_value = Ok(make_image("10"))
        repo.find_by_user_id.return_value = Ok([make_image("10"), make_image("11")])
        return repo

    @pytest.fixture
    def handler(self, mock_user_repo, mock_image_repo):
        return ListVerificationImagesHandler(
            user_repo=mock_user_repo,
            image_repo=mock_image_repo,
        )

    def test_by_image_id(self, handler, mock_image_repo):
        result = handler.handle(ListVerificationImagesQuery(image_id="10"))

        assert result.success is True
        assert [image.id for image in result.images] == [ImageId("10")]
        mock_image_repo.find_by_user_id.assert_not_called()

    def test_image_id_takes_priority(self, handler, mock_user_repo):
        """同时提供时 imageId 优先"""
        result = handler.handle(ListVerificationImagesQuery(user_id="1", image_id="10"))

        assert result.success is True
        assert len(result.images) == 1
        mock_user_repo.find_by_id.assert_not_called()

    def test_image_not_found(self, handler, mock_image_repo):
        mock_image_repo.find_by_id.return_value = Ok(None)

        result = handler.handle(ListVerificationImagesQuery(image_id="404"))

        assert result.success is False
        assert result.error_code == "IMAGE_NOT_FOUND"

    def test_by_user_id(self, handler):
        result = handler.handle(ListVerificationImagesQuery(user_id="1"))

        assert result.success is True
        assert [image.id for image in result.images] == [ImageId("10"), ImageId("11")]

    def test_user_without_images(self, handler, mock_image_repo):
        """用户存在但没有照片时视为未找到"""
        mock_image_repo.find_by_user_id.return_value = Ok([])

        result = handler.handle(ListVerificationImagesQuery(user_id="1"))

        assert result.success is False
        assert result.error_code == "IMAGE_NOT_FOUND"

    def test_user_not_found(self, handler, mock_user_repo, mock_image_repo):
        mock_user_repo.find_by_id.return_value = Ok(None)

        result = handler.handle(ListVerificationImagesQuery(user_id="99"))

        assert result.success is False
        assert result.error_code == "USER_NOT_FOUND"
        mock_image_repo.find_by_user_id.assert_not_called()

    def test_repository_failure(self, handler, mock_image_repo):
        mock_image_repo.find_by_user_id.return_value = Err(RepositoryError.database_error())

        result = handler.handle(ListVerificationImagesQuery(user_id="1"))

        assert result.success is False
        assert result.error_code == "REPOSITORY_ERROR"

    def test_missing_filter(self, handler):
        result = handler.handle(ListVerificationImagesQuery())

        assert result.success is False
        assert result.error_code == "MISSING_FILTER"
