"""VerificationImage 实体测试"""

from dataclasses import fields

import pytest

from domain.common.exceptions import InvalidOperationException
from domain.common.value_objects.date_time import DateTime
from domain.user.value_objects.user_id import UserId
from domain.verification.entities.verification_image import VerificationImage
from domain.verification.value_objects.image_id import ImageId


class TestVerificationImageCreate:
    """VerificationImage.create() 测试"""

    def test_create_valid_image(self):
        created_at = DateTime.create("2024-01-01T00:00:00Z").unwrap()

        result = VerificationImage.create(
            id=ImageId("1"),
            user_id=UserId("2"),
            image_url="https://example.com/image.jpg",
            created_at=created_at,
        )

        assert result.ok is True
        image = result.value
        assert image.id == ImageId("1")
        assert image.user_id == UserId("2")
        assert image.image_url == "https://example.com/image.jpg"
        assert image.created_at == created_at

    def test_created_at_defaults_to_now(self):
        before = DateTime.now()

        image = VerificationImage.create(
            id=ImageId("1"),
            user_id=UserId("2"),
            image_url="data:image/png;base64,AAAA",
        ).unwrap()

        assert image.created_at >= before

    @pytest.mark.parametrize("url", ["", "   "])
    def test_empty_url_is_rejected(self, url):
        result = VerificationImage.create(
            id=ImageId("1"),
            user_id=UserId("2"),
            image_url=url,
        )

        assert result.ok is False
        assert isinstance(result.error, InvalidOperationException)
        assert result.error.message == "Image URL cannot be empty"


class TestVerificationImageRecord:
    """照片记录字段"""

    def test_has_only_creation_timestamp(self):
        image = VerificationImage.create(
            id=ImageId("1"),
            user_id=UserId("2"),
            image_url="https://example.com/image.jpg",
        ).unwrap()

        names = {f.name for f in fields(image)}

        assert names == {"id", "user_id", "image_url", "created_at"}
        assert not hasattr(image, "updated_at")
        assert not hasattr(image, "touch")
