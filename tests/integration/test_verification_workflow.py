"""本人确认流程集成测试

使用完整应用（DI 容器 + SQLite 内存数据库）走通：
提交照片 -> 查询 -> 审核 -> 重复审核被拒绝。
"""

import pytest
from fastapi.testclient import TestClient

from infrastructure.config.settings import Settings
from infrastructure.database.seed import seed_demo_data
from interfaces.api.app import create_app

# 演示数据写入空库后的主键
USER_ID = "1"
ADMIN_ID = "2"
SEEDED_IMAGE_ID = "1"


@pytest.fixture
def client():
    app = create_app(Settings(app_env="test"), configure_logging=False)
    with TestClient(app) as client:
        session = app.state.bootstrap.infra.db_session()
        try:
            seed_demo_data(session)
        finally:
            session.close()
        yield client


class TestServiceEndpoints:
    """基础端点"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "Identity Verification Service"


class TestVerificationWorkflow:
    """完整审核流程"""

    def test_submit_then_approve(self, client):
        submitted = client.post(
            "/api/v1/verification/images",
            json={"userId": USER_ID, "image": "data:image/png;base64,iVBOR"},
        )
        assert submitted.status_code == 200
        request_id = submitted.json()["requestId"]
        assert submitted.json()["status"] == "PENDING"

        pending = client.get("/api/v1/verification/requests", params={"status": "PENDING"})
        assert pending.status_code == 200
        assert [item["id"] for item in pending.json()] == [request_id]
        assert pending.json()[0]["imageUrl"] == "data:image/png;base64,iVBOR"

        approved = client.put(
            f"/api/v1/verification/requests/{request_id}",
            json={"action": "approve", "adminId": ADMIN_ID},
        )
        assert approved.status_code == 200
        assert approved.json()["status"] == "APPROVED"
        assert approved.json()["reviewedBy"] == ADMIN_ID

        again = client.put(
            f"/api/v1/verification/requests/{request_id}",
            json={"action": "reject", "adminId": ADMIN_ID, "comment": "Changed my mind"},
        )
        assert again.status_code == 400
        assert again.json()["detail"] == "Only pending requests can be rejected"

        by_user = client.get("/api/v1/verification/requests", params={"userId": USER_ID})
        assert [item["status"] for item in by_user.json()] == ["APPROVED"]

    def test_create_request_for_seeded_image(self, client):
        created = client.post(
            "/api/v1/verification/requests",
            json={"userId": USER_ID, "imageId": SEEDED_IMAGE_ID},
        )
        assert created.status_code == 200
        request_id = created.json()["id"]

        duplicate = client.post(
            "/api/v1/verification/requests",
            json={"userId": USER_ID, "imageId": SEEDED_IMAGE_ID},
        )
        assert duplicate.status_code == 409

        rejected = client.put(
            f"/api/v1/verification/requests/{request_id}",
            json={"action": "reject", "adminId": ADMIN_ID, "comment": "Photo is blurry"},
        )
        assert rejected.status_code == 200
        assert rejected.json()["comment"] == "Photo is blurry"

    def test_non_admin_cannot_review(self, client):
        created = client.post(
            "/api/v1/verification/requests",
            json={"userId": USER_ID, "imageId": SEEDED_IMAGE_ID},
        )

        response = client.put(
            f"/api/v1/verification/requests/{created.json()['id']}",
            json={"action": "approve", "adminId": USER_ID},
        )

        assert response.status_code == 403

    def test_reject_requires_comment(self, client):
        response = client.put(
            "/api/v1/verification/requests/1",
            json={"action": "reject", "adminId": ADMIN_ID},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Rejection reason is required"


class TestImageQueries:
    """照片查询"""

    def test_list_images_by_user(self, client):
        response = client.get("/api/v1/images", params={"userId": USER_ID})

        assert response.status_code == 200
        assert response.json()[0]["imageUrl"] == "https://example.com/image.jpg"

    def test_admin_without_images(self, client):
        response = client.get("/api/v1/images", params={"userId": ADMIN_ID})

        assert response.status_code == 404

    def test_get_image(self, client):
        response = client.get(f"/api/v1/images/{SEEDED_IMAGE_ID}")

        assert response.status_code == 200
        assert response.json()["userId"] == USER_ID

    def test_unknown_user(self, client):
        response = client.get("/api/v1/verification/requests", params={"userId": "999"})

        assert response.status_code == 404


class TestConnectionRelease:
    """请求结束后连接归还连接池"""

    @pytest.fixture
    def file_app(self, tmp_path):
        settings = Settings(
            app_env="dev",
            dev_db_path=str(tmp_path / "app.db"),
            seed_demo_data=True,
        )
        return create_app(settings, configure_logging=False)

    def test_pool_is_empty_after_requests(self, file_app):
        with TestClient(file_app) as client:
            engine = file_app.state.bootstrap.infra.db_engine()

            submitted = client.post(
                "/api/v1/verification/images",
                json={"userId": USER_ID, "image": "https://example.com/me.jpg"},
            )
            assert submitted.status_code == 200
            for _ in range(3):
                assert client.get(
                    "/api/v1/verification/requests", params={"userId": USER_ID}
                ).status_code == 200
            assert client.get(f"/api/v1/images/{SEEDED_IMAGE_ID}").status_code == 200
            reviewed = client.put(
                f"/api/v1/verification/requests/{submitted.json()['requestId']}",
                json={"action": "approve", "adminId": ADMIN_ID},
            )
            assert reviewed.status_code == 200

            assert engine.pool.checkedout() == 0

    def test_out_of_range_request_id(self, client):
        response = client.put(
            f"/api/v1/verification/requests/{10**20}",
            json={"action": "approve", "adminId": ADMIN_ID},
        )

        assert response.status_code == 400
