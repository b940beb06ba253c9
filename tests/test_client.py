"""VerificationServiceClient 测试"""

import json

import httpx
import pytest

from client import VerificationServiceClient


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def client(requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(200, json={"ok": True})

    with VerificationServiceClient(
        "http://verification.test/", transport=httpx.MockTransport(handler)
    ) as client:
        yield client


class TestVerificationServiceClient:
    """请求构造测试"""

    def test_submit_image_encodes_bytes(self, client, requests_seen):
        client.submit_image(1, b"\x00\x01")

        request = requests_seen[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/verification/images"
        assert json.loads(request.content) == {"userId": 1, "image": "AAE="}

    def test_create_request(self, client, requests_seen):
        assert client.create_request("1", "10") == {"ok": True}

        assert json.loads(requests_seen[0].content) == {"userId": "1", "imageId": "10"}

    def test_list_requests_query_params(self, client, requests_seen):
        client.list_requests(status="PENDING", user_id=1)

        params = requests_seen[0].url.params
        assert params["status"] == "PENDING"
        assert params["userId"] == "1"

    def test_reject_sends_comment(self, client, requests_seen):
        client.reject(5, "2", "Blurry")

        request = requests_seen[0]
        assert request.method == "PUT"
        assert request.url.path == "/api/v1/verification/requests/5"
        assert json.loads(request.content) == {
            "action": "reject",
            "adminId": "2",
            "comment": "Blurry",
        }

    def test_approve_without_comment(self, client, requests_seen):
        client.approve(5, "2")

        assert json.loads(requests_seen[0].content) == {"action": "approve", "adminId": "2"}

    def test_image_endpoints(self, client, requests_seen):
        client.list_images(image_id=10)
        client.get_image(10)

        assert requests_seen[0].url.params["imageId"] == "10"
        assert requests_seen[1].url.path == "/api/v1/images/10"
