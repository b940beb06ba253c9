"""
Identity Verification Service 客户端

使用示例：
    python client.py
"""

import base64
from typing import Optional, Union

import httpx

# ========== 配置 ==========
BASE_URL = "http://localhost:8000"

# 演示数据中的用户（APP_ENV=dev 且 SEED_DEMO_DATA=true 时写入）
DEMO_USER_ID = "1"
DEMO_ADMIN_ID = "2"

Id = Union[str, int]


class VerificationServiceClient:
    """Identity Verification Service API 客户端

    所有方法返回解析后的 JSON；非 2xx 响应时返回的是 {"detail": ...}。
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=f"{self.base_url}/api/v1",
            headers={"Content-Type": "application/json"},
            transport=transport,
            timeout=30.0,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "VerificationServiceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def submit_image(self, user_id: Id, image: Union[str, bytes]) -> dict:
        """提交确认照片（bytes 会先编码为 base64）"""
        if isinstance(image, bytes):
            image = base64.b64encode(image).decode("ascii")

        response = self._client.post(
            "/verification/images",
            json={"userId": user_id, "image": image},
        )
        return response.json()

    def create_request(self, user_id: Id, image_id: Id) -> dict:
        """为已有照片创建确认请求"""
        response = self._client.post(
            "/verification/requests",
            json={"userId": user_id, "imageId": image_id},
        )
        return response.json()

    def list_requests(
        self,
        status: Optional[str] = None,
        user_id: Optional[Id] = None,
    ) -> Union[list, dict]:
        """按状态或申请者查询确认请求"""
        params = {}
        if status:
            params["status"] = status
        if user_id is not None:
            params["userId"] = str(user_id)

        response = self._client.get("/verification/requests", params=params, timeout=10.0)
        return response.json()

    def review(
        self,
        request_id: Id,
        action: str,
        admin_id: Id,
        comment: Optional[str] = None,
    ) -> dict:
        """审核确认请求（action: approve / reject）"""
        data = {"action": action, "adminId": admin_id}
        if comment is not None:
            data["comment"] = comment

        response = self._client.put(f"/verification/requests/{request_id}", json=data)
        return response.json()

    def approve(self, request_id: Id, admin_id: Id, comment: Optional[str] = None) -> dict:
        return self.review(request_id, "approve", admin_id, comment)

    def reject(self, request_id: Id, admin_id: Id, comment: str) -> dict:
        return self.review(request_id, "reject", admin_id, comment)

    def list_images(
        self,
        user_id: Optional[Id] = None,
        image_id: Optional[Id] = None,
    ) -> Union[list, dict]:
        """按提交者或照片 ID 查询确认照片"""
        params = {}
        if user_id is not None:
            params["userId"] = str(user_id)
        if image_id is not None:
            params["imageId"] = str(image_id)

        response = self._client.get("/images", params=params, timeout=10.0)
        return response.json()

    def get_image(self, image_id: Id) -> dict:
        """获取单张确认照片"""
        response = self._client.get(f"/images/{image_id}", timeout=10.0)
        return response.json()


def main():
    with VerificationServiceClient(BASE_URL) as client:
        print("=" * 50)
        print("Identity Verification Service 客户端")
        print("=" * 50)

        # 1. 提交确认照片
        print("\n[1] 提交确认照片...")
        result = client.submit_image(DEMO_USER_ID, b"\xff\xd8\xff\xe0 demo jpeg")
        print(f"    结果: {result}")

        if "requestId" not in result:
            return
        request_id = result["requestId"]

        # 2. 查询待审核请求
        print("\n[2] 查询待审核请求...")
        print(f"    结果: {client.list_requests(status='PENDING')}")

        # 3. 管理员批准
        print(f"\n[3] 批准请求 (request_id: {request_id})...")
        print(f"    结果: {client.approve(request_id, DEMO_ADMIN_ID)}")

        # 4. 再次审核会失败
        print("\n[4] 再次审核...")
        print(f"    结果: {client.reject(request_id, DEMO_ADMIN_ID, 'Too late')}")


if __name__ == "__main__":
    main()
