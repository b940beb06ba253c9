"""
Identity Verification Service - API 入口

运行：
    uv run python main.py

或使用 uvicorn：
    uv run uvicorn main:app --host 0.0.0.0 --port 8000 --reload

API 文档：
    http://localhost:8000/docs
"""

import uvicorn

from interfaces.api import create_app

# 导出 FastAPI app (用于 uvicorn)
app = create_app()


if __name__ == "__main__":
    print("=" * 50)
    print("启动 Identity Verification Service")
    print("=" * 50)
    print()
    print("API 端点:")
    print("  POST /api/v1/verification/images        - 提交确认照片")
    print("  POST /api/v1/verification/requests      - 创建确认请求")
    print("  GET  /api/v1/verification/requests      - 查询确认请求")
    print("  PUT  /api/v1/verification/requests/{id} - 审核确认请求")
    print()
    print("  GET  /api/v1/images                     - 查询确认照片")
    print("  GET  /api/v1/images/{id}                - 获取确认照片")
    print()
    print("文档: http://localhost:8000/docs")
    print("=" * 50)

    uvicorn.run(app, host="0.0.0.0", port=8000)
