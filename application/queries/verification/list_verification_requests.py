"""查询本人确认请求列表的 Query"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ListVerificationRequestsQuery:
    """查询本人确认请求列表

    status 优先于 user_id；两者都为空时查询失败。

    Attributes:
        status: 按状态过滤（PENDING / APPROVED / REJECTED）
        user_id: 按申请者过滤
    """

    status: Optional[str] = None
    user_id: Optional[str] = None
