"""查询确认照片列表的 Query"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ListVerificationImagesQuery:
    """查询确认照片

    image_id 优先于 user_id。

    Attributes:
        user_id: 按提交者过滤
        image_id: 按照片 ID 查询单张
    """

    user_id: Optional[str] = None
    image_id: Optional[str] = None
