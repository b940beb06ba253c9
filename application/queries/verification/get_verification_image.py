"""查询单张确认照片的 Query"""

from dataclasses import dataclass


@dataclass
class GetVerificationImageQuery:
    """按 ID 查询确认照片

    Attributes:
        image_id: 照片 ID（路径参数原始值）
    """

    image_id: str
