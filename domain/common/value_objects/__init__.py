"""通用值对象模块"""

from domain.common.value_objects.date_time import DateTime
from domain.common.value_objects.numeric_id import NumericId

__all__ = ["DateTime", "NumericId"]
