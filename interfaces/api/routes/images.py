"""确认照片 API 路由"""

from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from application.handlers.verification.get_verification_image_handler import (
    GetVerificationImageHandler,
)
from application.handlers.verification.list_verification_images_handler import (
    ListVerificationImagesHandler,
)
from application.queries.verification.get_verification_image import (
    GetVerificationImageQuery,
)
from application.queries.verification.list_verification_images import (
    ListVerificationImagesQuery,
)
from domain.verification.entities.verification_image import VerificationImage


router = APIRouter(prefix="/images", tags=["Images"])


# ============ Handler 依赖注入 ============

_list_images_handler_getter: Optional[Callable[[], ListVerificationImagesHandler]] = None


def set_list_images_handler_getter(
    getter: Callable[[], ListVerificationImagesHandler]
) -> None:
    """设置 list handler 获取器（由 DI 容器调用）"""
    global _list_images_handler_getter
    _list_images_handler_getter = getter


def get_list_images_handler() -> Optional[ListVerificationImagesHandler]:
    """获取 ListVerificationImagesHandler 实例"""
    if _list_images_handler_getter is None:
        return None
    return _list_images_handler_getter()


_get_image_handler_getter: Optional[Callable[[], GetVerificationImageHandler]] = None


def set_get_image_handler_getter(
    getter: Callable[[], GetVerificationImageHandler]
) -> None:
    """设置 get handler 获取器（由 DI 容器调用）"""
    global _get_image_handler_getter
    _get_image_handler_getter = getter


def get_get_image_handler() -> Optional[GetVerificationImageHandler]:
    """获取 GetVerificationImageHandler 实例"""
    if _get_image_handler_getter is None:
        return None
    return _get_image_handler_getter()


# ============ Response DTOs ============


class VerificationImageDTO(BaseModel):
    """确认照片响应 DTO"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="照片 ID")
    user_id: str = Field(..., description="提交者 ID")
    image_url: str = Field(..., description="照片 URL")
    created_at: str = Field(..., description="创建时间（ISO-8601）")

    @classmethod
    def from_entity(cls, image: VerificationImage) -> "VerificationImageDTO":
        return cls(
            id=str(image.id),
            user_id=str(image.user_id),
            image_url=image.image_url,
            created_at=str(image.created_at),
        )


class ErrorResponseDTO(BaseModel):
    """错误响应 DTO"""

    detail: str = Field(..., description="错误详情")


# ============ 错误码映射 ============

ERROR_CODE_TO_STATUS = {
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "IMAGE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "REPOSITORY_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# ============ API Endpoints ============


@router.get(
    "",
    response_model=List[VerificationImageDTO],
    responses={
        400: {"model": ErrorResponseDTO, "description": "缺少过滤条件"},
        404: {"model": ErrorResponseDTO, "description": "用户或照片不存在"},
    },
    summary="查询确认照片",
)
def list_images(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    image_id: Optional[str] = Query(default=None, alias="imageId"),
    handler: Optional[ListVerificationImagesHandler] = Depends(get_list_images_handler),
) -> List[VerificationImageDTO]:
    """按照片 ID 或提交者查询，imageId 优先"""
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    result = handler.handle(ListVerificationImagesQuery(user_id=user_id, image_id=image_id))

    if not result.success:
        status_code = ERROR_CODE_TO_STATUS.get(
            result.error_code,
            status.HTTP_400_BAD_REQUEST,
        )
        raise HTTPException(status_code=status_code, detail=result.message)

    return [VerificationImageDTO.from_entity(image) for image in result.images]


@router.get(
    "/{image_id}",
    response_model=VerificationImageDTO,
    responses={
        400: {"model": ErrorResponseDTO, "description": "照片 ID 无效"},
        404: {"model": ErrorResponseDTO, "description": "照片不存在"},
    },
    summary="获取确认照片",
)
def get_image(
    image_id: str,
    handler: Optional[GetVerificationImageHandler] = Depends(get_get_image_handler),
) -> VerificationImageDTO:
    """获取单张确认照片"""
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Handler not configured. Please configure dependency injection.",
        )

    result = handler.handle(GetVerificationImageQuery(image_id=image_id))

    if not result.success:
        status_code = ERROR_CODE_TO_STATUS.get(
            result.error_code,
            status.HTTP_400_BAD_REQUEST,
        )
        raise HTTPException(status_code=status_code, detail=result.message)

    return VerificationImageDTO.from_entity(result.image)
