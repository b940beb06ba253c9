"""本人确认请求 API 路由"""

from typing import Callable, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from application.commands.verification.create_verification_request import (
    CreateVerificationRequestCommand,
    CreateVerificationRequestHandler,
    CreateVerificationRequestResult,
)
from application.commands.verification.review_verification_request import (
    ReviewVerificationRequestCommand,
    ReviewVerificationRequestHandler,
    ReviewVerificationRequestResult,
)
from application.commands.verification.submit_verification_image import (
    SubmitVerificationImageCommand,
    SubmitVerificationImageHandler,
    SubmitVerificationImageResult,
)
from application.handlers.verification.list_verification_requests_handler import (
    ListVerificationRequestsHandler,
    ListVerificationRequestsResult,
)
from application.queries.verification.list_verification_requests import (
    ListVerificationRequestsQuery,
)
from domain.verification.entities.verification_request import VerificationRequest


router = APIRouter(prefix="/verification", tags=["Verification"])


# ============ Handler 依赖注入 ============

_create_request_handler_getter: Optional[
    Callable[[], CreateVerificationRequestHandler]
] = None


def set_create_request_handler_getter(
    getter: Callable[[], CreateVerificationRequestHandler]
) -> None:
    """设置 create handler 获取器（由 DI 容器调用）"""
    global _create_request_handler_getter
    _create_request_handler_getter = getter


def get_create_request_handler() -> Optional[CreateVerificationRequestHandler]:
    """获取 CreateVerificationRequestHandler 实例"""
    if _create_request_handler_getter is None:
        return None
    return _create_request_handler_getter()


_review_request_handler_getter: Optional[
    Callable[[], ReviewVerificationRequestHandler]
] = None


def set_review_request_handler_getter(
    getter: Callable[[], ReviewVerificationRequestHandler]
) -> None:
    """设置 review handler 获取器（由 DI 容器调用）"""
    global _review_request_handler_getter
    _review_request_handler_getter = getter


def get_review_request_handler() -> Optional[ReviewVerificationRequestHandler]:
    """获取 ReviewVerificationRequestHandler 实例"""
    if _review_request_handler_getter is None:
        return None
    return _review_request_handler_getter()


_list_requests_handler_getter: Optional[
    Callable[[], ListVerificationRequestsHandler]
] = None


def set_list_requests_handler_getter(
    getter: Callable[[], ListVerificationRequestsHandler]
) -> None:
    """设置 list handler 获取器（由 DI 容器调用）"""
    global _list_requests_handler_getter
    _list_requests_handler_getter = getter


def get_list_requests_handler() -> Optional[ListVerificationRequestsHandler]:
    """获取 ListVerificationRequestsHandler 实例"""
    if _list_requests_handler_getter is None:
        return None
    return _list_requests_handler_getter()


_submit_image_handler_getter: Optional[
    Callable[[], SubmitVerificationImageHandler]
] = None


def set_submit_image_handler_getter(
    getter: Callable[[], SubmitVerificationImageHandler]
) -> None:
    """设置 submit image handler 获取器（由 DI 容器调用）"""
    global _submit_image_handler_getter
    _submit_image_handler_getter = getter


def get_submit_image_handler() -> Optional[SubmitVerificationImageHandler]:
    """获取 SubmitVerificationImageHandler 实例"""
    if _submit_image_handler_getter is None:
        return None
    return _submit_image_handler_getter()


# ============ Request/Response DTOs ============


class CamelModel(BaseModel):
    """JSON 字段使用 camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateVerificationRequestDTO(CamelModel):
    """创建本人确认请求 DTO

    缺失字段由 handler 返回 400，因此这里全部可选。
    """

    user_id: Optional[Union[str, int]] = Field(default=None, description="申请者 ID")
    image_id: Optional[Union[str, int]] = Field(default=None, description="确认照片 ID")


class ReviewVerificationRequestDTO(CamelModel):
    """审核本人确认请求 DTO

    Attributes:
        action: approve 或 reject
        admin_id: 审核管理员 ID
        comment: 审核备注（reject 时必填）
    """

    action: Optional[str] = Field(default=None, description="approve / reject")
    admin_id: Optional[Union[str, int]] = Field(default=None, description="审核管理员 ID")
    comment: Optional[str] = Field(default=None, description="审核备注")


class SubmitVerificationImageDTO(CamelModel):
    """提交确认照片 DTO"""

    user_id: Optional[Union[str, int]] = Field(default=None, description="提交者 ID")
    image: Optional[str] = Field(default=None, description="base64 照片或 data URL")


class VerificationRequestDTO(CamelModel):
    """本人确认请求响应 DTO"""

    id: int = Field(..., description="请求 ID")
    user_id: str = Field(..., description="申请者 ID")
    image_id: str = Field(..., description="确认照片 ID")
    status: str = Field(..., description="PENDING / APPROVED / REJECTED")
    reviewed_by: Optional[str] = Field(default=None, description="审核管理员 ID")
    reviewed_at: Optional[str] = Field(default=None, description="审核时间（ISO-8601）")
    comment: Optional[str] = Field(default=None, description="审核备注")
    created_at: str = Field(..., description="创建时间（ISO-8601）")
    updated_at: str = Field(..., description="更新时间（ISO-8601）")

    @classmethod
    def from_entity(cls, request: VerificationRequest) -> "VerificationRequestDTO":
        return cls(
            id=request.id,
            user_id=str(request.user_id),
            image_id=str(request.image_id),
            status=str(request.status),
            reviewed_by=str(request.reviewed_by) if request.reviewed_by else None,
            reviewed_at=str(request.reviewed_at) if request.reviewed_at else None,
            comment=request.comment,
            created_at=str(request.created_at),
            updated_at=str(request.updated_at),
        )


class VerificationRequestItemDTO(VerificationRequestDTO):
    """列表项，附带照片 URL"""

    image_url: Optional[str] = Field(default=None, description="照片 URL")


class SubmitVerificationImageResponseDTO(CamelModel):
    """提交照片响应 DTO"""

    message: str = Field(..., description="结果消息")
    request_id: int = Field(..., description="创建的请求 ID")
    status: str = Field(..., description="请求状态")


class ErrorResponseDTO(BaseModel):
    """错误响应 DTO"""

    detail: str = Field(..., description="错误详情")


# ============ 错误码映射 ============

ERROR_CODE_TO_STATUS = {
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "IMAGE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ADMIN_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "REQUEST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DUPLICATE_REQUEST": status.HTTP_409_CONFLICT,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "REPOSITORY_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _raise_for_result(
    result: Union[
        CreateVerificationRequestResult,
        ReviewVerificationRequestResult,
        ListVerificationRequestsResult,
        SubmitVerificationImageResult,
    ],
) -> None:
    if result.success:
        return
    status_code = ERROR_CODE_TO_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST)
    raise HTTPException(status_code=status_code, detail=result.message)


def _handler_not_configured() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Handler not configured. Please configure dependency injection.",
    )


# ============ API Endpoints ============


@router.post(
    "/requests",
    status_code=status.HTTP_200_OK,
    response_model=VerificationRequestDTO,
    responses={
        400: {"model": ErrorResponseDTO, "description": "参数缺失或格式错误"},
        404: {"model": ErrorResponseDTO, "description": "用户或照片不存在"},
        409: {"model": ErrorResponseDTO, "description": "该照片已有确认请求"},
    },
    summary="创建本人确认请求",
)
def create_verification_request(
    request: CreateVerificationRequestDTO,
    handler: Optional[CreateVerificationRequestHandler] = Depends(get_create_request_handler),
) -> VerificationRequestDTO:
    """
    为已上传的确认照片创建 PENDING 状态的请求

    同一张照片只能有一个请求。
    """
    if handler is None:
        raise _handler_not_configured()

    result = handler.handle(
        CreateVerificationRequestCommand(
            user_id=request.user_id,
            image_id=request.image_id,
        )
    )
    _raise_for_result(result)
    return VerificationRequestDTO.from_entity(result.request)


@router.put(
    "/requests/{request_id}",
    status_code=status.HTTP_200_OK,
    response_model=VerificationRequestDTO,
    responses={
        400: {"model": ErrorResponseDTO, "description": "参数错误或状态不允许"},
        403: {"model": ErrorResponseDTO, "description": "需要管理员权限"},
        404: {"model": ErrorResponseDTO, "description": "管理员或请求不存在"},
    },
    summary="审核本人确认请求",
    description="""
    管理员批准或驳回 PENDING 状态的请求。

    **注意：**
    - action 必须是 approve 或 reject
    - reject 必须附带 comment（驳回理由）
    - 已审核的请求不能再次审核
    """,
)
def review_verification_request(
    request_id: str,
    request: ReviewVerificationRequestDTO,
    handler: Optional[ReviewVerificationRequestHandler] = Depends(get_review_request_handler),
) -> VerificationRequestDTO:
    """审核本人确认请求"""
    if handler is None:
        raise _handler_not_configured()

    result = handler.handle(
        ReviewVerificationRequestCommand(
            request_id=request_id,
            action=request.action,
            admin_id=request.admin_id,
            comment=request.comment,
        )
    )
    _raise_for_result(result)
    return VerificationRequestDTO.from_entity(result.request)


@router.get(
    "/requests",
    response_model=List[VerificationRequestItemDTO],
    responses={
        400: {"model": ErrorResponseDTO, "description": "缺少过滤条件或状态值无效"},
        404: {"model": ErrorResponseDTO, "description": "用户不存在"},
    },
    summary="查询本人确认请求",
)
def list_verification_requests(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    user_id: Optional[str] = Query(default=None, alias="userId"),
    handler: Optional[ListVerificationRequestsHandler] = Depends(get_list_requests_handler),
) -> List[VerificationRequestItemDTO]:
    """按状态或申请者查询，status 优先"""
    if handler is None:
        raise _handler_not_configured()

    result = handler.handle(
        ListVerificationRequestsQuery(status=status_filter, user_id=user_id)
    )
    _raise_for_result(result)
    return [
        VerificationRequestItemDTO(
            **VerificationRequestDTO.from_entity(item.request).model_dump(),
            image_url=item.image_url,
        )
        for item in result.items
    ]


@router.post(
    "/images",
    status_code=status.HTTP_200_OK,
    response_model=SubmitVerificationImageResponseDTO,
    responses={
        400: {"model": ErrorResponseDTO, "description": "参数缺失"},
        404: {"model": ErrorResponseDTO, "description": "用户不存在"},
    },
    summary="提交确认照片",
)
def submit_verification_image(
    request: SubmitVerificationImageDTO,
    handler: Optional[SubmitVerificationImageHandler] = Depends(get_submit_image_handler),
) -> SubmitVerificationImageResponseDTO:
    """
    保存确认照片并创建 PENDING 请求

    image 可以是 data URL，也可以是纯 base64（按 image/jpeg 处理）。
    """
    if handler is None:
        raise _handler_not_configured()

    result = handler.handle(
        SubmitVerificationImageCommand(user_id=request.user_id, image=request.image)
    )
    _raise_for_result(result)
    return SubmitVerificationImageResponseDTO(
        message=result.message,
        request_id=result.request.id,
        status=str(result.request.status),
    )
