"""
打卡图片生成API端点
薄路由：请求体直接交给业务处理器，响应始终为JSON
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from postcard.schemas.checkin_image import CheckinImageResponse
from postcard.services.checkin.handler import CheckinImageHandler

router = APIRouter(tags=["打卡图片"])


def get_checkin_image_handler() -> CheckinImageHandler:
    """获取打卡图片业务处理器"""
    return CheckinImageHandler()


@router.post(
    "/image",
    response_model=CheckinImageResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="生成打卡明信片",
    description="根据经纬度（和可选头像）生成插画风格明信片，上传到COS并返回公开URL",
    responses={
        400: {"model": CheckinImageResponse, "description": "缺少经纬度参数"},
        500: {"model": CheckinImageResponse, "description": "生成、上传或其他异常"},
    },
)
async def generate_checkin_image(
    request: Request,
    handler: CheckinImageHandler = Depends(get_checkin_image_handler)
) -> JSONResponse:
    """
    生成打卡明信片

    功能流程：
    1. 校验经纬度
    2. 构建明信片提示词
    3. 调用Gemini生成图片
    4. 上传到COS并返回公开URL
    """
    body = await request.body()
    status_code, response = await handler.handle_generate(body)
    return JSONResponse(status_code=status_code, content=response.to_body())
