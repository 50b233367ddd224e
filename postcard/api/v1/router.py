"""
API路由聚合模块
将所有v1版本的路由统一注册，前缀统一在这里管理
"""

from fastapi import APIRouter

from postcard.api.v1.endpoints import checkin_image

api_router = APIRouter()

# ==================== 打卡图片路由 ====================
api_router.include_router(checkin_image.router, prefix="/checkin", tags=["打卡图片"])
