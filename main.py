"""
Checkin Postcard - FastAPI主应用
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postcard.core.config import settings
from postcard.api.v1.router import api_router
from postcard.core.log_utils import setup_logging, get_logger

# 初始化日志系统
setup_logging()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """应用生命周期管理"""
    logger.info("应用启动中...", app_name=settings.app_name, app_env=settings.app_env)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY 未配置，图片生成将会失败")
    if not settings.cos_enabled:
        logger.warning("COS存储未配置，打卡图片请求将返回500")

    logger.info("应用启动完成")

    yield

    logger.info("应用关闭")


app = FastAPI(
    title=settings.project_name,
    version=settings.app_version,
    description="根据经纬度生成插画风格打卡明信片",
    openapi_url=f"{settings.api_v1_str}/openapi.json",
    docs_url=f"{settings.api_v1_str}/docs",
    redoc_url=f"{settings.api_v1_str}/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册API路由
app.include_router(api_router, prefix=settings.api_v1_str)


@app.get("/")
def read_root():
    """根路径"""
    return {
        "message": "Checkin Postcard API",
        "version": settings.app_version,
        "docs": f"{settings.api_v1_str}/docs"
    }


@app.get("/health")
def health_check():
    """健康检查"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_debug,
        log_level=settings.log_level.lower()
    )
