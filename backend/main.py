"""
Dreamlab - FastAPI主应用
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dreamlab.core.config import settings
from dreamlab.api.v1.router import api_router
from dreamlab.core.log_utils import setup_logging, get_logger

# 初始化日志系统
setup_logging()

# 在导入其他模块之前完成日志设置
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时执行
    logger.info("应用启动中...")

    # 所有提供商调用共享一个HTTP连接池
    app.state.http_client = httpx.AsyncClient(timeout=settings.provider_request_timeout)
    logger.info(
        "提供商配置检查",
        operation="startup",
        has_openai_key=bool(settings.openai_api_key),
        has_luma_key=bool(settings.luma_api_key),
        has_gemini_key=bool(settings.gemini_api_key),
        analysis_mock_fallback=settings.analysis_mock_fallback
    )

    logger.info("应用启动完成")

    yield

    # 关闭时执行
    await app.state.http_client.aclose()
    logger.info("应用关闭")


# 创建FastAPI应用实例
app = FastAPI(
    title=settings.project_name,
    version=settings.app_version,
    description="多提供商AI图片生成与媒体创意分析服务",
    openapi_url=f"{settings.api_v1_str}/openapi.json",
    docs_url=f"{settings.api_v1_str}/docs",
    redoc_url=f"{settings.api_v1_str}/redoc",
    lifespan=lifespan
)

# 添加CORS中间件 - 确保在所有路由之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)

# 注册API路由
app.include_router(api_router, prefix=settings.api_v1_str)


@app.get("/")
def read_root():
    """根路径"""
    return {
        "message": "Dreamlab API",
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
