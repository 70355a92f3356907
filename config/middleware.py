"""中间件配置模块

包含所有中间件的配置
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings
from utils.logging_middleware import RequestLoggingMiddleware


def configure_middleware(app: FastAPI, settings: Settings) -> None:
    """配置应用中间件"""
    # CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    # 请求日志中间件
    app.add_middleware(RequestLoggingMiddleware)
