"""应用配置模块

负责创建FastAPI应用实例和配置路由
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from config.exception_handlers import configure_exception_handlers
from config.middleware import configure_middleware
from config.settings import Settings, get_settings
from models.database import Database
from routers import statistics
from utils.database_initializer import init_database
from utils.response_utils import standard_response
from utils.status_codes import SERVICE_UNAVAILABLE

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """创建FastAPI应用实例

    database 未传入时根据 settings.DATABASE_URL 创建，并在整个进程生命周期内共享
    """
    settings = settings or get_settings()
    database = database or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
        if settings.INIT_DB_ON_STARTUP:
            init_database(
                database,
                admin_username=settings.ADMIN_USERNAME,
                admin_password=settings.ADMIN_PASSWORD
            )
        yield
        database.dispose()
        logger.info("Application shutdown completed")

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.VERSION,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = database

    configure_middleware(app, settings)
    configure_exception_handlers(app)
    configure_routes(app)

    return app


def configure_routes(app: FastAPI) -> None:
    """配置应用路由"""
    app.include_router(statistics.router, prefix="/api/statistics", tags=["统计分析"])

    # 根路径
    @app.get("/")
    async def root():
        settings = app.state.settings
        return standard_response(
            data={"name": settings.APP_NAME, "version": settings.VERSION},
            message="LabMan 统计服务"
        )

    # 健康检查
    @app.get("/health")
    def health_check():
        try:
            app.state.database.ping()
        except Exception as e:
            logger.error(f"数据库连接检查失败: {e}")
            return JSONResponse(
                status_code=503,
                content=standard_response(
                    data={"status": "unhealthy", "database": "unreachable"},
                    code=SERVICE_UNAVAILABLE
                )
            )
        return standard_response(
            data={"status": "healthy", "database": "connected"},
            message="服务运行正常"
        )
