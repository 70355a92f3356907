"""异常处理器配置模块

配置全局异常处理器
"""
import logging

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.exceptions import BusinessException, StatisticsError
from utils.response_utils import standard_response
from utils.status_codes import INTERNAL_ERROR, VALIDATION_ERROR

logger = logging.getLogger(__name__)


def configure_exception_handlers(app: FastAPI) -> None:
    """配置全局异常处理器"""

    @app.exception_handler(StatisticsError)
    async def statistics_exception_handler(request, exc: StatisticsError):
        """统计报表异常处理器，原样返回底层错误信息"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message}
        )

    @app.exception_handler(BusinessException)
    async def business_exception_handler(request, exc: BusinessException):
        """业务异常处理器"""
        return JSONResponse(
            status_code=exc.status_code,
            content=standard_response(data=exc.data, code=exc.code, message=exc.message)
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc: StarletteHTTPException):
        """HTTP异常处理器"""
        detail = exc.detail
        if isinstance(detail, dict):
            message = detail.get("message", str(detail))
            data = detail.get("data")
        else:
            message = str(detail)
            data = None

        return JSONResponse(
            status_code=exc.status_code,
            content=standard_response(data=data, code=str(exc.status_code), message=message),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc: RequestValidationError):
        """请求参数校验异常处理器"""
        return JSONResponse(
            status_code=422,
            content=standard_response(data=jsonable_encoder(exc.errors()), code=VALIDATION_ERROR)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request, exc: Exception):
        """通用异常处理器"""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content=standard_response(code=INTERNAL_ERROR, message="服务器内部错误")
        )
