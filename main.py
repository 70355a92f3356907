import uvicorn

from config import create_app, get_settings
from config.logging_config import setup_logging

settings = get_settings()

# 配置日志
setup_logging(settings)

# 创建FastAPI应用
app = create_app(settings)

if __name__ == "__main__":
    print(f"🚀 启动 {settings.APP_NAME} ...")
    print(f"📍 地址: http://{settings.HOST}:{settings.PORT}")
    print(f"🔧 调试模式: {settings.DEBUG}")
    print(f"📚 API文档: http://{settings.HOST}:{settings.PORT}/docs")

    if settings.DEBUG:
        # 开发模式使用import string以支持reload
        uvicorn.run(
            "main:app",
            host=settings.HOST,
            port=settings.PORT,
            reload=True,
            log_level="debug"
        )
    else:
        uvicorn.run(
            app,
            host=settings.HOST,
            port=settings.PORT,
            log_level="info"
        )
