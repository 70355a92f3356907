"""数据库连接模块

Database 对象在应用启动时创建一次，通过依赖注入传递给各个请求
"""
import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# 创建基础模型类
Base = declarative_base()


class Database:
    """数据库访问封装，持有引擎和会话工厂"""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: Engine = self._create_engine(url, echo)
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    @staticmethod
    def _create_engine(url: str, echo: bool) -> Engine:
        if url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            # 内存数据库必须共享同一个连接，否则每个会话看到的是空库
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(url, echo=echo, **kwargs)
        return create_engine(url, echo=echo, pool_pre_ping=True)

    def create_all(self) -> None:
        """创建所有数据表"""
        # 导入模型以注册到 Base.metadata
        import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        """删除所有数据表"""
        import models  # noqa: F401
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """提供一个事务范围内的会话"""
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def ping(self) -> bool:
        """检查数据库连通性"""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """从应用状态中获取 Database 实例"""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """数据库会话依赖注入"""
    db = get_database(request).session_factory()
    try:
        yield db
    finally:
        db.close()
