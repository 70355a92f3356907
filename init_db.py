#!/usr/bin/env python3
"""
数据库初始化脚本
用于创建数据库表、组织参考数据和默认管理员
"""

import argparse
import logging
import sys

from config import get_settings
from config.logging_config import setup_logging
from models import Database
from utils.database_initializer import init_database

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="初始化 LabMan 数据库")
    parser.add_argument("--force", action="store_true", help="删除现有数据表后重新创建")
    parser.add_argument("--database-url", help="数据库连接地址，默认读取配置")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)
    database = Database(args.database_url or settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    print("=== 开始初始化数据库 ===")
    try:
        result = init_database(
            database,
            admin_username=settings.ADMIN_USERNAME,
            admin_password=settings.ADMIN_PASSWORD,
            force=args.force
        )
    except Exception as e:
        logger.error(f"数据库初始化失败: {e}")
        print(f"❌ 数据库初始化失败: {e}")
        return 1
    finally:
        database.dispose()

    print(f"✅ 数据库初始化完成: 新建组织 {result['organizations']} 个, 新建管理员 {result['admins']} 个")
    return 0


if __name__ == "__main__":
    sys.exit(main())
