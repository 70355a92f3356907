#!/usr/bin/env python3
"""
测试数据生成脚本
清除现有项目数据后批量生成随机项目，用于演示统计报表
"""

import argparse
import logging
import sys

from config import get_settings
from config.logging_config import setup_logging
from models import Database
from utils.database_initializer import init_database
from utils.test_data_generator import generate_test_data

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="生成 LabMan 测试数据")
    parser.add_argument("--projects", type=int, default=200, help="生成的项目数量")
    parser.add_argument("--seed", type=int, default=None, help="随机种子，指定后结果可复现")
    parser.add_argument("--database-url", help="数据库连接地址，默认读取配置")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)
    database = Database(args.database_url or settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    print(f"=== 开始生成测试数据 ({args.projects} 个项目) ===")
    try:
        # 保证数据表和组织参考数据存在
        init_database(
            database,
            admin_username=settings.ADMIN_USERNAME,
            admin_password=settings.ADMIN_PASSWORD
        )
        with database.session() as db:
            summary = generate_test_data(
                db,
                project_count=args.projects,
                seed=args.seed,
                admin_username=settings.ADMIN_USERNAME
            )
    except Exception as e:
        logger.error(f"测试数据生成失败: {e}")
        print(f"❌ 测试数据生成失败: {e}")
        return 1
    finally:
        database.dispose()

    print("✅ 测试数据生成完成")
    for name, count in summary.items():
        print(f"  {name}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
