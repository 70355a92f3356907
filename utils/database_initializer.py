#!/usr/bin/env python3
"""
数据库初始化器
创建数据表并写入组织参考数据和默认管理员
"""

import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from models import Database, Organization, OrganizationType, User, UserRole

logger = logging.getLogger(__name__)

# 组织参考数据
DEFAULT_ORGANIZATIONS: List[Dict[str, str]] = [
    {"name": "计算机科学与技术学院", "type": OrganizationType.COLLEGE.value},
    {"name": "信息工程学院", "type": OrganizationType.COLLEGE.value},
    {"name": "电子与通信工程学院", "type": OrganizationType.COLLEGE.value},
    {"name": "智能制造学院", "type": OrganizationType.COLLEGE.value},
    {"name": "华信科技有限公司", "type": OrganizationType.ENTERPRISE.value},
    {"name": "中智数据股份有限公司", "type": OrganizationType.ENTERPRISE.value},
    {"name": "云启网络科技有限公司", "type": OrganizationType.ENTERPRISE.value},
    {"name": "市科学技术局", "type": OrganizationType.GOVERNMENT.value},
    {"name": "省工业和信息化厅", "type": OrganizationType.GOVERNMENT.value},
    {"name": "人工智能研究院", "type": OrganizationType.INSTITUTE.value},
]


class DatabaseInitializer:
    """数据库初始化器"""

    def __init__(self, database: Database, admin_username: str = "admin",
                 admin_password: str = "password", force_init: bool = False):
        """
        初始化数据库初始化器

        Args:
            database: 数据库访问对象
            admin_username: 默认管理员用户名
            admin_password: 默认管理员密码
            force_init: 是否强制初始化（删除现有数据）
        """
        self.database = database
        self.admin_username = admin_username
        self.admin_password = admin_password
        self.force_init = force_init

    def create_tables(self):
        """创建数据库表"""
        if self.force_init:
            logger.warning("强制初始化：删除所有数据表")
            self.database.drop_all()
        self.database.create_all()
        logger.info("数据库表创建完成")

    def create_organizations(self, db: Session) -> int:
        """写入组织参考数据，组织表非空时跳过"""
        existing = db.query(Organization).count()
        if existing > 0:
            logger.info(f"检测到现有组织数据 ({existing} 条)，跳过初始化")
            return 0

        for data in DEFAULT_ORGANIZATIONS:
            db.add(Organization(**data))
        logger.info(f"已创建 {len(DEFAULT_ORGANIZATIONS)} 个组织")
        return len(DEFAULT_ORGANIZATIONS)

    def create_admin(self, db: Session) -> bool:
        """创建默认管理员，已存在时跳过"""
        admin = db.query(User).filter(User.username == self.admin_username).first()
        if admin:
            return False

        db.add(User(
            username=self.admin_username,
            password=self.admin_password,
            name="Administrator",
            role=UserRole.ADMIN.value
        ))
        logger.info(f"已创建管理员用户: {self.admin_username}")
        return True

    def initialize(self) -> Dict[str, int]:
        """执行完整初始化流程，可重复执行"""
        self.create_tables()
        with self.database.session() as db:
            organizations = self.create_organizations(db)
            admin_created = self.create_admin(db)
        return {"organizations": organizations, "admins": int(admin_created)}


def init_database(database: Database, admin_username: str = "admin",
                  admin_password: str = "password", force: bool = False) -> Dict[str, int]:
    """初始化数据库的便捷函数"""
    initializer = DatabaseInitializer(
        database,
        admin_username=admin_username,
        admin_password=admin_password,
        force_init=force
    )
    return initializer.initialize()
