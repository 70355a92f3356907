"""
模型模块初始化文件
提供统一的导入接口
"""

# 导入数据库基础配置
from .database import Base, Database, get_database, get_db

# 导入枚举类型
from .enums import (
    ProjectStatus, ProjectType, WorkStatus, OutputType,
    OrganizationType, MilestoneType, UserRole
)

# 导入模型类
from .organization import Organization
from .user import User
from .project import Project, ProjectOrganization
from .milestone import Milestone
from .task import Task
from .progress import Progress, Gantt

__all__ = [
    # 数据库配置
    'Base', 'Database', 'get_database', 'get_db',

    # 枚举类型
    'ProjectStatus', 'ProjectType', 'WorkStatus', 'OutputType',
    'OrganizationType', 'MilestoneType', 'UserRole',

    # 模型类
    'Organization', 'User', 'Project', 'ProjectOrganization',
    'Milestone', 'Task', 'Progress', 'Gantt'
]
