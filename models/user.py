"""
用户模型模块
包含用户相关的数据模型定义
"""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import CreatedAtMixin
from .database import Base
from .enums import UserRole


class User(Base, CreatedAtMixin):
    """用户表模型"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='用户ID')
    username = Column(String(50), unique=True, index=True, nullable=False, comment='用户名，唯一标识')
    password = Column(String(255), nullable=False, comment='登录密码')
    name = Column(String(100), nullable=False, comment='用户真实姓名')
    role = Column(String(20), nullable=False, default=UserRole.USER.value, comment='用户角色')
    organization_id = Column(Integer, ForeignKey("organizations.id", ondelete="SET NULL"), comment='所属组织ID')
    id_number = Column(String(30), comment='身份证号')
    position = Column(String(50), comment='职务')
    title = Column(String(50), comment='职称')
    education = Column(String(20), comment='学历')
    major = Column(String(50), comment='专业')
    research_area = Column(String(100), comment='研究方向')
    theme = Column(String(30), default='', comment='界面主题')
    dark_mode = Column(Boolean, default=False, comment='是否暗色模式')

    # 关系
    organization = relationship("Organization", back_populates="users")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
