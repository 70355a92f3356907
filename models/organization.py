"""
组织模型模块
包含组织相关的数据模型定义
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import CreatedAtMixin
from .database import Base


class Organization(Base, CreatedAtMixin):
    """组织表模型"""
    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='组织ID')
    name = Column(String(100), unique=True, nullable=False, comment='组织名称，唯一')
    type = Column(String(50), nullable=False, comment='组织类型，如 学院/企业/政府部门')

    # 关系
    users = relationship("User", back_populates="organization")
    projects = relationship("Project", back_populates="organization")
    project_links = relationship("ProjectOrganization", back_populates="organization")

    def __repr__(self):
        return f"<Organization(id={self.id}, name='{self.name}', type='{self.type}')>"
