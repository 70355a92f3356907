"""
项目模型模块
包含项目及项目参与单位的数据模型定义
"""
from typing import List

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from schemas.records import ExpectedOutcomes, KpiItem, NameList, TeamAllocation
from utils.json_column import JSONRecord

from .base import CreatedAtMixin, TimestampMixin
from .database import Base
from .enums import ProjectStatus


class Project(Base, TimestampMixin):
    """项目表模型"""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='项目ID')
    name = Column(String(200), nullable=False, comment='项目名称')
    type = Column(String(50), comment='项目类型')
    status = Column(String(20), default=ProjectStatus.NOT_STARTED.value, comment='项目状态')
    organization_id = Column(Integer, ForeignKey("organizations.id", ondelete="SET NULL"), comment='牵头单位ID')
    leader_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), comment='项目负责人ID')
    contact_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), comment='项目联系人ID')
    team_allocation = Column(JSONRecord(TeamAllocation, dict), comment='团队人员构成，JSON')
    collaborators = Column(JSONRecord(NameList, list), comment='合作单位名称列表，JSON')
    start_date = Column(Date, nullable=False, comment='项目开始日期')
    end_date = Column(Date, nullable=False, comment='项目结束日期')
    summary = Column(Text, comment='项目简介')
    kpis = Column(JSONRecord(List[KpiItem], list), comment='考核指标列表，JSON')
    budget = Column(Float, comment='项目预算（元）')
    task_document = Column(String(255), comment='任务书文件路径')

    # 关系
    organization = relationship("Organization", back_populates="projects")
    leader = relationship("User", foreign_keys=[leader_id])
    contact = relationship("User", foreign_keys=[contact_id])
    organization_links = relationship(
        "ProjectOrganization", back_populates="project",
        cascade="all, delete-orphan", passive_deletes=True
    )
    milestones = relationship(
        "Milestone", back_populates="project",
        cascade="all, delete-orphan", passive_deletes=True
    )
    progress_records = relationship(
        "Progress", back_populates="project",
        cascade="all, delete-orphan", passive_deletes=True
    )
    gantt = relationship(
        "Gantt", back_populates="project", uselist=False,
        cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Project(id={self.id}, name='{self.name}', status='{self.status}')>"


class ProjectOrganization(Base, CreatedAtMixin):
    """项目参与单位表模型"""
    __tablename__ = "project_organizations"
    __table_args__ = (
        UniqueConstraint("project_id", "organization_id", name="uq_project_organization"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True, comment='项目ID')
    organization_id = Column(Integer, ForeignKey("organizations.id", ondelete="CASCADE"), index=True, comment='单位ID')
    is_leader = Column(Boolean, default=False, nullable=False, comment='是否牵头单位')
    self_funding = Column(Float, default=0, comment='自筹经费（元）')
    allocation = Column(Float, default=0, comment='拨付经费（元）')
    leader = Column(String(100), comment='单位负责人姓名')
    contact = Column(String(100), comment='单位联系人姓名')
    participants = Column(JSONRecord(NameList, list), comment='参与人员姓名列表，JSON')
    expected_outcomes = Column(JSONRecord(ExpectedOutcomes, ExpectedOutcomes), comment='预期成果数量，JSON')

    # 关系
    project = relationship("Project", back_populates="organization_links")
    organization = relationship("Organization", back_populates="project_links")
