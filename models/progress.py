"""
进度模型模块
包含KPI进度记录和甘特图数据的模型定义
"""
from typing import List

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from schemas.records import GanttTask
from utils.json_column import JSONRecord

from .database import Base
from .enums import WorkStatus


class Progress(Base):
    """KPI进度表模型"""
    __tablename__ = "progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True, comment='所属项目ID')
    kpi_id = Column(String(50), nullable=False, comment='指标ID')
    kpi_name = Column(String(100), nullable=False, comment='指标名称')
    target = Column(String(100), nullable=False, comment='目标值，如 "3篇"')
    current = Column(String(100), comment='当前值')
    status = Column(String(20), default=WorkStatus.NOT_STARTED.value, comment='进度状态')
    completion = Column(Float, default=0, comment='完成百分比，0-100')
    notes = Column(Text, comment='备注')
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), comment='更新时间')

    project = relationship("Project", back_populates="progress_records")


class Gantt(Base):
    """甘特图数据表模型"""
    __tablename__ = "gantt"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, unique=True, comment='所属项目ID')
    data = Column(JSONRecord(List[GanttTask], list), nullable=False, comment='甘特图条目，JSON')
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), comment='更新时间')

    project = relationship("Project", back_populates="gantt")
