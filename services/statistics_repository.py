"""统计数据访问模块

执行参数化查询并返回普通行数据，不包含任何汇总逻辑
"""
from datetime import date
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from sqlalchemy import distinct, func
from sqlalchemy.orm import Session, aliased

from models import Organization, Project, ProjectOrganization, Task


class ProjectSpan(NamedTuple):
    name: str
    start_date: date
    end_date: date


class OrganizationRow(NamedTuple):
    id: int
    name: str
    type: str


class CollaborationRow(NamedTuple):
    source: int
    target: int
    value: int


class FundingRow(NamedTuple):
    month: str
    allocation: float
    self_funding: float


class StatisticsRepository:
    """统计查询仓库"""

    def __init__(self, db: Session):
        self.db = db

    def _month_of(self, column):
        """按数据库方言生成 YYYY-MM 月份表达式"""
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            return func.to_char(column, "YYYY-MM")
        if dialect in ("mysql", "mariadb"):
            return func.date_format(column, "%Y-%m")
        return func.strftime("%Y-%m", column)

    # 项目

    def count_projects_by_status(self) -> Dict[str, int]:
        """按状态统计项目数量"""
        rows = self.db.query(Project.status, func.count(Project.id))\
            .filter(Project.status.isnot(None))\
            .group_by(Project.status)\
            .all()
        return {status: count for status, count in rows}

    def count_projects_by_type(self) -> List[Tuple[str, int]]:
        """按类型统计项目数量，类型为空的项目不计入"""
        rows = self.db.query(Project.type, func.count(Project.id))\
            .filter(Project.type.isnot(None))\
            .group_by(Project.type)\
            .order_by(Project.type)\
            .all()
        return [(project_type, count) for project_type, count in rows]

    def count_projects(self, status: str, started_on_or_before: Optional[date] = None) -> int:
        """统计指定状态的项目数量，可限定开始日期上限"""
        query = self.db.query(func.count(Project.id)).filter(Project.status == status)
        if started_on_or_before is not None:
            query = query.filter(Project.start_date <= started_on_or_before)
        return query.scalar() or 0

    def recent_projects(self, limit: int = 10) -> List[ProjectSpan]:
        """按开始日期倒序获取最近的项目"""
        rows = self.db.query(Project.name, Project.start_date, Project.end_date)\
            .filter(Project.start_date.isnot(None), Project.end_date.isnot(None))\
            .order_by(Project.start_date.desc(), Project.id.desc())\
            .limit(limit)\
            .all()
        return [ProjectSpan(*row) for row in rows]

    # 任务

    def count_tasks_due_by_month(self, months: Sequence[str]) -> Dict[str, int]:
        """统计计划结束日期落在各月份的任务数量"""
        month = self._month_of(Task.end_date)
        rows = self.db.query(month, func.count(Task.id))\
            .filter(month.in_(list(months)))\
            .group_by(month)\
            .all()
        return {key: count for key, count in rows}

    def count_tasks_completed_by_month(self, months: Sequence[str], completed_status: str) -> Dict[str, int]:
        """统计各月份内更新为已完成状态的任务数量"""
        month = self._month_of(Task.updated_at)
        rows = self.db.query(month, func.count(Task.id))\
            .filter(Task.status == completed_status, month.in_(list(months)))\
            .group_by(month)\
            .all()
        return {key: count for key, count in rows}

    def count_tasks_by_type_and_status(
        self, types: Sequence[str], statuses: Sequence[str]
    ) -> Dict[Tuple[str, str], int]:
        """按成果类型和状态统计任务数量"""
        rows = self.db.query(Task.type, Task.status, func.count(Task.id))\
            .filter(Task.type.in_(list(types)), Task.status.in_(list(statuses)))\
            .group_by(Task.type, Task.status)\
            .all()
        return {(task_type, status): count for task_type, status, count in rows}

    # 经费

    def sum_funding_by_month(self, months: Sequence[str]) -> List[FundingRow]:
        """按创建月份汇总参与单位的拨付经费和自筹经费"""
        month = self._month_of(ProjectOrganization.created_at)
        rows = self.db.query(
            month,
            func.coalesce(func.sum(ProjectOrganization.allocation), 0),
            func.coalesce(func.sum(ProjectOrganization.self_funding), 0)
        )\
            .filter(month.in_(list(months)))\
            .group_by(month)\
            .all()
        return [FundingRow(key, float(allocation), float(self_funding)) for key, allocation, self_funding in rows]

    # 组织

    def list_organizations(self) -> List[OrganizationRow]:
        """获取全部组织"""
        rows = self.db.query(Organization.id, Organization.name, Organization.type)\
            .order_by(Organization.id)\
            .all()
        return [OrganizationRow(*row) for row in rows]

    def collaboration_pairs(self) -> List[CollaborationRow]:
        """统计每对组织共同参与的项目数量，只返回 source < target 的组合"""
        po1 = aliased(ProjectOrganization)
        po2 = aliased(ProjectOrganization)
        o1 = aliased(Organization)
        o2 = aliased(Organization)

        rows = self.db.query(o1.id, o2.id, func.count(distinct(po1.project_id)))\
            .select_from(po1)\
            .join(po2, po1.project_id == po2.project_id)\
            .join(Project, Project.id == po1.project_id)\
            .join(o1, o1.id == po1.organization_id)\
            .join(o2, o2.id == po2.organization_id)\
            .filter(o1.id < o2.id)\
            .group_by(o1.id, o2.id)\
            .order_by(o1.id, o2.id)\
            .all()
        return [CollaborationRow(*row) for row in rows]
