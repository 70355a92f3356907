"""统计服务模块

基于数据访问层计算六类只读统计报表
"""
import logging
import math
from datetime import datetime, timezone
from typing import Callable, Dict, List

from models.enums import OutputType, ProjectStatus, WorkStatus
from schemas.statistics import (
    BudgetStatistics, NetworkCategory, NetworkLink, NetworkNode, OrganizationNetwork,
    OutputStatistics, ProjectStatistics, StatusDistribution, TaskStatistics, TimelineData
)
from services.statistics_repository import FundingRow, StatisticsRepository
from utils.date_utils import midpoint, shift_months, to_iso_timestamp, trailing_months
from utils.error_handler import statistics_report

logger = logging.getLogger(__name__)

# 统计窗口：最近12个自然月
TREND_MONTHS = 12
# 时间轴展示的项目数量
TIMELINE_LIMIT = 10
# 经费单位换算：元 -> 万元
BUDGET_UNIT = 10000
# 协作网络节点大小
NODE_SYMBOL_SIZE = 50

OUTPUT_TYPES: List[str] = [output_type.value for output_type in OutputType]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def calculate_trend(current: int, baseline: int) -> int:
    """计算环比百分比，四舍五入取整；基数为0时返回0"""
    if not baseline:
        return 0
    return math.floor((current - baseline) / baseline * 100 + 0.5)


class StatisticsService:
    """统计服务类"""

    def __init__(self, repository: StatisticsRepository, clock: Callable[[], datetime] = utc_now):
        self.repository = repository
        self.clock = clock

    def _window(self) -> List[str]:
        return trailing_months(self.clock(), TREND_MONTHS)

    @statistics_report("project statistics")
    def get_project_statistics(self) -> ProjectStatistics:
        """项目状态与类型分布，以及活跃项目环比趋势"""
        by_status = self.repository.count_projects_by_status()
        status_distribution = StatusDistribution(
            ongoing=by_status.get(ProjectStatus.IN_PROGRESS.value, 0),
            completed=by_status.get(ProjectStatus.COMPLETED.value, 0),
            delayed=by_status.get(ProjectStatus.DELAYED.value, 0),
            pending=by_status.get(ProjectStatus.NOT_STARTED.value, 0),
        )
        type_distribution = dict(self.repository.count_projects_by_type())

        active_projects = status_distribution.ongoing
        month_ago = shift_months(self.clock().date(), -1)
        last_month_active = self.repository.count_projects(
            ProjectStatus.IN_PROGRESS.value, started_on_or_before=month_ago
        )

        return ProjectStatistics(
            statusDistribution=status_distribution,
            typeDistribution=type_distribution,
            activeProjects=active_projects,
            activeProjectsTrend=calculate_trend(active_projects, last_month_active),
        )

    @statistics_report("task statistics")
    def get_task_statistics(self) -> TaskStatistics:
        """最近12个月计划完成与实际完成的任务数量"""
        months = self._window()
        planned = self.repository.count_tasks_due_by_month(months)
        actual = self.repository.count_tasks_completed_by_month(months, WorkStatus.COMPLETED.value)

        return TaskStatistics(
            timeline=months,
            planned=[planned.get(month, 0) for month in months],
            actual=[actual.get(month, 0) for month in months],
        )

    @statistics_report("output statistics")
    def get_output_statistics(self) -> OutputStatistics:
        """各成果类型在不同状态下的任务数量"""
        statuses = [WorkStatus.COMPLETED.value, WorkStatus.IN_PROGRESS.value, WorkStatus.NOT_STARTED.value]
        counts = self.repository.count_tasks_by_type_and_status(OUTPUT_TYPES, statuses)

        def column(status: str) -> List[int]:
            return [counts.get((output_type, status), 0) for output_type in OUTPUT_TYPES]

        return OutputStatistics(
            types=list(OUTPUT_TYPES),
            completed=column(WorkStatus.COMPLETED.value),
            ongoing=column(WorkStatus.IN_PROGRESS.value),
            planned=column(WorkStatus.NOT_STARTED.value),
        )

    @statistics_report("timeline data")
    def get_timeline_data(self) -> TimelineData:
        """最近开始的10个项目的起止时间与中点"""
        projects = self.repository.recent_projects(TIMELINE_LIMIT)

        names = []
        start_points, mid_points, end_points = [], [], []
        for project in projects:
            names.append(project.name)
            start_points.append((to_iso_timestamp(project.start_date), project.name))
            mid_points.append((to_iso_timestamp(midpoint(project.start_date, project.end_date)), project.name))
            end_points.append((to_iso_timestamp(project.end_date), project.name))

        return TimelineData(
            projects=names,
            startPoints=start_points,
            midPoints=mid_points,
            endPoints=end_points,
        )

    @statistics_report("budget statistics")
    def get_budget_statistics(self) -> BudgetStatistics:
        """最近12个月的拨付经费与自筹经费（万元）"""
        months = self._window()
        totals: Dict[str, FundingRow] = {row.month: row for row in self.repository.sum_funding_by_month(months)}
        rows = [totals.get(month, FundingRow(month, 0.0, 0.0)) for month in months]

        return BudgetStatistics(
            timeline=months,
            planned=[row.allocation / BUDGET_UNIT for row in rows],
            actual=[row.self_funding / BUDGET_UNIT for row in rows],
        )

    @statistics_report("organization network")
    def get_organization_network(self) -> OrganizationNetwork:
        """组织协作网络：共同参与项目的组织之间连边，权重为共同项目数"""
        organizations = self.repository.list_organizations()

        nodes = [
            NetworkNode(id=org.id, name=org.name, symbolSize=NODE_SYMBOL_SIZE, category=org.type)
            for org in organizations
        ]
        links = [
            NetworkLink(source=pair.source, target=pair.target, value=pair.value)
            for pair in self.repository.collaboration_pairs()
        ]
        categories = [NetworkCategory(name=org_type) for org_type in dict.fromkeys(org.type for org in organizations)]

        logger.debug(f"组织协作网络: {len(nodes)} 个节点, {len(links)} 条连边")
        return OrganizationNetwork(nodes=nodes, links=links, categories=categories)
