# 类型化JSON记录
from .records import KpiItem, ExpectedOutcomes, GanttTask, TeamAllocation, NameList

# 统计报表模式
from .statistics import (
    StatusDistribution, ProjectStatistics, TaskStatistics, OutputStatistics,
    TimelineData, BudgetStatistics, NetworkNode, NetworkLink, NetworkCategory,
    OrganizationNetwork, ErrorResponse
)
