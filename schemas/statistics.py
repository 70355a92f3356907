from typing import Dict, List, Tuple

from pydantic import BaseModel, Field


# 项目状态分布
class StatusDistribution(BaseModel):
    ongoing: int = 0
    completed: int = 0
    delayed: int = 0
    pending: int = 0


# 项目统计
class ProjectStatistics(BaseModel):
    statusDistribution: StatusDistribution
    typeDistribution: Dict[str, int]
    activeProjects: int
    activeProjectsTrend: int = Field(..., description="活跃项目环比变化百分比")


# 任务完成趋势
class TaskStatistics(BaseModel):
    timeline: List[str] = Field(..., description="月份，格式 YYYY-MM")
    planned: List[int]
    actual: List[int]


# 成果产出统计
class OutputStatistics(BaseModel):
    types: List[str]
    completed: List[int]
    ongoing: List[int]
    planned: List[int]


# 项目时间轴，每个点为 [ISO时间, 项目名称]
class TimelineData(BaseModel):
    projects: List[str]
    startPoints: List[Tuple[str, str]]
    midPoints: List[Tuple[str, str]]
    endPoints: List[Tuple[str, str]]


# 经费趋势（万元）
class BudgetStatistics(BaseModel):
    timeline: List[str]
    planned: List[float]
    actual: List[float]


# 组织协作网络
class NetworkNode(BaseModel):
    id: int
    name: str
    symbolSize: int = 50
    category: str


class NetworkLink(BaseModel):
    source: int
    target: int
    value: int


class NetworkCategory(BaseModel):
    name: str


class OrganizationNetwork(BaseModel):
    nodes: List[NetworkNode]
    links: List[NetworkLink]
    categories: List[NetworkCategory]


# 统计接口错误响应
class ErrorResponse(BaseModel):
    error: str
