from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from models.database import get_db
from schemas.statistics import (
    BudgetStatistics, ErrorResponse, OrganizationNetwork, OutputStatistics,
    ProjectStatistics, TaskStatistics, TimelineData
)
from services.statistics_repository import StatisticsRepository
from services.statistics_service import StatisticsService, utc_now

router = APIRouter(responses={500: {"model": ErrorResponse, "description": "统计查询失败"}})


def get_clock() -> Callable[[], datetime]:
    """当前时间来源，测试中可替换"""
    return utc_now


def get_statistics_service(
    db: Session = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock)
) -> StatisticsService:
    return StatisticsService(StatisticsRepository(db), clock=clock)


# 获取项目统计信息
@router.get("/projects", response_model=ProjectStatistics)
def get_project_statistics(service: StatisticsService = Depends(get_statistics_service)):
    """项目状态分布、类型分布及活跃项目趋势"""
    return service.get_project_statistics()


# 获取任务统计信息
@router.get("/tasks", response_model=TaskStatistics)
def get_task_statistics(service: StatisticsService = Depends(get_statistics_service)):
    """最近12个月任务计划完成与实际完成数量"""
    return service.get_task_statistics()


# 获取成果统计信息
@router.get("/outputs", response_model=OutputStatistics)
def get_output_statistics(service: StatisticsService = Depends(get_statistics_service)):
    """各类成果的完成、进行中、计划数量"""
    return service.get_output_statistics()


# 获取时间线数据
@router.get("/timeline", response_model=TimelineData)
def get_timeline_data(service: StatisticsService = Depends(get_statistics_service)):
    """最近10个项目的时间轴"""
    return service.get_timeline_data()


# 获取经费统计信息
@router.get("/budget", response_model=BudgetStatistics)
def get_budget_statistics(service: StatisticsService = Depends(get_statistics_service)):
    """最近12个月经费趋势（万元）"""
    return service.get_budget_statistics()


# 获取组织协作网络数据
@router.get("/organizations", response_model=OrganizationNetwork)
def get_organization_network(service: StatisticsService = Depends(get_statistics_service)):
    """组织协作网络图数据"""
    return service.get_organization_network()
