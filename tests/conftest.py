"""
LabMan 统计服务 - 测试配置与公共夹具
"""
import os
from datetime import date, datetime, timezone
from typing import Iterable, Optional

import pytest
from fastapi.testclient import TestClient
from faker import Faker

os.environ.setdefault("INIT_DB_ON_STARTUP", "false")

from config import Settings, create_app
from models import Database, Milestone, Organization, Project, ProjectOrganization, Task
from routers.statistics import get_clock
from services import StatisticsRepository, StatisticsService

fake = Faker("zh_CN")

# 测试统一使用的固定时间，统计窗口为 2023-04 ~ 2024-03
FIXED_NOW = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def database() -> Database:
    """每个测试使用独立的内存数据库"""
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session_factory()
    yield session
    session.close()


@pytest.fixture
def service(db_session) -> StatisticsService:
    return StatisticsService(StatisticsRepository(db_session), clock=fixed_clock)


@pytest.fixture
def app(database):
    settings = Settings(INIT_DB_ON_STARTUP=False, DATABASE_URL="sqlite://", LOG_FILE=None)
    application = create_app(settings, database=database)
    application.dependency_overrides[get_clock] = lambda: fixed_clock
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


# 测试数据构造

def make_organization(db, name: Optional[str] = None, type: str = "学院") -> Organization:
    org = Organization(name=name or fake.company(), type=type)
    db.add(org)
    db.flush()
    return org


def make_project(db, name: Optional[str] = None, type: Optional[str] = "国家级项目",
                 status: str = "进行中", start_date: date = date(2023, 1, 1),
                 end_date: date = date(2024, 12, 31),
                 organizations: Iterable[Organization] = ()) -> Project:
    """创建项目，organizations 中第一个组织为牵头单位"""
    organizations = list(organizations)
    project = Project(
        name=name or f"{fake.word()}研究项目",
        type=type,
        status=status,
        start_date=start_date,
        end_date=end_date,
        organization_id=organizations[0].id if organizations else None,
    )
    db.add(project)
    db.flush()
    for index, org in enumerate(organizations):
        link_organization(db, project, org, is_leader=index == 0)
    return project


def link_organization(db, project: Project, org: Optional[Organization], is_leader: bool = False,
                      allocation: float = 0, self_funding: float = 0,
                      created_at: Optional[datetime] = None,
                      organization_id: Optional[int] = None) -> ProjectOrganization:
    link = ProjectOrganization(
        project_id=project.id,
        organization_id=org.id if org is not None else organization_id,
        is_leader=is_leader,
        allocation=allocation,
        self_funding=self_funding,
    )
    if created_at is not None:
        link.created_at = created_at
    db.add(link)
    db.flush()
    return link


def make_task(db, project: Project, type: Optional[str] = None, status: str = "未开始",
              end_date: Optional[date] = None, updated_at: Optional[datetime] = None) -> Task:
    milestone = Milestone(project_id=project.id, title="阶段目标", due_date=project.end_date)
    db.add(milestone)
    db.flush()
    task = Task(
        milestone_id=milestone.id,
        name=fake.sentence(nb_words=3),
        type=type,
        status=status,
        end_date=end_date,
    )
    if updated_at is not None:
        task.updated_at = updated_at
    db.add(task)
    db.flush()
    return task
