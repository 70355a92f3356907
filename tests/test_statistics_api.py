"""
统计接口测试
"""
from datetime import date, datetime

import pytest
from sqlalchemy import text

from conftest import link_organization, make_organization, make_project, make_task
from routers.statistics import get_statistics_service
from utils.exceptions import StatisticsError

ENDPOINTS = ["projects", "tasks", "outputs", "timeline", "budget", "organizations"]


@pytest.fixture
def sample_data(db_session):
    """三个项目，组织A与组织B共同参与第一个项目"""
    org_a = make_organization(db_session, "组织A", type="学院")
    org_b = make_organization(db_session, "组织B", type="企业")
    first = make_project(db_session, name="项目一", type="国家级项目", status="进行中",
                         start_date=date(2023, 1, 1), end_date=date(2024, 12, 31),
                         organizations=[org_a, org_b])
    make_project(db_session, name="项目二", type="横向课题", status="已完成",
                 start_date=date(2022, 5, 1), end_date=date(2023, 5, 1), organizations=[org_a])
    make_project(db_session, name="项目三", type="国家级项目", status="未开始",
                 start_date=date(2024, 6, 1), end_date=date(2025, 6, 1), organizations=[org_b])
    make_task(db_session, first, type="论文", status="已完成", end_date=date(2024, 2, 1),
              updated_at=datetime(2024, 2, 3, 10, 0))
    link_organization(db_session, make_project(db_session, name="项目四", type=None, status="已延期"),
                      org_a, is_leader=True, allocation=100000, self_funding=40000,
                      created_at=datetime(2024, 3, 1, 9, 0))
    db_session.commit()
    return {"org_a": org_a.id, "org_b": org_b.id}


class TestStatisticsEndpoints:
    def test_project_statistics(self, client, sample_data):
        response = client.get("/api/statistics/projects")

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "statusDistribution": {"ongoing": 1, "completed": 1, "delayed": 1, "pending": 1},
            "typeDistribution": {"国家级项目": 2, "横向课题": 1},
            "activeProjects": 1,
            "activeProjectsTrend": 0,
        }

    def test_task_statistics(self, client, sample_data):
        data = client.get("/api/statistics/tasks").json()

        assert data["timeline"][0] == "2023-04"
        assert data["timeline"][-1] == "2024-03"
        assert data["planned"][10] == 1
        assert data["actual"][10] == 1

    def test_output_statistics(self, client, sample_data):
        data = client.get("/api/statistics/outputs").json()

        assert data["types"] == ["论文", "专利", "软件著作权", "技术报告", "标准规范"]
        assert data["completed"] == [1, 0, 0, 0, 0]

    def test_timeline_points_are_pairs(self, client, sample_data):
        data = client.get("/api/statistics/timeline").json()

        assert data["projects"][0] == "项目三"
        assert data["startPoints"][0] == ["2024-06-01T00:00:00.000Z", "项目三"]
        assert len(data["midPoints"]) == len(data["projects"]) == 4

    def test_budget_statistics(self, client, sample_data):
        data = client.get("/api/statistics/budget").json()

        assert data["planned"][-1] == 10.0
        assert data["actual"][-1] == 4.0

    def test_organization_network(self, client, sample_data):
        data = client.get("/api/statistics/organizations").json()

        assert len(data["nodes"]) == 2
        assert data["links"] == [{"source": sample_data["org_a"], "target": sample_data["org_b"], "value": 1}]
        assert data["categories"] == [{"name": "学院"}, {"name": "企业"}]

    @pytest.mark.parametrize("endpoint", ENDPOINTS)
    def test_empty_database(self, client, endpoint):
        response = client.get(f"/api/statistics/{endpoint}")

        assert response.status_code == 200
        assert "code" not in response.json()


class TestStatisticsErrors:
    @pytest.mark.parametrize("endpoint", ENDPOINTS)
    def test_datastore_failure_returns_error_body(self, client, database, endpoint):
        database.drop_all()

        response = client.get(f"/api/statistics/{endpoint}")

        assert response.status_code == 500
        body = response.json()
        assert list(body) == ["error"]
        assert body["error"].startswith("Error getting ")

    def test_undecodable_row_returns_error_body(self, client, db_session):
        # 日期列中写入整数，读取时无法转换为日期
        db_session.execute(text(
            "INSERT INTO projects (name, type, status, start_date, end_date) "
            "VALUES ('坏数据项目', '国家级项目', '进行中', 20240101, 20241231)"
        ))
        db_session.commit()

        response = client.get("/api/statistics/timeline")

        assert response.status_code == 500
        body = response.json()
        assert list(body) == ["error"]
        assert body["error"].startswith("Error getting timeline data: ")

    def test_error_message_passes_through(self, app, client):
        class FailingService:
            def get_budget_statistics(self):
                raise StatisticsError("budget statistics", RuntimeError("disk I/O error"))

        app.dependency_overrides[get_statistics_service] = lambda: FailingService()

        response = client.get("/api/statistics/budget")

        assert response.status_code == 500
        assert response.json() == {"error": "Error getting budget statistics: disk I/O error"}


class TestApplication:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["code"] == "200"
        assert "version" in body["data"]

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["data"]["database"] == "connected"

    def test_unknown_route_uses_envelope(self, client):
        response = client.get("/api/statistics/unknown")

        assert response.status_code == 404
        assert response.json()["code"] == "404"

    def test_request_id_header(self, client):
        response = client.get("/api/statistics/projects")

        assert len(response.headers["X-Request-ID"]) == 8
        assert "X-Process-Time" in response.headers
