"""
日志配置测试
"""
import json
import logging

import pytest

from config import Settings
from config.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _flush():
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_json_file_log_enabled_by_setting(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "labman.log"
    setup_logging(Settings(LOG_FILE=str(log_file), LOG_JSON=True, LOG_ENABLE_COLORS=False))

    logging.getLogger("API_Logger").info("GET /api/statistics/projects 200", extra={
        "request_id": "ab12cd34", "status_code": 200
    })
    _flush()

    entry = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert entry["level"] == "INFO"
    assert entry["logger"] == "API_Logger"
    assert entry["request_id"] == "ab12cd34"
    assert entry["status_code"] == 200


def test_plain_file_log_by_default(tmp_path, restore_root_logger):
    log_file = tmp_path / "labman.log"
    setup_logging(Settings(LOG_FILE=str(log_file), LOG_ENABLE_COLORS=False), log_level="debug")

    logging.getLogger("services").debug("组织协作网络: 2 个节点")
    _flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert "DEBUG" in line
    assert "组织协作网络: 2 个节点" in line
    assert not line.startswith("{")
