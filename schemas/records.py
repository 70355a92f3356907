"""JSON列对应的类型化记录

数据库中以JSON文本保存的半结构化字段，在读写时转换为这些记录
"""
from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# 团队人员构成，如 {"研究人员": 3, "技术人员": 2}
TeamAllocation = Dict[str, int]

# 人员姓名列表
NameList = List[str]


class KpiItem(BaseModel):
    """项目考核指标"""
    id: Optional[str] = None
    name: str
    target: str


class ExpectedOutcomes(BaseModel):
    """参与单位预期成果数量"""
    model_config = ConfigDict(extra="ignore")

    software: int = Field(0, ge=0)
    hardware: int = Field(0, ge=0)
    papers: int = Field(0, ge=0)
    patents: int = Field(0, ge=0)
    copyrights: int = Field(0, ge=0)
    standards: int = Field(0, ge=0)
    reports: int = Field(0, ge=0)
    demonstrations: int = Field(0, ge=0)

    @property
    def total(self) -> int:
        return (self.software + self.hardware + self.papers + self.patents
                + self.copyrights + self.standards + self.reports + self.demonstrations)


class GanttTask(BaseModel):
    """甘特图条目"""
    id: str
    name: str
    start: date
    end: date
    progress: float = Field(0, ge=0, le=100)
    dependencies: List[str] = Field(default_factory=list)
