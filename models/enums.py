"""
枚举定义模块
包含系统中所有的枚举类型定义
"""
import enum


class ProjectStatus(str, enum.Enum):
    """项目状态枚举"""
    NOT_STARTED = "未开始"
    IN_PROGRESS = "进行中"
    COMPLETED = "已完成"
    DELAYED = "已延期"


class WorkStatus(str, enum.Enum):
    """里程碑、任务和KPI进度共用的状态枚举"""
    NOT_STARTED = "未开始"
    IN_PROGRESS = "进行中"
    COMPLETED = "已完成"


class OutputType(str, enum.Enum):
    """成果类型枚举，任务按成果类型归类"""
    PAPER = "论文"
    PATENT = "专利"
    SOFTWARE_COPYRIGHT = "软件著作权"
    TECHNICAL_REPORT = "技术报告"
    STANDARD = "标准规范"


class ProjectType(str, enum.Enum):
    """项目类型枚举"""
    NATIONAL = "国家级项目"
    PROVINCIAL = "省部级项目"
    MUNICIPAL = "市级项目"
    ENTERPRISE = "企业合作项目"
    HORIZONTAL = "横向课题"
    INTERNAL = "院校内部项目"


class OrganizationType(str, enum.Enum):
    """组织类型枚举"""
    COLLEGE = "学院"
    ENTERPRISE = "企业"
    GOVERNMENT = "政府部门"
    INSTITUTE = "科研院所"


class MilestoneType(str, enum.Enum):
    """里程碑类型枚举"""
    KEY = "关键"
    NORMAL = "普通"


class UserRole(str, enum.Enum):
    """用户角色枚举"""
    ADMIN = "admin"
    USER = "user"
