"""
SQLAlchemy类型化JSON字段类型
"""
import logging

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import Text, TypeDecorator

logger = logging.getLogger(__name__)


class JSONRecord(TypeDecorator):
    """以JSON文本存储、按pydantic类型读写的字段类型

    写入时校验并编码，读取时解码为类型化记录。
    数据库中无法解析的内容按空值返回并记录警告。
    """

    impl = Text
    cache_ok = True

    def __init__(self, record_type, empty=None):
        super().__init__()
        self.record_type = record_type
        self.empty = empty

    @property
    def adapter(self) -> TypeAdapter:
        adapter = self.__dict__.get("_adapter")
        if adapter is None:
            adapter = TypeAdapter(self.record_type)
            self.__dict__["_adapter"] = adapter
        return adapter

    def _empty_value(self):
        return self.empty() if callable(self.empty) else self.empty

    def process_bind_param(self, value, dialect):
        """处理绑定参数"""
        if value is None:
            return None
        record = self.adapter.validate_python(value)
        return self.adapter.dump_json(record).decode("utf-8")

    def process_result_value(self, value, dialect):
        """处理结果值"""
        if value is None or value == "":
            return self._empty_value()
        try:
            return self.adapter.validate_json(value)
        except (ValidationError, ValueError) as e:
            logger.warning(f"无法解析JSON字段内容，按空值处理: {e}")
            return self._empty_value()
