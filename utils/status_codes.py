# 业务状态码定义，用于标准响应信封中的 code 字段
# 统计接口直接返回报表数据，不使用这些状态码

SUCCESS = "200"
INTERNAL_ERROR = "500"
SERVICE_UNAVAILABLE = "503"

# 自定义业务状态码
VALIDATION_ERROR = "10001"        # 请求或参数校验失败
STATISTICS_ERROR = "10002"        # 统计报表查询失败
DATA_GENERATION_ERROR = "10003"   # 测试数据生成失败

STATUS_MESSAGE = {
    SUCCESS: "操作成功",
    INTERNAL_ERROR: "服务器内部错误",
    SERVICE_UNAVAILABLE: "服务不可用",
    VALIDATION_ERROR: "数据验证错误",
    STATISTICS_ERROR: "统计数据查询失败",
    DATA_GENERATION_ERROR: "测试数据生成失败",
}


def get_message(code):
    """根据状态码获取对应的消息"""
    return STATUS_MESSAGE.get(code, "未知状态")
