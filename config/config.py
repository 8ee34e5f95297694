"""
配置文件

ENGINE_CONFIG 由 core.engine.EvaluationEngine 读取；
LOGGING_CONFIG 本库不使用，由宿主程序传给 logging.basicConfig(**LOGGING_CONFIG)
"""
import logging

# 计算引擎参数
ENGINE_CONFIG = {
    "number_format": "%g",  # 所有数值文本输出的格式
    "clear_resets_variables": False,  # 'c' 是否同时清空变量绑定；clear_variables() 始终可用
}

# 日志参数（由宿主程序传给 logging.basicConfig）
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    fmt = ENGINE_CONFIG["number_format"]
    assert isinstance(fmt, str) and fmt.startswith("%"), "number_format必须是printf风格格式"
    assert fmt % 1.5, "number_format必须能格式化float"
    assert isinstance(ENGINE_CONFIG["clear_resets_variables"], bool)
    assert LOGGING_CONFIG["level"] in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR)
    return True
