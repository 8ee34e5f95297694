"""utils/formatting.py"""
from config.config import ENGINE_CONFIG


def format_number(value, number_format=None):
    """按 %g 格式化数值；printf 风格格式本身输出 inf/-inf/nan"""
    return (number_format or ENGINE_CONFIG["number_format"]) % float(value)


def format_display(engine):
    """主显示区：当前结果"""
    return format_number(engine.result, engine.number_format)


def format_description(engine):
    """描述显示区：未完成时加 ' ...'，完成时加 ' ='，空描述显示一个空格"""
    description = engine.description
    if not description:
        return " "
    return description + (" ..." if engine.is_partial_result else " =")
