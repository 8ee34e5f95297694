"""工具模块"""
from .formatting import format_number, format_display, format_description

__all__ = ['format_number', 'format_display', 'format_description']
