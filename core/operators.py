"""core/operators.py"""
import numpy as np


class Operators:
    """所有操作符的静态方法集合：数值计算 + 描述格式化"""

    @staticmethod
    def _to_float(result):
        """numpy标量 -> Python float（inf/nan原样保留）"""
        return float(result)

    # 一元操作符====================

    @staticmethod
    def sqrt(operand):
        """平方根，负数返回nan"""
        with np.errstate(invalid='ignore'):
            return Operators._to_float(np.sqrt(np.float64(operand)))

    @staticmethod
    def square(operand):
        """平方，溢出返回inf"""
        with np.errstate(over='ignore'):
            return Operators._to_float(np.square(np.float64(operand)))

    @staticmethod
    def sin(operand):
        with np.errstate(invalid='ignore'):
            return Operators._to_float(np.sin(np.float64(operand)))

    @staticmethod
    def cos(operand):
        with np.errstate(invalid='ignore'):
            return Operators._to_float(np.cos(np.float64(operand)))

    @staticmethod
    def tan(operand):
        with np.errstate(invalid='ignore'):
            return Operators._to_float(np.tan(np.float64(operand)))

    # 二元操作符========================================

    @staticmethod
    def power(operand1, operand2):
        """幂运算：负底数的分数次幂返回nan"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return Operators._to_float(np.power(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._to_float(np.multiply(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def div(operand1, operand2):
        """除法：除零得到inf/nan，不抛异常"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return Operators._to_float(np.divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._to_float(np.add(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._to_float(np.subtract(np.float64(operand1), np.float64(operand2)))

    # 描述格式化========================================

    @staticmethod
    def prefix(name):
        """sin(x) / √(x) 形式"""
        def describe(operand):
            return f"{name}({operand})"
        return describe

    @staticmethod
    def postfix(suffix):
        """x² 形式"""
        def describe(operand):
            return f"{operand}{suffix}"
        return describe

    @staticmethod
    def infix(symbol, spaced=True):
        """a × b 形式；spaced=False 时为 a^b"""
        sep = " " if spaced else ""

        def describe(left, right):
            return f"{left}{sep}{symbol}{sep}{right}"
        return describe
