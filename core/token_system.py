"""core/token_system.py"""
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple
import math
import numbers

from core.operators import Operators


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    VARIABLE = "variable"  # 变量引用
    SYMBOL = "symbol"  # 操作符号（包括未知符号）


class Token(NamedTuple):
    """程序日志中的单个输入，追加后不可变"""
    type: TokenType
    value: object

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def variable(cls, name):
        return cls(TokenType.VARIABLE, str(name))

    @classmethod
    def symbol(cls, name):
        return cls(TokenType.SYMBOL, str(name))


class OperationType(Enum):
    CONSTANT = "constant"
    UNARY = "unary"
    BINARY = "binary"
    EQUALS = "equals"
    CLEAR = "clear"


class Operation:
    def __init__(self, op_type, symbol, value=None, function=None, describe=None):
        self.type = op_type
        self.symbol = symbol
        self.value = value  # 仅常数使用
        self.function = function
        self.describe = describe

    def __repr__(self):
        return f"Operation({self.type.name}, {self.symbol!r})"


def _constant(symbol, value):
    return Operation(OperationType.CONSTANT, symbol, value=value)


def _unary(symbol, function, describe):
    return Operation(OperationType.UNARY, symbol, function=function, describe=describe)


def _binary(symbol, function, describe):
    return Operation(OperationType.BINARY, symbol, function=function, describe=describe)


# 操作符注册表（只读）
OPERATIONS = MappingProxyType({
    # 常数
    'π': _constant('π', math.pi),
    'e': _constant('e', math.e),

    # 一元操作符
    '√': _unary('√', Operators.sqrt, Operators.prefix('√')),
    'x²': _unary('x²', Operators.square, Operators.postfix('²')),
    'sin': _unary('sin', Operators.sin, Operators.prefix('sin')),
    'cos': _unary('cos', Operators.cos, Operators.prefix('cos')),
    'tan': _unary('tan', Operators.tan, Operators.prefix('tan')),

    # 二元操作符（严格从左到右，无优先级）
    'x^y': _binary('x^y', Operators.power, Operators.infix('^', spaced=False)),
    '×': _binary('×', Operators.mul, Operators.infix('×')),
    '÷': _binary('÷', Operators.div, Operators.infix('÷')),
    '+': _binary('+', Operators.add, Operators.infix('+')),
    '−': _binary('−', Operators.sub, Operators.infix('−')),

    # 控制
    '=': Operation(OperationType.EQUALS, '='),
    'c': Operation(OperationType.CLEAR, 'c'),
})


def lookup(symbol):
    """按符号查找操作，未知符号返回None"""
    return OPERATIONS.get(symbol)


def is_known_symbol(name):
    return name in OPERATIONS


def is_well_formed(token):
    """标签与内容是否一致：NUMBER为实数（非bool），VARIABLE/SYMBOL为字符串"""
    if not isinstance(token, Token) or not isinstance(token.type, TokenType):
        return False
    if token.type == TokenType.NUMBER:
        return isinstance(token.value, numbers.Real) and not isinstance(token.value, bool)
    return isinstance(token.value, str)


# ================== 程序属性列表编解码 ==================

VARIABLE_KEY = "variable"


def encode_program(tokens):
    """Token序列 -> 纯Python值列表（float / str / {"variable": name}）"""
    plist = []
    for token in tokens:
        if token.type == TokenType.NUMBER:
            plist.append(float(token.value))
        elif token.type == TokenType.VARIABLE:
            plist.append({VARIABLE_KEY: token.value})
        else:
            plist.append(token.value)
    return plist


def decode_program(plist):
    """
    属性列表 -> Token序列
    裸字符串一律视为操作符号，变量必须显式标注，回放时不会因绑定变化而改变含义
    """
    tokens = []
    for i, item in enumerate(plist):
        if isinstance(item, Token):
            tokens.append(item)
        elif isinstance(item, bool):
            raise ValueError(f"Program entry {i} is a bool, expected a number: {item!r}")
        elif isinstance(item, (int, float)):
            tokens.append(Token.number(item))
        elif isinstance(item, str):
            tokens.append(Token.symbol(item))
        elif isinstance(item, dict) and set(item) == {VARIABLE_KEY} and isinstance(item[VARIABLE_KEY], str):
            tokens.append(Token.variable(item[VARIABLE_KEY]))
        else:
            raise ValueError(f"Cannot decode program entry {i}: {item!r}")
    return tokens
