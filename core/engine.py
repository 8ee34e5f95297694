"""计算引擎 - 逐个接收操作数和操作符，维护结果、表达式描述和可回放的程序日志"""
import logging
import numbers
from types import MappingProxyType

from config.config import ENGINE_CONFIG
from core.token_system import (
    Token, TokenType, OperationType, lookup, is_known_symbol, is_well_formed,
    encode_program, decode_program
)
from utils.formatting import format_number

logger = logging.getLogger(__name__)


class PendingBinaryOperation:
    """已拿到第一个操作数、等待第二个操作数的二元操作"""

    def __init__(self, function, first_operand, describe, describe_operand):
        self.function = function
        self.first_operand = first_operand
        self.describe = describe
        self.describe_operand = describe_operand


class EvaluationEngine:
    """
    有状态的计算引擎

    不变量：累加器、描述和挂起操作始终等于在当前变量绑定下
    从空状态回放 program 得到的结果
    """

    def __init__(self, number_format=None, clear_resets_variables=None):
        self.number_format = number_format or ENGINE_CONFIG["number_format"]
        if clear_resets_variables is None:
            clear_resets_variables = ENGINE_CONFIG["clear_resets_variables"]
        self.clear_resets_variables = clear_resets_variables

        self._accumulator = 0.0
        self._description = ""
        self._pending = None  # PendingBinaryOperation 或 None
        self._program = []
        self._variable_values = {}

    # ================== 只读属性 ==================

    @property
    def result(self):
        return self._accumulator

    @property
    def is_partial_result(self):
        return self._pending is not None

    @property
    def description(self):
        if self._pending is None:
            return self._description
        pending = self._pending
        # 还没输入第二个操作数时不重复显示第一个操作数
        second = self._description if self._description != pending.describe_operand else ""
        return pending.describe(pending.describe_operand, second)

    # ================== 输入 ==================

    def set_operand(self, operand):
        """数值 -> 数值字面量；字符串 -> 变量引用"""
        if isinstance(operand, str):
            self._set_variable_operand(operand)
            return
        if isinstance(operand, bool) or not isinstance(operand, numbers.Real):
            raise TypeError(f"Operand must be a real number or a variable name, got {type(operand).__name__}")
        self._set_number_operand(operand)

    def _set_number_operand(self, operand):
        self._accumulator = float(operand)
        self._description = format_number(operand, self.number_format)
        self._program.append(Token.number(operand))

    def _set_variable_operand(self, name):
        self._description = name
        if name not in self._variable_values:
            # 读取未绑定变量时创建0值绑定，不触发回放
            self._variable_values[name] = 0.0
        self._accumulator = self._variable_values[name]
        self._program.append(Token.variable(name))

    def perform_operation(self, symbol):
        if not isinstance(symbol, str):
            raise TypeError(f"Operation symbol must be a string, got {type(symbol).__name__}")
        self._program.append(Token.symbol(symbol))
        operation = lookup(symbol)
        if operation is None:
            logger.debug(f"Ignoring unknown operation symbol {symbol!r}")
            return

        if operation.type == OperationType.CONSTANT:
            self._accumulator = operation.value
            self._description = operation.symbol

        elif operation.type == OperationType.UNARY:
            self._accumulator = operation.function(self._accumulator)
            self._description = operation.describe(self._description)

        elif operation.type == OperationType.BINARY:
            # 先结算已挂起的操作：严格从左到右，无优先级
            self._resolve_pending()
            self._pending = PendingBinaryOperation(
                function=operation.function,
                first_operand=self._accumulator,
                describe=operation.describe,
                describe_operand=self._description,
            )

        elif operation.type == OperationType.EQUALS:
            self._resolve_pending()

        elif operation.type == OperationType.CLEAR:
            self.clear()
            if self.clear_resets_variables:
                # 程序已清空，无需回放
                self._variable_values.clear()

    def _resolve_pending(self):
        if self._pending is None:
            return
        pending = self._pending
        self._accumulator = pending.function(pending.first_operand, self._accumulator)
        self._description = pending.describe(pending.describe_operand, self._description)
        self._pending = None

    # ================== 清空 ==================

    def clear(self):
        """重置结果、描述、挂起操作和程序；保留变量绑定"""
        self._accumulator = 0.0
        self._description = ""
        self._pending = None
        self._program = []

    def clear_variables(self):
        self._variable_values.clear()
        self._replay()

    # ================== 变量绑定 ==================

    @property
    def variable_values(self):
        """只读视图；修改请用 set_variable() 或整体赋值"""
        return MappingProxyType(self._variable_values)

    @variable_values.setter
    def variable_values(self, values):
        self._variable_values = {str(name): float(value) for name, value in dict(values).items()}
        self._replay()

    def set_variable(self, name, value):
        """绑定变量并回放程序，使结果反映新值"""
        self._variable_values[name] = float(value)
        self._replay()

    # ================== 程序日志 ==================

    @property
    def program(self):
        return list(self._program)

    @program.setter
    def program(self, tokens):
        tokens = list(tokens)
        # 先全部校验再清空，失败时状态不变
        for i, token in enumerate(tokens):
            if not is_well_formed(token):
                raise TypeError(f"Program entry {i} is not a well-formed Token: {token!r}")
        self._replay(tokens)

    def _replay(self, tokens=None):
        if tokens is None:
            tokens = list(self._program)
        logger.debug(f"Replaying program of {len(tokens)} tokens")
        self.clear()
        for token in tokens:
            if token.type == TokenType.NUMBER:
                self._set_number_operand(token.value)
            elif token.type == TokenType.VARIABLE:
                self._set_variable_operand(token.value)
            else:
                self.perform_operation(token.value)

    def export_program(self):
        """导出为纯Python值列表，可用于跨会话保存"""
        return encode_program(self._program)

    def load_program(self, plist):
        self.program = decode_program(plist)

    # ================== 撤销 ==================

    def undo(self):
        """
        撤销最后一次完整的操作应用

        从日志末尾弹出已知操作符号，直到遇到数值、变量引用（未知符号按变量处理）
        或日志为空。返回被撤销（或恢复）的值的文本。

        Returns:
            按 number_format 格式化的数值
        """
        count = 0
        last = None
        while True:
            count += 1
            last = self._program.pop() if self._program else None
            if last is None or last.type != TokenType.SYMBOL or not is_known_symbol(last.value):
                break

        if last is None:
            operand = 0.0
        elif last.type == TokenType.NUMBER:
            operand = last.value
        else:
            operand = self._variable_values.get(last.value, 0.0)
            if count > 1:
                # 变量不是最后一个输入时保留它，只撤掉其上的操作符
                self._program.append(last)

        logger.debug(f"Undo popped {count} tokens, program now has {len(self._program)} tokens")
        self._replay()
        return format_number(operand, self.number_format)

    def __repr__(self):
        return (f"EvaluationEngine(result={self._accumulator!r}, "
                f"description={self.description!r}, program_length={len(self._program)})")
