"""核心模块 - Token系统、操作符和计算引擎"""
from .token_system import (
    TokenType, Token, OperationType, Operation, OPERATIONS,
    lookup, is_known_symbol, is_well_formed, encode_program, decode_program
)
from .operators import Operators
from .engine import EvaluationEngine, PendingBinaryOperation

__all__ = [
    'TokenType', 'Token', 'OperationType', 'Operation', 'OPERATIONS',
    'lookup', 'is_known_symbol', 'is_well_formed', 'encode_program', 'decode_program',
    'Operators', 'EvaluationEngine', 'PendingBinaryOperation'
]
