import math

import pytest

from core import (
    OPERATIONS, OperationType, Token, TokenType,
    lookup, is_known_symbol, encode_program, decode_program
)


def test_registry_kinds():
    expected = {
        'π': OperationType.CONSTANT, 'e': OperationType.CONSTANT,
        '√': OperationType.UNARY, 'x²': OperationType.UNARY,
        'sin': OperationType.UNARY, 'cos': OperationType.UNARY, 'tan': OperationType.UNARY,
        'x^y': OperationType.BINARY, '×': OperationType.BINARY, '÷': OperationType.BINARY,
        '+': OperationType.BINARY, '−': OperationType.BINARY,
        '=': OperationType.EQUALS, 'c': OperationType.CLEAR,
    }
    assert {symbol: op.type for symbol, op in OPERATIONS.items()} == expected


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        OPERATIONS['%'] = OPERATIONS['÷']


def test_lookup():
    assert lookup('π').value == pytest.approx(math.pi)
    assert lookup('e').value == pytest.approx(math.e)
    assert lookup('nope') is None
    assert is_known_symbol('=')
    assert not is_known_symbol('x')


def test_describe_formatters():
    assert lookup('√').describe('9') == "√(9)"
    assert lookup('x²').describe('a') == "a²"
    assert lookup('sin').describe('π') == "sin(π)"
    assert lookup('×').describe('2', '3') == "2 × 3"
    assert lookup('−').describe('2', '') == "2 − "
    assert lookup('x^y').describe('2', '8') == "2^8"


def test_token_constructors():
    assert Token.number(3) == Token(TokenType.NUMBER, 3.0)
    assert isinstance(Token.number(3).value, float)
    assert Token.variable('M').type == TokenType.VARIABLE
    assert Token.symbol('+').type == TokenType.SYMBOL
    # 同名的变量和符号是不同的Token
    assert Token.variable('e') != Token.symbol('e')


def test_encode_program():
    tokens = [Token.number(1.5), Token.symbol('+'), Token.variable('M'), Token.symbol('=')]
    assert encode_program(tokens) == [1.5, '+', {'variable': 'M'}, '=']


def test_decode_program():
    plist = [2, '×', {'variable': 'x'}, 'unknown']
    assert decode_program(plist) == [
        Token.number(2.0), Token.symbol('×'), Token.variable('x'), Token.symbol('unknown')
    ]


def test_decode_program_passes_tokens_through():
    tokens = [Token.variable('x'), Token.symbol('√')]
    assert decode_program(tokens) == tokens


@pytest.mark.parametrize("bad", [None, True, {'var': 'x'}, {'variable': 3}, ['+']])
def test_decode_program_rejects_malformed_entries(bad):
    with pytest.raises(ValueError):
        decode_program([1.0, bad])
