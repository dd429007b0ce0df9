"""
Tests for integer arithmetic in foolang
"""
import pytest

from foolang.exceptions import ValueTypeError
from foolang.interpreter import FunctionTable, Scope
from foolang.operations import Op

from foolang.tests.utils import run_source


def test_addition_chain():
    """
    Test adding several literals and variables.
    """
    scope = run_source("begin { var a = 1; var b = a + 2 + a + 40; }")
    assert scope.vars['b'] == 44


def test_addition_wraps_around():
    """
    Test that sums wrap around modulo 2**32.
    """
    scope = run_source(
        "begin {\n"
        "    var max = 4294967295;\n"
        "    var a = max + 1;\n"
        "    var b = max + max;\n"
        "}\n"
    )
    assert scope.vars['a'] == 0
    assert scope.vars['b'] == 4294967294


def test_non_integer_operand_raises():
    """
    Test that addition rejects operands that are not integers.
    """
    scope = Scope(FunctionTable({}), '<test>')
    scope.vars['s'] = 'text'
    node = (Op.ADD, (Op.INT, 1, 1), (Op.VAR, 's', 1), 1)
    with pytest.raises(ValueTypeError) as excinfo:
        scope.reduce_expr(node)
    assert excinfo.value.name == '+'
