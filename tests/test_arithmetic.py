import sys

import pytest

from egg.errors import EggRangeError, EggTypeError
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse


def run(source, env):
    return evaluate(parse(source), env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+(1, 2)", 3),
        ("-(10, 3)", 7),
        ("-(3, 10)", -7),
        ("*(6, 7)", 42),
        ("/(12, 3)", 4),
        ("/(1, 2)", 0.5),
        ("/(7, 2)", 3.5),
        ("+(1, *(2, -(10, 6)))", 9),
        ('+("egg", "nog")', "eggnog"),
        ("==(1, 1)", True),
        ("==(1, 2)", False),
        ('==("a", "a")', True),
        ('==("1", 1)', False),
        ("==(true, true)", True),
        ("==(true, 1)", False),
        ("==(false, 0)", False),
        ("<(1, 2)", True),
        ("<(2, 1)", False),
        (">(2, 1)", True),
        ('<("abc", "abd")', True),
        ('>("b", "a")', True),
        ("==(/(1, 2), /(2, 4))", True),
    ]
)
def test_operators(env, source, expected):
    result = run(source, env)
    assert result == expected
    assert type(result) is type(expected)


def test_array_equality_is_identity(env):
    assert run("do(define(a, array(1)), ==(a, a))", env) is True
    assert run("==(array(1), array(1))", env) is False


def test_function_equality_is_identity(env):
    assert run("==(print, print)", env) is True
    assert run("do(define(f, fun(1)), ==(f, f))", env) is True
    assert run("==(fun(1), fun(1))", env) is False


@pytest.mark.parametrize(
    "source",
    [
        '+(1, "a")',
        "+(true, 1)",
        "-(\"a\", \"b\")",
        "*(array(), 2)",
        "/(1, false)",
        '<(1, "a")',
        ">(true, false)",
        "<(array(), array())",
    ]
)
def test_operand_kind_errors(env, source):
    with pytest.raises(EggTypeError):
        run(source, env)


@pytest.mark.parametrize("source", ["+(1)", "+(1, 2, 3)", "==()", "<(1)"])
def test_operators_are_binary(env, source):
    with pytest.raises(EggTypeError, match="Wrong number of arguments"):
        run(source, env)


def test_division_by_zero(env):
    with pytest.raises(EggRangeError, match="Division by zero"):
        run("/(1, 0)", env)


# -------------------------------
# Arrays
# -------------------------------

def test_array_and_length(env):
    assert run("array(1, 2, 3)", env) == [1, 2, 3]
    assert run("array()", env) == []
    assert run("length(array(1, 2, 3))", env) == 3
    assert run("element(array(1, 2, 3), 1)", env) == 2


def test_array_is_heterogeneous(env):
    assert run('array(1, "two", true, array(3))', env) == [1, "two", True, [3]]


def test_array_returns_new_sequence(env):
    assert run("do(define(a, array(1)), define(b, array(1)), ==(a, b))", env) is False


@pytest.mark.parametrize(
    "source,message",
    [
        ("length(1)", "not an array"),
        ('length("abc")', "not an array"),
        ('element("abc", 0)', "not an array"),
        ('element(array(1), "0")', "not a number"),
        ("element(array(1), true)", "not a number"),
    ]
)
def test_array_type_errors(env, source, message):
    with pytest.raises(EggTypeError, match=message):
        run(source, env)


@pytest.mark.parametrize(
    "source",
    ["element(array(1, 2), 2)", "element(array(), 0)", "element(array(1), -(0, 1))", "element(array(1, 2), /(1, 2))"]
)
def test_element_out_of_range(env, source):
    with pytest.raises(EggRangeError):
        run(source, env)


def test_element_accepts_integral_float(env):
    # *(/(1, 2), 2) is the float 1.0
    assert run("element(array(7, 8), *(/(1, 2), 2))", env) == 8


# -------------------------------
# Host number limits
# -------------------------------
# n = 10 ** 400, too large to convert to a float
BIG = "do(define(n, 1), define(i, 0), while(<(i, 400), do(set(n, *(n, 10)), set(i, +(i, 1)))), n)"


@pytest.mark.parametrize(
    "template",
    ["/({big}, 3)", "+({big}, /(1, 2))", "-(/(1, 2), {big})", "*({big}, /(1, 2))"]
)
def test_float_overflow_is_range_error(env, template):
    with pytest.raises(EggRangeError, match="out of range"):
        run(template.format(big=BIG), env)


def test_big_integers_stay_exact(env):
    assert run("/({big}, 2)".format(big=BIG), env) == 10 ** 400 // 2
    assert run("<({big}, /(1, 2))".format(big=BIG), env) is False


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
def test_print_of_huge_integer_is_range_error(env, out):
    # thirteen squarings of 10 give 10 ** 8192
    source = "do(define(n, 10), define(i, 0), while(<(i, 13), do(set(n, *(n, n)), set(i, +(i, 1)))), print(n))"
    with pytest.raises(EggRangeError, match="too large"):
        run(source, env)
    assert out.getvalue() == ""
