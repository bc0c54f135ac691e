import pytest

from egg.errors import EggReferenceError
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse


def run(source, env):
    return evaluate(parse(source), env)


def test_define_in_function_does_not_leak(env):
    run("do(define(f, fun(do(define(inner, 1), inner))), f())", env)
    with pytest.raises(EggReferenceError):
        run("inner", env)


def test_set_mutates_outer_frame(env, out):
    source = "do(define(x, 4), define(setx, fun(val, set(x, val))), setx(50), print(x))"
    assert run(source, env) == 50
    assert out.getvalue() == "50\n"


def test_shadowing_is_local_to_call(env):
    source = """
    do(define(x, 1),
       define(f, fun(do(define(x, 2), x))),
       array(f(), x))
    """
    assert run(source, env) == [2, 1]


def test_parameter_shadows_outer_binding(env):
    source = "do(define(x, 1), define(f, fun(x, +(x, 10))), array(f(5), x))"
    assert run(source, env) == [15, 1]


def test_set_on_parameter_stays_in_call_frame(env):
    source = "do(define(x, 1), define(f, fun(x, set(x, 99))), f(0), x)"
    assert run(source, env) == 1


def test_lexical_not_dynamic_scope(env):
    source = """
    do(define(x, "outer"),
       define(get, fun(x)),
       define(call, fun(x, get())),
       call("caller"))
    """
    assert run(source, env) == "outer"


def test_closure_keeps_defining_frame(env):
    source = """
    do(define(makeCounter, fun(do(define(n, 0), fun(set(n, +(n, 1)))))),
       define(a, makeCounter()),
       define(b, makeCounter()),
       a(), a(), a(), b(),
       array(a(), b()))
    """
    assert run(source, env) == [4, 2]


def test_sibling_closures_share_frame(env):
    source = """
    do(define(make, fun(do(define(v, 0),
                           array(fun(set(v, +(v, 1))), fun(v))))),
       define(pair, make()),
       element(pair, 0)(),
       element(pair, 0)(),
       element(pair, 1)())
    """
    assert run(source, env) == 2


def test_call_frames_are_fresh_per_call(env):
    source = """
    do(define(f, fun(first, do(if(first, define(seen, 1), 0), seen))),
       f(true))
    """
    assert run(source, env) == 1
    # A second call gets a new frame, so `seen` is no longer bound
    with pytest.raises(EggReferenceError):
        run("f(false)", env)


def test_set_global_from_nested_function(env):
    source = """
    do(define(total, 0),
       define(addAll, fun(xs, do(define(i, 0),
           while(<(i, length(xs)),
               do(set(total, +(total, element(xs, i))),
                  set(i, +(i, 1))))))),
       addAll(array(1, 2, 3)),
       total)
    """
    assert run(source, env) == 6


def test_set_can_rebind_global_builtin(env):
    # true lives in the global frame, so set overwrites it there
    run("set(true, 1)", env)
    assert env.outer.vars["true"] == 1
