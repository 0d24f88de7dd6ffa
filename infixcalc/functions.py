"""Registry helpers and a set of common functions.

A function registry maps names to callables that take the list of argument
values and return a number; they report bad input by raising an
`ExpressionError`.

>>> STANDARD_FUNCTIONS["log"]([2.0, 16.0])
4.0
>>> STANDARD_FUNCTIONS["sqrt"]([1.0, 2.0])
Traceback (most recent call last):
...
infixcalc.errors.InvalidArgumentCount: sqrt() takes 1 arguments, got 2
"""
import functools
import math

from .errors import InvalidArgument, InvalidArgumentCount


def arity(n, name=None):
    """Adapt `f(a, b, ...)` taking `n` values into a registry callable."""

    def decorate(f):
        fname = name or f.__name__

        @functools.wraps(f)
        def call(args):
            if len(args) != n:
                raise InvalidArgumentCount(fname, n, len(args))
            return f(*args)

        return call

    return decorate


def variadic(name):
    """Like `arity`, for functions taking one or more values."""

    def decorate(f):
        @functools.wraps(f)
        def call(args):
            if not args:
                raise InvalidArgumentCount(name, "at least 1", 0)
            return f(*args)

        return call

    return decorate


def domain(name, fun, *args):
    """Apply a `math` function, turning its domain errors into `InvalidArgument`."""
    try:
        return fun(*args)
    except (ValueError, ZeroDivisionError):
        raise InvalidArgument(name, ", ".join(map(str, args))) from None


@arity(2)
def log(base, value):
    return domain("log", math.log, value, base)


@arity(1)
def ln(value):
    return domain("ln", math.log, value)


@arity(1)
def sqrt(value):
    return domain("sqrt", math.sqrt, value)


@arity(1)
def sin(value):
    return domain("sin", math.sin, value)


@arity(1)
def cos(value):
    return domain("cos", math.cos, value)


@arity(1)
def tan(value):
    return domain("tan", math.tan, value)


@variadic("min")
def min_(*values):
    return min(values)


@variadic("max")
def max_(*values):
    return max(values)


STANDARD_FUNCTIONS = {
    "log": log,
    "ln": ln,
    "sqrt": sqrt,
    "abs": arity(1, "abs")(abs),
    "sin": sin,
    "cos": cos,
    "tan": tan,
    "min": min_,
    "max": max_,
}
