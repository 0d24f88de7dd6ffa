"""Values shared by the lexer, the postfix transform and the evaluator."""
import math
import operator
import re
from typing import Callable, NamedTuple, Optional, Tuple, Union

import numpy as np

from .errors import DivisionByZero, InvalidOperand, NegativeExponent


class Position(NamedTuple):
    line: int
    column: int

    def __str__(self):
        return f"{self.line}:{self.column}"


def format_number(num):
    """Render `num` as an integer literal if it is integral, else positionally.

    >>> format_number(4.0), format_number(-0.5), format_number(1e-05)
    ('4', '-0.5', '0.00001')
    """
    num = float(num)
    if not math.isfinite(num):
        return repr(num)
    if num.is_integer():
        return str(int(num))
    return np.format_float_positional(num, trim="-")


class Number(float):
    """A double that displays integral values without a fractional part.

    >>> str(Number(9.0)), Number(2.5).rounded(), Number(-2.5).rounded()
    ('9', 3, -3)
    """

    def __str__(self):
        return format_number(self)

    def __repr__(self):
        return f"Number({format_number(self)})"

    def __neg__(self):
        return Number(-float(self))

    def rounded(self):
        """Integer view, rounding halves away from zero.

        Infinities and nan have no integer view and raise `InvalidOperand`.
        """
        if not math.isfinite(self):
            raise InvalidOperand(format_number(self))
        return int(math.copysign(math.floor(abs(self) + 0.5), self))


# The operator kernels accept python floats as well as numpy arrays, so the
# scalar and the array evaluator share them.
def divide(a, b):
    if np.any(np.equal(b, 0)):
        raise DivisionByZero()
    with np.errstate(all="ignore"):
        return np.true_divide(a, b)


def modulo(a, b):
    if np.any(np.equal(b, 0)):
        raise DivisionByZero()
    # fmod of an infinity is nan.
    with np.errstate(all="ignore"):
        return np.fmod(a, b)


def power(a, b):
    if np.any(np.less(b, 0)):
        raise NegativeExponent()
    # negative ** fractional is nan and overflow is inf, as in IEEE arithmetic.
    with np.errstate(invalid="ignore", over="ignore"):
        return np.power(a, b)


KERNELS = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": divide,
    "mod": modulo,
    "pow": power,
}


class Op(NamedTuple):
    symbol: str
    prec: Optional[int]
    fun: Optional[Callable]

    def __call__(self, *args):
        return self.fun(*args)

    def __repr__(self):
        return f"op({self.symbol!r:})"

    def __str__(self):
        return self.symbol

    @property
    def applicable(self):
        return self.fun is not None

    def left_first(self, other):
        """Whether `self`, already on the stack, is emitted before `other`."""
        return self.applicable and self.prec >= other.prec


OP_GROUPS = """
add+ sub-
mul* div/ mod%
pow^
""".strip()
OPS = {
    o: Op(o, prec, KERNELS[fun])
    for prec, op_groups in enumerate(OP_GROUPS.split("\n"))
    for [(fun, o)] in map(re.compile(r"^(\w+)(\W)$").findall, op_groups.split())
}
OPS.update({o: Op(o, None, None) for o in "()="})

LPAREN, RPAREN, ASSIGN = OPS["("], OPS[")"], OPS["="]
ADD, SUB, MUL, DIV = OPS["+"], OPS["-"], OPS["*"], OPS["/"]

# Source characters that spell an operator; "÷" is another way to write "/".
OPERATOR_CHARS = {**OPS, "÷": DIV}


class OperatorToken(NamedTuple):
    op: Op
    pos: Position

    def __str__(self):
        return self.op.symbol


class NumberToken(NamedTuple):
    value: Number
    pos: Position

    def __str__(self):
        return str(self.value)


class Identifier(NamedTuple):
    name: str
    pos: Position

    def __str__(self):
        return self.name


class FunctionCall(NamedTuple):
    name: str
    args: Tuple["Token", ...]
    pos: Position

    def __str__(self):
        return f"{self.name}({', '.join(map(str, self.args))})"


Token = Union[OperatorToken, NumberToken, Identifier, FunctionCall]
OPERANDS = (NumberToken, Identifier, FunctionCall)
