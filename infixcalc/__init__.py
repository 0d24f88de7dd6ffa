"""Evaluate infix arithmetic expressions.

Text is lexed into tokens, reordered into postfix with the shunting-yard
algorithm and evaluated on an operand stack.

>>> solve("(1 + 2) * 3")
Number(9)
>>> evaluate_with_defined("log(log(2, 4), x)", {"x": 16}, STANDARD_FUNCTIONS)
Number(4)
"""
import logging

from . import config
from .errors import *  # noqa: F401,F403
from .evaluator import evaluate, evaluate_with_bindings
from .functions import STANDARD_FUNCTIONS, arity, variadic
from .lexer import tokenize
from .postfix import render_postfix, to_postfix
from .render import format_error, print_error, round_to
from .tokens import Number, Position, format_number
from .vectorized import evaluate_array

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
if config.DEBUG:
    logger.addHandler(logging.StreamHandler())
    logger.setLevel(logging.DEBUG)


def solve(text):
    """Evaluate `text`, which may only contain numbers and operators."""
    return evaluate(to_postfix(tokenize(text, allow_identifiers=False)))


def evaluate_with_defined(text, definitions=None, functions=None):
    """Evaluate `text` with variables from `definitions` and calls to `functions`.

    Names are only accepted when at least one of the tables is given.
    """
    allow_identifiers = definitions is not None or functions is not None
    postfix = to_postfix(tokenize(text, allow_identifiers))
    return evaluate_with_bindings(postfix, definitions, functions)
