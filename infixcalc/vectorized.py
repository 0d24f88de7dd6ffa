"""Evaluate one postfix sequence over whole numpy arrays of variable values.

This is the array counterpart of `evaluator.evaluate_with_bindings`: each
identifier is bound to an array (or anything numpy can broadcast) and the
result is the elementwise value of the expression.

>>> import numpy as np
>>> from infixcalc.lexer import tokenize
>>> from infixcalc.postfix import to_postfix
>>> evaluate_array(to_postfix(tokenize("2 * x + y")), {"x": np.arange(3), "y": 1})
array([1., 3., 5.])
"""
import numpy as np

from .errors import InvalidOperand, UndefinedVariable
from .evaluator import reduce_postfix
from .tokens import Identifier, NumberToken


def evaluate_array(postfix, definitions):
    def load(item):
        if isinstance(item, NumberToken):
            return np.float64(item.value)
        if isinstance(item, Identifier):
            try:
                return np.asarray(definitions[item.name], dtype=np.float64)
            except KeyError:
                raise UndefinedVariable(item.name, position=item.pos) from None
        # Registered functions work on single numbers only.
        raise InvalidOperand(str(item), position=item.pos)

    return np.asarray(reduce_postfix(postfix, load), dtype=np.float64)
