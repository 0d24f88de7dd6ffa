"""Exceptions raised by every stage of the expression pipeline.

Each kind is its own subclass of `ExpressionError`; the values that describe
the failure are available as attributes named after `fields`.

>>> err = InvalidCharacter("$")
>>> err.character, err.kind, str(err)
('$', 'InvalidCharacter', "invalid character '$'")
"""


class ExpressionError(ValueError):
    fields = ()
    template = "invalid expression"

    def __init__(self, *values, position=None):
        if len(values) != len(self.fields):
            raise TypeError(
                f"{type(self).__name__} takes {len(self.fields)} values, got {len(values)}"
            )
        super().__init__(*values)
        self.position = position
        for name, value in zip(self.fields, values):
            setattr(self, name, value)

    def __str__(self):
        return self.template.format(**dict(zip(self.fields, self.args)))

    @property
    def kind(self):
        return type(self).__name__

    @property
    def location(self):
        """`(line, column)` of the offending input, if known."""
        return None if self.position is None else tuple(self.position)

    def at(self, position):
        """Attach `position` unless one is already known; return self."""
        if self.position is None:
            self.position = position
        return self


class DivisionByZero(ExpressionError):
    template = "division by zero"


class NegativeExponent(ExpressionError):
    template = "cannot raise to a negative power"


class InvalidCharacter(ExpressionError):
    fields = ("character",)
    template = "invalid character {character!r}"


class InvalidNumber(ExpressionError):
    fields = ("literal",)
    template = "invalid number {literal!r}"


class Expected(ExpressionError):
    fields = ("expected", "found")
    template = "expected {expected!r}, found {found!r}"


class UnexpectedEndOfInput(ExpressionError):
    template = "unexpected end of input"


class EmptyExpression(ExpressionError):
    template = "empty expression"


class InvalidOperand(ExpressionError):
    fields = ("text",)
    template = "invalid operand {text!r}"


class InvalidOperator(ExpressionError):
    fields = ("op",)
    template = "invalid operator {op!r}"


class InvalidExpression(ExpressionError):
    fields = ("reason",)
    template = "invalid expression: {reason}"


class UndefinedVariable(ExpressionError):
    fields = ("name",)
    template = "undefined variable {name!r}"


class UndefinedFunction(ExpressionError):
    fields = ("name",)
    template = "undefined function {name!r}"


class InvalidArgumentCount(ExpressionError):
    fields = ("name", "expected", "got")
    template = "{name}() takes {expected} arguments, got {got}"


class InvalidArgument(ExpressionError):
    fields = ("name", "value")
    template = "invalid argument {value!r} to {name}()"


class InvalidLeadingOperator(ExpressionError):
    fields = ("op",)
    template = "expression cannot start with {op!r}"


class MissingOperator(ExpressionError):
    template = "missing operator"


class MismatchedParentheses(ExpressionError):
    fields = ("found", "missing")
    template = "found {found!r} without matching {missing!r}"


class TwoOperandsInARow(ExpressionError):
    template = "two operands in a row"


class Other(ExpressionError):
    fields = ("message",)
    template = "{message}"
