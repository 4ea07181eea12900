"""Left-to-right evaluation of a scanned line.

The expression grammar is

    <line> ::= n { op n } [ EOF ]

and operators are applied in reading order with no precedence, so
``4 / 2 * 5 + 5 - 3`` is ``(((4 / 2) * 5) + 5) - 3``.
"""
import dataclasses
import enum
import logging
from typing import List, Optional

from errors import (
    CalculatorError,
    DivisionByZeroError,
    ExpectedOperandError,
    ExpectedOperatorError,
    IntegerOverflowError,
    NumberFormatError,
    UnexpectedEndOfInputError,
    UnexpectedOperatorError,
)
from grammar import Div, EndOfInput, Integer, Minus, Mul, Operator, Plus, Token
import scanner

logger = logging.getLogger(__name__)

INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1
INT_MAX_DIGITS = len(str(INT_MAX))


@dataclasses.dataclass(frozen=True)
class Outcome:
    pass


@dataclasses.dataclass(frozen=True)
class Computed(Outcome):
    value: int


@dataclasses.dataclass(frozen=True)
class Empty(Outcome):
    pass


@dataclasses.dataclass(frozen=True)
class Failed(Outcome):
    reason: str


class State(enum.Enum):
    EXPECT_OPERAND = "operand"
    EXPECT_OPERATOR = "operator"


def check_range(value: int, token: Optional[Token] = None) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise IntegerOverflowError(f"{value} does not fit in 64 bits", token)
    return value


def parse_number(token: Token) -> int:
    if not isinstance(token, Integer):
        raise ExpectedOperandError(f"found {token.image!r}", token)
    # int() alone would also take signs, underscores and surrounding spaces
    if not token.image or not (token.image.isascii() and token.image.isdigit()):
        raise NumberFormatError(repr(token.image), token)
    # reject long runs before int() hits the interpreter's digit limit
    significant = token.image.lstrip("0")
    if len(significant) > INT_MAX_DIGITS:
        raise IntegerOverflowError(f"{len(significant)}-digit integer does not fit in 64 bits", token)
    return check_range(int(significant or "0", 10), token)


def truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def apply_operator(op: Operator, left: int, right: int) -> int:
    if isinstance(op, Plus):
        result = left + right
    elif isinstance(op, Minus):
        result = left - right
    elif isinstance(op, Mul):
        result = left * right
    elif isinstance(op, Div):
        if right == 0:
            raise DivisionByZeroError(f"{left} / {right}", op)
        result = truncating_div(left, right)
    else:
        raise ExpectedOperatorError(f"found {op.image!r}", op)
    return check_range(result, op)


def evaluate(text: str) -> Optional[int]:
    tokens: List[Token] = list(scanner.scan(text))
    if not tokens or isinstance(tokens[0], EndOfInput):
        return None

    if isinstance(tokens[0], Operator):
        raise UnexpectedOperatorError(f"found {tokens[0].image!r}", tokens[0])

    state = State.EXPECT_OPERAND
    accumulator = 0
    op: Optional[Operator] = None
    for token in tokens:
        if state == State.EXPECT_OPERATOR:
            if isinstance(token, EndOfInput):
                break
            if not isinstance(token, Operator):
                raise ExpectedOperatorError(f"found {token.image!r}", token)
            op = token
            state = State.EXPECT_OPERAND
            continue

        operand = parse_number(token)
        if op is None:
            accumulator = operand
        else:
            result = apply_operator(op, accumulator, operand)
            logger.debug("%d %s %d = %d", accumulator, op.image, operand, result)
            accumulator = result
        state = State.EXPECT_OPERATOR

    # a trailing operator leaves us waiting for its right operand
    if state == State.EXPECT_OPERAND:
        raise UnexpectedEndOfInputError(f"after {op.image!r}" if op else None, op)
    return accumulator


def evaluate_line(line: str) -> Outcome:
    try:
        value = evaluate(line)
    except CalculatorError as e:
        logger.info("failed to evaluate %r: %s", line, e)
        return Failed(str(e))
    if value is None:
        return Empty()
    return Computed(value)


if __name__ == "__main__":
    for example in ("4 /2 * 5 + 5 - 3\n", "12+2\n", "1/0\n", "1 1 +\n", "\n"):
        print(repr(example), evaluate_line(example))
