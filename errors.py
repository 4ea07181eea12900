"""Error types raised while scanning and evaluating a line."""
from enum import Enum


class ErrorCode(Enum):
    INVALID_CHARACTER = 'Invalid character'
    UNEXPECTED_OPERATOR = 'Expression must start with an integer'
    EXPECTED_OPERATOR = 'Expected an operator'
    EXPECTED_OPERAND = 'Expected an integer'
    UNEXPECTED_END_OF_INPUT = 'Unexpected end of input'
    DIVISION_BY_ZERO = 'Division by zero'
    INTEGER_OVERFLOW = 'Integer overflow'
    NUMBER_FORMAT = 'Malformed integer'


class CalculatorError(Exception):
    """Base error for the calculator."""
    error_code = None

    def __init__(self, message=None, token=None):
        self.token = token
        text = self.error_code.value if self.error_code else 'Error'
        if message:
            text = f'{text}: {message}'
        self.message = f'{self.__class__.__name__}: {text}'
        super().__init__(self.message)

    def __str__(self):
        return self.message


class LexerError(CalculatorError):
    """The input contains something the scanner cannot classify."""
    pass


class InvalidCharacterError(LexerError):
    error_code = ErrorCode.INVALID_CHARACTER

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f'{char!r} at position {position}')


class EvaluationError(CalculatorError):
    """The token stream is not a valid left-to-right expression."""
    pass


class UnexpectedOperatorError(EvaluationError):
    error_code = ErrorCode.UNEXPECTED_OPERATOR


class ExpectedOperatorError(EvaluationError):
    error_code = ErrorCode.EXPECTED_OPERATOR


class ExpectedOperandError(EvaluationError):
    error_code = ErrorCode.EXPECTED_OPERAND


class UnexpectedEndOfInputError(EvaluationError):
    error_code = ErrorCode.UNEXPECTED_END_OF_INPUT


class DivisionByZeroError(EvaluationError):
    error_code = ErrorCode.DIVISION_BY_ZERO


class IntegerOverflowError(EvaluationError):
    error_code = ErrorCode.INTEGER_OVERFLOW


class NumberFormatError(EvaluationError):
    error_code = ErrorCode.NUMBER_FORMAT
