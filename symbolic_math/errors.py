"""Error types exposed to callers.

Lexing and parsing failures derive from ``LexError`` / ``ParseError``.
Function-tree domain failures derive from ``FnError``; the class of the
raised exception identifies which domain precondition was violated.
"""

from typing import Optional


class SymbolicMathError(Exception):
  """Base class for every error raised by the package."""


# Lexer

class LexError(SymbolicMathError, ValueError):
  """Raised when the source text cannot be split into tokens."""

  def __init__(self, message: str, position: int):
    super().__init__(f"{message} at position {position}")
    self.position = position


class UnexpectedCharError(LexError):
  def __init__(self, char: str, position: int):
    super().__init__(f"Unexpected character {char!r}", position)
    self.char = char


class MalformedNumberError(LexError):
  """Decimal point without a following digit, e.g. ``1.``"""

  def __init__(self, literal: str, position: int):
    super().__init__(f"Number literal {literal!r} must have digits after the decimal point", position)
    self.literal = literal


# Parser

class ParseError(SymbolicMathError, ValueError):
  """Raised when a token sequence does not match the grammar."""


class UnexpectedTokenError(ParseError):
  def __init__(self, token, expected: Optional[str] = None):
    message = f"Unexpected token {token.type.name} at position {token.position}"
    if expected is not None:
      message += f" (expected {expected})"
    super().__init__(message)
    self.token = token
    self.expected = expected


class UnexpectedEndError(ParseError):
  def __init__(self, expected: Optional[str] = None):
    message = "Unexpected end of input"
    if expected is not None:
      message += f" (expected {expected})"
    super().__init__(message)
    self.expected = expected


class NestingDepthError(ParseError):
  def __init__(self, max_depth: int):
    super().__init__(f"Expression nesting exceeds the maximum depth of {max_depth}")
    self.max_depth = max_depth


# Expression tree

class NonConstantExpressionError(SymbolicMathError, TypeError):
  """eval_const() was called on a tree that references a variable."""

  def __init__(self, name: str):
    super().__init__(f"Cannot evaluate variable {name!r} as a constant")
    self.name = name


# Function tree

class FnError(SymbolicMathError, ValueError):
  """Domain error raised while applying a function node."""

  default_message = "Function domain error"

  def __init__(self, message: Optional[str] = None):
    super().__init__(message or self.default_message)


class DivisionByZeroError(FnError):
  default_message = "Division by zero"


class NegativeEvenRootError(FnError):
  default_message = "Even root of a negative number"


class NonPositiveLogArgError(FnError):
  default_message = "Logarithm argument must be positive"


class NonPositiveLogBaseError(FnError):
  default_message = "Logarithm base must be positive"


class LogBaseOneError(FnError):
  default_message = "Logarithm base must not be one"


class NegativeBaseNonIntegerExponentError(FnError):
  default_message = "Negative base raised to a non-integer exponent"


class ParameterNotFoundError(FnError, KeyError):
  def __init__(self, name: str):
    super().__init__(f"Parameter {name!r} not found")
    self.name = name

  def __str__(self) -> str:
    return self.args[0]


FN_ERRORS = (
  DivisionByZeroError,
  NegativeEvenRootError,
  NonPositiveLogArgError,
  NonPositiveLogBaseError,
  LogBaseOneError,
  NegativeBaseNonIntegerExponentError,
  ParameterNotFoundError,
)
