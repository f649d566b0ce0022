"""Symbolic Math Package

Lexer and constant-folding parser for arithmetic expressions, plus a library
of hand-built function trees with typed domain errors.
"""

from .config import ParserConfig, DEFAULT_CONFIG
from .errors import (
  SymbolicMathError, LexError, UnexpectedCharError, MalformedNumberError,
  ParseError, UnexpectedTokenError, UnexpectedEndError, NestingDepthError,
  NonConstantExpressionError,
  FnError, DivisionByZeroError, NegativeEvenRootError, NonPositiveLogArgError,
  NonPositiveLogBaseError, LogBaseOneError, NegativeBaseNonIntegerExponentError,
  ParameterNotFoundError
)
from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode,
  BinaryOpNode, UnaryOpNode
)
from .parser import Token, TokenType, TokenStream, tokenize, parse, parse_tokens
from .functions import (
  Function, ChildFn, FnArgs, to_child, apply,
  AddFn, MulFn, DivFn, CoefFn, ExpFn, LogFn, RootFn
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "ParserConfig", "DEFAULT_CONFIG",
  "SymbolicMathError", "LexError", "UnexpectedCharError", "MalformedNumberError",
  "ParseError", "UnexpectedTokenError", "UnexpectedEndError", "NestingDepthError",
  "NonConstantExpressionError",
  "FnError", "DivisionByZeroError", "NegativeEvenRootError", "NonPositiveLogArgError",
  "NonPositiveLogBaseError", "LogBaseOneError", "NegativeBaseNonIntegerExponentError",
  "ParameterNotFoundError",
  "Expression", "Node", "VariableNode", "ConstantNode",
  "BinaryOpNode", "UnaryOpNode",
  "Token", "TokenType", "TokenStream", "tokenize", "parse", "parse_tokens",
  "Function", "ChildFn", "FnArgs", "to_child", "apply",
  "AddFn", "MulFn", "DivFn", "CoefFn", "ExpFn", "LogFn", "RootFn",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
