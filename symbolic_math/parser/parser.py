"""
Recursive-descent parser with inline constant folding.

Every production returns the built sub-tree together with a flag telling
whether that sub-tree is a compile-time constant. When all operands of an
operator are constant the operator is applied on the spot and the pair is
replaced by a single ConstantNode, so no fully constant sub-tree survives
in the result.
"""

from typing import List, Optional, Tuple

from ..config import DEFAULT_CONFIG, ParserConfig
from ..errors import NestingDepthError, UnexpectedEndError, UnexpectedTokenError
from ..expression_tree.core.node import BinaryOpNode, ConstantNode, Node, UnaryOpNode, VariableNode
from ..expression_tree.core.operators import BINARY_OP_MAP, UNARY_OP_MAP, apply_binary_op, apply_unary_op
from ..logging_system import get_logger
from .lexer import tokenize
from .token import Token, TokenStream, TokenType

IsConst = bool
Parsed = Tuple[Node, IsConst]

OPERATOR_TOKENS = {
  TokenType.PLUS: '+', TokenType.MINUS: '-', TokenType.STAR: '*',
  TokenType.SLASH: '/', TokenType.CARET: '^'
}

# Tokens that may start the right-hand factor of an implicit product
IMPLICIT_FACTOR_START = (TokenType.IDENT, TokenType.LPAREN, TokenType.SIN)


class Parser:
  """Turns a token sequence into an expression tree"""

  def __init__(self, tokens: List[Token], config: Optional[ParserConfig] = None):
    self.tokens = TokenStream(tokens)
    self.config = config or DEFAULT_CONFIG
    self._depth = 0
    self._logger = get_logger()

  def parse(self) -> Node:
    node, _ = self._parse_sum()
    token = self.tokens.peek()
    if token.type != TokenType.EOF:
      raise UnexpectedTokenError(token, expected='end of input')
    return node

  def _parse_sum(self) -> Parsed:
    lhs, is_lhs_const = self._parse_product()

    while self.tokens.check(TokenType.PLUS, TokenType.MINUS):
      operator = OPERATOR_TOKENS[self.tokens.advance().type]
      rhs, is_rhs_const = self._parse_product()
      lhs, is_lhs_const = self._merge_binary(operator, lhs, is_lhs_const, rhs, is_rhs_const)

    return lhs, is_lhs_const

  def _parse_product(self) -> Parsed:
    lhs, is_lhs_const = self._parse_implicit()

    while self.tokens.check(TokenType.STAR, TokenType.SLASH):
      operator = OPERATOR_TOKENS[self.tokens.advance().type]
      rhs, is_rhs_const = self._parse_implicit()
      lhs, is_lhs_const = self._merge_binary(operator, lhs, is_lhs_const, rhs, is_rhs_const)

    return lhs, is_lhs_const

  def _parse_implicit(self) -> Parsed:
    """Juxtaposed factors, `3x`, `2(x+1)`, `x sin(y)`. Binds tighter than `*` and `/`."""
    lhs, is_lhs_const = self._parse_unary()

    while self.config.implicit_multiplication and self.tokens.check(*IMPLICIT_FACTOR_START):
      rhs, is_rhs_const = self._parse_power()
      lhs, is_lhs_const = self._merge_binary('*', lhs, is_lhs_const, rhs, is_rhs_const)

    return lhs, is_lhs_const

  def _parse_unary(self) -> Parsed:
    # Every nesting path (parentheses, sin, exponents, sign chains) passes through here
    self._depth += 1
    try:
      if self._depth > self.config.max_depth:
        raise NestingDepthError(self.config.max_depth)

      sign = self.tokens.match(TokenType.MINUS, TokenType.PLUS)
      if sign is None:
        return self._parse_power()

      operand, is_const = self._parse_unary()
      if sign.type == TokenType.PLUS:
        return operand, is_const
      return self._merge_unary('neg', operand, is_const)
    finally:
      self._depth -= 1

  def _parse_power(self) -> Parsed:
    base, is_base_const = self._parse_atom()

    if self.tokens.match(TokenType.CARET) is None:
      return base, is_base_const

    # Right associative: 2^3^2 == 2^(3^2)
    exponent, is_exp_const = self._parse_unary()
    return self._merge_binary('^', base, is_base_const, exponent, is_exp_const)

  def _parse_atom(self) -> Parsed:
    token = self.tokens.peek()

    if token.type == TokenType.NUMBER:
      self.tokens.advance()
      return ConstantNode(token.value), True

    if token.type == TokenType.IDENT:
      self.tokens.advance()
      return VariableNode(token.value), False

    if token.type == TokenType.LPAREN:
      return self._parse_parens()

    if token.type == TokenType.SIN:
      self.tokens.advance()
      inner, is_inner_const = self._parse_parens()
      return self._merge_unary('sin', inner, is_inner_const)

    if token.type == TokenType.EOF:
      raise UnexpectedEndError(expected='operand')
    raise UnexpectedTokenError(token, expected='operand')

  def _parse_parens(self) -> Parsed:
    self.tokens.expect(TokenType.LPAREN)
    inner, is_inner_const = self._parse_sum()
    self.tokens.expect(TokenType.RPAREN)
    return inner, is_inner_const

  # This merges two sub-trees into a binary operation.
  # If both are constant and folding is on, the operation is evaluated
  # (lhs before rhs) and the result is returned as a constant leaf.
  def _merge_binary(self, operator: str, lhs: Node, is_lhs_const: IsConst,
                    rhs: Node, is_rhs_const: IsConst) -> Parsed:
    is_const = is_lhs_const and is_rhs_const
    if is_const and self.config.fold_constants:
      lhs_val = lhs.eval_const()
      rhs_val = rhs.eval_const()
      value = float(apply_binary_op(lhs_val, rhs_val, BINARY_OP_MAP[operator]))
      if self._logger.is_verbose():
        self._logger.debug(f"fold: {lhs_val!r} {operator} {rhs_val!r} -> {value!r}")
      return ConstantNode(value), True
    return self._checked(BinaryOpNode(operator, lhs, rhs)), is_const

  def _merge_unary(self, operator: str, operand: Node, is_const: IsConst) -> Parsed:
    if is_const and self.config.fold_constants:
      operand_val = operand.eval_const()
      value = float(apply_unary_op(operand_val, UNARY_OP_MAP[operator]))
      if self._logger.is_verbose():
        self._logger.debug(f"fold: {operator}({operand_val!r}) -> {value!r}")
      return ConstantNode(value), True
    return self._checked(UnaryOpNode(operator, operand)), is_const

  def _checked(self, node: Node) -> Node:
    # Loops in _parse_sum/_parse_product grow left-deep chains without recursing,
    # so the depth of the built tree is bounded here as well.
    # Children were checked when built, so depth() only reads their caches.
    if node.depth() > self.config.max_depth:
      raise NestingDepthError(self.config.max_depth)
    return node


def parse_tokens(tokens: List[Token], config: Optional[ParserConfig] = None) -> Node:
  """Parse an already tokenized expression"""
  return Parser(tokens, config).parse()


def parse(source: str, config: Optional[ParserConfig] = None) -> Node:
  """
  Parse `source` into an expression tree.

  Raises a LexError subclass for characters or literals the lexer rejects and
  a ParseError subclass when the tokens do not form an expression.
  """
  return parse_tokens(tokenize(source), config)
