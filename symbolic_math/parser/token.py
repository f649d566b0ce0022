from enum import IntEnum
from typing import List, NamedTuple, Optional, Union

from ..errors import UnexpectedEndError, UnexpectedTokenError


class TokenType(IntEnum):
  PLUS = 0
  MINUS = 1
  STAR = 2
  SLASH = 3
  CARET = 4
  LPAREN = 5
  RPAREN = 6
  COMMA = 7
  SIN = 8
  NUMBER = 9
  IDENT = 10
  EOF = 11


# Mapping dictionaries
SINGLE_CHAR_TOKENS = {
  '+': TokenType.PLUS, '-': TokenType.MINUS, '*': TokenType.STAR, '/': TokenType.SLASH,
  '^': TokenType.CARET, '(': TokenType.LPAREN, ')': TokenType.RPAREN, ',': TokenType.COMMA
}
KEYWORDS = {'sin': TokenType.SIN}


class Token(NamedTuple):
  type: TokenType
  value: Optional[Union[float, str]] = None
  position: int = -1

  def __repr__(self) -> str:
    if self.value is None:
      return f"Token({self.type.name})"
    return f"Token({self.type.name}, {self.value!r})"


class TokenStream:
  """Single-pass cursor over a token list; peeking past the end yields EOF"""

  __slots__ = ('_tokens', '_pos', '_eof')

  def __init__(self, tokens: List[Token]):
    self._tokens = list(tokens)
    self._pos = 0
    if self._tokens and self._tokens[-1].type == TokenType.EOF:
      self._eof = self._tokens[-1]
    else:
      end = self._tokens[-1].position + 1 if self._tokens else 0
      self._eof = Token(TokenType.EOF, None, end)

  def peek(self) -> Token:
    if self._pos < len(self._tokens):
      return self._tokens[self._pos]
    return self._eof

  def advance(self) -> Token:
    token = self.peek()
    if token.type != TokenType.EOF:
      self._pos += 1
    return token

  def check(self, *types: TokenType) -> bool:
    return self.peek().type in types

  def match(self, *types: TokenType) -> Optional[Token]:
    """Consume and return the current token if it is one of `types`"""
    if self.check(*types):
      return self.advance()
    return None

  def expect(self, token_type: TokenType) -> Token:
    token = self.peek()
    if token.type == token_type:
      return self.advance()
    if token.type == TokenType.EOF:
      raise UnexpectedEndError(expected=token_type.name)
    raise UnexpectedTokenError(token, expected=token_type.name)

  def at_end(self) -> bool:
    return self.peek().type == TokenType.EOF
