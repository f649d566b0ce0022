from typing import List

from ..errors import MalformedNumberError, UnexpectedCharError
from ..logging_system import get_logger
from .token import KEYWORDS, SINGLE_CHAR_TOKENS, Token, TokenType


def _is_digit(char: str) -> bool:
  return '0' <= char <= '9'


def _is_ident_char(char: str) -> bool:
  return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def tokenize(source: str) -> List[Token]:
  """
  Split `source` into tokens, terminated by a single EOF token.

  Raises UnexpectedCharError for characters outside the alphabet and
  MalformedNumberError for a decimal point with no digit after it.
  """
  tokens: List[Token] = []
  pos = 0
  length = len(source)

  while pos < length:
    char = source[pos]

    if char == ' ':
      pos += 1
      continue

    if char in SINGLE_CHAR_TOKENS:
      tokens.append(Token(SINGLE_CHAR_TOKENS[char], None, pos))
      pos += 1
      continue

    if _is_digit(char):
      start = pos
      pos = _scan_while(source, pos, _is_digit)
      if pos < length and source[pos] == '.':
        pos = _scan_while(source, pos + 1, _is_digit)
        if source[pos - 1] == '.':
          raise MalformedNumberError(source[start:pos], start)
      tokens.append(Token(TokenType.NUMBER, float(source[start:pos]), start))
      continue

    if _is_ident_char(char):
      start = pos
      pos = _scan_while(source, pos, _is_ident_char)
      tokens.append(_match_keyword(source[start:pos], start))
      continue

    raise UnexpectedCharError(char, pos)

  tokens.append(Token(TokenType.EOF, None, length))
  logger = get_logger()
  if logger.is_verbose():
    logger.debug(f"tokenize: {len(tokens) - 1} tokens from {source!r}")
  return tokens


def _scan_while(source: str, pos: int, predicate) -> int:
  while pos < len(source) and predicate(source[pos]):
    pos += 1
  return pos


def _match_keyword(text: str, position: int) -> Token:
  token_type = KEYWORDS.get(text)
  if token_type is not None:
    return Token(token_type, None, position)
  return Token(TokenType.IDENT, text, position)
