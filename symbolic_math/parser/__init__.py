"""Lexer, token stream and constant-folding parser."""

from .token import Token, TokenType, TokenStream, KEYWORDS
from .lexer import tokenize
from .parser import Parser, parse, parse_tokens

__all__ = [
  'Token', 'TokenType', 'TokenStream', 'KEYWORDS',
  'tokenize', 'Parser', 'parse', 'parse_tokens'
]
