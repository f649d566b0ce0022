import pytest

from symbolic_math.errors import LexError, MalformedNumberError, UnexpectedCharError
from symbolic_math.parser import Token, TokenStream, TokenType, tokenize
from symbolic_math.errors import UnexpectedEndError, UnexpectedTokenError


def types_of(source):
  return [token.type for token in tokenize(source)]


def test_simple_sum():
  tokens = tokenize("1+2")
  assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF]
  assert tokens[0].value == 1.0
  assert tokens[2].value == 2.0


def test_every_single_char_token():
  assert types_of("+-*/^(),") == [
    TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH,
    TokenType.CARET, TokenType.LPAREN, TokenType.RPAREN, TokenType.COMMA, TokenType.EOF
  ]


def test_spaces_are_skipped_and_positions_recorded():
  tokens = tokenize("12 + x")
  assert [t.position for t in tokens] == [0, 3, 5, 6]
  assert tokens[0].value == 12.0


def test_decimal_number():
  tokens = tokenize("3.25")
  assert tokens[0] == Token(TokenType.NUMBER, 3.25, 0)


def test_identifiers_and_keywords():
  tokens = tokenize("foo_bar sin sinx")
  assert tokens[0] == Token(TokenType.IDENT, "foo_bar", 0)
  assert tokens[1].type == TokenType.SIN
  assert tokens[2] == Token(TokenType.IDENT, "sinx", 12)


def test_identifier_stops_at_digit():
  tokens = tokenize("x2")
  assert tokens[0] == Token(TokenType.IDENT, "x", 0)
  assert tokens[1] == Token(TokenType.NUMBER, 2.0, 1)


def test_empty_source_is_only_eof():
  assert types_of("") == [TokenType.EOF]


def test_unexpected_char():
  with pytest.raises(UnexpectedCharError) as info:
    tokenize("1 $ 2")
  assert info.value.char == "$"
  assert info.value.position == 2
  assert isinstance(info.value, LexError)
  assert isinstance(info.value, ValueError)


def test_only_space_counts_as_whitespace():
  with pytest.raises(UnexpectedCharError):
    tokenize("1\t2")


def test_leading_decimal_point_rejected():
  with pytest.raises(UnexpectedCharError) as info:
    tokenize(".5")
  assert info.value.char == "."


@pytest.mark.parametrize("source", ["1.", "1.+2", "3.x"])
def test_malformed_number(source):
  with pytest.raises(MalformedNumberError) as info:
    tokenize(source)
  assert info.value.position == 0
  assert isinstance(info.value, LexError)


def test_token_stream_peek_and_advance():
  stream = TokenStream(tokenize("1+"))
  assert stream.peek().type == TokenType.NUMBER
  assert stream.advance().type == TokenType.NUMBER
  assert stream.match(TokenType.STAR) is None
  assert stream.match(TokenType.PLUS).type == TokenType.PLUS
  assert stream.at_end()
  # EOF is sticky
  assert stream.advance().type == TokenType.EOF
  assert stream.peek().type == TokenType.EOF


def test_token_stream_expect_errors():
  stream = TokenStream(tokenize("x"))
  with pytest.raises(UnexpectedTokenError):
    stream.expect(TokenType.LPAREN)
  stream.advance()
  with pytest.raises(UnexpectedEndError):
    stream.expect(TokenType.RPAREN)


def test_token_stream_without_eof():
  stream = TokenStream([Token(TokenType.NUMBER, 1.0, 0)])
  stream.advance()
  assert stream.peek() == Token(TokenType.EOF, None, 1)
