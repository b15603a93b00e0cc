from typing import *
import enum
import re

r"""

This module turns formula text into tokens.

Several spellings are accepted for each operator so that people
can type whichever they're used to:

  and      ^  &&  /\  ∧
  or       |  ||  \/  ∨
  not      ~  !   ¬
  implies  ->  →
  iff      <->  ↔
  true     T  ⊤
  false    F  ⊥

Longer spellings win over shorter ones, and the constants T and F
are recognized before identifiers, so 'T' is always truth and never
a variable.

"""


class TokenKind(enum.Enum):
  LPAREN  = 'lparen'
  RPAREN  = 'rparen'
  AND     = 'and'
  OR      = 'or'
  IMPLIES = 'implies'
  IFF     = 'iff'
  NOT     = 'not'
  VAR     = 'var'
  TRUE    = 'true'
  FALSE   = 'false'
  END     = 'end'

  def __str__(self):
    return self.value


class Token:
  """
  A single lexeme: its kind, the text it was read from,
  and where in the input that text starts.
  """

  __slots__ = ('kind', 'text', 'offset')

  def __init__(self, kind: TokenKind, text: str, offset: int = 0):
    self.kind = kind
    self.text = text
    self.offset = offset

  def __eq__(self, other):
    return (type(self) == type(other)
      and self.kind == other.kind
      and self.text == other.text)

  def __hash__(self):
    return hash((self.kind, self.text))

  def __repr__(self):
    return f'Token({self.kind}, {self.text!r})'


class LexError(ValueError):

  def __init__(self, char: str, offset: int):
    super().__init__(f"Unexpected character '{char}' at position {offset}")
    self.char = char
    self.offset = offset


THREE_CHAR_OPS = {
  '<->': TokenKind.IFF,
}

TWO_CHAR_OPS = {
  '->': TokenKind.IMPLIES,
  '/\\': TokenKind.AND,
  '&&': TokenKind.AND,
  '\\/': TokenKind.OR,
  '||': TokenKind.OR,
}

ONE_CHAR_OPS = {
  '(': TokenKind.LPAREN,
  ')': TokenKind.RPAREN,
  '^': TokenKind.AND,
  '∧': TokenKind.AND,
  '|': TokenKind.OR,
  '∨': TokenKind.OR,
  '~': TokenKind.NOT,
  '¬': TokenKind.NOT,
  '!': TokenKind.NOT,
  '→': TokenKind.IMPLIES,
  '↔': TokenKind.IFF,
}

CONSTANTS = {
  'T': TokenKind.TRUE,
  '⊤': TokenKind.TRUE,
  'F': TokenKind.FALSE,
  '⊥': TokenKind.FALSE,
}

IDENT_re = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')


class Tokenizer:
  """
  Lazily produces the tokens of a string, one per next().

  The stream always finishes with exactly one END token, after which
  the tokenizer is exhausted. To tokenize again, make a new Tokenizer.
  """

  def __init__(self, text: str):
    self.text = text
    self.pos = 0
    self.done = False

  def __iter__(self):
    return self

  def __next__(self) -> Token:
    if self.done:
      raise StopIteration
    token = self.next_token()
    if token.kind == TokenKind.END:
      self.done = True
    return token

  def skip_whitespace(self):
    while self.pos < len(self.text) and self.text[self.pos].isspace():
      self.pos += 1

  def emit(self, kind: TokenKind, text: str) -> Token:
    token = Token(kind, text, self.pos)
    self.pos += len(text)
    return token

  def next_token(self) -> Token:
    self.skip_whitespace()

    if self.pos >= len(self.text):
      return Token(TokenKind.END, '', self.pos)

    for table in (THREE_CHAR_OPS, TWO_CHAR_OPS, ONE_CHAR_OPS, CONSTANTS):
      for spelling, kind in table.items():
        if self.text.startswith(spelling, self.pos):
          return self.emit(kind, spelling)

    match = IDENT_re.match(self.text, self.pos)
    if match:
      return self.emit(TokenKind.VAR, match.group())

    raise LexError(self.text[self.pos], self.pos)


def tokenize(text: str) -> List[Token]:
  """
  Tokenize a whole string, returning a list that ends with END.
  """
  return list(Tokenizer(text))
