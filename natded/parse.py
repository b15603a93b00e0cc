from typing import *
import logging

from natded.lex import Token, TokenKind, LexError, tokenize
from natded.prop import Prop, PropKind

"""

Recursive-descent parsing of formulas.

Each precedence level gets a function, loosest binding first:

  Iff     := Implies (IFF Implies)*      left-associative
  Implies := Or (IMPLIES Implies)?       right-associative
  Or      := And (OR And)*               left-associative
  And     := Not (AND Not)*              left-associative
  Not     := NOT Not | Atom
  Atom    := VAR | TRUE | FALSE | '(' Iff ')'

Note that <-> chains to the left but -> chains to the right, so

  p <-> q <-> r   is   (p <-> q) <-> r
  p -> q -> r     is   p -> (q -> r)

This asymmetry is deliberate; don't "fix" it.

Only parentheses make the parser recurse. Negations and implication
chains are read in loops and folded afterwards, and formulas deeper
than MAX_DEPTH or with more than MAX_NESTING open parentheses are
rejected with a ParseError. Printing or evaluating a tree the
parser built never runs out of stack.

"""

logger = logging.getLogger(__name__)


class ParseError(ValueError):
  pass


MAX_DEPTH = 200
MAX_NESTING = 64


BINOP_kinds = {
  TokenKind.IFF    : PropKind.IFF,
  TokenKind.IMPLIES: PropKind.IMPLIES,
  TokenKind.OR     : PropKind.OR,
  TokenKind.AND    : PropKind.AND,
}


def describe(token: Token) -> str:
  if token.kind == TokenKind.END:
    return 'end of input'
  return f"'{token.text}'"


class Parser:

  def __init__(self, tokens: Iterable[Token]):
    self.tokens = list(tokens)
    if not self.tokens or self.tokens[-1].kind != TokenKind.END:
      offset = self.tokens[-1].offset + len(self.tokens[-1].text) if self.tokens else 0
      self.tokens.append(Token(TokenKind.END, '', offset))
    self.pos = 0
    self.nesting = 0

  def peek(self) -> Token:
    return self.tokens[self.pos]

  def advance(self) -> Token:
    token = self.tokens[self.pos]
    if token.kind != TokenKind.END:
      self.pos += 1
    return token

  def build(self, kind: PropKind, *args) -> Prop:
    prop = Prop(kind, *args)
    if prop.depth > MAX_DEPTH:
      raise ParseError('Formula is nested too deeply')
    return prop

  def parse(self) -> Prop:
    prop = self.parse_iff()
    if self.peek().kind != TokenKind.END:
      raise ParseError(f'Unexpected token: {describe(self.peek())}')
    return prop

  def parse_binop_chain(self, kind: TokenKind, parse_operand) -> Prop:
    left = parse_operand()
    while self.peek().kind == kind:
      self.advance()
      right = parse_operand()
      left = self.build(BINOP_kinds[kind], left, right)
    return left

  def parse_iff(self) -> Prop:
    return self.parse_binop_chain(TokenKind.IFF, self.parse_implies)

  def parse_implies(self) -> Prop:
    operands = [self.parse_or()]
    while self.peek().kind == TokenKind.IMPLIES:
      self.advance()
      operands.append(self.parse_or())
    # fold from the right: this is what makes -> right-associative
    prop = operands.pop()
    while operands:
      prop = self.build(PropKind.IMPLIES, operands.pop(), prop)
    return prop

  def parse_or(self) -> Prop:
    return self.parse_binop_chain(TokenKind.OR, self.parse_and)

  def parse_and(self) -> Prop:
    return self.parse_binop_chain(TokenKind.AND, self.parse_not)

  def parse_not(self) -> Prop:
    negations = 0
    while self.peek().kind == TokenKind.NOT:
      self.advance()
      negations += 1
    prop = self.parse_atom()
    for _ in range(negations):
      prop = self.build(PropKind.NOT, prop)
    return prop

  def parse_atom(self) -> Prop:
    token = self.peek()

    if token.kind == TokenKind.VAR:
      self.advance()
      return Prop(PropKind.VAR, token.text)

    if token.kind == TokenKind.TRUE:
      self.advance()
      return Prop(PropKind.TRUE)

    if token.kind == TokenKind.FALSE:
      self.advance()
      return Prop(PropKind.FALSE)

    if token.kind == TokenKind.LPAREN:
      self.advance()
      self.nesting += 1
      if self.nesting > MAX_NESTING:
        raise ParseError('Formula is nested too deeply')
      inner = self.parse_iff()
      if self.peek().kind != TokenKind.RPAREN:
        raise ParseError(f'Expected closing parenthesis, got {describe(self.peek())}')
      self.advance()
      self.nesting -= 1
      return inner

    raise ParseError(f'Unexpected token: {describe(token)}')


def parse(source: Union[str, Iterable[Token]]) -> Prop:
  """
  Parse a formula, returning a Prop object.
  Accepts either the formula text or an already-produced token stream.
  Raises LexError or ParseError if the input isn't a formula.
  """
  tokens = tokenize(source) if isinstance(source, str) else source
  return Parser(tokens).parse()


def try_parse(text: str) -> Optional[Prop]:
  """
  Like parse, but returns None instead of raising.
  """
  try:
    return parse(text)
  except (LexError, ParseError) as e:
    logger.debug('not a formula: %r (%s)', text, e)
    return None


class ParseResult:
  """
  What callers get back from parse_formula: the display markup
  of the formula, or an empty display and an error message.
  """

  def __init__(self, display: str, error: Optional[str] = None):
    self.display = display
    self.error = error

  @property
  def ok(self):
    return self.error is None

  def __eq__(self, other):
    return (type(self) == type(other)
      and self.display == other.display
      and self.error == other.error)

  def __repr__(self):
    return f'ParseResult(display={self.display!r}, error={self.error!r})'


def parse_formula(text: str) -> ParseResult:
  """
  Parse user input for display. Never raises; bad input comes back
  as a result whose .error says what went wrong.
  """
  try:
    prop = parse(text)
  except (LexError, ParseError) as e:
    logger.debug('rejected formula %r: %s', text, e)
    return ParseResult('', str(e))
  return ParseResult(prop.display())
