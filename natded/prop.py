from typing import *
import enum

from natded.pretty import *


class PropKind(enum.Enum):
  IFF     = 'iff'
  IMPLIES = 'implies'
  OR      = 'or'
  AND     = 'and'
  NOT     = 'not'
  TRUE    = 'true'
  FALSE   = 'false'

  VAR     = 'var'

  def __str__(self):
    return self.value

  @property
  def precedence(self):
    return {
      PropKind.IFF    : precedence_IFF,
      PropKind.IMPLIES: precedence_IMPLIES,
      PropKind.OR     : precedence_OR,
      PropKind.AND    : precedence_AND,
      PropKind.NOT    : precedence_NOT,
    }.get(self, precedence_ATOM)

  @property
  def is_binary(self):
    return self in BINARY_KINDS

  @property
  def right_associative(self):
    return self == PropKind.IMPLIES


BINARY_KINDS = (PropKind.IFF, PropKind.IMPLIES, PropKind.OR, PropKind.AND)


class Prop:

  """

  Represents a propositional formula as a tree.
  This class carries no logic beyond turning itself back into text.

  Instances are created with a kind, as well as 0 or more
  children, which are expected to also be instances of Prop.
  Variables carry their name instead of a child.

  An example to represent the formula 'p -> q' is:
  >>> p = Prop(PropKind.VAR, 'p')
  >>> q = Prop(PropKind.VAR, 'q')
  >>> implication = Prop(PropKind.IMPLIES, p, q)

  If the proposition is a binary op, its children may be accessed
  with the use of .left and .right:
  >>> assert implication.left == p
  >>> assert implication.right == q

  If it's a negation, its child may be accessed via .contained:
  >>> not_p = Prop(PropKind.NOT, p)
  >>> assert not_p.contained == p

  Turning a Prop into a string inserts only the parentheses that
  precedence and associativity require, so that

    str(parse(text)) parses back to the same tree

  for any text that parses at all.

  """

  def __init__(self, kind: PropKind, *args):
    self.kind = kind
    self.args = args
    # longest path from here down to an atom, counting both ends
    self.depth = 1 + max((arg.depth for arg in args if isinstance(arg, Prop)), default=0)

  # convenience .left and .right for binary ops
  @property
  def left(self): return self.args[0]
  @property
  def right(self): return self.args[1]

  # convenience .contained for negation
  @property
  def contained(self): return self.args[0]

  # convenience .name for variables
  @property
  def name(self):
    return self.args[0] if self.args else ''

  def __eq__(self, other):
    return (type(self) == type(other)
      and self.kind == other.kind
      and self.args == other.args)

  def __hash__(self):
    return hash((self.kind, self.args))

  @property
  def sigil(self):
    return {
      PropKind.IMPLIES: pretty_IMPLIES,
      PropKind.IFF    : pretty_IFF,
      PropKind.OR     : pretty_OR,
      PropKind.AND    : pretty_AND,
      PropKind.NOT    : pretty_NOT,
      PropKind.TRUE   : pretty_TRUE,
      PropKind.FALSE  : pretty_FALSE,
    }[self.kind]

  @property
  def display_sigil(self):
    return {
      PropKind.IMPLIES: display_IMPLIES,
      PropKind.IFF    : display_IFF,
      PropKind.OR     : display_OR,
      PropKind.AND    : display_AND,
      PropKind.NOT    : display_NOT,
      PropKind.TRUE   : display_TRUE,
      PropKind.FALSE  : display_FALSE,
    }[self.kind]

  def child_requirements(self) -> Tuple[int, int]:
    """
    The precedence each side of a binary op must reach to go
    without parentheses. The side opposite the operator's
    associativity needs one level more, else 'p ^ (q ^ r)' would
    come out as 'p ^ q ^ r' and read back as '(p ^ q) ^ r'.
    """
    own = self.kind.precedence
    if self.kind.right_associative:
      return (own + 1, own)
    return (own, own + 1)

  def render(self, *, display: bool, required: int = 0) -> str:
    if self.kind == PropKind.VAR:
      return self.name or ''

    if self.kind in (PropKind.TRUE, PropKind.FALSE):
      return self.display_sigil if display else self.sigil

    if self.kind == PropKind.NOT:
      inner = self.contained.render(display=display, required=precedence_NOT)
      if display:
        return f'{display_NOT} {inner}'
      return f'{pretty_NOT}{inner}'

    left_required, right_required = self.child_requirements()
    pretty_left = self.left.render(display=display, required=left_required)
    pretty_right = self.right.render(display=display, required=right_required)
    sigil = self.display_sigil if display else self.sigil
    text = f'{pretty_left} {sigil} {pretty_right}'
    if self.kind.precedence < required:
      text = f'{pretty_OPEN}{text}{pretty_CLOSE}'
    return text

  def prettify(self) -> str:
    return self.render(display=False)

  def display(self) -> str:
    return self.render(display=True)

  def __str__(self):
    return self.prettify()

  def __repr__(self):
    return f'|{self}|'


def var(name: str) -> Prop:
  return Prop(PropKind.VAR, name)
