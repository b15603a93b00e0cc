from typing import *
import enum

from natded.pretty import *


class ProofKind(enum.Enum):
  PREMISE        = 'premise'
  ASSUME         = 'assume'
  MODUS_PONENS   = 'mp'
  MODUS_TOLLENS  = 'mt'
  AND_INTRO      = 'and_intro'
  AND_ELIM_LEFT  = 'and_elim_left'
  AND_ELIM_RIGHT = 'and_elim_right'
  OR_INTRO_LEFT  = 'or_intro_left'
  OR_INTRO_RIGHT = 'or_intro_right'
  DOUBLE_NEG     = 'double_neg'
  IMPL_INTRO     = 'impl_intro'
  OR_ELIM        = 'or_elim'
  LEM            = 'lem'

  def __str__(self):
    return self.value

  @property
  def pretty(self):
    return {
      ProofKind.PREMISE        : 'pr',
      ProofKind.ASSUME         : 'as',
      ProofKind.MODUS_PONENS   : pretty_IMPLIES + 'E',
      ProofKind.MODUS_TOLLENS  : 'MT',
      ProofKind.AND_INTRO      : pretty_AND + 'I',
      ProofKind.AND_ELIM_LEFT  : pretty_AND + 'E',
      ProofKind.AND_ELIM_RIGHT : pretty_AND + 'E',
      ProofKind.OR_INTRO_LEFT  : pretty_OR + 'I',
      ProofKind.OR_INTRO_RIGHT : pretty_OR + 'I',
      ProofKind.DOUBLE_NEG     : pretty_NOT + pretty_NOT + 'E',
      ProofKind.IMPL_INTRO     : pretty_IMPLIES + 'I',
      ProofKind.OR_ELIM        : pretty_OR + 'E',
      ProofKind.LEM            : 'LEM',
    }[self]


class RuleCategory(enum.Enum):
  ASSUMPTION   = 'assumption'
  BASIC        = 'basic'
  INTRODUCTION = 'introduction'
  ELIMINATION  = 'elimination'

  def __str__(self):
    return self.value


class Rule:
  """
  What a rule is called and how many steps it wants selected.
  How a rule actually derives things lives in prove.py.
  """

  def __init__(
    self: 'Rule',
    kind: ProofKind,
    category: RuleCategory,
    required_steps: int,
    name: str,
    description: str,
  ) -> 'Rule':

    self.kind = kind
    self.category = category
    self.required_steps = required_steps
    self.name = name
    self.description = description

  @property
  def id(self) -> str:
    return self.kind.value

  def __eq__(self, other):
    return type(self) == type(other) and self.kind == other.kind

  def __hash__(self):
    return hash(self.kind)

  def __repr__(self):
    return f'<Rule {self.id}>'


# Display order; grouped loosely by category
RULES = (
  Rule(ProofKind.ASSUME, RuleCategory.ASSUMPTION, 0,
       'Assume', 'Open a subproof by assuming any formula'),
  Rule(ProofKind.MODUS_PONENS, RuleCategory.BASIC, 2,
       'Modus Ponens', 'From P and P -> Q, derive Q'),
  Rule(ProofKind.MODUS_TOLLENS, RuleCategory.BASIC, 2,
       'Modus Tollens', 'From P -> Q and ~Q, derive ~P'),
  Rule(ProofKind.AND_INTRO, RuleCategory.INTRODUCTION, 2,
       'Conjunction Introduction', 'From P and Q, derive P ^ Q'),
  Rule(ProofKind.AND_ELIM_LEFT, RuleCategory.ELIMINATION, 1,
       'Conjunction Elimination (left)', 'From P ^ Q, derive P'),
  Rule(ProofKind.AND_ELIM_RIGHT, RuleCategory.ELIMINATION, 1,
       'Conjunction Elimination (right)', 'From P ^ Q, derive Q'),
  Rule(ProofKind.OR_INTRO_LEFT, RuleCategory.INTRODUCTION, 1,
       'Disjunction Introduction (left)', 'From P, derive P | Q for any Q'),
  Rule(ProofKind.OR_INTRO_RIGHT, RuleCategory.INTRODUCTION, 1,
       'Disjunction Introduction (right)', 'From P, derive Q | P for any Q'),
  Rule(ProofKind.DOUBLE_NEG, RuleCategory.BASIC, 1,
       'Double Negation', 'From ~~P, derive P'),
  Rule(ProofKind.IMPL_INTRO, RuleCategory.INTRODUCTION, 1,
       'Implication Introduction', 'Close the open assumption P with conclusion Q, deriving P -> Q'),
  Rule(ProofKind.OR_ELIM, RuleCategory.ELIMINATION, 1,
       'Disjunction Elimination', 'Reason by cases on P | Q'),
  Rule(ProofKind.LEM, RuleCategory.BASIC, 0,
       'Law of Excluded Middle', 'Derive P | ~P for any P'),
)


def get_rules() -> List[Rule]:
  return list(RULES)


def find_rule(key: Union[str, ProofKind]) -> Optional[Rule]:
  """
  Look a rule up by its id ('mp') or its ProofKind.
  """
  for rule in RULES:
    if rule.kind == key or rule.id == key:
      return rule
