from functools import wraps
from typing import *
import logging
import re

from natded.fitch import ProofState, ProofStep
from natded.parse import parse, try_parse
from natded.prop import Prop, PropKind
from natded.rules import ProofKind, Rule, find_rule, get_rules
from natded.util import find, last


"""

This module applies natural deduction rules to a proof in progress.

Nothing here searches for proofs: the person doing the proof picks a
rule, picks the steps it should use and, for some rules, types in a
formula. Our job is to check that the choice makes sense and, if it
does, to produce the step it licenses.

Steps store their formulas as plain text, so every rule parses the
formulas it needs afresh. Parsing is linear in the length of the
formula, so this costs nothing worth caching.

Each rule is a function taking

  (state, selected, user_input)

and returning a new ProofStep, or None if the rule doesn't apply to
that selection. Most of the bookkeeping is shared, so the functions
are built out of decorators, in the same spirit as each other:

  @proofify(kind)   turns the derived formula into a ProofStep
  @selecting(n)     insists on n selected steps and looks them up
  @needs_input      insists on a formula typed in by the user

so that the body of a rule is only the logic particular to it.

Formulas are compared after normalization, which throws away spaces,
parentheses and case. This is more forgiving than comparing trees:
'P -> Q' matches 'p->q', and so does '(p) -> (q)', which is what lets
the parenthesized output of e.g. and-intro match a goal typed without
the parentheses.

"""

logger = logging.getLogger(__name__)


def normalize(formula: str) -> str:
  return re.sub(r'[\s()]', '', formula).lower()


def is_fully_parenthesized(formula: str) -> bool:
  """
  Is the whole of the formula wrapped in a single pair of parentheses?
  '(p -> q)' is, '(p) -> (q)' is not.
  """
  trimmed = formula.strip()
  if not (trimmed.startswith('(') and trimmed.endswith(')')):
    return False

  depth = 0
  for i, char in enumerate(trimmed):
    if char == '(':
      depth += 1
    elif char == ')':
      depth -= 1
    if depth == 0 and i < len(trimmed) - 1:
      return False
  return True


BINOP_re = re.compile(r'<->|->|/\\|\\/|&&|\|\||[|^∧∨→↔]')


class Applicability:
  """
  Whether a rule can be tried right now, and if not, why not.
  Being applicable doesn't promise the rule will succeed on
  whatever steps end up selected.
  """

  def __init__(self, rule: Rule, applicable: bool, reason: Optional[str] = None):
    self.rule = rule
    self.applicable = applicable
    self.reason = reason

  def __repr__(self):
    return f'Applicability({self.rule.id}, {self.applicable}, {self.reason!r})'


def check_applicability(rule: Rule, state: ProofState) -> Applicability:

  if rule.kind in (ProofKind.ASSUME, ProofKind.LEM):
    return Applicability(rule, True)

  if rule.kind == ProofKind.IMPL_INTRO:
    if state.current_depth > 0:
      return Applicability(rule, True)
    return Applicability(rule, False, 'No open assumption to close')

  if rule.kind == ProofKind.OR_ELIM:
    if any(parses_as(step, PropKind.OR) for step in state.steps):
      return Applicability(rule, True)
    return Applicability(rule, False, 'Need a disjunction (P∨Q) to apply this rule')

  if len(state.available_steps) < rule.required_steps:
    return Applicability(rule, False, f'Need at least {rule.required_steps} step(s) at current depth')

  return Applicability(rule, True)


def applicable_rules(state: ProofState) -> List[Applicability]:
  return [check_applicability(rule, state) for rule in get_rules()]


def parses_as(step: ProofStep, kind: PropKind) -> bool:
  prop = try_parse(step.formula)
  return prop is not None and prop.kind == kind


"""

Rule decorators

"""

def proofify(proof_kind: ProofKind, *, shift: int = 0):
  """
  The rule body returns the derived formula, optionally paired with
  the ids it depends on (by default, the selected ids). Wrap that
  up as a step at the current depth moved by `shift`.
  """
  def decorator(function):

    @wraps(function)
    def wrapper(state, selected, user_input):
      derived = function(state, selected, user_input)

      if derived is None:
        return None

      if isinstance(derived, str):
        formula, dependencies = derived, selected
      else:
        formula, dependencies = derived

      return ProofStep(
        id                = state.next_id,
        line_number       = state.next_line_number(shift),
        formula           = formula,
        rule              = proof_kind,
        dependencies      = dependencies,
        depth             = state.current_depth + shift,
        is_subproof_start = shift > 0,
        is_subproof_end   = shift < 0,
      )

    return wrapper
  return decorator

def selecting(count: int):
  def decorator(function):

    @wraps(function)
    def wrapper(state, selected, user_input):
      if len(selected) != count:
        return None
      steps = [state.step(step_id) for step_id in selected]
      if None in steps:
        return None
      return function(state, steps, user_input)

    return wrapper
  return decorator

def needs_input(function):

  @wraps(function)
  def wrapper(state, selected, user_input):
    if not user_input or not user_input.strip():
      return None
    # rejects text that isn't a formula before it ends up in a step
    parse(user_input)
    return function(state, selected, user_input)

  return wrapper

def kinded(formula: str, kind: PropKind) -> Optional[Prop]:
  """
  Parse a step's formula, returning it only if it is of the given kind
  """
  prop = parse(formula)
  return prop if prop.kind == kind else None


"""

The rules themselves

"""

@proofify(ProofKind.ASSUME, shift=+1)
@needs_input
def ASSUME(state, selected, user_input):
  """
  Open a subproof with any formula as its assumption
  """
  return user_input, []

@proofify(ProofKind.MODUS_PONENS)
@selecting(2)
def MODUS_PONENS(state, steps, user_input):
  """
    P,  P -> Q
    ----------
        Q
  """
  first, second = steps
  return modus_ponens(first, second) or modus_ponens(second, first)

def modus_ponens(premise: ProofStep, implication: ProofStep) -> Optional[str]:
  impl = try_parse(implication.formula)
  if impl is None or impl.kind != PropKind.IMPLIES:
    return None
  if normalize(premise.formula) == normalize(str(impl.left)):
    return str(impl.right)

@proofify(ProofKind.MODUS_TOLLENS)
@selecting(2)
def MODUS_TOLLENS(state, steps, user_input):
  """
    P -> Q,  ~Q
    -----------
        ~P
  """
  first, second = steps
  return modus_tollens(first, second) or modus_tollens(second, first)

def modus_tollens(implication: ProofStep, negation: ProofStep) -> Optional[str]:
  impl = try_parse(implication.formula)
  negated = try_parse(negation.formula)
  if impl is None or impl.kind != PropKind.IMPLIES:
    return None
  if negated is None or negated.kind != PropKind.NOT:
    return None
  if normalize(str(negated.contained)) == normalize(str(impl.right)):
    # always parenthesized so that e.g. ~(p ^ q) stays a negated conjunction
    return f'~({impl.left})'

@proofify(ProofKind.AND_INTRO)
@selecting(2)
def AND_INTRO(state, steps, user_input):
  """
    P,  Q
    -----
    P ^ Q
  """
  first, second = steps
  return f'({first.formula}) ^ ({second.formula})'

@proofify(ProofKind.AND_ELIM_LEFT)
@selecting(1)
def AND_ELIM_LEFT(state, steps, user_input):
  """
    P ^ Q
    -----
      P
  """
  conjunction = kinded(steps[0].formula, PropKind.AND)
  if conjunction is not None:
    return str(conjunction.left)

@proofify(ProofKind.AND_ELIM_RIGHT)
@selecting(1)
def AND_ELIM_RIGHT(state, steps, user_input):
  """
    P ^ Q
    -----
      Q
  """
  conjunction = kinded(steps[0].formula, PropKind.AND)
  if conjunction is not None:
    return str(conjunction.right)

@proofify(ProofKind.OR_INTRO_LEFT)
@selecting(1)
@needs_input
def OR_INTRO_LEFT(state, steps, user_input):
  """
      P
    -----
    P | Q
  """
  return f'({steps[0].formula}) | ({user_input.strip()})'

@proofify(ProofKind.OR_INTRO_RIGHT)
@selecting(1)
@needs_input
def OR_INTRO_RIGHT(state, steps, user_input):
  """
      P
    -----
    Q | P
  """
  return f'({user_input.strip()}) | ({steps[0].formula})'

@proofify(ProofKind.DOUBLE_NEG)
@selecting(1)
def DOUBLE_NEG(state, steps, user_input):
  """
    ~~P
    ---
     P
  """
  negation = kinded(steps[0].formula, PropKind.NOT)
  if negation is not None and negation.contained.kind == PropKind.NOT:
    return str(negation.contained.contained)

@proofify(ProofKind.IMPL_INTRO, shift=-1)
def IMPL_INTRO(state, selected, user_input):
  """

    | P
    | ...
    | Q
    ------
    P -> Q

  The conclusion is whatever the last step is, which has to be inside
  the subproof being closed.

  """

  if state.current_depth == 0:
    return None

  assumption = open_assumption(state)
  conclusion = state.last_step
  if assumption is None or conclusion is None or conclusion.depth != state.current_depth:
    return None

  formula = f'({assumption.formula}) -> ({conclusion.formula})'
  return formula, [assumption.id, conclusion.id]

def open_assumption(state: ProofState) -> Optional[ProofStep]:
  """
  The assumption that opened the innermost subproof still open
  """
  def assumed_here(step):
    return step.depth == state.current_depth and step.rule == ProofKind.ASSUME

  return (last(lambda s: assumed_here(s) and s.is_subproof_start, state.steps)
          or find(assumed_here, state.steps))

@proofify(ProofKind.OR_ELIM)
@selecting(1)
def OR_ELIM(state, steps, user_input):
  """

    P | Q,  P |- R,  Q |- R
    -----------------------
               R

  Only the first move is made here: the step records which disjunction
  is being split, unchanged. Proving R under each disjunct is left to
  the caller, which can get the two cases from or_elim_disjuncts.

  """
  disjunction = kinded(steps[0].formula, PropKind.OR)
  if disjunction is not None:
    return steps[0].formula

def or_elim_disjuncts(step: ProofStep) -> Optional[Tuple[str, str]]:
  """
  The two cases of the disjunction an or-elim step recorded
  """
  if step.rule != ProofKind.OR_ELIM:
    return None
  disjunction = try_parse(step.formula)
  if disjunction is None or disjunction.kind != PropKind.OR:
    return None
  return str(disjunction.left), str(disjunction.right)

@proofify(ProofKind.LEM)
@needs_input
def LEM(state, selected, user_input):
  """
    ------
    P | ~P
  """
  formula = user_input.strip()
  if BINOP_re.search(formula) and not is_fully_parenthesized(formula):
    formula = f'({formula})'
  return f'{formula} | ~{formula}', []


HANDLERS = {
  ProofKind.ASSUME        : ASSUME,
  ProofKind.MODUS_PONENS  : MODUS_PONENS,
  ProofKind.MODUS_TOLLENS : MODUS_TOLLENS,
  ProofKind.AND_INTRO     : AND_INTRO,
  ProofKind.AND_ELIM_LEFT : AND_ELIM_LEFT,
  ProofKind.AND_ELIM_RIGHT: AND_ELIM_RIGHT,
  ProofKind.OR_INTRO_LEFT : OR_INTRO_LEFT,
  ProofKind.OR_INTRO_RIGHT: OR_INTRO_RIGHT,
  ProofKind.DOUBLE_NEG    : DOUBLE_NEG,
  ProofKind.IMPL_INTRO    : IMPL_INTRO,
  ProofKind.OR_ELIM       : OR_ELIM,
  ProofKind.LEM           : LEM,
}


def apply_rule(
  rule: Union[Rule, ProofKind, str],
  state: ProofState,
  selected: Sequence[int] = (),
  user_input: Optional[str] = None,
) -> Optional[ProofStep]:

  """

  Apply a rule to the selected steps (given by id), returning the
  step it derives. The step is not added to the state; see add_step.

  Returns None whenever the rule can't be applied: the wrong number
  of steps is selected, the steps aren't of the shape the rule needs,
  a formula doesn't parse, or a formula the rule needs wasn't given.
  Never raises for any of these.

  """

  if not isinstance(rule, Rule):
    key, rule = rule, find_rule(rule)
    if rule is None:
      logger.debug('no such rule: %r', key)
      return None
  handler = HANDLERS[rule.kind]

  try:
    step = handler(state, list(selected), user_input)
  except ValueError as e:
    logger.debug('could not apply %s to %s: %s', rule.id, list(selected), e)
    return None

  if step is None:
    logger.debug('%s does not apply to %s', rule.id, list(selected))
  return step


def validate_proof(state: ProofState) -> bool:
  """
  A proof is done when no assumption is left open and the last
  step is the goal.
  """
  if not state.steps or state.current_depth != 0:
    return False
  return normalize(state.steps[-1].formula) == normalize(state.goal)


def add_step(state: ProofState, step: ProofStep) -> ProofState:
  """
  The state after taking a step. Assuming moves one level deeper,
  closing a subproof one level back out.
  """
  extended = state.replace(
    steps = state.steps + (step,),
    current_depth = step.depth,
    is_complete = False,
  )
  if validate_proof(extended):
    logger.info('proof of %r complete in %d steps', state.goal, len(extended.steps))
    extended = extended.replace(is_complete=True)
  return extended
