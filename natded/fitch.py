from typing import *
import logging

from natded.rules import ProofKind
from natded.util import indent, find, last, bump

"""

This module holds the state of a Fitch-style proof in progress and
knows how its lines are numbered.

A proof is a flat list of steps, each tagged with how deeply nested
it is. Opening an assumption nests one level deeper; closing it with
an implication-introduction comes back out. For example, proving
p -> q from the premise p -> q the long way round reads

  1. p -> q            [pr]
  | 1.1. p             [as]
  | 1.2. q             [->E:1,1.1]
  2. (p) -> (q)        [->I:1.1-1.2]

Line numbers are dotted: the first line of a subproof appends '.1'
to the line before it, lines at the same depth count up their last
segment, and the line closing a subproof continues from the last line
of the depth it returns to.

Neither steps nor states are ever modified. Every change produces a
new ProofState, so callers can keep old ones around (for undo, say)
without copying anything.

"""

logger = logging.getLogger(__name__)

class ProofStep:
  """
  Represents a single line of a proof.
  Dependencies are the ids of the steps it was derived from.
  """

  def __init__(
    self: 'ProofStep',
    *,
    id: int,
    line_number: str,
    formula: str,
    rule: ProofKind,
    dependencies: Sequence[int] = (),
    depth: int = 0,
    is_subproof_start: bool = False,
    is_subproof_end: bool = False,
  ) -> 'ProofStep':

    self.id = id
    self.line_number = line_number
    self.formula = formula
    self.rule = rule
    self.dependencies = tuple(dependencies)
    self.depth = depth
    self.is_subproof_start = is_subproof_start
    self.is_subproof_end = is_subproof_end

  def __eq__(self, other):
    return (type(self) == type(other)
      and self.as_dict() == other.as_dict())

  def __repr__(self):
    return f'ProofStep({self.line_number}. {self.formula} [{self.rule}])'

  @property
  def is_premise(self):
    return self.rule == ProofKind.PREMISE

  def as_dict(self) -> Dict[str, Any]:
    return {
      'id': self.id,
      'line_number': self.line_number,
      'formula': self.formula,
      'rule': self.rule.value,
      'dependencies': list(self.dependencies),
      'depth': self.depth,
      'is_subproof_start': self.is_subproof_start,
      'is_subproof_end': self.is_subproof_end,
    }


class ProofState:
  """
  Represents a proof in progress: the goal, the premises it starts
  from, the steps taken so far and how many assumptions are open.
  """

  def __init__(
    self: 'ProofState',
    *,
    goal: str = '',
    premises: Sequence[str] = (),
    steps: Sequence[ProofStep] = (),
    current_depth: int = 0,
    is_complete: bool = False,
  ) -> 'ProofState':

    self.goal = goal
    self.premises = tuple(premises)
    self.steps = tuple(steps)
    self.current_depth = current_depth
    self.is_complete = is_complete

  def replace(self, **changes) -> 'ProofState':
    fields = {
      'goal': self.goal,
      'premises': self.premises,
      'steps': self.steps,
      'current_depth': self.current_depth,
      'is_complete': self.is_complete,
    }
    fields.update(changes)
    return ProofState(**fields)

  def __eq__(self, other):
    return (type(self) == type(other)
      and self.goal == other.goal
      and self.premises == other.premises
      and self.steps == other.steps
      and self.current_depth == other.current_depth
      and self.is_complete == other.is_complete)

  def __repr__(self):
    return f'<ProofState of {self.goal!r}, {len(self.steps)} steps, depth {self.current_depth}>'

  def __str__(self):
    lines = []
    for step in self.steps:
      text = f'{step.line_number}. {step.formula}  [{justification(self, step)}]'
      if step.depth:
        text = indent(text, '| ' * step.depth)
      lines.append(text)
    return '\n'.join(lines)

  def step(self, step_id: int) -> Optional[ProofStep]:
    return find(lambda s: s.id == step_id, self.steps)

  @property
  def next_id(self) -> int:
    return max((s.id for s in self.steps), default=0) + 1

  @property
  def last_step(self) -> Optional[ProofStep]:
    return self.steps[-1] if self.steps else None

  @property
  def available_steps(self) -> List[ProofStep]:
    """
    Steps usable at the current depth: anything not nested
    deeper than where we are now.
    """
    return [s for s in self.steps if s.depth <= self.current_depth]

  def last_at_depth(self, depth: int) -> Optional[ProofStep]:
    return last(lambda s: s.depth == depth, self.steps)

  @property
  def line_counters(self) -> Tuple[int, ...]:
    """
    For every depth from 0 up to the current one, the number the
    final segment of the next line at that depth would get.
    """
    counters = []
    for depth in range(self.current_depth + 1):
      step = self.last_at_depth(depth)
      counters.append(int(step.line_number.split('.')[-1]) + 1 if step else 1)
    return tuple(counters)

  def next_line_number(self, shift: int = 0) -> str:
    """

    Line number for the next step, where shift is +1 if that step
    opens a subproof, -1 if it closes one and 0 otherwise.

    """

    if not self.steps:
      return '1'

    if shift > 0:
      return f'{self.steps[-1].line_number}.1'

    target = self.last_at_depth(self.current_depth + shift)
    if target is not None:
      return bump(target.line_number)

    return str(len(self.steps) + 1)

  def removal_blocker(self, step_id: int) -> Optional[str]:
    """
    Why a step may not be deleted, or None if it may.
    """
    step = self.step(step_id)
    if step is None:
      return f'No step with id {step_id}'
    if step.is_premise:
      return 'Premises cannot be deleted'
    if any(step_id in s.dependencies for s in self.steps):
      return 'Other steps depend on this step'
    return None

  def remove(self, step_id: int) -> Optional['ProofState']:
    """

    Delete a step together with every step after it.

    The depth falls back to that of the last step kept. Returns None,
    leaving the proof as it was, if the step is a premise or something
    still depends on it.

    """

    reason = self.removal_blocker(step_id)
    if reason is not None:
      logger.info('refusing to delete step %s: %s', step_id, reason)
      return None

    index = self.steps.index(self.step(step_id))
    kept = self.steps[:index]
    return self.replace(
      steps = kept,
      current_depth = kept[-1].depth if kept else 0,
      is_complete = False,
    )

  def reset(self) -> 'ProofState':
    return ProofState()


def start_proof(goal: str, premises: Sequence[str] = ()) -> ProofState:
  """
  A fresh proof of the goal, with one premise step per premise.
  """
  steps = [
    ProofStep(
      id = index + 1,
      line_number = str(index + 1),
      formula = premise,
      rule = ProofKind.PREMISE,
      depth = 0,
    )
    for index, premise in enumerate(premises)
  ]
  return ProofState(goal=goal, premises=premises, steps=steps)


def justification(state: ProofState, step: ProofStep) -> str:
  """

  The bracketed note beside a line saying how it was obtained,
  e.g. '->E:1,2' for a modus ponens from lines 1 and 2, or
  '->I:2.1-2.3' for closing the subproof spanning those lines.

  """

  label = step.rule.pretty
  if not step.dependencies:
    return label

  def line(step_id):
    dependency = state.step(step_id)
    return dependency.line_number if dependency else '?'

  lines = [line(i) for i in step.dependencies]
  if step.is_subproof_end and len(lines) == 2:
    return f'{label}:{lines[0]}-{lines[1]}'
  return f'{label}:' + ','.join(lines)
