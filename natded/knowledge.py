from typing import *

from natded.fitch import ProofState, start_proof


class SuggestedGoal:

  def __init__(self, label: str, formula: str, description: str):
    self.label = label
    self.formula = formula
    self.description = description

  def __repr__(self):
    return f'<SuggestedGoal {self.formula!r}>'


class KnowledgeBase:
  """
  A named set of premises to start a proof from,
  along with goals worth proving from them.
  """

  def __init__(
    self: 'KnowledgeBase',
    *,
    id: str,
    name: str,
    description: str,
    premises: Sequence[str],
    suggested_goals: Sequence[SuggestedGoal],
  ) -> 'KnowledgeBase':

    self.id = id
    self.name = name
    self.description = description
    self.premises = tuple(premises)
    self.suggested_goals = tuple(suggested_goals)

  def __repr__(self):
    return f'<KnowledgeBase {self.id}>'

  def start(self, goal: str) -> ProofState:
    return start_proof(goal, self.premises)


KNOWLEDGE_BASES = (
  KnowledgeBase(
    id = 'empty',
    name = 'Empty',
    description = 'No premises; prove tautologies from nothing',
    premises = [],
    suggested_goals = [
      SuggestedGoal('Identity', 'p -> p', 'Anything implies itself'),
    ],
  ),
  KnowledgeBase(
    id = 'modus-ponens',
    name = 'Modus Ponens',
    description = 'A fact and an implication from it',
    premises = ['p', 'p -> q'],
    suggested_goals = [
      SuggestedGoal('Derive q', 'q', 'Apply modus ponens'),
    ],
  ),
  KnowledgeBase(
    id = 'conjunction',
    name = 'Conjunction',
    description = 'Two separate facts',
    premises = ['p', 'q'],
    suggested_goals = [
      SuggestedGoal('Combine with and', 'p ^ q', 'Join both facts'),
      SuggestedGoal('Commutativity', 'q ^ p', 'Join them the other way round'),
    ],
  ),
  KnowledgeBase(
    id = 'disjunction',
    name = 'Disjunction',
    description = 'A single fact',
    premises = ['p'],
    suggested_goals = [
      SuggestedGoal('Add a disjunct', 'p | q', 'Weaken the fact with or'),
    ],
  ),
  KnowledgeBase(
    id = 'syllogism',
    name = 'Hypothetical Syllogism',
    description = 'A chain of implications',
    premises = ['p', 'p -> q', 'q -> r'],
    suggested_goals = [
      SuggestedGoal('Derive r', 'r', 'Follow the chain twice'),
      SuggestedGoal('Direct implication', 'p -> r', 'Skip the middle of the chain'),
    ],
  ),
  KnowledgeBase(
    id = 'elimination',
    name = 'Conjunction Elimination',
    description = 'A conjunction to take apart',
    premises = ['p ^ q'],
    suggested_goals = [
      SuggestedGoal('Extract left', 'p', 'Take the left conjunct'),
      SuggestedGoal('Extract right', 'q', 'Take the right conjunct'),
    ],
  ),
)


def get_knowledge_bases() -> List[KnowledgeBase]:
  return list(KNOWLEDGE_BASES)

def find_knowledge_base(kb_id: str) -> Optional[KnowledgeBase]:
  for kb in KNOWLEDGE_BASES:
    if kb.id == kb_id:
      return kb

def get_suggested_goals() -> List[SuggestedGoal]:
  return [goal for kb in KNOWLEDGE_BASES for goal in kb.suggested_goals]
