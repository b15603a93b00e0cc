from typing import *

from natded.parse import parse
from natded.prop import Prop, PropKind


def evaluate(prop: Prop, assignment: Mapping[str, bool]) -> bool:
  """
  Truth value of a proposition under an assignment of variables.
  Variables missing from the assignment count as false.
  """

  if prop.kind == PropKind.VAR:
    return bool(assignment.get(prop.name, False))
  elif prop.kind == PropKind.TRUE:
    return True
  elif prop.kind == PropKind.FALSE:
    return False
  elif prop.kind == PropKind.NOT:
    return not evaluate(prop.contained, assignment)
  elif prop.kind == PropKind.AND:
    return evaluate(prop.left, assignment) and evaluate(prop.right, assignment)
  elif prop.kind == PropKind.OR:
    return evaluate(prop.left, assignment) or evaluate(prop.right, assignment)
  elif prop.kind == PropKind.IMPLIES:
    return not evaluate(prop.left, assignment) or evaluate(prop.right, assignment)
  elif prop.kind == PropKind.IFF:
    return evaluate(prop.left, assignment) == evaluate(prop.right, assignment)
  else:
    raise ValueError(f'Unrecognized proposition kind {prop.kind}')


def variables(prop: Prop) -> List[str]:
  """
  The distinct variable names in a proposition, sorted
  """
  found = set()

  def visit(node):
    if node.kind == PropKind.VAR:
      if node.name:
        found.add(node.name)
    elif node.kind == PropKind.NOT:
      visit(node.contained)
    elif node.kind.is_binary:
      visit(node.left)
      visit(node.right)

  visit(prop)
  return sorted(found)


class TruthTableRow:

  def __init__(self, assignment: Dict[str, bool], result: bool):
    self.assignment = assignment
    self.result = result

  def __eq__(self, other):
    return (type(self) == type(other)
      and self.assignment == other.assignment
      and self.result == other.result)

  def __repr__(self):
    return f'TruthTableRow({self.assignment}, {self.result})'


def truth_table(formula: Union[str, Prop]) -> List[TruthTableRow]:
  """

  Evaluate a formula under every assignment of its variables.

  Columns are the variables in sorted order. Rows count up in binary
  with the first variable as the most significant bit, so the first
  row assigns false to everything and the last assigns true.

  """

  prop = parse(formula) if isinstance(formula, str) else formula
  names = variables(prop)
  count = len(names)

  rows = []
  for i in range(2 ** count):
    assignment = {
      name: bool((i >> (count - 1 - j)) & 1)
      for j, name in enumerate(names)
    }
    rows.append(TruthTableRow(assignment, evaluate(prop, assignment)))
  return rows


def is_tautology(formula: Union[str, Prop]) -> bool:
  return all(row.result for row in truth_table(formula))
