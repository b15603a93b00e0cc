import pytest

from natded.fitch import ProofState, ProofStep, start_proof
from natded.prove import (
  add_step,
  applicable_rules,
  apply_rule,
  check_applicability,
  is_fully_parenthesized,
  normalize,
  or_elim_disjuncts,
  validate_proof,
)
from natded.rules import ProofKind, RuleCategory, find_rule, get_rules


def rule(rule_id):
  return find_rule(rule_id)


def derive(state, rule_id, selected=(), user_input=None):
  step = apply_rule(rule(rule_id), state, selected, user_input)
  assert step is not None, f'{rule_id} failed'
  return add_step(state, step)


def step(id, formula, depth=0, kind=ProofKind.PREMISE, line=None, start=False):
  return ProofStep(
    id = id,
    line_number = line or str(id),
    formula = formula,
    rule = kind,
    depth = depth,
    is_subproof_start = start,
  )


def test_rule_table():
  rules = get_rules()
  assert [r.id for r in rules] == [
    'assume', 'mp', 'mt', 'and_intro', 'and_elim_left', 'and_elim_right',
    'or_intro_left', 'or_intro_right', 'double_neg', 'impl_intro', 'or_elim', 'lem',
  ]
  assert rule('assume').category == RuleCategory.ASSUMPTION
  assert rule('mp').required_steps == 2
  assert rule('lem').required_steps == 0
  assert find_rule(ProofKind.OR_ELIM) is rule('or_elim')
  assert find_rule('nonsense') is None


def test_normalize():
  assert normalize('P -> Q') == normalize('p->q') == 'p->q'
  assert normalize('(p) ^ (q)') == normalize('p ^ q')


def test_is_fully_parenthesized():
  assert is_fully_parenthesized('(p -> q)')
  assert is_fully_parenthesized('  ((p) ^ q) ')
  assert not is_fully_parenthesized('(p) -> (q)')
  assert not is_fully_parenthesized('p -> q')


class TestApplicability:

  def test_always_applicable(self):
    state = ProofState(goal='p -> p')
    assert check_applicability(rule('assume'), state).applicable
    assert check_applicability(rule('lem'), state).applicable

  def test_impl_intro_needs_open_assumption(self):
    result = check_applicability(rule('impl_intro'), ProofState(goal='p -> p'))
    assert not result.applicable
    assert result.reason == 'No open assumption to close'

    state = ProofState(goal='p -> p', steps=[step(1, 'p', depth=1, kind=ProofKind.ASSUME)], current_depth=1)
    assert check_applicability(rule('impl_intro'), state).applicable

  def test_or_elim_needs_disjunction(self):
    result = check_applicability(rule('or_elim'), start_proof('q', ['p ^ q', 'oops ^']))
    assert not result.applicable
    assert result.reason == 'Need a disjunction (P∨Q) to apply this rule'
    assert check_applicability(rule('or_elim'), start_proof('q', ['p | q'])).applicable

  def test_counts_steps_in_scope(self):
    state = start_proof('q', ['p'])
    result = check_applicability(rule('mp'), state)
    assert not result.applicable
    assert result.reason == 'Need at least 2 step(s) at current depth'
    assert check_applicability(rule('and_elim_left'), state).applicable

  def test_deeper_steps_are_out_of_scope(self):
    state = ProofState(
      goal = 'q',
      steps = [step(1, 'p'), step(2, 'q', depth=1, kind=ProofKind.ASSUME)],
      current_depth = 0,
    )
    assert not check_applicability(rule('and_intro'), state).applicable

  def test_applicable_but_mismatched(self):
    state = start_proof('p', ['p | q'])
    assert check_applicability(rule('and_elim_left'), state).applicable
    assert apply_rule(rule('and_elim_left'), state, [1]) is None

  def test_all_rules(self):
    results = applicable_rules(start_proof('q', ['p', 'p -> q']))
    assert len(results) == len(get_rules())
    by_id = {result.rule.id: result.applicable for result in results}
    assert by_id['mp']
    assert not by_id['impl_intro']
    assert not by_id['or_elim']


class TestRules:

  def test_modus_ponens_either_order(self):
    state = start_proof('q', ['p', 'p -> q'])
    for selection in ([1, 2], [2, 1]):
      result = apply_rule(rule('mp'), state, selection)
      assert result.formula == 'q'
      assert normalize(result.formula) == 'q'
      assert result.rule == ProofKind.MODUS_PONENS
      assert result.dependencies == tuple(selection)
      assert result.line_number == '3'
      assert result.id == 3

  def test_modus_ponens_unwraps_consequent(self):
    state = start_proof('r', ['P', 'p -> (q ^ r)'])
    assert apply_rule(rule('mp'), state, [1, 2]).formula == 'q ^ r'

  def test_modus_ponens_mismatch(self):
    state = start_proof('q', ['r', 'p -> q'])
    assert apply_rule(rule('mp'), state, [1, 2]) is None
    assert apply_rule(rule('mp'), state, [1]) is None
    assert apply_rule(rule('mp'), state, [1, 7]) is None

  def test_modus_tollens(self):
    state = start_proof('~p', ['p -> q', '~q'])
    assert apply_rule(rule('mt'), state, [1, 2]).formula == '~(p)'
    assert apply_rule(rule('mt'), state, [2, 1]).formula == '~(p)'

  def test_modus_tollens_wraps_antecedent(self):
    state = start_proof('~(~p)', ['~(~p) -> q', '~q'])
    result = apply_rule(rule('mt'), state, [1, 2])
    assert result.formula == '~(~~p)'
    assert result.rule == ProofKind.MODUS_TOLLENS

    state = start_proof('~(p ^ q)', ['p ^ q -> r', '~r'])
    assert apply_rule(rule('mt'), state, [1, 2]).formula == '~(p ^ q)'

  def test_modus_tollens_needs_negated_consequent(self):
    state = start_proof('~p', ['p -> q', 'q'])
    assert apply_rule(rule('mt'), state, [1, 2]) is None

  def test_and_intro_always_parenthesizes(self):
    state = start_proof('p ^ q', ['p', 'q | r'])
    assert apply_rule(rule('and_intro'), state, [1, 2]).formula == '(p) ^ (q | r)'
    assert apply_rule(rule('and_intro'), state, [2, 1]).formula == '(q | r) ^ (p)'

  def test_and_elim(self):
    state = start_proof('p', ['(p | r) ^ ((q))'])
    assert apply_rule(rule('and_elim_left'), state, [1]).formula == 'p | r'
    assert apply_rule(rule('and_elim_right'), state, [1]).formula == 'q'

  def test_and_elim_on_unparseable_step(self):
    state = start_proof('p', ['p ^'])
    assert apply_rule(rule('and_elim_left'), state, [1]) is None

  def test_or_intro(self):
    state = start_proof('p | q', ['p'])
    left = apply_rule(rule('or_intro_left'), state, [1], 'q')
    right = apply_rule(rule('or_intro_right'), state, [1], 'q')
    assert left.formula == '(p) | (q)'
    assert right.formula == '(q) | (p)'
    assert left.rule == ProofKind.OR_INTRO_LEFT
    assert right.dependencies == (1,)

  @pytest.mark.parametrize('user_input', [None, '', '   ', 'q ^'])
  def test_or_intro_needs_formula(self, user_input):
    state = start_proof('p | q', ['p'])
    assert apply_rule(rule('or_intro_left'), state, [1], user_input) is None

  def test_double_negation(self):
    state = start_proof('p', ['~~p', '~~(p -> q)', '~p'])
    assert apply_rule(rule('double_neg'), state, [1]).formula == 'p'
    assert apply_rule(rule('double_neg'), state, [2]).formula == 'p -> q'
    assert apply_rule(rule('double_neg'), state, [3]) is None

  def test_assume(self):
    state = start_proof('p -> p')
    result = apply_rule(rule('assume'), state, [], 'p')
    assert result.formula == 'p'
    assert result.rule == ProofKind.ASSUME
    assert result.depth == 1
    assert result.line_number == '1'
    assert result.is_subproof_start
    assert result.dependencies == ()

  def test_assume_keeps_input_verbatim(self):
    result = apply_rule(rule('assume'), start_proof('q'), [], '(p)^ q')
    assert result.formula == '(p)^ q'

  def test_deeply_nested_formulas(self):
    deep = '(' * 150 + 'p' + ')' * 150
    state = start_proof('p', ['~' * 1200 + 'p', deep])
    assert apply_rule(rule('double_neg'), state, [1]) is None
    assert apply_rule(rule('and_elim_left'), state, [2]) is None
    assert apply_rule(rule('assume'), state, [], deep) is None
    assert not check_applicability(rule('or_elim'), state).applicable

  @pytest.mark.parametrize('user_input', [None, '', 'p @'])
  def test_assume_needs_formula(self, user_input):
    assert apply_rule(rule('assume'), start_proof('q'), [], user_input) is None

  def test_impl_intro(self):
    state = ProofState(
      goal = 'p -> p',
      steps = [step(1, 'p', depth=1, kind=ProofKind.ASSUME, start=True)],
      current_depth = 1,
    )
    result = apply_rule(rule('impl_intro'), state, [])
    assert result.formula == '(p) -> (p)'
    assert result.rule == ProofKind.IMPL_INTRO
    assert result.depth == 0
    assert result.line_number == '2'
    assert result.is_subproof_end
    assert result.dependencies == (1, 1)

  def test_impl_intro_closes_innermost(self):
    state = ProofState(
      goal = 'p -> (q -> r)',
      steps = [
        step(1, 'p', depth=1, kind=ProofKind.ASSUME, line='1', start=True),
        step(2, 'q', depth=2, kind=ProofKind.ASSUME, line='1.1', start=True),
        step(3, 'r', depth=2, kind=ProofKind.ASSUME, line='1.1.1'),
      ],
      current_depth = 2,
    )
    result = apply_rule(rule('impl_intro'), state, [])
    assert result.formula == '(q) -> (r)'
    assert result.depth == 1
    assert result.dependencies == (2, 3)

  def test_impl_intro_without_assumption(self):
    assert apply_rule(rule('impl_intro'), start_proof('p', ['p']), []) is None

  def test_or_elim_records_disjunction(self):
    state = start_proof('q | p', ['p | q'])
    result = apply_rule(rule('or_elim'), state, [1])
    assert result.formula == 'p | q'
    assert result.rule == ProofKind.OR_ELIM
    assert or_elim_disjuncts(result) == ('p', 'q')
    assert apply_rule(rule('or_elim'), start_proof('p', ['p ^ q']), [1]) is None

  def test_or_elim_disjuncts_only_for_or_elim(self):
    state = start_proof('q', ['p | q'])
    assert or_elim_disjuncts(state.steps[0]) is None

  @pytest.mark.parametrize('user_input, expected', [
    ('p', 'p | ~p'),
    ('  p  ', 'p | ~p'),
    ('p -> q', '(p -> q) | ~(p -> q)'),
    ('(p -> q)', '(p -> q) | ~(p -> q)'),
    ('(p) ^ (q)', '((p) ^ (q)) | ~((p) ^ (q))'),
    ('~p', '~p | ~~p'),
    ('p ∧ q', '(p ∧ q) | ~(p ∧ q)'),
  ])
  def test_excluded_middle(self, user_input, expected):
    result = apply_rule(rule('lem'), start_proof('p | ~p'), [], user_input)
    assert result.formula == expected
    assert result.dependencies == ()

  def test_excluded_middle_needs_formula(self):
    assert apply_rule(rule('lem'), start_proof('p | ~p'), [], '  ') is None

  def test_rule_by_id(self):
    state = start_proof('q', ['p', 'p -> q'])
    assert apply_rule('mp', state, [1, 2]).formula == 'q'
    assert apply_rule(ProofKind.MODUS_PONENS, state, [1, 2]).formula == 'q'
    assert apply_rule('no_such_rule', state, [1, 2]) is None


class TestValidation:

  def test_empty_proof(self):
    assert not validate_proof(ProofState(goal='p -> p'))

  def test_open_assumption(self):
    state = ProofState(
      goal = 'p',
      steps = [step(1, 'p', depth=1, kind=ProofKind.ASSUME)],
      current_depth = 1,
    )
    assert not validate_proof(state)

  def test_identity_proof(self):
    state = start_proof('p -> p')
    state = derive(state, 'assume', [], 'p')
    assert state.current_depth == 1
    assert not state.is_complete

    state = derive(state, 'impl_intro')
    last = state.steps[-1]
    assert normalize(last.formula) == 'p->p'
    assert last.depth == 0
    assert last.line_number == '2'
    assert validate_proof(state)
    assert state.is_complete

    assert not validate_proof(state.replace(goal='q'))

  def test_modus_ponens_proof(self):
    state = derive(start_proof('q', ['p', 'p -> q']), 'mp', [1, 2])
    assert state.is_complete

  def test_conjunction_goal_matches_parenthesized_step(self):
    state = derive(start_proof('q ^ p', ['p', 'q']), 'and_intro', [2, 1])
    assert state.steps[-1].formula == '(q) ^ (p)'
    assert state.is_complete

  def test_syllogism(self):
    state = start_proof('p -> r', ['p -> q', 'q -> r'])
    state = derive(state, 'assume', [], 'p')
    state = derive(state, 'mp', [3, 1])
    state = derive(state, 'mp', [4, 2])
    state = derive(state, 'impl_intro')
    assert [s.line_number for s in state.steps] == ['1', '2', '2.1', '2.2', '2.3', '3']
    assert state.steps[-1].formula == '(p) -> (r)'
    assert state.steps[-1].dependencies == (3, 5)
    assert state.is_complete
