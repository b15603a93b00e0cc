"""natded: propositional formulas and natural deduction proofs for teaching."""

import logging

from natded.config import Config
from natded.log import setup_logger

from natded.lex import Token, TokenKind, Tokenizer, LexError, tokenize
from natded.prop import Prop, PropKind
from natded.parse import Parser, ParseError, ParseResult, parse, parse_formula
from natded.evaluate import evaluate, variables, truth_table, TruthTableRow
from natded.rules import ProofKind, Rule, RuleCategory, get_rules, find_rule
from natded.fitch import ProofStep, ProofState, start_proof, justification
from natded.prove import (
  Applicability,
  add_step,
  applicable_rules,
  apply_rule,
  check_applicability,
  normalize,
  or_elim_disjuncts,
  validate_proof,
)
from natded.knowledge import (
  KnowledgeBase,
  SuggestedGoal,
  find_knowledge_base,
  get_knowledge_bases,
  get_suggested_goals,
)

__version__ = "0.1.0"

# applications call setup_logger() to see output
logging.getLogger(Config.LOGGER_NAME).addHandler(logging.NullHandler())
