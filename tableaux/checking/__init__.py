"""
Tableaux proof search.

This module contains the decomposition engine, the branch exploration
strategies and the prove / sat / clausify operations built on them.
"""

from tableaux.checking.engine import tableaux, MalformedFormulaError
from tableaux.checking.strategy import (
    Strategy, UnionStrategy, ShortcutStrategy, UNION, SHORTCUT, get_strategy
)
from tableaux.checking.prover import (
    Prover, ProofResult, SatResult, clausify, prove, prove_sequent, sat
)
