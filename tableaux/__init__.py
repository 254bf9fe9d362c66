"""
Propositional Tableaux Prover

A Python library for deciding classical propositional logic with
sequent-based semantic tableaux: validity, satisfiability, and full
clausification with CNF / DIMACS export for SAT solvers.

The library is organized into logical modules:
- core: AST, sequents, clauses and parser
- checking: Tableaux engine, exploration strategies, prove / sat / clausify
- encoding: CNF and DIMACS encoding, Z3 SAT solving
"""

# Core abstractions
from tableaux.core.ast import (
    Formula, True_, False_, Atom, Not, And, Or, Implies, iff
)
from tableaux.core.sequent import Sequent
from tableaux.core.clause import Clause, format_clauses, format_model
from tableaux.core.parser import parse, parse_sequent, ParseError

# Proof search
from tableaux.checking.engine import tableaux, MalformedFormulaError
from tableaux.checking.strategy import (
    Strategy, UnionStrategy, ShortcutStrategy, get_strategy
)
from tableaux.checking.prover import (
    Prover, ProofResult, SatResult, clausify, prove, prove_sequent, sat
)

# CNF export
from tableaux.encoding.cnf import (
    index_variables, as_cnf_list, as_cnf_dimacs, decode_cnf_list
)
from tableaux.encoding.sat import solve_cnf, solve_dimacs, parse_dimacs, DimacsError

__version__ = "0.1.0"
__all__ = [
    # Formulas
    "Formula", "True_", "False_", "Atom", "Not", "And", "Or", "Implies", "iff",
    # Sequents and clauses
    "Sequent", "Clause", "format_clauses", "format_model",
    # Parser
    "parse", "parse_sequent", "ParseError",
    # Engine and strategies
    "tableaux", "MalformedFormulaError",
    "Strategy", "UnionStrategy", "ShortcutStrategy", "get_strategy",
    # Operations
    "Prover", "ProofResult", "SatResult", "clausify", "prove", "prove_sequent", "sat",
    # CNF and SAT
    "index_variables", "as_cnf_list", "as_cnf_dimacs", "decode_cnf_list",
    "solve_cnf", "solve_dimacs", "parse_dimacs", "DimacsError",
]
