"""
Proof, Satisfiability and Clausification

This module provides the main interface for deciding propositional
formulas with the tableaux engine:

- clausify: every saturated branch of ⊢ φ (union strategy)
- prove: validity of φ, with a countermodel when it is not valid
- sat: satisfiability of φ, with a satisfying model when there is one
"""

import time
from typing import Iterable, Optional, Set, Union
from tableaux.core.ast import Formula
from tableaux.core.clause import Clause, Model, format_clauses, format_model, sorted_clauses
from tableaux.core.sequent import Sequent
from tableaux.checking.engine import tableaux
from tableaux.checking.strategy import Strategy, UNION, SHORTCUT, get_strategy

Side = Union[Formula, Iterable[Formula], None]


class ProofResult:
    """Result of a validity check"""

    def __init__(self, valid: bool, countermodel: Optional[Model] = None,
                 sequent: Optional[Sequent] = None):
        self.valid = valid
        self.countermodel = countermodel
        self.sequent = sequent

    def __str__(self) -> str:
        if self.valid:
            return "Valid"
        msg = "Invalid"
        if self.countermodel is not None:
            msg += f"\nCountermodel: {format_model(self.countermodel) or '(any assignment)'}"
        return msg

    def __bool__(self) -> bool:
        return self.valid


class SatResult:
    """Result of a satisfiability check"""

    def __init__(self, satisfiable: bool, model: Optional[Model] = None):
        self.satisfiable = satisfiable
        self.model = model

    def __str__(self) -> str:
        if not self.satisfiable:
            return "Unsatisfiable"
        return f"Satisfiable\nModel: {format_model(self.model) or '(any assignment)'}"

    def __bool__(self) -> bool:
        return self.satisfiable


def _first_model(clauses: Set[Clause]) -> Model:
    return sorted_clauses(clauses)[0].to_model()


def _clausify_sequent(left: Side, right: Side) -> Sequent:
    # A lone argument is the goal side: clausify(φ) decomposes ⊢ φ
    if right is None:
        return Sequent.build(right=left)
    return Sequent.build(left, right)


def clausify(left: Side, right: Side = None) -> Set[Clause]:
    """
    Compute the full clause set of a formula or a sequent.

    With a single argument the formula is put on the right, so each clause
    describes one way of falsifying it; read as CNF disjuncts the clause
    set is equivalent to the formula. With two arguments the sequent
    left ⊢ right is clausified.

    Example:
        >>> from tableaux.core.parser import parse
        >>> format_clauses(clausify(parse("a | b")))
        '( ⊢ a, b)'
    """
    return tableaux(UNION, _clausify_sequent(left, right))


def prove_sequent(sequent: Sequent, strategy: Strategy = SHORTCUT) -> ProofResult:
    """Check whether the hypotheses of a sequent entail the disjunction of its goals"""
    clauses = tableaux(strategy, sequent)
    if not clauses:
        return ProofResult(True, sequent=sequent)
    return ProofResult(False, countermodel=_first_model(clauses), sequent=sequent)


def prove(formula: Formula) -> ProofResult:
    """Check whether a formula is a tautology"""
    return prove_sequent(Sequent.of(formula))


def sat(formula: Formula) -> SatResult:
    """Check whether a formula is satisfiable"""
    clauses = tableaux(SHORTCUT, Sequent.hypothesis(formula))
    if not clauses:
        return SatResult(False)
    return SatResult(True, model=_first_model(clauses))


class Prover:
    """
    Main tableaux prover for propositional logic.

    Bundles the decision operations with a branch exploration strategy
    and optional progress output.
    """

    def __init__(self, strategy: Union[Strategy, str, None] = None, verbose: bool = False):
        """
        Initialize the prover.

        Args:
            strategy: Strategy (or strategy name) for validity and
                      satisfiability queries. Defaults to the shortcut
                      strategy; clausification always uses union.
            verbose: Print debug information
        """
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)
        self.strategy = strategy or SHORTCUT
        self.verbose = verbose

    def _run(self, strategy: Strategy, sequent: Sequent) -> Set[Clause]:
        if self.verbose:
            connectives, size = sequent.measure()
            print(f"Decomposing: {sequent}")
            print(f"  Strategy: {strategy.name}, connectives: {connectives}, formulas: {size}")

        start_time = time.time()
        clauses = tableaux(strategy, sequent)
        elapsed_ms = (time.time() - start_time) * 1000

        if self.verbose:
            print(f"  Saturated branches: {len(clauses)} ({elapsed_ms:.2f}ms)")
            if clauses:
                print(f"  Clauses: {format_clauses(clauses)}")
        return clauses

    def prove(self, formula: Formula) -> ProofResult:
        """Check whether a formula is a tautology"""
        return self.prove_sequent(Sequent.of(formula))

    def prove_sequent(self, sequent: Sequent) -> ProofResult:
        """Check whether left ⊢ right holds"""
        clauses = self._run(self.strategy, sequent)
        if not clauses:
            return ProofResult(True, sequent=sequent)
        return ProofResult(False, countermodel=_first_model(clauses), sequent=sequent)

    def sat(self, formula: Formula) -> SatResult:
        """Check whether a formula is satisfiable"""
        clauses = self._run(self.strategy, Sequent.hypothesis(formula))
        if not clauses:
            return SatResult(False)
        return SatResult(True, model=_first_model(clauses))

    def clausify(self, left: Side, right: Side = None) -> Set[Clause]:
        """Compute the full clause set of a formula or sequent"""
        return self._run(UNION, _clausify_sequent(left, right))

    def check(self, text: str) -> ProofResult:
        """
        Check a formula or sequent given as text.

        Text containing a turnstile is read as a sequent, anything else
        as a formula whose validity is checked.

        Example:
            >>> Prover().check("a, a -> b |- b").valid
            True
        """
        from tableaux.core.parser import parse, parse_sequent, is_sequent
        if is_sequent(text):
            return self.prove_sequent(parse_sequent(text))
        return self.prove(parse(text))
