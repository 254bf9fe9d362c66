"""
Tests for prove / sat / clausify

Checks the decision procedure against truth tables: soundness of every
returned clause, completeness of validity checking, prove/sat duality and
agreement of the two strategies.
"""

import itertools
import random
import pytest
from tableaux.core.ast import *
from tableaux.core.sequent import Sequent
from tableaux.core.clause import Clause
from tableaux.core.parser import parse, parse_sequent
from tableaux.checking.engine import tableaux
from tableaux.checking.strategy import UNION, SHORTCUT
from tableaux.checking.prover import (
    Prover, ProofResult, SatResult, clausify, prove, prove_sequent, sat
)


a, b, c = Atom("a"), Atom("b"), Atom("c")

ATOMS = ["a", "b", "c"]


def random_formula(rng: random.Random, depth: int) -> Formula:
    """Build a random formula over a, b, c and the constants"""
    if depth == 0 or rng.random() < 0.2:
        choice = rng.random()
        if choice < 0.1:
            return True_()
        if choice < 0.2:
            return False_()
        return Atom(rng.choice(ATOMS))

    kind = rng.choice(["not", "and", "or", "implies", "iff"])
    if kind == "not":
        return Not(random_formula(rng, depth - 1))
    left = random_formula(rng, depth - 1)
    right = random_formula(rng, depth - 1)
    return {"and": And, "or": Or, "implies": Implies, "iff": iff}[kind](left, right)


def random_formulas(count=150, depth=4, seed=1234):
    rng = random.Random(seed)
    return [random_formula(rng, depth) for _ in range(count)]


def assignments(atoms):
    atoms = sorted(atoms)
    for values in itertools.product([False, True], repeat=len(atoms)):
        yield dict(zip(atoms, values))


def extensions(model, atoms):
    """Every total assignment over atoms that agrees with a partial model"""
    fixed = dict(model)
    free = sorted(set(atoms) - set(fixed))
    for values in itertools.product([False, True], repeat=len(free)):
        assignment = dict(fixed)
        assignment.update(zip(free, values))
        yield assignment


def is_tautology(formula):
    return all(formula.evaluate(v) for v in assignments(ATOMS))


def is_satisfiable(formula):
    return any(formula.evaluate(v) for v in assignments(ATOMS))


DISTRIBUTIVITY = iff(Or(a, And(b, c)), And(Or(a, b), Or(a, c)))
BROKEN_DISTRIBUTIVITY = iff(Or(a, And(b, c)), Or(Or(a, b), Or(a, c)))


class TestScenarios:
    """Concrete validity and satisfiability questions"""

    def test_distributivity_is_valid(self):
        result = prove(DISTRIBUTIVITY)
        assert result.valid
        assert result.countermodel is None

    def test_broken_distributivity_has_countermodel(self):
        result = prove(BROKEN_DISTRIBUTIVITY)
        assert not result.valid
        for assignment in extensions(result.countermodel, ATOMS):
            assert not BROKEN_DISTRIBUTIVITY.evaluate(assignment)

    def test_contradiction_unsatisfiable(self):
        result = sat(And(a, Not(a)))
        assert not result.satisfiable
        assert result.model is None

    def test_disjunction_satisfiable(self):
        result = sat(Or(a, b))
        assert result.satisfiable
        model = dict(result.model)
        assert model.get("a") is True or model.get("b") is True

    def test_peirce_law(self):
        assert prove(parse("((a -> b) -> a) -> a")).valid

    def test_constants(self):
        assert prove(True_()).valid
        assert not prove(False_()).valid
        assert prove(False_()).countermodel == []
        assert sat(True_()).model == []
        assert not sat(False_()).satisfiable

    def test_results_are_truthy(self):
        assert bool(prove(Or(a, Not(a))))
        assert not bool(prove(a))
        assert bool(sat(a))
        assert not bool(sat(And(a, Not(a))))

    def test_result_str(self):
        assert str(ProofResult(True)) == "Valid"
        assert str(ProofResult(False, [("a", False)])) == "Invalid\nCountermodel: a=false"
        assert str(SatResult(False)) == "Unsatisfiable"
        assert str(SatResult(True, [])) == "Satisfiable\nModel: (any assignment)"


class TestSequents:
    """Entailment checks on arbitrary sequents"""

    def test_modus_ponens(self):
        assert prove_sequent(parse_sequent("a, a -> b |- b")).valid

    def test_invalid_sequent_countermodel(self):
        result = prove_sequent(parse_sequent("a | b |- a"))
        assert not result.valid
        assert result.countermodel == [("a", False), ("b", True)]

    def test_multiple_goals(self):
        assert prove_sequent(parse_sequent("a | b |- a, b")).valid

    def test_inconsistent_hypotheses_entail_anything(self):
        assert prove_sequent(parse_sequent("a, !a |- c")).valid


class TestClausify:
    """Full clause sets from the union strategy"""

    def test_single_formula(self):
        assert clausify(parse("a & b")) == {Clause.build([], ["a"]), Clause.build([], ["b"])}

    def test_tautology_has_no_clauses(self):
        assert clausify(parse("a | !a")) == set()

    def test_two_formula_variant(self):
        assert clausify(a, b) == {Clause.build(["a"], ["b"])}
        assert clausify([a, Implies(a, b)], [c]) == {Clause.build(["a", "b"], ["c"])}

    def test_sequence_of_goals(self):
        assert clausify([a, b]) == {Clause.build([], ["a", "b"])}

    def test_iff_clauses(self):
        assert clausify(parse("a <-> b")) == {
            Clause.build(["a"], ["b"]),
            Clause.build(["b"], ["a"]),
        }

    def test_clauses_are_cnf_of_formula(self):
        """The conjunction of the clause disjuncts is equivalent to the formula"""
        for formula in random_formulas(count=60, seed=7):
            clauses = clausify(formula)
            for assignment in assignments(ATOMS):
                cnf_value = all(
                    any(not assignment[x] for x in cl.left) or any(assignment[x] for x in cl.right)
                    for cl in clauses
                )
                assert cnf_value == formula.evaluate(assignment), str(formula)


class TestTruthTableAgreement:
    """Cross-check the tableau against exhaustive truth tables"""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_completeness_of_prove(self, seed):
        for formula in random_formulas(seed=seed):
            assert prove(formula).valid == is_tautology(formula), str(formula)

    @pytest.mark.parametrize("seed", [4, 5])
    def test_completeness_of_sat(self, seed):
        for formula in random_formulas(seed=seed):
            assert sat(formula).satisfiable == is_satisfiable(formula), str(formula)

    def test_countermodels_falsify(self):
        for formula in random_formulas(seed=11):
            result = prove(formula)
            if not result.valid:
                for assignment in extensions(result.countermodel, ATOMS):
                    assert not formula.evaluate(assignment), str(formula)

    def test_models_satisfy(self):
        for formula in random_formulas(seed=12):
            result = sat(formula)
            if result.satisfiable:
                for assignment in extensions(result.model, ATOMS):
                    assert formula.evaluate(assignment), str(formula)

    def test_soundness_of_every_clause(self):
        """Each saturated branch satisfies the left and refutes the right"""
        for left, right in zip(random_formulas(seed=21, depth=3), random_formulas(seed=22, depth=3)):
            for clause in tableaux(UNION, Sequent((left,), (right,))):
                for assignment in extensions(clause.to_model(), ATOMS):
                    assert left.evaluate(assignment)
                    assert not right.evaluate(assignment)

    def test_duality(self):
        for formula in random_formulas(seed=31):
            assert prove(formula).valid == (not sat(Not(formula)).satisfiable), str(formula)

    def test_strategies_agree_on_decision(self):
        for formula in random_formulas(seed=41):
            for sequent in (Sequent.of(formula), Sequent.hypothesis(formula)):
                union = tableaux(UNION, sequent)
                shortcut = tableaux(SHORTCUT, sequent)
                assert bool(union) == bool(shortcut), str(formula)
                assert shortcut <= union


class TestProver:
    """Test the Prover facade"""

    def test_default_strategy(self):
        assert Prover().strategy is SHORTCUT

    def test_strategy_by_name(self):
        assert Prover(strategy="union").strategy is UNION

    def test_unknown_strategy_name(self):
        with pytest.raises(ValueError):
            Prover(strategy="random")

    def test_union_prover_decides_the_same(self):
        prover = Prover(strategy="union")
        assert prover.prove(DISTRIBUTIVITY).valid
        assert not prover.prove(BROKEN_DISTRIBUTIVITY).valid
        assert not prover.sat(And(a, Not(a))).satisfiable

    def test_check_formula_text(self):
        assert Prover().check("a -> (b -> a)").valid
        assert not Prover().check("a -> b").valid

    def test_check_sequent_text(self):
        assert Prover().check("a -> b, b -> c |- a -> c").valid
        result = Prover().check("a -> b |- b")
        assert result.countermodel == [("a", False), ("b", False)]

    def test_clausify(self):
        assert Prover().clausify(parse("a -> b")) == {Clause.build(["a"], ["b"])}

    def test_verbose_output(self, capsys):
        Prover(verbose=True).prove(parse("a | b"))
        captured = capsys.readouterr()
        assert "Decomposing: ⊢ (a | b)" in captured.out
        assert "Strategy: shortcut" in captured.out
        assert "Saturated branches: 1" in captured.out

    def test_quiet_by_default(self, capsys):
        Prover().prove(parse("a | b"))
        assert capsys.readouterr().out == ""
