"""
Tests for CNF and DIMACS encoding of clause sets
"""

import pytest
from tableaux.core.ast import *
from tableaux.core.clause import Clause
from tableaux.core.parser import parse
from tableaux.checking.prover import clausify
from tableaux.encoding.sat import parse_dimacs
from tableaux.encoding.cnf import (
    index_variables, encode_clause, as_cnf_list, as_cnf_dimacs, decode_cnf_list
)


class TestIndexVariables:
    """Test atom numbering"""

    def test_lexicographic_ids_from_one(self):
        clauses = {Clause.build(["b"], ["a"]), Clause.build([], ["c"])}
        assert index_variables(clauses) == {"a": 1, "b": 2, "c": 3}

    def test_empty(self):
        assert index_variables(set()) == {}
        assert index_variables({Clause()}) == {}

    def test_atoms_counted_once(self):
        clauses = {Clause.build(["x"], []), Clause.build([], ["x"])}
        assert index_variables(clauses) == {"x": 1}


class TestCnfList:
    """Test integer-literal encoding"""

    def test_signs(self):
        """Atoms forced true become negative literals, forced false positive"""
        assert encode_clause({"a": 1, "b": 2}, Clause.build(["a"], ["b"])) == [-1, 2]

    def test_literal_order(self):
        index = {"a": 1, "b": 2, "c": 3}
        assert encode_clause(index, Clause.build(["c", "a"], ["b"])) == [-1, 2, -3]

    def test_canonical_clause_order(self):
        clauses = {Clause.build(["b"], ["a"]), Clause.build([], ["c"])}
        index = index_variables(clauses)
        assert as_cnf_list(index, clauses) == [[3], [1, -2]]

    def test_empty_clause(self):
        assert as_cnf_list({}, {Clause()}) == [[]]

    def test_formula(self):
        clauses = clausify(parse("a <-> b"))
        index = index_variables(clauses)
        assert as_cnf_list(index, clauses) == [[-1, 2], [1, -2]]


class TestDimacs:
    """Test DIMACS text output"""

    def test_single_clause(self):
        clauses = {Clause.build(["a"], ["b"])}
        assert as_cnf_dimacs({"a": 1, "b": 2}, clauses, "t") == "c t\np cnf 2 1\n-1 2 0"

    def test_header_counts(self):
        clauses = clausify(parse("(a | b) & (c | !a) & (b -> c)"))
        index = index_variables(clauses)
        lines = as_cnf_dimacs(index, clauses, "header").split("\n")
        assert lines[0] == "c header"
        assert lines[1] == f"p cnf {len(index)} {len(clauses)}"
        assert len(lines) == 2 + len(clauses)
        assert all(line.endswith(" 0") or line == "0" for line in lines[2:])

    def test_no_clauses(self):
        assert as_cnf_dimacs({}, set(), "valid") == "c valid\np cnf 0 0"

    def test_empty_clause_line(self):
        assert as_cnf_dimacs({}, clausify(False_()), "f") == "c f\np cnf 0 1\n0"

    def test_default_comment(self):
        assert as_cnf_dimacs({"a": 1}, {Clause.build([], ["a"])}).startswith("c \np cnf 1 1")

    def test_multiline_comment_stays_on_one_line(self):
        clauses = {Clause.build(["a"], ["b"])}
        text = as_cnf_dimacs({"a": 1, "b": 2}, clauses, "a &\n  b\r\n-> c\t")
        assert text == "c a & b -> c\np cnf 2 1\n-1 2 0"

    def test_multiline_comment_parses_back(self):
        clauses = clausify(parse("a & b"))
        index = index_variables(clauses)
        problem = parse_dimacs(as_cnf_dimacs(index, clauses, "first line\nsecond line"))
        assert problem.comments == ["first line second line"]
        assert problem.clauses == [[1], [2]]


class TestRoundTrip:
    """Decoding the CNF list through the inverse index gives back the clauses"""

    @pytest.mark.parametrize("text", [
        "a <-> b",
        "(a | (b & c)) <-> ((a | b) | (a | c))",
        "(p -> q) & (q -> r) & !(p -> r)",
        "x1 & (x2 | !x3) & (x3 -> x4)",
        "false",
        "a | !a",
    ])
    def test_decode_inverts_encode(self, text):
        clauses = clausify(parse(text))
        index = index_variables(clauses)
        assert decode_cnf_list(index, as_cnf_list(index, clauses)) == clauses

    def test_decode_rejects_zero(self):
        with pytest.raises(ValueError):
            decode_cnf_list({"a": 1}, [[1, 0]])

    def test_decode_rejects_unknown_variable(self):
        with pytest.raises(ValueError):
            decode_cnf_list({"a": 1}, [[-2]])
