"""
CNF Encoding of Clause Sets

Translates the clauses of a saturated tableau into the integer-literal
CNF representation used by SAT solvers, and into DIMACS text.

A clause (L, R) from clausify(φ) describes a branch on which every atom
of L is true and every atom of R is false, i.e. an assignment falsifying
φ. Its CNF disjunct is the negation of that branch: ¬l₁ ∨ … ∨ r₁ ∨ …,
so atoms of L become negative literals and atoms of R positive ones.
"""

from typing import Dict, Iterable, List, Set
from tableaux.core.clause import Clause, sorted_clauses

VariableIndex = Dict[str, int]


def index_variables(clauses: Iterable[Clause]) -> VariableIndex:
    """
    Assign consecutive integer ids, starting at 1, to the atoms of a
    clause set in lexicographic order.

    The same index must be reused for every encoding of the same clauses.
    """
    atoms: Set[str] = set()
    for clause in clauses:
        atoms |= clause.atoms()
    return {atom: i for i, atom in enumerate(sorted(atoms), start=1)}


def encode_clause(index: VariableIndex, clause: Clause) -> List[int]:
    """Encode one clause as a list of signed literals"""
    literals = [-index[atom] for atom in clause.left]
    literals.extend(index[atom] for atom in clause.right)
    return sorted(literals, key=abs)


def as_cnf_list(index: VariableIndex, clauses: Iterable[Clause]) -> List[List[int]]:
    """
    Encode a clause set as a list of integer-literal clauses.

    Example:
        >>> as_cnf_list({"a": 1, "b": 2}, {Clause.build(["a"], ["b"])})
        [[-1, 2]]
    """
    return [encode_clause(index, clause) for clause in sorted_clauses(clauses)]


def as_cnf_dimacs(index: VariableIndex, clauses: Iterable[Clause], comment: str = "") -> str:
    """
    Encode a clause set as DIMACS CNF text.

    Format:
        c <comment>
        p cnf <var-count> <clause-count>
        <literal> <literal> ... 0

    Whitespace in the comment, line breaks included, is collapsed so the
    comment stays on its single "c" line.
    """
    cnf = as_cnf_list(index, clauses)
    lines = [f"c {' '.join(comment.split())}", f"p cnf {len(index)} {len(cnf)}"]
    for literals in cnf:
        lines.append(" ".join(str(lit) for lit in literals + [0]))
    return "\n".join(lines)


def decode_cnf_list(index: VariableIndex, cnf: Iterable[Iterable[int]]) -> Set[Clause]:
    """
    Decode integer-literal clauses back into Clauses using the inverse of
    the variable index.

    Raises:
        ValueError: if a literal is zero or refers to an unknown variable
    """
    names = {var: atom for atom, var in index.items()}
    clauses: Set[Clause] = set()
    for literals in cnf:
        left, right = set(), set()
        for lit in literals:
            if lit == 0 or abs(lit) not in names:
                raise ValueError(f"Literal {lit} does not refer to an indexed variable")
            if lit < 0:
                left.add(names[-lit])
            else:
                right.add(names[lit])
        clauses.add(Clause.build(left, right))
    return clauses
