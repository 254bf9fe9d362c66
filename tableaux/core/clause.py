"""
Clauses and models extracted from saturated tableau branches

A clause records the atoms forced true (left) and forced false (right)
on one saturated branch. Depending on the query it is read either as a
model witness or as one disjunct-set of a CNF.
"""

from typing import FrozenSet, Iterable, List, NamedTuple, Tuple

Model = List[Tuple[str, bool]]


class Clause(NamedTuple):
    """Atoms forced true and atoms forced false on one saturated branch"""
    left: FrozenSet[str] = frozenset()
    right: FrozenSet[str] = frozenset()

    @classmethod
    def build(cls, left: Iterable[str] = (), right: Iterable[str] = ()) -> "Clause":
        return cls(frozenset(left), frozenset(right))

    def atoms(self) -> FrozenSet[str]:
        return self.left | self.right

    def to_model(self) -> Model:
        """
        Reinterpret the clause as an assignment.

        Atoms on the left map to True, atoms on the right to False; the
        result is ordered by atom name. Atoms in neither set are left out.
        """
        model = [(atom, True) for atom in self.left]
        model.extend((atom, False) for atom in self.right)
        return sorted(model)

    def sort_key(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return tuple(sorted(self.left)), tuple(sorted(self.right))

    def __str__(self) -> str:
        left = ", ".join(sorted(self.left))
        right = ", ".join(sorted(self.right))
        return f"({left} ⊢ {right})"


def sorted_clauses(clauses: Iterable[Clause]) -> List[Clause]:
    """Return clauses in a canonical, deterministic order"""
    return sorted(clauses, key=Clause.sort_key)


def format_clauses(clauses: Iterable[Clause]) -> str:
    """
    Render a clause set for diagnostics.

    Example:
        >>> format_clauses({Clause.build(["a", "b"], ["c", "d"])})
        '(a, b ⊢ c, d)'
    """
    return ", ".join(str(clause) for clause in sorted_clauses(clauses))


def format_model(model: Model) -> str:
    """Render a model as a comma separated list of atom=value pairs"""
    return ", ".join(f"{atom}={'true' if value else 'false'}" for atom, value in model)
