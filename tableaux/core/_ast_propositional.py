"""
Propositional formula AST nodes

Defines the propositional formula variants:
- Boolean constants (true, false)
- Atomic propositions
- Negation
- Conjunction, disjunction and implication

Nodes are frozen dataclasses, so structural equality defines identity
and formulas can be used as set members and dictionary keys.
"""

from dataclasses import dataclass
from typing import Iterator, List, Mapping, Set, Union
from tableaux.core._ast_base import Formula


@dataclass(frozen=True)
class True_(Formula):
    """Boolean true"""

    def __str__(self) -> str:
        return "true"

    def atoms(self) -> Set[str]:
        return set()

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return True

    def connectives(self) -> int:
        return 0


@dataclass(frozen=True)
class False_(Formula):
    """Boolean false"""

    def __str__(self) -> str:
        return "false"

    def atoms(self) -> Set[str]:
        return set()

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return False

    def connectives(self) -> int:
        return 0


@dataclass(frozen=True)
class Atom(Formula):
    """Atomic proposition: p"""

    name: str

    def __str__(self) -> str:
        return self.name

    def atoms(self) -> Set[str]:
        return {self.name}

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return assignment[self.name]

    def connectives(self) -> int:
        return 0


class _Connective(Formula):
    """
    Shared traversals for compound formulas.

    Rendering, atom collection and connective counting walk the formula
    with an explicit stack, so they work on formulas nested deeper than
    the interpreter's recursion limit.
    """

    def __str__(self) -> str:
        return _render(self)

    def atoms(self) -> Set[str]:
        return {node.name for node in _subformulas(self) if isinstance(node, Atom)}

    def connectives(self) -> int:
        return sum(1 for node in _subformulas(self) if isinstance(node, _Connective))


@dataclass(frozen=True)
class Not(_Connective):
    """Logical negation: ¬P (or !P)"""

    formula: Formula

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return not self.formula.evaluate(assignment)


@dataclass(frozen=True)
class And(_Connective):
    """Logical conjunction: P ∧ Q (or P & Q)"""

    left: Formula
    right: Formula

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return self.left.evaluate(assignment) and self.right.evaluate(assignment)


@dataclass(frozen=True)
class Or(_Connective):
    """Logical disjunction: P ∨ Q (or P | Q)"""

    left: Formula
    right: Formula

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return self.left.evaluate(assignment) or self.right.evaluate(assignment)


@dataclass(frozen=True)
class Implies(_Connective):
    """Implication: P → Q (or P -> Q)"""

    left: Formula
    right: Formula

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        return (not self.left.evaluate(assignment)) or self.right.evaluate(assignment)


_OPERATORS = {And: "&", Or: "|", Implies: "->"}


def _subformulas(formula: Formula) -> Iterator[Formula]:
    """Yield every node of a formula, parents before children, left first"""
    stack = [formula]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Not):
            stack.append(node.formula)
        elif isinstance(node, (And, Or, Implies)):
            stack.append(node.right)
            stack.append(node.left)


def _render(formula: Formula) -> str:
    parts: List[str] = []
    # Pending items are formulas still to render or literal text
    stack: List[Union[Formula, str]] = [formula]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Not):
            parts.append("!")
            stack.append(item.formula)
        elif isinstance(item, (And, Or, Implies)):
            parts.append("(")
            stack.extend([")", item.right, f" {_OPERATORS[type(item)]} ", item.left])
        else:
            parts.append(str(item))
    return "".join(parts)


def iff(left: Formula, right: Formula) -> Formula:
    """
    Build the biconditional P ↔ Q.

    There is no biconditional node: it is desugared into
    (P → Q) ∧ (Q → P) at construction time.
    """
    return And(Implies(left, right), Implies(right, left))
