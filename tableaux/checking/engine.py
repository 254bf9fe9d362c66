"""
Tableaux Decomposition Engine

Decomposes a sequent Γ ⊢ Δ into saturated branches. Each branch carries
the atoms forced true (clause_left) and forced false (clause_right) so far:

- a branch closes as soon as an atom would be forced both true and false,
  or a constant makes the obligation trivial (true on the right, false on
  the left); it contributes nothing
- a branch saturates when both sides of its sequent are empty and then
  contributes one Clause

Non-branching (α) rules and closures are applied in a loop. Branching (β)
rules push both subgoals on an explicit depth-first work-list, first
subgoal on top, so recursion depth never grows with the formula. The
strategy decides after every saturated branch whether the remaining
subgoals still need exploring.
"""

from typing import FrozenSet, Iterable, List, NamedTuple, Optional, Set, Tuple, Union
from tableaux.core.ast import Formula, True_, False_, Atom, Not, And, Or, Implies
from tableaux.core.clause import Clause
from tableaux.core.sequent import Sequent
from tableaux.checking.strategy import Strategy


class MalformedFormulaError(Exception):
    """Raised when a sequent head matches no decomposition rule"""
    pass


class _Branch(NamedTuple):
    left: Tuple[Formula, ...]
    right: Tuple[Formula, ...]
    clause_left: FrozenSet[str]
    clause_right: FrozenSet[str]


# Outcome of expanding one branch until it closes, saturates or splits
_Expansion = Union[None, Clause, Tuple[_Branch, _Branch]]


def tableaux(strategy: Strategy, sequent: Sequent,
             clause_left: FrozenSet[str] = frozenset(),
             clause_right: FrozenSet[str] = frozenset()) -> Set[Clause]:
    """
    Decompose a sequent into the clauses of its saturated branches.

    Args:
        strategy: Policy for combining the subgoals of branching rules
        sequent: The sequent to decompose
        clause_left: Atoms already forced true on this branch
        clause_right: Atoms already forced false on this branch

    Returns:
        Set of clauses, one per saturated branch explored. The empty set
        means every explored branch closed.

    Raises:
        MalformedFormulaError: if a sequent head is not a known formula node
    """
    return explore(strategy, [sequent], clause_left, clause_right)


def explore(strategy: Strategy, goals: Iterable[Sequent],
            clause_left: FrozenSet[str] = frozenset(),
            clause_right: FrozenSet[str] = frozenset()) -> Set[Clause]:
    """Explore sibling goals left to right under a shared branch state"""
    clauses: Set[Clause] = set()
    worklist: List[_Branch] = [
        _Branch(tuple(goal.left), tuple(goal.right), frozenset(clause_left), frozenset(clause_right))
        for goal in reversed(list(goals))
    ]

    while worklist:
        expansion = _expand(worklist.pop())

        if expansion is None:
            continue

        if isinstance(expansion, Clause):
            clauses.add(expansion)
            if strategy.is_settled(clauses):
                break
            continue

        first, second = expansion
        worklist.append(second)
        worklist.append(first)

    return clauses


def _expand(branch: _Branch) -> _Expansion:
    """
    Apply closure and α-rules to one branch until it closes (None),
    saturates (Clause) or reaches a β-rule (pair of subgoal branches).

    Rules are tried in a fixed priority order; see the module docstring.
    """
    left, right, clause_left, clause_right = branch

    while True:
        if not left and not right:
            return Clause(clause_left, clause_right)

        head_left: Optional[Formula] = left[0] if left else None
        head_right: Optional[Formula] = right[0] if right else None

        # Atoms
        if isinstance(head_left, Atom):
            if head_left.name in clause_right:
                return None
            left, clause_left = left[1:], clause_left | {head_left.name}
            continue

        if isinstance(head_right, Atom):
            if head_right.name in clause_left:
                return None
            right, clause_right = right[1:], clause_right | {head_right.name}
            continue

        # Constants
        if isinstance(head_left, True_):
            left = left[1:]
            continue

        if isinstance(head_right, False_):
            right = right[1:]
            continue

        if isinstance(head_right, True_) or isinstance(head_left, False_):
            return None

        # Negation swaps sides
        if isinstance(head_left, Not):
            left, right = left[1:], (head_left.formula,) + right
            continue

        if isinstance(head_right, Not):
            left, right = (head_right.formula,) + left, right[1:]
            continue

        # α-rules
        if isinstance(head_left, And):
            left = (head_left.left, head_left.right) + left[1:]
            continue

        if isinstance(head_right, Or):
            right = (head_right.left, head_right.right) + right[1:]
            continue

        if isinstance(head_right, Implies):
            left, right = (head_right.left,) + left, (head_right.right,) + right[1:]
            continue

        # β-rules
        if isinstance(head_left, Or):
            rest = left[1:]
            return (
                _Branch((head_left.left,) + rest, right, clause_left, clause_right),
                _Branch((head_left.right,) + rest, right, clause_left, clause_right),
            )

        if isinstance(head_right, And):
            rest = right[1:]
            return (
                _Branch(left, (head_right.left,) + rest, clause_left, clause_right),
                _Branch(left, (head_right.right,) + rest, clause_left, clause_right),
            )

        if isinstance(head_left, Implies):
            rest = left[1:]
            return (
                _Branch(rest, (head_left.left,) + right, clause_left, clause_right),
                _Branch((head_left.right,) + rest, right, clause_left, clause_right),
            )

        offending = head_left if left else head_right
        raise MalformedFormulaError(
            f"No tableau rule applies to {offending!r} ({type(offending).__name__})"
        )
