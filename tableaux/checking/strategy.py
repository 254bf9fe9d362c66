"""
Branch Exploration Strategies

A strategy decides how the two subgoals produced by a branching (β) rule
are combined. The same strategy object governs every branching point of a
proof tree, so the policy propagates through nested branches.

- UnionStrategy explores every branch and returns all saturated clauses
  (full clausification).
- ShortcutStrategy stops as soon as one subgoal yields a clause
  (decision queries: one countermodel or one satisfying branch is enough).
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Dict, FrozenSet, Set
from tableaux.core.clause import Clause
from tableaux.core.sequent import Sequent


class Strategy(ABC):
    """Policy for combining the clause sets of sibling subgoals"""

    name: str = ""

    def __call__(self, first: Sequent, second: Sequent,
                 clause_left: FrozenSet[str] = frozenset(),
                 clause_right: FrozenSet[str] = frozenset()) -> Set[Clause]:
        """
        Combine two sibling subgoals sharing the branch state
        (clause_left, clause_right).

        The first subgoal is always explored before the second.
        """
        from tableaux.checking.engine import explore
        return explore(self, [first, second], clause_left, clause_right)

    @abstractmethod
    def is_settled(self, clauses: AbstractSet[Clause]) -> bool:
        """Return True once the clauses found so far make further branches unnecessary"""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class UnionStrategy(Strategy):
    """Explore both subgoals and return the union of their clauses"""

    name = "union"

    def is_settled(self, clauses: AbstractSet[Clause]) -> bool:
        return False


class ShortcutStrategy(Strategy):
    """
    Explore the first subgoal; only explore the second one if the first
    produced no clause.

    A non-empty result already witnesses what a decision query needs
    (a countermodel or a satisfying branch), so the search ends at the
    first saturated branch in left-first depth-first order.
    """

    name = "shortcut"

    def is_settled(self, clauses: AbstractSet[Clause]) -> bool:
        return bool(clauses)


UNION = UnionStrategy()
SHORTCUT = ShortcutStrategy()

STRATEGIES: Dict[str, Strategy] = {
    UNION.name: UNION,
    SHORTCUT.name: SHORTCUT,
}


def get_strategy(name: str) -> Strategy:
    """Look up a strategy by name ("union" or "shortcut")"""
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {name!r}; expected one of: {', '.join(sorted(STRATEGIES))}"
        ) from None
