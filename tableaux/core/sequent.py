"""
Sequents for tableaux proof search

A sequent Γ ⊢ Δ pairs the hypotheses Γ (assumed true) with the goals Δ
(assumed false). Both sides are tuples, so every decomposition step builds
a new sequent instead of mutating the old one.
"""

from typing import Iterable, NamedTuple, Tuple, Union
from tableaux.core.ast import Formula


class Sequent(NamedTuple):
    """
    Proof obligation left ⊢ right.

    Duplicates are allowed and the order within a side carries no meaning;
    the engine always works on the head of a side.
    """
    left: Tuple[Formula, ...] = ()
    right: Tuple[Formula, ...] = ()

    @classmethod
    def of(cls, formula: Formula) -> "Sequent":
        """Sequent ⊢ formula, whose countermodels falsify the formula"""
        return cls((), (formula,))

    @classmethod
    def hypothesis(cls, formula: Formula) -> "Sequent":
        """Sequent formula ⊢, whose saturated branches satisfy the formula"""
        return cls((formula,), ())

    @classmethod
    def build(cls, left: Union[Formula, Iterable[Formula], None] = None,
              right: Union[Formula, Iterable[Formula], None] = None) -> "Sequent":
        """Build a sequent from single formulas or iterables of formulas"""
        return cls(_as_side(left), _as_side(right))

    def is_empty(self) -> bool:
        return not self.left and not self.right

    def measure(self) -> Tuple[int, int]:
        """
        Termination measure: connective occurrences on both sides, then
        the number of formulas. Every engine step strictly decreases it
        in lexicographic order.
        """
        connectives = sum(f.connectives() for f in self.left + self.right)
        return connectives, len(self.left) + len(self.right)

    def __str__(self) -> str:
        left = ", ".join(str(f) for f in self.left)
        right = ", ".join(str(f) for f in self.right)
        return f"{left} ⊢ {right}".strip()


def _as_side(side) -> Tuple[Formula, ...]:
    if side is None:
        return ()
    if isinstance(side, Formula):
        return (side,)
    return tuple(side)
