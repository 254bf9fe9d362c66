"""
Base class for AST nodes

Defines the abstract base class that all propositional formula
nodes inherit from.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Set


class Formula(ABC):
    """Base class for propositional formulas"""

    @abstractmethod
    def __str__(self) -> str:
        pass

    @abstractmethod
    def atoms(self) -> Set[str]:
        """Return set of atom names occurring in the formula"""
        pass

    @abstractmethod
    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        """Evaluate the formula under a total assignment of its atoms"""
        pass

    @abstractmethod
    def connectives(self) -> int:
        """Return the number of connective occurrences in the formula"""
        pass
