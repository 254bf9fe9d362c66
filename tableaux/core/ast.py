"""
Abstract Syntax Tree for Propositional Formulas

This module defines the AST classes for representing propositional
formulas: boolean constants, atoms, negation, conjunction, disjunction
and implication. The biconditional is available through iff(), which
desugars it into a conjunction of two implications.

This file re-exports all AST nodes from thematic submodules.
"""

# Re-export base class
from tableaux.core._ast_base import Formula

# Re-export propositional formulas
from tableaux.core._ast_propositional import (
    True_, False_, Atom,
    Not, And, Or, Implies,
    iff
)

# Define __all__ for explicit exports
__all__ = [
    # Base class
    'Formula',
    # Constants and atoms
    'True_', 'False_', 'Atom',
    # Connectives
    'Not', 'And', 'Or', 'Implies', 'iff',
]
