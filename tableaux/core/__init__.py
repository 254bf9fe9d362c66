"""
Core abstractions for propositional tableaux.

This module contains the fundamental building blocks:
- Abstract Syntax Tree (AST) definitions
- Sequents and clauses
- Parser for converting strings to AST
"""

from tableaux.core.ast import *
from tableaux.core.sequent import Sequent
from tableaux.core.clause import Clause, Model, format_clauses, format_model
from tableaux.core.parser import parse, parse_sequent, ParseError
