"""
CNF encoding and SAT solving.

This module handles the translation from tableau clause sets to integer
CNF and DIMACS text, and the hand-off of CNF to the Z3 SAT solver.
"""

from tableaux.encoding.cnf import (
    index_variables, as_cnf_list, as_cnf_dimacs, decode_cnf_list
)
from tableaux.encoding.sat import (
    SatSolution, DimacsError, DimacsProblem,
    solve_cnf, solve_dimacs, parse_dimacs, decode_assignment
)
