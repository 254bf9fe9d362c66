"""
SAT Solving of CNF via Z3

The tableau only formats CNF and interprets solver output; the search
itself is delegated to Z3. Variables 1..n become Z3 booleans x1..xn and
every clause becomes a disjunction of literals.
"""

import z3
from typing import Iterable, List, NamedTuple, Optional, Sequence
from tableaux.core.clause import Model
from tableaux.encoding.cnf import VariableIndex

SAT = "sat"
UNSAT = "unsat"
UNKNOWN = "unknown"


class DimacsError(Exception):
    """Exception raised for malformed DIMACS input"""
    pass


class DimacsProblem(NamedTuple):
    """A parsed DIMACS CNF problem"""
    num_vars: int
    clauses: List[List[int]]
    comments: List[str]


class SatSolution:
    """Answer of the SAT collaborator"""

    def __init__(self, status: str, assignment: Optional[List[int]] = None):
        self.status = status
        self.assignment = assignment or []

    @property
    def satisfiable(self) -> bool:
        return self.status == SAT

    def __str__(self) -> str:
        if self.status == SAT:
            return "SAT " + " ".join(str(lit) for lit in self.assignment)
        return self.status.upper()

    def __bool__(self) -> bool:
        return self.satisfiable


def _max_var(cnf: Sequence[Sequence[int]]) -> int:
    return max((abs(lit) for clause in cnf for lit in clause), default=0)


def solve_cnf(cnf: Iterable[Iterable[int]], num_vars: Optional[int] = None,
              timeout: int = 5000) -> SatSolution:
    """
    Solve an integer-literal CNF with Z3.

    Args:
        cnf: Clauses as lists of non-zero signed integers
        num_vars: Number of variables (defaults to the largest variable used)
        timeout: Z3 solver timeout in milliseconds

    Returns:
        SatSolution; when satisfiable its assignment holds one signed
        literal for every variable 1..num_vars, in variable order
    """
    cnf = [list(clause) for clause in cnf]
    if num_vars is None:
        num_vars = _max_var(cnf)

    variables = [z3.Bool(f"x{i}") for i in range(1, num_vars + 1)]

    solver = z3.Solver()
    solver.set("timeout", timeout)

    for clause in cnf:
        literals = []
        for lit in clause:
            if lit == 0 or abs(lit) > num_vars:
                raise ValueError(f"Literal {lit} out of range for {num_vars} variables")
            var = variables[abs(lit) - 1]
            literals.append(var if lit > 0 else z3.Not(var))
        # An empty clause is unsatisfiable: Or() of nothing is false
        solver.add(z3.Or(*literals) if literals else z3.BoolVal(False))

    result = solver.check()
    if result == z3.unsat:
        return SatSolution(UNSAT)
    if result == z3.unknown:
        return SatSolution(UNKNOWN)

    model = solver.model()
    assignment = []
    for i, var in enumerate(variables, start=1):
        value = model.evaluate(var, model_completion=True)
        assignment.append(i if z3.is_true(value) else -i)
    return SatSolution(SAT, assignment)


def parse_dimacs(text: str) -> DimacsProblem:
    """
    Parse DIMACS CNF text.

    Comment lines start with 'c', the header is 'p cnf <vars> <clauses>'
    and every clause line ends with a terminating 0.

    Raises:
        DimacsError: on a missing or malformed header, literals out of
                     range, unterminated clauses or a clause count mismatch
    """
    num_vars = None
    num_clauses = None
    clauses: List[List[int]] = []
    comments: List[str] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("c"):
            comments.append(line[1:].strip())
            continue
        if line.startswith("p"):
            parts = line.split()
            if parts[:2] != ["p", "cnf"] or len(parts) != 4:
                raise DimacsError(f"line {lineno}: malformed header: {raw!r}")
            try:
                num_vars, num_clauses = int(parts[2]), int(parts[3])
            except ValueError as e:
                raise DimacsError(f"line {lineno}: malformed header: {raw!r}") from e
            continue

        if num_vars is None:
            raise DimacsError(f"line {lineno}: clause before header")
        try:
            ints = [int(x) for x in line.split()]
        except ValueError as e:
            raise DimacsError(f"line {lineno}: non-integer literal: {raw!r}") from e
        if ints[-1] != 0:
            raise DimacsError(f"line {lineno}: clause does not end with 0: {raw!r}")
        literals = ints[:-1]
        for lit in literals:
            if lit == 0 or abs(lit) > num_vars:
                raise DimacsError(f"line {lineno}: literal {lit} out of range for {num_vars} variables")
        clauses.append(literals)

    if num_vars is None:
        raise DimacsError("missing 'p cnf' header")
    if len(clauses) != num_clauses:
        raise DimacsError(f"header says {num_clauses} clauses but found {len(clauses)}")
    return DimacsProblem(num_vars, clauses, comments)


def solve_dimacs(text: str, timeout: int = 5000) -> SatSolution:
    """Parse DIMACS text and solve it with Z3"""
    problem = parse_dimacs(text)
    return solve_cnf(problem.clauses, num_vars=problem.num_vars, timeout=timeout)


def decode_assignment(index: VariableIndex, assignment: Iterable[int]) -> Model:
    """
    Translate solver literals back into a model over atom names.

    Literals for variables outside the index are ignored.
    """
    names = {var: atom for atom, var in index.items()}
    model = [(names[abs(lit)], lit > 0) for lit in assignment if abs(lit) in names]
    return sorted(model)
