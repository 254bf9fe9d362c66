#!/usr/bin/env python3
"""
Tableaux CLI - Propositional Logic Decision Tool.

A unified command-line interface for the prover's capabilities:
- prove: Check validity of a formula or sequent
- sat: Check satisfiability of a formula
- clausify: Print the full clause set of a formula
- cnf: Export the CNF of a formula (integer lists or DIMACS), optionally solve it
- check: Check a batch of formulas/sequents from a file
- parse: Parse and display formula AST

Usage:
    tableaux prove "a | !a"                # Check validity
    tableaux prove "a, a -> b |- b"        # Check a sequent
    tableaux sat "a & !b"                  # Find a satisfying model
    tableaux clausify "a <-> b"            # Show clauses
    tableaux cnf "a <-> b" --solve         # DIMACS export + Z3
    tableaux check formulas.txt            # Batch check
    tableaux parse "a & b -> c"            # Parse and display formula
"""

import argparse
import sys
import json
import time
from pathlib import Path
from typing import List, Optional

# Import version from main package (single source of truth)
from tableaux import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser"""
    parser = argparse.ArgumentParser(
        prog="tableaux",
        description="Tableaux - Propositional Logic Decision Tool",
        epilog="Use 'tableaux <command> --help' for more information on a specific command.",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # === PROVE command ===
    prove_parser = subparsers.add_parser(
        "prove",
        help="Check validity of a formula or sequent",
        description="Check if a formula is a tautology, or if a sequent A, B |- C holds."
    )
    _add_input_arguments(prove_parser, "Formula or sequent to prove (e.g., 'a | !a')")
    prove_parser.add_argument(
        "-s", "--strategy",
        default="shortcut",
        choices=["shortcut", "union"],
        help="Branch exploration strategy (default: shortcut)"
    )
    prove_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed proof search steps"
    )
    prove_parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )

    # === SAT command ===
    sat_parser = subparsers.add_parser(
        "sat",
        help="Check satisfiability of a formula",
        description="Check if a formula is satisfiable and print a model."
    )
    _add_input_arguments(sat_parser, "Formula to satisfy (e.g., 'a & !b')")
    sat_parser.add_argument(
        "-s", "--strategy",
        default="shortcut",
        choices=["shortcut", "union"],
        help="Branch exploration strategy (default: shortcut)"
    )
    sat_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed proof search steps"
    )
    sat_parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )

    # === CLAUSIFY command ===
    clausify_parser = subparsers.add_parser(
        "clausify",
        help="Print the full clause set of a formula",
        description="Decompose |- F (or a sequent) with the union strategy and print every clause."
    )
    _add_input_arguments(clausify_parser, "Formula or sequent to clausify")
    clausify_parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Output format (default: text)"
    )

    # === CNF command ===
    cnf_parser = subparsers.add_parser(
        "cnf",
        help="Export the CNF of a formula",
        description="Export the CNF of a formula as integer clause lists or DIMACS text."
    )
    _add_input_arguments(cnf_parser, "Formula to encode")
    cnf_parser.add_argument(
        "--format",
        default="dimacs",
        choices=["dimacs", "list", "json"],
        help="Output format (default: dimacs)"
    )
    cnf_parser.add_argument(
        "-c", "--comment",
        help="Comment line for DIMACS output (default: the formula)"
    )
    cnf_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)"
    )
    cnf_parser.add_argument(
        "--solve",
        action="store_true",
        help="Solve the CNF with Z3 and print the decoded model"
    )
    cnf_parser.add_argument(
        "--timeout",
        type=int,
        default=5000,
        help="Solver timeout in ms (default: 5000)"
    )

    # === CHECK command ===
    check_parser = subparsers.add_parser(
        "check",
        help="Check batch of formulas from file",
        description="Check validity of multiple formulas or sequents from a file (one per line)."
    )
    check_parser.add_argument(
        "file",
        help="File containing formulas or sequents (one per line)"
    )
    check_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed output for each line"
    )
    check_parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json", "csv"],
        help="Output format (default: text)"
    )
    check_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)"
    )
    check_parser.add_argument(
        "--stop-on-failure",
        action="store_true",
        help="Stop checking after first invalid formula"
    )

    # === PARSE command ===
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse and display formula structure",
        description="Parse a propositional formula and display its AST."
    )
    _add_input_arguments(parse_parser, "Formula to parse")
    parse_parser.add_argument(
        "--format",
        default="tree",
        choices=["tree", "json", "sexp"],
        help="Output format (default: tree)"
    )

    # === REPL command ===
    subparsers.add_parser(
        "repl",
        help="Interactive propositional logic REPL",
        description="Start an interactive Read-Eval-Print Loop for propositional logic."
    )

    return parser


def _add_input_arguments(subparser: argparse.ArgumentParser, help_text: str):
    subparser.add_argument(
        "formula",
        nargs="?",
        help=help_text
    )
    subparser.add_argument(
        "-f", "--file",
        help="Read formula from file"
    )


def _read_input(args) -> Optional[str]:
    """Get the formula text from the positional argument or --file"""
    if args.formula:
        return args.formula
    if args.file:
        try:
            return Path(args.file).read_text().strip()
        except Exception as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return None
    print("Error: Provide a formula string or use -f to read from file", file=sys.stderr)
    return None


def _report_error(args, text: str, error: Exception) -> int:
    if getattr(args, "format", "text") == "json":
        print(json.dumps({
            "formula": text,
            "error": str(error),
        }, indent=2))
    else:
        print(f"Error: {error}", file=sys.stderr)
    return 1


def _model_to_dict(model) -> dict:
    return {atom: value for atom, value in model} if model is not None else None


# ============================================================================
# PROVE Command
# ============================================================================

def cmd_prove(args) -> int:
    """Execute prove command - check validity of one formula or sequent"""
    from tableaux import Prover
    from tableaux.core.clause import format_model

    text = _read_input(args)
    if text is None:
        return 1

    prover = Prover(strategy=args.strategy, verbose=args.verbose)

    if args.verbose:
        print(f"Proving: {text}")
        print("-" * 60)

    start_time = time.time()
    try:
        result = prover.check(text)
    except Exception as e:
        return _report_error(args, text, e)
    elapsed_ms = (time.time() - start_time) * 1000

    if args.format == "json":
        output = {
            "formula": text,
            "valid": result.valid,
            "time_ms": round(elapsed_ms, 2)
        }
        if not result.valid:
            output["countermodel"] = _model_to_dict(result.countermodel)
        print(json.dumps(output, indent=2))
    else:
        if result.valid:
            print("✓ VALID")
        else:
            print("✗ INVALID")
            print(f"  Countermodel: {format_model(result.countermodel) or '(any assignment)'}")

        if args.verbose:
            print(f"  Time: {elapsed_ms:.2f}ms")

    return 0 if result.valid else 1


# ============================================================================
# SAT Command
# ============================================================================

def cmd_sat(args) -> int:
    """Execute sat command - check satisfiability of one formula"""
    from tableaux import Prover, parse
    from tableaux.core.clause import format_model

    text = _read_input(args)
    if text is None:
        return 1

    prover = Prover(strategy=args.strategy, verbose=args.verbose)

    start_time = time.time()
    try:
        result = prover.sat(parse(text))
    except Exception as e:
        return _report_error(args, text, e)
    elapsed_ms = (time.time() - start_time) * 1000

    if args.format == "json":
        output = {
            "formula": text,
            "satisfiable": result.satisfiable,
            "model": _model_to_dict(result.model),
            "time_ms": round(elapsed_ms, 2)
        }
        print(json.dumps(output, indent=2))
    else:
        if result.satisfiable:
            print("✓ SATISFIABLE")
            print(f"  Model: {format_model(result.model) or '(any assignment)'}")
        else:
            print("✗ UNSATISFIABLE")

        if args.verbose:
            print(f"  Time: {elapsed_ms:.2f}ms")

    return 0 if result.satisfiable else 1


# ============================================================================
# CLAUSIFY Command
# ============================================================================

def cmd_clausify(args) -> int:
    """Execute clausify command - print every saturated branch"""
    from tableaux import clausify, parse
    from tableaux.core.parser import parse_sequent, is_sequent
    from tableaux.core.clause import sorted_clauses

    text = _read_input(args)
    if text is None:
        return 1

    try:
        if is_sequent(text):
            sequent = parse_sequent(text)
            clauses = clausify(sequent.left, sequent.right)
        else:
            clauses = clausify(parse(text))
    except Exception as e:
        return _report_error(args, text, e)

    ordered = sorted_clauses(clauses)
    if args.format == "json":
        print(json.dumps({
            "formula": text,
            "clauses": [
                {"true": sorted(c.left), "false": sorted(c.right)} for c in ordered
            ]
        }, indent=2))
    else:
        if not ordered:
            print("(no clauses: every branch closed)")
        for clause in ordered:
            print(clause)

    return 0


# ============================================================================
# CNF Command
# ============================================================================

def cmd_cnf(args) -> int:
    """Execute cnf command - export CNF and optionally solve it"""
    from tableaux import clausify, parse
    from tableaux.encoding.cnf import index_variables, as_cnf_list, as_cnf_dimacs
    from tableaux.encoding.sat import solve_cnf, decode_assignment
    from tableaux.core.clause import format_model

    text = _read_input(args)
    if text is None:
        return 1

    try:
        clauses = clausify(parse(text))
    except Exception as e:
        return _report_error(args, text, e)

    index = index_variables(clauses)
    cnf = as_cnf_list(index, clauses)

    if args.format == "json":
        output_str = json.dumps({
            "formula": text,
            "variables": index,
            "clauses": cnf
        }, indent=2)
    elif args.format == "list":
        # One clause per line, 0-terminated as in DIMACS
        output_str = "\n".join(" ".join(str(lit) for lit in clause + [0]) for clause in cnf)
    else:
        comment = args.comment if args.comment is not None else text
        output_str = as_cnf_dimacs(index, clauses, comment)

    if args.output:
        Path(args.output).write_text(output_str + "\n")
        print(f"CNF written to {args.output}")
    else:
        print(output_str)

    if not args.solve:
        return 0

    try:
        solution = solve_cnf(cnf, num_vars=len(index), timeout=args.timeout)
    except Exception as e:
        print(f"Solver error: {e}", file=sys.stderr)
        return 1

    if solution.satisfiable:
        model = decode_assignment(index, solution.assignment)
        print("s SATISFIABLE")
        print(f"v {' '.join(str(lit) for lit in solution.assignment)} 0")
        print(f"c model: {format_model(model) or '(any assignment)'}")
        return 0

    print(f"s {solution.status.upper()}")
    return 1


# ============================================================================
# CHECK Command
# ============================================================================

def cmd_check(args) -> int:
    """Execute check command - check batch of formulas and sequents"""
    from tableaux import Prover
    from tableaux.core.clause import format_model

    # Read formulas from file
    try:
        lines = Path(args.file).read_text().strip().split('\n')
    except Exception as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    # Filter out comments and empty lines
    formulas = []
    for line in lines:
        line = line.strip()
        if line and not line.startswith('#') and not line.startswith('//'):
            formulas.append(line)

    if not formulas:
        print("No formulas found in file", file=sys.stderr)
        return 1

    prover = Prover()

    results = []
    total_time = 0
    valid_count = 0
    invalid_count = 0
    error_count = 0

    for i, text in enumerate(formulas, 1):
        if args.verbose:
            print(f"[{i}/{len(formulas)}] Checking: {text}")

        start_time = time.time()
        try:
            result = prover.check(text)
            elapsed_ms = (time.time() - start_time) * 1000
            total_time += elapsed_ms

            if result.valid:
                valid_count += 1
                status = "valid"
            else:
                invalid_count += 1
                status = "invalid"

            results.append({
                "formula": text,
                "valid": result.valid,
                "countermodel": None if result.valid else format_model(result.countermodel),
                "time_ms": round(elapsed_ms, 2)
            })

            if args.verbose:
                symbol = "✓" if result.valid else "✗"
                print(f"  {symbol} {status.upper()} ({elapsed_ms:.2f}ms)")

            if not result.valid and args.stop_on_failure:
                break

        except Exception as e:
            elapsed_ms = (time.time() - start_time) * 1000
            total_time += elapsed_ms
            error_count += 1
            results.append({
                "formula": text,
                "valid": None,
                "error": str(e),
                "time_ms": round(elapsed_ms, 2)
            })
            if args.verbose:
                print(f"  ⚠ ERROR: {e}")

    output_data = {
        "file": args.file,
        "total": len(formulas),
        "checked": len(results),
        "valid": valid_count,
        "invalid": invalid_count,
        "errors": error_count,
        "total_time_ms": round(total_time, 2),
        "results": results
    }

    if args.format == "json":
        output_str = json.dumps(output_data, indent=2)
    elif args.format == "csv":
        output_str = _check_report_csv(results)
    else:
        output_str = _check_report_text(output_data)

    if args.output:
        Path(args.output).write_text(output_str)
        print(f"Results written to {args.output}")
    else:
        print(output_str)

    return 0 if invalid_count == 0 and error_count == 0 else 1


def _check_report_csv(results: List[dict]) -> str:
    rows = ["formula,valid,time_ms,detail"]
    for r in results:
        verdict = "error" if r["valid"] is None else ("true" if r["valid"] else "false")
        # Models are comma separated; keep the detail column intact
        detail = (r.get("countermodel") or r.get("error") or "").replace(",", ";")
        rows.append(f"\"{r['formula']}\",{verdict},{r['time_ms']},\"{detail}\"")
    return "\n".join(rows)


def _check_report_text(data: dict) -> str:
    rule = "=" * 60
    checked = data["checked"]
    rows = [
        "",
        rule,
        f"Tableaux Check: {data['file']}",
        rule,
        "",
        f"Total: {data['total']}",
        f"Valid: {data['valid']} ({100 * data['valid'] / checked:.1f}%)" if checked else "Valid: 0",
        f"Invalid: {data['invalid']}",
        f"Errors: {data['errors']}",
        f"Time: {data['total_time_ms']:.2f}ms",
    ]

    refuted = [r for r in data["results"] if r["valid"] is False]
    if refuted:
        rows.append("\nCountermodels:")
        rows.extend(f"  ✗ {r['formula']}  [{r['countermodel'] or 'any assignment'}]" for r in refuted)

    failed = [r for r in data["results"] if r.get("error")]
    if failed:
        rows.append("\nErrors:")
        rows.extend(f"  ⚠ {r['formula']}: {r['error']}" for r in failed)

    rows.extend(["", rule, ""])
    return "\n".join(rows)


# ============================================================================
# PARSE Command
# ============================================================================

def cmd_parse(args) -> int:
    """Execute parse command - parse and display formula"""
    from tableaux import parse

    text = _read_input(args)
    if text is None:
        return 1

    try:
        formula = parse(text)
    except Exception as e:
        print(f"Parse error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(formula_to_dict(formula), indent=2))
    elif args.format == "sexp":
        print(formula_to_sexp(formula))
    else:
        print(formula_to_tree(formula))

    return 0


_BINARY_NAMES = {"And": "and", "Or": "or", "Implies": "implies"}
_BINARY_SYMBOLS = {"And": "∧", "Or": "∨", "Implies": "→"}


def formula_to_dict(formula) -> dict:
    """Convert formula to dictionary representation"""
    from tableaux.core.ast import True_, False_, Atom, Not, And, Or, Implies

    if isinstance(formula, True_):
        return {"type": "true"}
    elif isinstance(formula, False_):
        return {"type": "false"}
    elif isinstance(formula, Atom):
        return {"type": "atom", "name": formula.name}
    elif isinstance(formula, Not):
        return {
            "type": "not",
            "operand": formula_to_dict(formula.formula)
        }
    elif isinstance(formula, (And, Or, Implies)):
        return {
            "type": _BINARY_NAMES[type(formula).__name__],
            "left": formula_to_dict(formula.left),
            "right": formula_to_dict(formula.right)
        }
    else:
        return {"type": "unknown", "repr": str(formula)}


def formula_to_sexp(formula) -> str:
    """Convert formula to S-expression format"""
    from tableaux.core.ast import True_, False_, Atom, Not, And, Or, Implies

    if isinstance(formula, True_):
        return "true"
    elif isinstance(formula, False_):
        return "false"
    elif isinstance(formula, Atom):
        return formula.name
    elif isinstance(formula, Not):
        return f"(not {formula_to_sexp(formula.formula)})"
    elif isinstance(formula, And):
        return f"(and {formula_to_sexp(formula.left)} {formula_to_sexp(formula.right)})"
    elif isinstance(formula, Or):
        return f"(or {formula_to_sexp(formula.left)} {formula_to_sexp(formula.right)})"
    elif isinstance(formula, Implies):
        return f"(=> {formula_to_sexp(formula.left)} {formula_to_sexp(formula.right)})"
    else:
        return str(formula)


def formula_to_tree(formula, prefix="", is_last=True) -> str:
    """Convert formula to tree visualization"""
    from tableaux.core.ast import True_, False_, Atom, Not, And, Or, Implies

    connector = "└── " if is_last else "├── "
    child_prefix = prefix + ("    " if is_last else "│   ")

    lines = []

    if isinstance(formula, (True_, False_, Atom)):
        lines.append(f"{prefix}{connector}{formula}")
    elif isinstance(formula, Not):
        lines.append(f"{prefix}{connector}¬")
        lines.append(formula_to_tree(formula.formula, child_prefix, True))
    elif isinstance(formula, (And, Or, Implies)):
        lines.append(f"{prefix}{connector}{_BINARY_SYMBOLS[type(formula).__name__]}")
        lines.append(formula_to_tree(formula.left, child_prefix, False))
        lines.append(formula_to_tree(formula.right, child_prefix, True))
    else:
        lines.append(f"{prefix}{connector}{formula}")

    return "\n".join(lines)


# ============================================================================
# REPL Command
# ============================================================================

REPL_HELP = """Commands:
  <formula>        Check validity (e.g., 'a | !a')
  <sequent>        Check sequent (e.g., 'a, a -> b |- b')
  :sat <formula>   Check satisfiability
  :clauses <f>     Show clause set
  :parse <formula> Parse and display formula
  :help            Show this help
  :quit            Exit REPL"""


def cmd_repl(args) -> int:
    """Execute REPL command - interactive mode"""
    from tableaux import Prover, parse, format_clauses, format_model

    prover = Prover()

    print("Tableaux Interactive REPL")
    print("=" * 40)
    print(REPL_HELP)
    print("=" * 40)
    print()

    while True:
        try:
            line = input("tableaux> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        try:
            if line in (":quit", ":exit", ":q"):
                break
            elif line == ":help":
                print(REPL_HELP)
            elif line.startswith(":parse "):
                print(formula_to_tree(parse(line[7:].strip()), "", True))
            elif line.startswith(":sat "):
                print(prover.sat(parse(line[5:].strip())))
            elif line.startswith(":clauses "):
                clauses = prover.clausify(parse(line[9:].strip()))
                print(format_clauses(clauses) or "(no clauses)")
            else:
                result = prover.check(line)
                if result.valid:
                    print("✓ VALID")
                else:
                    print(f"✗ INVALID ({format_model(result.countermodel) or 'any assignment'})")
        except Exception as e:
            print(f"Error: {e}")

    print("Goodbye!")
    return 0


# ============================================================================
# Main Entry Point
# ============================================================================

def main(argv: List[str] = None) -> int:
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Dispatch to command handler
    commands = {
        "prove": cmd_prove,
        "sat": cmd_sat,
        "clausify": cmd_clausify,
        "cnf": cmd_cnf,
        "check": cmd_check,
        "parse": cmd_parse,
        "repl": cmd_repl,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
