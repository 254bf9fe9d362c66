#!/usr/bin/env python3
"""
Tableaux CLI entry point for `python -m tableaux`.

Usage:
    python -m tableaux prove "a | !a"
    python -m tableaux sat "a & !b"
    python -m tableaux clausify "a <-> b"
    python -m tableaux cnf "a -> b" --format dimacs
    python -m tableaux check formulas.txt
    python -m tableaux parse "a & b -> c"
    python -m tableaux repl
"""

import sys
from tableaux.cli import main

if __name__ == "__main__":
    sys.exit(main())
