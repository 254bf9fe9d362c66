"""
Parser for Propositional Formulas

A small recursive-descent parser for propositional formulas and sequents.

Syntax (loosest binding first):
    - P <-> Q: biconditional (left associative, desugared on construction)
    - P -> Q: implication (right associative)
    - P | Q: disjunction
    - P & Q: conjunction
    - !P or ~P: negation
    - true, false: boolean constants
    - p, q1, x_2: atoms
    - A, B |- C, D: sequent (either side may be empty)

The Unicode symbols ↔ → ∨ ∧ ¬ ⊢ ⊤ ⊥ are accepted as well.
"""

from typing import List, Optional
from tableaux.core.ast import Formula, True_, False_, Atom, Not, And, Or, Implies, iff
from tableaux.core.sequent import Sequent
from tableaux.core._lexer import Lexer, Token, ParseError


class Parser:
    """Parser for propositional formulas"""

    def __init__(self, text: str):
        self.lexer = Lexer(text)
        self.tokens = self.lexer.tokens
        self.pos = 0

    def current_token(self) -> Optional[Token]:
        """Get the current token"""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self):
        """Move to the next token"""
        self.pos += 1

    def at(self, token_type: str) -> bool:
        token = self.current_token()
        return token is not None and token.type == token_type

    def expect(self, token_type: str) -> Token:
        """Expect a specific token type"""
        token = self.current_token()
        if token is None:
            raise ParseError(f"Expected {token_type}, got EOF")
        if token.type != token_type:
            raise ParseError(f"Expected {token_type}, got {token.type} at position {token.pos}")
        self.advance()
        return token

    def expect_end(self):
        token = self.current_token()
        if token is not None:
            raise ParseError(f"Unexpected {token.type} {token.value!r} at position {token.pos}")

    def parse(self) -> Formula:
        """Parse a formula"""
        return self.parse_iff()

    def parse_sequent(self) -> Sequent:
        """Parse a sequent: A, B |- C, D"""
        left = [] if self.at('TURNSTILE') else self.parse_formula_list()
        self.expect('TURNSTILE')
        right = [] if self.current_token() is None else self.parse_formula_list()
        return Sequent(tuple(left), tuple(right))

    def parse_formula_list(self) -> List[Formula]:
        """Parse comma-separated list of formulas"""
        formulas = [self.parse()]

        while self.at('COMMA'):
            self.advance()
            formulas.append(self.parse())

        return formulas

    def parse_iff(self) -> Formula:
        """Parse biconditional: P <-> Q"""
        left = self.parse_implies()

        while self.at('IFF'):
            self.advance()
            right = self.parse_implies()
            left = iff(left, right)

        return left

    def parse_implies(self) -> Formula:
        """Parse implication: P -> Q (right associative)"""
        left = self.parse_or()

        if self.at('IMPLIES'):
            self.advance()
            right = self.parse_implies()
            return Implies(left, right)

        return left

    def parse_or(self) -> Formula:
        """Parse disjunction: P | Q"""
        left = self.parse_and()

        while self.at('OR'):
            self.advance()
            right = self.parse_and()
            left = Or(left, right)

        return left

    def parse_and(self) -> Formula:
        """Parse conjunction: P & Q"""
        left = self.parse_unary()

        while self.at('AND'):
            self.advance()
            right = self.parse_unary()
            left = And(left, right)

        return left

    def parse_unary(self) -> Formula:
        """Parse negation: !P"""
        if self.at('NOT'):
            self.advance()
            return Not(self.parse_unary())

        return self.parse_primary()

    def parse_primary(self) -> Formula:
        """Parse constants, atoms and parenthesized formulas"""
        token = self.current_token()

        if not token:
            raise ParseError("Unexpected end of input")

        if token.type == 'TRUE':
            self.advance()
            return True_()

        if token.type == 'FALSE':
            self.advance()
            return False_()

        if token.type == 'IDENT':
            self.advance()
            return Atom(token.value)

        if token.type == 'LPAREN':
            self.advance()
            formula = self.parse()
            self.expect('RPAREN')
            return formula

        raise ParseError(f"Unexpected token {token.type} {token.value!r} at position {token.pos}")


# Module-level parsing functions

_TOO_DEEP = "Formula is nested too deeply to parse"


def parse(text: str) -> Formula:
    """
    Parse a propositional formula from a string.

    Args:
        text: String representation of the formula

    Returns:
        Parsed Formula object

    Example:
        >>> str(parse("a & b -> c"))
        '((a & b) -> c)'
    """
    parser = Parser(text)
    try:
        formula = parser.parse()
    except RecursionError:
        raise ParseError(_TOO_DEEP) from None
    parser.expect_end()
    return formula


def parse_sequent(text: str) -> Sequent:
    """
    Parse a sequent from a string with turnstile |-

    Args:
        text: String representation of the sequent (e.g., "a, a -> b |- b")

    Returns:
        Sequent with the parsed hypotheses and goals
    """
    parser = Parser(text)
    try:
        sequent = parser.parse_sequent()
    except RecursionError:
        raise ParseError(_TOO_DEEP) from None
    parser.expect_end()
    return sequent


def is_sequent(text: str) -> bool:
    """Check whether text contains a turnstile and should be read as a sequent"""
    return any(token.type == 'TURNSTILE' for token in Lexer(text).tokens)
