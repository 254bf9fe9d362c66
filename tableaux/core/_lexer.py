"""
Lexical Analyzer for Propositional Formulas

Tokenizes input strings for the parser. Both ASCII and the usual
Unicode connective symbols are accepted.
"""

import re
from typing import List


class ParseError(Exception):
    """Exception raised for parsing errors"""
    pass


class Token:
    """Token in the input stream"""

    def __init__(self, type: str, value: str, pos: int):
        self.type = type
        self.value = value
        self.pos = pos

    def __repr__(self):
        return f"Token({self.type}, {self.value!r}, {self.pos})"


class Lexer:
    """Lexical analyzer for propositional formulas and sequents"""

    TOKEN_PATTERNS = [
        # Multi-character operators first (<-> before ->, |- before |)
        ('IFF', r'<->|↔'),
        ('IMPLIES', r'->|→'),
        ('TURNSTILE', r'\|-|⊢'),
        ('AND', r'&|∧'),
        ('OR', r'\||∨'),
        ('NOT', r'!|~|¬'),
        ('LPAREN', r'\('),
        ('RPAREN', r'\)'),
        ('COMMA', r','),
        # Keywords (word boundaries so "trueish" stays an identifier)
        ('TRUE', r'true\b|⊤'),
        ('FALSE', r'false\b|⊥'),
        ('IDENT', r'[a-zA-Z_][a-zA-Z0-9_\']*'),
        ('WHITESPACE', r'\s+'),
    ]

    _COMPILED = [(token_type, re.compile(pattern)) for token_type, pattern in TOKEN_PATTERNS]

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.tokens: List[Token] = []
        self._tokenize()

    def _tokenize(self):
        """Tokenize the input text"""
        while self.pos < len(self.text):
            matched = False
            for token_type, regex in self._COMPILED:
                match = regex.match(self.text, self.pos)
                if match:
                    value = match.group(0)
                    if token_type != 'WHITESPACE':
                        self.tokens.append(Token(token_type, value, self.pos))
                    self.pos = match.end()
                    matched = True
                    break

            if not matched:
                raise ParseError(f"Invalid character at position {self.pos}: {self.text[self.pos]!r}")
