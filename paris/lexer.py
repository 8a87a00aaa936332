"""Token layer of the Paris grammar.

The terminals are declared as a Lark grammar and scanned with Lark's
basic lexer in lexer-only mode; the parser in `paris.parser` consumes
the resulting tokens. Lark fills in `start_pos`/`end_pos` on every
token, and those offsets are the only source of spans in the AST.

Scanning never fails: any character that no terminal accepts comes out
as an `UNKNOWN` token and is reported by the parser as an unexpected
token. A backtick with no partner comes out as `UNCLOSED_STRING`.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Token

PARIS_TERMINALS = r"""
    WHILE: "while"
    TRUE: "true"
    FALSE: "false"
    NAME: /[_a-zA-Z][_a-zA-Z0-9]*/

    // digit runs joined by single dots: 1, 1.5, 1.2.3 (the last is rejected later)
    NUMBER: /[0-9]+(\.[0-9]+)*/
    STRING: /`[^`\\]*`/
    UNCLOSED_STRING: /`(?![^`\\]*`)[^`\\]*/

    DOTDOT: ".."
    ASSIGN: ":="
    DOT: "."
    SEMICOLON: ";"
    COLON: ":"
    EQUAL: "="
    PERCENT: "%"
    COMMA: ","
    LBRACE: "{"
    RBRACE: "}"
    LPAR: "("
    RPAR: ")"

    UNKNOWN.-1: /./s

    %import common.WS
    %ignore WS
"""

PARIS_LEXER = Lark(
    PARIS_TERMINALS,
    parser=None,
    lexer='basic',
)

# Tokens that may take part in an operator run. `..` and `:=` are
# scanned as single tokens but are still made of operator characters.
OPERATOR_TOKENS = frozenset({'DOT', 'COLON', 'EQUAL', 'PERCENT', 'COMMA', 'DOTDOT', 'ASSIGN'})

STATEMENT_TERMINATORS = frozenset({'DOT', 'SEMICOLON'})

# Human readable names used in "expected ..." lists.
DESCRIPTIONS = {
    'WHILE': "'while'",
    'TRUE': "'true'",
    'FALSE': "'false'",
    'NAME': 'identifier',
    'NUMBER': 'number',
    'STRING': 'string',
    'DOTDOT': "'..'",
    'ASSIGN': "':='",
    'DOT': "'.'",
    'SEMICOLON': "';'",
    'COMMA': "','",
    'LBRACE': "'{'",
    'RBRACE': "'}'",
    'LPAR': "'('",
    'RPAR': "')'",
}


def tokenize(source: str) -> List[Token]:
    """Convert source text into a list of Lark tokens, whitespace dropped."""
    return list(PARIS_LEXER.lex(source))


def describe(token_type: str) -> str:
    return DESCRIPTIONS.get(token_type, token_type.lower())
