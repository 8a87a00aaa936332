"""Parser for the Paris language.

This module turns source text into a list of top-level AST nodes. It is
a two-stage pipeline:

1. **Lexing**: `paris.lexer` scans the text with Lark's basic lexer.
   Every token carries the character offsets it was matched at, and
   every node span below is built from those offsets.

2. **Parsing**: a recursive-descent `Parser` walks the tokens. At each
   grammar choice point the alternatives are tried in a fixed order, and
   the first one that applies wins:

       while-loop, boolean, string, range, number,
       variable binding, operator run, function call, identifier

   Because prefixes overlap (`1..3` vs `1.5`, `x := 1` vs `x(1)` vs
   `x`), the order is part of the language definition.

Parsing does not stop at the first syntax error. A failing statement is
recorded, the parser skips ahead to the next statement terminator (`.`
or `;`) or to the closing brace of the enclosing block, and carries on.
`parse_program` returns whatever statements survived together with all
the errors found.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from lark import Token

from .ast import (
    Node, NumericLiteral, StringLiteral, BooleanLiteral, RangeLiteral,
    Ident, Op, Call, While, Variable,
)
from .errors import Span, ParseError, UnclosedDelimiter, UnexpectedToken, CustomError
from .lexer import tokenize, describe, OPERATOR_TOKENS, STATEMENT_TERMINATORS

I64_MIN = -2 ** 63
I64_MAX = 2 ** 63 - 1

# Calls and blocks nest through recursion, so nesting is capped well
# below the interpreter recursion limit.
MAX_NESTING = 100

EXPRESSION_START = (
    "'while'", "'true'", "'false'", 'string', 'number', 'identifier', 'operator',
)


@dataclass
class ParseResult:
    """Top-level statements plus the syntax errors met while parsing them."""
    statements: List[Node] = field(default_factory=list)
    errors: List[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Parser:
    def __init__(self, source: str, tokens: Optional[List[Token]] = None):
        self.source = source
        self.tokens = tokens if tokens is not None else tokenize(source)
        self.pos = 0
        self.depth = 0
        self.errors: List[ParseError] = []

    # Token helpers

    def peek(self, offset: int = 0) -> Optional[Token]:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def match(self, *types: str) -> bool:
        token = self.peek()
        return token is not None and token.type in types

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def consume(self, expected: str) -> Token:
        if not self.match(expected):
            raise self.unexpected([describe(expected)])
        return self.advance()

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def closes(self, closing: Optional[str]) -> bool:
        return closing is not None and self.match(closing)

    def end_of_input(self) -> Span:
        return Span(len(self.source), len(self.source))

    def unexpected(self, expected: Sequence[str]) -> UnexpectedToken:
        token = self.peek()
        if token is None:
            return UnexpectedToken(None, expected, self.end_of_input())
        return UnexpectedToken(str(token), expected, span_of(token))

    # Statements

    def parse_program(self) -> ParseResult:
        statements = self.parse_statements(closing=None)
        return ParseResult(statements, self.errors)

    def parse_statements(self, closing: Optional[str]) -> List[Node]:
        """Parse terminator-separated statements up to `closing` or end of input.

        `closing` is the token type that ends the enclosing block, or
        ``None`` at top level. The closing token itself is left for the
        caller.
        """
        statements: List[Node] = []
        follow = ["'.'", "';'", describe(closing) if closing else 'end of input']
        while not self.at_end() and not self.closes(closing):
            try:
                statements.append(self.parse_expression())
                if self.at_end() or self.closes(closing):
                    break
                if not self.match(*STATEMENT_TERMINATORS):
                    raise self.unexpected(follow)
                self.advance()
            except ParseError as e:
                self.errors.append(e)
                self.synchronize(closing)
        return statements

    def synchronize(self, closing: Optional[str]):
        """Skip past the rest of a broken statement.

        Stops after the next statement terminator at the current brace
        depth, or before the brace that closes the enclosing block.
        """
        depth = 0
        while not self.at_end():
            token = self.peek()
            if token.type == 'LBRACE':
                depth += 1
            elif token.type == 'RBRACE':
                if depth == 0 and closing == 'RBRACE':
                    return
                depth = max(depth - 1, 0)
            elif token.type in STATEMENT_TERMINATORS and depth == 0:
                self.advance()
                return
            self.advance()

    # Expressions

    def parse_expression(self) -> Node:
        token = self.peek()
        if token is None:
            raise self.unexpected(EXPRESSION_START)
        if self.depth >= MAX_NESTING:
            raise CustomError('expression nested too deeply', span_of(token))
        self.depth += 1
        try:
            return self.parse_alternative(token)
        finally:
            self.depth -= 1

    def parse_alternative(self, token: Token) -> Node:
        """Try each alternative of the expression rule in priority order."""
        kind = token.type
        if kind == 'WHILE':
            return self.parse_while()
        if kind in ('TRUE', 'FALSE'):
            self.advance()
            return BooleanLiteral(kind == 'TRUE', span_of(token))
        if kind == 'STRING':
            self.advance()
            return StringLiteral(token.value[1:-1], span_of(token))
        if kind == 'UNCLOSED_STRING':
            raise self.unclosed_string(token)
        if kind == 'NUMBER':
            if touching(token, self.peek(1), 'DOTDOT'):
                return self.parse_range()
            return self.parse_number()
        if kind in OPERATOR_TOKENS:
            return self.parse_operator_run()
        if kind == 'NAME':
            following = self.peek(1)
            if following is not None and following.type == 'ASSIGN':
                return self.parse_variable()
            if following is not None and following.type == 'LPAR':
                return self.parse_call()
            self.advance()
            return Ident(token.value, span_of(token))
        raise self.unexpected(EXPRESSION_START)

    def parse_while(self) -> While:
        keyword = self.consume('WHILE')
        condition = self.parse_expression()
        body, close = self.parse_block()
        return While(condition, body, Span(keyword.start_pos, close.end_pos))

    def parse_block(self):
        if not self.match('LBRACE'):
            raise self.unexpected(["'{'"])
        opening = self.advance()
        body = self.parse_statements(closing='RBRACE')
        if self.at_end():
            raise UnclosedDelimiter('{', Span(opening.start_pos, len(self.source)),
                                    opened_at=span_of(opening))
        return body, self.consume('RBRACE')

    def parse_range(self) -> RangeLiteral:
        first = self.advance()
        dots = self.advance()
        second = self.peek()
        if second is None or second.type != 'NUMBER' or second.start_pos != dots.end_pos:
            raise CustomError('invalid range', Span(first.start_pos, dots.end_pos))
        self.advance()
        span = Span(first.start_pos, second.end_pos)
        return RangeLiteral(parse_i64(first.value, span), parse_i64(second.value, span), span)

    def parse_number(self) -> NumericLiteral:
        token = self.advance()
        try:
            value = float(token.value)
        except ValueError as e:
            raise CustomError(str(e), span_of(token))
        return NumericLiteral(value, span_of(token))

    def parse_variable(self) -> Variable:
        name = self.consume('NAME')
        self.consume('ASSIGN')
        value = self.parse_expression()
        return Variable(name.value, value, Span(name.start_pos, value.span.end))

    def parse_operator_run(self) -> Op:
        first = last = self.advance()
        while touching(last, self.peek(), *OPERATOR_TOKENS):
            last = self.advance()
        span = Span(first.start_pos, last.end_pos)
        return Op(self.source[span.start:span.end], span)

    def parse_call(self) -> Call:
        name = self.consume('NAME')
        opening = self.consume('LPAR')
        args: List[Node] = []
        while not self.match('RPAR'):
            if self.at_end():
                raise UnclosedDelimiter('(', Span(opening.start_pos, len(self.source)),
                                        opened_at=span_of(opening))
            args.append(self.parse_expression())
            if self.match('COMMA'):
                self.advance()
            elif self.at_end():
                raise UnclosedDelimiter('(', Span(opening.start_pos, len(self.source)),
                                        opened_at=span_of(opening))
            elif not self.match('RPAR'):
                raise self.unexpected(["','", "')'"])
        closing = self.advance()
        callee = Ident(name.value, span_of(name))
        return Call(callee, args, Span(name.start_pos, closing.end_pos))

    # Helpers

    def unclosed_string(self, token: Token) -> ParseError:
        if token.end_pos >= len(self.source):
            return UnclosedDelimiter('`', Span(token.start_pos, len(self.source)),
                                     opened_at=Span(token.start_pos, token.start_pos + 1))
        # scanning stopped at a backslash
        return UnexpectedToken('\\', ["'`'"], Span(token.end_pos, token.end_pos + 1))


def span_of(token: Token) -> Span:
    return Span(token.start_pos, token.end_pos)


def touching(token: Token, following: Optional[Token], *types: str) -> bool:
    """True when `following` is one of `types` and starts where `token` ends."""
    return (following is not None
            and following.type in types
            and following.start_pos == token.end_pos)


def parse_i64(text: str, span: Span) -> int:
    try:
        value = int(text)
    except ValueError:
        raise CustomError('invalid digit found in string', span)
    if not I64_MIN <= value <= I64_MAX:
        raise CustomError('number too large to fit in target type', span)
    return value


def parse_program(source: str) -> ParseResult:
    """Parse Paris source code into top-level statements and syntax errors.

    Syntax errors are never raised; they are returned in
    `ParseResult.errors` next to every statement that could still be
    assembled.
    """
    return Parser(source).parse_program()
