"""Abstract Syntax Tree (AST) definitions for the Paris language.

Every node records the span of source text it was parsed from. Nodes own
their children; there is no sharing between subtrees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .errors import Span


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class NumericLiteral(Node):
    value: float
    span: Span


@dataclass
class StringLiteral(Node):
    value: str
    span: Span


@dataclass
class BooleanLiteral(Node):
    value: bool
    span: Span


@dataclass
class RangeLiteral(Node):
    start: int
    end: int
    span: Span


@dataclass
class Ident(Node):
    name: str
    span: Span


@dataclass
class Op(Node):
    text: str  # raw run of operator characters
    span: Span


@dataclass
class Call(Node):
    callee: Ident
    args: List[Node]
    span: Span


@dataclass
class While(Node):
    condition: Node
    body: List[Node]
    span: Span


@dataclass
class Variable(Node):
    name: str
    value: Node
    span: Span


LITERALS = (NumericLiteral, StringLiteral, BooleanLiteral, RangeLiteral)
