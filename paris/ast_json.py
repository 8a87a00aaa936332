"""JSON serialization/deserialization for Paris ASTs and values.

This module converts between Paris AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Spans are kept as
``[start, end]`` pairs so that a deserialized program still reports
errors against the right source positions.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Node,
    NumericLiteral,
    StringLiteral,
    BooleanLiteral,
    RangeLiteral,
    Ident,
    Op,
    Call,
    While,
    Variable,
)
from .errors import Span
from .values import Value, Null, String, Number, Boolean, Range


def span_to_obj(span: Span) -> List[int]:
    return [span.start, span.end]


def span_from_obj(o: Any) -> Span:
    start, end = o
    return Span(int(start), int(end))


def program_to_obj(statements: List[Node]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(n) for n in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[Node]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("Invalid program object")
    return [ast_from_obj(n) for n in obj["body"]]


def ast_to_obj(node: Node) -> Dict[str, Any]:
    span = span_to_obj(node.span)
    if isinstance(node, NumericLiteral):
        return {"type": "NumericLiteral", "value": node.value, "span": span}
    if isinstance(node, StringLiteral):
        return {"type": "StringLiteral", "value": node.value, "span": span}
    if isinstance(node, BooleanLiteral):
        return {"type": "BooleanLiteral", "value": node.value, "span": span}
    if isinstance(node, RangeLiteral):
        return {"type": "Range", "start": node.start, "end": node.end, "span": span}
    if isinstance(node, Ident):
        return {"type": "Ident", "name": node.name, "span": span}
    if isinstance(node, Op):
        return {"type": "Op", "text": node.text, "span": span}
    if isinstance(node, Call):
        return {
            "type": "Call",
            "callee": ast_to_obj(node.callee),
            "args": [ast_to_obj(a) for a in node.args],
            "span": span,
        }
    if isinstance(node, While):
        return {
            "type": "While",
            "condition": ast_to_obj(node.condition),
            "body": [ast_to_obj(s) for s in node.body],
            "span": span,
        }
    if isinstance(node, Variable):
        return {"type": "Variable", "name": node.name, "value": ast_to_obj(node.value), "span": span}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Node:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    span = span_from_obj(obj["span"])
    if t == "NumericLiteral":
        return NumericLiteral(value=float(obj["value"]), span=span)
    if t == "StringLiteral":
        return StringLiteral(value=obj["value"], span=span)
    if t == "BooleanLiteral":
        return BooleanLiteral(value=bool(obj["value"]), span=span)
    if t == "Range":
        return RangeLiteral(start=int(obj["start"]), end=int(obj["end"]), span=span)
    if t == "Ident":
        return Ident(name=obj["name"], span=span)
    if t == "Op":
        return Op(text=obj["text"], span=span)
    if t == "Call":
        callee = ast_from_obj(obj["callee"])
        if not isinstance(callee, Ident):
            raise ValueError("Call callee must be an Ident")
        return Call(callee=callee, args=[ast_from_obj(a) for a in obj["args"]], span=span)
    if t == "While":
        return While(
            condition=ast_from_obj(obj["condition"]),
            body=[ast_from_obj(s) for s in obj["body"]],
            span=span,
        )
    if t == "Variable":
        return Variable(name=obj["name"], value=ast_from_obj(obj["value"]), span=span)

    raise ValueError(f"Unknown AST node type: {t}")


def value_to_obj(value: Value) -> Dict[str, Any]:
    if isinstance(value, Null):
        return {"type": "Null"}
    if isinstance(value, String):
        return {"type": "String", "value": value.value}
    if isinstance(value, Number):
        return {"type": "Number", "value": value.value}
    if isinstance(value, Boolean):
        return {"type": "Boolean", "value": value.value}
    if isinstance(value, Range):
        return {"type": "Range", "start": value.start, "end": value.end}

    raise TypeError(f"Unsupported value for serialization: {type(value).__name__}")


def value_from_obj(obj: Dict[str, Any]) -> Value:
    t = obj.get("type")
    if t == "Null":
        return Null()
    if t == "String":
        return String(obj["value"])
    if t == "Number":
        return Number(float(obj["value"]))
    if t == "Boolean":
        return Boolean(bool(obj["value"]))
    if t == "Range":
        return Range(int(obj["start"]), int(obj["end"]))

    raise ValueError(f"Unknown value type: {t}")
