"""Tree-walking interpreter for the Paris language.

`Interpreter.evaluate` reduces one spanned AST node to a `Value` against
an `Environment`. `Interpreter.run` drives a whole program: every
top-level statement is evaluated in order against one shared
environment, and an evaluation error only abandons the statement that
raised it.

Loop conditions are dispatched on the kind of value they produce:

* a positive number or ``true`` enters the body and never looks at the
  condition again, so the loop runs until something fails;
* a range ``a..b`` runs the body ``max(b - a, 0)`` times;
* strings, null, zero, negative numbers and ``false`` skip the body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TextIO, Union

from .ast import (
    Node, NumericLiteral, StringLiteral, BooleanLiteral, RangeLiteral,
    Ident, Op, Call, While, Variable,
)
from .environment import Environment
from .errors import (
    EvaluationError, FunctionNotFound, VariableNotFound, Unsupported, ParseError,
)
from .parser import parse_program
from .values import Value, Null, String, Number, Boolean, Range, NULL, type_name

Outcome = Union[Value, EvaluationError]


@dataclass
class BuiltinFunction:
    name: str
    fn: Callable[[List[Value]], Value]

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


@dataclass
class ProgramResult:
    """Everything a caller needs after running a source file."""
    statements: List[Node]
    outcomes: List[Outcome]
    syntax_errors: List[ParseError]
    environment: Environment
    evaluation_errors: List[EvaluationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.syntax_errors and not self.evaluation_errors


class Interpreter:
    """Core interpreter that executes Paris ASTs."""
    def __init__(self, stdout: Optional[TextIO] = None, debug_level: int = 0,
                 debug_file: str = 'debug.txt'):
        self.stdout = stdout
        self.global_env = Environment()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.builtins: Dict[str, BuiltinFunction] = {}
        self.load_builtins()

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, *exc: Any):
        self.close()

    def load_builtins(self):
        def std_display(args: List[Value]) -> Value:
            print(''.join(str(a) for a in args), file=self.stdout)
            return NULL

        self.builtins['display'] = BuiltinFunction('display', std_display)

    # Public API
    def run(self, statements: List[Node], env: Optional[Environment] = None) -> List[Outcome]:
        """Evaluate top-level statements in order, one outcome per statement."""
        if env is None:
            env = self.global_env
        outcomes: List[Outcome] = []
        for stmt in statements:
            try:
                outcomes.append(self.evaluate(stmt, env))
            except EvaluationError as e:
                if self.debug_level >= 1:
                    self.debug(f"error at {e.span!r}: {e}")
                outcomes.append(e)
        return outcomes

    def evaluate(self, node: Node, env: Environment) -> Value:
        if isinstance(node, NumericLiteral):
            return Number(node.value)
        if isinstance(node, StringLiteral):
            return String(node.value)
        if isinstance(node, BooleanLiteral):
            return Boolean(node.value)
        if isinstance(node, RangeLiteral):
            return Range(node.start, node.end)
        if isinstance(node, Ident):
            value = env.get(node.name)
            if value is None:
                raise EvaluationError(VariableNotFound(node.name), node.span)
            return value
        if isinstance(node, Variable):
            value = self.evaluate(node.value, env)
            env.set(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"bind {node.name}: {type_name(value)} = {value}")
            return NULL
        if isinstance(node, Call):
            return self.call_function(node, env)
        if isinstance(node, While):
            return self.execute_while(node, env)
        if isinstance(node, Op):
            raise EvaluationError(Unsupported(f"operator {node.text!r}"), node.span)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def call_function(self, node: Call, env: Environment) -> Value:
        name = node.callee.name
        func = self.builtins.get(name)
        if func is None:
            raise EvaluationError(FunctionNotFound(name), node.callee.span)
        args = [self.evaluate(arg, env) for arg in node.args]
        if self.debug_level >= 2:
            self.debug(f"call {name} with {len(args)} argument(s)")
        func.fn(args)
        return NULL

    def execute_block(self, statements: List[Node], env: Environment):
        for stmt in statements:
            self.evaluate(stmt, env)

    def execute_while(self, node: While, env: Environment) -> Value:
        condition = self.evaluate(node.condition, env)
        if self.debug_level >= 3:
            self.debug(f"while condition {type_name(condition)} {condition}")
        if isinstance(condition, Number):
            if condition.value > 0:
                self.loop_forever(node.body, env)
        elif isinstance(condition, Boolean):
            if condition.value:
                self.loop_forever(node.body, env)
        elif isinstance(condition, Range):
            for _ in range(condition.iterations):
                self.execute_block(node.body, env)
        elif isinstance(condition, (String, Null)):
            pass
        else:
            raise NotImplementedError(f"while: unexpected condition type {type(condition)}")
        return NULL

    def loop_forever(self, body: List[Node], env: Environment):
        # The condition gates entry only; it is not evaluated again.
        while True:
            self.execute_block(body, env)


def evaluate(node: Node, env: Environment, stdout: Optional[TextIO] = None) -> Value:
    """Evaluate a single node with a fresh interpreter."""
    return Interpreter(stdout=stdout).evaluate(node, env)


def run_program(source: str, stdout: Optional[TextIO] = None, debug_level: int = 0,
                env: Optional[Environment] = None) -> ProgramResult:
    """Parse a Paris program and evaluate every statement that survived parsing."""
    parsed = parse_program(source)
    with Interpreter(stdout=stdout, debug_level=debug_level) as interpreter:
        if env is None:
            env = interpreter.global_env
        outcomes = interpreter.run(parsed.statements, env)
    errors = [o for o in outcomes if isinstance(o, EvaluationError)]
    return ProgramResult(parsed.statements, outcomes, parsed.errors, env, errors)
