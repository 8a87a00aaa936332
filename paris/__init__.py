# Paris language package
# This package provides a parser and a tree-walking interpreter for the Paris language.
from .errors import ParseError, EvaluationError
from .interpreter import run_program, evaluate, Interpreter
from .parser import parse_program

__all__ = [
    'run_program',
    'parse_program',
    'evaluate',
    'Interpreter',
    'ParseError',
    'EvaluationError',
]
