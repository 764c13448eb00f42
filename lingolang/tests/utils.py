"""
Utility functions shared across Lingo tests.
"""
from lingolang.interpreter import Interpreter, format_value
from lingolang.lexer import tokenize
from lingolang.parser import Parser


def parse_source(source: str, keywords=None):
    """
    Parse source code and return the Program node.
    """
    tokens = tokenize(source, keywords)
    return Parser(tokens).parse()


def run_program(source: str, keywords=None):
    """
    Run source code and return the interpreter and the formatted printed lines.
    """
    printed = []
    interpreter = Interpreter(lambda value: printed.append(format_value(value)))
    interpreter.run(parse_source(source, keywords))
    return interpreter, printed
