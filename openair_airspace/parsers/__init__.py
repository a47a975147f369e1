from .tokenizer import Command, CommandToken, OpenAirTokenizer
from .interpreter import BlockAccumulator, CommandInterpreter, InterpreterContext
from .openair_parser import OpenAirParser, parse

__all__ = [
    'Command',
    'CommandToken',
    'OpenAirTokenizer',
    'BlockAccumulator',
    'CommandInterpreter',
    'InterpreterContext',
    'OpenAirParser',
    'parse',
]
