from .grammar import STAK_GRAMMAR
from .exceptions import (
    StakError,
    StackUnderflow,
    DivisionByZero,
    MalformedInput,
    UnknownToken,
    InvalidLiteral,
    ConfigError,
)
from .interfaces import InputSource, StreamInput, ConsoleInput
from .models import CompileOptions
from .config import load_config, find_config
from .statements import Statement, Literal, Primitive, Pipeline
from .catalog import BuiltinRegistry, StandardCatalog, standard_registry, DEFAULT_REGISTRY
from .compiler import Compiler, compile_program
from .disassembler import disassemble

__all__ = [
    "STAK_GRAMMAR",
    "StakError",
    "StackUnderflow",
    "DivisionByZero",
    "MalformedInput",
    "UnknownToken",
    "InvalidLiteral",
    "ConfigError",
    "InputSource",
    "StreamInput",
    "ConsoleInput",
    "CompileOptions",
    "load_config",
    "find_config",
    "Statement",
    "Literal",
    "Primitive",
    "Pipeline",
    "BuiltinRegistry",
    "StandardCatalog",
    "standard_registry",
    "DEFAULT_REGISTRY",
    "Compiler",
    "compile_program",
    "disassemble",
]
