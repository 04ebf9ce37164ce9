import logging
from functools import lru_cache
from typing import Optional

from lark import Lark, Token
from lark.visitors import Interpreter

from .catalog import DEFAULT_REGISTRY, BuiltinRegistry
from .exceptions import InvalidLiteral, UnknownToken
from .grammar import STAK_GRAMMAR
from .models import CompileOptions
from .statements import Literal, Pipeline, Statement

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def stak_parser() -> Lark:
    return Lark(STAK_GRAMMAR, parser="lalr")


class Compiler(Interpreter):
    """Turns postfix program text into a Pipeline of literals and registry built-ins."""

    def __init__(
        self,
        registry: Optional[BuiltinRegistry] = None,
        options: Optional[CompileOptions] = None,
    ):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.options = options if options is not None else CompileOptions()

    def compile(self, source: str) -> Pipeline:
        tree = stak_parser().parse(source)
        program = self.visit(tree)
        logger.debug(
            "Compiled %d token(s) into %d step(s): arity %s, pure=%s",
            len(tree.children),
            len(program),
            program.arity,
            program.is_pure(),
        )
        return program

    def start(self, tree) -> Pipeline:
        program = Pipeline()
        for node in tree.children:
            step = self.visit(node)
            if step is not None:
                program.append(step)
        return program

    def literal(self, tree) -> Literal:
        token: Token = tree.children[0]
        try:
            return Literal(int(token))
        except ValueError as e:
            raise InvalidLiteral(str(token), token.line, token.column) from e

    def word(self, tree) -> Optional[Statement]:
        token: Token = tree.children[0]
        name = str(token)
        if name in self.registry:
            return self.registry[name]
        if self.options.strict:
            raise UnknownToken(name, token.line, token.column)
        logger.debug(
            "Dropping unknown token %r at line %s, column %s",
            name,
            token.line,
            token.column,
        )
        return None


def compile_program(
    source: str,
    registry: Optional[BuiltinRegistry] = None,
    strict: bool = False,
) -> Pipeline:
    return Compiler(registry, CompileOptions(strict=strict)).compile(source)
