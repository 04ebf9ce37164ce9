from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .exceptions import DivisionByZero
from .interfaces import ConsoleInput, InputSource
from .statements import Primitive


def _truncated_divmod(a: int, b: int) -> Tuple[int, int]:
    if b == 0:
        raise DivisionByZero("Arithmetic Error: division by zero.")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


class BuiltinRegistry(Mapping[str, Primitive]):
    """Read-only mnemonic -> Primitive table shared by every program compiled against it."""

    def __init__(self, entries: Mapping[str, Primitive]):
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, mnemonic: str) -> Primitive:
        return self._entries[mnemonic]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"BuiltinRegistry({sorted(self._entries)})"


class StandardCatalog:
    def __init__(self, input_source: InputSource):
        self.input_source = input_source

    def register_into(self, table: Dict[str, Primitive]) -> None:
        table["+"] = Primitive("+", 2, 1, True, lambda a, b: (a + b,))
        table["-"] = Primitive("-", 2, 1, True, lambda a, b: (a - b,))
        table["*"] = Primitive("*", 2, 1, True, lambda a, b: (a * b,))
        table["/"] = Primitive("/", 2, 1, True, self._divide)
        table["%"] = Primitive("%", 2, 1, True, self._remainder)
        table["abs"] = Primitive("abs", 1, 1, True, lambda a: (abs(a),))
        table["input"] = Primitive("input", 0, 1, False, self._input)
        table["dup"] = Primitive("dup", 1, 2, True, lambda a: (a, a))

    @staticmethod
    def _divide(a: int, b: int):
        return (_truncated_divmod(a, b)[0],)

    @staticmethod
    def _remainder(a: int, b: int):
        return (_truncated_divmod(a, b)[1],)

    def _input(self):
        return (self.input_source.read_int(),)


def standard_registry(input_source: Optional[InputSource] = None) -> BuiltinRegistry:
    table: Dict[str, Primitive] = {}
    StandardCatalog(input_source if input_source is not None else ConsoleInput()).register_into(table)
    return BuiltinRegistry(table)


DEFAULT_REGISTRY = standard_registry()
