from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Sequence, Tuple

from .exceptions import StackUnderflow, StakError

NativeFunc = Callable[..., Sequence[int]]


class Statement(ABC):
    """A stack transform with a declared stack effect.

    `apply` consumes the top `arguments` values of the stack and pushes
    `results` new ones; everything below is passed through untouched. The
    last element of the list is the top of the stack.
    """

    def __init__(self, arguments: int, results: int, pure: bool):
        if arguments < 0 or results < 0:
            raise ValueError("stack effect counts must be non-negative")
        self._arguments = arguments
        self._results = results
        self._pure = pure

    @property
    def arguments(self) -> int:
        return self._arguments

    @property
    def results(self) -> int:
        return self._results

    @property
    def arity(self) -> Tuple[int, int]:
        return self._arguments, self._results

    def is_pure(self) -> bool:
        return self._pure

    @abstractmethod
    def apply(self, stack: Sequence[int]) -> List[int]: ...

    def steps(self) -> Tuple["Statement", ...]:
        """Children when pipeline-shaped, otherwise the statement itself."""
        return (self,)

    def then(self, other: "Statement") -> "Pipeline":
        return Pipeline(self.steps()).then(other)

    def __or__(self, other: "Statement") -> "Pipeline":
        if not isinstance(other, Statement):
            return NotImplemented
        return self.then(other)

    def _require(self, stack: Sequence[int]) -> None:
        if len(stack) < self._arguments:
            text = str(self)
            if len(text) > 40:
                text = text[:37] + "..."
            raise StackUnderflow(self._arguments, len(stack), what=f"'{text}'")


class Literal(Statement):
    """Pushes one constant."""

    def __init__(self, value: int):
        super().__init__(0, 1, True)
        self._value = int(value)

    @property
    def value(self) -> int:
        return self._value

    def apply(self, stack: Sequence[int]) -> List[int]:
        out = list(stack)
        out.append(self._value)
        return out

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Literal({self._value})"


class Primitive(Statement):
    """A fixed-arity native operation identified by its mnemonic."""

    def __init__(
        self, mnemonic: str, arguments: int, results: int, pure: bool, func: NativeFunc
    ):
        super().__init__(arguments, results, pure)
        self._mnemonic = mnemonic
        self._func = func

    @property
    def mnemonic(self) -> str:
        return self._mnemonic

    def apply(self, stack: Sequence[int]) -> List[int]:
        self._require(stack)
        out = list(stack)
        split = len(out) - self._arguments
        args = out[split:]
        del out[split:]
        produced = tuple(self._func(*args))
        if len(produced) != self._results:
            raise StakError(
                f"Invocation Error: '{self._mnemonic}' produced {len(produced)} "
                f"value(s), declared {self._results}."
            )
        out.extend(produced)
        return out

    def __str__(self) -> str:
        return self._mnemonic

    def __repr__(self) -> str:
        return (
            f"Primitive({self._mnemonic!r}, arguments={self._arguments}, "
            f"results={self._results}, pure={self._pure})"
        )


class Pipeline(Statement):
    """Ordered composition whose stack effect is derived from its children."""

    def __init__(self, children: Iterable[Statement] = ()):
        super().__init__(0, 0, True)
        self._children: List[Statement] = []
        for child in children:
            self.append(child)

    @property
    def children(self) -> Tuple[Statement, ...]:
        return tuple(self._children)

    def steps(self) -> Tuple[Statement, ...]:
        return tuple(self._children)

    def append(self, child: Statement) -> "Pipeline":
        # Symbolic stack-depth walk: `_results` is what earlier children left
        # on top, `_arguments` the deepest the chain has reached below it.
        needed = child.arguments
        if self._results < needed:
            self._arguments += needed - self._results
            self._results = child.results
        else:
            self._results += child.results - needed
        self._pure = self._pure and child.is_pure()
        self._children.append(child)
        return self

    def extend(self, children: Iterable[Statement]) -> "Pipeline":
        for child in children:
            self.append(child)
        return self

    def copy(self) -> "Pipeline":
        clone = Pipeline()
        clone._arguments = self._arguments
        clone._results = self._results
        clone._pure = self._pure
        clone._children = list(self._children)
        return clone

    def then(self, other: Statement) -> "Pipeline":
        return self.copy().extend(other.steps())

    def apply(self, stack: Sequence[int]) -> List[int]:
        self._require(stack)
        out = list(stack)
        for child in self._children:
            out = child.apply(out)
        return out

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        return True

    def __iter__(self):
        return iter(self._children)

    def __str__(self) -> str:
        return " ".join(str(child) for child in self._children)

    def __repr__(self) -> str:
        return (
            f"Pipeline({str(self)!r}, arguments={self._arguments}, "
            f"results={self._results}, pure={self._pure})"
        )
