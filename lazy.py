"""
Minimal lazy pipeline and functional interfaces.

A small stand-in for a native stream library: a pipeline wraps an immutable
backing sequence plus a chain of pending transforms, and only does work when
a terminal operation (``reduce``, ``to_list``, ``count``) walks it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')

_MISSING = object()


class NoSuchElementError(LookupError):
    """Raised when the value of an empty Option is requested."""
    pass


# --------- functional interfaces ----------

class Function(ABC, Generic[T, R]):
    """Function object taking one argument, in the spirit of a one-method interface."""

    @abstractmethod
    def apply(self, value: T) -> R:
        """Applies this function to the given argument"""

    def __call__(self, value: T) -> R:
        return self.apply(value)

    @staticmethod
    def of(fn: Callable[[T], R]) -> 'Function[T, R]':
        """Wrap a plain callable as a Function object"""
        return _CallableFunction(fn)


class BinaryOperator(ABC, Generic[T]):
    """Function object combining two values of the same type into one."""

    @abstractmethod
    def apply(self, left: T, right: T) -> T:
        """Applies this operator to the given arguments"""

    def __call__(self, left: T, right: T) -> T:
        return self.apply(left, right)

    @staticmethod
    def of(fn: Callable[[T, T], T]) -> 'BinaryOperator[T]':
        """Wrap a plain two-argument callable as a BinaryOperator"""
        return _CallableOperator(fn)


class _CallableFunction(Function[T, R]):
    def __init__(self, fn):
        self._fn = fn

    def apply(self, value):
        return self._fn(value)


class _CallableOperator(BinaryOperator[T]):
    def __init__(self, fn):
        self._fn = fn

    def apply(self, left, right):
        return self._fn(left, right)


# --------- optional result ----------

class Option(Generic[T]):
    """
    A container that holds either one value or nothing.

    ``None`` is a legitimate present value; emptiness is tracked separately.
    """
    __slots__ = ('_value', '_present')

    def __init__(self, value: Any = _MISSING):
        self._present = value is not _MISSING
        self._value = value if self._present else None

    @classmethod
    def of(cls, value: T) -> 'Option[T]':
        return cls(value)

    @classmethod
    def empty(cls) -> 'Option[T]':
        return cls()

    def is_present(self) -> bool:
        return self._present

    def get(self) -> T:
        """Return the contained value, failing loudly when there is none"""
        if not self._present:
            raise NoSuchElementError("No value present")
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented
        return self._present == other._present and self._value == other._value

    def __hash__(self):
        return hash((self._present, self._value))

    def __repr__(self):
        if self._present:
            return f"Option({self._value!r})"
        return "Option.empty()"


# --------- pipeline ----------

class Pipeline(Generic[T]):
    """
    A chainable, lazy sequence over a fixed backing tuple. Transforms are
    recorded and applied only when a terminal operation iterates.

    Every ``map`` returns a new pipeline; the receiver is never mutated and
    can be transformed or reduced again.
    """

    def __init__(self, source: Iterable[T], ops: Tuple[Callable[[Any], Any], ...] = ()):
        self._source: Tuple[T, ...] = tuple(source)
        self._ops = tuple(ops)         # pending transforms, applied in order

    @classmethod
    def from_sequence(cls, seq: Iterable[T]) -> 'Pipeline[T]':
        """Wrap an ordered sequence; an empty one gives an empty pipeline"""
        return cls(seq)

    # --------- chainable operators (lazy) ----------
    def map(self, fn: Callable[[T], R]) -> 'Pipeline[R]':
        """Return a pipeline of ``fn`` applied to each element, in order"""
        return self._with_op(fn)

    # --------- reducing operations (force evaluation) ----------
    def reduce(self, op: Callable[[T, T], T], identity: Any = _MISSING):
        """
        Fold the elements left to right with ``op(accumulator, element)``.

        With ``identity`` the fold starts from it and the folded value is
        returned; an empty pipeline returns ``identity`` unchanged. Without
        it the first element seeds the fold and the result comes back as an
        Option, empty when there are no elements.

        ``op`` is expected to be associative. This is not checked: a
        non-associative operator simply yields the left-fold result.
        """
        if identity is not _MISSING:
            result = identity
            for element in self:
                result = op(result, element)
            logger.debug(f"reduce with identity over {len(self._source)} source items -> {result!r}")
            return result

        found_any = False
        result = None
        for element in self:
            if not found_any:
                found_any = True
                result = element
            else:
                result = op(result, element)
        logger.debug(f"reduce over {len(self._source)} source items, present={found_any}")
        return Option(result) if found_any else Option()

    def count(self) -> int:
        """Return the count of elements"""
        count = 0
        for _ in self:
            count += 1
        return count

    def to_list(self) -> List[T]:
        return list(self)

    # --------- iterator protocol ----------
    def __iter__(self) -> Iterator[T]:
        it = iter(self._source)
        for fn in self._ops:
            it = map(fn, it)
        yield from it

    def __repr__(self):
        return f"Pipeline(source={len(self._source)} items, pending={len(self._ops)} ops)"

    # --------- helpers ----------
    def _with_op(self, fn):
        # tuple() of a tuple is the same object, so stages share the backing data
        return Pipeline(self._source, self._ops + (fn,))


def from_sequence(seq: Iterable[T]) -> Pipeline[T]:
    """Utility to get a Pipeline from any ordered sequence"""
    return Pipeline.from_sequence(seq)
