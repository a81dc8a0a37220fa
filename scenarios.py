"""
Counting consonants across a list of names, written in several styles.

Every scenario strips the lowercase vowels from each name, takes the length
of what is left and sums those lengths. They differ only in how the three
steps are expressed: a plain loop, lambdas, named function values, plain
functions referenced by name, hand-written function objects, the builtin
``map``/``functools.reduce`` pair, and the lazy ``Pipeline`` from ``lazy``.
"""

import re
from functools import reduce
from typing import Callable, Dict, Sequence

from lazy import BinaryOperator, Function, Option, Pipeline, from_sequence

VOWELS = re.compile("[aeiou]")


def devowelize(name: str) -> str:
    """Strip all (lower case) vowels"""
    return VOWELS.sub("", name)


def length_of(text: str) -> int:
    return len(text)


def add(a: int, b: int) -> int:
    return a + b


class ConsonantMethods:
    """The three steps as static methods, usable by reference."""

    @staticmethod
    def devowelize(s: str) -> str:
        return VOWELS.sub("", s)

    @staticmethod
    def length_of(s: str) -> int:
        return len(s)

    @staticmethod
    def accumulate(a: int, b: int) -> int:
        return a + b


class Devowelizer(Function[str, str]):
    def apply(self, value: str) -> str:
        return VOWELS.sub("", value)


class LengthMapper(Function[str, int]):
    def apply(self, value: str) -> int:
        return len(value)


class Accumulator(BinaryOperator[int]):
    def apply(self, left: int, right: int) -> int:
        return left + right


# --------- scenarios ----------

def how_many_consonants_procedural(names: Sequence[str]) -> int:
    out = 0
    for name in names:
        consonants = VOWELS.sub("", name)
        length = len(consonants)
        out += length
    return out


def how_many_consonants(names: Sequence[str]) -> int:
    return (
        from_sequence(names)
        .map(lambda p: VOWELS.sub("", p))   # strip all (lower case) vowels from each name
        .map(lambda a: len(a))              # count the length of the remaining word
        .reduce(lambda a, b: a + b)         # sum each of the previously computed lengths
        .get()
    )


def how_many_consonants_with_annotations(names: Sequence[str]) -> int:
    strip: Callable[[str], str] = lambda p: VOWELS.sub("", p)
    measure: Callable[[str], int] = lambda a: len(a)
    total: Callable[[int, int], int] = lambda a, b: a + b
    pipeline: Pipeline[str] = from_sequence(names)
    return pipeline.map(strip).map(measure).reduce(total).get()


def how_many_consonants_with_name(names: Sequence[str]) -> int:
    accumulator = lambda a, b: a + b
    length_mapper = lambda a: len(a)
    devowelizer_mapper = lambda p: VOWELS.sub("", p)

    return (
        from_sequence(names)
        .map(devowelizer_mapper)
        .map(length_mapper)
        .reduce(accumulator)
        .get()
    )


def each_step_of_how_many_consonants(names: Sequence[str]) -> int:
    pipeline: Pipeline[str] = from_sequence(names)
    devowelized: Pipeline[str] = pipeline.map(devowelize)
    lengths: Pipeline[int] = devowelized.map(length_of)
    reduced: Option[int] = lengths.reduce(add)
    return reduced.get()


def how_many_consonants_with_method_references(names: Sequence[str]) -> int:
    return (
        from_sequence(names)
        .map(ConsonantMethods.devowelize)
        .map(ConsonantMethods.length_of)
        .reduce(ConsonantMethods.accumulate)
        .get()
    )


def how_many_consonants_with_function_objects(names: Sequence[str]) -> int:
    return (
        from_sequence(names)
        .map(Function.of(lambda p: VOWELS.sub("", p)))
        .map(Function.of(len))
        .reduce(BinaryOperator.of(lambda a, b: a + b))
        .get()
    )


def how_many_consonants_with_named_function_objects(names: Sequence[str]) -> int:
    devowelizer, length_mapper, accumulator = Devowelizer(), LengthMapper(), Accumulator()
    return (
        from_sequence(names)
        .map(devowelizer)
        .map(length_mapper)
        .reduce(accumulator)
        .get()
    )


def how_many_consonants_native(names: Sequence[str]) -> int:
    # builtin map is lazy too; the 0 seed makes an empty list count as 0
    return reduce(add, map(length_of, map(devowelize, names)), 0)


SCENARIOS: Dict[str, Callable[[Sequence[str]], int]] = {
    fn.__name__: fn
    for fn in (
        how_many_consonants_procedural,
        how_many_consonants,
        how_many_consonants_with_annotations,
        how_many_consonants_with_name,
        each_step_of_how_many_consonants,
        how_many_consonants_with_method_references,
        how_many_consonants_with_function_objects,
        how_many_consonants_with_named_function_objects,
        how_many_consonants_native,
    )
}
