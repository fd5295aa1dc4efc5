#
# src/treerun/tree.py
#
"""
The test tree: an immutable description of a suite's shape.

A tree is built from three variants: a `Case` holding a zero-argument body,
a `TestList` grouping children without naming them, and a `Labeled` node
adding one path segment to everything beneath it.
"""

from collections.abc import Callable, Iterable
from typing import TypeAlias

from attrs import define, field

TestBody: TypeAlias = Callable[[], None]
FlatTest: TypeAlias = tuple[str, TestBody]

NAME_SEPARATOR = "/"


class _TestNode:
    """Builder conveniences shared by every tree variant."""

    __slots__ = ()

    def with_label(self, label: str) -> "Labeled":
        return Labeled(label, self)

    def add(self, other: "Test | TestBody") -> "TestList":
        """Group this test with another test or a bare body."""
        if not isinstance(other, _TestNode):
            other = Case(other)
        return TestList((self, other))


@define(frozen=True, slots=True)
class Case(_TestNode):
    """A single executable test."""

    body: TestBody = field()


@define(frozen=True, slots=True)
class TestList(_TestNode):
    """An unnamed, ordered group of tests."""

    __test__ = False  # keep pytest from collecting this class

    tests: tuple["Test", ...] = field(converter=tuple, factory=tuple)


@define(frozen=True, slots=True)
class Labeled(_TestNode):
    """Attaches a name segment to a subtree."""

    name: str = field()
    child: "Test" = field()


Test: TypeAlias = Case | TestList | Labeled


def case(body: TestBody) -> Case:
    return Case(body)


def labeled(name: str, test: Test) -> Labeled:
    return Labeled(name, test)


def test_list(tests: Iterable[Test]) -> TestList:
    return TestList(tuple(tests))


def testcase(label: str, body: TestBody) -> Labeled:
    """Shorthand for ``labeled(label, case(body))``."""
    return Labeled(label, Case(body))


def testlist(label: str, tests: Iterable[Test]) -> Labeled:
    """Shorthand for ``labeled(label, test_list(tests))``."""
    return Labeled(label, TestList(tuple(tests)))


# Builders whose names start with "test" must not be collected by pytest when
# imported into test modules.
for _builder in (test_list, testcase, testlist):
    _builder.__test__ = False  # type: ignore[attr-defined]


def _join(parent: str, name: str) -> str:
    if not parent:
        return name
    return f"{parent}{NAME_SEPARATOR}{name}"


def flatten(test: Test) -> list[FlatTest]:
    """
    Turns a tree into ``(qualified_name, body)`` pairs in left-to-right order.

    Labels are joined with ``/``. A case without any labeled ancestor gets an
    empty name. Duplicate names are kept as they are.
    """
    flat: list[FlatTest] = []

    def walk(node: Test, path: str) -> None:
        match node:
            case Labeled(name=name, child=child):
                walk(child, _join(path, name))
            case Case(body=body):
                flat.append((path, body))
            case TestList(tests=tests):
                for child in tests:
                    walk(child, path)
            case _:
                raise TypeError(f"Not a test tree node: {node!r}")

    walk(test, "")
    return flat

# 🔼⚙️
