"""Declarative node builder.

A producer is a zero-argument callable. Every ``build`` call made while a
producer runs is attributed to the node whose ``build`` call invoked that
producer, in call order. The attribution uses an explicit stack of children
accumulators owned by a :class:`NodeBuilder` instance, so independent
builders never share state.

Example::

    b = NodeBuilder()

    def items():
        b.build("li", "one")
        b.build("li", "two")

    b.build("ul", {"class": "links"}, items)  # ul -> [li, li]
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import contextmanager
from typing import Iterator, List, Tuple

from .dom_model import DomContent, Node, PropValue

Producer = Callable[[], object]


class NoActiveBuilderContext(RuntimeError):
    """Raised when text is emitted while no node is being assembled."""


class NodeBuilder:
    """Assembly context that collects children for nested ``build`` calls."""

    def __init__(self) -> None:
        self._stack: List[List[DomContent]] = []

    @property
    def depth(self) -> int:
        """Number of producers currently running."""

        return len(self._stack)

    @contextmanager
    def _capture(self) -> Iterator[List[DomContent]]:
        collected: List[DomContent] = []
        self._stack.append(collected)
        try:
            yield collected
        finally:
            self._stack.pop()

    def _emit(self, item: DomContent) -> None:
        if self._stack:
            self._stack[-1].append(item)

    def _run(self, producer: Producer) -> Tuple[DomContent, ...]:
        with self._capture() as collected:
            producer()
        return tuple(collected)

    def build(self, tag: str, *args: object) -> Node:
        """Create one node and attach it to the enclosing producer, if any.

        Accepted shapes: ``build(tag)``, ``build(tag, producer)``,
        ``build(tag, text)``, ``build(tag, props)``,
        ``build(tag, props, producer)`` and ``build(tag, props, text)``.
        """

        props, body = _resolve_args(tag, args)
        if body is None:
            children: Tuple[DomContent, ...] = ()
        elif isinstance(body, str):
            children = (body,)
        else:
            children = self._run(body)
        node = Node(tag=tag, props=props, children=children)
        self._emit(node)
        return node

    def text(self, value: str) -> str:
        """Append a raw text leaf to the node currently being assembled."""

        if not self._stack:
            raise NoActiveBuilderContext(
                "text() called outside of a producer; wrap it in build(tag, producer)"
            )
        if not isinstance(value, str):
            raise TypeError(f"text() expects a string, got {type(value).__name__}")
        self._stack[-1].append(value)
        return value

    def group(self, producer: Producer) -> Tuple[DomContent, ...]:
        """Run ``producer`` and splice its output into the active node.

        No wrapping node is introduced. Outside any assembly the produced
        items are only returned.
        """

        produced = self._run(producer)
        if self._stack:
            self._stack[-1].extend(produced)
        return produced

    def collect(self, producer: Producer) -> Tuple[DomContent, ...]:
        """Run ``producer`` in isolation and return what it built."""

        return self._run(producer)

    def splice(self, items: Tuple[DomContent, ...] | List[DomContent]) -> None:
        """Append prebuilt nodes or text leaves to the active node."""

        if not self._stack:
            raise NoActiveBuilderContext("splice() called outside of a producer")
        for item in items:
            if not isinstance(item, (Node, str)):
                raise TypeError(f"cannot splice {type(item).__name__} into a node")
            self._stack[-1].append(item)


def _resolve_args(tag: str, args: Tuple[object, ...]) -> Tuple[Mapping[str, PropValue], object]:
    if not isinstance(tag, str) or not tag:
        raise TypeError(f"tag must be a non-empty string, got {tag!r}")
    if len(args) > 2:
        raise TypeError(f"build() takes at most 3 arguments ({len(args) + 1} given)")

    props: Mapping[str, PropValue] = {}
    rest = list(args)
    if rest and isinstance(rest[0], Mapping):
        props = rest.pop(0)  # type: ignore[assignment]
    if len(rest) > 1:
        raise TypeError("build() accepts a props mapping followed by one body argument")

    body = rest[0] if rest else None
    if body is not None and not isinstance(body, str) and not callable(body):
        raise TypeError(
            f"build() body must be a producer or a string, got {type(body).__name__}"
        )
    return props, body


__all__ = ["NoActiveBuilderContext", "NodeBuilder", "Producer"]
