from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
import io
from typing import Protocol

from design_patterns.core.errors.exceptions import RenderFailure

DEFAULT_INDENT_WIDTH = 4


class EntryWriter(Protocol):
    def write(self, s: str, /) -> object: ...


@dataclass(frozen=True)
class WriteOpts:
    # Nesting depth of the entry; sets the indent of the written line
    level: int = 0
    indent_width: int = DEFAULT_INDENT_WIDTH

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError(f"level must be >= 0, got {self.level}")
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be >= 0, got {self.indent_width}")

    def nested(self) -> WriteOpts:
        return replace(self, level=self.level + 1)


def format_entry(name: str, opts: WriteOpts) -> str:
    """Format a single tree entry: the name shifted by the nesting level."""
    return f"{' ' * (opts.indent_width * opts.level)}{name}\n"


def _write(writer: EntryWriter, text: str, name: str, opts: WriteOpts) -> None:
    try:
        writer.write(text)
    except (OSError, ValueError) as e:
        raise RenderFailure(
            f"Failed to write entry '{name}': {e}",
            {"entry": name, "level": opts.level},
        ) from e


class Node(ABC):
    """
    A tree entry that can copy itself and write itself out as indented text.

    The variants are fixed: ``File`` and ``Folder``.
    """

    name: str
    _owned: bool

    @abstractmethod
    def clone(self) -> Node:
        """Return a deep copy sharing no node with the original."""
        raise NotImplementedError

    @abstractmethod
    def write_entry(self, writer: EntryWriter, opts: WriteOpts) -> None:
        """Write the entry (and its children) to ``writer``."""
        raise NotImplementedError

    @abstractmethod
    def walk(self) -> Iterator[Node]:
        """Yield this node and then every descendant, depth first."""
        raise NotImplementedError

    def render(self, level: int = 0, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
        buffer = io.StringIO()
        self.write_entry(buffer, WriteOpts(level=level, indent_width=indent_width))
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render()


class File(Node):
    __slots__ = ("name", "_owned")

    def __init__(self, name: str) -> None:
        self.name = name
        self._owned = False

    def clone(self) -> File:
        return File(self.name)

    def write_entry(self, writer: EntryWriter, opts: WriteOpts) -> None:
        _write(writer, format_entry(self.name, opts), self.name, opts)

    def walk(self) -> Iterator[Node]:
        yield self

    def __repr__(self) -> str:
        return f"File(name={self.name!r})"


class Folder(Node):
    """
    A named container of child nodes.

    Every child belongs to exactly one folder: a node already placed in a
    folder, or listed twice, is rejected with ValueError.
    """

    __slots__ = ("name", "children", "_owned")

    def __init__(self, name: str, children: Iterable[Node] = ()) -> None:
        nodes = tuple(children)
        seen: set[int] = set()
        for child in nodes:
            if child._owned or id(child) in seen:
                raise ValueError(
                    f"Node '{child.name}' already belongs to a folder; clone it instead"
                )
            seen.add(id(child))
        for child in nodes:
            child._owned = True

        self.name = name
        self.children: tuple[Node, ...] = nodes
        self._owned = False

    def clone(self) -> Folder:
        return Folder(self.name, [child.clone() for child in self.children])

    def write_entry(self, writer: EntryWriter, opts: WriteOpts) -> None:
        _write(writer, format_entry(self.name, opts), self.name, opts)

        child_opts = opts.nested()
        for child in self.children:
            child.write_entry(writer, child_opts)

    def walk(self) -> Iterator[Node]:
        yield self
        for child in self.children:
            yield from child.walk()

    def __repr__(self) -> str:
        return f"Folder(name={self.name!r}, children={list(self.children)!r})"
