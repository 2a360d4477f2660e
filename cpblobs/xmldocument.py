"""A small, forgiving reader for the tag-based configuration format.

Nodes are identified by their position in the document text: the index of
the first character after a tag's opening ``<``. :data:`ROOT_NODE` is the
start of the document. Tag names are compared without regard to case.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator

ROOT_NODE = 0

_TAG_END = re.compile(r"[ \n\r\t>]")
_BLANKS = frozenset(" \n\r\t")


def _same_tag(left: str, right: str) -> bool:
    return left.lower() == right.lower()


class XmlDocument:
    """An in-memory document walked tag by tag."""

    def __init__(self, text: str) -> None:
        self.text = text

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> XmlDocument:
        """Read a document from a file; an empty file is an error."""
        with open(path, "rb") as handle:
            data = handle.read()
        if not data:
            raise ValueError(f"{os.fspath(path)!s} is empty")
        return cls(data.decode("utf-8", errors="replace"))

    def next_node(self, node: int) -> int | None:
        """Return the node of the next complete tag at or after a position."""
        opening = self.text.find("<", node)
        if opening < 0:
            return None
        if self.text.find(">", opening + 1) < 0:
            return None
        return opening + 1

    def _nodes(self) -> Iterator[int]:
        node = self.next_node(ROOT_NODE)
        while node is not None:
            yield node
            node = self.next_node(node)

    def node_tag(self, node: int) -> str | None:
        """Return the tag name at a node, or None if the tag never ends."""
        match = _TAG_END.search(self.text, node)
        if match is None:
            return None
        return self.text[node:match.start()]

    def child_node(self, node: int, tag: str) -> int | None:
        """Return the first node named tag before the closing tag of node."""
        parent = self.node_tag(node)
        if parent is None:
            raise ValueError(f"no tag at position {node}")
        child = self.next_node(node)
        while child is not None:
            child_tag = self.node_tag(child)
            if child_tag is None:
                return None
            if _same_tag(child_tag, tag):
                return child
            if _same_tag(child_tag[1:], parent):
                return None
            child = self.next_node(child)
        return None

    def node_text(self, node: int) -> str | None:
        """Return the text that follows a node's tag, up to the next ``<``.

        Leading blanks are skipped and text inside nested elements is passed
        over. Returns None when no such text exists.
        """
        doc = self.text
        opens = 1
        elements = 0
        start: int | None = None
        for i in range(node, len(doc) - 1):
            c = doc[i]
            if c == "<":
                opens += 1
                elements += -1 if doc[i + 1] == "/" else 1
            elif c == ">":
                opens -= 1
            elif c in _BLANKS:
                continue
            elif opens == 0 and elements == 0:
                start = i
                break
        if start is None:
            return None
        end = doc.find("<", start)
        if end < 0:
            return ""
        return doc[start:end]

    def iter_nodes(self, tag: str) -> Iterator[int]:
        """Yield, in document order, every node whose tag is named tag."""
        for node in self._nodes():
            current = self.node_tag(node)
            if current is not None and _same_tag(current, tag):
                yield node

    def node_count(self, tag: str) -> int:
        """Return how many nodes in the document are named tag."""
        return sum(1 for _ in self.iter_nodes(tag))