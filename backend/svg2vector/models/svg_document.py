"""Parsed SVG document model — group/leaf tree plus diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class Diagnostics:
    """Ordered error and warning log accumulated while parsing.

    Errors block conversion; warnings are informational.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


@dataclass
class LeafNode:
    """Renderable path geometry with mapped VectorDrawable attributes."""

    name: str
    path_data: str = ""
    # Target attribute name → value, in first-write order
    attributes: dict[str, str] = field(default_factory=dict)
    # Upward reference, never ownership
    parent: GroupNode | None = field(default=None, repr=False, compare=False)

    def set_attribute(self, target: str, value: str) -> None:
        self.attributes[target] = value

    def has_content(self) -> bool:
        return bool(self.path_data and self.path_data.strip())


@dataclass
class GroupNode:
    """Structural node for <g> elements; emits no markup of its own."""

    name: str
    children: list[Node] = field(default_factory=list)
    parent: GroupNode | None = field(default=None, repr=False, compare=False)

    def add_child(self, child: Node) -> None:
        child.parent = self
        self.children.append(child)

    def has_content(self) -> bool:
        return bool(self.children)

    def iter_leaves(self) -> Iterator[LeafNode]:
        """Yield leaves depth-first in document order."""
        for child in self.children:
            if isinstance(child, GroupNode):
                yield from child.iter_leaves()
            else:
                yield child


Node = Union[GroupNode, LeafNode]


@dataclass
class SvgDocument:
    """A parsed SVG ready for serialization.

    ``width``/``height`` of 0 mean "unset"; the effective size then falls back
    to the viewBox.
    """

    width: float = 0.0
    height: float = 0.0
    viewbox: tuple[float, float, float, float] | None = None
    root: GroupNode | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    scale_factor: float = 1.0

    @property
    def errors(self) -> list[str]:
        return list(self.diagnostics.errors)

    @property
    def warnings(self) -> list[str]:
        return list(self.diagnostics.warnings)

    def can_convert(self) -> bool:
        return not self.diagnostics.has_errors and self.viewbox is not None

    @property
    def effective_width(self) -> float:
        if self.width > 0:
            return self.width
        return self.viewbox[2] if self.viewbox else 0.0

    @property
    def effective_height(self) -> float:
        if self.height > 0:
            return self.height
        return self.viewbox[3] if self.viewbox else 0.0

    def leaves(self) -> list[LeafNode]:
        if self.root is None:
            return []
        return list(self.root.iter_leaves())
