"""Half-edge mesh pieces: vertices, directed edges and vertex parentage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from .vector3 import Vector3


class EdgeVertex:
    """A mesh vertex with the index it had in its source file."""

    def __init__(self, index: int, position: Sequence[float]) -> None:
        self.index = index
        self.set(position)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def z(self) -> float:
        return self.position.z

    def set(self, position: Sequence[float]) -> None:
        """Move the vertex to ``position``."""
        x, y, z = position
        self.position = Vector3(float(x), float(y), float(z))

    def __repr__(self) -> str:
        return f"EdgeVertex({self.index}, {tuple(self.position)!r})"


@dataclass(frozen=True, order=True)
class PEdge:
    """An edge given by a pair of particle indices, ordered lexicographically."""

    first: int = 0
    second: int = 0


class ParticleEdge:
    """A directed half-edge belonging to one triangle."""

    def __init__(self, vertex: EdgeVertex, triangle: Any) -> None:
        if vertex is None:
            raise ValueError("a half-edge needs a vertex")
        self.vertex = vertex
        self.triangle = triangle
        self.next: Optional[ParticleEdge] = None
        self.opposite: Optional[ParticleEdge] = None
        self.crease = 0.0
        self.p_edge = PEdge()

    def _following(self) -> ParticleEdge:
        if self.next is None:
            raise ValueError("half-edge has no next edge")
        return self.next

    @staticmethod
    def extract_func(edge: ParticleEdge) -> Tuple[int, int, int]:
        """Bag key of an edge: the indices of its two end vertices."""
        start = edge._following()._following().vertex
        return (edge.vertex.index, start.index, 0)

    def endpoint(self, i: int) -> EdgeVertex:
        """Vertex 0 is this edge's vertex; vertex 1 is that of the edge two steps on."""
        if i == 0:
            return self.vertex
        if i == 1:
            return self._following()._following().vertex
        raise IndexError(f"edge endpoint {i} out of range")

    def set_opposite(self, other: ParticleEdge) -> None:
        """Pair this edge with ``other``, which must not be paired yet."""
        if other is None:
            raise ValueError("opposite edge is missing")
        if other.opposite is not None:
            raise ValueError("opposite edge is already paired")
        self.opposite = other
        other.opposite = self

    def clear_opposite(self) -> None:
        """Unpair this edge and its opposite."""
        if self.opposite is None:
            return
        if self.opposite.opposite is not self:
            raise ValueError("opposite edges are inconsistent")
        self.opposite.opposite = None
        self.opposite = None

    def set_next(self, other: ParticleEdge) -> None:
        """Link the following edge of the same triangle; may be done once."""
        if self.next is not None:
            raise ValueError("next edge is already set")
        if other is None:
            raise ValueError("next edge is missing")
        if self.triangle is not other.triangle:
            raise ValueError("next edge belongs to another triangle")
        self.next = other

    def __repr__(self) -> str:
        return f"ParticleEdge(vertex={self.vertex.index})"


class VertexParent:
    """Records that vertex ``vertex`` was created between ``p1`` and ``p2``."""

    def __init__(self, p1: EdgeVertex, p2: EdgeVertex, vertex: EdgeVertex) -> None:
        if p1 is None or p2 is None or vertex is None:
            raise ValueError("vertices must not be missing")
        if p1 is p2 or p1 is vertex or p2 is vertex:
            raise ValueError("the three vertices must be distinct")
        self.p1 = p1
        self.p2 = p2
        self.vertex = vertex

    @staticmethod
    def extract_func(parent: VertexParent) -> Tuple[int, int, int]:
        """Bag key: the two parent indices, smaller first."""
        a, b = parent.p1.index, parent.p2.index
        return (min(a, b), max(a, b), 0)

    def __repr__(self) -> str:
        return (
            f"VertexParent({self.p1.index}, {self.p2.index} -> {self.vertex.index})"
        )