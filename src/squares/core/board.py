"""Board - the fixed lattice of points, shared edges and cells."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

from squares.core.enums import Alignment, Player
from squares.core.types import POINTS_PER_SIDE, EdgeId, Point, is_valid_point


class BoardConfigurationError(ValueError):
    """Raised when a board's topology is inconsistent."""


class Edge:
    """A unit segment between two adjacent lattice points.

    ``activated`` only ever goes from ``False`` to ``True``.
    """

    __slots__ = ("_id", "_origin", "_alignment", "_activated")

    def __init__(self, edge_id: EdgeId, origin: Point, alignment: Alignment) -> None:
        self._id = edge_id
        self._origin = origin
        self._alignment = alignment
        self._activated = False

    @property
    def id(self) -> EdgeId:
        return self._id

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def alignment(self) -> Alignment:
        return self._alignment

    @property
    def activated(self) -> bool:
        return self._activated

    @property
    def end(self) -> Point:
        """Lattice point at the far end of the segment."""
        if self._alignment == Alignment.HORIZONTAL:
            return self._origin.offset(1, 0)
        return self._origin.offset(0, 1)

    def activate(self) -> bool:
        """Mark the edge as claimed. Returns False if it already was."""
        if self._activated:
            return False
        self._activated = True
        return True

    def __repr__(self) -> str:
        kind = "H" if self._alignment == Alignment.HORIZONTAL else "V"
        flag = "*" if self._activated else ""
        return f"Edge#{self._id}({kind}{self._origin}{flag})"


class Cell:
    """A unit square bounded by four shared edges.

    ``edges`` holds handles in the order bottom, top, left, right.
    """

    __slots__ = ("_location", "_edges", "_owner")

    def __init__(
        self, location: Point, edges: tuple[EdgeId, EdgeId, EdgeId, EdgeId]
    ) -> None:
        self._location = location
        self._edges = edges
        self._owner: Player | None = None

    @property
    def location(self) -> Point:
        return self._location

    @property
    def edges(self) -> tuple[EdgeId, EdgeId, EdgeId, EdgeId]:
        return self._edges

    @property
    def owner(self) -> Player | None:
        return self._owner

    @property
    def is_owned(self) -> bool:
        return self._owner is not None

    def claim(self, player: Player) -> bool:
        """Assign the cell to *player* unless it already has an owner."""
        if self._owner is not None:
            return False
        self._owner = player
        return True

    def __repr__(self) -> str:
        owner = f", owner={self._owner.name}" if self._owner is not None else ""
        return f"Cell({self._location}, edges={self._edges}{owner})"


# ── Construction helpers ─────────────────────────────────────────────────────


def _build_edges(points_per_side: int) -> list[Edge]:
    """Edges in arena order: row by row, horizontal before vertical."""
    last = points_per_side - 1
    edges: list[Edge] = []
    for y in range(points_per_side):
        for x in range(points_per_side):
            if x < last:
                edges.append(Edge(len(edges), Point(x, y), Alignment.HORIZONTAL))
            if y < last:
                edges.append(Edge(len(edges), Point(x, y), Alignment.VERTICAL))
    return edges


def _build_cells(points_per_side: int, edges: Sequence[Edge]) -> list[Cell]:
    cells_per_side = points_per_side - 1

    # [y] -> horizontal handles left to right, [y] -> vertical handles rooted on row y
    horizontal_rows: list[list[EdgeId]] = [[] for _ in range(points_per_side)]
    vertical_rows: list[list[EdgeId]] = [[] for _ in range(cells_per_side)]
    for edge in edges:
        if edge.alignment == Alignment.HORIZONTAL:
            horizontal_rows[edge.origin.y].append(edge.id)
        else:
            vertical_rows[edge.origin.y].append(edge.id)

    cells: list[Cell] = []
    for y in range(cells_per_side):
        lower, upper = horizontal_rows[y], horizontal_rows[y + 1]
        columns = vertical_rows[y]
        for x in range(cells_per_side):
            cells.append(
                Cell(Point(x, y), (lower[x], upper[x], columns[x], columns[x + 1]))
            )
    return cells


def validate_topology(
    points_per_side: int, edges: Sequence[Edge], cells: Sequence[Cell]
) -> None:
    """Check that every cell borders the right shared edges.

    Raises:
        BoardConfigurationError: on a dangling handle, mismatched edge
            geometry, or an edge shared by the wrong number of cells.
    """
    last = points_per_side - 1
    expected_edges = 2 * points_per_side * last
    if len(edges) != expected_edges:
        raise BoardConfigurationError(
            f"Expected {expected_edges} edges, got {len(edges)}"
        )
    if len(cells) != last * last:
        raise BoardConfigurationError(f"Expected {last * last} cells, got {len(cells)}")

    for index, edge in enumerate(edges):
        if edge.id != index:
            raise BoardConfigurationError(f"{edge!r} stored at index {index}")

    usage: Counter[EdgeId] = Counter()
    for cell in cells:
        loc = cell.location
        wanted = (
            (loc, Alignment.HORIZONTAL),
            (loc.offset(0, 1), Alignment.HORIZONTAL),
            (loc, Alignment.VERTICAL),
            (loc.offset(1, 0), Alignment.VERTICAL),
        )
        for handle, (origin, alignment) in zip(cell.edges, wanted):
            if not 0 <= handle < len(edges):
                raise BoardConfigurationError(
                    f"{cell!r} references unknown edge {handle}"
                )
            edge = edges[handle]
            if edge.origin != origin or edge.alignment != alignment:
                raise BoardConfigurationError(f"{cell!r} borders misplaced {edge!r}")
            usage[handle] += 1

    for edge in edges:
        if edge.alignment == Alignment.HORIZONTAL:
            on_boundary = edge.origin.y in (0, last)
        else:
            on_boundary = edge.origin.x in (0, last)
        expected = 1 if on_boundary else 2
        if usage[edge.id] != expected:
            raise BoardConfigurationError(
                f"{edge!r} shared by {usage[edge.id]} cells, expected {expected}"
            )


# ── Board ────────────────────────────────────────────────────────────────────


class Board:
    """Square lattice of points with an arena of shared edges and cells.

    Topology is fixed at construction; only ``Edge.activated`` and
    ``Cell.owner`` change afterwards.
    """

    __slots__ = ("_size", "_points", "_edges", "_cells", "_edge_index", "_bordering")

    def __init__(self, points_per_side: int = POINTS_PER_SIDE) -> None:
        if points_per_side < 2:
            raise BoardConfigurationError(
                f"A board needs at least 2 points per side, got {points_per_side}"
            )
        self._size = points_per_side
        self._points: tuple[Point, ...] = tuple(
            Point(x, y) for y in range(points_per_side) for x in range(points_per_side)
        )
        edges = _build_edges(points_per_side)
        cells = _build_cells(points_per_side, edges)
        validate_topology(points_per_side, edges, cells)

        self._edges: tuple[Edge, ...] = tuple(edges)
        self._cells: tuple[Cell, ...] = tuple(cells)
        self._edge_index: dict[tuple[Point, Alignment], EdgeId] = {
            (e.origin, e.alignment): e.id for e in self._edges
        }
        bordering: list[list[Cell]] = [[] for _ in self._edges]
        for cell in self._cells:
            for handle in cell.edges:
                bordering[handle].append(cell)
        self._bordering: tuple[tuple[Cell, ...], ...] = tuple(
            tuple(cells_for_edge) for cells_for_edge in bordering
        )

    # -- Properties ---------------------------------------------------------

    @property
    def points_per_side(self) -> int:
        return self._size

    @property
    def cells_per_side(self) -> int:
        return self._size - 1

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def edges(self) -> tuple[Edge, ...]:
        """All edges in stable arena order."""
        return self._edges

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    # -- Lookup -------------------------------------------------------------

    def edge(self, edge_id: EdgeId) -> Edge:
        if not 0 <= edge_id < len(self._edges):
            raise KeyError(f"No edge with id {edge_id}")
        return self._edges[edge_id]

    def edge_at(self, origin: Point, alignment: Alignment) -> Edge:
        """The edge rooted at *origin* with the given *alignment*."""
        try:
            return self._edges[self._edge_index[(origin, alignment)]]
        except KeyError:
            raise KeyError(f"No {alignment.name.lower()} edge at {origin}") from None

    def cell_at(self, location: Point) -> Cell:
        """The cell whose lower-left corner is *location*."""
        n = self.cells_per_side
        if not is_valid_point(location, n):
            raise ValueError(f"No cell at {location}")
        return self._cells[location.y * n + location.x]

    def cells_bordering(self, edge_id: EdgeId) -> tuple[Cell, ...]:
        """One cell for a boundary edge, two for an interior one."""
        self.edge(edge_id)
        return self._bordering[edge_id]

    def cell_edges(self, cell: Cell) -> tuple[Edge, ...]:
        return tuple(self._edges[handle] for handle in cell.edges)

    # -- Queries ------------------------------------------------------------

    def is_complete(self, cell: Cell) -> bool:
        """Whether all four edges of *cell* are activated."""
        return all(self._edges[handle].activated for handle in cell.edges)

    def unowned_cells(self) -> Iterator[Cell]:
        return (cell for cell in self._cells if cell.owner is None)

    def activated_count(self) -> int:
        return sum(1 for edge in self._edges if edge.activated)

    def owned_count(self) -> int:
        return sum(1 for cell in self._cells if cell.owner is not None)

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        last = self._size - 1
        for y in range(last, -1, -1):
            line: list[str] = []
            for x in range(self._size):
                line.append("+")
                if x < last:
                    h = self.edge_at(Point(x, y), Alignment.HORIZONTAL)
                    line.append("---" if h.activated else "   ")
            rows.append("".join(line))
            if y == 0:
                break
            line = []
            for x in range(self._size):
                v = self.edge_at(Point(x, y - 1), Alignment.VERTICAL)
                line.append("|" if v.activated else " ")
                if x < last:
                    owner = self.cell_at(Point(x, y - 1)).owner
                    line.append(f" {owner.value + 1} " if owner is not None else "   ")
            rows.append("".join(line))
        return "\n".join(rows)
