"""
Module: builder.drawing.catalogue

Purpose:
    Closed catalogue of named visuals. Each identifier enum maps every
    member to a Drawing (space to reserve, routine to call); the mapping
    is checked for completeness at import time. Identifiers outside the
    catalogue render a bracketed placeholder label instead of failing.

Key Functions:
    - lookup(): Drawing for a (kind, ref_id) pair, or None
    - draw_visual(): Reserve space, draw, advance the cursor

Key Classes:
    - DiagramId, TableId, GraphId: Visual identifiers
    - Drawing: Catalogue entry

Dependencies:
    - builder.drawing.diagrams / tables / graphs: Routines
    - builder.layout: LayoutCursor, LayoutEngine

Used By:
    - builder.layout.engine: Visual question parts and MCQ diagrams
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Type

from igcse_toolkit.builder.layout.canvas import PageCanvas
from igcse_toolkit.builder.layout.config import LayoutConfig
from igcse_toolkit.builder.layout.models import LayoutCursor
from igcse_toolkit.core.models import PartKind

from . import diagrams, graphs, tables

if TYPE_CHECKING:
    from igcse_toolkit.builder.layout.engine import LayoutEngine

logger = logging.getLogger(__name__)

DrawRoutine = Callable[[PageCanvas, float, float, LayoutConfig], float]


class DiagramId(str, Enum):
    PLANT_CELL = "plant_cell"
    SIMPLE_CIRCUIT = "simple_circuit"
    GAS_COLLECTION = "gas_collection"
    TRANSPIRATION_SETUP = "transpiration_setup"
    DENSITY_APPARATUS = "density_apparatus"


class TableId(str, Enum):
    STATES_OF_MATTER = "states_of_matter"
    REACTION_TEMPERATURE_TABLE = "reaction_temperature_table"
    FERTILIZER_GROWTH = "fertilizer_growth"


class GraphId(str, Enum):
    ENZYME_TEMPERATURE = "enzyme_temperature"
    ENERGY_PROFILE = "energy_profile"
    RATE_TEMP_GRAPH = "rate_temp_graph"


@dataclass(frozen=True)
class Drawing:
    """
    Catalogue entry.

    Attributes:
        reserve: Height that must fit on the page before drawing (mm)
        draw: Routine drawing at (x, y) and returning the height consumed
    """

    reserve: float
    draw: DrawRoutine


DIAGRAMS: Dict[DiagramId, Drawing] = {
    DiagramId.PLANT_CELL: Drawing(55, diagrams.draw_plant_cell),
    DiagramId.SIMPLE_CIRCUIT: Drawing(45, diagrams.draw_simple_circuit),
    DiagramId.GAS_COLLECTION: Drawing(55, diagrams.draw_gas_collection),
    DiagramId.TRANSPIRATION_SETUP: Drawing(60, diagrams.draw_transpiration_setup),
    DiagramId.DENSITY_APPARATUS: Drawing(55, diagrams.draw_density_apparatus),
}

TABLES: Dict[TableId, Drawing] = {
    TableId.STATES_OF_MATTER: Drawing(40, tables.draw_states_of_matter),
    TableId.REACTION_TEMPERATURE_TABLE: Drawing(45, tables.draw_reaction_temperature_table),
    TableId.FERTILIZER_GROWTH: Drawing(45, tables.draw_fertilizer_growth),
}

GRAPHS: Dict[GraphId, Drawing] = {
    GraphId.ENZYME_TEMPERATURE: Drawing(55, graphs.draw_enzyme_temperature),
    GraphId.ENERGY_PROFILE: Drawing(55, graphs.draw_energy_profile),
    GraphId.RATE_TEMP_GRAPH: Drawing(55, graphs.draw_rate_temp_graph),
}

# kind -> (identifier enum, entries, placeholder label, placeholder advance)
_REGISTRY: Dict[PartKind, tuple] = {
    PartKind.DIAGRAM: (DiagramId, DIAGRAMS, "Diagram", 20.0),
    PartKind.TABLE: (TableId, TABLES, "Table", 15.0),
    PartKind.GRAPH: (GraphId, GRAPHS, "Graph", 20.0),
}

PLACEHOLDER_RESERVE = 10.0


def _check_catalogue() -> None:
    for kind, (id_enum, entries, _label, _advance) in _REGISTRY.items():
        missing = [member.value for member in id_enum if member not in entries]
        if missing:
            raise RuntimeError(f"{kind} catalogue has no routine for: {', '.join(missing)}")


_check_catalogue()


def parse_id(kind: PartKind, ref_id: str) -> Optional[Enum]:
    """Identifier enum member for ref_id, or None when not catalogued."""
    if kind not in _REGISTRY:
        return None
    id_enum: Type[Enum] = _REGISTRY[kind][0]
    try:
        return id_enum(ref_id)
    except ValueError:
        return None


def lookup(kind: PartKind, ref_id: str) -> Optional[Drawing]:
    """
    Catalogue entry for a visual.

    Example:
        >>> lookup(PartKind.DIAGRAM, "plant_cell").reserve
        55
        >>> lookup(PartKind.DIAGRAM, "nonexistent_diagram") is None
        True
    """
    member = parse_id(kind, ref_id)
    if member is None:
        return None
    return _REGISTRY[kind][1][member]


def placeholder_text(kind: PartKind, ref_id: str) -> str:
    label = _REGISTRY[kind][2] if kind in _REGISTRY else "Visual"
    return f"[{label}: {ref_id}]"


def draw_visual(engine: LayoutEngine, cursor: LayoutCursor, kind: PartKind, ref_id: str) -> LayoutCursor:
    """
    Draw a catalogued visual, or a placeholder label for an unknown id.

    Args:
        engine: Layout engine (canvas, config, page breaks)
        cursor: Position before the visual
        kind: diagram, table or graph
        ref_id: Catalogue identifier

    Returns:
        Cursor advanced by the height the visual consumed
    """
    canvas = engine.canvas
    config = engine.config
    entry = lookup(kind, ref_id)

    if entry is None:
        canvas.warn(f"Unknown {kind} id {ref_id!r}, drawing placeholder")
        cursor = engine.ensure_space(cursor, PLACEHOLDER_RESERVE)
        engine.sync(cursor)
        canvas.set_font(config.sans_font, 8)
        canvas.text(config.drawing_x, cursor.y + 10, placeholder_text(kind, ref_id))
        advance = _REGISTRY[kind][3] if kind in _REGISTRY else 20.0
        return cursor.advance(advance)

    cursor = engine.ensure_space(cursor, entry.reserve)
    engine.sync(cursor)
    canvas.set_font(config.sans_font, 8)
    consumed = entry.draw(canvas, config.drawing_x, cursor.y, config)
    logger.debug(f"Drew {kind} {ref_id} ({consumed} mm) on page {cursor.page_index + 1}")
    return cursor.advance(consumed)
