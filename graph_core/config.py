"""
Engine settings.

Defaults match the editor's behaviour; pass a customised instance to the
manager or to the spanning-tree entry points to override them.
"""

from enum import Enum

from pydantic import BaseModel, Field


class MSTAlgorithm(str, Enum):
    """Minimum spanning tree algorithms selectable by name."""
    PRIM = "prim"
    KRUSKAL = "kruskal"
    BORUVKA = "boruvka"


class EngineSettings(BaseModel):
    """Tunable limits and defaults for the graph engine."""
    # Exhaustive spanning tree enumeration is combinatorial; refuse above this
    max_enumeration_vertices: int = Field(default=6, ge=1)
    default_mst_algorithm: MSTAlgorithm = MSTAlgorithm.PRIM
    # Bellman-Ford is the only consumer of negative weights
    allow_negative_weights: bool = True
    default_weight: float = 1.0


DEFAULT_SETTINGS = EngineSettings()
