"""
Candidate signal graph: one entity node, one node and edge per selected signal.

Edges run candidate -> signal and carry the absolute signal weight (1 when the
weight is 0, so unknown or neutral signals still draw a visible link). Node and
edge order follows the registry catalog, not selection order, so the graph is
reproducible for the same selection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from signal_graph.analysis_engine.signals import SIGNAL_REGISTRY, SignalRegistry
from signal_graph.signal_logging import get_logger

logger = get_logger(__name__)

NODE_KIND_ENTITY = "entity"
NODE_KIND_SIGNAL = "signal"

# Colours used by the force-directed front end
ENTITY_COLOR = "#60a5fa"
SIGNAL_COLOR = "#facc15"


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str
    kind: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "label": self.label, "kind": self.kind}


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    weight: int

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.source, "to": self.target, "weight": self.weight}


@dataclass(frozen=True)
class SignalGraph:
    nodes: tuple[GraphNode, ...] = field(default_factory=tuple)
    edges: tuple[GraphEdge, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Renderer contract: {nodes: [{id, label, kind}], edges: [{from, to, weight}]}."""
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    def to_force_graph(self) -> dict[str, list[dict[str, Any]]]:
        """Payload for force-graph style renderers: nodes with name/color/type, links with source/target/value."""
        return {
            "nodes": [
                {
                    "id": n.id,
                    "name": n.label,
                    "color": ENTITY_COLOR if n.kind == NODE_KIND_ENTITY else SIGNAL_COLOR,
                    "type": n.kind,
                }
                for n in self.nodes
            ],
            "links": [
                {"source": e.source, "target": e.target, "value": e.weight}
                for e in self.edges
            ],
        }


def edge_weight(signal_id: str, registry: SignalRegistry = SIGNAL_REGISTRY) -> int:
    return abs(registry.weight_of(signal_id)) or 1


def build_graph(
    candidate_id: str,
    selection: Iterable[str],
    registry: SignalRegistry = SIGNAL_REGISTRY,
) -> SignalGraph:
    """
    Build the candidate -> signal graph for a selection.

    Args:
        candidate_id: Entity node id and label; also the `from` end of every edge.
        selection: Selected signal ids. Duplicates collapse; unknown ids still get
            a node (labelled with the raw id) and an edge of weight 1.
        registry: Signal catalog; defaults to the process-wide registry.

    Returns:
        SignalGraph with 1 + len(unique ids) nodes and len(unique ids) edges.
    """
    flags = registry.order(selection)
    nodes = [GraphNode(id=candidate_id, label=candidate_id, kind=NODE_KIND_ENTITY)]
    edges = []
    for flag in flags:
        if flag not in registry:
            logger.debug("unknown_signal_reference", signal_id=flag, candidate_id=candidate_id)
        nodes.append(GraphNode(id=flag, label=registry.label_of(flag), kind=NODE_KIND_SIGNAL))
        edges.append(GraphEdge(source=candidate_id, target=flag, weight=edge_weight(flag, registry)))
    return SignalGraph(nodes=tuple(nodes), edges=tuple(edges))
