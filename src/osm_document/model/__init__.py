from .node_model import NodeRow
from .tag_model import TagRow
from .way_model import WayEntities, WayRow

__all__ = [
    "NodeRow",
    "TagRow",
    "WayRow",
    "WayEntities",
]
