import datetime
import os
from collections.abc import Iterable, Sequence
from typing import ClassVar

from lxml import etree

from osm_document.coordinates import format_coordinate
from osm_document.model import NodeRow, WayRow


class OsmDocumentWriter:
    """
    Serializes ways together with the nodes they reference into OSM XML.

    Nodes come first, each distinct node once, in the order in which ways
    reference them. Ways follow, each with its `nd` references in stored order
    and then its tags.
    """

    OSM_VERSION: ClassVar[str] = "0.6"
    DEFAULT_GENERATOR: ClassVar[str] = os.environ.get("OSM_GENERATOR", "OpenRoads")

    def __init__(self, generator: str = DEFAULT_GENERATOR) -> None:
        self._generator = generator

    @staticmethod
    def _format_timestamp(timestamp: datetime.datetime) -> str:
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone(datetime.UTC)

        return timestamp.strftime("%Y-%m-%dT%H:%M:%SZ")

    @classmethod
    def _entity_attributes(cls, entity: NodeRow | WayRow) -> dict[str, str]:
        return {
            "id": str(entity.id),
            "visible": str(entity.visible).lower(),
            "version": str(entity.version),
            "changeset": str(entity.changeset_id),
            "timestamp": cls._format_timestamp(entity.timestamp),
            "user": entity.user,
            "uid": str(entity.uid),
        }

    @staticmethod
    def _get_referenced_nodes(
        nodes: Iterable[NodeRow], ways: Iterable[WayRow]
    ) -> list[NodeRow]:
        nodes_by_id = {node.id: node for node in nodes}

        referenced_nodes: dict[int, NodeRow] = {}
        for way in ways:
            for node_id in way.nodes:
                if node_id in referenced_nodes or node_id not in nodes_by_id:
                    continue
                referenced_nodes[node_id] = nodes_by_id[node_id]

        return list(referenced_nodes.values())

    def _append_node(self, root: etree._Element, node: NodeRow) -> None:
        node_element = etree.SubElement(
            root,
            "node",
            {
                **self._entity_attributes(node),
                "lat": format_coordinate(node.latitude),
                "lon": format_coordinate(node.longitude),
            },
        )

        for tag in node.tags:
            etree.SubElement(node_element, "tag", {"k": tag.k, "v": tag.v})

    def _append_way(self, root: etree._Element, way: WayRow) -> None:
        way_element = etree.SubElement(root, "way", self._entity_attributes(way))

        for node_id in way.nodes:
            etree.SubElement(way_element, "nd", {"ref": str(node_id)})

        for tag in way.tags:
            etree.SubElement(way_element, "tag", {"k": tag.k, "v": tag.v})

    def to_element(
        self, nodes: Sequence[NodeRow], ways: Sequence[WayRow]
    ) -> etree._Element:
        root = etree.Element(
            "osm", {"version": self.OSM_VERSION, "generator": self._generator}
        )

        for node in self._get_referenced_nodes(nodes, ways):
            self._append_node(root, node)

        for way in ways:
            self._append_way(root, way)

        return root

    def write(self, nodes: Sequence[NodeRow], ways: Sequence[WayRow]) -> str:
        return etree.tostring(
            self.to_element(nodes, ways),
            encoding="unicode",
            pretty_print=True,
        )
