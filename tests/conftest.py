import datetime

import pytest

from field_data import FieldGeometryRow, Source
from osm_document import NodeRow, TagRow, WayEntities, WayRow

TIMESTAMP = datetime.datetime(2015, 3, 11, 9, 38, 41, tzinfo=datetime.UTC)


def make_node(node_id: int, latitude: int, longitude: int) -> NodeRow:
    return NodeRow(
        id=node_id,
        latitude=latitude,
        longitude=longitude,
        timestamp=TIMESTAMP,
        user="OpenRoads",
        uid=1,
    )


def make_way(way_id: int, nodes: list[int]) -> WayRow:
    return WayRow(
        id=way_id, timestamp=TIMESTAMP, user="OpenRoads", uid=1, nodes=nodes
    )


@pytest.fixture
def way_nodes() -> list[NodeRow]:
    return [
        make_node(27, 97879030, 1239396170),
        make_node(28, 97880830, 1239396790),
        make_node(29, 97875000, 1239401000),
    ]


@pytest.fixture
def way_entities(way_nodes: list[NodeRow]) -> WayEntities:
    return WayEntities(
        ways=[make_way(26, [27, 28, 29])],
        nodes=way_nodes,
        way_tags=[
            TagRow(k="highway", v="unclassified", way_id=26),
            TagRow(k="or_rdclass", v="barangay", way_id=26),
        ],
    )


@pytest.fixture
def field_geometry_rows() -> list[FieldGeometryRow]:
    return [
        FieldGeometryRow(
            road_id="212TX00013",
            source=Source.ROAD_LAB_PRO,
            geometry='{"type":"LineString","coordinates":[[105.1,21.2],[105.2,21.3]]}',
        ),
        FieldGeometryRow(
            road_id="212TX00013",
            source=Source.ROUTE_SHOOT,
            geometry='{"type":"Point","coordinates":[105.15,21.25]}',
        ),
        FieldGeometryRow(
            road_id="024LC00002",
            source=Source.ROUTE_SHOOT,
            geometry='{"type":"Point","coordinates":[104.0,22.0]}',
        ),
        FieldGeometryRow(
            road_id="212TX00013",
            source=Source.ROAD_LAB_PRO,
            geometry='{"type":"Point","coordinates":[105.3,21.4]}',
        ),
    ]
