import datetime
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Response
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from database_client import ChangesetCreateRequest, ChangesetNotCreated, DatabaseClient
from field_data import (
    FeatureCollection,
    GroupedFeatureCollections,
    MalformedGeometryError,
    filter_existing_ids,
    group_geometries_by_id,
    make_geometries_feature_collection,
    map_existing_ids,
)
from osm_document import (
    EmptyWayError,
    OsmDocumentWriter,
    WayNotFound,
    attach_tags,
    get_bounding_box,
)
from validators import (
    validate_road_ids,
    validate_vpromms_id,
    validate_way_id,
    validate_way_ids,
)

app = FastAPI()
app.add_middleware(GZipMiddleware)

logger = logging.getLogger(__name__)
osm_document_writer = OsmDocumentWriter()


@contextmanager
def _database_errors(description: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Database query failed: %s", description, exc_info=exc)
        raise HTTPException(500, "Database query failed")


@app.get("/field/{ids}/geometries")
def field_geometries(
    road_ids: list[str] = Depends(validate_road_ids),
) -> GroupedFeatureCollections:
    """
    Returns field data geometries of each road ID, grouped by source
    (RoadLabPro or RouteShoot).
    """
    with _database_errors(f"field geometries of {road_ids}"):
        rows = DatabaseClient.get_field_geometries(road_ids)

    try:
        return group_geometries_by_id(rows)
    except MalformedGeometryError as exc:
        raise HTTPException(400, str(exc))


@app.get("/field/{ids}/geometries/flat")
def field_geometries_flat(
    road_ids: list[str] = Depends(validate_road_ids),
) -> FeatureCollection:
    """
    Returns field data geometries of all road IDs as a single feature collection.
    """
    with _database_errors(f"field geometries of {road_ids}"):
        rows = DatabaseClient.get_field_geometries(road_ids)

    try:
        return make_geometries_feature_collection(rows)
    except MalformedGeometryError as exc:
        raise HTTPException(400, str(exc))


@app.get("/field/{ids}/exists")
def field_ids_exist(road_ids: list[str] = Depends(validate_road_ids)) -> list[str]:
    """
    Returns requested road IDs which have field data.
    """
    with _database_errors(f"existing road IDs of {road_ids}"):
        existing_rows = DatabaseClient.get_existing_road_ids(road_ids)

    return filter_existing_ids(existing_rows, road_ids)


@app.get("/field/{ids}/exists/map")
def field_ids_exist_map(
    road_ids: list[str] = Depends(validate_road_ids),
) -> list[dict[str, bool]]:
    """
    Returns `{road_id: has_field_data}` for every requested road ID.
    """
    with _database_errors(f"existing road IDs of {road_ids}"):
        existing_rows = DatabaseClient.get_existing_road_ids(road_ids)

    return map_existing_ids(existing_rows, road_ids)


def _get_ways_xml_response(way_ids: list[int], download: bool) -> Response:
    with _database_errors(f"ways {way_ids}"):
        way_entities = DatabaseClient.get_ways(way_ids)

    if not way_entities.ways:
        raise HTTPException(404, str(WayNotFound(way_ids)))

    ways = attach_tags(way_entities.ways, way_entities.way_tags, "way_id")
    content = osm_document_writer.write(way_entities.nodes, ways)

    headers = {}
    if download:
        file_name = f"way-{'-'.join(map(str, way_ids))}.osm"
        headers["Content-Disposition"] = f'attachment; filename="{file_name}"'

    return Response(content=content, media_type="text/xml", headers=headers)


@app.get("/xml/way/{way_id}")
@app.get("/xml/way/{way_id}/full")
def way_xml(
    parsed_way_id: int = Depends(validate_way_id),
    download: bool = Query(False),
) -> Response:
    """
    Returns OSM XML of the requested way along with all nodes of that way.
    """
    return _get_ways_xml_response([parsed_way_id], download)


@app.get("/xml/ways/{way_ids}")
def ways_xml(
    parsed_way_ids: list[int] = Depends(validate_way_ids),
    download: bool = Query(False),
) -> Response:
    """
    Returns OSM XML of the requested comma separated ways.
    """
    return _get_ways_xml_response(parsed_way_ids, download)


@app.get("/xml/way/{vpromms_id}/bbox")
def way_bbox(
    vpromms_id: str = Depends(validate_vpromms_id),
) -> dict[str, list[float]]:
    """
    Returns bounding box `[min_lon, min_lat, max_lon, max_lat]` of the way
    tagged with the given VProMMs ID.
    """
    with _database_errors(f"way with VProMMs ID {vpromms_id}"):
        way_id = DatabaseClient.get_way_id_by_tag_value(vpromms_id)

    if way_id is None:
        raise HTTPException(404, f"Way with VProMMs ID {vpromms_id} not found")

    with _database_errors(f"way {way_id}"):
        way_entities = DatabaseClient.get_ways([way_id])

    nodes_by_id = {node.id: node for node in way_entities.nodes}
    way_nodes = [
        nodes_by_id[node_id]
        for way in way_entities.ways
        for node_id in way.nodes
        if node_id in nodes_by_id
    ]

    try:
        bounding_box = get_bounding_box(way_nodes, way_id)
    except EmptyWayError as exc:
        raise HTTPException(400, str(exc))

    return {vpromms_id: list(bounding_box)}


@app.put("/api/0.6/changeset/create", response_class=PlainTextResponse)
def changeset_create(request: ChangesetCreateRequest) -> str:
    """
    Creates a new changeset for the given user and returns its ID.
    The user is created first if it does not exist yet.
    """
    if not request.uid or not request.user:
        raise HTTPException(
            400, "A new changeset must include a user id and a username."
        )

    try:
        with _database_errors(f"create changeset for user {request.uid}"):
            changeset_id = DatabaseClient.create_changeset(
                request, datetime.datetime.now(datetime.UTC)
            )
    except ChangesetNotCreated as exc:
        logger.error(str(exc))
        raise HTTPException(500, str(exc))

    return str(changeset_id)


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.environ.get("APP_HOST", "127.0.0.1"),
        port=int(os.environ.get("APP_PORT", 8000)),
    )
