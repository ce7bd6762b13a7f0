import datetime
import os
from collections.abc import Sequence
from functools import cache
from typing import ClassVar

from sqlalchemy import Engine, bindparam, create_engine, text

from database_client.exceptions import ChangesetNotCreated
from database_client.model import ChangesetCreateRequest
from field_data import FieldGeometryRow, RoadIdRow
from osm_document import NodeRow, TagRow, WayEntities, WayRow


class DatabaseClient:
    DATABASE_URL: ClassVar[str] = os.environ.get(
        "DATABASE_URL", "postgresql+psycopg2://postgres@localhost:5432/openroads"
    )

    _FIELD_GEOMETRIES_QUERY = text(
        """
        SELECT type AS source, road_id, ST_AsGeoJSON(geom) AS geometry
        FROM field_data_geometries
        WHERE road_id IN :road_ids
        """
    ).bindparams(bindparam("road_ids", expanding=True))

    _EXISTING_ROAD_IDS_QUERY = text(
        """
        SELECT DISTINCT road_id
        FROM field_data_geometries
        WHERE road_id IN :road_ids
        """
    ).bindparams(bindparam("road_ids", expanding=True))

    _WAYS_QUERY = text(
        """
        SELECT w.id, w.visible, w.version, w.changeset_id, w.timestamp,
               COALESCE(u.display_name, '') AS "user", COALESCE(u.id, 0) AS uid
        FROM current_ways AS w
        LEFT JOIN changesets AS c ON c.id = w.changeset_id
        LEFT JOIN users AS u ON u.id = c.user_id
        WHERE w.id IN :way_ids
        ORDER BY w.id
        """
    ).bindparams(bindparam("way_ids", expanding=True))

    _WAY_NODES_QUERY = text(
        """
        SELECT way_id, node_id
        FROM current_way_nodes
        WHERE way_id IN :way_ids
        ORDER BY way_id, sequence_id
        """
    ).bindparams(bindparam("way_ids", expanding=True))

    _NODES_QUERY = text(
        """
        SELECT n.id, n.latitude, n.longitude, n.visible, n.version,
               n.changeset_id, n.timestamp,
               COALESCE(u.display_name, '') AS "user", COALESCE(u.id, 0) AS uid
        FROM current_nodes AS n
        LEFT JOIN changesets AS c ON c.id = n.changeset_id
        LEFT JOIN users AS u ON u.id = c.user_id
        WHERE n.id IN (
            SELECT node_id FROM current_way_nodes WHERE way_id IN :way_ids
        )
        """
    ).bindparams(bindparam("way_ids", expanding=True))

    _WAY_TAGS_QUERY = text(
        """
        SELECT way_id, k, v
        FROM current_way_tags
        WHERE way_id IN :way_ids
        """
    ).bindparams(bindparam("way_ids", expanding=True))

    _WAY_ID_BY_TAG_VALUE_QUERY = text(
        """
        SELECT way_id
        FROM current_way_tags
        WHERE v = :value
        ORDER BY way_id
        LIMIT 1
        """
    )

    _USER_EXISTS_QUERY = text("SELECT 1 FROM users WHERE id = :uid")

    _INSERT_USER_QUERY = text(
        """
        INSERT INTO users
            (id, display_name, email, pass_crypt, data_public, creation_time)
        VALUES (:uid, :display_name, :email, :pass_crypt, true, :creation_time)
        """
    )

    _INSERT_CHANGESET_QUERY = text(
        """
        INSERT INTO changesets (user_id, created_at, closed_at, num_changes)
        VALUES (:uid, :now, :now, 0)
        RETURNING id
        """
    )

    _INSERT_CHANGESET_TAG_QUERY = text(
        """
        INSERT INTO changeset_tags (changeset_id, k, v)
        VALUES (:changeset_id, :k, :v)
        """
    )

    @staticmethod
    @cache
    def _get_engine(database_url: str) -> Engine:
        return create_engine(database_url, pool_pre_ping=True)

    @classmethod
    def get_engine(cls) -> Engine:
        return cls._get_engine(cls.DATABASE_URL)

    @classmethod
    def get_field_geometries(cls, road_ids: Sequence[str]) -> list[FieldGeometryRow]:
        if not road_ids:
            return []

        with cls.get_engine().connect() as connection:
            result = connection.execute(
                cls._FIELD_GEOMETRIES_QUERY, {"road_ids": list(road_ids)}
            )
            return [
                FieldGeometryRow.model_validate(dict(row)) for row in result.mappings()
            ]

    @classmethod
    def get_existing_road_ids(cls, road_ids: Sequence[str]) -> list[RoadIdRow]:
        if not road_ids:
            return []

        with cls.get_engine().connect() as connection:
            result = connection.execute(
                cls._EXISTING_ROAD_IDS_QUERY, {"road_ids": list(road_ids)}
            )
            return [RoadIdRow.model_validate(dict(row)) for row in result.mappings()]

    @classmethod
    def get_ways(cls, way_ids: Sequence[int]) -> WayEntities:
        """
        Returns requested ways with their ordered node references,
        the nodes they reference and their tags.
        """
        if not way_ids:
            return WayEntities(ways=[], nodes=[], way_tags=[])

        parameters = {"way_ids": list(way_ids)}
        with cls.get_engine().connect() as connection:
            node_ids_by_way_id: dict[int, list[int]] = {}
            for row in connection.execute(cls._WAY_NODES_QUERY, parameters):
                node_ids_by_way_id.setdefault(row.way_id, []).append(row.node_id)

            ways = [
                WayRow.model_validate(
                    {**row, "nodes": node_ids_by_way_id.get(row["id"], [])}
                )
                for row in connection.execute(cls._WAYS_QUERY, parameters).mappings()
            ]
            nodes = [
                NodeRow.model_validate(dict(row))
                for row in connection.execute(cls._NODES_QUERY, parameters).mappings()
            ]
            way_tags = [
                TagRow.model_validate(dict(row))
                for row in connection.execute(
                    cls._WAY_TAGS_QUERY, parameters
                ).mappings()
            ]

        return WayEntities(ways=ways, nodes=nodes, way_tags=way_tags)

    @classmethod
    def get_way_id_by_tag_value(cls, value: str) -> int | None:
        with cls.get_engine().connect() as connection:
            return connection.execute(
                cls._WAY_ID_BY_TAG_VALUE_QUERY, {"value": value}
            ).scalar_one_or_none()

    @classmethod
    def create_changeset(
        cls, request: ChangesetCreateRequest, now: datetime.datetime
    ) -> int:
        """
        Creates the user if it does not exist yet, then the changeset with
        its tags. Everything is done in a single transaction.
        """
        with cls.get_engine().begin() as connection:
            if connection.execute(
                cls._USER_EXISTS_QUERY, {"uid": request.uid}
            ).first() is None:
                connection.execute(
                    cls._INSERT_USER_QUERY,
                    {
                        "uid": request.uid,
                        "display_name": request.user,
                        "email": f"{request.uid}@openroads.org",
                        "pass_crypt": "0" * 32,
                        "creation_time": now,
                    },
                )

            changeset_id = connection.execute(
                cls._INSERT_CHANGESET_QUERY, {"uid": request.uid, "now": now}
            ).scalar_one_or_none()
            if changeset_id is None:
                raise ChangesetNotCreated(request.uid)

            tags = request.osm.changeset.tag
            if tags:
                connection.execute(
                    cls._INSERT_CHANGESET_TAG_QUERY,
                    [
                        {"changeset_id": changeset_id, "k": tag.k, "v": tag.v}
                        for tag in tags
                    ],
                )

        return changeset_id
