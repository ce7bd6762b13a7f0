from collections.abc import Iterable, Sequence
from typing import Literal, TypeVar

from osm_document.model import NodeRow, TagRow, WayRow

OwnerKey = Literal["way_id", "node_id"]
Owner = TypeVar("Owner", WayRow, NodeRow)

_OWNER_KEYS: tuple[str, ...] = ("way_id", "node_id")


def attach_tags(
    owners: Sequence[Owner], tags: Iterable[TagRow], owner_key: OwnerKey
) -> list[Owner]:
    """
    Returns copies of `owners`, each carrying every tag whose `owner_key`
    field references it. Tags keep their relative input order. Tags
    referencing an owner missing from `owners` are dropped.
    """
    if owner_key not in _OWNER_KEYS:
        raise ValueError(
            f"Invalid owner key: '{owner_key}', expected one of {_OWNER_KEYS}"
        )

    tags_by_owner_id: dict[int, list[TagRow]] = {owner.id: [] for owner in owners}
    for tag in tags:
        owner_id = getattr(tag, owner_key)
        if owner_id in tags_by_owner_id:
            tags_by_owner_id[owner_id].append(tag)

    return [
        owner.model_copy(update={"tags": tags_by_owner_id[owner.id]})
        for owner in owners
    ]
