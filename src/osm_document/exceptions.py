class EmptyWayError(ValueError):
    """
    Way has no nodes, so no geometry can be derived from it.
    """

    def __init__(self, way_id: int | None = None) -> None:
        super().__init__(way_id)

        self.way_id = way_id

    def __str__(self) -> str:
        if self.way_id is None:
            return "Unable to compute bounding box of a way without nodes."

        return f"Unable to compute bounding box of way {self.way_id} without nodes."


class WayNotFound(LookupError):
    """
    None of the requested ways exists in the database.
    """

    def __init__(self, way_ids: list[int]) -> None:
        super().__init__(way_ids)

        self.way_ids = way_ids

    def __str__(self) -> str:
        return f"Way {', '.join(map(str, self.way_ids))} not found."
