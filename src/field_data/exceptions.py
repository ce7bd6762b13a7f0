class MalformedGeometryError(ValueError):
    """
    Geometry text of a field data row is not a valid GeoJSON geometry.
    """

    def __init__(self, road_id: str, message: str) -> None:
        super().__init__(road_id, message)

        self.road_id = road_id
        self.message = message

    def __str__(self) -> str:
        return f"Invalid geometry of road {self.road_id}: {self.message}"
