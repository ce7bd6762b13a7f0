class ChangesetNotCreated(RuntimeError):
    """
    Database did not return an ID for the inserted changeset.
    """

    def __init__(self, uid: int) -> None:
        super().__init__(uid)

        self.uid = uid

    def __str__(self) -> str:
        return f"Could not add changeset of user {self.uid} to database."
