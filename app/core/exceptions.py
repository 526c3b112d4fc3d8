"""Domain exceptions."""


class FetchFailure(RuntimeError):
    """Retrieval of a stored resource failed.

    ``message`` is shown to the user verbatim, so it must already be a
    readable sentence.
    """

    def __init__(self, message: str, resource: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.resource = resource


class SaveFailure(RuntimeError):
    """Writing a submission to storage failed."""

    def __init__(self, message: str, resource: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.resource = resource
