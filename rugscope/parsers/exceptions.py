class RugscopeError(Exception):
    pass


class InvalidAddressError(RugscopeError):
    pass


class NetworkError(RugscopeError):
    """Collaborator unreachable or answered with a non-success HTTP status."""

    def __init__(self, message: str, *, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class UpstreamError(RugscopeError):
    """Collaborator answered 200 but reported a logical failure in its envelope."""

    def __init__(self, message: str, *, result: object = None) -> None:
        super().__init__(message)
        self.result = result


class AnalysisError(RugscopeError):
    pass
