class EnrichmentError(RuntimeError):
    pass


class ValidationError(EnrichmentError):
    pass


class FetchError(EnrichmentError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InternalError(EnrichmentError):
    pass
