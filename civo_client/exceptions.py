class CivoError(Exception):
    pass


class RequestError(CivoError):
    """
    request could not be completed or its response could not be read
    """


class TransportError(RequestError):
    def __init__(self, message: str, status: int | None = None, code: str = '', reason: str = ''):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.reason = reason

    def with_context(self, context: str) -> 'TransportError':
        return TransportError(
            f'{context}: {self.message}', status=self.status, code=self.code, reason=self.reason
        )


class DecodeError(RequestError):
    pass


class NotFoundError(CivoError):
    pass


class ZeroMatchesError(NotFoundError):
    pass


class MultipleMatchesError(CivoError):
    pass


class ValidationError(CivoError):
    pass
