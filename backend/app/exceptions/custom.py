class BadRequestError(Exception):
    def __init__(self, message: str = "Bad request", status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(Exception):
    def __init__(self, message: str = "Not found", status_code: int = 404):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class PersistenceError(Exception):
    def __init__(self, message: str = "Storage unavailable", status_code: int = 503):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
