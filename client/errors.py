class ClientError(Exception):
    """Base class for errors raised by the client data layer."""


class NetworkError(ClientError):
    """The API could not be reached (connection refused, DNS failure, timeout)."""

    def __init__(self, message: str = "Network error. Please check your connection."):
        super().__init__(message)


class ApiError(ClientError):
    def __init__(self, message: str = "An error occurred", status_code: int | None = None, data=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.data = data


class UnauthorizedError(ApiError):
    def __init__(self, message: str = "Unauthorized", data=None):
        super().__init__(message, status_code=401, data=data)


class RecordNotFoundError(ClientError):
    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection} record {record_id} not found")
        self.collection = collection
        self.record_id = record_id
