class HermodError(Exception):
    def __init__(self, message: str, code: str = "hermod_error"):
        super().__init__(message)
        self.message = message
        self.code = code


class RequestBuildError(HermodError):
    def __init__(self, reason: object):
        super().__init__(
            message=f"error creating request: {reason}",
            code="request_build_error",
        )


class TransportError(HermodError):
    def __init__(self, reason: object):
        super().__init__(
            message=f"error sending request: {reason}",
            code="transport_error",
        )


class BodyReadError(HermodError):
    def __init__(self, reason: object):
        super().__init__(
            message=f"error reading response body: {reason}",
            code="body_read_error",
        )


class DeserializationError(HermodError):
    def __init__(self, reason: object):
        super().__init__(
            message=f"error decoding JSON response: {reason}",
            code="deserialization_error",
        )


class SerializationError(HermodError):
    def __init__(self, reason: object):
        super().__init__(
            message=f"could not encode request body to JSON: {reason}",
            code="serialization_error",
        )


class UnexpectedStatusError(HermodError):
    def __init__(self, status_code: int):
        super().__init__(
            message=f"unexpected status code: {status_code}",
            code="unexpected_status",
        )
        self.status_code = status_code


class FileCreateError(HermodError):
    def __init__(self, path: object, reason: object):
        super().__init__(
            message=f"could not create file {str(path)!r}: {reason}",
            code="file_create_error",
        )
        self.path = path
