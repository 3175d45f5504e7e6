class RienoError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RemoteServiceError(RienoError):
    """The remote data/auth service failed or could not be reached."""
    status_code = 502


class AuthenticationError(RienoError):
    status_code = 401


class ConflictError(RienoError):
    status_code = 409


class NotFoundError(RienoError):
    status_code = 404


class ConfigurationError(RienoError):
    status_code = 500

    def __init__(self, message: str = "Server configuration error: Supabase not configured"):
        super().__init__(message)


class InvalidSessionError(RienoError):
    status_code = 403

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class BadRequestError(RienoError):
    status_code = 400
