from .schemas import Notification


class PassClientError(Exception):
    """Base error; every subclass is shown to the user as an alert."""
    title = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def notification(self) -> Notification:
        return Notification(title=self.title, message=self.message)


class IncompleteInput(PassClientError):
    """Raised when a coordinate field is empty."""

    def __init__(self, message: str = "Please enter location coordinates"):
        super().__init__(message)


class InvalidCoordinates(PassClientError):
    """Raised when a coordinate field holds an unusable value."""
    pass


class InvalidCoordinateValue(InvalidCoordinates):
    """Raised when a coordinate field is not a number."""
    pass


class InvalidCoordinateRange(InvalidCoordinates):
    """Raised when a coordinate is outside its valid range."""
    pass


class PermissionDenied(PassClientError):
    title = "Permission denied"

    def __init__(self, message: str = "Location permission is required"):
        super().__init__(message)


class LocationUnavailable(PassClientError):

    def __init__(self, message: str = "Failed to get location"):
        super().__init__(message)


class PassFetchError(PassClientError):
    """Network, server and decode failures all collapse into this one."""

    def __init__(self, message: str = "Failed to fetch passes"):
        super().__init__(message)
