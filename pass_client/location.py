"""Device location capability.

The client never talks to a GPS itself. It asks a provider for foreground
permission and then for the current position. In the web UI the browser's
geolocation API plays the device and posts its outcome as a ``DeviceReport``.
"""
from enum import Enum
from typing import Optional, Protocol

from pydantic import BaseModel


class PermissionStatus(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    UNDETERMINED = "undetermined"


class Position(BaseModel):
    latitude: float
    longitude: float


class PositionUnavailableError(Exception):
    """Raised by a provider when the position cannot be acquired."""
    pass


class LocationProvider(Protocol):
    async def request_foreground_permission(self) -> PermissionStatus:
        ...

    async def get_current_position(self) -> Position:
        ...


class DeviceReport(BaseModel):
    permission: PermissionStatus
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    error: Optional[str] = None  # browser error message, e.g. a timeout


class ReportedLocationProvider:
    """Provider replaying what the browser reported."""

    def __init__(self, report: DeviceReport):
        self.report = report

    async def request_foreground_permission(self) -> PermissionStatus:
        return self.report.permission

    async def get_current_position(self) -> Position:
        if self.report.error:
            raise PositionUnavailableError(self.report.error)
        if self.report.latitude is None or self.report.longitude is None:
            raise PositionUnavailableError("device reported no coordinates")
        return Position(latitude=self.report.latitude, longitude=self.report.longitude)
