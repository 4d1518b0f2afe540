import math
from enum import Enum

from .errors import (
    IncompleteInput,
    InvalidCoordinateRange,
    InvalidCoordinateValue,
    LocationUnavailable,
    PermissionDenied,
)
from .location import LocationProvider, PermissionStatus
from .logging_config import get_logger
from .schemas import Location, ValidCoordinate

logger = get_logger(__name__)

# Decimal places kept from a device fix (~11 m at the equator)
DEVICE_PRECISION = 4


class CoordinateField(str, Enum):
    LAT = "lat"
    LNG = "lng"


# field -> (label, lower bound, upper bound)
_BOUNDS = {
    CoordinateField.LAT: ("latitude", -90.0, 90.0),
    CoordinateField.LNG: ("longitude", -180.0, 180.0),
}


def set_field(location: Location, field: CoordinateField, text: str) -> Location:
    return location.model_copy(update={CoordinateField(field).value: text})


def _parse(field, text):
    label, low, high = _BOUNDS[field]
    try:
        value = float(text)
    except ValueError:
        raise InvalidCoordinateValue(f"Invalid coordinates: {label} '{text}' is not a number")
    if not math.isfinite(value):
        raise InvalidCoordinateValue(f"Invalid coordinates: {label} '{text}' is not a number")
    if not low <= value <= high:
        raise InvalidCoordinateRange(
            f"Invalid coordinates: {label} must be between {low:g} and {high:g}"
        )
    return value


def validate_location(location: Location) -> ValidCoordinate:
    """Turn the raw text pair into a coordinate that may be sent on the wire.

    Fields that hold something are checked before emptiness is reported, so a
    bad value is never hidden behind a "missing" message.
    """
    texts = {
        CoordinateField.LAT: location.lat.strip(),
        CoordinateField.LNG: location.lng.strip(),
    }
    values = {field: _parse(field, text) for field, text in texts.items() if text}
    if len(values) < len(texts):
        raise IncompleteInput()

    return ValidCoordinate(
        lat=values[CoordinateField.LAT],
        lng=values[CoordinateField.LNG],
        lat_text=texts[CoordinateField.LAT],
        lng_text=texts[CoordinateField.LNG],
    )


async def request_device_location(provider: LocationProvider) -> Location:
    """Ask the device for its position and return it as coordinate text.

    Raises PermissionDenied when foreground permission is refused and
    LocationUnavailable when either capability call fails. The pending
    call cannot be cancelled and carries no timeout.
    """
    try:
        status = await provider.request_foreground_permission()
        if status != PermissionStatus.GRANTED:
            logger.info("Location permission not granted: %s", status)
            raise PermissionDenied()
        position = await provider.get_current_position()
    except PermissionDenied:
        raise
    except Exception as e:
        logger.error("Failed to get location: %s", e)
        raise LocationUnavailable() from e

    return Location(
        lat=f"{position.latitude:.{DEVICE_PRECISION}f}",
        lng=f"{position.longitude:.{DEVICE_PRECISION}f}",
    )
