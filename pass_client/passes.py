import math
from datetime import datetime
from typing import List

import requests
from pydantic import TypeAdapter, ValidationError
from starlette.concurrency import run_in_threadpool

from .config import Settings
from .errors import PassFetchError
from .logging_config import get_logger
from .schemas import PassDisplay, PassRequest, SatellitePass, ValidCoordinate

logger = get_logger(__name__)

_passes_adapter = TypeAdapter(List[SatellitePass])


# ── Remote prediction call ────────────────────────────────────────────
class PassFetcher:
    """Asks the prediction service for the passes over one coordinate."""

    def __init__(self, settings: Settings, session: requests.Session = None):
        self.settings = settings
        self.session = session or requests.Session()

    def fetch(self, coordinate: ValidCoordinate, satellite_id: str) -> List[SatellitePass]:
        """
        Issue exactly one POST and decode the reply.

        The service owns ordering, so records come back in source order.
        Transport, HTTP status and decode failures are logged separately but
        all raise the same PassFetchError.
        """
        payload = PassRequest(
            satelliteId=satellite_id,
            lat=coordinate.lat_text,
            lng=coordinate.lng_text,
        )
        url = self.settings.service_url

        try:
            response = self.session.post(
                url,
                json=payload.model_dump(),
                headers={"Content-Type": "application/json"},
                timeout=self.settings.request_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error("Pass service at %s answered with an error: %s", url, e)
            raise PassFetchError() from e
        except requests.RequestException as e:
            logger.error("Could not reach pass service at %s: %s", url, e)
            raise PassFetchError() from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Pass service returned a body that is not JSON: %s", e)
            raise PassFetchError() from e

        try:
            passes = _passes_adapter.validate_python(data)
        except ValidationError as e:
            logger.error("Pass service returned malformed passes: %s", e)
            raise PassFetchError() from e

        logger.info("Fetched %d passes for satellite %s at (%s, %s)",
                    len(passes), satellite_id, payload.lat, payload.lng)
        return passes

    async def predict_passes(self, coordinate: ValidCoordinate, satellite_id: str) -> List[SatellitePass]:
        # requests blocks, keep the event loop free while waiting
        return await run_in_threadpool(self.fetch, coordinate, satellite_id)

    def close(self):
        self.session.close()


# ── Display derivation (pure) ─────────────────────────────────────────
def _round_half_up(value):
    return int(math.floor(value + 0.5))


def format_elevation(degrees) -> str:
    return f"{_round_half_up(degrees)}°"


def format_azimuth(degrees) -> str:
    return f"{_round_half_up(degrees)}°"


def format_duration(seconds) -> str:
    return f"{_round_half_up(seconds / 60)} minutes"


def format_local_time(moment: datetime) -> str:
    """Render a timestamp in the viewer's local zone and locale format.

    Naive timestamps are taken to be local already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime("%x %X")


def describe_pass(record: SatellitePass) -> PassDisplay:
    return PassDisplay(
        rise_time=format_local_time(record.startTime),
        set_time=format_local_time(record.endTime),
        max_elevation=format_elevation(record.maxElevation),
        duration=format_duration(record.duration),
        azimuth_start=format_azimuth(record.azimuthStart),
        azimuth_end=format_azimuth(record.azimuthEnd),
    )
