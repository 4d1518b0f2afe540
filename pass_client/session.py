from typing import List, Optional

from .coordinates import CoordinateField, request_device_location, set_field, validate_location
from .errors import PassClientError, PassFetchError
from .location import LocationProvider
from .logging_config import get_logger
from .passes import PassFetcher, describe_pass
from .schemas import Location, Notification, RequestState, SatellitePass, SessionView

logger = get_logger(__name__)


class PredictorSession:
    """
    All mutable state of one running client: coordinates, passes, request
    state and alerts. Owned by the app that created it.

    Both async operations set their busy flag before the first await, so a
    second trigger arriving while the first is suspended is ignored instead
    of issuing a duplicate call.
    """

    def __init__(self, fetcher: PassFetcher, satellite_id: str):
        self.fetcher = fetcher
        self.satellite_id = satellite_id
        self.location = Location()
        self.passes: List[SatellitePass] = []
        self.state = RequestState.IDLE
        self.locating = False
        self.notification: Optional[Notification] = None
        self.notifications: List[Notification] = []

    @property
    def can_predict(self) -> bool:
        return bool(self.location.lat and self.location.lng) and self.state != RequestState.LOADING

    def alert(self, error: PassClientError):
        self.notification = error.notification()
        self.notifications.append(self.notification)

    def dismiss(self):
        self.notification = None

    def set_field(self, field: CoordinateField, text: str):
        self.location = set_field(self.location, field, text)
        if self.state in (RequestState.SUCCEEDED, RequestState.FAILED):
            self.state = RequestState.IDLE

    async def predict(self) -> bool:
        """Run one fetch cycle. Returns False if the trigger was ignored."""
        if self.state == RequestState.LOADING:
            logger.debug("Prediction already in flight, ignoring trigger")
            return False

        try:
            coordinate = validate_location(self.location)
        except PassClientError as e:
            self.alert(e)
            return True

        self.passes = []
        self.state = RequestState.LOADING
        try:
            passes = await self.fetcher.predict_passes(coordinate, self.satellite_id)
        except PassClientError as e:
            self.state = RequestState.FAILED
            self.alert(e)
            return True
        except Exception:
            logger.exception("Unexpected failure while fetching passes")
            self.state = RequestState.FAILED
            self.alert(PassFetchError())
            return True

        self.passes = passes
        self.state = RequestState.SUCCEEDED
        return True

    async def locate(self, provider: LocationProvider) -> bool:
        """Fill both fields from the device. Returns False if already locating."""
        if self.locating:
            logger.debug("Location lookup already in flight, ignoring trigger")
            return False

        self.locating = True
        try:
            location = await request_device_location(provider)
        except PassClientError as e:
            self.alert(e)
            return True
        finally:
            self.locating = False

        self.location = location
        if self.state in (RequestState.SUCCEEDED, RequestState.FAILED):
            self.state = RequestState.IDLE
        return True

    def view(self) -> SessionView:
        return SessionView(
            satellite_id=self.satellite_id,
            location=self.location,
            passes=[describe_pass(p) for p in self.passes],
            state=self.state,
            locating=self.locating,
            can_predict=self.can_predict,
            notification=self.notification,
        )
