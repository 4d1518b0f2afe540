from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Location(BaseModel):
    # Raw text as typed by the user, validated only on submit
    lat: str = ""
    lng: str = ""


class ValidCoordinate(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    lat_text: str
    lng_text: str


class PassRequest(BaseModel):
    satelliteId: str
    lat: str
    lng: str


class SatellitePass(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    startTime: datetime
    endTime: datetime
    maxElevation: float = Field(..., ge=0.0, le=90.0)
    duration: float = Field(..., ge=0.0)  # seconds
    azimuthStart: float
    azimuthEnd: float

    @model_validator(mode="after")
    def check_window(self):
        if (self.startTime.utcoffset() is None) != (self.endTime.utcoffset() is None):
            raise ValueError("startTime and endTime must both carry a zone or neither")
        if self.endTime <= self.startTime:
            raise ValueError("endTime must be after startTime")
        return self


class PassDisplay(BaseModel):
    rise_time: str
    set_time: str
    max_elevation: str  # e.g. "77°"
    duration: str       # e.g. "7 minutes"
    azimuth_start: str
    azimuth_end: str


class RequestState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Notification(BaseModel):
    title: str
    message: str


class FieldText(BaseModel):
    text: str


class SessionView(BaseModel):
    satellite_id: str
    location: Location
    passes: List[PassDisplay]
    state: RequestState
    locating: bool
    can_predict: bool
    notification: Optional[Notification] = None
