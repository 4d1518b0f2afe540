"""
Client configuration.

Every value can be overridden with a ``PASS_CLIENT_<NAME>`` environment
variable, e.g. ``PASS_CLIENT_SERVICE_URL=http://localhost:3000/api/passes``.
An empty ``PASS_CLIENT_REQUEST_TIMEOUT`` means no timeout.
"""

import os
from typing import Optional

from pydantic import BaseModel

ENV_PREFIX = "PASS_CLIENT_"

ISS_NORAD_ID = "25544"


class Settings(BaseModel):
    service_url: str = "http://18.223.188.210:3000/api/passes"
    satellite_id: str = ISS_NORAD_ID
    request_timeout: Optional[float] = None  # seconds; None waits forever
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            if name == "request_timeout" and not raw.strip():
                raw = None
            values[name] = raw
        return cls(**values)
