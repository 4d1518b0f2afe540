from fastapi import APIRouter, Depends, Request

from .coordinates import CoordinateField
from .location import DeviceReport, ReportedLocationProvider
from .schemas import FieldText, SessionView
from .session import PredictorSession

router = APIRouter()


def get_session(request: Request) -> PredictorSession:
    return request.app.state.session


# ── API Endpoints ─────────────────────────────────────────────────────
# Failures never become HTTP errors, they come back as the view's notification.
@router.get("/session", response_model=SessionView)
async def read_session(session: PredictorSession = Depends(get_session)):
    return session.view()


@router.put("/session/location/{field}", response_model=SessionView)
async def update_field(field: CoordinateField, body: FieldText,
                       session: PredictorSession = Depends(get_session)):
    session.set_field(field, body.text)
    return session.view()


@router.post("/session/locate", response_model=SessionView)
async def locate(report: DeviceReport, session: PredictorSession = Depends(get_session)):
    await session.locate(ReportedLocationProvider(report))
    return session.view()


@router.post("/session/predict", response_model=SessionView)
async def predict(session: PredictorSession = Depends(get_session)):
    await session.predict()
    return session.view()


@router.delete("/session/notification", response_model=SessionView)
async def dismiss_notification(session: PredictorSession = Depends(get_session)):
    session.dismiss()
    return session.view()
