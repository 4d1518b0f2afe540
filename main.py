import os

import uvicorn
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from pass_client.config import Settings
from pass_client.logging_config import configure_logging
from pass_client.passes import PassFetcher
from pass_client.routes import router as session_router
from pass_client.session import PredictorSession

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


def create_app(settings: Settings = None, fetcher: PassFetcher = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="ISS Pass Predictor")
    app.state.settings = settings
    app.state.session = PredictorSession(
        fetcher or PassFetcher(settings),
        settings.satellite_id,
    )

    app.include_router(session_router, prefix="/api")

    os.makedirs(STATIC_DIR, exist_ok=True)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/")
    async def read_index():
        return FileResponse(os.path.join(STATIC_DIR, "index.html"))

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host=app.state.settings.host, port=app.state.settings.port, reload=True)
