"""FastAPI application entrypoint for readiness service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..config import ConfigError
from ..coordinator import Coordinator
from ..models import Report


class ScanRequest(BaseModel):
    path: str
    threshold: Optional[float] = None


class HealthResponse(BaseModel):
    status: str


def _default_coordinator() -> Coordinator:
    return Coordinator()


def create_app(
    coordinator_factory: Callable[[], Coordinator] = _default_coordinator,
) -> FastAPI:
    """Create the FastAPI application exposing readiness scans."""

    app = FastAPI(title="Readiness Service", version=__version__)

    async def get_coordinator() -> Coordinator:
        # Lazy-instantiate per request to keep state predictable.
        return coordinator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/scan")
    async def scan_repo(
        payload: ScanRequest,
        coordinator: Coordinator = Depends(get_coordinator),
    ) -> Dict[str, Any]:
        def _run_scan() -> Report:
            _, settings = coordinator.load_settings(
                payload.path,
                {"target_dir": payload.path, "coverage_threshold": payload.threshold},
            )
            return coordinator.scan(payload.path, settings)

        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, _run_scan)
        return report.to_dict()

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "0.0.0.0", port: int = 8000) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)
