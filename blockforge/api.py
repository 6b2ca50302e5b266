"""
FastAPI application for BlockForge.

Exposes datapack generation over HTTP: a preview endpoint returning the
generated text, and a download endpoint returning the zip archive.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from loguru import logger

from blockforge.catalog import option_labels
from blockforge.config.settings import AppConfig
from blockforge.datapack import DatapackForge
from blockforge.errors import PayloadError


async def _read_payload(request: Request) -> Dict[str, Any]:
    """Parse the request body as a JSON object."""
    try:
        payload = await request.json()
    except ValueError as exc:
        raise PayloadError("Missing payload") from exc

    if not isinstance(payload, dict):
        raise PayloadError("Missing payload")
    return payload


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or AppConfig()

    app = FastAPI(
        title="BlockForge API",
        description="Generate Minecraft weapon datapacks",
        version="0.1.0",
    )
    app.state.forge = DatapackForge(config.datapack_config)

    @app.exception_handler(PayloadError)
    async def payload_error_handler(request: Request, exc: PayloadError) -> PlainTextResponse:
        logger.warning(f"Rejected payload on {request.url.path}: {exc}")
        return PlainTextResponse(str(exc), status_code=400)

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/options")
    async def options() -> Dict[str, Any]:
        return option_labels()

    @app.post("/api/preview")
    async def preview(request: Request) -> Dict[str, Any]:
        payload = await _read_payload(request)
        artifacts = request.app.state.forge.preview(payload)
        return artifacts.model_dump(by_alias=True)

    @app.post("/api/datapack")
    async def datapack(request: Request) -> Response:
        payload = await _read_payload(request)
        try:
            filename, archive = request.app.state.forge.generate(payload)
        except Exception:
            logger.exception("Datapack generation failed")
            return PlainTextResponse("Failed to generate datapack", status_code=500)

        return Response(
            content=archive,
            media_type="application/zip",
            headers={
                "Content-Disposition": f'attachment; filename="{filename}"',
                "Cache-Control": "no-store",
            },
        )

    return app
