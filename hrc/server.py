"""FastAPI server for HRC.

Provides REST endpoints for a UI to validate level configurations and
renumber documents. Endpoints are registered on an ``APIRouter`` so that
a larger application can mount them; the standalone ``app`` includes the
router directly::

    uvicorn hrc.server:app --reload --port 8420
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from hrc import __version__
from hrc.config import (
    LevelConfigError,
    LevelSpec,
    build_level_configs,
    validate_level_specs,
)
from hrc.core.levels import LevelConfig
from hrc.documents import DocumentIOError, process_file, split_lines
from hrc.engine import process_lines
from hrc.hardening import ErrorFormatter, InputValidator, ValidationError
from hrc.reporting import build_summary_text

logger = logging.getLogger(__name__)

router = APIRouter()

app = FastAPI(
    title="HRC API",
    description="Hierarchical line renumbering",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_formatter = ErrorFormatter()
_validator = InputValidator()


# ============================================================================
# Pydantic Models for API
# ============================================================================


class LevelSpecModel(BaseModel):
    """One level as entered in the configuration form."""

    pattern: str
    item_type: str
    marker: str = ""
    mode: str = "capture"
    counter_kind: str = "numeric"
    seed: str | None = None

    def to_spec(self) -> LevelSpec:
        return LevelSpec(
            pattern=self.pattern,
            item_type=self.item_type,
            marker=self.marker,
            mode=self.mode,
            counter_kind=self.counter_kind,
            seed=self.seed,
        )


class LevelsRequest(BaseModel):
    """Request carrying an ordered level configuration."""

    levels: list[LevelSpecModel] = Field(default_factory=list)


class ProcessRequest(LevelsRequest):
    """Request for renumbering in-memory text.

    Either ``lines`` or ``text`` must be given; ``lines`` wins if both are.
    """

    lines: list[str] | None = None
    text: str | None = None


class ProcessFileRequest(LevelsRequest):
    """Request for renumbering a document on disk."""

    input_path: str
    output_path: str | None = None


# ============================================================================
# Helpers
# ============================================================================


def _build_levels(request: LevelsRequest) -> list[LevelConfig]:
    try:
        return build_level_configs([level.to_spec() for level in request.levels])
    except LevelConfigError as e:
        raise HTTPException(
            status_code=400, detail=_formatter.format_processing_error(e).to_dict()
        )


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/api/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@router.post("/api/levels/validate")
async def validate_levels(request: LevelsRequest) -> dict[str, Any]:
    """Validate every level and report all problems at once."""
    errors = validate_level_specs([level.to_spec() for level in request.levels])
    return {
        "valid": not errors,
        "level_count": len(request.levels),
        "errors": [e.to_dict() for e in errors],
    }


@router.post("/api/process")
async def process_text(request: ProcessRequest) -> dict[str, Any]:
    """Renumber lines supplied in the request body."""
    if request.lines is None and request.text is None:
        raise HTTPException(status_code=400, detail="Provide either 'lines' or 'text'")

    levels = _build_levels(request)
    lines = request.lines if request.lines is not None else split_lines(request.text or "")
    result = process_lines(lines, levels)
    return result.to_dict()


@router.post("/api/process-file")
def process_document(request: ProcessFileRequest) -> dict[str, Any]:
    """Renumber a document on disk and write the processed copy."""
    levels = _build_levels(request)

    try:
        input_path = _validator.validate_file_path(request.input_path)
        output_path = (
            _validator.validate_file_path(request.output_path, must_exist=False)
            if request.output_path
            else None
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=400, detail=_formatter.format_processing_error(e).to_dict()
        )

    try:
        outcome = process_file(input_path, levels, output_path)
    except DocumentIOError as e:
        logger.warning("Processing %s failed: %s", input_path, e)
        raise HTTPException(
            status_code=422, detail=_formatter.format_processing_error(e).to_dict()
        )

    response = outcome.to_dict()
    response["summary_text"] = build_summary_text(outcome.result, outcome.output_path)
    return response


app.include_router(router)


# ============================================================================
# Main Entry Point
# ============================================================================


def run_server(host: str = "127.0.0.1", port: int = 8420) -> None:
    """Run the HRC server."""
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    run_server()
