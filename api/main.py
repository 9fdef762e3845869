"""
CausePilot API

But-for causation scoring service for storm claims.

Endpoints:
    POST /causation/evaluate          - Run the causation test
    GET  /catalog/indicators          - Active indicator catalog
    GET  /catalog/perils              - Peril codes and labels
    GET  /tactics                     - Carrier blame tactics
    POST /tactics/counter-arguments   - Rebuttal packages for identified tactics
    GET  /health                      - Health check
"""

import json
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import config
from api.routes import catalog, causation, tactics
from causepilot.catalog import DEFAULT_CATALOG
from causepilot.exceptions import CausePilotError, UnknownTacticError
from causepilot.packs import RubricPackLoader


# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

_EXTRA_FIELDS = (
    "decision",
    "net_score",
    "input_hash_short",
    "catalog_id",
    "duration_ms",
    "error_code",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


logger = logging.getLogger("causepilot")
logger.setLevel(getattr(logging, config.CP_LOG_LEVEL.upper(), logging.INFO))
if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)


# =============================================================================
# Rubric Loading
# =============================================================================

loader = RubricPackLoader(strict_version=True)


def load_active_catalog():
    """Load the configured rubric pack, falling back to the built-in catalog."""
    if not config.CP_RUBRIC_PACK:
        return DEFAULT_CATALOG
    try:
        return loader.load(config.CP_RUBRIC_PACK)
    except CausePilotError as e:
        logger.error(
            f"Failed to load rubric pack {config.CP_RUBRIC_PACK}: {e}",
            extra={"error_code": e.code},
        )
        return DEFAULT_CATALOG


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the rubric on startup."""
    active = load_active_catalog()
    catalog.set_catalog(active)
    logger.info(
        f"CausePilot v{config.CP_ENGINE_VERSION} ready: rubric {active.id} "
        f"({len(active)} indicators, threshold {active.decision_threshold})"
    )

    yield

    logger.info("CausePilot shutting down")


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title="CausePilot API",
    description="""
**But-for causation scoring for storm claims.**

Scores documented damage indicators and reports whether wind/storm
causation is supported, with the score breakdown, evidence gaps and
recommended next steps.

- **Unknown is never evidence against causation**
- **Minimum-evidence gate**: no SUPPORTED without a core indicator
- **Deterministic**: same form, same rubric, same result hash
    """,
    version=config.CP_ENGINE_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if config.CP_DOCS_ENABLED else None,
    redoc_url="/redoc" if config.CP_DOCS_ENABLED else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CP_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(causation.router)
app.include_router(catalog.router)
app.include_router(tactics.router)


@app.exception_handler(CausePilotError)
async def causepilot_error_handler(request: Request, exc: CausePilotError):
    """Return CausePilot errors as {code, message, details}."""
    status_code = 404 if isinstance(exc, UnknownTacticError) else 400
    logger.warning(str(exc), extra={"error_code": exc.code})
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.get("/health", tags=["Health"])
async def health():
    """Health check endpoint."""
    return {
        "healthy": True,
        "engine_version": config.CP_ENGINE_VERSION,
        "catalog_id": catalog.catalog.id,
        "indicators": len(catalog.catalog),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
