"""FastAPI server for Presales Hub: brief persistence, question bank, SPA hosting."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from presales_hub import __version__
from presales_hub.api.dependencies import (
    get_app_settings,
    get_brief_repository,
    get_completion_client,
    get_question_repository,
)
from presales_hub.briefs.constants import CLIENT_ROLES, INDUSTRIES, MEETING_TYPES
from presales_hub.briefs.models import BriefRequest, CamelModel, GeneratedBrief
from presales_hub.briefs.pipeline import run_brief_pipeline
from presales_hub.config import Settings, get_settings
from presales_hub.database import check_db_connection, close_db, get_db_info
from presales_hub.database.repositories import BriefRepository, QuestionSeedRepository
from presales_hub.observability import initialize_logfire
from presales_hub.question_bank import get_questions
from presales_hub.services.llm import CompletionClient

logger = logging.getLogger(__name__)


class SaveBriefPayload(CamelModel):
    brief_data: BriefRequest | None = None
    generated_brief: GeneratedBrief | None = None


class GenerateBriefPayload(CamelModel):
    brief_data: BriefRequest
    provider: str | None = None
    model: str | None = None
    persist: bool = True


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    The MongoDB client is created on first use; shutdown closes it.
    """
    logger.info("Starting Presales Hub API Server")
    yield
    logger.info("Shutting down Presales Hub API Server")
    await close_db()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Presales Hub API",
        description="Executive brief generation and discovery question bank",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request payload",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        db_connected = await check_db_connection()
        return {
            "status": "healthy" if db_connected else "degraded",
            "service": "presales-hub-api",
            "version": __version__,
            "database": get_db_info(),
        }

    @app.get("/api/options", tags=["Briefs"])
    async def list_options() -> dict:
        """Selectable industries, meeting types and client roles."""
        return {
            "industries": INDUSTRIES,
            "meetingTypes": MEETING_TYPES,
            "clientRoles": CLIENT_ROLES,
        }

    @app.post("/api/briefs", status_code=201, tags=["Briefs"])
    async def save_brief(
        payload: SaveBriefPayload | None = None,
        briefs: BriefRepository = Depends(get_brief_repository),
    ):
        if payload is None or payload.generated_brief is None:
            return _error(400, "Missing generatedBrief payload")

        try:
            brief_id = await briefs.insert(payload.brief_data, payload.generated_brief)
        except Exception as e:
            logger.error(f"Failed to persist brief: {e}")
            return _error(500, "Failed to save brief")

        return JSONResponse(status_code=201, content={"id": brief_id})

    @app.get("/api/briefs", tags=["Briefs"])
    async def list_briefs(
        industry: str | None = None,
        client_role: str | None = Query(default=None, alias="clientRole"),
        limit: int | None = Query(default=None, ge=1),
        briefs: BriefRepository = Depends(get_brief_repository),
    ):
        try:
            items = await briefs.list_recent(industry=industry, client_role=client_role, limit=limit)
        except Exception as e:
            logger.error(f"Failed to load briefs: {e}")
            return _error(500, "Failed to load briefs")

        return {"briefs": [item.model_dump(by_alias=True) for item in items]}

    @app.post("/api/briefs/generate", tags=["Briefs"])
    async def generate_brief(
        payload: GenerateBriefPayload,
        briefs: BriefRepository = Depends(get_brief_repository),
        client: CompletionClient = Depends(get_completion_client),
    ):
        result = await run_brief_pipeline(
            payload.brief_data,
            briefs=briefs if payload.persist else None,
            provider=payload.provider,
            model=payload.model,
            client=client,
        )
        return {
            "generatedBrief": result.brief.model_dump(by_alias=True),
            "usedFallback": result.used_fallback,
            "saved": result.saved,
            "id": result.brief_id,
            "warnings": result.warnings,
        }

    @app.get("/api/questions", tags=["Questions"])
    async def list_questions(
        industry: str | None = None,
        client_role: str | None = Query(default=None, alias="clientRole"),
        briefs: BriefRepository = Depends(get_brief_repository),
        seeds: QuestionSeedRepository = Depends(get_question_repository),
        app_settings: Settings = Depends(get_app_settings),
    ):
        if not industry:
            return _error(400, "Missing industry parameter")

        try:
            role_categories = await get_questions(
                industry,
                client_role or None,
                seeds=seeds,
                briefs=briefs,
                recent_limit=app_settings.question_bank.recent_question_limit,
            )
        except Exception as e:
            logger.error(f"Failed to load discovery questions: {e}")
            return _error(500, "Failed to load discovery questions")

        return {"roleCategories": [rc.model_dump(by_alias=True) for rc in role_categories]}

    _mount_spa(app, settings.static_dir)
    initialize_logfire(settings, app)
    return app


def _mount_spa(app: FastAPI, static_dir: Path) -> None:
    """Serve the built single-page app, falling back to index.html."""
    root = static_dir.resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_spa(full_path: str):
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)

        index = root / "index.html"
        if index.is_file():
            return FileResponse(index)
        return _error(404, "Not found")


app = create_app()
