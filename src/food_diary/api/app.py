"""FastAPI application factory."""

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from food_diary.api.foods import router as foods_router
from food_diary.api.goals import router as goals_router
from food_diary.api.progress import router as progress_router
from food_diary.api.weights import router as weights_router
from food_diary.app_logging import configure_logging
from food_diary.containers import AppContainer
from food_diary.services.nutrition import (
    NutritionAnalysisError,
    NutritionAnalysisUnavailableError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        aggregator = state_container.progress_aggregator
        try:
            await aggregator.refresh(force=True)
        except Exception:
            logger.exception("Initial progress load failed")
        periodic = asyncio.create_task(
            aggregator.run_periodic_refresh(
                state_container.settings.progress_refresh_interval_seconds
            )
        )
        yield
        periodic.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await periodic
        await state_container.close_resources()

    app = FastAPI(title="Food Diary", lifespan=lifespan)
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(weights_router)
    app.include_router(goals_router)
    app.include_router(progress_router)

    @app.exception_handler(NutritionAnalysisUnavailableError)
    async def analysis_unavailable(
        request: Request, exc: NutritionAnalysisUnavailableError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NutritionAnalysisError)
    async def analysis_failed(
        request: Request, exc: NutritionAnalysisError
    ) -> JSONResponse:
        logger.warning("Nutrition analysis failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
