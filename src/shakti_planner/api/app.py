"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shakti_planner.api.schemas import (
    ParseMealBody,
    ParseMealResponse,
    PlanGoalBody,
    PlanGoalResponse,
)
from shakti_planner.api.tracker import router as tracker_router
from shakti_planner.app_logging import configure_logging
from shakti_planner.containers import AppContainer
from shakti_planner.errors import ExtractionError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "authorization, x-client-info, apikey, content-type"
    ),
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(tracker_router)

    @app.middleware("http")
    async def cors_headers(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.exception_handler(ExtractionError)
    async def extraction_error(request: Request, exc: ExtractionError) -> JSONResponse:
        logger.error(
            "Extraction failed",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse({"error": _describe_validation(exc)}, status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(
            {"error": str(exc) or "Unknown error"},
            status_code=500,
            headers=CORS_HEADERS,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/plan-goal")
    async def plan_goal(body: PlanGoalBody, request: Request) -> PlanGoalResponse:
        """Turn a weight goal into a daily calorie target."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.goal_planning_service.plan(body.to_request())
        return PlanGoalResponse(
            daily_calorie_target=result.daily_calorie_target,
            burn_suggestion=result.activity_suggestion,
        )

    @app.post("/parse-meal")
    async def parse_meal(body: ParseMealBody, request: Request) -> ParseMealResponse:
        """Turn a meal description into a calorie estimate."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.meal_parsing_service.parse(body.to_request())
        return ParseMealResponse.from_result(result)

    return app


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        parts.append(f"{location or 'body'}: {error.get('msg', 'invalid')}")
    return "Invalid request: " + "; ".join(parts)
