"""API routes — thin controllers that delegate to the use cases."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from lecture_demos.domain.entities import DemoVariant
from lecture_demos.interface.dependencies import (
    get_forecast_service,
    get_key_phrase_use_case,
)
from lecture_demos.interface.schemas import (
    ErrorResponse,
    ForecastCreate,
    ForecastResponse,
    ForecastResult,
    ForecastUpdate,
    KeyPhrasesResponse,
    ValidationErrorResponse,
)
from lecture_demos.services.extract_key_phrases import ExtractKeyPhrasesUseCase
from lecture_demos.services.forecasts import ForecastService

chat_router = APIRouter(tags=["chat"])
forecast_router = APIRouter(prefix="/api/weatherforecast", tags=["weatherforecast"])

GET_FORECAST_ROUTE = "get_forecast_by_id"


def _location(request: Request, forecast_id: str) -> str:
    return str(request.url_for(GET_FORECAST_ROUTE, forecast_id=forecast_id))


# ── Chat ────────────────────────────────────────────────────────────────────


@chat_router.post(
    "/chat",
    response_model=KeyPhrasesResponse,
    responses={500: {"model": ErrorResponse, "description": "AI model error"}},
)
async def post_chat(
    prompt: str = Body(..., description="The input prompt to send to the AI model."),
    demo: str | None = Query(None, description="1, 2, Demo01 or Demo02."),
    demo_to_run: str | None = Query(None, alias="demoToRun"),
    use_case: ExtractKeyPhrasesUseCase = Depends(get_key_phrase_use_case),
) -> KeyPhrasesResponse:
    """Return the 3 most important key phrases of *prompt*."""
    variant = DemoVariant.parse(demo if demo is not None else demo_to_run)
    result = await use_case.execute(prompt, variant)
    return KeyPhrasesResponse.from_domain(result)


# ── Weather forecasts ───────────────────────────────────────────────────────


@forecast_router.get("", response_model=list[ForecastResult])
async def get_all_forecasts(
    service: ForecastService = Depends(get_forecast_service),
) -> list[ForecastResult]:
    """List every stored forecast with its id."""
    return [ForecastResult.from_stored(s) for s in service.list_forecasts()]


@forecast_router.get(
    "/{forecast_id}",
    name=GET_FORECAST_ROUTE,
    response_model=ForecastResponse,
    responses={
        404: {"description": "Forecast not found"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
async def get_forecast(
    forecast_id: str,
    service: ForecastService = Depends(get_forecast_service),
) -> ForecastResponse:
    """Retrieve one forecast by id."""
    return ForecastResponse.from_record(service.get_forecast(forecast_id))


@forecast_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ForecastResult,
    responses={400: {"model": ValidationErrorResponse}},
)
async def create_forecast(
    request: Request,
    response: Response,
    body: ForecastCreate | None = None,
    service: ForecastService = Depends(get_forecast_service),
) -> ForecastResult:
    """Create a forecast under a newly generated id."""
    stored = service.create_forecast(body.to_draft() if body else None)
    response.headers["Location"] = _location(request, stored.id)
    return ForecastResult.from_stored(stored)


@forecast_router.patch(
    "/{forecast_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"description": "Forecast not found"},
    },
)
async def patch_forecast(
    forecast_id: str,
    body: ForecastUpdate,
    service: ForecastService = Depends(get_forecast_service),
) -> Response:
    """Update only the fields present (non-null) in the body."""
    service.patch_forecast(forecast_id, body.to_patch())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@forecast_router.put(
    "/{forecast_id}",
    response_model=None,
    responses={
        201: {"model": ForecastResult, "description": "Created with the client-supplied id"},
        204: {"description": "Existing forecast replaced"},
        400: {"model": ValidationErrorResponse},
    },
)
async def put_forecast(
    request: Request,
    forecast_id: str,
    body: ForecastCreate | None = None,
    service: ForecastService = Depends(get_forecast_service),
) -> Response:
    """Replace the forecast, or create it under *forecast_id* if absent."""
    created = service.replace_forecast(forecast_id, body.to_draft() if body else None)
    if created is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    result = ForecastResult.from_stored(created)
    return Response(
        content=result.model_dump_json(by_alias=True),
        status_code=status.HTTP_201_CREATED,
        media_type="application/json",
        headers={"Location": _location(request, created.id)},
    )


@forecast_router.delete(
    "/{forecast_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Forecast not found"}},
)
async def delete_forecast(
    forecast_id: str,
    service: ForecastService = Depends(get_forecast_service),
) -> Response:
    service.delete_forecast(forecast_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
