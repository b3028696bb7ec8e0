"""FastAPI application factory."""

import base64
import binascii
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status

from culinary_companion.api.assistant import router as assistant_router
from culinary_companion.api.dependencies import (
    ai_failure,
    get_container,
    require_session,
)
from culinary_companion.api.models import (
    AnalyzeImageRequest,
    AnalyzeTextRequest,
    Credentials,
    EntryRequest,
    ProfileUpdate,
    WaterRequest,
)
from culinary_companion.api.recipes import router as recipes_router
from culinary_companion.app_logging import configure_logging
from culinary_companion.containers import AppContainer
from culinary_companion.domain.profile import NutritionTargets
from culinary_companion.domain.stats import DailyTotals, ProgressFigure
from culinary_companion.serialization import entry_to_dict, profile_to_dict
from culinary_companion.services.dashboard import (
    Dashboard,
    DashboardView,
    build_dashboard,
)
from culinary_companion.services.meals import EntryRejectedError
from culinary_companion.services.stats import PeriodSummary
from culinary_companion.services.users import AccountError

ANALYSIS_FAILED = "Failed to analyze food content. Please try again."

_logger = logging.getLogger(__name__)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        _logger.info("Using data directory %s", container.settings.data_dir)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    auth = APIRouter(prefix="/auth", tags=["auth"])

    @auth.post("/register")
    async def register(body: Credentials, request: Request) -> dict[str, object]:
        """Create a local account and sign in."""
        state_container = get_container(request)
        try:
            user = state_container.account_service.register(
                body.email, body.password, body.name
            )
        except AccountError as exc:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return {"email": user.email, "name": user.name}

    @auth.post("/login")
    async def login(body: Credentials, request: Request) -> dict[str, object]:
        """Sign in with a local account."""
        state_container = get_container(request)
        try:
            user = state_container.account_service.login(body.email, body.password)
        except AccountError as exc:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return {"email": user.email, "name": user.name}

    @auth.post("/logout")
    async def logout(request: Request) -> dict[str, str]:
        """End the session."""
        get_container(request).account_service.logout()
        return {"status": "ok"}

    protected = APIRouter(dependencies=[Depends(require_session)])

    @protected.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the profile and whether the physical metrics are filled in."""
        profile_service = get_container(request).profile_service
        return {
            "profile": profile_to_dict(profile_service.get()),
            "complete": profile_service.is_complete(),
        }

    @protected.patch("/profile")
    async def update_profile(
        body: ProfileUpdate, request: Request
    ) -> dict[str, object]:
        """Apply profile changes and return the new profile with its targets."""
        profile_service = get_container(request).profile_service
        try:
            profile = profile_service.update(body.changes())
        except ValueError as exc:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return {
            "profile": profile_to_dict(profile),
            "targets": _serialize_targets(profile_service.targets()),
        }

    @protected.get("/profile/targets")
    async def get_targets(request: Request) -> dict[str, object]:
        """Return today's calorie and macro targets."""
        return _serialize_targets(get_container(request).profile_service.targets())

    @protected.get("/dashboard")
    async def dashboard(
        request: Request,
        view: DashboardView = DashboardView.DAY,
        at: datetime | None = None,
    ) -> dict[str, object]:
        """Return targets, today's totals and progress, plus the chosen period."""
        state = get_container(request).state
        reference = at or datetime.now().astimezone()
        result = build_dashboard(state.profile, state.history, reference, view)
        return _serialize_dashboard(result)

    @protected.get("/log")
    async def list_log(request: Request) -> dict[str, object]:
        """Return every entry, newest first."""
        entries = get_container(request).meal_log_service.history()
        return {"entries": [entry_to_dict(entry) for entry in entries]}

    @protected.post("/log/water", status_code=status.HTTP_201_CREATED)
    async def log_water(body: WaterRequest, request: Request) -> dict[str, object]:
        """Record a water intake."""
        service = get_container(request).meal_log_service
        entry = service.log_water(body.amount_ml, now=datetime.now().astimezone())
        return entry_to_dict(entry)

    @protected.post("/log/entries", status_code=status.HTTP_201_CREATED)
    async def log_entry(body: EntryRequest, request: Request) -> dict[str, object]:
        """Record a confirmed food draft."""
        service = get_container(request).meal_log_service
        try:
            entry = service.confirm(
                body.draft(),
                body.meal_type,
                now=datetime.now().astimezone(),
                image_reference=body.image_reference,
            )
        except EntryRejectedError as exc:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
        return entry_to_dict(entry)

    @protected.post("/log/analyze")
    async def analyze_text(
        body: AnalyzeTextRequest, request: Request
    ) -> dict[str, object]:
        """Estimate nutrition for a typed description. Nothing is logged."""
        state_container = get_container(request)
        try:
            analysis = await state_container.analysis_service.analyze_text(body.text)
        except Exception as exc:
            raise ai_failure(state_container, exc, ANALYSIS_FAILED) from exc
        return analysis.model_dump(by_alias=True)

    @protected.post("/log/analyze-image")
    async def analyze_image(
        body: AnalyzeImageRequest, request: Request
    ) -> dict[str, object]:
        """Estimate nutrition for a photo. Nothing is logged."""
        state_container = get_container(request)
        image_bytes = _decode_image(body.image)
        try:
            analysis = await state_container.analysis_service.analyze_image(
                image_bytes
            )
        except Exception as exc:
            raise ai_failure(state_container, exc, ANALYSIS_FAILED) from exc
        return analysis.model_dump(by_alias=True)

    app.include_router(auth)
    app.include_router(protected)
    app.include_router(recipes_router, dependencies=[Depends(require_session)])
    app.include_router(assistant_router, dependencies=[Depends(require_session)])
    return app


def _decode_image(raw: str) -> bytes:
    """Decode base64 image data, accepting a data URL prefix."""
    _, _, encoded = raw.rpartition(",")
    try:
        image_bytes = base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, detail="Image is not valid base64."
        ) from exc
    if not image_bytes:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Image is empty.")
    return image_bytes


def _serialize_targets(targets: NutritionTargets) -> dict[str, object]:
    return {
        "calories": targets.calories,
        "protein": targets.protein_g,
        "carbs": targets.carbs_g,
        "fat": targets.fat_g,
    }


def _serialize_totals(totals: DailyTotals) -> dict[str, object]:
    return {
        "day": totals.day.isoformat(),
        "calories": totals.calories,
        "protein": totals.protein_g,
        "carbs": totals.carbs_g,
        "fat": totals.fat_g,
        "waterMl": totals.water_ml,
    }


def _serialize_figure(figure: ProgressFigure) -> dict[str, object]:
    return {
        "consumed": figure.consumed,
        "target": figure.target,
        "percent": figure.percent,
    }


def _serialize_period(period: PeriodSummary) -> dict[str, object]:
    return {
        "daily": [_serialize_totals(day) for day in period.daily],
        "averages": {
            "calories": period.avg_calories,
            "protein": period.avg_protein_g,
            "carbs": period.avg_carbs_g,
            "fat": period.avg_fat_g,
            "waterMl": period.avg_water_ml,
        },
    }


def _serialize_dashboard(dashboard: Dashboard) -> dict[str, object]:
    progress = dashboard.progress
    return {
        "view": dashboard.view.value,
        "targets": _serialize_targets(dashboard.targets),
        "today": _serialize_totals(dashboard.today),
        "progress": {
            "calories": _serialize_figure(progress.calories),
            "protein": _serialize_figure(progress.protein),
            "carbs": _serialize_figure(progress.carbs),
            "fat": _serialize_figure(progress.fat),
            "water": _serialize_figure(progress.water),
        },
        "period": _serialize_period(dashboard.period) if dashboard.period else None,
    }
