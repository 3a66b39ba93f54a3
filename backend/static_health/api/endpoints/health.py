"""Health-check endpoints."""

from fastapi import APIRouter, Depends, Request

from ...schemas.health import HealthReport
from ...services.clock import ProcessClock, format_timestamp

router = APIRouter()


def _get_clock(request: Request) -> ProcessClock:
    return request.app.state.clock


@router.get("/health", response_model=HealthReport, summary="Service health status")
def healthcheck(clock: ProcessClock = Depends(_get_clock)) -> HealthReport:
    """Return liveness metadata for uptime probes."""
    return HealthReport(
        status="ok",
        uptime=clock.uptime(),
        timestamp=format_timestamp(clock.now()),
    )
