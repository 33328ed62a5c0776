"""
FastAPI application serving the PTO balance projector.
Provides REST API endpoints for projections and reference data.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import date

import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from data.holidays import DEFAULT_HOLIDAY_YEAR
from pto_projector.config import ProjectionPolicy, settings
from pto_projector.dates import format_date, parse_date
from pto_projector.holidays import holiday_calendar
from pto_projector.projection import balance_status, project_balances
from pto_projector.selection import TargetDateSet, realize_target_dates

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

policy = ProjectionPolicy.from_settings(settings)


# Pydantic models for API
class ProjectionRequest(BaseModel):
    """Request model for projection endpoint."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "current_pto": "80",
                "current_sick": "40",
                "pto_rate": "0.0673",
                "sick_rate": "0.0333",
                "target_dates": ["2025-07-03", "2025-12-26"],
                "today": "2025-06-02",
            }
        }
    )

    current_pto: str | float = Field(..., description="Current PTO balance in hours")
    current_sick: str | float = Field(..., description="Current sick balance in hours")
    pto_rate: str | float = Field(..., description="PTO hours accrued per hour worked")
    sick_rate: str | float = Field(..., description="Sick hours accrued per hour worked")
    target_dates: list[str] = Field(default_factory=list, description="Vacation days, YYYY-MM-DD")
    today: str | None = Field(None, description="Start of accrual, YYYY-MM-DD (defaults to today)")


class ProjectionRecord(BaseModel):
    """Projected balances as of one vacation day."""

    date: str
    pto_balance: float
    sick_balance: float
    pto_display: str
    sick_display: str
    pto_status: str
    sick_status: str


class ProjectionResponse(BaseModel):
    """Response model for projection endpoint."""

    today: str
    results: list[ProjectionRecord]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    environment: str
    holiday_year: int


# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    logger.info("Starting PTO Projector API")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Loaded {len(holiday_calendar)} holidays for {DEFAULT_HOLIDAY_YEAR}")

    yield

    logger.info("Shutting down PTO Projector API")


# Create FastAPI app
app = FastAPI(
    title="PTO Projector API",
    description="Project future PTO and sick balances across planned vacation days",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# API Endpoints


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {"message": "PTO Projector API", "version": "1.0.0", "docs": "/docs"}


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        holiday_year=DEFAULT_HOLIDAY_YEAR,
    )


@app.get("/defaults", tags=["Reference"])
async def defaults():
    """
    Starting form values and the balance rules they are projected under.
    """
    return {
        "current_pto": settings.default_current_pto,
        "current_sick": settings.default_current_sick,
        "pto_rate": settings.default_pto_rate,
        "sick_rate": settings.default_sick_rate,
        "rules": {
            "hours_per_day": policy.hours_per_day,
            "max_pto": policy.max_pto,
            "max_sick": policy.max_sick,
            "pto_floor": policy.pto_floor,
            "sick_warning_floor": settings.sick_warning_floor_hours,
        },
    }


@app.get("/holidays", tags=["Reference"])
async def holidays():
    """Company holidays that accrue no time."""
    return {
        "year": DEFAULT_HOLIDAY_YEAR,
        "holidays": holiday_calendar.to_list(),
        "summary": holiday_calendar.summary(),
    }


@app.post("/projections", response_model=ProjectionResponse, tags=["Projections"])
async def projections(request: ProjectionRequest):
    """
    Project balances for each selected vacation day.

    Results are recomputed from scratch on every call and returned in
    chronological order. If any balance or rate is not a number, ``results``
    is empty. Dates that do not parse are left out. Days before ``today``,
    weekends and holidays cannot be selected and are rejected with 422.

    Example request:
    ```json
    {
        "current_pto": "0",
        "current_sick": "0",
        "pto_rate": "1.0",
        "sick_rate": "0.5",
        "target_dates": ["2025-03-04"],
        "today": "2025-03-03"
    }
    ```

    Example response:
    ```json
    {
        "today": "2025-03-03",
        "results": [
            {"date": "2025-03-04", "pto_display": "0.00", "sick_display": "4.00", ...}
        ]
    }
    ```
    """
    if request.today is None:
        today = date.today()
    else:
        today = parse_date(request.today)
        if today is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Invalid date: {request.today}. Please use YYYY-MM-DD.",
            )

    selection = TargetDateSet(today=today, holidays=holiday_calendar)
    rejected = [
        key
        for key, day in realize_target_dates(request.target_dates)
        if not selection.toggle(day)
    ]
    if rejected:
        logger.warning(f"Rejected unselectable dates: {rejected}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Dates cannot be selected (past, weekend or holiday): {', '.join(rejected)}",
        )

    try:
        logger.info(f"Projection request: dates={len(request.target_dates)}")

        snapshots = project_balances(
            request.current_pto,
            request.current_sick,
            request.pto_rate,
            request.sick_rate,
            selection,
            today=today,
            holidays=holiday_calendar,
            policy=policy,
        )

        results = [
            ProjectionRecord(
                **snapshot.to_dict(),
                pto_status=balance_status(snapshot.pto, policy.pto_floor).value,
                sick_status=balance_status(snapshot.sick, settings.sick_warning_floor_hours).value,
            )
            for snapshot in snapshots
        ]

        return ProjectionResponse(today=format_date(today), results=results)

    except Exception as e:
        logger.error(f"Error in /projections endpoint: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred computing the projection. Please try again.",
        ) from e


if __name__ == "__main__":
    uvicorn.run(
        "pto_projector.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8080)),
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
