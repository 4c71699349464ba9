from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.orm import Session

from degreeplanner.core.database import get_db
from degreeplanner.core.security import sanitize_plan_request
from degreeplanner.schemas.plan import (
    PlanGenerateResponse,
    PlanRequest,
    PlanValidateRequest,
    PlanValidateResponse,
)
from degreeplanner.schemas.plan_compare import PlanCompareResponse
from degreeplanner.schemas.plan_detail import PlanDetailResponse
from degreeplanner.schemas.plan_warning import PlanWarningResponse
from degreeplanner.services.catalog_mapper import map_to_plan_request
from degreeplanner.services.planner import build_plan
from degreeplanner.services.plans import compare_plans, get_plan, get_plan_warnings, save_plan
from degreeplanner.services.validator import validate_plan

router = APIRouter(prefix="/api")


@router.post("/plans/generate", response_model=PlanGenerateResponse)
def generate_plan_endpoint(
    payload: PlanRequest,
    db: Session = Depends(get_db),
):
    request = sanitize_plan_request(payload)
    plan, validation_warnings = build_plan(request.degree_requirements, request.constraints)
    stored = save_plan(db, request, plan, validation_warnings)
    return PlanGenerateResponse(plan_id=stored.id, **plan.model_dump())


@router.post("/plans/validate", response_model=PlanValidateResponse)
def validate_plan_endpoint(payload: PlanValidateRequest):
    return PlanValidateResponse(
        warnings=validate_plan(payload.plan, payload.degree_requirements)
    )


@router.post("/requirements/map", response_model=PlanRequest)
def map_requirements_endpoint(parsed: dict[str, Any] = Body(...)):
    try:
        return map_to_plan_request(parsed)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        )


# NOTE: /plans/compare MUST be registered BEFORE the parametric route
# /plans/{plan_id} or FastAPI will swallow it.

@router.get("/plans/compare", response_model=PlanCompareResponse)
def compare_plans_endpoint(
    baseline_plan_id: int,
    other_plan_id: int,
    db: Session = Depends(get_db),
):
    result = compare_plans(db, baseline_plan_id, other_plan_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Plan not found.")
    return PlanCompareResponse(**result)


@router.get("/plans/{plan_id}", response_model=PlanDetailResponse)
def get_plan_endpoint(plan_id: int, db: Session = Depends(get_db)):
    plan = get_plan(db, plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Plan not found.")
    return plan


@router.get("/plans/{plan_id}/warnings", response_model=list[PlanWarningResponse])
def get_plan_warnings_endpoint(plan_id: int, db: Session = Depends(get_db)):
    if get_plan(db, plan_id) is None:
        raise HTTPException(status_code=404, detail="Plan not found.")
    return get_plan_warnings(db, plan_id)
