from sqlalchemy.orm import Session, joinedload

from degreeplanner.core.logging import get_logger
from degreeplanner.models.plan import Plan, PlanItem, PlanTerm
from degreeplanner.models.plan_warning import PlanWarning
from degreeplanner.schemas.plan import PlannerOutput, PlanRequest

logger = get_logger("services.plans")


def save_plan(
    db: Session,
    request: PlanRequest,
    output: PlannerOutput,
    validation_warnings: list[str] | None = None,
) -> Plan:
    reqs = request.degree_requirements
    constraints = request.constraints
    plan = Plan(
        institution=reqs.institution,
        program=reqs.program,
        target_grad_term=constraints.target_grad_term,
        min_credits=constraints.min_credits,
        max_credits=constraints.max_credits,
        include_summers=constraints.include_summers,
        total_credits=output.total_credits,
        status="queued",
    )
    db.add(plan)
    db.flush()

    for position, term in enumerate(output.terms):
        term_row = PlanTerm(
            plan_id=plan.id,
            position=position,
            term_name=term.name,
            credits=term.total_credits,
        )
        db.add(term_row)
        db.flush()
        for course in term.courses:
            db.add(
                PlanItem(
                    term_id=term_row.id,
                    course_code=course.code,
                    course_title=course.name,
                    credits=course.credits,
                )
            )

    # output.warnings already ends with the validation warnings
    validation_warnings = validation_warnings or []
    planner_count = len(output.warnings) - len(validation_warnings)
    for index, message in enumerate(output.warnings):
        kind = "planner" if index < planner_count else "validation"
        db.add(PlanWarning(plan_id=plan.id, kind=kind, message=message))

    plan.status = "complete"
    db.commit()
    db.refresh(plan)
    logger.info("Stored plan %d (%d terms)", plan.id, len(output.terms))
    return plan


def get_plan(db: Session, plan_id: int) -> Plan | None:
    return (
        db.query(Plan)
        .options(joinedload(Plan.terms).joinedload(PlanTerm.items))
        .filter(Plan.id == plan_id)
        .first()
    )


def get_plan_warnings(db: Session, plan_id: int) -> list[PlanWarning]:
    return (
        db.query(PlanWarning)
        .filter(PlanWarning.plan_id == plan_id)
        .order_by(PlanWarning.id)
        .all()
    )


def compare_plans(db: Session, baseline_id: int, other_id: int):
    baseline = get_plan(db, baseline_id)
    other = get_plan(db, other_id)
    if baseline is None or other is None:
        return None

    baseline_courses = {
        item.course_code
        for term in baseline.terms
        for item in term.items
        if item.course_code
    }
    other_courses = {
        item.course_code
        for term in other.terms
        for item in term.items
        if item.course_code
    }

    return {
        "baseline_plan_id": baseline_id,
        "other_plan_id": other_id,
        "term_count_diff": len(other.terms) - len(baseline.terms),
        "credit_diff": (other.total_credits or 0) - (baseline.total_credits or 0),
        "added_courses": sorted(other_courses - baseline_courses),
        "removed_courses": sorted(baseline_courses - other_courses),
    }
