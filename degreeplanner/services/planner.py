from datetime import date

from degreeplanner.core.logging import get_logger
from degreeplanner.schemas.plan import PlannerOutput, PlanningConstraints
from degreeplanner.schemas.requirements import DegreeRequirements
from degreeplanner.services.prerequisites import build_prereq_map
from degreeplanner.services.scheduler import (
    PriorityKey,
    advanced_first,
    format_credits,
    schedule_courses,
)
from degreeplanner.services.terms import generate_term_sequence, parse_target_term
from degreeplanner.services.validator import validate_plan

logger = get_logger("services.planner")

INVALID_TARGET_WARNING = "Invalid target graduation term format"


def generate_plan(
    requirements: DegreeRequirements,
    constraints: PlanningConstraints,
    today: date | None = None,
    priority: PriorityKey = advanced_first,
) -> PlannerOutput:
    target = parse_target_term(constraints.target_grad_term)
    if target is None:
        logger.info("Rejected target term %r", constraints.target_grad_term)
        return PlannerOutput(terms=[], warnings=[INVALID_TARGET_WARNING], total_credits=0)

    term_sequence = generate_term_sequence(target, constraints.include_summers, today=today)
    prereq_map = build_prereq_map(requirements.prerequisites, requirements.courses)
    schedule = schedule_courses(
        requirements.courses,
        prereq_map,
        term_sequence,
        constraints,
        priority=priority,
    )

    warnings = list(schedule.warnings)
    total_credits = sum(term.total_credits for term in schedule.terms)
    if total_credits < requirements.total_credits:
        warnings.append(
            f"Planned credits ({format_credits(total_credits)}) are less than required "
            f"({format_credits(requirements.total_credits)})"
        )

    return PlannerOutput(terms=schedule.terms, warnings=warnings, total_credits=total_credits)


def build_plan(
    requirements: DegreeRequirements,
    constraints: PlanningConstraints,
    today: date | None = None,
) -> tuple[PlannerOutput, list[str]]:
    """Generate a plan and append the validator's findings to its warnings.

    Returns the plan and, separately, the warnings that came from validation.
    """
    logger.info("Generating plan for %s - %s", requirements.institution, requirements.program)
    logger.info(
        "Constraints: %s-%s credits, target: %s, summers: %s",
        format_credits(constraints.min_credits),
        format_credits(constraints.max_credits),
        constraints.target_grad_term,
        constraints.include_summers,
    )

    plan = generate_plan(requirements, constraints, today=today)
    validation_warnings = validate_plan(plan, requirements)
    plan.warnings.extend(validation_warnings)

    logger.info(
        "Generated plan with %d terms and %d warnings", len(plan.terms), len(plan.warnings)
    )
    for term in plan.terms:
        logger.debug(
            "%s: %d courses, %s credits",
            term.name,
            len(term.courses),
            format_credits(term.total_credits),
        )
    return plan, validation_warnings
