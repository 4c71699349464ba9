"""Convert an extracted catalog document into a plan request.

Catalog extraction produces courses shaped as ``{id, title, credits, offered,
prereqs}`` where ``prereqs`` may mix plain codes with boolean expressions.
The planner needs flat ``Prerequisite`` edges and planning constraints, so
this module fills in both. Constraints come from settings since extraction
knows nothing about the student.
"""

from typing import Any

from pydantic import ValidationError

from degreeplanner.core.config import Settings, settings as default_settings
from degreeplanner.core.logging import get_logger
from degreeplanner.schemas.plan import PlanningConstraints, PlanRequest
from degreeplanner.schemas.requirements import (
    Course,
    DegreeRequirements,
    Prerequisite,
    PrereqLogic,
)

logger = get_logger("services.catalog_mapper")

_SEASONS = {"fall": "Fall", "spring": "Spring", "summer": "Summer"}


def map_to_plan_request(parsed: dict[str, Any], settings: Settings | None = None) -> PlanRequest:
    settings = settings or default_settings
    raw_courses = parsed.get("courses") or []

    courses: list[Course] = []
    prerequisites: list[Prerequisite] = []
    for raw in _as_list("courses", raw_courses):
        if not isinstance(raw, dict):
            logger.warning("Skipping catalog course that is not an object: %r", raw)
            continue
        code = str(raw.get("id") or raw.get("code") or "").strip()
        if not code:
            logger.warning("Skipping catalog course without a code: %r", raw)
            continue
        courses.append(
            Course(
                code=code,
                name=raw.get("title") or raw.get("name") or "",
                credits=raw.get("credits") or 0,
                description=raw.get("description") or None,
                offerings=_map_offerings(
                    _as_list(f"{code} offerings", raw.get("offered") or raw.get("offerings"))
                ),
            )
        )
        requires = _flatten_prereqs(code, _as_list(f"{code} prereqs", raw.get("prereqs")))
        if requires:
            prerequisites.append(Prerequisite(course=code, requires=requires))

    requirements = DegreeRequirements(
        institution=parsed.get("institution") or "",
        program=parsed.get("program_name") or parsed.get("program") or "",
        total_credits=(
            parsed.get("total_credits")
            or parsed.get("totalCredits")
            or settings.default_total_credits
        ),
        courses=courses,
        prerequisites=prerequisites,
    )
    constraints = PlanningConstraints(
        min_credits=settings.default_min_credits,
        max_credits=settings.default_max_credits,
        target_grad_term=settings.default_target_grad_term,
        include_summers=settings.default_include_summers,
    )
    return PlanRequest(degree_requirements=requirements, constraints=constraints)


def _as_list(field: str, value: Any) -> list[Any]:
    # A lone string is one entry, not a sequence of characters
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return value
    logger.warning("Ignoring %s: expected a list, got %r", field, value)
    return []


def _map_offerings(offered: list[Any]) -> list[str]:
    seasons: list[str] = []
    for value in offered:
        season = _SEASONS.get(str(value).strip().lower())
        if season is None:
            logger.debug("Dropping unknown offering season %r", value)
            continue
        if season not in seasons:
            seasons.append(season)
    return seasons


def _flatten_prereqs(code: str, prereqs: list[Any]) -> list[str]:
    """Reduce mixed prerequisite entries to required course codes.

    AND expressions contribute all their leaves. OR expressions describe a
    choice the scheduler cannot represent, so they are left out.
    """
    requires: list[str] = []
    for entry in prereqs:
        if isinstance(entry, str):
            if entry.strip():
                requires.append(entry.strip())
            continue
        try:
            logic = PrereqLogic.model_validate(entry)
        except ValidationError:
            logger.warning("Ignoring unreadable prerequisite for %s: %r", code, entry)
            continue
        if _has_choice(logic):
            logger.info("Skipping OR prerequisite for %s: %s", code, logic.course_codes())
            continue
        requires.extend(logic.course_codes())
    return list(dict.fromkeys(requires))


def _has_choice(logic: PrereqLogic) -> bool:
    if logic.op == "OR":
        return True
    return any(isinstance(term, PrereqLogic) and _has_choice(term) for term in logic.terms)
