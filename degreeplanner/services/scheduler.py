from dataclasses import dataclass, field
from typing import Any, Callable

from degreeplanner.core.logging import get_logger
from degreeplanner.schemas.plan import PlanningConstraints, Term
from degreeplanner.schemas.requirements import Course

logger = get_logger("services.scheduler")

MAX_PLAN_TERMS = 8


@dataclass
class ScheduleEntry:
    course: Course
    prerequisites: list[str]
    scheduled: bool = False
    term: str | None = None

    @property
    def code(self) -> str:
        return self.course.code


@dataclass
class ScheduleResult:
    terms: list[Term]
    warnings: list[str] = field(default_factory=list)


PriorityKey = Callable[[ScheduleEntry], Any]


def advanced_first(entry: ScheduleEntry) -> tuple:
    # More prerequisites first (likely more advanced), then heavier courses
    return (-len(entry.prerequisites), -entry.course.credits)


def format_credits(value: float) -> str:
    return f"{value:g}"


def schedule_courses(
    courses: list[Course],
    prereq_map: dict[str, list[str]],
    term_sequence: list[str],
    constraints: PlanningConstraints,
    priority: PriorityKey = advanced_first,
) -> ScheduleResult:
    warnings: list[str] = []

    # Status is tracked here, keyed by code; the input courses are never touched
    entries: dict[str, ScheduleEntry] = {}
    for course in courses:
        if course.code in entries:
            logger.warning("Duplicate course %s ignored", course.code)
            continue
        entries[course.code] = ScheduleEntry(
            course=course,
            prerequisites=prereq_map.get(course.code, []),
        )

    terms: list[Term] = []
    completed: set[str] = set()
    for term_name in term_sequence:
        season = term_name.split(" ")[0]
        eligible = [
            entry
            for entry in entries.values()
            if not entry.scheduled
            and season in entry.course.offerings
            and all(req in completed for req in entry.prerequisites)
        ]
        eligible.sort(key=priority)

        current: list[Course] = []
        credits = 0
        for entry in eligible:
            if credits + entry.course.credits > constraints.max_credits:
                continue
            current.append(entry.course)
            credits += entry.course.credits
            entry.scheduled = True
            entry.term = term_name

        if 0 < credits < constraints.min_credits:
            warnings.append(
                f"{term_name}: Only {format_credits(credits)} credits scheduled "
                f"(minimum: {format_credits(constraints.min_credits)})"
            )

        if current:
            terms.append(Term(name=term_name, courses=current, total_credits=credits))
            # Committed only after the term closes: same-term prereqs don't count
            completed.update(course.code for course in current)
            logger.debug(
                "%s: %d courses, %s credits", term_name, len(current), format_credits(credits)
            )

        if all(entry.scheduled for entry in entries.values()):
            break

    unscheduled = [entry.code for entry in entries.values() if not entry.scheduled]
    if unscheduled:
        warnings.append(f"Unable to schedule {len(unscheduled)} courses: {', '.join(unscheduled)}")

    if len(terms) > MAX_PLAN_TERMS:
        overflow = terms[MAX_PLAN_TERMS:]
        terms = terms[:MAX_PLAN_TERMS]
        warnings.append(
            f"Plan exceeds {MAX_PLAN_TERMS} terms - consider increasing credit load or including summers"
        )
        left_out = [course.code for term in overflow for course in term.courses]
        warnings.append(
            f"Courses planned after term {MAX_PLAN_TERMS} were left out: {', '.join(left_out)}"
        )

    return ScheduleResult(terms=terms, warnings=warnings)
