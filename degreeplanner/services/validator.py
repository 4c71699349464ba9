from degreeplanner.schemas.plan import PlannerOutput
from degreeplanner.schemas.requirements import DegreeRequirements


def validate_plan(plan: PlannerOutput, requirements: DegreeRequirements) -> list[str]:
    """Re-check a plan against the requirements it was built from.

    Works from ``requirements`` only, never from scheduler state, and leaves
    ``plan`` untouched. Returns the warnings; callers append them.

    Prerequisites are resolved from the first edge listed for a course. The
    scheduler keeps the last one, so a catalog with conflicting duplicate
    edges gets flagged here instead of passing silently.
    """
    errors: list[str] = []

    planned = {course.code for term in plan.terms for course in term.courses}
    required = list(dict.fromkeys(course.code for course in requirements.courses))
    missing = [code for code in required if code not in planned]
    if missing:
        errors.append(f"Missing required courses: {', '.join(missing)}")

    known = set(required)
    first_edges: dict[str, list[str]] = {}
    for edge in requirements.prerequisites:
        first_edges.setdefault(edge.course, edge.requires)

    codes_by_term: dict[str, list[str]] = {}
    for term in plan.terms:
        previous = {code for codes in codes_by_term.values() for code in codes}
        for course in term.courses:
            if course.code not in known:
                continue
            unmet = [req for req in first_edges.get(course.code, []) if req not in previous]
            if unmet:
                errors.append(
                    f"{course.code} in {term.name} has unmet prerequisites: {', '.join(unmet)}"
                )
        codes_by_term[term.name] = [course.code for course in term.courses]

    return errors
