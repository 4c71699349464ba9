import re

from degreeplanner.schemas.plan import PlanRequest

_MAX_TEXT_LENGTH = 1000
_MARKUP_RE = re.compile(r"[<>]")
_PROTOCOL_RE = re.compile(r"(javascript|data):", re.IGNORECASE)


def sanitize_string(value: str) -> str:
    cleaned = value.strip()
    cleaned = _MARKUP_RE.sub("", cleaned)
    cleaned = _PROTOCOL_RE.sub("", cleaned)
    return cleaned[:_MAX_TEXT_LENGTH]


def sanitize_plan_request(payload: PlanRequest) -> PlanRequest:
    """Return a copy of the request with every free-text field cleaned.

    Course codes are cleaned too, so prerequisite edges are cleaned the same
    way to keep them pointing at the same courses.
    """
    reqs = payload.degree_requirements
    courses = [
        course.model_copy(
            update={
                "code": sanitize_string(course.code),
                "name": sanitize_string(course.name),
                "description": (
                    sanitize_string(course.description) if course.description else None
                ),
            }
        )
        for course in reqs.courses
    ]
    prerequisites = [
        edge.model_copy(
            update={
                "course": sanitize_string(edge.course),
                "requires": [sanitize_string(code) for code in edge.requires],
            }
        )
        for edge in reqs.prerequisites
    ]
    cleaned_reqs = reqs.model_copy(
        update={
            "institution": sanitize_string(reqs.institution),
            "program": sanitize_string(reqs.program),
            "courses": courses,
            "prerequisites": prerequisites,
        }
    )
    cleaned_constraints = payload.constraints.model_copy(
        update={"target_grad_term": sanitize_string(payload.constraints.target_grad_term)}
    )
    return payload.model_copy(
        update={"degree_requirements": cleaned_reqs, "constraints": cleaned_constraints}
    )
