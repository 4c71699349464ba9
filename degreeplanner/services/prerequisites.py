from degreeplanner.core.logging import get_logger
from degreeplanner.schemas.requirements import Course, Prerequisite

logger = get_logger("services.prerequisites")


def build_prereq_map(
    prerequisites: list[Prerequisite],
    courses: list[Course] | None = None,
) -> dict[str, list[str]]:
    """Index prerequisite edges by course code.

    A later edge for the same course replaces the earlier one. Codes from
    ``courses`` that have no edge map to an empty list.
    """
    mapping: dict[str, list[str]] = {}
    for course in courses or []:
        mapping.setdefault(course.code, [])
    seen: set[str] = set()
    for edge in prerequisites:
        if edge.course in seen:
            logger.warning(
                "Duplicate prerequisite edge for %s; keeping the last one (%s)",
                edge.course,
                ", ".join(edge.requires) or "none",
            )
        seen.add(edge.course)
        mapping[edge.course] = list(edge.requires)
    return mapping
