import re
from dataclasses import dataclass
from datetime import date

from degreeplanner.core.logging import get_logger

logger = get_logger("services.terms")

# Runaway guard for targets that are unreachable or far in the future
MAX_SEQUENCE_TERMS = 12

_TARGET_RE = re.compile(r"(Spring|Summer|Fall)\s+(\d{4})")


@dataclass(frozen=True)
class TargetTerm:
    season: str
    year: int

    @property
    def label(self) -> str:
        return f"{self.season} {self.year}"


def parse_target_term(label: str) -> TargetTerm | None:
    match = _TARGET_RE.fullmatch(label)
    if not match:
        return None
    return TargetTerm(season=match.group(1), year=int(match.group(2)))


def season_cycle(include_summers: bool) -> list[str]:
    if include_summers:
        return ["Spring", "Summer", "Fall"]
    return ["Spring", "Fall"]


def starting_season(month: int, include_summers: bool) -> str:
    if 1 <= month <= 5:
        return "Spring"
    if 6 <= month <= 8:
        return "Summer" if include_summers else "Fall"
    return "Fall"


def generate_term_sequence(
    target: TargetTerm,
    include_summers: bool,
    today: date | None = None,
) -> list[str]:
    """List term labels from the current term through ``target``.

    The sequence stops after MAX_SEQUENCE_TERMS entries even when the target
    was never produced (target in the past, or a Summer target with summers
    excluded); callers see a sequence that does not end on the target.
    """
    today = today or date.today()
    cycle = season_cycle(include_summers)
    index = cycle.index(starting_season(today.month, include_summers))
    year = today.year

    terms: list[str] = []
    while len(terms) < MAX_SEQUENCE_TERMS:
        season = cycle[index]
        terms.append(f"{season} {year}")
        if season == target.season and year == target.year:
            break
        index += 1
        if index == len(cycle):
            index = 0
            year += 1
    else:
        logger.warning(
            "Target term %s not reached within %d terms (starting %s)",
            target.label,
            MAX_SEQUENCE_TERMS,
            terms[0],
        )

    return terms
