from typing import Literal, Union

from pydantic import BaseModel, Field

Season = Literal["Fall", "Spring", "Summer"]


class Course(BaseModel):
    code: str = Field(..., max_length=20)
    name: str = Field(..., max_length=200)
    credits: float = Field(..., ge=0, le=20)
    description: str | None = Field(None, max_length=1000)
    offerings: list[Season] = []


class Prerequisite(BaseModel):
    course: str = Field(..., max_length=20)
    requires: list[str] = []


class PrereqLogic(BaseModel):
    """Boolean prerequisite expression as produced by catalog extraction.

    Leaves are course codes, nodes combine their terms with AND/OR. The
    scheduler only understands flat ``Prerequisite`` edges, so this type is
    carried for upstream data and converted before planning.
    """

    op: Literal["AND", "OR"]
    terms: list[Union[str, "PrereqLogic"]]

    def course_codes(self) -> list[str]:
        codes: list[str] = []
        for term in self.terms:
            if isinstance(term, PrereqLogic):
                codes.extend(term.course_codes())
            else:
                codes.append(term)
        return codes


PrereqLogic.model_rebuild()


class DegreeRequirements(BaseModel):
    institution: str = Field(..., max_length=200)
    program: str = Field(..., max_length=200)
    total_credits: float = Field(..., ge=1, le=300)
    courses: list[Course] = Field(..., min_length=1, max_length=200)
    prerequisites: list[Prerequisite] = Field([], max_length=500)
