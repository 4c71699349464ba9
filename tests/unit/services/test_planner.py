"""Unit tests for plan generation end to end."""

from datetime import date

import pytest

from degreeplanner.schemas.plan import PlannerOutput, PlanningConstraints
from degreeplanner.schemas.requirements import Course, DegreeRequirements, Prerequisite
from degreeplanner.services.planner import INVALID_TARGET_WARNING, build_plan, generate_plan
from degreeplanner.services.validator import validate_plan


@pytest.fixture
def catalog() -> DegreeRequirements:
    """A larger catalog with chains, summer-only and fall-only courses."""
    courses = [
        Course(code="CS 101", name="Intro", credits=3, offerings=["Fall", "Spring"]),
        Course(code="CS 201", name="Data Structures", credits=3, offerings=["Fall", "Spring"]),
        Course(code="CS 301", name="Algorithms", credits=3, offerings=["Fall"]),
        Course(code="CS 310", name="Systems", credits=4, offerings=["Spring"]),
        Course(code="CS 401", name="Compilers", credits=3, offerings=["Fall", "Spring"]),
        Course(code="MATH 151", name="Calc I", credits=4, offerings=["Fall", "Spring", "Summer"]),
        Course(code="MATH 152", name="Calc II", credits=4, offerings=["Fall", "Spring", "Summer"]),
        Course(code="MATH 221", name="Linear Algebra", credits=3, offerings=["Fall", "Spring"]),
        Course(code="STAT 200", name="Statistics", credits=3, offerings=["Summer"]),
        Course(code="ENG 101", name="Composition", credits=3, offerings=["Fall", "Spring"]),
        Course(code="PHYS 201", name="Physics I", credits=5, offerings=["Fall"]),
        Course(code="PHYS 202", name="Physics II", credits=5, offerings=["Spring"]),
    ]
    prerequisites = [
        Prerequisite(course="CS 201", requires=["CS 101"]),
        Prerequisite(course="CS 301", requires=["CS 201", "MATH 152"]),
        Prerequisite(course="CS 310", requires=["CS 201"]),
        Prerequisite(course="CS 401", requires=["CS 301", "CS 310"]),
        Prerequisite(course="MATH 152", requires=["MATH 151"]),
        Prerequisite(course="MATH 221", requires=["MATH 151"]),
        Prerequisite(course="PHYS 202", requires=["PHYS 201", "MATH 151"]),
    ]
    return DegreeRequirements(
        institution="State University",
        program="Computer Science",
        total_credits=43,
        courses=courses,
        prerequisites=prerequisites,
    )


def assert_plan_invariants(
    plan: PlannerOutput, requirements: DegreeRequirements, constraints: PlanningConstraints
) -> None:
    by_code = {course.code: course for course in requirements.courses}
    prereqs = {edge.course: edge.requires for edge in requirements.prerequisites}
    term_index: dict[str, int] = {}
    for index, term in enumerate(plan.terms):
        season = term.name.split(" ")[0]
        assert term.total_credits <= constraints.max_credits
        assert term.total_credits == sum(course.credits for course in term.courses)
        for course in term.courses:
            assert course.code not in term_index, f"{course.code} scheduled twice"
            assert season in by_code[course.code].offerings
            term_index[course.code] = index
    for code, index in term_index.items():
        for req in prereqs.get(code, []):
            assert req in term_index and term_index[req] < index
    assert len(plan.terms) <= 8
    assert plan.total_credits == sum(term.total_credits for term in plan.terms)


@pytest.mark.unit
class TestSampleScenario:
    """The four-course catalog graduating Spring 2026."""

    def test_generates_terms(
        self, sample_requirements, sample_constraints, fall_2025: date
    ) -> None:
        plan = generate_plan(sample_requirements, sample_constraints, today=fall_2025)

        assert 0 < len(plan.terms) <= 8
        assert plan.total_credits > 0
        assert [t.name for t in plan.terms] == ["Fall 2025", "Spring 2026"]
        assert [[c.code for c in t.courses] for t in plan.terms] == [
            ["MATH 151", "CS 101"],
            ["MATH 152", "CS 201"],
        ]

    def test_no_prerequisite_violations(
        self, sample_requirements, sample_constraints, fall_2025: date
    ) -> None:
        plan = generate_plan(sample_requirements, sample_constraints, today=fall_2025)

        violations = [
            w for w in validate_plan(plan, sample_requirements) if "unmet prerequisites" in w
        ]
        assert violations == []

    def test_warnings_in_detection_order(
        self, sample_requirements, sample_constraints, fall_2025: date
    ) -> None:
        plan = generate_plan(sample_requirements, sample_constraints, today=fall_2025)

        assert plan.warnings == [
            "Fall 2025: Only 7 credits scheduled (minimum: 12)",
            "Spring 2026: Only 7 credits scheduled (minimum: 12)",
            "Planned credits (14) are less than required (120)",
        ]
        assert plan.total_credits == 14

    def test_credit_ceiling(self, sample_requirements, sample_constraints, fall_2025: date) -> None:
        plan = generate_plan(sample_requirements, sample_constraints, today=fall_2025)
        for term in plan.terms:
            assert term.total_credits <= sample_constraints.max_credits


@pytest.mark.unit
class TestInvalidTarget:
    """Malformed targets produce an empty plan and one warning."""

    def test_invalid_target_term(self, sample_requirements, sample_constraints) -> None:
        constraints = sample_constraints.model_copy(update={"target_grad_term": "Invalid Term"})

        plan = generate_plan(sample_requirements, constraints)

        assert plan.terms == []
        assert plan.warnings == [INVALID_TARGET_WARNING]
        assert plan.total_credits == 0


@pytest.mark.unit
class TestInfeasibility:
    """Unschedulable courses are reported, not raised."""

    def test_summer_only_course_without_summers(
        self, sample_requirements, sample_constraints, fall_2025: date
    ) -> None:
        reqs = sample_requirements.model_copy(
            update={
                "courses": [
                    *sample_requirements.courses,
                    Course(code="GEO 100", name="Field Camp", credits=3, offerings=["Summer"]),
                ]
            }
        )

        plan = generate_plan(reqs, sample_constraints, today=fall_2025)

        assert "Unable to schedule 1 courses: GEO 100" in plan.warnings
        assert all(c.code != "GEO 100" for t in plan.terms for c in t.courses)

    def test_summer_only_course_with_summers(self, sample_requirements, fall_2025: date) -> None:
        reqs = sample_requirements.model_copy(
            update={
                "courses": [
                    *sample_requirements.courses,
                    Course(code="GEO 100", name="Field Camp", credits=3, offerings=["Summer"]),
                ]
            }
        )
        constraints = PlanningConstraints(
            min_credits=3, max_credits=18, target_grad_term="Summer 2026", include_summers=True
        )

        plan = generate_plan(reqs, constraints, today=fall_2025)

        assert [t.name for t in plan.terms][-1] == "Summer 2026"
        assert not any(w.startswith("Unable to schedule") for w in plan.warnings)

    def test_shortfall_keeps_partial_term(
        self, sample_requirements, sample_constraints, fall_2025: date
    ) -> None:
        plan = generate_plan(sample_requirements, sample_constraints, today=fall_2025)

        assert plan.terms[0].total_credits == 7
        assert "Fall 2025: Only 7 credits scheduled (minimum: 12)" in plan.warnings

    def test_no_credit_warning_when_requirement_met(
        self, sample_requirements, sample_constraints, fall_2025: date
    ) -> None:
        reqs = sample_requirements.model_copy(update={"total_credits": 14})

        plan = generate_plan(reqs, sample_constraints, today=fall_2025)

        assert not any(w.startswith("Planned credits") for w in plan.warnings)


@pytest.mark.unit
class TestInvariants:
    """Plan invariants over a larger catalog and several constraint sets."""

    @pytest.mark.parametrize(
        ("min_credits", "max_credits", "target", "summers"),
        [
            (12, 18, "Spring 2028", False),
            (6, 9, "Fall 2027", True),
            (3, 5, "Spring 2029", False),
            (12, 15, "Summer 2026", True),
            (1, 30, "Fall 2025", False),
        ],
    )
    def test_invariants_hold(
        self, catalog: DegreeRequirements, fall_2025: date, min_credits, max_credits, target, summers
    ) -> None:
        constraints = PlanningConstraints(
            min_credits=min_credits,
            max_credits=max_credits,
            target_grad_term=target,
            include_summers=summers,
        )

        plan = generate_plan(catalog, constraints, today=fall_2025)

        assert_plan_invariants(plan, catalog, constraints)
        assert [w for w in validate_plan(plan, catalog) if "unmet prerequisites" in w] == []

    def test_every_course_is_placed_or_reported(self, catalog: DegreeRequirements, fall_2025: date) -> None:
        constraints = PlanningConstraints(
            min_credits=3, max_credits=5, target_grad_term="Spring 2029", include_summers=False
        )

        plan = generate_plan(catalog, constraints, today=fall_2025)

        placed = {c.code for t in plan.terms for c in t.courses}
        reported = " ".join(
            w for w in plan.warnings if w.startswith(("Unable to schedule", "Courses planned after"))
        )
        for course in catalog.courses:
            assert course.code in placed or course.code in reported

    def test_custom_priority_is_used(self, sample_requirements, sample_constraints, fall_2025: date) -> None:
        plan = generate_plan(
            sample_requirements,
            sample_constraints,
            today=fall_2025,
            priority=lambda entry: entry.course.credits,
        )

        assert [c.code for c in plan.terms[0].courses] == ["CS 101", "MATH 151"]


@pytest.mark.unit
class TestBuildPlan:
    """Generation followed by validation."""

    def test_validation_warnings_appended(self, sample_requirements, fall_2025: date) -> None:
        constraints = PlanningConstraints(
            min_credits=1, max_credits=18, target_grad_term="Fall 2025", include_summers=False
        )

        plan, validation = build_plan(sample_requirements, constraints, today=fall_2025)

        assert validation == ["Missing required courses: CS 201, MATH 152"]
        assert plan.warnings[-1] == validation[0]
        assert plan.warnings[0] == "Unable to schedule 2 courses: CS 201, MATH 152"

    def test_clean_plan_has_no_validation_warnings(
        self, sample_requirements, sample_constraints, fall_2025: date
    ) -> None:
        plan, validation = build_plan(sample_requirements, sample_constraints, today=fall_2025)

        assert validation == []
        assert len(plan.terms) == 2
