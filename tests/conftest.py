"""Shared pytest fixtures and configuration."""

from datetime import date

import pytest

from degreeplanner.schemas.plan import PlanningConstraints
from degreeplanner.schemas.requirements import Course, DegreeRequirements, Prerequisite


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: HTTP and database tests")


@pytest.fixture
def fall_2025() -> date:
    """A fixed 'today' in the Fall 2025 window."""
    return date(2025, 9, 15)


@pytest.fixture
def sample_requirements() -> DegreeRequirements:
    """Four-course catalog with two prerequisite chains."""
    return DegreeRequirements(
        institution="Test University",
        program="Computer Science",
        total_credits=120,
        courses=[
            Course(code="CS 101", name="Intro to CS", credits=3, offerings=["Fall", "Spring"]),
            Course(code="CS 201", name="Data Structures", credits=3, offerings=["Fall", "Spring"]),
            Course(
                code="MATH 151",
                name="Calculus I",
                credits=4,
                offerings=["Fall", "Spring", "Summer"],
            ),
            Course(
                code="MATH 152",
                name="Calculus II",
                credits=4,
                offerings=["Fall", "Spring", "Summer"],
            ),
        ],
        prerequisites=[
            Prerequisite(course="CS 201", requires=["CS 101"]),
            Prerequisite(course="MATH 152", requires=["MATH 151"]),
        ],
    )


@pytest.fixture
def sample_constraints() -> PlanningConstraints:
    """12-18 credits, graduating Spring 2026 without summers."""
    return PlanningConstraints(
        min_credits=12,
        max_credits=18,
        target_grad_term="Spring 2026",
        include_summers=False,
    )
