"""
Type definitions for the musclesworked MCP server.

Includes the argument types shared by tool signatures, the exercise filter
set sent to the API, and the result types returned by the API client.
"""

from dataclasses import asdict, dataclass
from typing import Annotated, Any, Literal

from pydantic import Field

Equipment = Literal[
    "barbell",
    "dumbbell",
    "kettlebell",
    "cable",
    "machine",
    "bodyweight",
    "band",
    "smith_machine",
    "trap_bar",
    "ez_bar",
    "suspension",
    "medicine_ball",
    "plate",
    "landmine",
    "none",
]

Difficulty = Literal["beginner", "intermediate", "advanced"]

MovementPattern = Literal[
    "horizontal_push",
    "horizontal_pull",
    "vertical_push",
    "vertical_pull",
    "squat",
    "hinge",
    "lunge",
    "carry",
    "rotation",
    "anti_rotation",
    "flexion",
    "extension",
    "isolation",
    "abduction",
    "adduction",
]

ExerciseType = Literal["compound", "isolation", "isometric"]

MuscleRole = Literal["primary", "secondary", "stabilizer"]

SearchQuery = Annotated[str, Field(min_length=2)]
ExerciseList = Annotated[list[str], Field(min_length=1)]
FindLimit = Annotated[int, Field(ge=1, le=200)]
AlternativesLimit = Annotated[int, Field(ge=1, le=50)]


@dataclass(frozen=True)
class ExerciseFilters:
    """Optional filters for finding exercises that target a muscle."""

    equipment: str | None = None
    difficulty: str | None = None
    movement_pattern: str | None = None
    exercise_type: str | None = None
    role: str | None = None
    limit: int | None = None

    def to_params(self) -> dict[str, str]:
        """Return the filters as query parameters, leaving out unset ones."""
        return {key: str(value) for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class ApiSuccess:
    """Parsed JSON body of a successful response, unmodified."""

    data: Any


@dataclass(frozen=True)
class ApiError:
    """The API answered with a non-success status."""

    status: int
    detail: str


@dataclass(frozen=True)
class RequestFailure:
    """The request failed before a usable response was received."""

    message: str


ApiResult = ApiSuccess | ApiError | RequestFailure
