"""Exercise Schemas — add-exercise and exercise-log response bodies.

Invariants:
    - date fields are YYYY-MM-DD strings
    - duration is an int when integral, float otherwise
    - ExerciseLogResponse: from/to/limit omitted (not null) when not applied

Design Decisions:
    - `from` is a Python keyword: field is date_from with alias "from",
      populate_by_name so services build it by field name
    - Routes serialize with response_model_exclude_none to drop unset optionals
"""

from pydantic import BaseModel, ConfigDict, Field


class ExerciseResponse(BaseModel):
    """Result of adding an exercise."""
    username: str
    id: str
    description: str
    duration: int | float
    date: str


class LogEntry(BaseModel):
    """One exercise in a user's log."""
    description: str
    duration: int | float
    date: str


class ExerciseLogResponse(BaseModel):
    """A user's exercise log, with the filters that were applied."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str
    date_from: str | None = Field(None, alias="from")
    date_to: str | None = Field(None, alias="to")
    limit: int | None = None
    count: int
    log: list[LogEntry]
