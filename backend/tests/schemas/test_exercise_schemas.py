"""Exercise Schemas — verifies aliases and omission of unapplied log filters."""

from exercise_tracker.schemas.exercise import ExerciseLogResponse, LogEntry


def _log(**kwargs) -> ExerciseLogResponse:
    return ExerciseLogResponse(
        username="alice", id="abc12345", count=0, log=[], **kwargs,
    )


def test_from_and_to_serialize_under_aliases():
    dumped = _log(date_from="2023-01-01", date_to="2023-12-31").model_dump(
        by_alias=True, exclude_none=True,
    )
    assert dumped["from"] == "2023-01-01"
    assert dumped["to"] == "2023-12-31"
    assert "date_from" not in dumped


def test_unapplied_filters_are_omitted():
    dumped = _log().model_dump(by_alias=True, exclude_none=True)
    assert set(dumped) == {"username", "id", "count", "log"}


def test_log_entry_keeps_integer_duration():
    entry = LogEntry(description="run", duration=30, date="2023-05-01")
    assert entry.model_dump() == {
        "description": "run", "duration": 30, "date": "2023-05-01",
    }
