"""Opaque Identifiers — random tokens used only as lookup keys.

Invariants:
    - User ids: 8 characters from the base-36 alphabet (0-9a-z), from `secrets`
    - Exercise ids: uuid4 hex (32 characters)
"""

import secrets
import string
import uuid

from exercise_tracker.core.domain_types import ExerciseId, UserId

BASE36_ALPHABET = string.digits + string.ascii_lowercase
USER_ID_LENGTH = 8


def new_user_id(length: int = USER_ID_LENGTH) -> UserId:
    return UserId("".join(
        secrets.choice(BASE36_ALPHABET) for _ in range(length)
    ))


def new_exercise_id() -> ExerciseId:
    return ExerciseId(uuid.uuid4().hex)
