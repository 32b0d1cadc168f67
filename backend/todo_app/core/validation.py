import uuid
from typing import List, Optional, Union

from todo_app.core.exceptions import FieldError, ValidationError
from todo_app.models.task import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH

NIL_UUID = uuid.UUID(int=0)


def normalize_title(title: Optional[str]) -> str:
    return (title or "").strip()


def normalize_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    description = description.strip()
    return description or None


def is_blank_id(value: Union[uuid.UUID, str, None]) -> bool:
    if value is None:
        return True
    if isinstance(value, uuid.UUID):
        return value == NIL_UUID
    return not value.strip()


def validate_task_fields(
    user_id: Union[uuid.UUID, str, None],
    title: str,
    description: Optional[str],
) -> List[FieldError]:
    """Check a candidate task and return every violation found.

    ``title`` and ``description`` are expected to be normalized already.
    An empty list means the candidate is valid.
    """
    errors: List[FieldError] = []

    if is_blank_id(user_id):
        errors.append(FieldError("userId", "User ID is required"))

    if not title:
        errors.append(FieldError("title", "Title is required"))
    elif len(title) > MAX_TITLE_LENGTH:
        errors.append(FieldError("title", f"Title cannot exceed {MAX_TITLE_LENGTH} characters"))

    if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(
            FieldError("description", f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters")
        )

    return errors


def ensure_valid_task(
    user_id: Union[uuid.UUID, str, None],
    title: str,
    description: Optional[str],
) -> None:
    errors = validate_task_fields(user_id, title, description)
    if errors:
        raise ValidationError(errors)


def parse_task_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(raw).strip())
    except (ValueError, AttributeError):
        raise ValidationError.single("id", "Invalid task ID format") from None
