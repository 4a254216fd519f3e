"""ID and value generators (CUID primary keys, human-readable task codes)."""

import uuid

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_task_code() -> str:
    """Short display code for a task, e.g. 'task-3fa'. Not unique; id is the key."""
    return f"task-{uuid.uuid4().hex[:3]}"
