import enum


class WriteResult(str, enum.Enum):
    """
    Outcome of a write against a single record.

    - OK: the change was committed
    - NOT_FOUND: no record with that id exists
    - CONFLICT: the record exists but was modified concurrently
      (its version no longer matches the one the caller sent)
    """
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
