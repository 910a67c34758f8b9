from typing import Any, List

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """
    Base for rows read from the hosted data store.

    Rows carry more columns than the scorers need (timestamps, foreign keys),
    so unknown keys are ignored rather than rejected.
    """
    model_config = ConfigDict(extra='ignore', populate_by_name=True)


def none_to_empty_list(value: Any) -> List[Any]:
    """Nullable array columns come back as None; treat them as empty."""
    if value is None:
        return []
    return value
