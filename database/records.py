#!/usr/bin/env python3
"""
Record validation at the data-layer boundary.

Rows returned by the hosted data store are plain mappings. Everything
downstream of this module works on the typed models in database.models.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import ValidationError

from core.exceptions import InvalidRecordError
from database.models import Record

logger = logging.getLogger(__name__)

R = TypeVar('R', bound=Record)


def parse_record(model: Type[R], row: Union[Mapping[str, Any], R, None], index: Optional[int] = None) -> R:
    """Validate a single row into `model`. Already-typed rows pass through."""
    if isinstance(row, model):
        return row
    if row is None:
        raise InvalidRecordError(model.__name__, "row is None", index)
    if not isinstance(row, Mapping):
        raise InvalidRecordError(model.__name__, f"expected a mapping, got {type(row).__name__}", index)
    try:
        return model.model_validate(dict(row))
    except ValidationError as e:
        raise InvalidRecordError(model.__name__, str(e), index) from e


def parse_records(model: Type[R], rows: Optional[Sequence[Union[Mapping[str, Any], R]]]) -> List[R]:
    """
    Validate a result set into a list of `model` instances.

    Args:
        model: Record subclass to validate into
        rows: Rows as returned by the data store (an empty result is [])

    Returns:
        List of validated records, in fetch order

    Raises:
        InvalidRecordError: rows is None or a row fails validation
    """
    if rows is None:
        raise InvalidRecordError(model.__name__, "result set is None")
    if isinstance(rows, (str, bytes, Mapping)):
        raise InvalidRecordError(model.__name__, f"expected a list of rows, got {type(rows).__name__}")

    records = [parse_record(model, row, index) for index, row in enumerate(rows)]
    logger.debug(f"Validated {len(records)} {model.__name__} rows")
    return records
