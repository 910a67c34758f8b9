#!/usr/bin/env python3
"""
Custom exceptions for the scoring core.
"""

from typing import Optional


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class InvalidInputError(ServiceException):
    """Raised when a scorer receives malformed input (e.g. None where a list is required)."""
    pass


class InvalidRecordError(ServiceException):
    """Raised when a row from the data store fails validation."""

    def __init__(self, model_name: str, message: str, index: Optional[int] = None):
        self.model_name = model_name
        self.index = index
        location = f" at row {index}" if index is not None else ""
        super().__init__(f"Invalid {model_name} record{location}: {message}")


class UsageLimitExceeded(ServiceException):
    """Raised when a user has no AI assistant uses left for today."""

    def __init__(self, user_id: str, limit: int):
        self.user_id = user_id
        self.limit = limit
        super().__init__(f"Daily AI usage limit of {limit} reached for user {user_id}")
