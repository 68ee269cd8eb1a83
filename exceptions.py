"""
Exceptions raised by the planners, the progress scorer and the tracker.

Every error carries a human-readable message, an ErrorCode and an optional
details dict so the UI can show something useful without parsing strings.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    INVALID_GOAL = "INVALID_GOAL"
    INVALID_BIOMETRIC = "INVALID_BIOMETRIC"
    UNSUPPORTED_AVAILABILITY = "UNSUPPORTED_AVAILABILITY"
    INFEASIBLE_TARGETS = "INFEASIBLE_TARGETS"
    INVALID_SET = "INVALID_SET"
    UNKNOWN_FOOD = "UNKNOWN_FOOD"
    UNKNOWN_PLAN_DAY = "UNKNOWN_PLAN_DAY"

    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    PLAN_NOT_FOUND = "PLAN_NOT_FOUND"

    DUPLICATE_SESSION = "DUPLICATE_SESSION"
    CONCURRENT_UPDATE = "CONCURRENT_UPDATE"


class FitnessError(Exception):
    """
    Base exception for the fitness tracker.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "message": self.message, "details": self.details}


class ValidationError(FitnessError):
    """Input rejected before any computation took place."""

    code = ErrorCode.VALIDATION_ERROR


class InvalidGoal(ValidationError):
    code = ErrorCode.INVALID_GOAL


class InvalidBiometric(ValidationError):
    code = ErrorCode.INVALID_BIOMETRIC


class UnsupportedAvailability(ValidationError):
    code = ErrorCode.UNSUPPORTED_AVAILABILITY


class InfeasibleTargets(ValidationError):
    """Protein and fat targets alone exceed the calorie target."""

    code = ErrorCode.INFEASIBLE_TARGETS


class InvalidSet(ValidationError):
    code = ErrorCode.INVALID_SET


class UnknownFood(ValidationError):
    code = ErrorCode.UNKNOWN_FOOD


class UnknownPlanDay(ValidationError):
    code = ErrorCode.UNKNOWN_PLAN_DAY


class NotFoundError(FitnessError):
    """A requested record does not exist."""

    code = ErrorCode.NOT_FOUND


class ProfileNotFound(NotFoundError):
    code = ErrorCode.PROFILE_NOT_FOUND


class PlanNotFound(NotFoundError):
    code = ErrorCode.PLAN_NOT_FOUND


class DuplicateSession(FitnessError):
    """A progress entry already exists for this user and date."""

    code = ErrorCode.DUPLICATE_SESSION


class ConcurrentUpdate(FitnessError):
    """Another write to the same user's stats kept winning; nothing was stored."""

    code = ErrorCode.CONCURRENT_UPDATE
