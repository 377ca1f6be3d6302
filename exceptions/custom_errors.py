class SchedulePreconditionError(Exception):
    """Raised when the nurse pool cannot support a scheduling run. Nothing is created when this is raised."""

    pass


class MissingResponsibleNurseError(SchedulePreconditionError):
    """Raised when no responsible nurse exists."""

    pass


class InsufficientStaffError(SchedulePreconditionError):
    """Raised when fewer staff nurses exist than a run requires."""

    pass


class InvalidMonthError(Exception):
    """Raised when a month is not given in YYYY-MM form."""

    pass


class InvalidLeaveError(Exception):
    """Raised when a leave record has an end date before its start date."""

    pass


class ScheduleNotFoundError(Exception):
    """Raised when a schedule cannot be found."""

    pass


class NurseNotFoundError(Exception):
    """Raised when a nurse cannot be found."""

    pass


class LeaveNotFoundError(Exception):
    """Raised when a leave record cannot be found."""

    pass


class ScheduleConflictError(Exception):
    """Raised when a schedule already exists for the month, or a published schedule is modified."""

    pass


class NurseConflictError(Exception):
    """Raised when a second responsible nurse is created, or the responsible nurse is deleted."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    SchedulePreconditionError: 422,
    MissingResponsibleNurseError: 422,
    InsufficientStaffError: 422,
    InvalidMonthError: 400,
    InvalidLeaveError: 400,
    ScheduleNotFoundError: 404,
    NurseNotFoundError: 404,
    LeaveNotFoundError: 404,
    ScheduleConflictError: 409,
    NurseConflictError: 409,
}
