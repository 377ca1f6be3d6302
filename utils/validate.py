from typing import List, Optional

from exceptions.custom_errors import InsufficientStaffError, MissingResponsibleNurseError
from schemas.records import NurseRecord
from utils.constants import MIN_STAFF_NURSES


def validate_nurse_pool(
    responsible: Optional[NurseRecord],
    staff: List[NurseRecord],
    min_staff: int = MIN_STAFF_NURSES,
):
    """
    Check that a run can start with the given nurses.

    Raises:
        MissingResponsibleNurseError: If there is no responsible nurse.
        InsufficientStaffError: If there are fewer than `min_staff` staff nurses.
    """
    if responsible is None:
        raise MissingResponsibleNurseError("No responsible nurse found.")

    if len(staff) < min_staff:
        raise InsufficientStaffError(
            f"At least {min_staff} staff nurses are required, found {len(staff)}."
        )
