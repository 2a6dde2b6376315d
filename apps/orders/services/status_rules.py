"""Status nudges driven by repair progress."""

from ..models import OrderStatus
from .exceptions import InvalidProgressError

PROGRESS_COMPLETE = 100


def validate_progress(progress):
    """
    Raises:
        InvalidProgressError: If progress is outside 0-100
    """
    if progress is not None and not (0 <= progress <= PROGRESS_COMPLETE):
        raise InvalidProgressError("Progress must be between 0 and 100")


def resolve_status(current_status, progress=None, requested_status=None):
    """
    Return the status an order ends up with after an update.

    Starts from ``requested_status`` when the caller supplied one, else the
    current status. A progress of 100 always moves the order to Ready; any
    positive progress on an order still in Received moves it to Repairing.
    Nothing moves an order out of Ready, and progress may go back down.

    Args:
        current_status: Status stored before the update.
        progress (int, optional): New progress, if the update sets one.
        requested_status (optional): Explicit status from the caller.

    Returns:
        The resulting OrderStatus value.
    """
    status = requested_status or current_status

    if progress is None:
        return status

    validate_progress(progress)

    if progress == PROGRESS_COMPLETE:
        return OrderStatus.READY
    if progress > 0 and current_status == OrderStatus.RECEIVED:
        return OrderStatus.REPAIRING
    return status
