"""Technician roster management."""

from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
import logging

from apps.accounts.models import User
from ..models import Technician
from .exceptions import TechnicianNotFoundError

logger = logging.getLogger(__name__)


def get_technicians(*, owner: User) -> QuerySet:
    return Technician.objects.filter(owner=owner).order_by('name')


@transaction.atomic
def create_technician(*, owner: User, name: str) -> Technician:
    """Add a technician to the account's roster."""
    technician = Technician.objects.create(owner=owner, name=name.strip())
    logger.info("Account %s added technician %s", owner.id, technician.id)
    return technician


@transaction.atomic
def delete_technician(*, owner: User, technician_id: UUID) -> None:
    """
    Remove a technician from the roster.

    Orders keep the technician name they were assigned.

    Raises:
        TechnicianNotFoundError: If the technician is missing or owned by another account
    """
    deleted, _ = Technician.objects.filter(id=technician_id, owner=owner).delete()
    if not deleted:
        raise TechnicianNotFoundError("Técnico não encontrado.")
    logger.info("Account %s removed technician %s", owner.id, technician_id)
