"""Django ORM models (persistence layer).

The unique constraints here are what keeps one ticket per buyer and event
and one ticket per redemption code, whichever process inserts the row.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone

from events.models import Event


class Ticket(models.Model):
    """Persistence model for purchased tickets."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=40, unique=True)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="tickets")
    buyer = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="tickets"
    )
    purchased_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-purchased_at"]
        indexes = [
            models.Index(fields=["buyer", "-purchased_at"], name="ticket_buyer_purchased_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["event", "buyer"], name="unique_ticket_per_buyer"),
        ]

    def __str__(self) -> str:
        return self.code
