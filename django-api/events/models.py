"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Member(models.Model):
    """Persistence model for band members."""

    name = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name or f"Member #{self.pk}"


class Band(models.Model):
    """Persistence model for bands."""

    name = models.CharField(max_length=255, blank=True, null=True)
    members = models.ManyToManyField(Member, related_name="bands", blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name or f"Band #{self.pk}"


class Event(models.Model):
    """Persistence model for events."""

    title = models.CharField(max_length=255, blank=True, null=True)
    img_url = models.CharField(max_length=500, blank=True, null=True)
    nb_stars = models.IntegerField(blank=True, null=True)
    comment = models.TextField(blank=True, null=True)
    bands = models.ManyToManyField(Band, related_name="events", blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.title or f"Event #{self.pk}"
