"""Django ORM models for user profiles and admin access requests."""

from django.conf import settings
from django.db import models


class Profile(models.Model):
    """Profile details collected at signup beyond Django's user fields."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile"
    )
    phone_number = models.CharField(max_length=32, blank=True)
    company = models.CharField(max_length=255, blank=True)
    job_title = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)
    preferences = models.JSONField(default=list, blank=True)

    def __str__(self) -> str:
        return f"Profile of {self.user}"


class AdminRequest(models.Model):
    """A user's request to become an event administrator."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="admin_requests"
    )
    reason = models.TextField()
    experience = models.TextField()
    references = models.TextField(blank=True)
    additional_info = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.user} - {self.created_at:%Y-%m-%d}"
