"""Account service: registration and admin access requests."""

import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AbstractUser
from django.db import DatabaseError, transaction

from accounts.models import AdminRequest, Profile
from accounts.validation import (
    AdminRequestPayload,
    SignupPayload,
    validate_admin_request,
    validate_signup,
)
from events.domain.errors import UpstreamError, ValidationError

logger = logging.getLogger(__name__)


class AccountService:
    def register(self, payload: SignupPayload) -> AbstractUser:
        """Create a user with profile.

        Raises:
            ValidationError: If the form is invalid or the username/email is taken.
            UpstreamError: If the database rejects the write.
        """
        User = get_user_model()
        errors = dict(validate_signup(payload).errors)
        if "username" not in errors and User.objects.filter(
            username__iexact=payload.username
        ).exists():
            errors["username"] = "Username is already taken"
        if "email" not in errors and User.objects.filter(
            email__iexact=payload.email
        ).exists():
            errors["email"] = "Email is already registered"
        if errors:
            raise ValidationError(errors)

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=payload.username,
                    email=payload.email,
                    password=payload.password,
                    first_name=payload.first_name,
                    last_name=payload.last_name,
                )
                Profile.objects.create(
                    user=user,
                    phone_number=payload.phone_number,
                    company=payload.company,
                    job_title=payload.job_title,
                    bio=payload.bio,
                    preferences=list(payload.preferences),
                )
        except DatabaseError:
            logger.exception("Failed to register user %r", payload.username)
            raise UpstreamError() from None
        logger.info("Registered user %s", user.pk)
        return user

    def request_admin(self, user: AbstractUser, payload: AdminRequestPayload) -> AbstractUser:
        """Record an admin access request and grant the admin role.

        Requests are granted on submission; the record is kept for review.
        """
        result = validate_admin_request(payload)
        if not result.is_valid:
            raise ValidationError(result.errors)
        try:
            with transaction.atomic():
                AdminRequest.objects.create(
                    user=user,
                    reason=payload.reason,
                    experience=payload.experience,
                    references=payload.references,
                    additional_info=payload.additional_info,
                )
                if not user.is_staff:
                    user.is_staff = True
                    user.save(update_fields=["is_staff"])
        except DatabaseError:
            logger.exception("Failed to record admin request of user %s", user.pk)
            raise UpstreamError() from None
        logger.info("Granted admin role to user %s", user.pk)
        return user
