"""Tests for signup and admin access requests.

Run with: pytest tests/test_accounts.py -v
"""

from typing import get_type_hints

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AbstractUser
from rest_framework.test import APIClient

from accounts.models import AdminRequest
from accounts.services import AccountService
from accounts.validation import (
    AdminRequestPayload,
    SignupPayload,
    validate_admin_request,
    validate_signup,
)


@pytest.fixture
def signup_body():
    return {
        "email": "ada@example.com",
        "username": "ada",
        "password": "engine42",
        "preferences": ["workshop", "technology"],
        "profile": {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "phoneNumber": "",
            "bio": "Analyst",
            "company": "",
            "jobTitle": "",
        },
    }


class TestValidateSignup:
    def test_valid(self, signup_body):
        assert validate_signup(SignupPayload.from_mapping(signup_body)).is_valid

    def test_empty_form(self):
        assert validate_signup(SignupPayload()).errors == {
            "email": "Email is required",
            "username": "Username is required",
            "password": "Password is required",
            "profile.firstName": "First name is required",
            "profile.lastName": "Last name is required",
        }

    @pytest.mark.parametrize("email", ["ada", "ada@example", "ada@@example.com"])
    def test_invalid_email(self, signup_body, email):
        payload = SignupPayload.from_mapping({**signup_body, "email": email})
        assert validate_signup(payload).errors == {"email": "Invalid email address"}

    @pytest.mark.parametrize(
        "password, message",
        [
            ("ab1", "Password must be at least 6 characters"),
            ("abcdefg", "Password must contain at least one letter and one number"),
            ("1234567", "Password must contain at least one letter and one number"),
            ("abc12!", "Password must contain at least one letter and one number"),
        ],
    )
    def test_password_rules(self, signup_body, password, message):
        payload = SignupPayload.from_mapping({**signup_body, "password": password})
        assert validate_signup(payload).errors == {"password": message}

    def test_unknown_preference(self, signup_body):
        payload = SignupPayload.from_mapping({**signup_body, "preferences": ["karaoke"]})
        assert validate_signup(payload).errors == {"preferences": "Invalid preference"}


def test_validate_admin_request():
    assert validate_admin_request(AdminRequestPayload()).errors == {
        "reason": "Please provide a reason for your request",
        "experience": "Please provide your relevant experience",
    }
    assert validate_admin_request(
        AdminRequestPayload(reason="Run meetups", experience="Five years")
    ).is_valid


@pytest.mark.django_db
class TestRegister:
    """Tests for POST /api/auth/register"""

    def test_register(self, api_client: APIClient, signup_body):
        response = api_client.post("/api/auth/register", signup_body, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "ada"
        assert body["role"] == "user"
        assert body["preferences"] == ["workshop", "technology"]
        assert body["profile"]["firstName"] == "Ada"
        user = get_user_model().objects.get(username="ada")
        assert user.check_password("engine42")

    def test_register_validation_errors(self, api_client: APIClient):
        response = api_client.post("/api/auth/register", {}, format="json")
        assert response.status_code == 400
        assert response.json()["errors"]["email"] == "Email is required"

    def test_duplicate_username_and_email(self, api_client: APIClient, user, signup_body):
        body = {**signup_body, "username": "ATTENDEE", "email": "attendee@example.com"}
        response = api_client.post("/api/auth/register", body, format="json")
        assert response.status_code == 400
        assert response.json()["errors"] == {
            "username": "Username is already taken",
            "email": "Email is already registered",
        }


@pytest.mark.django_db
class TestBecomeAdmin:
    """Tests for PUT /api/users/be-admin"""

    def test_request_grants_admin_role(self, user_client: APIClient, user):
        response = user_client.put(
            "/api/users/be-admin",
            {"reason": "I run the Python meetup", "experience": "Five years"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["role"] == "admin"
        user.refresh_from_db()
        assert user.is_staff
        assert AdminRequest.objects.filter(user=user).count() == 1

    def test_request_requires_reason_and_experience(self, user_client: APIClient, user):
        response = user_client.put("/api/users/be-admin", {}, format="json")

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"reason", "experience"}
        user.refresh_from_db()
        assert not user.is_staff


@pytest.mark.django_db
class TestAccountService:
    def test_methods_declare_user_return_type(self):
        assert get_type_hints(AccountService.register)["return"] is AbstractUser
        assert get_type_hints(AccountService.request_admin)["return"] is AbstractUser

    def test_request_admin_returns_promoted_user(self, user):
        promoted = AccountService().request_admin(
            user, AdminRequestPayload(reason="Meetup host", experience="Two years")
        )

        assert promoted is user
        assert promoted.is_staff
