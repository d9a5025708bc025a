"""HTTP handlers for signup and admin access requests."""

from rest_framework import serializers, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.services import AccountService
from accounts.validation import AdminRequestPayload, SignupPayload
from events.domain.errors import DomainError
from events.handlers.views import error_response


class ProfileSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="user.first_name")
    lastName = serializers.CharField(source="user.last_name")
    phoneNumber = serializers.CharField(source="phone_number")
    company = serializers.CharField()
    jobTitle = serializers.CharField(source="job_title")
    bio = serializers.CharField()


class UserSerializer(serializers.Serializer):
    id = serializers.IntegerField(source="pk")
    username = serializers.CharField()
    email = serializers.CharField()
    role = serializers.SerializerMethodField()
    preferences = serializers.SerializerMethodField()
    profile = serializers.SerializerMethodField()

    def get_role(self, user) -> str:
        return "admin" if user.is_staff else "user"

    def _profile(self, user):
        return getattr(user, "profile", None)

    def get_preferences(self, user) -> list[str]:
        profile = self._profile(user)
        return list(profile.preferences) if profile is not None else []

    def get_profile(self, user):
        profile = self._profile(user)
        return ProfileSerializer(profile).data if profile is not None else None


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request: Request) -> Response:
        payload = SignupPayload.from_mapping(request.data)
        try:
            user = AccountService().register(payload)
        except DomainError as error:
            return error_response(error)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class BecomeAdminView(APIView):
    """Handler for PUT /api/users/be-admin"""

    permission_classes = [IsAuthenticated]

    def put(self, request: Request) -> Response:
        payload = AdminRequestPayload.from_mapping(request.data)
        try:
            user = AccountService().request_admin(request.user, payload)
        except DomainError as error:
            return error_response(error)
        return Response(UserSerializer(user).data)
