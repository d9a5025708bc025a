from django.urls import path

from accounts.views import BecomeAdminView, RegisterView

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="register"),
    path("users/be-admin", BecomeAdminView.as_view(), name="become-admin"),
]
