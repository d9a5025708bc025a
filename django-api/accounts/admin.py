from django.contrib import admin

from accounts.models import AdminRequest, Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "company", "job_title"]
    search_fields = ["user__username", "user__email", "company"]


@admin.register(AdminRequest)
class AdminRequestAdmin(admin.ModelAdmin):
    list_display = ["user", "created_at"]
    readonly_fields = ["created_at"]
