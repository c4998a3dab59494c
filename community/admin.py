from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from community.models import Reply, Topic, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for members with ban moderation actions."""
    list_display = ('username', 'email', 'real_name', 'avatar_preview', 'is_banned', 'is_staff')
    list_filter = BaseUserAdmin.list_filter + ('is_banned',)
    search_fields = ('username', 'email', 'real_name', 'github_name')
    actions = ['ban_users', 'unban_users']
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': User.PROFILE_FIELDS + ('avatar', 'image_url', 'is_banned')}),
    )

    def avatar_preview(self, obj):
        return format_html('<img src="{}" width="32" height="32">', obj.avatar_url)
    avatar_preview.short_description = "Avatar"

    @admin.action(description='Ban selected users')
    def ban_users(self, request, queryset):
        queryset.update(is_banned=True)

    @admin.action(description='Unban selected users')
    def unban_users(self, request, queryset):
        queryset.update(is_banned=False)


@admin.register(Topic)
class TopicAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'created_at')
    search_fields = ('title', 'body', 'user__username')


@admin.register(Reply)
class ReplyAdmin(admin.ModelAdmin):
    """Admin configuration for replies."""
    list_display = ('short_body', 'user', 'topic', 'created_at')
    search_fields = ('body', 'user__username')

    def short_body(self, obj):
        """Shorten reply text for list display."""
        return obj.body[:50] + "..." if len(obj.body) > 50 else obj.body
