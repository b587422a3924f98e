from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "starts_at", "total", "available", "promoter"]
    search_fields = ["name", "location"]
    list_filter = ["starts_at"]
    readonly_fields = ["available", "created_at", "updated_at"]
