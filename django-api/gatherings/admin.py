from django.contrib import admin

from gatherings.models import Attendance, Event


class AttendanceInline(admin.TabularInline):
    model = Attendance
    extra = 0
    raw_id_fields = ["user"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "location", "date", "trending", "tickets_sold", "ticket_limit"]
    list_filter = ["trending"]
    search_fields = ["title", "location"]
    readonly_fields = ["tickets_sold"]
    inlines = [AttendanceInline]


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ["event", "user", "created_at"]
    list_filter = ["event"]
