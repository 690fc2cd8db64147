from django.contrib import admin

from projects.models import File, Project, Status, Task, TimeLog


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "owner_id", "created_at")
    search_fields = ("title", "owner_id")


@admin.register(Status)
class StatusAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "project", "order", "is_done")
    list_filter = ("is_done",)


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "project", "status", "assigned_to", "total_hours")
    list_filter = ("project",)
    # the counter is maintained by time-log writes only
    readonly_fields = ("total_hours",)


# Deleted rows are listed too
@admin.register(File)
class FileAdmin(admin.ModelAdmin):
    list_display = ("id", "filename", "project", "user_id", "state", "added_on")
    list_filter = ("state",)


@admin.register(TimeLog)
class TimeLogAdmin(admin.ModelAdmin):
    list_display = ("id", "task", "user_id", "hours", "date", "state")
    list_filter = ("state", "date")
