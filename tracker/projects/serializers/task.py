# ============================================
# projects/serializers/task.py
# ============================================
from rest_framework import serializers
from projects.models import Task


class TaskCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    project = serializers.IntegerField(source='project_id')
    status = serializers.IntegerField(source='status_id', required=False, allow_null=True)
    assignedTo = serializers.CharField(source='assigned_to', max_length=64, required=False,
                                       allow_blank=True, allow_null=True)


class TaskFilterSerializer(serializers.Serializer):
    project = serializers.IntegerField(source='project_id', required=False)
    status = serializers.IntegerField(source='status_id', required=False)
    assignedTo = serializers.CharField(source='assigned_to', max_length=64, required=False)


class TaskUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.IntegerField(source='status_id', required=False, allow_null=True)
    assignedTo = serializers.CharField(source='assigned_to', max_length=64, required=False,
                                       allow_blank=True, allow_null=True)


class TaskOutputSerializer(serializers.ModelSerializer):
    statusName = serializers.CharField(source='status.name', read_only=True, default=None)
    assignedTo = serializers.CharField(source='assigned_to', read_only=True)
    totalHours = serializers.DecimalField(source='total_hours', max_digits=12,
                                          decimal_places=2, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Task
        fields = [
            'id', 'title', 'description', 'project', 'status', 'statusName',
            'assignedTo', 'totalHours', 'createdAt', 'updatedAt'
        ]
