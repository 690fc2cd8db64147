# ============================================
# projects/serializers/timelog.py
# ============================================
from rest_framework import serializers
from projects.models import TimeLog


class TimeLogCreateSerializer(serializers.Serializer):
    """
    Request body of the create endpoint. Only used for the schema:
    TimeLogService checks the raw body in order (task and date present,
    hours valid, task exists).
    """
    task = serializers.IntegerField(required=False, help_text='Task ID, required unless taskId is given')
    taskId = serializers.IntegerField(required=False, help_text='Alias of task')
    hours = serializers.DecimalField(max_digits=None, decimal_places=None,
                                     help_text='Number greater than 0, rounded half-up to 2 decimals')
    date = serializers.DateField(help_text='ISO date; a datetime is cut to its date')
    description = serializers.CharField(required=False, allow_blank=True)


class TimeLogUpdateSerializer(serializers.Serializer):
    # precision and sign are checked by TimeLogService
    hours = serializers.DecimalField(max_digits=None, decimal_places=None, required=False)
    date = serializers.DateField(required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class TimeLogFilterSerializer(serializers.Serializer):
    startDate = serializers.DateField(source='start_date', required=False)
    endDate = serializers.DateField(source='end_date', required=False)
    task = serializers.IntegerField(source='task_id', required=False)


class TimeLogOutputSerializer(serializers.ModelSerializer):
    user = serializers.CharField(source='user_id', read_only=True)
    userData = serializers.SerializerMethodField()
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = TimeLog
        fields = [
            'id', 'task', 'user', 'userData', 'hours', 'date',
            'description', 'isActive', 'createdAt', 'updatedAt'
        ]

    def get_userData(self, obj):
        return getattr(obj, 'user_data', None)


class TimeLogSummarySerializer(serializers.Serializer):
    totalHours = serializers.DecimalField(max_digits=12, decimal_places=2)
    entries = serializers.IntegerField()
