# ============================================
# projects/serializers/file.py
# ============================================
from rest_framework import serializers
from projects.models import File


class FileUploadSerializer(serializers.Serializer):
    file = serializers.FileField()
    projectId = serializers.IntegerField()


class FileFilterSerializer(serializers.Serializer):
    projectId = serializers.IntegerField(source='project_id', required=False)
    userId = serializers.CharField(source='user_id', max_length=64, required=False)


class FileUpdateSerializer(serializers.Serializer):
    filename = serializers.CharField(max_length=255, required=False)
    isActive = serializers.BooleanField(source='is_active', required=False)


class FileOutputSerializer(serializers.ModelSerializer):
    projectTitle = serializers.CharField(source='project.title', read_only=True, default=None)
    userid = serializers.CharField(source='user_id', read_only=True)
    addedBy = serializers.CharField(source='added_by', read_only=True)
    addedOn = serializers.DateTimeField(source='added_on', read_only=True)
    updatedBy = serializers.CharField(source='updated_by', read_only=True)
    updatedOn = serializers.DateTimeField(source='updated_on', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)

    class Meta:
        model = File
        fields = [
            'id', 'filename', 'filepath', 'project', 'projectTitle', 'userid',
            'addedBy', 'addedOn', 'updatedBy', 'updatedOn', 'isActive'
        ]
