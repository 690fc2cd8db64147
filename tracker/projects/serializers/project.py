# ============================================
# projects/serializers/project.py
# ============================================
from rest_framework import serializers
from projects.models import Project


class ProjectCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    # A logo URL or path; uploaded logos use the logo endpoint
    logo = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class ProjectUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    logo = serializers.CharField(max_length=500, required=False, allow_blank=True)
    logoUrl = serializers.CharField(source='logo_url', max_length=500, required=False, allow_blank=True)


class ProjectLogoSerializer(serializers.Serializer):
    file = serializers.FileField()


class ProjectOutputSerializer(serializers.ModelSerializer):
    owner = serializers.CharField(source='owner_id', read_only=True)
    ownerData = serializers.SerializerMethodField()
    logoUrl = serializers.CharField(source='logo_url', read_only=True)
    displayLogo = serializers.CharField(source='display_logo', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Project
        fields = [
            'id', 'title', 'description', 'owner', 'ownerData',
            'logo', 'logoUrl', 'displayLogo', 'createdAt', 'updatedAt'
        ]

    def get_ownerData(self, obj):
        return getattr(obj, 'owner_data', None)
