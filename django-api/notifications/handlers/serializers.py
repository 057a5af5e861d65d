from rest_framework import serializers


class NotificationSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    type = serializers.CharField()
    title = serializers.CharField()
    message = serializers.CharField()
    data = serializers.DictField()
    priority = serializers.CharField()
    isRead = serializers.BooleanField(source="is_read")
    readAt = serializers.DateTimeField(source="read_at")
    createdAt = serializers.DateTimeField(source="created_at")
