from rest_framework import serializers


class SessionUrlSerializer(serializers.Serializer):
    url = serializers.URLField()
