from rest_framework import serializers


class UpdateTaskSerializer(serializers.Serializer):
    """
    Only title, description and completed can be changed. Any other key in the request body,
    including _id and createdAt, is dropped rather than rejected.
    """

    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    completed = serializers.BooleanField(required=False)
