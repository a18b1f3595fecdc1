from rest_framework import serializers

from todo.constants.messages import ValidationErrors


class CreateOrUpdateUserSerializer(serializers.Serializer):
    name = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False, default=None
    )
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    photoURL = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False, default=None
    )

    def validate(self, data):
        if not data.get("email"):
            raise serializers.ValidationError(ValidationErrors.EMAIL_REQUIRED)
        return data
