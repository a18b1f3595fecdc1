from rest_framework import serializers

from todo.constants.messages import ValidationErrors


class CreateTaskSerializer(serializers.Serializer):
    title = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False, help_text="Title of the task"
    )
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False, help_text="Description of the task"
    )
    userEmail = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        help_text="Email of the user who owns the task",
    )

    def validate(self, data):
        if not data.get("title") or not data.get("userEmail"):
            raise serializers.ValidationError(ValidationErrors.TASK_REQUIRED_FIELDS)
        data["description"] = data.get("description") or ""
        return data
