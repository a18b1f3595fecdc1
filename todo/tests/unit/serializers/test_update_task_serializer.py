from unittest import TestCase

from todo.serializers.update_task_serializer import UpdateTaskSerializer


class UpdateTaskSerializerTest(TestCase):
    def test_accepts_partial_data(self):
        serializer = UpdateTaskSerializer(data={"completed": True}, partial=True)

        self.assertTrue(serializer.is_valid())
        self.assertEqual(dict(serializer.validated_data), {"completed": True})

    def test_ignores_fields_outside_allow_list(self):
        data = {
            "title": "Renamed",
            "_id": "672f7c5b775ee9f4471ff1dd",
            "createdAt": "2020-01-01T00:00:00Z",
            "userEmail": "someone-else@x.com",
            "priority": "high",
        }

        serializer = UpdateTaskSerializer(data=data, partial=True)

        self.assertTrue(serializer.is_valid())
        self.assertEqual(dict(serializer.validated_data), {"title": "Renamed"})

    def test_empty_body_is_valid(self):
        serializer = UpdateTaskSerializer(data={}, partial=True)

        self.assertTrue(serializer.is_valid())
        self.assertEqual(dict(serializer.validated_data), {})

    def test_allows_blank_title_and_null_description(self):
        serializer = UpdateTaskSerializer(data={"title": "", "description": None}, partial=True)

        self.assertTrue(serializer.is_valid())
        self.assertEqual(dict(serializer.validated_data), {"title": "", "description": None})

    def test_rejects_non_boolean_completed(self):
        serializer = UpdateTaskSerializer(data={"completed": "maybe"}, partial=True)

        self.assertFalse(serializer.is_valid())
        self.assertIn("completed", serializer.errors)

    def test_keeps_padded_values_unchanged(self):
        serializer = UpdateTaskSerializer(data={"title": "  Renamed ", "description": "   "}, partial=True)

        self.assertTrue(serializer.is_valid())
        self.assertEqual(dict(serializer.validated_data), {"title": "  Renamed ", "description": "   "})
