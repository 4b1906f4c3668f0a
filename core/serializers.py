from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """Model serializer that never exposes the surrogate primary key."""

    class Meta:
        extra_kwargs = {
            "created_at": {"read_only": True},
            "updated_at": {"read_only": True},
        }

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data.pop("id", None)
        return data


class StrictFieldsMixin:
    """Reject request keys the serializer does not declare.

    ``frozen_fields`` are declared keys that may be sent on create but never
    on update.
    """

    frozen_fields = ()

    def validate(self, attrs):
        sent = set(getattr(self, "initial_data", None) or ())
        errors = {}
        for name in sorted(sent & set(self.frozen_fields)):
            errors[name] = ["This field cannot be updated."]
        for name in sorted(sent - set(self.fields)):
            errors[name] = ["Unknown field."]
        if errors:
            raise serializers.ValidationError(errors)
        return super().validate(attrs)
