"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from events.domain.models import EventPatch


class MemberSerializer(serializers.Serializer):
    """Serializer for Member domain model."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)


class BandSerializer(serializers.Serializer):
    """Serializer for Band domain model."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    members = serializers.SerializerMethodField()

    def get_members(self, band) -> list[dict]:
        members = [member for member in band.members or () if member is not None]
        return MemberSerializer(members, many=True).data


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value", read_only=True)
    title = serializers.CharField(read_only=True, allow_null=True)
    imgUrl = serializers.CharField(source="img_url", read_only=True, allow_null=True)
    nbStars = serializers.IntegerField(source="nb_stars", read_only=True, allow_null=True)
    comment = serializers.CharField(read_only=True, allow_null=True)
    bands = serializers.SerializerMethodField()

    def get_bands(self, event) -> list[dict]:
        bands = [band for band in event.bands or () if band is not None]
        return BandSerializer(bands, many=True).data


class EventPatchSerializer(serializers.Serializer):
    """Parses a partial update payload. Absent and null fields are left unchanged."""

    title = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=255,
        trim_whitespace=False,
    )
    imgUrl = serializers.CharField(
        source="img_url",
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=500,
        trim_whitespace=False,
    )
    nbStars = serializers.IntegerField(source="nb_stars", required=False, allow_null=True)
    comment = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )

    def to_patch(self) -> EventPatch:
        return EventPatch(**self.validated_data)
