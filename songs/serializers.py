from rest_framework import serializers

from .models import Song


# Values are stored exactly as sent: no whitespace trimming.
class SongSerializer(serializers.ModelSerializer):
    groupName = serializers.CharField(source="group_name", trim_whitespace=False)
    songName = serializers.CharField(source="song_name", trim_whitespace=False)
    releaseDate = serializers.CharField(source="release_date", required=False, allow_blank=True, default="",
                                        trim_whitespace=False)
    text = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    link = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)

    class Meta:
        model = Song
        fields = ["id", "groupName", "songName", "releaseDate", "text", "link"]
        read_only_fields = ["id"]


class SongCreateSerializer(serializers.Serializer):
    groupName = serializers.CharField(source="group_name", trim_whitespace=False)
    songName = serializers.CharField(source="song_name", trim_whitespace=False)
