from rest_framework import serializers

from ..config import INITIAL_EASINESS_FACTOR, MAX_QUALITY, MIN_EASINESS_FACTOR, MIN_QUALITY, MS_PER_DAY
from ..utils.time import MAX_TIMESTAMP_MS

MAX_INTERVAL_DAYS = MAX_TIMESTAMP_MS // MS_PER_DAY

class ReviewInSerializer(serializers.Serializer):
    card_id = serializers.CharField(max_length=64, required=False, default="")
    interval = serializers.IntegerField(min_value=0, max_value=MAX_INTERVAL_DAYS, default=0)
    repetition = serializers.IntegerField(min_value=0, default=0)
    efactor = serializers.FloatField(min_value=MIN_EASINESS_FACTOR, default=INITIAL_EASINESS_FACTOR)
    quality = serializers.IntegerField(min_value=MIN_QUALITY, max_value=MAX_QUALITY)
    now = serializers.IntegerField(min_value=0, max_value=MAX_TIMESTAMP_MS, required=False)  # epoch ms

class DueCardSerializer(serializers.Serializer):
    card_id = serializers.CharField(max_length=64)
    next_review_date = serializers.IntegerField(
        min_value=0, max_value=MAX_TIMESTAMP_MS, required=False, allow_null=True
    )

class DueQuerySerializer(serializers.Serializer):
    until = serializers.IntegerField(min_value=0, max_value=MAX_TIMESTAMP_MS, required=False)  # epoch ms
    cards = DueCardSerializer(many=True)
