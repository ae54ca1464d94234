from rest_framework import views, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
import structlog
import uuid
from ..domain.enums import QUALITY_LABELS
from ..domain.errors import InvalidInput
from ..domain.state import initial_state
from ..services.reviews import due_cards, record_review
from ..utils.time import now_ms, to_utc_iso
from .serializers import ReviewInSerializer, DueQuerySerializer

base_logger = structlog.get_logger()


class ReviewView(views.APIView):
    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        s = ReviewInSerializer(data=request.data)
        s.is_valid(raise_exception=True)

        card_id = s.validated_data["card_id"]
        quality = s.validated_data["quality"]

        try:
            state = record_review(
                card_id,
                s.validated_data["interval"],
                s.validated_data["repetition"],
                s.validated_data["efactor"],
                quality,
                now=s.validated_data.get("now"),
            )
        except InvalidInput as e:
            raise ValidationError({e.field: [e.reason]})

        lapsed = state.repetition == 0

        logger.info(
            "review_api_response",
            card_id=card_id,
            quality=quality,
            lapsed=lapsed,
            interval_days=state.interval,
            next_review_utc=to_utc_iso(state.next_review_date),
            status=status.HTTP_200_OK,
        )

        return Response(
            {
                "card_id": card_id,
                **state.to_dict(),
                "next_review_utc": to_utc_iso(state.next_review_date),
                "quality_label": QUALITY_LABELS[quality],
                "lapsed": lapsed,
            },
            status=status.HTTP_200_OK,
        )


class InitialStateView(views.APIView):
    def get(self, request):
        state = initial_state()
        return Response(
            {
                **state.to_dict(),
                "next_review_utc": to_utc_iso(state.next_review_date),
            }
        )


class DueCardsView(views.APIView):
    def post(self, request):
        request_id = str(uuid.uuid4())
        logger = base_logger.bind(request_id=request_id)

        qs = DueQuerySerializer(data=request.data)
        qs.is_valid(raise_exception=True)
        until = qs.validated_data.get("until")
        if until is None:
            until = now_ms()

        results = due_cards(qs.validated_data["cards"], until=until)

        logger.info(
            "due_cards_api_response",
            until_utc=to_utc_iso(until),
            card_count=len(results),
        )

        return Response(
            {
                "until": until,
                "until_utc": to_utc_iso(until),
                "card_ids": results,
            }
        )
