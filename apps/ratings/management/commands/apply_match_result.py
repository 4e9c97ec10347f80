"""경기 결과 수동 반영 커맨드"""

from django.core.management.base import BaseCommand, CommandError

from rest_framework.exceptions import APIException

from apps.ratings.services import RatingService
from apps.ratings.types import MatchOutcome


class Command(BaseCommand):
    help = "경기 결과를 레이팅/통계에 반영 (수동 정정용)"

    def add_arguments(self, parser):
        parser.add_argument("winner_id", type=int, help="승자 ID (무승부면 첫 번째 참가자)")
        parser.add_argument("loser_id", type=int, help="패자 ID (무승부면 두 번째 참가자)")
        parser.add_argument(
            "--draw",
            action="store_true",
            help="무승부로 반영",
        )

    def handle(self, *args, **options):
        outcome = MatchOutcome(
            winner_id=options["winner_id"],
            loser_id=options["loser_id"],
            is_draw=options["draw"],
        )

        try:
            result = RatingService.apply_match_result(outcome)
        except APIException as e:
            raise CommandError(str(e.detail)) from e

        for participant in (result.participant_a, result.participant_b):
            self.stdout.write(
                f"  - user {participant.user_id} ({participant.result.value}): "
                f"{participant.rating_before} → {participant.rating_after} "
                f"({participant.change:+d})"
            )
        self.stdout.write(self.style.SUCCESS("✅ 경기 결과 반영 완료"))
