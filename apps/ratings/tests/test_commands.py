"""apply_match_result 커맨드 테스트"""

from io import StringIO

from django.core.management import CommandError, call_command

import pytest

from apps.accounts.models import UserStats


@pytest.mark.django_db
class TestApplyMatchResultCommand:
    def test_apply_win(self, create_user):
        winner = create_user()
        loser = create_user()
        out = StringIO()

        call_command("apply_match_result", str(winner.pk), str(loser.pk), stdout=out)

        assert "1200 → 1216 (+16)" in out.getvalue()
        assert "1200 → 1184 (-16)" in out.getvalue()
        assert UserStats.objects.get(user=winner).total_wins == 1

    def test_apply_draw(self, create_user):
        player_a = create_user()
        player_b = create_user()

        call_command("apply_match_result", str(player_a.pk), str(player_b.pk), "--draw", stdout=StringIO())

        assert UserStats.objects.get(user=player_a).total_draws == 1
        assert UserStats.objects.get(user=player_b).total_draws == 1

    def test_unknown_participant(self, create_user):
        user = create_user()

        with pytest.raises(CommandError, match="user_id="):
            call_command("apply_match_result", str(user.pk), str(user.pk + 1000))

    def test_same_participant(self, create_user):
        user = create_user()

        with pytest.raises(CommandError):
            call_command("apply_match_result", str(user.pk), str(user.pk))
