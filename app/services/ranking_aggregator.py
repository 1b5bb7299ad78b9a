"""
Агрегация лидерборда.

Чистая функция над уже загруженными записями: загрузка данных живёт
в WorkoutLogRepository, здесь только фильтрация по окну, группировка
и сортировка.

Порядок: daily_score по убыванию, при равенстве - id пользователя
по возрастанию.
"""
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Optional, Tuple

from app.schemas.leaderboard import RankableLog, UserRanking


def _display_name(ranking: UserRanking) -> str:
    if ranking.profile_name:
        return ranking.profile_name
    return f"{ranking.first_name} {ranking.last_name}".strip()


class RankingAggregator:
    DEFAULT_LIMIT = 10

    @staticmethod
    def day_window(day: date) -> Tuple[datetime, datetime]:
        """Окно [00:00:00, 23:59:59.999999] указанного дня."""
        return datetime.combine(day, time.min), datetime.combine(day, time.max)

    @staticmethod
    def sort_key(ranking: UserRanking) -> Tuple[float, int]:
        return -ranking.daily_score, ranking.id

    @classmethod
    def rank(
            cls,
            logs: Iterable[RankableLog],
            window_start: datetime,
            window_end: datetime,
            limit: Optional[int] = DEFAULT_LIMIT
    ) -> List[UserRanking]:
        stats: Dict[int, UserRanking] = {}

        for log in logs:
            if log.completed_at is None:
                continue
            if not (window_start <= log.completed_at <= window_end):
                continue

            profile = log.profile
            if profile is None:
                # Пользователь не найден - запись просто не учитывается
                continue

            ranking = stats.get(profile.id)
            if ranking is None:
                ranking = UserRanking(
                    id=profile.id,
                    first_name=profile.first_name or "",
                    last_name=profile.last_name or "",
                    profile_name=profile.profile_name or "",
                )
                stats[profile.id] = ranking

            score = log.score or 0
            ranking.total_workouts += 1
            ranking.total_score += score
            ranking.daily_score += score

        rankings = sorted(stats.values(), key=cls.sort_key)
        for ranking in rankings:
            ranking.display_name = _display_name(ranking)

        if limit is None:
            return rankings
        return rankings[:max(limit, 0)]
