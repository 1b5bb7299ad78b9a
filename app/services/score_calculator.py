"""
Подсчёт очков за упражнение.

Категория упражнения определяется один раз (resolve_category), дальше
счёт идёт по таблице правил SCORING_RULES. Новая категория = новый
элемент ExerciseCategory + правило в таблице.

- score: пиковый результат (дистанция, калории или максимальный вес)
- total: объём работы (для силовых это сумма weight * reps)
"""
import enum
import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, NamedTuple, Optional, Sequence


class ExerciseCategory(str, enum.Enum):
    run = "run"
    assault_bike = "assault_bike"
    weight_training = "weight_training"
    other = "other"


EXERCISE_NAME_CATEGORIES = {
    "run": ExerciseCategory.run,
    "assault bike": ExerciseCategory.assault_bike,
}

WEIGHT_TRAINING_WORKOUT_TYPE = "weight training"


def lenient_number(value: Any) -> Optional[float]:
    """Некорректное числовое значение (пустое, нечисловое, NaN, бесконечность) считается отсутствующим."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _value(entry: Any, field: str) -> float:
    """Числовое поле подхода; отсутствующее или некорректное значение = 0."""
    if isinstance(entry, Mapping):
        raw = entry.get(field)
    else:
        raw = getattr(entry, field, None)

    number = lenient_number(raw)
    return 0.0 if number is None else number


def _sum_of(field: str) -> Callable[[Sequence[Any]], float]:
    def summed(sets: Sequence[Any]) -> float:
        return sum((_value(entry, field) for entry in sets), 0.0)
    return summed


def _max_weight(sets: Sequence[Any]) -> float:
    # Без положительного веса результат 0
    heaviest = 0.0
    for entry in sets:
        heaviest = max(heaviest, _value(entry, "weight"))
    return heaviest


def _volume(sets: Sequence[Any]) -> float:
    return sum((_value(entry, "weight") * _value(entry, "reps") for entry in sets), 0.0)


@dataclass(frozen=True)
class ScoringRule:
    score: Callable[[Sequence[Any]], float]
    total: Callable[[Sequence[Any]], float]


# Силовые и "прочие" упражнения считаются одним правилом
WEIGHT_RULE = ScoringRule(score=_max_weight, total=_volume)

SCORING_RULES = {
    ExerciseCategory.run: ScoringRule(score=_sum_of("distance"), total=_sum_of("distance")),
    ExerciseCategory.assault_bike: ScoringRule(score=_sum_of("calories"), total=_sum_of("calories")),
    ExerciseCategory.weight_training: WEIGHT_RULE,
    ExerciseCategory.other: WEIGHT_RULE,
}


class ExerciseResult(NamedTuple):
    score: float
    total: float


class ScoreCalculator:
    RULES = SCORING_RULES

    @classmethod
    def resolve_category(cls, exercise_name: Optional[str], workout_type: Optional[str] = None) -> ExerciseCategory:
        name = (exercise_name or "").strip().casefold()
        if name in EXERCISE_NAME_CATEGORIES:
            return EXERCISE_NAME_CATEGORIES[name]

        if (workout_type or "").strip().casefold() == WEIGHT_TRAINING_WORKOUT_TYPE:
            return ExerciseCategory.weight_training

        return ExerciseCategory.other

    @classmethod
    def rule_for(cls, category: ExerciseCategory) -> ScoringRule:
        return cls.RULES.get(category, WEIGHT_RULE)

    @classmethod
    def calculate_score(cls, category: ExerciseCategory, sets: Sequence[Any]) -> float:
        return cls.rule_for(category).score(list(sets or []))

    @classmethod
    def calculate_total(cls, category: ExerciseCategory, sets: Sequence[Any]) -> float:
        return cls.rule_for(category).total(list(sets or []))

    @classmethod
    def calculate(cls, category: ExerciseCategory, sets: Sequence[Any]) -> ExerciseResult:
        return ExerciseResult(
            score=cls.calculate_score(category, sets),
            total=cls.calculate_total(category, sets),
        )

    @classmethod
    def combine(cls, results: Iterable[ExerciseResult]) -> ExerciseResult:
        """Итог тренировки: сумма score и сумма total по всем упражнениям."""
        score = 0.0
        total = 0.0
        for result in results:
            score += result.score
            total += result.total
        return ExerciseResult(score=score, total=total)
