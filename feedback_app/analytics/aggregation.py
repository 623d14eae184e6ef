# feedback_app/analytics/aggregation.py
"""
Feedback aggregation.

Everything here is a pure function of its arguments: the survey's question
list, its raw feedback rows and, for the dashboard, per-survey response counts.
Nothing is cached or persisted; callers recompute on every request.
"""
import logging
import math
from collections import Counter
from typing import Any, Iterable, Mapping, Sequence

from feedback_app.schemas.analytics import (
    AnswerShare,
    Overview,
    QuestionAnalytics,
    QuestionStats,
    ReshapedResponse,
    SurveyAnalytics,
)

logger = logging.getLogger(__name__)


def _field(obj: Any, name: str, default: Any = None) -> Any:
    # ORM rows and plain dicts are both accepted
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def answer_label(value: Any) -> str:
    """Render an answer value the way the dashboard displays it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------
# Response reshaping
# ---------------------------

def reshape_submission(raw: Any) -> ReshapedResponse:
    """Fold a submission's response entries into ``{question_id: answer}``.

    Entries without a question id (or that are not mappings at all) are
    dropped. A question id that appears twice keeps its last answer.
    """
    answers: dict[str, Any] = {}
    for entry in _field(raw, "responses") or []:
        if not isinstance(entry, Mapping):
            logger.debug("feedback %s: dropping non-mapping entry %r", _field(raw, "id"), entry)
            continue
        question_id = entry.get("question_id")
        if not question_id:
            logger.debug("feedback %s: dropping entry without question_id", _field(raw, "id"))
            continue
        answers[str(question_id)] = entry.get("answer")

    return ReshapedResponse(
        id=_field(raw, "id"),
        survey_id=_field(raw, "survey_id"),
        answers=answers,
        created_at=_field(raw, "submitted_at"),
    )


# ---------------------------
# Per-question frequency tables
# ---------------------------

def compute_question_stats(question_id: str, responses: Iterable[ReshapedResponse]) -> QuestionStats:
    """Count how often each answer was given to one question.

    A multi-select answer contributes one count per selected option, so
    ``total`` counts answers, not respondents.
    """
    counts: Counter[str] = Counter()
    total = 0
    for response in responses:
        answer = response.answers.get(question_id)
        if answer is None:
            continue
        if isinstance(answer, (list, tuple)):
            for element in answer:
                if element is None or element == "":
                    continue
                counts[answer_label(element)] += 1
                total += 1
        elif answer != "":
            counts[answer_label(answer)] += 1
            total += 1
    return QuestionStats(total=total, answers=dict(counts))


def answer_distribution(stats: QuestionStats) -> list[AnswerShare]:
    """Percentages for display, most frequent first. Empty when there is no data."""
    if stats.total == 0:
        return []
    shares = [
        AnswerShare(label=label, count=count, percentage=round_half_up(count / stats.total * 100))
        for label, count in stats.answers.items()
    ]
    shares.sort(key=lambda s: (-s.count, s.label))
    return shares


# ---------------------------
# Overview metrics
# ---------------------------

def compute_overview(surveys: Sequence[Any]) -> Overview:
    """Dashboard totals from surveys that already carry ``response_count``."""
    total_surveys = len(surveys)
    total_responses = sum(int(_field(s, "response_count", 0) or 0) for s in surveys)
    avg = round_half_up(total_responses / total_surveys) if total_surveys else 0
    return Overview(
        total_surveys=total_surveys,
        total_responses=total_responses,
        avg_responses_per_survey=avg,
    )


def build_survey_analytics(survey: Any, submissions: Sequence[Any]) -> SurveyAnalytics:
    """Full analytics view for one survey and its raw feedback rows."""
    responses = [reshape_submission(s) for s in submissions]
    questions = _field(survey, "questions") or []

    per_question = []
    for question in questions:
        question_id = str(_field(question, "id"))
        qtype = _field(question, "type", "")
        stats = compute_question_stats(question_id, responses)
        per_question.append(QuestionAnalytics(
            question_id=question_id,
            text=_field(question, "text", ""),
            type=str(getattr(qtype, "value", qtype)),
            total=stats.total,
            answers=stats.answers,
            distribution=answer_distribution(stats),
        ))

    return SurveyAnalytics(
        survey_id=_field(survey, "id"),
        title=_field(survey, "title", ""),
        description=_field(survey, "description", "") or "",
        is_active=bool(_field(survey, "is_active", True)),
        response_count=len(responses),
        question_count=len(questions),
        questions=per_question,
        responses=responses,
    )
