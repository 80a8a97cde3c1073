"""Grading of a finished quiz attempt."""

import math
from collections.abc import Sequence

from quizclient.models.quiz import QuizData, QuizResult


def grade_answers(quiz: QuizData, selections: Sequence[int | None]) -> QuizResult:
    """
    Score the selected options against the quiz's answer key.

    Args:
        quiz: The quiz that was answered
        selections: One selected option index per question, None when skipped

    Returns:
        QuizResult with the correct count and rounded percentage

    Raises:
        ValueError: If there is not exactly one selection per question
    """
    if len(selections) != len(quiz.questions):
        raise ValueError(
            f"Expected {len(quiz.questions)} selections, received {len(selections)}"
        )

    correct_count = sum(
        1 for question, selection in zip(quiz.questions, selections)
        if question.is_correct(selection)
    )
    total = len(quiz.questions)
    # Half-up rounding, so 2/3 scores 67 and 1/8 scores 13
    score_percent = math.floor(correct_count * 100 / total + 0.5)

    return QuizResult(
        topic=quiz.topic,
        difficulty=quiz.difficulty,
        correct_count=correct_count,
        total=total,
        score_percent=score_percent,
        selections=tuple(selections),
    )
