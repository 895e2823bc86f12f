"""
Persistence operations for quizzes, questions and results.

Every function translates database failures into StorageError after logging
them, so views never have to interpret driver exceptions.
"""
import logging
from typing import Iterable, List, Optional
from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import F
from core.utils.exceptions import StorageError
from main_app.models import Question, Quiz, QuizResult

logger = logging.getLogger(__name__)

REQUIRED_OPTION_SLOTS = 2


def option_slots(options: Iterable) -> List[Optional[str]]:
    """
    Places submitted options positionally into the fixed slot list.

    The first two slots always hold a string; later slots that were left out
    or blank become None so "no option" is never stored as "".
    """
    max_options = getattr(settings, 'QUIZ_MAX_OPTIONS', 4)
    values = list(options or [])[:max_options]
    slots = []
    for position in range(max_options):
        value = values[position] if position < len(values) else None
        if position < REQUIRED_OPTION_SLOTS:
            slots.append(value or '')
        else:
            slots.append(value if value else None)
    return slots


def create_quiz(title: str, description: str, time_limit: int, owner_id: int) -> int:
    try:
        quiz = Quiz.objects.create(
            title=title,
            description=description or '',
            time_limit=time_limit,
            user_id=owner_id,
        )
    except DatabaseError as exc:
        logger.exception('Error creating quiz for user %s', owner_id)
        raise StorageError('Failed to create quiz') from exc
    return quiz.id


def add_question(quiz_id: int, text: str, options, correct_index: int, order_index: int) -> int:
    try:
        question = Question.objects.create(
            quiz_id=quiz_id,
            question_text=text,
            options=option_slots(options),
            correct_answer=correct_index,
            question_order=order_index,
        )
    except DatabaseError as exc:
        logger.exception('Error adding question %s to quiz %s', order_index, quiz_id)
        raise StorageError('Failed to save question') from exc
    return question.id


def create_quiz_with_questions(title: str, description: str, time_limit: int, owner_id: int, questions) -> int:
    """
    Writes the quiz row and one row per question as a single unit.

    Questions keep their submitted position as question_order. If any write
    fails nothing is persisted and StorageError propagates.
    """
    try:
        with transaction.atomic():
            quiz_id = create_quiz(title, description, time_limit, owner_id)
            for index, question in enumerate(questions):
                add_question(
                    quiz_id,
                    question['text'],
                    question.get('options') or [],
                    question['correct'],
                    index,
                )
    except DatabaseError as exc:
        logger.exception('Error committing quiz for user %s', owner_id)
        raise StorageError('Failed to create quiz') from exc
    logger.info('Created quiz %s with %s questions for user %s', quiz_id, len(questions), owner_id)
    return quiz_id


def list_quizzes_by_user(owner_id: int) -> List[Quiz]:
    """Quizzes owned by the user, newest first"""
    try:
        return list(Quiz.objects.filter(user_id=owner_id).order_by('-created_at', '-id'))
    except DatabaseError as exc:
        logger.exception('Error fetching quizzes for user %s', owner_id)
        raise StorageError('Failed to fetch quizzes') from exc


def get_quiz_by_id(quiz_id: int) -> Optional[Quiz]:
    """The quiz with its questions prefetched in display order, or None"""
    try:
        return Quiz.objects.prefetch_related('questions').filter(pk=quiz_id).first()
    except DatabaseError as exc:
        logger.exception('Error fetching quiz %s', quiz_id)
        raise StorageError('Failed to fetch quiz') from exc


def quiz_exists(quiz_id: int, for_update: bool = False) -> bool:
    """True when the quiz row is there; with for_update the row stays locked until the transaction ends"""
    try:
        if for_update:
            locked = Quiz.objects.select_for_update().filter(pk=quiz_id).values_list('pk', flat=True)
            return locked.first() is not None
        return Quiz.objects.filter(pk=quiz_id).exists()
    except DatabaseError as exc:
        logger.exception('Error checking quiz %s', quiz_id)
        raise StorageError('Failed to fetch quiz') from exc


def delete_quiz(quiz_id: int, owner_id: int) -> int:
    """
    Removes the quiz and its questions, returning the number of quiz rows deleted (0 or 1).

    Questions go first, then the quiz row filtered by owner. When no quiz row
    matches (missing or owned by someone else) the transaction is rolled back,
    so the questions stay untouched.
    """
    try:
        with transaction.atomic():
            Question.objects.filter(quiz_id=quiz_id).delete()
            _, per_model = Quiz.objects.filter(pk=quiz_id, user_id=owner_id).delete()
            removed = per_model.get(Quiz._meta.label, 0)
            if removed == 0:
                transaction.set_rollback(True)
    except DatabaseError as exc:
        logger.exception('Error deleting quiz %s', quiz_id)
        raise StorageError('Failed to delete quiz') from exc
    if removed:
        logger.info('Deleted quiz %s of user %s', quiz_id, owner_id)
    return removed


def save_result(quiz_id: int, user_id: int, score: int, total_questions: int, time_taken: int, answers) -> int:
    try:
        result = QuizResult.objects.create(
            quiz_id=quiz_id,
            user_id=user_id,
            score=score,
            total_questions=total_questions,
            time_taken=time_taken,
            answers=answers if answers is not None else [],
        )
    except DatabaseError as exc:
        logger.exception('Error saving result for quiz %s', quiz_id)
        raise StorageError('Failed to save results') from exc
    logger.info('Saved result %s for quiz %s', result.id, quiz_id)
    return result.id


def list_results_by_user(user_id: int) -> List[QuizResult]:
    """The user's results annotated with quiz_title, most recent first"""
    try:
        return list(
            QuizResult.objects
            .filter(user_id=user_id)
            .annotate(quiz_title=F('quiz__title'))
            .order_by('-completed_at', '-id')
        )
    except DatabaseError as exc:
        logger.exception('Error fetching results for user %s', user_id)
        raise StorageError('Failed to fetch results') from exc
