from django.conf import settings
from django.db import models


class Quiz(models.Model):
    """
    A quiz authored by a single user.
    Fields:
    - user: Owner/creator of the quiz; only the owner may delete it.
    - title: Required, stored trimmed.
    - description: Optional free text, empty string when absent.
    - time_limit: Minutes allowed to complete the quiz.
    - created_at: Set once on insert.
    """
    user = models.ForeignKey(  # link the quiz to its owner
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='quizzes',
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    time_limit = models.PositiveIntegerField(default=10)  # minutes
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']  # newest first
        indexes = [models.Index(fields=['user'], name='idx_quizzes_user_id')]

    def __str__(self) -> str:
        return f'Quiz({self.id}) by User({self.user_id}): {self.title}'


class Question(models.Model):
    """
    A multiple-choice question belonging to one quiz.

    - options: ordered list of up to 4 slots; the first two always hold text,
      slots 3 and 4 hold None when the author left them out.
    - correct_answer: zero-based index into the stored slot list.
    - question_order: display position within the quiz.
    """
    quiz = models.ForeignKey('Quiz', on_delete=models.CASCADE, related_name='questions')
    question_text = models.TextField()
    options = models.JSONField(default=list)
    correct_answer = models.PositiveSmallIntegerField()
    question_order = models.PositiveIntegerField()

    class Meta:
        ordering = ['question_order', 'id']
        indexes = [models.Index(fields=['quiz'], name='idx_questions_quiz_id')]

    def playable_options(self):
        """
        Returns (options, correct) for quiz play.

        Empty slots are dropped and the correct index is shifted so it still
        points at the same option within the dense list.
        """
        dense = []
        correct = None
        for slot, option in enumerate(self.options or []):
            if option is None or option == '':
                continue
            if slot == self.correct_answer:
                correct = len(dense)
            dense.append(option)
        if correct is None:
            correct = self.correct_answer
        return dense, correct

    def __str__(self) -> str:
        return f'Question({self.id}) for Quiz({self.quiz_id})'


class QuizResult(models.Model):
    """
    One completed attempt of a quiz. Results are never updated or deleted;
    a result whose quiz was deleted simply drops out of the joined listing.
    """
    quiz = models.ForeignKey(
        'Quiz',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='results',
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='quiz_results',
    )
    score = models.IntegerField()
    total_questions = models.PositiveIntegerField()
    time_taken = models.PositiveIntegerField()  # seconds
    answers = models.JSONField(default=list)  # serialized as JSON text
    completed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-completed_at', '-id']
        indexes = [models.Index(fields=['quiz', 'user'], name='idx_results_quiz_user')]

    def __str__(self) -> str:
        return f'QuizResult({self.id}) of User({self.user_id}) on Quiz({self.quiz_id}): {self.score}/{self.total_questions}'
