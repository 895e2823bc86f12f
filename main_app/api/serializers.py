from django.conf import settings
from rest_framework import serializers  # DRF serializers base
from main_app.models import Quiz, Question, QuizResult  # import our ORM models

MISSING_RESULT_FIELDS = 'Missing required fields'
# upper bound of the integer columns the values end up in
MAX_STORED_INT = 2147483647


def _messages(text: str) -> dict:
    """Same message for every flavour of 'not provided'"""
    return {
        'required': text, 'null': text, 'blank': text, 'empty': text,
        'not_a_list': text, 'invalid': text, 'min_value': text,
    }


class QuizSummarySerializer(serializers.ModelSerializer):
    """
    Read-only quiz row without questions, used by the owner's quiz list.
    """
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Quiz
        fields = ('id', 'title', 'description', 'time_limit', 'user_id', 'created_at')
        read_only_fields = fields


class QuestionPlaySerializer(serializers.ModelSerializer):
    """
    Question as delivered for quiz play: dense option list and a correct index into it.
    """
    text = serializers.CharField(source='question_text', read_only=True)

    class Meta:
        model = Question
        fields = ('id', 'text')
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        options, correct = instance.playable_options()
        data['options'] = options
        data['correct'] = correct
        return data


class QuizDetailSerializer(QuizSummarySerializer):
    """
    Quiz summary plus its questions in display order.
    """
    questions = QuestionPlaySerializer(many=True, read_only=True)

    class Meta(QuizSummarySerializer.Meta):
        fields = QuizSummarySerializer.Meta.fields + ('questions',)
        read_only_fields = fields


class QuestionInputSerializer(serializers.Serializer):
    """
    One submitted question: text, 2 to 4 options and the index of the correct one.
    """
    text = serializers.CharField(error_messages=_messages('Question text is required'))
    options = serializers.ListField(
        child=serializers.CharField(allow_blank=True, allow_null=True, trim_whitespace=False),
        error_messages=_messages('Each question needs at least two options'),
    )
    correct = serializers.IntegerField(
        min_value=0,
        error_messages={
            'required': 'Each question needs a correct answer',
            'null': 'Each question needs a correct answer',
            'invalid': 'Correct answer must be an option index',
            'min_value': 'Correct answer must be an option index',
        },
    )

    def validate_options(self, value):
        """First two options must carry text; at most QUIZ_MAX_OPTIONS are accepted"""
        max_options = getattr(settings, 'QUIZ_MAX_OPTIONS', 4)
        min_options = getattr(settings, 'QUIZ_MIN_OPTIONS', 2)
        if len(value) > max_options:
            raise serializers.ValidationError(f'A question can have at most {max_options} options')
        if len(value) < min_options or any(not (opt or '').strip() for opt in value[:min_options]):
            raise serializers.ValidationError('Each question needs at least two options')
        return value

    def validate(self, attrs):
        """The correct index must point at an option that has text"""
        options = attrs['options']
        correct = attrs['correct']
        if correct >= len(options) or not (options[correct] or '').strip():
            raise serializers.ValidationError('Correct answer must be an option index')
        return attrs


class QuizCreateSerializer(serializers.Serializer):
    """
    Write-only input for POST /api/quizzes.
    Field names follow the client contract (timeLimit in camelCase).
    """
    title = serializers.CharField(max_length=255, error_messages=_messages('Quiz title is required'))
    description = serializers.CharField(default='', allow_blank=True, allow_null=True)
    timeLimit = serializers.IntegerField(default=None, allow_null=True, min_value=0, max_value=MAX_STORED_INT)
    questions = QuestionInputSerializer(
        many=True,
        allow_empty=False,
        error_messages=_messages('At least one question is required'),
    )

    def validate_title(self, value: str) -> str:
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Quiz title is required')
        return value

    def validate_description(self, value):
        return (value or '').strip()

    def validate_timeLimit(self, value):
        """Absent or zero falls back to the default time limit"""
        return value or getattr(settings, 'QUIZ_DEFAULT_TIME_LIMIT', 10)


class QuizResultCreateSerializer(serializers.Serializer):
    """
    Write-only input for POST /api/quiz-results. A score of 0 is a valid score.
    """
    quizId = serializers.IntegerField(
        min_value=1, max_value=MAX_STORED_INT, error_messages=_messages(MISSING_RESULT_FIELDS))
    score = serializers.IntegerField(
        min_value=0, max_value=MAX_STORED_INT, error_messages=_messages(MISSING_RESULT_FIELDS))
    totalQuestions = serializers.IntegerField(
        min_value=1, max_value=MAX_STORED_INT, error_messages=_messages(MISSING_RESULT_FIELDS))
    timeTaken = serializers.IntegerField(
        min_value=0, max_value=MAX_STORED_INT, error_messages=_messages(MISSING_RESULT_FIELDS))
    answers = serializers.JSONField(required=False, allow_null=True)


class QuizResultSerializer(serializers.ModelSerializer):
    """
    Read-only result row joined with the title of its quiz.
    """
    quiz_id = serializers.IntegerField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    quiz_title = serializers.CharField(read_only=True)

    class Meta:
        model = QuizResult
        fields = (
            'id', 'quiz_id', 'user_id', 'score', 'total_questions',
            'time_taken', 'answers', 'completed_at', 'quiz_title',
        )
        read_only_fields = fields
