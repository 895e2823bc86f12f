from django.db import transaction
from rest_framework import status  # HTTP codes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated  # gate by auth
from rest_framework.response import Response  # HTTP responses
from rest_framework.views import APIView  # DRF base class
from core.utils.authentication import BearerJWTAuthentication
from core.utils.exceptions import StorageError
from main_app.api.serializers import (
    QuizCreateSerializer,
    QuizDetailSerializer,
    QuizResultCreateSerializer,
    QuizResultSerializer,
    QuizSummarySerializer,
)
from main_app.services import store


class BearerProtectedView(APIView):
    """Base for every endpoint that requires 'Authorization: Bearer <token>'"""
    authentication_classes = [BearerJWTAuthentication]
    permission_classes = [IsAuthenticated]


class MyQuizzesView(BearerProtectedView):
    """
    GET /api/my-quizzes
    Returns the caller's quizzes (summary form, no questions), newest first.
    Responses:
      - 200: List of quizzes (may be empty).
      - 401/403: Missing or invalid token.
      - 500: Storage failure.
    """

    def get(self, request):
        try:
            quizzes = store.list_quizzes_by_user(request.user.id)
        except StorageError:
            return Response({'error': 'Failed to fetch quizzes'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(QuizSummarySerializer(quizzes, many=True).data, status=status.HTTP_200_OK)


class QuizCreateView(BearerProtectedView):
    """
    POST /api/quizzes
    Creates a quiz together with all of its questions.

    The quiz and question rows are written in one transaction: the response is
    201 only when every row was stored, otherwise 500 and nothing is kept.
    """

    def post(self, request):
        serializer = QuizCreateSerializer(data=request.data)  # parse input
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            quiz_id = store.create_quiz_with_questions(
                title=data['title'],
                description=data['description'],
                time_limit=data['timeLimit'],
                owner_id=request.user.id,
                questions=data['questions'],
            )
        except StorageError:
            return Response({'error': 'Failed to create quiz'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'message': 'Quiz created successfully', 'quizId': quiz_id}, status=status.HTTP_201_CREATED)


class QuizDetailView(BearerProtectedView):
    """
    GET /api/quizzes/{id}
    Any authenticated user may fetch any quiz, correct answers included.

    DELETE /api/quizzes/{id}
    Only the owner can delete; a missing quiz and a foreign quiz both answer 404.
    """

    def get(self, request, pk: int):
        try:
            quiz = store.get_quiz_by_id(pk)
        except StorageError:
            return Response({'error': 'Failed to fetch quiz'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        if quiz is None:
            raise NotFound('Quiz not found')
        return Response(QuizDetailSerializer(quiz).data, status=status.HTTP_200_OK)

    def delete(self, request, pk: int):
        try:
            removed = store.delete_quiz(pk, request.user.id)
        except StorageError:
            return Response({'error': 'Failed to delete quiz'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        if removed == 0:
            raise NotFound('Quiz not found or access denied')
        return Response({'message': 'Quiz deleted successfully'}, status=status.HTTP_200_OK)


class QuizResultCreateView(BearerProtectedView):
    """
    POST /api/quiz-results
    Stores one completed attempt for the caller and returns its id.
    """

    def post(self, request):
        serializer = QuizResultCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            # quiz row locked so a concurrent delete cannot leave the result dangling
            with transaction.atomic():
                if not store.quiz_exists(data['quizId'], for_update=True):
                    raise NotFound('Quiz not found')
                result_id = store.save_result(
                    quiz_id=data['quizId'],
                    user_id=request.user.id,
                    score=data['score'],
                    total_questions=data['totalQuestions'],
                    time_taken=data['timeTaken'],
                    answers=data.get('answers'),
                )
        except StorageError:
            return Response({'error': 'Failed to save results'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'message': 'Results saved successfully', 'resultId': result_id}, status=status.HTTP_200_OK)


class MyResultsView(BearerProtectedView):
    """
    GET /api/my-results
    Returns the caller's results joined with quiz titles, most recent first.
    """

    def get(self, request):
        try:
            results = store.list_results_by_user(request.user.id)
        except StorageError:
            return Response({'error': 'Failed to fetch results'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(QuizResultSerializer(results, many=True).data, status=status.HTTP_200_OK)
