from django.urls import path
from main_app.api.views import (
    MyQuizzesView,
    MyResultsView,
    QuizCreateView,
    QuizDetailView,
    QuizResultCreateView,
)


urlpatterns = [
    path('my-quizzes', MyQuizzesView.as_view(), name='my-quizzes'),
    path('quizzes', QuizCreateView.as_view(), name='quiz-create'),
    path('quizzes/<int:pk>', QuizDetailView.as_view(), name='quiz-detail'),
    path('quiz-results', QuizResultCreateView.as_view(), name='quiz-results'),
    path('my-results', MyResultsView.as_view(), name='my-results'),
]
