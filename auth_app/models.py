from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Account used to author and take quizzes.

    Both username (inherited) and email are unique at the database level, so
    concurrent registrations cannot slip past an application-level check.
    The password column only ever holds Django's salted hash.
    """
    email = models.EmailField('email address', unique=True)

    @property
    def created_at(self):
        """Registration timestamp under the name the API exposes"""
        return self.date_joined

    def __str__(self) -> str:
        return f'User({self.id}): {self.username}'
