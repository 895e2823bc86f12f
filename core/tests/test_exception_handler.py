from core.utils.exception_handler import first_error_message


def test_first_error_message_walks_nested_detail():
    detail = {
        'questions': [
            {},
            {'options': ['Each question needs at least two options']},
        ],
        'title': ['later'],
    }
    assert first_error_message(detail) == 'Each question needs at least two options'


def test_first_error_message_prefers_detail_key():
    assert first_error_message({'detail': 'Quiz not found'}) == 'Quiz not found'


def test_first_error_message_fallback():
    assert first_error_message({}) == 'Invalid request.'
    assert first_error_message(None) == 'Invalid request.'
