import copy

import pytest

TWENTY_LEAGUES = [
    {
        "title": "Twenty Thousand Leagues Under the Sea",
        "isbn": "9780000528531",
        "content": [
            {"page": 31, "line": 8, "text": "now simply went on by her own momentum.  The dark-"},
            {"page": 31, "line": 9, "text": "ness was then profound; and however good the Canadian's"},
            {"page": 31, "line": 10, "text": "eyes were, I asked myself how he had managed to see, and"},
        ],
    }
]

SAMPLE_BOOKS = [
    {
        "title": "Title 1",
        "isbn": "1",
        "content": [
            {"page": 1, "line": 7, "text": "now simply went on by her own momentum. (method) The dark-"},
            {"page": 1, "line": 10, "text": "in Python, you may have a method __hash__"},
        ],
    },
    {
        "title": "Title 2",
        "isbn": "2",
        "content": [
            {"page": 2, "line": 1, "text": "this is a sentence—that contains an em dash—"},
            {
                "page": 2,
                "line": 5,
                "text": "er <-- should not be connected to hyphenated word in the book 3. "
                "floorboards are often made of wood.",
            },
            {"page": 2, "line": 7, "text": "and winter is here. floor-"},
        ],
    },
    {
        "title": "Title 3",
        "isbn": "3",
        "content": [
            {"page": 2, "line": 7, "text": "boards creak and groan. Twenty-Three years ago"},
            {"page": 2, "line": 3, "text": "the dark room has a lamp which is a lamp that"},
            {"page": 2, "line": 4, "text": "glows dimly in the moon-"},
            {"page": 2, "line": 5, "text": "light of the cold win-"},
            {"page": 2, "line": 6, "text": "ter breeze. creak, creak. the floor-"},
            {"page": 20, "line": 1, "text": "a method to the madness here"},
        ],
    },
]


@pytest.fixture
def twenty_leagues():
    return copy.deepcopy(TWENTY_LEAGUES)


@pytest.fixture
def sample_books():
    return copy.deepcopy(SAMPLE_BOOKS)
