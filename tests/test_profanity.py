import pytest

from models.schemas.common import replace_profane


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("Hello, world!", "Hello, world!"),
        ("This is a test with a Kerfuffle.", "This is a test with a ****."),
        ("Another sharbert in the text.", "Another **** in the text."),
        ("fornax and Fornax", "**** and ****"),
        ("FORNAX stays", "FORNAX stays"),
        ("Sharbert!", "****!"),
    ],
)
def test_replace_profane(text, expected):
    assert replace_profane(text) == expected
