import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from argline.validators import ArgumentLineValidator


@pytest.mark.parametrize("text", ["", "echo a b", "batch ; echo 'x y' ; printargs +f k=v"])
def test_accepts_valid_lines(text):
    ArgumentLineValidator().validate(Document(text))


@pytest.mark.parametrize(
    "text, message",
    [
        ("echo 'x", "Unclosed string"),
        ("a=b=c", "banned character"),
        ("+a+b", "Expected some whitespace"),
    ],
)
def test_rejects_invalid_lines(text, message):
    with pytest.raises(ValidationError) as error:
        ArgumentLineValidator().validate(Document(text))
    assert message in error.value.message
    assert error.value.cursor_position == len(text)
