# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for the interactive Argline shell.

`ArgumentLineValidator` tokenizes the line being entered with `argline.parse()`
and rejects it with the tokenizer's own message, so syntax errors are reported
at the prompt before anything is dispatched.
"""
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from argline.exceptions import ArgumentSyntaxError
from argline.parser import parse


class ArgumentLineValidator(Validator):
    """Validator that accepts lines `argline.parse()` can tokenize."""

    def validate(self, document: Document) -> None:
        try:
            parse(document.text)
        except ArgumentSyntaxError as error:
            raise ValidationError(
                message=str(error), cursor_position=len(document.text)
            ) from error
