"""Validation result — immutable container for validated files or errors."""

from dataclasses import dataclass

from wren.http.files import UploadedFile


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating uploaded files against a set of rules.

    The result is falsy when invalid, so you can write::

        result = validate(files, rules)
        if not result:
            return render("upload.html", errors=result.errors)

    ``data`` holds the files of every field that passed. ``errors`` maps
    field names to lists of error messages::

        {"avatar": ["Must be at most 1024 bytes"]}
    """

    data: dict[str, UploadedFile | None]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
