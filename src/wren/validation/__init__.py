"""Upload validation — composable rules, clean results.

Usage::

    from wren.validation import file_required, upload_of, validate

    result = validate(files, {
        "avatar": [file_required, upload_of().has_extension("jpg", "png").less_than(2_000_000)],
        "resume": [upload_of().has_extension("pdf")],
    })
    if not result:
        ...  # result.errors == {"avatar": ["Must be a file of type: jpg, png"]}
"""

from collections.abc import Mapping

from wren.http.files import UploadedFile
from wren.validation.result import ValidationResult
from wren.validation.rules import FileValidator, UploadRule, file_required, upload_of

__all__ = [
    "FileValidator",
    "UploadRule",
    "ValidationResult",
    "file_required",
    "upload_of",
    "validate",
]


def validate(
    files: Mapping[str, UploadedFile],
    rules: dict[str, list[FileValidator]],
) -> ValidationResult:
    """Validate uploaded files against a set of rules.

    Args:
        files: A mapping of field names to uploaded files. Fields with
            no upload are simply absent.
        rules: A dict mapping field names to lists of validators. Each
            validator returns an error message string on failure, or
            ``None`` on success.

    Returns:
        A ``ValidationResult`` with ``.data`` (files that passed) and
        ``.errors`` (field → list of error messages).
    """
    errors: dict[str, list[str]] = {}
    cleaned: dict[str, UploadedFile | None] = {}

    for field_name, validators in rules.items():
        file = files.get(field_name)

        field_errors: list[str] = []
        for validator in validators:
            error = validator(file)
            if error is not None:
                field_errors.append(error)
                # Nothing else to check without a file
                if validator is file_required:
                    break

        if field_errors:
            errors[field_name] = field_errors
        else:
            cleaned[field_name] = file

    return ValidationResult(data=cleaned, errors=errors)
