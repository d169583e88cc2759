"""Built-in validation rules for uploaded files.

Each validator is a callable with the signature::

    def rule(file: UploadedFile | None) -> str | None:
        '''Return error message, or None if valid.'''

``None`` means the field had no file attached. Rules only judge files
that are present; pair them with ``file_required`` to demand one.

``upload_of()`` builds a configurable rule::

    rule = upload_of().has_extension("jpg", "png").less_than(2 * 1024 * 1024)
    rule(UploadedFile("avatar.gif", size=1024))  # "Must be a file of type: jpg, png"
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

from wren.http.files import UploadedFile

# Type alias for a file validator function
type FileValidator = Callable[[UploadedFile | None], str | None]


def file_required(file: UploadedFile | None) -> str | None:
    """A file must be attached."""
    if file is None:
        return "This file is required"
    return None


@dataclass(frozen=True, slots=True)
class UploadRule:
    """Size and extension limits for an uploaded file.

    ``extensions`` is None when any extension is accepted; ``maximum`` is
    None when any size is accepted. Builder methods return new rules.
    """

    extensions: frozenset[str] | None = None
    maximum: int | None = None

    def has_extension(self, *extensions: str) -> "UploadRule":
        """Accept only files with one of the given extensions."""
        allowed = frozenset(ext.lstrip(".").lower() for ext in extensions)
        return replace(self, extensions=allowed)

    def less_than(self, maximum: int) -> "UploadRule":
        """Accept only files of at most *maximum* bytes."""
        return replace(self, maximum=maximum)

    def __call__(self, file: UploadedFile | None) -> str | None:
        if file is None:
            return None

        if self.maximum is not None and file.size > self.maximum:
            return f"Must be at most {self.maximum} bytes"

        if self.extensions is not None and file.extension not in self.extensions:
            options = ", ".join(sorted(self.extensions))
            return f"Must be a file of type: {options}"

        return None


def upload_of() -> UploadRule:
    """Start an upload rule that accepts any file."""
    return UploadRule()
