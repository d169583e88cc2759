"""String helpers for URL segments."""

import re
import unicodedata


def ascii(value: str) -> str:  # noqa: A001
    """Strip diacritics from *value* where a Unicode decomposition exists.

    Characters without an ASCII base (CJK, Cyrillic, ...) are kept as-is.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def slug(title: str, separator: str = "-") -> str:
    """Generate a URL friendly "slug" from *title*.

    Example::

        >>> slug("My First Post!!")
        'my-first-post'
        >>> slug("My First Post!!", "_")
        'my_first_post'
    """
    title = ascii(title).lower()

    # Drop everything that is not the separator, a letter, a digit, or whitespace
    title = "".join(c for c in title if c.isalnum() or c.isspace() or c in separator)

    title = re.sub(f"[{re.escape(separator)}\\s]+", separator, title)
    return title.strip(separator)
