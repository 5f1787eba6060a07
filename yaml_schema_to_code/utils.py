"""
Utility functions for the YAML schema to code generator.

The case conversions are exposed to templates as Jinja2 filters.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Characters that would turn a table name into a nested path
_PATH_SEPARATORS = re.compile(r"[/\\]")


def _split_into_words(text: str) -> list[str]:
    """Split text into words on separators and camelCase boundaries."""
    return _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " "))


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "user_account" -> "UserAccount"
        "order_line_2" -> "OrderLine2"
        "orderItem" -> "OrderItem"
    """
    if not text:
        return ""
    return "".join(word.capitalize() for word in _split_into_words(text) if word)


def snake_to_camel_case(text: str) -> str:
    """Convert text to camelCase ("user_account" -> "userAccount")."""
    pascal = snake_to_pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


def upper_first(text: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Unlike str.capitalize, "userId" becomes "UserId", not "Userid".
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def sanitize_file_name(name: str) -> str:
    """Make a table name usable as a single path component."""
    return _PATH_SEPARATORS.sub("_", name)
