import re


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    # Insert underscores before capital letters, except at the start
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    snake = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
    return snake


def snake_case_to_pascal_case(snake: str) -> str:
    """
    Convert snake_case to PascalCase.

    Args:
        snake: The snake_case string.

    Returns:
        str: The PascalCase version of the string.
    """
    components = snake.split('_')
    return ''.join(word.capitalize() for word in components)


def is_snake_case(name: str) -> bool:
    """Basic check whether a string looks like snake_case."""
    return re.fullmatch(r"[a-z]+(?:_[a-z0-9]+)*", name) is not None


def is_pascal_case(name: str) -> bool:
    """Basic check whether a string looks like PascalCase."""
    return re.fullmatch(r"[A-Z][A-Za-z0-9]*", name) is not None


def remove_suffix(text: str, suffix: str) -> str:
    """
    Remove an exact suffix from the given text if present.

    Unlike str.rstrip, this removes only the provided suffix once,
    not any combination of its characters.
    """
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text
