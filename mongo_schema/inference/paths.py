"""Field path composition."""

ELEMENT_SUFFIX = "[]"


def child_path(parent: str, name: str) -> str:
    """Path of field ``name`` inside ``parent`` ("" is the document root)."""
    return f"{parent}.{name}" if parent else name


def element_path(array_path: str) -> str:
    """Path shared by every element of the array at ``array_path``."""
    return array_path + ELEMENT_SUFFIX
