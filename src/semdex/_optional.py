# src/semdex/_optional.py
"""Placeholders for classes whose optional extra is not installed."""

from typing import Any


def _create_missing_dependency_class(class_name: str, package: str) -> type:
    """Return a stand-in for ``class_name`` that fails when instantiated.

    Importing (and type-hinting with) the stand-in works; calling it raises
    ImportError naming the extra to install.
    """

    class MissingDependencyClass:
        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError(
                f"{class_name} is not available. Install it with: pip install semdex[{package}]"
            )

    MissingDependencyClass.__name__ = class_name
    MissingDependencyClass.__qualname__ = class_name
    MissingDependencyClass.__module__ = "semdex"

    return MissingDependencyClass
