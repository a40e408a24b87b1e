"""Navigation configuration errors.

All errors are detected at build time and are fatal: a sidebar with a
missing or ambiguous entry is never produced.
"""


class ConfigError(ValueError):
    """Base class for navigation configuration errors."""

    def __init__(self, message: str, *, label: str | None = None) -> None:
        super().__init__(message)
        self.label = label


class DanglingReferenceError(ConfigError):
    """A link target or auto-generated directory does not exist."""

    def __init__(self, label: str, path: str, *, kind: str = "page") -> None:
        super().__init__(
            f'Dangling reference in "{label}": {kind} "{path}" does not exist',
            label=label,
        )
        self.path = path
        self.kind = kind


class DuplicateLabelError(ConfigError):
    """Two sibling entries share the same label."""

    def __init__(self, label: str, parent: str | None = None) -> None:
        where = f'in "{parent}"' if parent else "at top level"
        super().__init__(
            f'Duplicate label "{label}" {where}: sibling labels must be unique',
            label=label,
        )
        self.parent = parent


class EmptyAutoSectionError(ConfigError):
    """An auto-generated section found no pages in its directory."""

    def __init__(self, label: str, directory: str) -> None:
        super().__init__(
            f'Auto-generated section "{label}" is empty: '
            f'no pages found in directory "{directory}"',
            label=label,
        )
        self.directory = directory
