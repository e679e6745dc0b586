"""Exceptions raised while converting header declarations"""

from typing import Any, Optional


class DefinitionError(Exception):
    """Base class for declarations that cannot be converted.

    The offending fragment is kept in ``context`` so a driver can report
    what it dropped without re-parsing anything.
    """

    def __init__(self, message: str, fragment: Optional[str] = None, **kwargs: Any):
        self.message = message
        self.fragment = fragment
        self.context = dict(kwargs)
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [Context: {context_str}]"


class InvalidVariableError(DefinitionError):
    """Type or name of a variable line could not be resolved"""


class InvalidEnumError(DefinitionError):
    """Enum block is missing its qualifier line or brace body"""


class UnsupportedConstructError(DefinitionError):
    """Type is recognised but has no UnrealScript representation"""

    def __init__(self, spelling: str, fragment: Optional[str] = None, **kwargs: Any):
        self.spelling = spelling
        super().__init__(f"Unsupported type '{spelling}'", fragment, spelling=spelling, **kwargs)
