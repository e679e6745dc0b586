"""Type mapping from SDK header spellings to UnrealScript types"""

from typing import Optional

from .errors import UnsupportedConstructError


class TypeMapper:
    """Maps C++ header type spellings to UnrealScript types"""

    # Direct header -> UnrealScript type mappings
    TYPES = {
        'TArray': 'array',
        'long': 'bool',
        'char': 'byte',
        'FString': 'string',
        'FName': 'name',
    }

    # Types the UnrealScript compiler cannot represent
    UNSUPPORTED = frozenset({'FScriptDelegate'})

    # Members the SDK generator emits for fields it could not reflect
    UNKNOWN_MARKER = 'UnknownData'

    @classmethod
    def resolve_base_type(cls, spelling: str) -> str:
        """Convert a single type token"""
        if spelling in cls.UNSUPPORTED:
            raise UnsupportedConstructError(spelling)

        if spelling in cls.TYPES:
            return cls.TYPES[spelling]

        # Class references carry a one letter prefix (UObject, FVector, AActor)
        if spelling[:1].isupper():
            return spelling[1:]
        return spelling

    @classmethod
    def resolve_type(cls, tokens: list[str]) -> Optional[str]:
        """Convert the leading tokens of a cleaned declaration.

        Returns None when the declaration has no meaningful type, e.g. an
        array of unreflected data.
        """
        if not tokens:
            return None

        base_type = cls.resolve_base_type(tokens[0])
        following = tokens[1] if len(tokens) > 1 else None

        if base_type == 'array':
            if following is None or cls.is_unknown(following):
                return None
            return f'array<{cls.resolve_base_type(following)}>'

        # unsigned char UnknownData00[0x4] is padding, not a real member
        if base_type == 'byte' and following is not None and cls.is_unknown(following):
            return None

        return base_type

    @classmethod
    def is_unknown(cls, token: str) -> bool:
        """Check if token names an unreflected field"""
        return cls.UNKNOWN_MARKER in token

