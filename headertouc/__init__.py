"""
UnrealScript Header Converter Package

Parses the C++ headers dumped by an Unreal Engine 3 SDK generator and
generates the equivalent UnrealScript declarations:
  1. Enums (enum blocks with their members in declared order)
  2. Member variables (var declarations with their modifiers)
"""

from .errors import (
    DefinitionError, InvalidVariableError, InvalidEnumError, UnsupportedConstructError,
)
from .types import (
    VariableModifier, Definition, VariableDefinition, EnumDefinition, Declaration,
    ClassFile, SkippedDeclaration, ParsedHeader,
)
from .type_mapper import TypeMapper
from .modifiers import ModifierDecoder
from .parser import (
    HeaderParser, clean_declaration, parse_variable, parse_enum, parse_declaration,
)
from .unrealscript_generator import UnrealScriptGenerator

__all__ = [
    'DefinitionError', 'InvalidVariableError', 'InvalidEnumError', 'UnsupportedConstructError',
    'VariableModifier', 'Definition', 'VariableDefinition', 'EnumDefinition', 'Declaration',
    'ClassFile', 'SkippedDeclaration', 'ParsedHeader',
    'TypeMapper', 'ModifierDecoder',
    'HeaderParser', 'clean_declaration', 'parse_variable', 'parse_enum', 'parse_declaration',
    'UnrealScriptGenerator',
]
