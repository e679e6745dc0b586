"""Parsers for SDK header declarations"""

import logging
import re
from typing import Optional

from .errors import DefinitionError, InvalidEnumError, InvalidVariableError
from .modifiers import ModifierDecoder, UnknownFlagSink
from .type_mapper import TypeMapper
from .types import (
    ClassFile, Declaration, EnumDefinition, ParsedHeader, SkippedDeclaration,
    VariableDefinition,
)

logger = logging.getLogger(__name__)

# Substrings with no meaning for UnrealScript. The "1" is left over from
# bitfields (unsigned long bFlag : 1) and one element arrays.
NOISE_TOKENS = ('struct', 'class', 'unsigned', '1', ';', ':', '<', '>', '*')

# Removing the brackets of "TArray< struct FFoo >" leaves two spaces inside
# the type, so only a longer run separates type from name.
NAME_BOUNDARY = re.compile(r' {3,}')


def clean_declaration(declaration: str) -> str:
    """Strip noise substrings from a raw declaration"""
    for token in NOISE_TOKENS:
        declaration = declaration.replace(token, '')
    return declaration


def parse_variable(declaration: str,
                   on_unknown_flag: Optional[UnknownFlagSink] = None) -> VariableDefinition:
    """Parse one variable line, e.g.

    class UObject*   Outer;   // 0x0028 (0x0004) [0x0000000000021002]   ( CPF_Const | CPF_Native )
    """
    cleaned = clean_declaration(declaration)

    var_type = TypeMapper.resolve_type(cleaned.split())
    if var_type is None:
        raise InvalidVariableError("Could not resolve variable type", declaration)

    segments = [s for s in NAME_BOUNDARY.split(cleaned) if s]
    if len(segments) < 2:
        raise InvalidVariableError("Could not resolve variable name", declaration)
    name = segments[1]

    modifiers = ModifierDecoder.decode(ModifierDecoder.flag_tokens(cleaned), on_unknown_flag)
    return VariableDefinition(name=name, type=var_type, modifiers=modifiers)


def parse_enum(block: str) -> EnumDefinition:
    """Parse an enum block introduced by its qualifier line:

    // Enum Core.Object.EAxis
    enum EAxis
    {
    AXIS_NONE = 0
    ...
    };
    """
    lines = block.split('\n')
    header = lines[0].split()
    if len(header) < 3:
        raise InvalidEnumError("Missing enum qualifier", block)

    qualifier = header[2].split('.')
    if len(qualifier) < 3:
        raise InvalidEnumError("Enum qualifier is not Package.ClassFile.Name", block,
                               qualifier=header[2])

    if '{' not in block or '}' not in block or block.index('{') > block.index('}'):
        raise InvalidEnumError("Missing enum body", block)
    parts = re.split(r'[{}]', block)

    properties = []
    for line in parts[1].split('\n'):
        if not line.strip():
            continue
        member = line.split('=')[0]
        if member.endswith(' '):
            member = member[:-1]
        properties.append(member)

    return EnumDefinition(
        package_name=qualifier[0],
        class_file_name=qualifier[1],
        name=qualifier[2],
        enum_properties=properties,
    )


def parse_declaration(fragment: str,
                      on_unknown_flag: Optional[UnknownFlagSink] = None) -> Declaration:
    """Route a fragment to the enum or variable parser by its shape"""
    if '{' in fragment:
        return parse_enum(fragment)
    return parse_variable(fragment, on_unknown_flag)


class HeaderParser:
    """Splits a whole SDK header into declarations.

    Sections are introduced by the generator's comments:

    // Class Core.Object
    // ScriptStruct Core.Object.Vector
    // Enum Core.Object.EAxis
    """

    SECTION_RE = re.compile(r'^\s*//\s*(Class|ScriptStruct)\s+(\S+)')
    ENUM_RE = re.compile(r'^\s*//\s*Enum\s+\S+')
    SKIPPED_PREFIXES = ('static', 'virtual', 'typedef', 'friend', 'return', '#', '}')

    def __init__(self, content: str, on_unknown_flag: Optional[UnknownFlagSink] = None):
        self.lines = content.split('\n')
        self.on_unknown_flag = on_unknown_flag

    def parse(self) -> ParsedHeader:
        result = ParsedHeader()
        current: Optional[ClassFile] = None
        in_struct = False

        i = 0
        while i < len(self.lines):
            line = self.lines[i].rstrip('\r')

            if self.ENUM_RE.match(line):
                end = self._block_end(i)
                block = self._normalize_enum(self.lines[i:end + 1])
                self._add_enum(result, block)
                i = end + 1
                continue

            if m := self.SECTION_RE.match(line):
                current, in_struct = self._open_section(result, m.group(1), m.group(2))
            elif self._is_variable(line):
                self._add_variable(result, current, in_struct, line)
            i += 1

        return result

    def _block_end(self, start: int) -> int:
        """Index of the enum's closing line, or of the line before the next section"""
        for i in range(start, len(self.lines)):
            line = self.lines[i]
            if i > start and (self.ENUM_RE.match(line) or self.SECTION_RE.match(line)):
                return i - 1
            if '}' in line:
                return i
        return len(self.lines) - 1

    def _normalize_enum(self, lines: list[str]) -> str:
        """Collapse SDK column padding so members read 'NAME = value'"""
        normalized = [lines[0].strip()]
        for line in lines[1:]:
            line = line.strip().rstrip(',')
            normalized.append(re.sub(r'\s*=\s*', ' = ', line))
        return '\n'.join(normalized)

    def _open_section(self, result: ParsedHeader, kind: str, qualifier: str):
        parts = qualifier.split('.')
        if kind == 'ScriptStruct':
            logger.debug("Ignoring members of struct %s", qualifier)
            return None, True
        if len(parts) < 2 or not all(parts[:2]):
            logger.info("Class section '%s' has no Package.Class qualifier", qualifier)
            return None, False
        return result.class_file(parts[0], parts[1]), False

    def _is_variable(self, line: str) -> bool:
        code = line.split('//')[0].strip()
        if not code.endswith(';') or '(' in code or '=' in code:
            return False
        return not code.startswith(self.SKIPPED_PREFIXES)

    def _add_enum(self, result: ParsedHeader, block: str):
        try:
            enum = parse_enum(block)
        except DefinitionError as e:
            self._skip(result, block, str(e))
            return
        logger.debug("Parsed enum %s", enum.qualifier)
        result.class_file(enum.package_name, enum.class_file_name).enums.append(enum)

    def _add_variable(self, result: ParsedHeader, current: Optional[ClassFile],
                      in_struct: bool, line: str):
        if in_struct:
            return
        if current is None:
            self._skip(result, line, "Variable outside of a class section")
            return
        try:
            variable = parse_variable(line, self.on_unknown_flag)
        except DefinitionError as e:
            self._skip(result, line, str(e))
            return
        logger.debug("Parsed variable %s.%s", current.name, variable.name)
        current.variables.append(variable)

    def _skip(self, result: ParsedHeader, fragment: str, reason: str):
        logger.info("Skipping declaration: %s", reason)
        result.skipped.append(SkippedDeclaration(fragment=fragment.strip(), reason=reason))
