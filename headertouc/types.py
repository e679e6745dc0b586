"""Data types for converted declarations"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import DefinitionError, InvalidEnumError, InvalidVariableError


class VariableModifier(Enum):
    """Semantic qualifier of a variable, decoded from property flags"""
    Edit = 'Edit'
    Const = 'Const'
    EditConst = 'EditConst'
    EditConstArray = 'EditConstArray'
    EditInline = 'EditInline'
    EditInlineNotify = 'EditInlineNotify'
    Localized = 'Localized'
    Export = 'Export'
    Transient = 'Transient'
    Native = 'Native'
    Net = 'Net'
    NoExport = 'NoExport'


@dataclass
class Definition:
    """Declaration identified by a dotted Package.ClassFile.Name qualifier"""
    package_name: str
    class_file_name: str
    name: str

    # Raised when the qualifier is incomplete; variants narrow it
    error = DefinitionError

    def __post_init__(self):
        if not (self.package_name and self.class_file_name and self.name):
            raise self.error(
                "Incomplete qualifier",
                qualifier=f"{self.package_name}.{self.class_file_name}.{self.name}",
            )

    @property
    def qualifier(self) -> str:
        return f"{self.package_name}.{self.class_file_name}.{self.name}"


@dataclass
class EnumDefinition(Definition):
    """Enumeration with its members in declared order"""
    enum_properties: list[str] = field(default_factory=list)

    error = InvalidEnumError


@dataclass
class VariableDefinition:
    """Member variable"""
    name: str
    type: str
    modifiers: list[VariableModifier] = field(default_factory=list)

    def __post_init__(self):
        if not self.name or not self.type:
            raise InvalidVariableError("Variable needs both a type and a name",
                                       name=self.name, type=self.type)


Declaration = Union[VariableDefinition, EnumDefinition]


@dataclass
class ClassFile:
    """One UnrealScript class file and the declarations it owns"""
    package_name: str
    name: str
    enums: list[EnumDefinition] = field(default_factory=list)
    variables: list[VariableDefinition] = field(default_factory=list)

    @property
    def relative_path(self) -> str:
        return f"{self.package_name}/Classes/{self.name}.uc"


@dataclass
class SkippedDeclaration:
    """Fragment dropped during conversion"""
    fragment: str
    reason: str


@dataclass
class ParsedHeader:
    """Complete conversion result for one or more headers"""
    class_files: list[ClassFile] = field(default_factory=list)
    skipped: list[SkippedDeclaration] = field(default_factory=list)

    def find_class_file(self, package_name: str, name: str) -> Optional[ClassFile]:
        for class_file in self.class_files:
            if class_file.package_name == package_name and class_file.name == name:
                return class_file
        return None

    def class_file(self, package_name: str, name: str) -> ClassFile:
        """Get the class file for package/name, creating it on first use"""
        class_file = self.find_class_file(package_name, name)
        if class_file is None:
            class_file = ClassFile(package_name=package_name, name=name)
            self.class_files.append(class_file)
        return class_file

    def extend(self, other: 'ParsedHeader'):
        """Merge another header's results, keeping first-seen order"""
        for theirs in other.class_files:
            ours = self.class_file(theirs.package_name, theirs.name)
            ours.enums.extend(theirs.enums)
            ours.variables.extend(theirs.variables)
        self.skipped.extend(other.skipped)
