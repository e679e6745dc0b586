"""UnrealScript Generator - renders converted declarations as UnrealScript source"""

from .types import (
    ClassFile, Declaration, EnumDefinition, ParsedHeader, VariableDefinition,
    VariableModifier,
)


class UnrealScriptGenerator:
    """Generates UnrealScript class file bodies"""

    # Edit only turns var into var(); Localized has no keyword
    MODIFIER_KEYWORDS = {
        VariableModifier.Const: 'const',
        VariableModifier.EditConst: 'editconst',
        VariableModifier.EditConstArray: 'editconstarray',
        VariableModifier.EditInline: 'editinline',
        VariableModifier.EditInlineNotify: 'databinding',
        VariableModifier.Export: 'export',
        VariableModifier.Transient: 'transient',
        VariableModifier.Native: 'native',
        VariableModifier.Net: 'repnotify',
        VariableModifier.NoExport: 'noexport',
    }

    INDENT = '    '

    def __init__(self, parsed: ParsedHeader):
        self.parsed = parsed

    def generate(self, class_file: ClassFile) -> str:
        """Generate the body of one .uc file"""
        parts = [
            "// AUTO-GENERATED - DO NOT EDIT\n",
            f"// Converted from {class_file.package_name}.{class_file.name}\n",
            "\n",
        ]
        parts.extend(self.render_enum(e) for e in class_file.enums)
        parts.extend(self.render_variable(v) for v in class_file.variables)
        return ''.join(parts)

    def generate_all(self) -> dict[str, str]:
        """Generate every class file, keyed by path relative to the output dir"""
        return {cf.relative_path: self.generate(cf) for cf in self.parsed.class_files}

    @classmethod
    def render(cls, definition: Declaration) -> str:
        if isinstance(definition, VariableDefinition):
            return cls.render_variable(definition)
        if isinstance(definition, EnumDefinition):
            return cls.render_enum(definition)
        raise TypeError(f"Cannot render {type(definition).__name__}")

    @classmethod
    def render_variable(cls, variable: VariableDefinition) -> str:
        declaration = 'var()' if VariableModifier.Edit in variable.modifiers else 'var'
        for modifier in variable.modifiers:
            keyword = cls.MODIFIER_KEYWORDS.get(modifier)
            if keyword:
                declaration += f' {keyword}'
        return f'{declaration} {variable.type} {variable.name};\n'

    @classmethod
    def render_enum(cls, enum: EnumDefinition) -> str:
        lines = [f'enum {enum.name}', '{']
        lines.extend(f'{cls.INDENT}{prop},' for prop in enum.enum_properties)
        lines.append('};')
        return '\n'.join(lines) + '\n\n'
