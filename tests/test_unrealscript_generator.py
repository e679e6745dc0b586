import pytest

from headertouc import HeaderParser, UnrealScriptGenerator


@pytest.fixture
def generator(core_structs, core_classes):
    parsed = HeaderParser(core_structs).parse()
    parsed.extend(HeaderParser(core_classes).parse())
    return UnrealScriptGenerator(parsed)


def test_generate_object(generator):
    core_object = generator.parsed.find_class_file('Core', 'Object')
    assert generator.generate(core_object) == (
        '// AUTO-GENERATED - DO NOT EDIT\n'
        '// Converted from Core.Object\n'
        '\n'
        'enum EAxis\n'
        '{\n'
        '    AXIS_NONE,\n'
        '    AXIS_X,\n'
        '    AXIS_Y,\n'
        '    AXIS_Z,\n'
        '    AXIS_MAX,\n'
        '};\n'
        '\n'
        'enum EInterpCurveMode\n'
        '{\n'
        '    CIM_Linear,\n'
        '    CIM_CurveAuto,\n'
        '    CIM_Constant,\n'
        '    CIM_MAX,\n'
        '};\n'
        '\n'
        'var const native noexport Pointer VfTableObject;\n'
        'var const native int ObjectInternalInteger;\n'
        'var const native editconst Object Outer;\n'
        'var() const native editconst name Name;\n'
        'var() array<string> Tags;\n'
        'var transient bool bDeleteMe;\n'
        'var export Object Template;\n'
    )


def test_generate_all_paths(generator):
    files = generator.generate_all()
    assert list(files) == ['Core/Classes/Object.uc', 'Core/Classes/Commandlet.uc']
    assert files['Core/Classes/Commandlet.uc'].endswith(
        'var const string HelpCommand;\n'
        'var const array<string> HelpParamNames;\n'
        'var bool IsServer;\n'
    )
