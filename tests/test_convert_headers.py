import runpy
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / 'bin' / 'convert_headers.py'


def run_script(monkeypatch, *args):
    monkeypatch.setattr(sys, 'argv', [str(SCRIPT), *args])
    runpy.run_path(str(SCRIPT), run_name='__main__')


def test_writes_class_files(monkeypatch, tmp_path, samples_dir, capsys):
    run_script(monkeypatch, str(samples_dir / 'Core_structs.h'),
               str(samples_dir / 'Core_classes.h'), '-o', str(tmp_path), '-q')

    object_uc = tmp_path / 'Core' / 'Classes' / 'Object.uc'
    commandlet_uc = tmp_path / 'Core' / 'Classes' / 'Commandlet.uc'
    assert object_uc.is_file()
    assert commandlet_uc.is_file()
    assert 'enum EAxis\n' in object_uc.read_text()
    assert 'var() array<string> Tags;\n' in object_uc.read_text()

    out = capsys.readouterr().out
    assert f'Generated: {object_uc}' in out
    assert 'Conversion completed in' in out


def test_missing_header(monkeypatch, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        run_script(monkeypatch, str(tmp_path / 'Missing.h'), '-o', str(tmp_path))
    assert exc_info.value.code == 2
