from pathlib import Path

import pytest

SAMPLES_DIR = Path(__file__).resolve().parent.parent / 'samples' / 'headers'


def sdk_line(type_spelling, name, flags=None, comment='// 0x0000 (0x0004) [0x0000000000000000]'):
    """Build a member line padded the way the SDK generator pads columns"""
    line = f"\t{type_spelling:<50} {name + ';':<50}\t\t{comment}"
    if flags is not None:
        line += f"              ( {' | '.join(flags)} )"
    return line


@pytest.fixture
def make_line():
    return sdk_line


@pytest.fixture
def samples_dir():
    return SAMPLES_DIR


@pytest.fixture
def core_structs(samples_dir):
    return (samples_dir / 'Core_structs.h').read_text()


@pytest.fixture
def core_classes(samples_dir):
    return (samples_dir / 'Core_classes.h').read_text()
