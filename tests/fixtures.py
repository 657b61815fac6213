# type: ignore
import pytest
from click.testing import CliRunner

import unit_utils


@pytest.fixture
def runner():
    yield CliRunner()


@pytest.fixture
def manifest(tmp_path):
    path = tmp_path / 'build.toml'
    path.write_text(unit_utils.load_file('testdata/build.toml'))
    yield path
