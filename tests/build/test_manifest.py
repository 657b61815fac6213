import pytest

from ttasm.build.manifest import BuildSettings, load_manifest
from ttasm.programs.catalog import PROGRAMS, UnknownProgram

from fixtures import manifest  # noqa: F401


def test_defaults():
    settings = BuildSettings()
    assert settings.programs == list(PROGRAMS)
    assert settings.suffix == '.mem'
    assert not settings.verbose


def test_update_skips_none():
    settings = BuildSettings().update(suffix='.hex')
    settings.update(suffix=None, verbose=True)
    assert settings.suffix == '.hex'
    assert settings.verbose


def test_output_path(tmp_path):
    settings = BuildSettings().update(output_dir=tmp_path)
    assert settings.output_path('ops') == tmp_path / 'ops.mem'


def test_load_manifest(manifest):  # noqa: F811
    settings = load_manifest(manifest)
    assert settings.programs == ['ops', 'fib_memo']
    assert settings.output_dir == manifest.parent / 'mem'
    assert settings.suffix == '.mem'


def test_load_manifest_into_settings(manifest):  # noqa: F811
    settings = BuildSettings().update(verbose=True)
    assert load_manifest(manifest, settings) is settings
    assert settings.verbose


def test_manifest_unknown_program(tmp_path):
    path = tmp_path / 'build.toml'
    path.write_text('[build]\nprograms = ["ops", "fib_framed"]\n')

    with pytest.raises(UnknownProgram):
        load_manifest(path)


def test_manifest_without_build_table(tmp_path):
    path = tmp_path / 'build.toml'
    path.write_text('[library]\npackage = "kernel"\n')

    with pytest.raises(UserWarning):
        load_manifest(path)


def test_manifest_suffix(tmp_path):
    path = tmp_path / 'build.toml'
    path.write_text('[build]\nsuffix = ".hex"\n')
    settings = load_manifest(path)
    assert settings.suffix == '.hex'
    assert settings.programs == list(PROGRAMS)


@pytest.mark.parametrize('entry,key', [
    ('output_dir = 5', 'output_dir'),
    ('suffix = 1', 'suffix'),
    ('output_dir = ["mem"]', 'output_dir'),
])
def test_manifest_value_not_a_string(tmp_path, entry, key):
    path = tmp_path / 'build.toml'
    path.write_text(f'[build]\n{entry}\n')

    with pytest.raises(UserWarning) as e:
        load_manifest(path)

    assert key in str(e.value)


@pytest.mark.parametrize('entry', ['programs = "ops"', 'programs = ["ops", 1]'])
def test_manifest_programs_not_a_list_of_names(tmp_path, entry):
    path = tmp_path / 'build.toml'
    path.write_text(f'[build]\n{entry}\n')

    with pytest.raises(UserWarning) as e:
        load_manifest(path)

    assert 'programs' in str(e.value)
    assert not isinstance(e.value, UnknownProgram)


def test_manifest_build_not_a_table(tmp_path):
    path = tmp_path / 'build.toml'
    path.write_text('build = "ops"\n')

    with pytest.raises(UserWarning):
        load_manifest(path)


def test_manifest_not_text(tmp_path):
    path = tmp_path / 'build.toml'
    path.write_bytes(b'\xff\xfe[build]\n')

    with pytest.raises(UserWarning):
        load_manifest(path)
