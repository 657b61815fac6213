import logging as lg
from pathlib import Path
from typing import Any, Dict, List
import tomllib

from ttasm.programs.catalog import PROGRAMS, UnknownProgram


DEFAULT_SUFFIX = '.mem'


class BuildSettings:
    verbose: bool
    output_dir: Path
    suffix: str
    programs: List[str]
    produce_json: bool

    def __init__(self):
        self.verbose = False
        self.output_dir = Path('.')
        self.suffix = DEFAULT_SUFFIX
        self.programs = list(PROGRAMS.keys())
        self.produce_json = False

    def update(
        self,
        verbose: bool | None = None,
        output_dir: Path | None = None,
        suffix: str | None = None,
        programs: List[str] | None = None,
        produce_json: bool | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if output_dir is not None:
            self.output_dir = Path(output_dir)

        if suffix is not None:
            self.suffix = suffix

        if programs is not None:
            self.programs = list(programs)

        if produce_json is not None:
            self.produce_json = produce_json

        return self

    def output_path(self, name: str) -> Path:
        return self.output_dir / f'{name}{self.suffix}'


def expect_str(path: Path, build: Dict[str, Any], key: str) -> str | None:
    value = build.get(key)

    if value is not None and not isinstance(value, str):
        raise UserWarning(f'Manifest {path}: {key} must be a string, got {value!r}')

    return value


def load_manifest(path: Path, settings: BuildSettings | None = None) -> BuildSettings:
    if settings is None:
        settings = BuildSettings()

    lg.debug(f'Loading manifest {path}')

    try:
        config = tomllib.loads(path.read_text(encoding='utf-8'))
    except UnicodeDecodeError as e:
        raise UserWarning(f'Manifest {path} is not UTF-8 text: {e.reason}') from e

    build = config.get('build')

    if not isinstance(build, dict):
        raise UserWarning(f'Manifest {path} has no [build] table')

    output_dir = expect_str(path, build, 'output_dir')
    suffix = expect_str(path, build, 'suffix')

    # Relative to the manifest, not the working directory
    output_path = path.parent / output_dir if output_dir is not None else None

    programs = build.get('programs')

    if programs is not None and not (
        isinstance(programs, list) and all(isinstance(name, str) for name in programs)
    ):
        raise UserWarning(f'Manifest {path}: programs must be a list of names')

    if programs is not None:
        unknown = [name for name in programs if name not in PROGRAMS]

        if unknown:
            raise UnknownProgram(f'Unknown programs in {path}: {", ".join(unknown)}')

    return settings.update(
        output_dir=output_path,
        suffix=suffix,
        programs=programs
    )
