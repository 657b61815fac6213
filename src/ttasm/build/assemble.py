import sys
import json
import logging as lg
from pathlib import Path
import tomllib
from typing import Any, Callable, List, Tuple, TypeVar

import click

from ttasm.build.manifest import BuildSettings, load_manifest
from ttasm.image.grammar import ListingError, parse_listing, read_listing
from ttasm.image.hexfile import build_image, render_listing, write_listing
from ttasm.programs.catalog import Program, get_program, get_programs


EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_CONFIG_ERROR = 2
EXIT_IO_ERROR = 3


def eprint(*args: Any, **kwargs: Any):
    print(*args, file=sys.stderr, **kwargs)


def build_program(settings: BuildSettings, program: Program) -> Path:
    if settings.produce_json:
        eprint(json.dumps(program.json(), indent=2))

    output = settings.output_path(program.name)
    lg.info(f'Assembling {program.name} ({program.description})')
    write_listing(output, build_image(program.instructions))
    return output


def build_programs(settings: BuildSettings) -> List[Path]:
    return [
        build_program(settings, program)
        for program in get_programs(settings.programs)
    ]


def first_mismatch(expected: bytes, actual: bytes) -> int | None:
    ''' Offset of the first differing byte, None if the images match '''
    for offset, (a, b) in enumerate(zip(expected, actual)):
        if a != b:
            return offset

    if len(expected) != len(actual):
        return min(len(expected), len(actual))

    return None


def verify_program(program: Program, listing: Path) -> int | None:
    # Listings pad the last group, so compare against the rendered image
    expected = read_listing(listing)
    actual = parse_listing(render_listing(build_image(program.instructions)))
    return first_mismatch(expected, actual)


T = TypeVar('T')


def guarded(func: Callable[[], T]) -> Tuple[int, T | None]:
    try:
        return EXIT_OK, func()

    except (UserWarning, ListingError, tomllib.TOMLDecodeError) as e:
        lg.error(f'Configuration error: {e}')
        return EXIT_CONFIG_ERROR, None

    except OSError as e:
        lg.error(f'I/O error: {e}')
        return EXIT_IO_ERROR, None


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    ctx.ensure_object(BuildSettings)
    ctx.obj.update(verbose=verbose)
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)


@cli.command()
@click.pass_context
@click.option('-c', '--manifest', type=Path, help='Build manifest (TOML)')
@click.option('-o', '--output-dir', type=Path, help='Directory for the listings')
@click.option('--produce-json', is_flag=True, help='Dump instructions as JSON')
@click.argument('programs', nargs=-1)
def build(
    ctx: click.Context,
    manifest: Path | None,
    output_dir: Path | None,
    produce_json: bool,
    programs: Tuple[str, ...]
):
    settings: BuildSettings = ctx.obj

    def do_build():
        if manifest is not None:
            load_manifest(manifest, settings)

        settings.update(
            output_dir=output_dir,
            produce_json=produce_json,
            programs=list(programs) if programs else None
        )

        return build_programs(settings)

    code, paths = guarded(do_build)

    for path in paths or []:
        click.echo(str(path))

    sys.exit(code)


@cli.command()
@click.argument('program')
def show(program: str):
    code, bytestr = guarded(lambda: build_image(get_program(program).instructions))

    if bytestr is not None:
        click.echo(render_listing(bytestr), nl=False)

    sys.exit(code)


@cli.command()
@click.argument('program')
@click.argument('listing', type=Path)
def verify(program: str, listing: Path):
    code, offset = guarded(lambda: verify_program(get_program(program), listing))

    if code != EXIT_OK:
        sys.exit(code)

    if offset is not None:
        click.echo(f'{program}: mismatch at byte 0x{offset:X}')
        sys.exit(EXIT_MISMATCH)

    click.echo(f'{program}: OK')
    sys.exit(EXIT_OK)


if __name__ == '__main__':
    cli()
