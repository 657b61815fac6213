from pathlib import Path
from typing import List

from ttasm.image.hexfile import build_image, render_lines
from ttasm.isa.instructions import Instructions


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def listing_of(instructions: Instructions) -> List[str]:
    return render_lines(build_image(instructions))
