from dataclasses import dataclass
from typing import Dict, List

from ttasm.isa.instructions import Instructions
from ttasm.isa.operands import JSON
import ttasm.programs.ops as ops
import ttasm.programs.fib_memo as fib_memo


class UnknownProgram(UserWarning):
    pass


@dataclass
class Program:
    name: str
    description: str
    instructions: Instructions

    def json(self) -> JSON:
        return {
            'Class': 'Program',
            'Name': self.name,
            'Instructions': [i.json() for i in self.instructions]
        }


PROGRAMS: Dict[str, Program] = {
    'ops': Program('ops', 'Instruction-set smoke test', ops.PROGRAM),
    'fib_memo': Program('fib_memo', 'Memoised Fibonacci of the input', fib_memo.PROGRAM),
}


def get_program(name: str) -> Program:
    try:
        return PROGRAMS[name]
    except KeyError:
        raise UnknownProgram(f'Unknown program {name}') from None


def get_programs(names: List[str]) -> List[Program]:
    return [get_program(name) for name in names]
