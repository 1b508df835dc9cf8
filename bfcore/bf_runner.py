from dataclasses import dataclass, field
from typing import List, Optional, Union
import os

from dotenv import load_dotenv

from brainfuck import BrainfuckInterpreter
from bfcore.program import Program

load_dotenv()

DEFAULT_STEP_LIMIT = int(os.environ.get("BF_STEP_LIMIT", "5000"))


@dataclass
class RunResult:
    output: List[str] = field(default_factory=list)
    steps: int = 0
    hit_step_limit: bool = False

    @property
    def text(self) -> str:
        return ''.join(self.output)


def run_with_limit(program: Union[Program, str], step_limit: Optional[int] = None) -> RunResult:
    """Run a program for at most step_limit instructions.
    Bracket and output errors propagate; running out of steps does not.
    """
    limit = DEFAULT_STEP_LIMIT if step_limit is None else step_limit
    itp = BrainfuckInterpreter(program)
    while not itp.finished and itp.steps < limit:
        itp.step()
    return RunResult(itp.output, itp.steps, not itp.finished)


def run_once(code: str, step_limit: Optional[int] = None) -> Optional[str]:
    """Execute code and return its output, or None if it did not halt within the limit."""
    result = run_with_limit(code, step_limit)
    if result.hit_step_limit:
        return None
    return result.text
