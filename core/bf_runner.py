from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union
import io
import os

from brainfuck import BrainfuckInterpreter, ProgramSource, ProgramState

DEFAULT_STEP_LIMIT = int(os.environ.get("BF_STEP_LIMIT", "100000"))


@dataclass
class RunResult:
    output: bytes
    errors: List[str] = field(default_factory=list)
    steps: int = 0
    hit_step_limit: bool = False
    state: ProgramState = ProgramState.DONE

    @property
    def text(self) -> str:
        return self.output.decode("latin-1")


def run_program(
    code: Union[str, bytes, ProgramSource],
    input_data: Union[str, bytes] = b"",
    step_limit: Optional[int] = DEFAULT_STEP_LIMIT,
    debug: bool = False,
) -> RunResult:
    """Execute BF code against in-memory input, capturing output and diagnostics.
    step_limit=None runs until the program finishes on its own.
    """
    if isinstance(code, str):
        source = ProgramSource.from_text(code)
    elif isinstance(code, bytes):
        source = ProgramSource(code)
    else:
        source = code
    if isinstance(input_data, str):
        input_data = input_data.encode("latin-1")

    out = io.BytesIO()
    err = io.StringIO()
    itp = BrainfuckInterpreter(source, io.BytesIO(input_data), out, err, debug=debug)
    state = itp.run(max_steps=step_limit)

    return RunResult(
        output=out.getvalue(),
        errors=err.getvalue().splitlines(),
        steps=itp.step_count,
        hit_step_limit=state != ProgramState.DONE,
        state=state,
    )
