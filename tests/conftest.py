import io
import os

import pytest

from brainfuck import BrainfuckInterpreter, ProgramSource

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


@pytest.fixture
def make_interpreter():
    """Build an interpreter over in-memory streams."""
    def _make(code, input_data=b"", debug=False):
        return BrainfuckInterpreter(
            ProgramSource.from_text(code),
            input_stream=io.BytesIO(input_data),
            output_stream=io.BytesIO(),
            error_stream=io.StringIO(),
            debug=debug,
        )
    return _make
