#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer (0 on EOF)
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other bytes are treated as comments and ignored.

The tape holds TAPE_SIZE byte cells and the data pointer wraps around at
both ends. Loops are matched by rescanning the program text each time a
jump is taken.
"""

import sys
from dataclasses import dataclass
from enum import Enum

import numpy as np

# The language requires at least 30000 cells
TAPE_SIZE = 1 << 15
COMMANDS = b"><+-.,[]"
TRACE_STEPS = 50  # Only trace the first steps in debug mode

USAGE = "Usage: brainfuck [src_file_path]"


class ProgramState(Enum):
    RUNNING = "running"
    DONE = "done"


@dataclass(frozen=True)
class ProgramSource:
    """Raw program bytes, read-only for the whole run."""
    code: bytes = b""

    @classmethod
    def from_text(cls, text):
        return cls(text.encode("utf-8"))

    @property
    def length(self):
        return len(self.code)

    def __len__(self):
        return len(self.code)


def load_source(path, error_stream=None):
    """Read the whole file at path. Unreadable files give an empty program."""
    try:
        with open(path, "rb") as f:
            return ProgramSource(f.read())
    except OSError:
        print(f"Could not read file at path: {path}", file=error_stream or sys.stderr)
        return ProgramSource()


class BrainfuckInterpreter:
    def __init__(self, source, input_stream=None, output_stream=None, error_stream=None, debug=False):
        if not isinstance(source, ProgramSource):
            raise TypeError(f"expected ProgramSource, got {type(source).__name__}")
        self.source = source
        self.memory = np.zeros(TAPE_SIZE, dtype=np.uint8)
        self.pointer = 0
        self.instruction_pointer = 0
        self.step_count = 0
        self.output_writes = 0
        self.input_reads = 0
        self.debug = debug

        self.input_stream = input_stream if input_stream is not None else sys.stdin.buffer
        self.output_stream = output_stream if output_stream is not None else sys.stdout.buffer
        self.error_stream = error_stream if error_stream is not None else sys.stderr

    @property
    def done(self):
        return self.instruction_pointer >= len(self.source)

    @property
    def cell(self):
        return int(self.memory[self.pointer])

    def step(self):
        """Execute one command and advance past it."""
        if self.done:
            return ProgramState.DONE

        cmd = self.source.code[self.instruction_pointer]
        if self.debug and self.step_count < TRACE_STEPS:
            self._trace(cmd)
        self.step_count += 1

        if cmd == ord('>'):
            self.pointer += 1
            if self.pointer >= TAPE_SIZE:
                self.pointer = 0

        elif cmd == ord('<'):
            if self.pointer == 0:
                self.pointer = TAPE_SIZE
            self.pointer -= 1

        elif cmd == ord('+'):
            self.memory[self.pointer] = (self.cell + 1) % 256

        elif cmd == ord('-'):
            self.memory[self.pointer] = (self.cell - 1) % 256

        elif cmd == ord('.'):
            self.output_stream.write(bytes((self.cell,)))
            self.output_writes += 1

        elif cmd == ord(','):
            data = self.input_stream.read(1)
            self.memory[self.pointer] = data[0] if data else 0
            self.input_reads += 1

        elif cmd == ord('['):
            if self.cell == 0:
                self._scan_forward()

        elif cmd == ord(']'):
            if self.cell != 0 and not self._scan_backward():
                # Nothing sensible to resume from before the program start
                self.instruction_pointer = len(self.source)
                return ProgramState.DONE

        self.instruction_pointer += 1
        return ProgramState.DONE if self.done else ProgramState.RUNNING

    def run(self, max_steps=None):
        """Step until done, or until max_steps commands have run."""
        state = ProgramState.DONE if self.done else ProgramState.RUNNING
        while state != ProgramState.DONE:
            if max_steps is not None and self.step_count >= max_steps:
                break
            state = self.step()
        return state

    def _scan_forward(self):
        """Move onto the ] matching the [ under the instruction pointer."""
        depth = 1
        while depth:
            self.instruction_pointer += 1
            if self.done:
                print("Could not find loop end", file=self.error_stream)
                return False
            cmd = self.source.code[self.instruction_pointer]
            if cmd == ord('['):
                depth += 1
            elif cmd == ord(']'):
                depth -= 1
        return True

    def _scan_backward(self):
        """Move onto the [ matching the ] under the instruction pointer."""
        depth = 1
        while depth:
            if self.instruction_pointer == 0:
                print("Could not find loop start", file=self.error_stream)
                return False
            self.instruction_pointer -= 1
            cmd = self.source.code[self.instruction_pointer]
            if cmd == ord(']'):
                depth += 1
            elif cmd == ord('['):
                depth -= 1
        return True

    def _trace(self, cmd):
        print(f"Step {self.step_count:2d}: IP={self.instruction_pointer:2d} CMD={chr(cmd)!r} "
              f"PTR={self.pointer} CELL={self.cell} MEM={self.memory[:5].tolist()}",
              file=self.error_stream)


def main(argv=None):
    # Count raw arguments; "--" and option-like tokens are paths here
    paths = sys.argv[1:] if argv is None else list(argv)
    if len(paths) != 1:
        print(USAGE, file=sys.stderr)
        return 1

    source = load_source(paths[0])
    interpreter = BrainfuckInterpreter(source)
    interpreter.run()
    interpreter.output_stream.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
