#!/usr/bin/env python3
"""
Brainfuck Step-by-Step Debugger

This script shows the step-by-step execution of a Brainfuck program,
displaying the program position, a window of the memory tape, and the
output at each step.
"""

import io
import sys

from brainfuck import COMMANDS, BrainfuckInterpreter, ProgramSource, ProgramState


class BrainfuckDebugger(BrainfuckInterpreter):
    """Brainfuck interpreter that prints its state after every step."""

    def __init__(self, source, input_data=b"", show_memory_range=10, max_steps=100, display=None):
        super().__init__(source, io.BytesIO(input_data), io.BytesIO(), io.StringIO())
        self.show_memory_range = show_memory_range
        self.max_steps = max_steps
        self.display = display if display is not None else sys.stdout
        self.commands_run = 0

    def _print(self, *args):
        print(*args, file=self.display)

    def debug_run(self):
        """Execute the program, showing the state after each step."""
        self._print("🐛 BRAINFUCK DEBUGGER")
        self._print(f"Program: {self.source.code.decode('latin-1')}")
        self._print("=" * 80)

        self._show_state("INITIAL")

        state = ProgramState.DONE if self.done else ProgramState.RUNNING
        while state != ProgramState.DONE and self.commands_run < self.max_steps:
            cmd = chr(self.source.code[self.instruction_pointer])
            position = self.instruction_pointer
            before = self.cell

            state = self.step()
            if ord(cmd) not in COMMANDS:
                continue
            self.commands_run += 1

            self._print(f"\nStep {self.commands_run}: Execute '{cmd}' at position {position}")
            self._describe(cmd, before)
            for line in self.error_stream.getvalue().splitlines():
                self._print(f"  ⚠️ {line}")
            self.error_stream.seek(0)
            self.error_stream.truncate()

            self._show_state(f"AFTER STEP {self.commands_run}")

        if state != ProgramState.DONE:
            self._print(f"\n⚠️ Execution stopped after {self.max_steps} steps (possible infinite loop)")

        result = self.output_stream.getvalue()
        self._print("\n🎯 FINAL RESULT:")
        self._print(f"Output: {result!r} → {list(result)}")
        return result

    def _describe(self, cmd, before):
        if cmd == '>':
            self._print(f"  Move pointer right → position {self.pointer}")
        elif cmd == '<':
            self._print(f"  Move pointer left → position {self.pointer}")
        elif cmd == '+':
            self._print(f"  Increment cell[{self.pointer}] → {self.cell}")
        elif cmd == '-':
            self._print(f"  Decrement cell[{self.pointer}] → {self.cell}")
        elif cmd == '.':
            self._print(f"  Output cell[{self.pointer}] = {self.cell} → {chr(self.cell)!r}")
        elif cmd == ',':
            self._print(f"  Read input → cell[{self.pointer}] = {self.cell}")
        elif cmd == '[':
            if before == 0:
                self._print(f"  Loop start: cell[{self.pointer}] = 0, skip past matching ], continue at position {self.instruction_pointer}")
            else:
                self._print(f"  Loop start: cell[{self.pointer}] ≠ 0, enter loop")
        elif cmd == ']':
            if before != 0:
                self._print(f"  Loop end: cell[{self.pointer}] ≠ 0, jump back past matching [, continue at position {self.instruction_pointer}")
            else:
                self._print(f"  Loop end: cell[{self.pointer}] = 0, exit loop")

    def _show_state(self, label):
        """Show current state of memory, pointer, and program."""
        self._print(f"\n{label}:")

        code = self.source.code.decode("latin-1")
        program_display = ""
        for i, cmd in enumerate(code):
            if i == self.instruction_pointer:
                program_display += f"[{cmd}]"
            else:
                program_display += cmd
        if self.done:
            program_display += "[END]"
        self._print(f"Program:  {program_display}")

        # Show memory tape (focused around pointer)
        start = max(0, self.pointer - self.show_memory_range // 2)
        end = min(len(self.memory), start + self.show_memory_range)

        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        memory_vals = []
        memory_ptrs = []
        memory_addrs = []

        for i in range(start, end):
            memory_vals.append(f"{int(self.memory[i]):3d}")
            memory_ptrs.append(" ^ " if i == self.pointer else "   ")
            memory_addrs.append(f"{i:3d}")

        self._print("Memory:   [" + "|".join(memory_vals) + "]")
        self._print("Pointer:   " + " ".join(memory_ptrs))
        self._print("Address:   " + " ".join(memory_addrs))

        output = self.output_stream.getvalue()
        if output:
            self._print(f"Output:   {output!r} → {list(output)}")
        else:
            self._print("Output:   (empty)")


def main():
    """Interactive debugger."""
    print("🧠 Brainfuck Step-by-Step Debugger")
    print("Enter 'quit' to exit\n")

    while True:
        print("-" * 60)
        program = input("Enter Brainfuck program: ").strip()
        if program.lower() == 'quit':
            break

        input_data = input("Enter input data: ").strip()

        debugger = BrainfuckDebugger(ProgramSource.from_text(program), input_data.encode("latin-1"),
                                     show_memory_range=8)
        print()
        result = debugger.debug_run()
        print(f"\n✅ Execution complete. Final output: {result!r}")


if __name__ == "__main__":
    main()
