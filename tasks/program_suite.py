from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import os

import yaml

from core.bf_runner import run_program, RunResult, DEFAULT_STEP_LIMIT

DEFAULT_SUITE = os.path.join(os.path.dirname(__file__), "programs.yaml")


@dataclass
class ProgramCase:
    name: str
    code: str
    input: str = ""
    output: Optional[str] = None
    errors: Optional[List[str]] = None
    step_limit: Optional[int] = DEFAULT_STEP_LIMIT
    expect_step_limit: bool = False

    def run(self) -> RunResult:
        return run_program(self.code, self.input, step_limit=self.step_limit)

    def check(self, result: RunResult) -> List[str]:
        """Compare a run against the expectations; empty list means it passed."""
        problems: List[str] = []
        if self.output is not None and result.text != self.output:
            problems.append(f"{self.name}: output {result.text!r} != expected {self.output!r}")
        if self.errors is not None and result.errors != self.errors:
            problems.append(f"{self.name}: errors {result.errors!r} != expected {self.errors!r}")
        if result.hit_step_limit != self.expect_step_limit:
            problems.append(f"{self.name}: hit_step_limit={result.hit_step_limit}, expected {self.expect_step_limit}")
        return problems


def _coerce_case(obj: Dict[str, Any]) -> ProgramCase:
    if not isinstance(obj, dict):
        raise ValueError("each case must be a mapping")
    name = obj.get("name")
    if not name:
        raise ValueError("Each case must have 'name'")
    if "code" not in obj or not isinstance(obj["code"], str):
        raise ValueError(f"Case '{name}' must have 'code' as a string")
    errors = obj.get("errors")
    if errors is not None and not isinstance(errors, list):
        raise ValueError(f"Case '{name}': 'errors' must be a list of lines")
    input_data = obj.get("input", "")
    if input_data is None:
        input_data = ""
    if not isinstance(input_data, str):
        raise ValueError(f"Case '{name}': 'input' must be a string")
    output = obj.get("output")
    if output is not None and not isinstance(output, str):
        raise ValueError(f"Case '{name}': 'output' must be a string")
    step_limit = obj.get("step_limit", DEFAULT_STEP_LIMIT)
    if step_limit is not None and (isinstance(step_limit, bool) or not isinstance(step_limit, int)):
        raise ValueError(f"Case '{name}': 'step_limit' must be an integer")
    return ProgramCase(
        name=name,
        code=obj["code"],
        input=input_data,
        output=output,
        errors=errors,
        step_limit=step_limit,
        expect_step_limit=bool(obj.get("expect_step_limit", False)),
    )


def load_program_cases(path: str = DEFAULT_SUITE) -> List[ProgramCase]:
    """Load program cases from a YAML file.
    Supported formats:
      1) { cases: [ { name, code, input?, output?, errors?, step_limit? }, ... ] }
      2) A bare list of such objects
    """
    with open(path, "r") as f:
        data: Any = yaml.safe_load(f)

    if isinstance(data, dict) and isinstance(data.get("cases"), list):
        items = data["cases"]
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError("Unsupported suite structure; expected 'cases' list or a list")

    return [_coerce_case(obj) for obj in items]
