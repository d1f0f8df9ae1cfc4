"""Run execution domain exports."""

from .derivation_run_use_case import RunExecutionError, execute_schema_derivation_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_schema_derivation_run",
]
