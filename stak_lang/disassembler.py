from typing import List

from .statements import Literal, Pipeline, Statement


def _kind(step: Statement) -> str:
    if isinstance(step, Literal):
        return "LIT"
    if isinstance(step, Pipeline):
        return "SEQ"
    return "OP"


def disassemble(statement: Statement) -> List[str]:
    """One line per step: index, kind, text, own effect, and the running derived arity."""
    lines = [
        f"Program: arguments={statement.arguments}, results={statement.results}, "
        f"pure={'yes' if statement.is_pure() else 'no'}"
    ]
    running = Pipeline()
    for pc, step in enumerate(statement.steps()):
        running.append(step)
        effect = f"({step.arguments} -> {step.results})"
        total = f"[{running.arguments} -> {running.results}]"
        impure = "" if step.is_pure() else "  impure"
        lines.append(f"  {pc:04x}: {_kind(step):<3} {str(step):<8} {effect:<10} {total}{impure}")
    return lines
