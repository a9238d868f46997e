"""Plain-text rendering of verdicts."""

from __future__ import annotations

from typing import List

from .core.verdict import DentitionVerdict, Verdict


def format_verdict(verdict: Verdict) -> str:
    """Label line followed by the class description."""
    return f"{verdict.label}\n{verdict.description}"


def format_report(dentition: DentitionVerdict) -> str:
    """One section per classified arch; empty when neither arch has a verdict."""
    sections: List[str] = []
    for arch_name, verdict in dentition.items():
        if verdict is None:
            continue
        sections.append(f"{arch_name.value.capitalize()}:\n{format_verdict(verdict)}")
    return "\n\n".join(sections)
