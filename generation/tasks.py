# SPDX-License-Identifier: AGPL-3.0-only

"""
Task descriptors: everything that differs between the generation tasks.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Type

from pydantic import BaseModel

from .fallbacks import get_fallback
from .models import ApplicationsResult, QuizResult, SummaryResult, TaskKind


@dataclass(frozen=True)
class TaskDescriptor:
    """Result shape, fallback and failure policy for one task kind."""
    kind: TaskKind
    result_model: Type[BaseModel]
    fallback_factory: Callable[[], Dict[str, Any]]
    fallback_on_upstream_error: bool = True
    error_message: str = "Failed to generate content"

    def fallback(self) -> Dict[str, Any]:
        return self.fallback_factory()


TASKS: Dict[TaskKind, TaskDescriptor] = {
    TaskKind.SUMMARY: TaskDescriptor(
        kind=TaskKind.SUMMARY,
        result_model=SummaryResult,
        fallback_factory=lambda: get_fallback(TaskKind.SUMMARY),
        error_message="Failed to generate content",
    ),
    TaskKind.QUIZ: TaskDescriptor(
        kind=TaskKind.QUIZ,
        result_model=QuizResult,
        fallback_factory=lambda: get_fallback(TaskKind.QUIZ),
        error_message="Failed to generate quiz",
    ),
    TaskKind.APPLICATIONS: TaskDescriptor(
        kind=TaskKind.APPLICATIONS,
        result_model=ApplicationsResult,
        fallback_factory=lambda: get_fallback(TaskKind.APPLICATIONS),
        error_message="Failed to generate applications",
    ),
}


def get_task(kind: TaskKind) -> TaskDescriptor:
    """Look up the descriptor for a task kind."""
    return TASKS[TaskKind(kind)]
