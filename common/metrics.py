# SPDX-License-Identifier: AGPL-3.0-only

"""
Per-invocation metrics for the generation pipeline.
"""
import time
from typing import Any, Dict, Optional
from datetime import datetime


class PipelineMetrics:
    """Track which pipeline stages ran and how long they took."""

    def __init__(self, task: str):
        self.task = task
        self.start_time = time.time()
        self.end_time = None
        self.stages: Dict[str, float] = {}
        self.llm_calls = 0
        self.fallback_used = False
        self.failure: Optional[str] = None

    def mark_stage(self, stage_name: str):
        """Mark completion of a stage."""
        self.stages[stage_name] = time.time()

    def add_llm_call(self):
        """Record an upstream call."""
        self.llm_calls += 1

    def record_fallback(self, failure: Exception):
        """Record that the fallback value was substituted and why."""
        self.fallback_used = True
        self.failure = type(failure).__name__

    def finish(self):
        """Mark the run as finished."""
        self.end_time = time.time()

    def duration(self) -> float:
        """Get total duration in seconds."""
        if self.end_time:
            return self.end_time - self.start_time
        return time.time() - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dict."""
        return {
            "task": self.task,
            "duration_seconds": self.duration(),
            "llm_calls": self.llm_calls,
            "fallback_used": self.fallback_used,
            "failure": self.failure,
            "stages": {k: v - self.start_time for k, v in self.stages.items()},
            "start_time": datetime.fromtimestamp(self.start_time).isoformat(),
            "end_time": datetime.fromtimestamp(self.end_time).isoformat() if self.end_time else None
        }
