# SPDX-License-Identifier: AGPL-3.0-only

"""
Pydantic models for the generation pipeline.

Requests and prompts are plain value objects; the result models double as the
shape validators for parsed model output. Attribute names are snake_case, the
wire format is camelCase (aliases), and unknown keys are dropped.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field


class TaskKind(str, Enum):
    """Generation tasks exposed by the API."""
    SUMMARY = "summary"
    QUIZ = "quiz"
    APPLICATIONS = "applications"


class SkillLevel(str, Enum):
    """Audience tier used to condition prompt wording."""
    HIGH_SCHOOL = "highschool"
    UNDERGRADUATE = "undergraduate"
    GRADUATE = "graduate"


class GenerationRequest(BaseModel):
    """One request to the generation pipeline."""
    task_kind: TaskKind
    source_text: str = Field("", description="Paper text to work from")
    credential: str = Field("", description="Bearer token for the completion endpoint")
    skill_level: SkillLevel = Field(SkillLevel.UNDERGRADUATE, description="Audience tier")

    class Config:
        frozen = True

    def __repr__(self) -> str:
        # Keep the credential out of logs and tracebacks.
        return (
            f"GenerationRequest(task_kind={self.task_kind.value!r}, "
            f"source_text=<{len(self.source_text)} chars>, "
            f"skill_level={self.skill_level.value!r})"
        )

    __str__ = __repr__


class PromptSpec(BaseModel):
    """System instructions plus user content for one completion call."""
    system_instructions: str
    user_content: str

    class Config:
        frozen = True


class _WireModel(BaseModel):
    """Base for result models: camelCase on the wire, snake_case in Python."""

    class Config:
        populate_by_name = True
        extra = "ignore"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict with wire field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Figure(_WireModel):
    id: int
    title: str
    description: str
    url: str


class DeepDive(_WireModel):
    methodology: str
    results: str
    implications: str
    technical_details: str = Field(alias="technicalDetails")
    context: str


class SummaryResult(_WireModel):
    """Simplified summary and deep-dive analysis of a paper."""
    title: str
    authors: str
    abstract: str
    simplified_summary: str = Field(alias="simplifiedSummary")
    key_points: List[str] = Field(alias="keyPoints")
    figures: List[Figure]
    deep_dive: DeepDive = Field(alias="deepDive")


class QuizQuestion(_WireModel):
    id: int
    type: Literal["multiple-choice", "text"]
    question: str
    options: Optional[List[str]] = None
    correct_answer: Optional[int] = Field(None, alias="correctAnswer")
    correct_keywords: Optional[List[str]] = Field(None, alias="correctKeywords")
    explanation: str = ""


class QuizResult(_WireModel):
    """Quiz questions for a paper."""
    questions: List[QuizQuestion]


class Applications(_WireModel):
    project_ideas: List[str] = Field(alias="projectIdeas")
    industry_applications: List[str] = Field(alias="industryApplications")
    research_directions: List[str] = Field(alias="researchDirections")
    blog_topics: List[str] = Field(alias="blogTopics")


class ApplicationsResult(_WireModel):
    """Real-world applications of a paper, grouped by category."""
    applications: Applications


NormalizedResult = Union[SummaryResult, QuizResult, ApplicationsResult]
