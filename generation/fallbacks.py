# SPDX-License-Identifier: AGPL-3.0-only

"""
Static placeholder results returned when generation fails.
"""
import copy
from typing import Any, Dict

from .models import TaskKind


SUMMARY_FALLBACK: Dict[str, Any] = {
    "title": "Research Paper",
    "authors": "Authors",
    "abstract": "Abstract extracted from the paper.",
    "simplifiedSummary": "This paper presents important findings in the field.",
    "keyPoints": [
        "Key finding 1",
        "Key finding 2",
        "Key finding 3",
        "Key finding 4"
    ],
    "figures": [
        {
            "id": 1,
            "title": "Main Concept",
            "description": "Visual representation of the main concept",
            "url": "https://via.placeholder.com/400x300/3B82F6/FFFFFF?text=Main+Concept"
        }
    ],
    "deepDive": {
        "methodology": "The research employs systematic analysis and experimental validation to establish its findings.",
        "results": "The study demonstrates significant improvements in the target domain with supporting evidence.",
        "implications": "These findings have important implications for future research and practical applications.",
        "technicalDetails": "The research introduces innovative approaches and technical solutions to address the problem domain.",
        "context": "This work builds upon existing literature and addresses important gaps in current understanding."
    }
}

QUIZ_FALLBACK: Dict[str, Any] = {
    "questions": [
        {
            "id": 1,
            "type": "multiple-choice",
            "question": "What is the main contribution of this research?",
            "options": [
                "Improved methodology",
                "New theoretical framework",
                "Better experimental design",
                "All of the above"
            ],
            "correctAnswer": 3,
            "explanation": "The research contributes across multiple dimensions."
        },
        {
            "id": 2,
            "type": "text",
            "question": "Explain the key methodology used in this research.",
            "correctKeywords": ["method", "approach", "technique", "process"],
            "explanation": "The methodology involves systematic data collection and analysis."
        }
    ]
}

APPLICATIONS_FALLBACK: Dict[str, Any] = {
    "applications": {
        "projectIdeas": [
            "Build a proof-of-concept implementation",
            "Create a visualization tool for the concepts",
            "Develop a comparison framework"
        ],
        "industryApplications": [
            "Apply to real-world problem domain",
            "Integrate with existing systems",
            "Scale for production use"
        ],
        "researchDirections": [
            "Extend the methodology",
            "Apply to different domains",
            "Improve efficiency and performance"
        ],
        "blogTopics": [
            "Understanding the key concepts",
            "Practical implementation guide",
            "Future implications and trends"
        ]
    }
}

FALLBACKS = {
    TaskKind.SUMMARY: SUMMARY_FALLBACK,
    TaskKind.QUIZ: QUIZ_FALLBACK,
    TaskKind.APPLICATIONS: APPLICATIONS_FALLBACK,
}


def get_fallback(task_kind: TaskKind) -> Dict[str, Any]:
    """Fresh copy of the placeholder result for a task."""
    return copy.deepcopy(FALLBACKS[task_kind])
