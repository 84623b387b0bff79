# SPDX-License-Identifier: AGPL-3.0-only

"""
Skill-level prompt packs for the generation tasks.
"""
from typing import Dict

from .models import PromptSpec, SkillLevel, TaskKind


# Human-readable tier names interpolated into the prompts
SKILL_LABELS: Dict[SkillLevel, str] = {
    SkillLevel.HIGH_SCHOOL: "high school",
    SkillLevel.UNDERGRADUATE: "undergraduate",
    SkillLevel.GRADUATE: "graduate",
}

# Per-task role statement and tier guidance
TASK_PROMPTS = {
    TaskKind.SUMMARY: {
        "role": (
            "You are an expert research paper analyzer. Your task is to explain complex "
            "research concepts at a {level} level."
        ),
        "guidance": {
            SkillLevel.HIGH_SCHOOL: "Use simple language, avoid jargon, explain basic concepts, and provide real-world analogies.",
            SkillLevel.UNDERGRADUATE: "Use moderate technical language, explain intermediate concepts, and provide context for advanced topics.",
            SkillLevel.GRADUATE: "Use technical language, assume familiarity with advanced concepts, and focus on nuanced analysis.",
        },
    },
    TaskKind.QUIZ: {
        "role": "You are an expert educator creating quiz questions for a research paper at a {level} level.",
        "guidance": {
            SkillLevel.HIGH_SCHOOL: "Create questions that test basic understanding, use simple language, and focus on fundamental concepts.",
            SkillLevel.UNDERGRADUATE: "Create questions that test intermediate understanding, use moderate technical language, and focus on key concepts and applications.",
            SkillLevel.GRADUATE: "Create questions that test advanced understanding, use technical language, and focus on nuanced analysis and critical thinking.",
        },
    },
    TaskKind.APPLICATIONS: {
        "role": (
            "You are an expert in research applications and technology transfer. Based on the research "
            "paper content, generate practical applications appropriate for {level} level students."
        ),
        "guidance": {
            SkillLevel.HIGH_SCHOOL: "Focus on simple, hands-on projects, basic industry applications, and introductory research concepts.",
            SkillLevel.UNDERGRADUATE: "Focus on moderate complexity projects, practical industry applications, and intermediate research opportunities.",
            SkillLevel.GRADUATE: "Focus on advanced projects, cutting-edge industry applications, and sophisticated research directions.",
        },
    },
}

SUMMARY_TASK = """Extract and structure the following information from the provided research paper text:

1. Title: Extract the paper title
2. Authors: Extract author names
3. Abstract: Extract or summarize the abstract
4. Simplified Summary: Create a clear summary appropriate for {level} level (2-3 sentences)
5. Key Points: Extract 4-6 main points from the paper, explained at {level} level
6. Visual Elements: Suggest 2-3 relevant figures/diagrams that would help explain the concepts
7. Deep Dive Analysis: Provide detailed analysis in these categories, tailored for {level} level:
   - Methodology: Detailed explanation of the research methods used
   - Results: Key findings and experimental outcomes
   - Implications: Practical and theoretical implications of the research
   - Technical Details: Important technical aspects and innovations
   - Context: How this research fits into the broader field

Format your response as JSON with the following structure:
{{
  "title": "Paper Title",
  "authors": "Author Names",
  "abstract": "Abstract text",
  "simplifiedSummary": "Simple explanation",
  "keyPoints": ["Point 1", "Point 2", "Point 3", "Point 4"],
  "figures": [
    {{
      "id": 1,
      "title": "Figure Title",
      "description": "Description of what this figure shows",
      "url": "https://via.placeholder.com/400x300/3B82F6/FFFFFF?text=Figure+1"
    }}
  ],
  "deepDive": {{
    "methodology": "Detailed explanation of the research methodology...",
    "results": "Key findings and experimental results...",
    "implications": "Practical and theoretical implications...",
    "technicalDetails": "Important technical aspects and innovations...",
    "context": "How this research fits into the broader field..."
  }}
}}"""

QUIZ_TASK = """Generate 5 diverse questions based on the paper content:

1. 3 multiple-choice questions testing key concepts
2. 2 text-based questions requiring explanation

For multiple-choice questions, provide 4 options with one correct answer.
For text questions, provide keywords that indicate a correct answer.

Format your response as JSON:
{{
  "questions": [
    {{
      "id": 1,
      "type": "multiple-choice",
      "question": "Question text?",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 1,
      "explanation": "Why this answer is correct"
    }},
    {{
      "id": 2,
      "type": "text",
      "question": "Explain the main concept...",
      "correctKeywords": ["keyword1", "keyword2", "keyword3"],
      "explanation": "Expected answer explanation"
    }}
  ]
}}"""

APPLICATIONS_TASK = """Generate practical applications in the following categories:

1. Project Ideas: 3-4 hands-on projects students can build
2. Industry Applications: 3-4 real-world industry use cases
3. Research Directions: 3-4 future research opportunities
4. Blog Topics: 3-4 engaging blog post ideas

Format your response as JSON:
{{
  "applications": {{
    "projectIdeas": [
      "Project idea 1",
      "Project idea 2",
      "Project idea 3"
    ],
    "industryApplications": [
      "Industry application 1",
      "Industry application 2",
      "Industry application 3"
    ],
    "researchDirections": [
      "Research direction 1",
      "Research direction 2",
      "Research direction 3"
    ],
    "blogTopics": [
      "Blog topic 1",
      "Blog topic 2",
      "Blog topic 3"
    ]
  }}
}}"""

TASK_BODIES = {
    TaskKind.SUMMARY: SUMMARY_TASK,
    TaskKind.QUIZ: QUIZ_TASK,
    TaskKind.APPLICATIONS: APPLICATIONS_TASK,
}

TIER_NAMES = {
    SkillLevel.HIGH_SCHOOL: "For high school students",
    SkillLevel.UNDERGRADUATE: "For undergraduate students",
    SkillLevel.GRADUATE: "For graduate students",
}


def build_system_instructions(task_kind: TaskKind, skill_level: SkillLevel) -> str:
    """
    Build the system message for a task.

    All three tier guidance lines are listed so the model sees the contrast;
    the requested level is named in the role statement and the task body.
    """
    pack = TASK_PROMPTS[task_kind]
    level = SKILL_LABELS[skill_level]

    guidance = "\n".join(
        f"{TIER_NAMES[tier]}: {pack['guidance'][tier]}"
        for tier in (SkillLevel.HIGH_SCHOOL, SkillLevel.UNDERGRADUATE, SkillLevel.GRADUATE)
    )

    return (
        f"{pack['role'].format(level=level)}\n\n"
        f"{guidance}\n\n"
        f"Audience for this request: {TIER_NAMES[skill_level].replace('For ', '')}. "
        f"{pack['guidance'][skill_level]}\n\n"
        f"{TASK_BODIES[task_kind].format(level=level)}"
    )


def build_prompt(task_kind: TaskKind, skill_level: SkillLevel, source_text: str) -> PromptSpec:
    """Build the prompt for one request. Same inputs always give the same prompt."""
    return PromptSpec(
        system_instructions=build_system_instructions(task_kind, skill_level),
        user_content=source_text,
    )
