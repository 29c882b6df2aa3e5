"""Template-based interview question generation.

Picks technical questions keyed by skill keyword, two behavioral questions,
a skill-gap situational question and a fixed closer, then trims to six.
Random picks go through an injectable ``random.Random`` so a seeded
generator gives reproducible sets.
"""

import logging
import random
from typing import NamedTuple

from models.schemas import InterviewQuestion

logger = logging.getLogger(__name__)

MAX_QUESTIONS = 6
TECHNICAL_SKILLS_CONSIDERED = 3
MIN_TECHNICAL_QUESTIONS = 2
DESCRIPTION_WORDS = 5


class Template(NamedTuple):
    question: str
    tip: str


# Keyword -> variants. Scanned in insertion order for each job skill.
TECHNICAL_TEMPLATES: dict[str, tuple[Template, ...]] = {
    "react": (
        Template("Walk me through how you'd optimize a slow React component.",
                 "Mention useMemo, React.memo, code splitting"),
        Template("How do you manage complex state in React applications?",
                 "Discuss Context, Redux, or Zustand patterns"),
    ),
    "node.js": (
        Template("How would you design a scalable API that handles 10k requests/sec?",
                 "Talk about caching, load balancing, async patterns"),
        Template("Explain how you'd handle errors in a Node.js application.",
                 "Mention error middleware, try-catch, logging"),
    ),
    "typescript": (
        Template("When would you use generics vs union types?",
                 "Show understanding of type safety trade-offs"),
        Template("How do you handle third-party libraries without type definitions?",
                 "Mention declaration files, @types packages"),
    ),
    "python": (
        Template("How would you optimize a slow Python data pipeline?",
                 "Discuss generators, multiprocessing, vectorization"),
        Template("Explain the GIL and when it matters.",
                 "Show you understand threading limitations"),
    ),
    "mongodb": (
        Template("How do you design schemas for a many-to-many relationship?",
                 "Discuss embedding vs referencing trade-offs"),
        Template("What indexing strategies would you use for a search-heavy app?",
                 "Mention compound indexes, text search"),
    ),
    "aws": (
        Template("Design a serverless architecture for a file processing system.",
                 "Use Lambda, S3, SQS patterns"),
        Template("How would you reduce costs on AWS by 30%?",
                 "Mention right-sizing, reserved instances, spot"),
    ),
    "blockchain": (
        Template("Explain the trade-offs between L1 and L2 solutions.",
                 "Show understanding of scaling challenges"),
        Template("How would you design a gas-efficient smart contract?",
                 "Discuss storage optimization, batch operations"),
    ),
    "machine learning": (
        Template("How do you handle class imbalance in a classification problem?",
                 "Mention oversampling, SMOTE, class weights"),
        Template("Walk me through your model deployment pipeline.",
                 "Discuss versioning, monitoring, A/B testing"),
    ),
}

BEHAVIORAL_TEMPLATES: tuple[Template, ...] = (
    Template("Tell me about a project that failed. What did you learn?",
             "Be honest, focus on growth and lessons"),
    Template("Describe a time you disagreed with a technical decision.",
             "Show collaboration over being 'right'"),
    Template("How do you prioritize when everything is urgent?",
             "Demonstrate a framework for decision-making"),
    Template("Tell me about code you wrote that you're proud of.",
             "Pick something with impact, explain trade-offs"),
)

SITUATIONAL_TEMPLATES: tuple[Template, ...] = (
    Template("How would you approach learning a new technology for this role?",
             "Show your learning process, resources"),
    Template("What would you do in your first 30 days here?",
             "Balance learning, contributing, relationship-building"),
    Template("How would you handle a teammate who's not pulling their weight?",
             "Start with empathy, then escalation path"),
)

GENERIC_TECHNICAL_TIP = "Break down the problem, discuss architecture, mention trade-offs"
SKILL_GAP_TIP = "Show a concrete learning plan with timeline"

CLOSING_QUESTION = Template(
    "What would you build for us in your first 90 days that isn't in the job description?",
    "Show initiative and product thinking. They want to see you go beyond the listing",
)


def find_missing_skills(job_skills: list[str], candidate_skills: list[str]) -> list[str]:
    """Job skills not contained (case-insensitive substring) in any candidate skill."""
    candidate_lower = [s.lower() for s in candidate_skills]
    return [
        skill for skill in job_skills
        if not any(skill.lower() in c for c in candidate_lower)
    ]


def _technical_questions(job_skills: list[str], rng: random.Random) -> list[InterviewQuestion]:
    questions: list[InterviewQuestion] = []
    used_keywords: set[str] = set()

    for skill in job_skills[:TECHNICAL_SKILLS_CONSIDERED]:
        skill_lower = skill.lower()
        for keyword, templates in TECHNICAL_TEMPLATES.items():
            if keyword in skill_lower and keyword not in used_keywords:
                template = rng.choice(templates)
                questions.append(InterviewQuestion(
                    question=template.question, type="technical", tip=template.tip,
                ))
                used_keywords.add(keyword)
                break

    return questions


def generate_questions(
    job_skills: list[str],
    job_description: str,
    candidate_skills: list[str],
    rng: random.Random | None = None,
) -> list[InterviewQuestion]:
    """Build up to six interview questions for a candidate/job pair."""
    rng = rng or random.Random()

    questions = _technical_questions(job_skills, rng)

    if len(questions) < MIN_TECHNICAL_QUESTIONS:
        opening = " ".join(job_description.split(" ")[:DESCRIPTION_WORDS])
        questions.append(InterviewQuestion(
            question=f"How would you approach building {opening}...?",
            type="technical",
            tip=GENERIC_TECHNICAL_TIP,
        ))

    for _ in range(2):
        template = rng.choice(BEHAVIORAL_TEMPLATES)
        questions.append(InterviewQuestion(
            question=template.question, type="behavioral", tip=template.tip,
        ))

    missing = find_missing_skills(job_skills, candidate_skills)
    if missing:
        questions.append(InterviewQuestion(
            question=(
                f"This role requires {' and '.join(missing[:2])}. "
                "How would you get up to speed?"
            ),
            type="situational",
            tip=SKILL_GAP_TIP,
        ))
    else:
        template = SITUATIONAL_TEMPLATES[0]
        questions.append(InterviewQuestion(
            question=template.question, type="situational", tip=template.tip,
        ))

    questions.append(InterviewQuestion(
        question=CLOSING_QUESTION.question, type="situational", tip=CLOSING_QUESTION.tip,
    ))

    # TODO: three technical hits yield seven candidates and the closer is the
    # one trimmed; decide with product whether it should survive instead.
    if len(questions) > MAX_QUESTIONS:
        logger.debug("Trimming %d interview questions to %d", len(questions), MAX_QUESTIONS)
    return questions[:MAX_QUESTIONS]
