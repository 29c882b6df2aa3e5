"""Vocabulary-based skill extraction.

The deterministic path behind the Gemini extractor: scans free text for a
fixed list of skill terms and never fails.
"""

import logging
import re
from functools import lru_cache

from models.schemas import ExtractionResult

logger = logging.getLogger(__name__)

MAX_SKILLS = 15
CONFIDENCE_FOUND = 0.7
CONFIDENCE_EMPTY = 0.3

# Order matters: results are reported (and capped) in this order.
COMMON_SKILLS: tuple[str, ...] = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Go", "Rust", "Ruby", "PHP",
    # Frameworks
    "React", "Vue.js", "Angular", "Next.js", "Node.js", "Express.js", "Django", "Flask", "FastAPI",
    # Data stores & APIs
    "MongoDB", "PostgreSQL", "MySQL", "Redis", "GraphQL", "REST API",
    # Cloud & DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "CI/CD", "Git",
    # AI/ML
    "Machine Learning", "Deep Learning", "NLP", "Computer Vision", "TensorFlow", "PyTorch",
    # Web3
    "Solidity", "Web3", "Blockchain", "Smart Contracts", "Ethereum", "Solana",
    # Frontend & design
    "HTML", "CSS", "Tailwind CSS", "SASS", "UI/UX Design", "Figma",
    # Process & soft skills
    "Agile", "Scrum", "Project Management", "Leadership", "Communication",
    # Analytics
    "Data Analysis", "SQL", "Tableau", "Power BI", "Excel",
    # Mobile
    "Mobile Development", "React Native", "Flutter", "Swift", "Kotlin",
)

# Letters/digits on either side mean we are inside a longer word
# ("java" in "javascript", "go" in "django").
_BOUNDARY_BEFORE = r"(?<![a-z0-9])"
_BOUNDARY_AFTER = r"(?![a-z0-9])"


def _term_variants(term: str) -> list[str]:
    """Regex bodies for the three spellings we accept for a vocabulary term.

    1. the literal term ("node.js")
    2. each dot may be a dot, a space, or nothing ("node js", "nodejs")
    3. whitespace removed ("machinelearning")
    """
    lower = term.lower()
    literal = re.escape(lower)
    dotted = r"[.\s]?".join(re.escape(part) for part in lower.split("."))
    compact = re.escape(re.sub(r"\s+", "", lower))
    return [literal, dotted, compact]


@lru_cache(maxsize=None)
def _term_patterns(term: str) -> tuple[re.Pattern, ...]:
    return tuple(
        re.compile(f"{_BOUNDARY_BEFORE}{body}{_BOUNDARY_AFTER}", re.IGNORECASE)
        for body in dict.fromkeys(_term_variants(term))
    )


def matches_term(text: str, term: str) -> bool:
    """True if ``term`` occurs in ``text`` as a whole word, in any accepted spelling."""
    return any(p.search(text) for p in _term_patterns(term))


def extract_skills_keyword(text: str) -> ExtractionResult:
    """Extract vocabulary skills from text. Always returns a result, possibly empty."""
    found = [skill for skill in COMMON_SKILLS if matches_term(text, skill)]
    skills = list(dict.fromkeys(found))[:MAX_SKILLS]

    logger.debug("Keyword extraction found %d skills", len(found))
    return ExtractionResult(
        skills=skills,
        confidence=CONFIDENCE_FOUND if skills else CONFIDENCE_EMPTY,
    )
