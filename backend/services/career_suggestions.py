"""Career role suggestions from a candidate profile."""

import logging

from config import settings
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5

# Skill substring -> roles, checked in this order
ROLE_MAP: dict[str, tuple[str, ...]] = {
    "react": ("Frontend Developer", "React Developer", "Full Stack Developer"),
    "node.js": ("Backend Developer", "Node.js Developer", "Full Stack Developer"),
    "python": ("Python Developer", "Data Scientist", "ML Engineer"),
    "machine learning": ("ML Engineer", "Data Scientist", "AI Researcher"),
    "solidity": ("Blockchain Developer", "Smart Contract Engineer", "Web3 Developer"),
    "aws": ("Cloud Engineer", "DevOps Engineer", "Solutions Architect"),
}


def suggest_roles_basic(skills: list[str]) -> list[str]:
    """Roles implied by known skill keywords, first-seen order, at most five."""
    roles: dict[str, None] = {}
    for skill in skills:
        skill_lower = skill.lower()
        for keyword, mapped in ROLE_MAP.items():
            if keyword in skill_lower:
                roles.update(dict.fromkeys(mapped))
    return list(roles)[:MAX_SUGGESTIONS]


async def suggest_roles(bio: str, skills: list[str]) -> list[str]:
    data = await gemini_client.generate_json(
        prompt_builder.CAREER_SUGGESTIONS_SYSTEM,
        prompt_builder.build_suggestions_message(bio, skills),
        shape="array",
        temperature=settings.suggestion_temperature,
        max_output_tokens=settings.suggestion_max_output_tokens,
    )
    if data is None:
        return suggest_roles_basic(skills)

    return [str(title) for title in data]
