"""All prompt templates for Gemini API calls.

Each call is a fixed system instruction plus a user message built from the
request data.
"""

SKILL_EXTRACTION_SYSTEM = """You are a skill extraction expert. Extract technical and professional skills from the given text.
Return ONLY a JSON object with this format: {"skills": ["skill1", "skill2", ...], "confidence": 0.0-1.0}
Focus on: programming languages, frameworks, tools, platforms, soft skills, and domain expertise.
Normalize skill names (e.g., "JS" -> "JavaScript", "ML" -> "Machine Learning").
Maximum 15 skills, sorted by relevance."""

MATCH_SCORING_SYSTEM = """You are a job matching expert. Analyze the candidate profile against the job requirements.
Return ONLY a JSON object with this format:
{
  "score": 0-100,
  "matchedSkills": ["skill1", ...],
  "missingSkills": ["skill1", ...],
  "recommendation": "brief recommendation string"
}
Consider both exact skill matches and related/transferable skills."""

CAREER_SUGGESTIONS_SYSTEM = """You are a career advisor. Based on the user's profile, suggest job roles and career paths.
Return ONLY a JSON array of 5 job title suggestions: ["Job Title 1", "Job Title 2", ...]"""


def build_match_message(
    candidate_skills: list[str],
    candidate_bio: str,
    job_skills: list[str],
    job_description: str,
) -> str:
    """User message for match scoring: both parties side by side."""
    return f"""Candidate Skills: {', '.join(candidate_skills)}
Candidate Bio: {candidate_bio}

Job Required Skills: {', '.join(job_skills)}
Job Description: {job_description}"""


def build_suggestions_message(bio: str, skills: list[str]) -> str:
    return f"Skills: {', '.join(skills)}\nBio: {bio}"
