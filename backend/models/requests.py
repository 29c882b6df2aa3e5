from pydantic import Field, field_validator

from models.schemas.base import CamelModel

MAX_CANDIDATE_SKILLS = 20
MAX_JOB_SKILLS = 15
MAX_SKILL_LENGTH = 50
MAX_RECOMMENDATION_JOBS = 50


def _check_skill_lengths(skills: list[str]) -> list[str]:
    cleaned = [s.strip() for s in skills if s.strip()]
    for skill in cleaned:
        if len(skill) > MAX_SKILL_LENGTH:
            raise ValueError(f"Skill too long (max {MAX_SKILL_LENGTH} chars): {skill[:20]}...")
    return cleaned


class CandidateProfile(CamelModel):
    skills: list[str] = Field(default=[], max_length=MAX_CANDIDATE_SKILLS)
    bio: str = Field(default="", max_length=2000)

    @field_validator("skills")
    @classmethod
    def check_skills(cls, skills: list[str]) -> list[str]:
        return _check_skill_lengths(skills)


class JobPosting(CamelModel):
    id: str = ""
    title: str = Field(default="", max_length=200)
    required_skills: list[str] = Field(default=[], max_length=MAX_JOB_SKILLS)
    description: str = Field(default="", max_length=10000)

    @field_validator("required_skills")
    @classmethod
    def check_skills(cls, skills: list[str]) -> list[str]:
        return _check_skill_lengths(skills)


class ExtractSkillsRequest(CamelModel):
    text: str = Field(..., max_length=5000, description="Bio, resume or job description text")


class MatchScoreRequest(CamelModel):
    candidate: CandidateProfile
    job: JobPosting


class RecommendJobsRequest(CamelModel):
    candidate: CandidateProfile
    jobs: list[JobPosting] = Field(..., max_length=MAX_RECOMMENDATION_JOBS)


class InterviewPrepRequest(CamelModel):
    candidate: CandidateProfile
    job: JobPosting


class CareerSuggestionsRequest(CamelModel):
    candidate: CandidateProfile
