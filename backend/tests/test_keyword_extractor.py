from services.keyword_extractor import (
    COMMON_SKILLS,
    MAX_SKILLS,
    extract_skills_keyword,
    matches_term,
)


def test_extract_skills_keyword():
    text = "We need a Python developer with experience in React and Docker."
    result = extract_skills_keyword(text)
    assert result.skills == ["Python", "React", "Docker"]
    assert result.confidence == 0.7


def test_extract_skills_keyword_empty():
    result = extract_skills_keyword("I enjoy hiking and cooking.")
    assert result.skills == []
    assert result.confidence == 0.3


def test_extract_skills_keyword_case_insensitive_and_display_case():
    result = extract_skills_keyword("postgresql, KUBERNETES and graphql daily")
    assert result.skills == ["PostgreSQL", "GraphQL", "Kubernetes"]


def test_cap_returns_first_fifteen_in_vocabulary_order():
    text = " ".join(COMMON_SKILLS)
    result = extract_skills_keyword(text)
    assert len(result.skills) == MAX_SKILLS
    assert result.skills == list(COMMON_SKILLS[:MAX_SKILLS])


def test_vocabulary_order_not_text_order():
    result = extract_skills_keyword("Kotlin, then Rust, then JavaScript")
    assert result.skills == ["JavaScript", "Rust", "Kotlin"]


# --- Spelling variants ---

def test_dotted_term_variants():
    assert matches_term("Built APIs with Node.js", "Node.js")
    assert matches_term("Built APIs with nodejs", "Node.js")
    assert matches_term("Built APIs with node js", "Node.js")


def test_compact_multiword_variant():
    assert matches_term("machinelearning enthusiast", "Machine Learning")
    assert matches_term("Machine Learning enthusiast", "Machine Learning")


def test_symbol_terms():
    assert matches_term("Proficient in C++ and C#", "C++")
    assert matches_term("Proficient in C++ and C#", "C#")
    assert matches_term("Set up CI/CD pipelines", "CI/CD")


# --- Whole-word matching ---

def test_java_not_in_javascript():
    result = extract_skills_keyword("Proficient in JavaScript and TypeScript")
    assert "JavaScript" in result.skills
    assert "Java" not in result.skills


def test_substring_false_positives():
    result = extract_skills_keyword("An excellent engineer who loves django and github")
    assert "Excel" not in result.skills
    assert "Go" not in result.skills
    assert "Git" not in result.skills
    assert "Django" in result.skills


def test_no_duplicates_for_overlapping_variants():
    result = extract_skills_keyword("Node.js, nodejs and node js")
    assert result.skills == ["Node.js"]


def test_re_extraction_does_not_add_new_skills():
    text = (
        "Full-stack engineer: React, Node.js, TypeScript, MongoDB, AWS, Docker, "
        "Kubernetes, GraphQL, Tailwind CSS, React Native, Machine Learning, "
        "PostgreSQL, Redis, Agile, Leadership, Figma, Solidity and Web3."
    )
    first = extract_skills_keyword(text)
    second = extract_skills_keyword(" ".join(first.skills))
    third = extract_skills_keyword(" ".join(second.skills))
    assert set(second.skills) <= set(first.skills)
    assert set(third.skills) <= set(first.skills)
