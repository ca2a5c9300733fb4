from __future__ import annotations

from resume_ats.schemas import ResumeSection, SectionAnalysis, SectionType

REQUIRED_ANALYSIS_SECTIONS: tuple[SectionType, ...] = ("summary", "experience", "education", "skills")
OPTIONAL_ANALYSIS_SECTIONS: tuple[SectionType, ...] = ("projects", "certifications")

SECTION_GUIDANCE: dict[SectionType, str] = {
    "summary": "Write 3-5 sentences summarizing your experience, skills, and career goals",
    "experience": "List your work history with company names, titles, dates, and bullet points",
    "education": "Include degrees, institutions, graduation dates, and relevant coursework",
    "skills": "List technical skills, programming languages, tools, and soft skills",
    "projects": "Describe personal or professional projects with technologies used",
    "certifications": "List relevant professional certifications with dates",
    "awards": "Include honors, awards, and recognition",
    "publications": "List published papers, articles, or blog posts",
    "languages": "Include spoken languages with proficiency levels",
    "interests": "List relevant hobbies and interests",
    "references": 'Usually "Available upon request" or list references',
    "unknown": "",
}


def get_section_guidance(section: SectionType) -> str:
    return SECTION_GUIDANCE.get(section, "")


def _evaluate_summary(section: ResumeSection, missing_keywords: list[str]) -> tuple[int, str, list[str]]:
    words = len(section.content.split())
    penalty = 0
    suggestions: list[str] = []
    if words < 30:
        penalty += 20
        feedback = "Summary is too brief."
        suggestions.append("Expand your summary to 3-5 sentences highlighting your key qualifications")
    elif words > 100:
        penalty += 10
        feedback = "Summary is too long."
        suggestions.append("Condense your summary to focus on your most relevant qualifications")
    else:
        feedback = "Summary has good length."

    content = section.content.lower()
    if missing_keywords and not any(keyword.lower() in content for keyword in missing_keywords):
        penalty += 15
        suggestions.append("Include 2-3 key skills from the job description in your summary")
    return penalty, feedback, suggestions


def _evaluate_experience(section: ResumeSection, missing_keywords: list[str]) -> tuple[int, str, list[str]]:
    bullets = len(section.bullets)
    if bullets < 3:
        return 25, "Experience section needs more detail.", ["Add more bullet points describing your accomplishments"]
    if bullets < 6:
        return (
            10,
            "Experience section could use more bullet points.",
            ["Consider adding more detail to your recent positions"],
        )
    return 0, "Experience section has good detail.", []


def _evaluate_education(section: ResumeSection, missing_keywords: list[str]) -> tuple[int, str, list[str]]:
    if len(section.content.split()) < 20:
        return (
            15,
            "Education section needs more detail.",
            ["Include degree, institution, graduation date, and relevant coursework"],
        )
    return 0, "Education section is complete.", []


def _evaluate_skills(section: ResumeSection, missing_keywords: list[str]) -> tuple[int, str, list[str]]:
    penalty = 0
    suggestions: list[str] = []
    if len(section.content.split()) < 10:
        penalty += 20
        feedback = "Skills section is too sparse."
        suggestions.append("List 10-15 relevant technical and soft skills")
    else:
        feedback = "Skills section is present."

    content = section.content.lower()
    absent = [keyword for keyword in missing_keywords if keyword.lower() not in content]
    if len(absent) > 5:
        penalty += 15
        suggestions.append(f"Add missing skills: {', '.join(missing_keywords[:5])}")
    return penalty, feedback, suggestions


def _evaluate_projects(section: ResumeSection, missing_keywords: list[str]) -> tuple[int, str, list[str]]:
    if len(section.bullets) < 2:
        return (
            10,
            "Projects section needs more entries.",
            ["Add 2-4 relevant projects with descriptions of technologies used"],
        )
    return 0, "Projects section is well-populated.", []


_EVALUATORS = {
    "summary": _evaluate_summary,
    "experience": _evaluate_experience,
    "education": _evaluate_education,
    "skills": _evaluate_skills,
    "projects": _evaluate_projects,
}


def evaluate_section(section: ResumeSection, missing_keywords: list[str]) -> SectionAnalysis:
    evaluator = _EVALUATORS.get(section.name)
    if evaluator is None:
        penalty, feedback, suggestions = 0, "Section found.", []
    else:
        penalty, feedback, suggestions = evaluator(section, missing_keywords)
    return SectionAnalysis(
        name=section.name,
        found=True,
        score=max(0, 100 - penalty),
        feedback=feedback,
        suggestions=suggestions,
    )


def analyze_sections(sections: list[ResumeSection], missing_keywords: list[str]) -> list[SectionAnalysis]:
    by_name: dict[str, ResumeSection] = {}
    for section in sections:
        by_name.setdefault(section.name, section)

    analyses: list[SectionAnalysis] = []
    for name in REQUIRED_ANALYSIS_SECTIONS:
        section = by_name.get(name)
        if section is None:
            analyses.append(
                SectionAnalysis(
                    name=name,
                    found=False,
                    score=0,
                    feedback=f"Missing {name} section. This is a critical section for ATS systems.",
                    suggestions=[f"Add a {name} section to your resume", get_section_guidance(name)],
                )
            )
            continue
        analyses.append(evaluate_section(section, missing_keywords))

    # Optional sections are only reviewed when present; absence is never penalized.
    for name in OPTIONAL_ANALYSIS_SECTIONS:
        section = by_name.get(name)
        if section is not None:
            analyses.append(evaluate_section(section, missing_keywords))
    return analyses
