from __future__ import annotations

import re
from dataclasses import dataclass, field

from resume_ats.core.scoring import get_scoring_value
from resume_ats.schemas import (
    BulletAnalysis,
    FormattingIssue,
    ParsedJobDescription,
    ParsedResume,
    Suggestion,
)

REQUIRED_SECTIONS = ("summary", "experience", "education", "skills")
PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

# Coarse grouping for advisory text only; scoring uses the taxonomy.
_TOOL_PREFIX_RE = re.compile(
    r"^(jira|confluence|git|docker|kubernetes|aws|azure|gcp|slack|vs code|visual studio)",
    re.IGNORECASE,
)
_SOFT_SKILL_RE = re.compile(r"communication|leadership|teamwork|problem.?solving|analytical|creative", re.IGNORECASE)


@dataclass
class KeywordGroups:
    hard_skills: list[str] = field(default_factory=list)
    soft_skills: list[str] = field(default_factory=list)
    tools: list[str] = field(default_factory=list)


def categorize_keywords(keywords: list[str]) -> KeywordGroups:
    groups = KeywordGroups()
    for keyword in keywords:
        if _TOOL_PREFIX_RE.search(keyword):
            groups.tools.append(keyword)
        elif _SOFT_SKILL_RE.search(keyword):
            groups.soft_skills.append(keyword)
        else:
            groups.hard_skills.append(keyword)
    return groups


def _keyword_suggestions(missing_keywords: list[str]) -> list[Suggestion]:
    if not missing_keywords:
        return []
    groups = categorize_keywords(missing_keywords)
    suggestions: list[Suggestion] = []
    if groups.hard_skills:
        suggestions.append(
            Suggestion(
                type="add_keywords",
                priority="high",
                title="Add Missing Technical Skills",
                description=(
                    f"Your resume is missing {len(groups.hard_skills)} technical skills "
                    "mentioned in the job description."
                ),
                action_items=[
                    f"Add these skills to your Skills section: {', '.join(groups.hard_skills[:5])}",
                    "Include these skills in your experience bullet points where applicable",
                    "Make sure to use the exact terminology from the job posting",
                ],
            )
        )
    if groups.tools:
        suggestions.append(
            Suggestion(
                type="add_keywords",
                priority="high",
                title="Add Missing Tools",
                description="The job requires experience with tools not mentioned in your resume.",
                action_items=[
                    f"Add these tools: {', '.join(groups.tools)}",
                    "Include specific version numbers or years of experience if applicable",
                ],
            )
        )
    return suggestions


def _bullet_suggestions(bullet_analyses: list[BulletAnalysis]) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    threshold = int(get_scoring_value("bullets.weak_score_threshold", 70))

    weak_bullets = [analysis for analysis in bullet_analyses if analysis.score < threshold]
    if weak_bullets:
        suggestions.append(
            Suggestion(
                type="improve_bullets",
                priority="high",
                title="Strengthen Bullet Points",
                description=f"{len(weak_bullets)} bullet points need improvement.",
                action_items=[
                    "Start each bullet with a strong action verb (Led, Developed, Implemented)",
                    "Add quantifiable metrics (percentages, dollar amounts, numbers)",
                    "Remove first-person pronouns (I, my, me)",
                    "Keep bullets concise (under 150 characters)",
                ],
            )
        )

    without_metrics = [
        analysis for analysis in bullet_analyses if any(issue.type == "no_metrics" for issue in analysis.issues)
    ]
    if len(without_metrics) > 3:
        suggestions.append(
            Suggestion(
                type="add_metrics",
                priority="medium",
                title="Add Quantifiable Achievements",
                description=f"{len(without_metrics)} bullets lack metrics. Numbers make your impact tangible.",
                action_items=[
                    "Add percentages for improvements (improved efficiency by 25%)",
                    "Include dollar amounts for cost savings or revenue ($50K saved)",
                    "Mention team sizes or scope (led team of 5, managed 10 projects)",
                    "Use specific numbers instead of vague terms (handled 50+ tickets weekly)",
                ],
            )
        )
    return suggestions


def _section_suggestions(resume: ParsedResume) -> list[Suggestion]:
    missing = [name for name in REQUIRED_SECTIONS if resume.get_section(name) is None]
    if not missing:
        return []
    return [
        Suggestion(
            type="add_section",
            priority="high",
            title="Add Missing Sections",
            description="Your resume is missing essential sections that ATS systems look for.",
            action_items=[f"Add a {name.capitalize()} section" for name in missing],
        )
    ]


def _formatting_suggestions(formatting_issues: list[FormattingIssue]) -> list[Suggestion]:
    critical = [issue for issue in formatting_issues if issue.severity == "error"]
    if not critical:
        return []
    return [
        Suggestion(
            type="fix_formatting",
            priority="high",
            title="Fix ATS Compatibility Issues",
            description="Your resume has formatting that may confuse ATS systems.",
            action_items=[issue.suggestion for issue in critical],
        )
    ]


def _verb_suggestions(bullet_analyses: list[BulletAnalysis]) -> list[Suggestion]:
    weak_openers = [
        analysis
        for analysis in bullet_analyses
        if any(issue.type == "weak_action_verb" for issue in analysis.issues)
    ]
    if len(weak_openers) <= 2:
        return []
    return [
        Suggestion(
            type="strengthen_verbs",
            priority="medium",
            title="Use Stronger Action Verbs",
            description=f"{len(weak_openers)} bullets start with weak verbs.",
            action_items=[
                'Replace "Responsible for" with "Led" or "Managed"',
                'Replace "Helped" with "Collaborated" or "Partnered"',
                'Replace "Worked on" with "Developed" or "Built"',
                "Use past tense for previous roles, present for current",
            ],
        )
    ]


def _tailoring_suggestions(job_description: ParsedJobDescription, missing_keywords: list[str]) -> list[Suggestion]:
    if len(missing_keywords) <= len(job_description.all_keywords) * 0.3:
        return []
    return [
        Suggestion(
            type="tailor_content",
            priority="high",
            title="Tailor Resume to Job Description",
            description="Your resume needs more alignment with this specific job posting.",
            action_items=[
                "Mirror the language used in the job description",
                "Prioritize experiences most relevant to this role",
                "Add a targeted summary that addresses key requirements",
                'Consider creating a "Relevant Experience" section',
            ],
        )
    ]


def generate_suggestions(
    resume: ParsedResume,
    job_description: ParsedJobDescription,
    missing_keywords: list[str],
    bullet_analyses: list[BulletAnalysis],
    formatting_issues: list[FormattingIssue],
) -> list[Suggestion]:
    suggestions = [
        *_keyword_suggestions(missing_keywords),
        *_bullet_suggestions(bullet_analyses),
        *_section_suggestions(resume),
        *_formatting_suggestions(formatting_issues),
        *_verb_suggestions(bullet_analyses),
        *_tailoring_suggestions(job_description, missing_keywords),
    ]
    # sorted() is stable, so equal priorities keep their rule order.
    return sorted(suggestions, key=lambda suggestion: PRIORITY_ORDER[suggestion.priority])
