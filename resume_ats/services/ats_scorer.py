from __future__ import annotations

import logging
import random
import uuid

from resume_ats.core.scoring import get_scoring_value, round_half_up
from resume_ats.features import (
    analyze_bullets,
    analyze_formatting,
    analyze_sections,
    extract_keywords,
    match_keywords,
)
from resume_ats.normalize.sections import get_section_score
from resume_ats.schemas import (
    ATSScore,
    FormattingIssue,
    ParsedJobDescription,
    ParsedResume,
    ResumeMetadata,
    ScanResult,
)
from resume_ats.semantic import compute_weighted_similarity

from .suggestion_generator import generate_suggestions

logger = logging.getLogger(__name__)

_DEFAULT_KEYWORD_BANDS = ((80, 90, 0.5), (60, 70, 1.0), (40, 50, 1.0), (20, 30, 1.0), (0, 0, 1.5))
_DEFAULT_SEVERITY_PENALTY = {"error": 15, "warning": 8, "info": 3}
_DEFAULT_FLAG_PENALTY = {"images": 10, "tables": 10, "columns": 15, "headers_footers": 5}
_DEFAULT_OVERALL_WEIGHTS = {"keyword": 0.35, "formatting": 0.20, "section": 0.25, "similarity": 0.20}


def _clamp_score(value: int) -> int:
    return max(0, min(100, value))


def calculate_keyword_score(match_percentage: float) -> int:
    """Map keyword match percentage onto the banded 0-100 keyword score."""
    bands = get_scoring_value("keyword_score.bands", None) or _DEFAULT_KEYWORD_BANDS
    for lower_bound, base, slope in bands:
        if match_percentage >= lower_bound:
            return _clamp_score(round_half_up(base + (match_percentage - lower_bound) * slope))
    return 0


def calculate_formatting_score(issues: list[FormattingIssue], metadata: ResumeMetadata) -> int:
    severity_penalty = get_scoring_value("formatting.severity_penalty", None) or _DEFAULT_SEVERITY_PENALTY
    flag_penalty = get_scoring_value("formatting.flag_penalty", None) or _DEFAULT_FLAG_PENALTY

    score = 100
    for issue in issues:
        score -= int(severity_penalty.get(issue.severity, 0))

    # Layout flags are charged again on top of their issues.
    if metadata.has_images:
        score -= int(flag_penalty.get("images", 0))
    if metadata.has_tables:
        score -= int(flag_penalty.get("tables", 0))
    if metadata.has_columns:
        score -= int(flag_penalty.get("columns", 0))
    if metadata.has_headers_footers:
        score -= int(flag_penalty.get("headers_footers", 0))
    return _clamp_score(score)


def calculate_overall_score(keyword: int, formatting: int, section: int, similarity: int) -> int:
    weights = get_scoring_value("overall.weights", None) or _DEFAULT_OVERALL_WEIGHTS
    weighted = (
        keyword * float(weights["keyword"])
        + formatting * float(weights["formatting"])
        + section * float(weights["section"])
        + similarity * float(weights["similarity"])
    )
    # Guard against float drift such as 99.99999999999999 for all-100 inputs.
    return _clamp_score(round_half_up(round(weighted, 6)))


def calculate_ats_score(
    resume: ParsedResume,
    job_description: ParsedJobDescription,
    *,
    rng: random.Random | None = None,
) -> ScanResult:
    resume_keywords = extract_keywords(resume.normalized_text)
    keyword_result = match_keywords(resume_keywords.all_keywords, job_description.all_keywords)

    similarity = compute_weighted_similarity(
        resume.normalized_text,
        job_description.normalized_text,
        resume_keywords.all_keywords,
        job_description.all_keywords,
    )
    formatting_issues = analyze_formatting(resume)
    section_coverage = get_section_score(resume.sections)
    bullet_analyses = analyze_bullets(resume.sections, rng=rng)
    section_analyses = analyze_sections(resume.sections, keyword_result.missing_keywords)
    suggestions = generate_suggestions(
        resume,
        job_description,
        keyword_result.missing_keywords,
        bullet_analyses,
        formatting_issues,
    )

    keyword_score = calculate_keyword_score(keyword_result.match_percentage)
    formatting_score = calculate_formatting_score(formatting_issues, resume.metadata)
    section_score = section_coverage.score
    similarity_score = _clamp_score(round_half_up(similarity * 100))
    score = ATSScore(
        overall=calculate_overall_score(keyword_score, formatting_score, section_score, similarity_score),
        keyword=keyword_score,
        formatting=formatting_score,
        section=section_score,
        similarity=similarity_score,
    )

    scan_id = uuid.uuid4().hex
    logger.info(
        "ats_score_calculated id=%s overall=%s keyword=%s formatting=%s section=%s similarity=%s",
        scan_id,
        score.overall,
        score.keyword,
        score.formatting,
        score.section,
        score.similarity,
    )
    return ScanResult(
        id=scan_id,
        score=score,
        keyword_matches=keyword_result.matches,
        missing_keywords=keyword_result.missing_keywords,
        found_keywords=keyword_result.matched_keywords,
        formatting_issues=formatting_issues,
        section_analysis=section_analyses,
        bullet_analysis=bullet_analyses,
        suggestions=suggestions,
        parsed_resume=resume,
        parsed_job_description=job_description,
    )
