import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.section_quality import (  # noqa: E402
    analyze_sections,
    evaluate_section,
    get_section_guidance,
)
from resume_ats.schemas import ResumeSection  # noqa: E402


def _section(name, content="", bullets=None):
    return ResumeSection(name=name, content=content, start_index=0, end_index=0, bullets=bullets or [])


LONG_SUMMARY = " ".join(["Backend engineer building Python payment services on AWS."] * 5)
SKILLS = "Python, Django, PostgreSQL, Docker, Kubernetes, AWS, Git, Terraform, Redis, Kafka, Linux"
EDUCATION = (
    "Bachelor of Science in Computer Science, State University, 2015. "
    "Coursework in algorithms, databases, operating systems, networks and distributed systems with honors."
)


class AnalyzeSectionsTests(unittest.TestCase):
    def test_missing_required_sections_score_zero_with_guidance(self):
        analyses = analyze_sections([], [])

        self.assertEqual([analysis.name for analysis in analyses], ["summary", "experience", "education", "skills"])
        for analysis in analyses:
            self.assertFalse(analysis.found)
            self.assertEqual(analysis.score, 0)
            self.assertIn(get_section_guidance(analysis.name), analysis.suggestions)

    def test_optional_sections_reviewed_only_when_present(self):
        analyses = analyze_sections([_section("projects", bullets=["one bullet here"])], [])
        names = [analysis.name for analysis in analyses]
        self.assertIn("projects", names)
        self.assertNotIn("certifications", names)

        projects = analyses[-1]
        self.assertTrue(projects.found)
        self.assertEqual(projects.score, 90)

    def test_well_populated_sections(self):
        sections = [
            _section("summary", LONG_SUMMARY),
            _section("experience", bullets=[f"Bullet number {index} long enough" for index in range(6)]),
            _section("education", EDUCATION),
            _section("skills", SKILLS),
        ]
        analyses = analyze_sections(sections, ["python"])
        self.assertEqual([analysis.score for analysis in analyses], [100, 100, 100, 100])


class EvaluateSectionTests(unittest.TestCase):
    def test_brief_summary_without_missing_keywords(self):
        analysis = evaluate_section(_section("summary", "Backend engineer."), ["kubernetes"])
        self.assertEqual(analysis.score, 65)
        self.assertEqual(analysis.feedback, "Summary is too brief.")

    def test_summary_mentioning_a_missing_keyword_avoids_penalty(self):
        analysis = evaluate_section(_section("summary", "Backend engineer learning Kubernetes."), ["kubernetes"])
        self.assertEqual(analysis.score, 80)

    def test_experience_bullet_thresholds(self):
        self.assertEqual(evaluate_section(_section("experience", bullets=["a"] * 2), []).score, 75)
        self.assertEqual(evaluate_section(_section("experience", bullets=["a"] * 4), []).score, 90)
        self.assertEqual(evaluate_section(_section("experience", bullets=["a"] * 6), []).score, 100)

    def test_sparse_skills_missing_many_keywords(self):
        missing = ["rust", "kafka", "redis", "terraform", "ansible", "scala"]
        analysis = evaluate_section(_section("skills", "Python, Django"), missing)
        self.assertEqual(analysis.score, 65)
        self.assertIn("Add missing skills: rust, kafka, redis, terraform, ansible", analysis.suggestions)

    def test_skills_keyword_presence_is_a_substring_check(self):
        # "go" is found inside "Django", leaving only five keywords absent.
        missing = ["go", "rust", "kafka", "redis", "terraform", "ansible"]
        analysis = evaluate_section(_section("skills", "Python, Django"), missing)
        self.assertEqual(analysis.score, 80)
        self.assertFalse(any(s.startswith("Add missing skills") for s in analysis.suggestions))

    def test_short_education(self):
        self.assertEqual(evaluate_section(_section("education", "BSc, 2015"), []).score, 85)

    def test_other_sections_are_accepted_as_found(self):
        analysis = evaluate_section(_section("certifications", "AWS Solutions Architect"), [])
        self.assertEqual(analysis.score, 100)
        self.assertEqual(analysis.feedback, "Section found.")


if __name__ == "__main__":
    unittest.main()
