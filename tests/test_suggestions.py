import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.bullets import analyze_bullet  # noqa: E402
from resume_ats.schemas import (  # noqa: E402
    FormattingIssue,
    ParsedJobDescription,
    ParsedResume,
    ResumeMetadata,
    ResumeSection,
)
from resume_ats.services.suggestion_generator import categorize_keywords, generate_suggestions  # noqa: E402


def _resume(*names):
    sections = [ResumeSection(name=name, content="", start_index=0, end_index=0) for name in names]
    return ParsedResume(raw_text="", normalized_text="", sections=sections, metadata=ResumeMetadata())


def _job(*keywords):
    return ParsedJobDescription(raw_text="", normalized_text="", all_keywords=list(keywords))


COLUMNS_ISSUE = FormattingIssue(
    type="has_columns",
    severity="error",
    message="Resume uses multiple columns which ATS cannot read correctly.",
    suggestion="Use a single-column layout for better ATS compatibility.",
)
HEADERS_ISSUE = FormattingIssue(
    type="has_headers_footers",
    severity="warning",
    message="Headers/footers detected. Content may be missed by ATS.",
    suggestion="Move important information from headers/footers to the main body.",
)


class CategorizeKeywordsTests(unittest.TestCase):
    def test_prefix_and_soft_skill_heuristics(self):
        groups = categorize_keywords(["Git", "github actions", "problem solving", "rust", "Leadership"])
        self.assertEqual(groups.tools, ["Git", "github actions"])
        self.assertEqual(groups.soft_skills, ["problem solving", "Leadership"])
        self.assertEqual(groups.hard_skills, ["rust"])


class GenerateSuggestionsTests(unittest.TestCase):
    def test_rules_fire_and_sort_by_priority(self):
        rng = random.Random(3)
        bullets = [analyze_bullet("Helped the team with various tasks", "experience", rng) for _ in range(4)]

        suggestions = generate_suggestions(
            _resume("summary", "experience", "skills"),
            _job("kubernetes", "docker", "communication", "terraform", "python"),
            ["kubernetes", "docker", "communication", "terraform"],
            bullets,
            [COLUMNS_ISSUE, HEADERS_ISSUE],
        )

        self.assertEqual(
            [suggestion.type for suggestion in suggestions],
            [
                "add_keywords",
                "add_keywords",
                "improve_bullets",
                "add_section",
                "fix_formatting",
                "tailor_content",
                "add_metrics",
                "strengthen_verbs",
            ],
        )
        technical, tools = suggestions[0], suggestions[1]
        self.assertEqual(technical.title, "Add Missing Technical Skills")
        self.assertIn("Add these skills to your Skills section: terraform", technical.action_items)
        self.assertIn("Add these tools: kubernetes, docker", tools.action_items)
        self.assertEqual(suggestions[3].action_items, ["Add a Education section"])
        self.assertEqual(suggestions[4].action_items, [COLUMNS_ISSUE.suggestion])
        self.assertEqual(suggestions[2].description, "4 bullet points need improvement.")

    def test_technical_skills_are_capped_at_five(self):
        missing = ["rust", "scala", "kotlin", "swift", "ruby", "perl", "php"]
        suggestions = generate_suggestions(
            _resume("summary", "experience", "education", "skills"),
            _job(*missing),
            missing,
            [],
            [],
        )
        self.assertIn(
            "Add these skills to your Skills section: rust, scala, kotlin, swift, ruby",
            suggestions[0].action_items,
        )

    def test_strong_resume_gets_no_suggestions(self):
        bullets = [analyze_bullet("Reduced PostgreSQL query latency by 45% through schema redesign", "experience")]
        suggestions = generate_suggestions(
            _resume("summary", "experience", "education", "skills"),
            _job("python", "django", "aws", "docker"),
            [],
            bullets,
            [HEADERS_ISSUE],
        )
        self.assertEqual(suggestions, [])

    def test_tailoring_needs_over_thirty_percent_missing(self):
        resume = _resume("summary", "experience", "education", "skills")
        job = _job("python", "django", "aws", "docker", "redis", "kafka", "go", "rust", "linux", "bash")

        below = generate_suggestions(resume, job, ["linux", "bash"], [], [])
        self.assertNotIn("tailor_content", [suggestion.type for suggestion in below])

        above = generate_suggestions(resume, job, ["go", "rust", "linux", "bash"], [], [])
        self.assertIn("tailor_content", [suggestion.type for suggestion in above])


if __name__ == "__main__":
    unittest.main()
