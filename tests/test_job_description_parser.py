import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize.normalize_jd import (  # noqa: E402
    extract_qualifications,
    extract_requirements,
    extract_responsibilities,
    is_list_item,
    parse_job_description,
)

JOB_DESCRIPTION = """Senior Backend Engineer

Responsibilities:
- Design and build scalable APIs in Python
- Own deployments to Kubernetes clusters
- Mentor engineers across squads

Requirements:
- 5+ years of experience with Django
- Strong knowledge of PostgreSQL and Docker
- Excellent communication skills

Nice to have:
- Experience with Terraform and AWS
- Open source contributions

Benefits:
- Remote friendly team
"""


class SectionExtractionTests(unittest.TestCase):
    def test_responsibilities(self):
        self.assertEqual(
            extract_responsibilities(JOB_DESCRIPTION),
            [
                "Design and build scalable APIs in Python",
                "Own deployments to Kubernetes clusters",
                "Mentor engineers across squads",
            ],
        )

    def test_requirements_skip_years_already_listed(self):
        self.assertEqual(
            extract_requirements(JOB_DESCRIPTION),
            [
                "5+ years of experience with Django",
                "Strong knowledge of PostgreSQL and Docker",
                "Excellent communication skills",
            ],
        )

    def test_qualifications(self):
        self.assertEqual(
            extract_qualifications(JOB_DESCRIPTION),
            ["Experience with Terraform and AWS", "Open source contributions"],
        )

    def test_requirements_sweep_years_and_degrees_outside_sections(self):
        text = "We expect a Bachelor's degree in Computer Science.\n3 years experience in backend work."
        self.assertEqual(
            extract_requirements(text),
            ["3 years experience", "Bachelor's degree in Computer Science"],
        )

    def test_list_item_heuristic(self):
        self.assertTrue(is_list_item("• Python"))
        self.assertTrue(is_list_item("Ship features end to end with the team"))
        self.assertFalse(is_list_item("Short line"))
        self.assertFalse(is_list_item("Here is what we are looking for:"))


class ParseJobDescriptionTests(unittest.TestCase):
    def test_parse_collects_keywords_and_lists(self):
        parsed = parse_job_description(JOB_DESCRIPTION)

        for skill in ("python", "django", "postgresql", "docker", "kubernetes", "aws", "terraform"):
            self.assertIn(skill, parsed.hard_skills)
        self.assertIn("communication", parsed.soft_skills)
        self.assertEqual(len(parsed.all_keywords), len(set(parsed.all_keywords)))
        self.assertEqual(len(parsed.requirements), 3)
        self.assertEqual(len(parsed.responsibilities), 3)
        self.assertEqual(len(parsed.qualifications), 2)
        self.assertEqual(parsed.raw_text, JOB_DESCRIPTION)
        self.assertFalse(parsed.normalized_text.endswith("\n"))

    def test_empty_description_is_total(self):
        parsed = parse_job_description("")
        self.assertEqual(parsed.all_keywords, [])
        self.assertEqual(parsed.requirements, [])


if __name__ == "__main__":
    unittest.main()
