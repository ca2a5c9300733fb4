import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.keywords import (  # noqa: E402
    contains_whole_word,
    extract_keywords,
    get_keyword_category,
    match_keywords,
)
from resume_ats.taxonomy import LocalTaxonomy, get_default_taxonomy_provider  # noqa: E402


class KeywordMatchTests(unittest.TestCase):
    def test_partial_match(self):
        result = match_keywords(["python", "aws"], ["python", "docker", "leadership"])

        self.assertEqual(result.matched_keywords, ["python"])
        self.assertEqual(result.missing_keywords, ["docker", "leadership"])
        self.assertAlmostEqual(result.match_percentage, 100 / 3)
        categories = {match.keyword: match.category for match in result.matches}
        self.assertEqual(categories, {"python": "hard_skill", "docker": "hard_skill", "leadership": "soft_skill"})
        self.assertEqual([match.frequency for match in result.matches], [1, 0, 0])

    def test_match_is_case_insensitive(self):
        result = match_keywords(["Python"], ["python"])
        self.assertEqual(result.match_percentage, 100.0)

    def test_no_job_keywords_is_zero_percent(self):
        result = match_keywords(["python"], [])
        self.assertEqual(result.match_percentage, 0.0)
        self.assertEqual(result.matches, [])


class KeywordExtractionTests(unittest.TestCase):
    def test_whole_word_matching_keeps_java_and_javascript_apart(self):
        java = extract_keywords("Java developer with Spring experience")
        self.assertIn("java", java.hard_skills)
        self.assertNotIn("javascript", java.hard_skills)

        javascript = extract_keywords("Senior JavaScript engineer")
        self.assertIn("javascript", javascript.hard_skills)
        self.assertNotIn("java", javascript.hard_skills)

    def test_multi_word_and_punctuated_terms(self):
        keywords = extract_keywords("Experience with machine learning on Google Cloud. Node.js and CI/CD pipelines.")
        self.assertIn("machine learning", keywords.hard_skills)
        self.assertIn("google cloud", keywords.hard_skills)
        self.assertIn("node.js", keywords.hard_skills)
        self.assertIn("ci/cd", keywords.hard_skills)

    def test_groups_by_category_without_duplicates(self):
        keywords = extract_keywords("Python, Python and more Python. Strong communication. Slack and Kafka daily.")
        self.assertEqual(keywords.hard_skills.count("python"), 1)
        self.assertIn("communication", keywords.soft_skills)
        self.assertIn("slack", keywords.tools)
        self.assertIn("kafka", keywords.technologies)
        self.assertEqual(len(keywords.all_keywords), len(set(keywords.all_keywords)))

    def test_empty_text_yields_empty_set(self):
        keywords = extract_keywords("")
        self.assertEqual(keywords.all_keywords, [])

    def test_contains_whole_word_boundaries(self):
        self.assertTrue(contains_whole_word("built (react) apps", "react"))
        self.assertFalse(contains_whole_word("reactive systems", "react"))


class TaxonomyTests(unittest.TestCase):
    def test_get_keyword_category(self):
        self.assertEqual(get_keyword_category("Slack"), "tool")
        self.assertEqual(get_keyword_category("kafka"), "technology")
        self.assertEqual(get_keyword_category("underwater basket weaving"), "other")

    def test_default_provider_is_shared(self):
        self.assertIs(get_default_taxonomy_provider(), get_default_taxonomy_provider())

    def test_custom_taxonomy_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "skills.json"
            path.write_text(
                json.dumps({"hard_skill": ["Cobol", "cobol"], "tool": ["punch cards"]}),
                encoding="utf-8",
            )
            taxonomy = LocalTaxonomy(skills_path=path)

            self.assertEqual(taxonomy.terms("hard_skill"), ("cobol",))
            self.assertEqual(taxonomy.terms("soft_skill"), ())
            keywords = extract_keywords("Maintained COBOL batch jobs fed by punch cards", taxonomy=taxonomy)
            self.assertEqual(keywords.all_keywords, ["cobol", "punch cards"])


if __name__ == "__main__":
    unittest.main()
