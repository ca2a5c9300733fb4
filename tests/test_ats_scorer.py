import random
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize.normalize_jd import parse_job_description  # noqa: E402
from resume_ats.normalize.sections import detect_sections  # noqa: E402
from resume_ats.parsing.layout import count_lines, count_words  # noqa: E402
from resume_ats.parsing.normalizer import normalize_text  # noqa: E402
from resume_ats.schemas import FormattingIssue, ParsedResume, ResumeMetadata  # noqa: E402
from resume_ats.services.ats_scorer import (  # noqa: E402
    calculate_ats_score,
    calculate_formatting_score,
    calculate_keyword_score,
    calculate_overall_score,
)
from document_factory import SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME_TEXT  # noqa: E402


def _parsed_resume(text: str, **flags) -> ParsedResume:
    normalized = normalize_text(text)
    metadata = ResumeMetadata(
        word_count=count_words(normalized),
        line_count=count_lines(normalized),
        estimated_pages=1,
        file_size=len(text),
        file_type="pdf",
        **flags,
    )
    return ParsedResume(
        raw_text=text,
        normalized_text=normalized,
        sections=detect_sections(normalized),
        metadata=metadata,
    )


def _issue(severity: str) -> FormattingIssue:
    return FormattingIssue(type="too_short", severity=severity, message="m", suggestion="s")


class KeywordScoreTests(unittest.TestCase):
    def test_band_breakpoints(self):
        expected = {
            100: 100,
            95: 98,
            80: 90,
            79: 89,
            70: 80,
            60: 70,
            50: 60,
            40: 50,
            30: 40,
            20: 30,
            10: 15,
            0: 0,
        }
        for percentage, score in expected.items():
            self.assertEqual(calculate_keyword_score(percentage), score, msg=percentage)

    def test_fractional_percentage(self):
        self.assertEqual(calculate_keyword_score(100 / 3), 43)


class FormattingScoreTests(unittest.TestCase):
    def test_severity_deductions(self):
        metadata = ResumeMetadata()
        self.assertEqual(calculate_formatting_score([], metadata), 100)
        self.assertEqual(calculate_formatting_score([_issue("error"), _issue("warning"), _issue("info")], metadata), 74)

    def test_layout_flags_are_charged_on_top_of_issues(self):
        metadata = ResumeMetadata(has_columns=True)
        columns = FormattingIssue(type="has_columns", severity="error", message="m", suggestion="s")
        self.assertEqual(calculate_formatting_score([columns], metadata), 70)

    def test_score_never_drops_below_zero(self):
        metadata = ResumeMetadata(has_images=True, has_tables=True, has_columns=True, has_headers_footers=True)
        self.assertEqual(calculate_formatting_score([_issue("error")] * 6, metadata), 0)


class OverallScoreTests(unittest.TestCase):
    def test_all_hundreds_is_exactly_hundred(self):
        self.assertEqual(calculate_overall_score(100, 100, 100, 100), 100)

    def test_weighted_sum(self):
        # 0.35*80 + 0.20*90 + 0.25*75 + 0.20*50 = 74.75
        self.assertEqual(calculate_overall_score(80, 90, 75, 50), 75)
        self.assertEqual(calculate_overall_score(0, 0, 0, 0), 0)


class CalculateAtsScoreTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.job = parse_job_description(SAMPLE_JOB_DESCRIPTION)

    def test_well_matched_resume_scores_high(self):
        result = calculate_ats_score(_parsed_resume(SAMPLE_RESUME_TEXT), self.job, rng=random.Random(0))

        self.assertEqual(result.missing_keywords, [])
        self.assertEqual(result.score.keyword, 100)
        self.assertEqual(result.score.section, 100)
        # Only the short-resume warning applies.
        self.assertEqual([issue.type for issue in result.formatting_issues], ["too_short"])
        self.assertEqual(result.score.formatting, 92)
        self.assertGreaterEqual(result.score.overall, 85)
        self.assertEqual(len(result.bullet_analysis), 8)
        self.assertEqual(len(result.id), 32)

    def test_columns_and_images_lower_the_score(self):
        clean = calculate_ats_score(_parsed_resume(SAMPLE_RESUME_TEXT), self.job, rng=random.Random(0))
        flagged = calculate_ats_score(
            _parsed_resume(SAMPLE_RESUME_TEXT, has_columns=True, has_images=True),
            self.job,
            rng=random.Random(0),
        )

        self.assertLess(flagged.score.formatting, clean.score.formatting)
        self.assertLess(flagged.score.overall, clean.score.overall)
        self.assertIn("fix_formatting", [suggestion.type for suggestion in flagged.suggestions])

    def test_empty_inputs_are_scored_without_errors(self):
        result = calculate_ats_score(_parsed_resume(""), parse_job_description(""))

        self.assertEqual(result.score.keyword, 0)
        self.assertEqual(result.score.section, 0)
        self.assertEqual(result.score.similarity, 0)
        self.assertEqual(result.bullet_analysis, [])
        self.assertNotEqual(result.id, calculate_ats_score(_parsed_resume(""), parse_job_description("")).id)


if __name__ == "__main__":
    unittest.main()
