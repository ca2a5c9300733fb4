import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.core.scoring import get_scoring_config, get_scoring_value, round_half_up  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("overall.weights.keyword"), 0.35)
        self.assertEqual(get_scoring_value("sections.points.required"), 30)
        self.assertEqual(get_scoring_value("bullets.penalties.no_metrics"), 20)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_scoring_value("overall.weights.unknown", 7), 7)
        self.assertEqual(get_scoring_value("overall.weights.keyword.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_overall_weights_sum_to_one(self):
        weights = get_scoring_value("overall.weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0)

    def test_similarity_weights_sum_to_one(self):
        weights = get_scoring_value("similarity.weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(62.5), 63)
        self.assertEqual(round_half_up(97.5), 98)
        self.assertEqual(round_half_up(24.4), 24)


if __name__ == "__main__":
    unittest.main()
