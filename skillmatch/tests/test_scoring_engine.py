"""
Unit tests for the deterministic skills scoring engine.
"""

import unittest

from pydantic import ValidationError

from skillmatch.scoring_engine import (
    MatchResult,
    calculate_fallback_percentage,
    round_half_up,
    score,
    skills_match,
)


class TestScore(unittest.TestCase):
    """Test the match percentage and breakdown."""

    def test_both_empty(self):
        result = score([], [])
        self.assertEqual(result.match_percentage, 0)
        self.assertEqual(result.matched_skills, ())
        self.assertEqual(result.job_skill_count, 0)
        self.assertEqual(result.resume_skill_count, 0)

    def test_full_match(self):
        result = score(["React", "Node.js"], ["React", "Node.js", "MongoDB"])
        self.assertEqual(result.match_percentage, 100)
        self.assertEqual(list(result.matched_skills), ["React", "Node.js"])
        self.assertEqual(result.job_skill_count, 2)
        self.assertEqual(result.resume_skill_count, 3)

    def test_partial_match(self):
        result = score(["React", "Python", "Docker"], ["React"])
        # round(100 * 1 / 3) = 33
        self.assertEqual(result.match_percentage, 33)
        self.assertEqual(list(result.matched_skills), ["React"])

    def test_alias_match_after_normalization(self):
        self.assertEqual(score(["JavaScript"], ["js"]).match_percentage, 100)
        result = score(["Kubernetes"], ["K8s"])
        self.assertEqual(result.match_percentage, 100)
        self.assertEqual(list(result.matched_skills), ["Kubernetes"])

    def test_empty_resume(self):
        result = score(["A", "B", "C", "D"], [])
        self.assertEqual(result.match_percentage, 0)
        self.assertEqual(result.job_skill_count, 4)
        self.assertEqual(result.resume_skill_count, 0)

    def test_empty_job_fallback(self):
        result = score([], ["React", "Vue"])
        # min(50, 2 * 10) = 20
        self.assertEqual(result.match_percentage, 20)
        self.assertEqual(result.resume_skill_count, 2)

    def test_empty_job_fallback_is_capped(self):
        resume = ["Python", "Docker", "AWS", "React", "Redis", "Kafka", "Terraform"]
        self.assertEqual(score([], resume).match_percentage, 50)

    def test_fuzzy_boundary(self):
        """Edit distance 2 matches, 3 does not."""
        self.assertEqual(score(["Terraform"], ["Teraforn"]).match_percentage, 100)
        self.assertEqual(score(["Terraform"], ["Taraforn"]).match_percentage, 0)

    def test_substring_match(self):
        result = score(["SQL"], ["PostgreSQL"])
        self.assertEqual(result.match_percentage, 100)

    def test_job_skill_counted_once(self):
        result = score(["Python"], ["Python", "python3", "Python"])
        self.assertEqual(list(result.matched_skills), ["Python"])
        self.assertEqual(result.match_percentage, 100)
        self.assertEqual(result.resume_skill_count, 2)

    def test_duplicate_job_skills_collapse(self):
        result = score(["js", "JavaScript", "Java Script"], ["javascript"])
        self.assertEqual(result.job_skill_count, 2)
        self.assertEqual(result.match_percentage, 100)

    def test_blank_skills_ignored(self):
        result = score(["", "  ", "Rust"], ["Go"])
        self.assertEqual(result.job_skill_count, 1)
        self.assertEqual(result.match_percentage, 0)

    def test_result_is_immutable(self):
        result = score(["React"], ["React"])
        with self.assertRaises(ValidationError):
            result.match_percentage = 0

    def test_percentage_bounds(self):
        with self.assertRaises(ValidationError):
            MatchResult(match_percentage=101)


class TestHelpers(unittest.TestCase):

    def test_round_half_up(self):
        self.assertEqual(round_half_up(1, 8), 13)  # 12.5
        self.assertEqual(round_half_up(5, 8), 63)  # 62.5
        self.assertEqual(round_half_up(2, 3), 67)
        self.assertEqual(round_half_up(0, 5), 0)
        self.assertEqual(round_half_up(5, 5), 100)

    def test_fallback_percentage(self):
        self.assertEqual(calculate_fallback_percentage(0), 0)
        self.assertEqual(calculate_fallback_percentage(3), 30)
        self.assertEqual(calculate_fallback_percentage(9), 50)

    def test_skills_match(self):
        self.assertTrue(skills_match("React", "react"))
        self.assertTrue(skills_match("Spring", "Spring Boot"))
        self.assertTrue(skills_match("Kotlin", "Kotln"))
        self.assertFalse(skills_match("Python", "Haskell"))


class TestDeterminism(unittest.TestCase):

    def test_score_determinism(self):
        job = ["Python", "Django", "PostgreSQL"]
        resume = ["python", "Flask", "postgres"]
        self.assertEqual(score(job, resume), score(job, resume))


if __name__ == "__main__":
    unittest.main()
