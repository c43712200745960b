"""
Unit tests for the matching orchestration layer.
"""

import logging
import unittest
from unittest.mock import patch

from skillmatch import match_job_resume, match_resumes
from skillmatch.config import PLACEHOLDER_TEXT
from skillmatch.matcher import combine_skills, save_result
from skillmatch.summarizer import default_assessment

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


# Sample data
SAMPLE_JOB_DESCRIPTION = """
Senior Backend Engineer

Requirements:
- 5+ years of experience building web services
- Skills: Python, Django, PostgreSQL, Docker
- Familiar with Kubernetes and AWS
"""

SAMPLE_RESUME = """
Jane Doe
Backend developer with 6 years of experience.

Technical Skills:
Python | Flask | Postgres | Docker

EXPERIENCE
• Deployed services on k8s and AWS
• Built REST APIs with nodejs

Bachelor of Science in Computer Science
"""

FRONTEND_RESUME = """
Sam Lee
Skills: React, TypeScript, CSS
"""


class RecordingStore:
    def __init__(self):
        self.saved = []

    def save_match_result(self, user_id, job_id, resume_id, result):
        self.saved.append((user_id, job_id, resume_id, result["match_percentage"]))
        return resume_id


class FailingStore:
    def save_match_result(self, user_id, job_id, resume_id, result):
        raise RuntimeError("database unavailable")


class TestMatchJobResume(unittest.TestCase):
    """Test single job-resume matching."""

    def test_sample_match(self):
        result = match_job_resume(SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME)

        # Django is the only job skill the resume lacks: round(100 * 5 / 6) = 83
        self.assertEqual(result["match_percentage"], 83)
        self.assertCountEqual(
            result["matched_skills"],
            ["Python", "PostgreSQL", "AWS", "Docker", "Kubernetes"],
        )
        self.assertEqual(result["job_skill_count"], 6)
        self.assertEqual(result["resume_skill_count"], 8)
        self.assertEqual(result["experience_years"], 6)
        self.assertEqual(result["education"], ["Bachelor of Science"])
        self.assertIsNone(result["ai_summary"])

    def test_explicit_skills_are_merged(self):
        result = match_job_resume(
            "Looking for an engineer",
            "Worked on many things",
            job_skills=["Go"],
            resume_skills=["golang"],
        )
        self.assertEqual(result["match_percentage"], 100)
        self.assertEqual(result["matched_skills"], ["Go"])

    def test_placeholder_resume_scores_zero(self):
        result = match_job_resume(SAMPLE_JOB_DESCRIPTION, PLACEHOLDER_TEXT)
        self.assertEqual(result["match_percentage"], 0)
        self.assertEqual(result["resume_skills"], [])

    def test_job_without_skills_uses_fallback(self):
        result = match_job_resume("We are hiring friendly people", FRONTEND_RESUME)
        # React, TypeScript, CSS -> min(50, 3 * 10)
        self.assertEqual(result["match_percentage"], 30)

    @patch("skillmatch.matcher.summarizer_available", return_value=True)
    @patch("skillmatch.matcher.generate_assessment", return_value="Strong backend fit.")
    def test_summary_added(self, mock_generate, _):
        result = match_job_resume(
            SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME, summarize=True, job_title="Backend", candidate_name="Jane Doe"
        )
        self.assertEqual(result["ai_summary"], "Strong backend fit.")
        mock_generate.assert_called_once()
        args = mock_generate.call_args.args
        # Candidate profile flows into the assessment prompt
        self.assertEqual(args[2:5], ("Jane Doe", 6, ["Bachelor of Science"]))

    @patch("skillmatch.matcher.summarizer_available", return_value=True)
    @patch("skillmatch.matcher.generate_assessment", side_effect=RuntimeError("API down"))
    def test_summary_failure_does_not_block_score(self, mock_generate, _):
        result = match_job_resume(SAMPLE_JOB_DESCRIPTION, SAMPLE_RESUME, summarize=True)
        self.assertEqual(result["match_percentage"], 83)
        self.assertEqual(result["ai_summary"], default_assessment(83))

    @patch("skillmatch.matcher.summarizer_available", return_value=True)
    @patch("skillmatch.matcher.generate_assessment")
    def test_low_match_skips_summary(self, mock_generate, _):
        result = match_job_resume(SAMPLE_JOB_DESCRIPTION, FRONTEND_RESUME, summarize=True)
        self.assertLess(result["match_percentage"], 50)
        self.assertEqual(result["ai_summary"], default_assessment(result["match_percentage"]))
        mock_generate.assert_not_called()


class TestMatchResumes(unittest.TestCase):
    """Test batch matching against one job."""

    RESUMES = [
        {"resume_id": "r1", "text": FRONTEND_RESUME, "name": "Sam Lee"},
        {"resume_id": "r2", "text": SAMPLE_RESUME, "name": "Jane Doe"},
        {"resume_id": "r3", "text": PLACEHOLDER_TEXT},
    ]

    def test_sorted_by_percentage(self):
        results = match_resumes(SAMPLE_JOB_DESCRIPTION, self.RESUMES)
        self.assertEqual([r["resume_id"] for r in results][0], "r2")
        percentages = [r["match_percentage"] for r in results]
        self.assertEqual(percentages, sorted(percentages, reverse=True))
        self.assertEqual(results[-1]["candidate_name"], "Unknown")

    def test_store_receives_results(self):
        store = RecordingStore()
        match_resumes(SAMPLE_JOB_DESCRIPTION, self.RESUMES, store=store, user_id="u1", job_id="j1")
        self.assertEqual(len(store.saved), 3)
        self.assertIn(("u1", "j1", "r2", 83), store.saved)

    def test_store_failure_is_isolated(self):
        results = match_resumes(SAMPLE_JOB_DESCRIPTION, self.RESUMES, store=FailingStore())
        self.assertEqual(len(results), 3)
        self.assertEqual(results[0]["match_percentage"], 83)

    def test_one_failure_does_not_stop_batch(self):
        original = match_job_resume

        def flaky(job_description, resume_text, **kwargs):
            if resume_text == PLACEHOLDER_TEXT:
                raise ValueError("corrupt record")
            return original(job_description, resume_text, **kwargs)

        with patch("skillmatch.matcher.match_job_resume", side_effect=flaky):
            results = match_resumes(SAMPLE_JOB_DESCRIPTION, self.RESUMES)

        failed = [r for r in results if "error" in r]
        self.assertEqual(len(failed), 1)
        self.assertEqual(failed[0]["resume_id"], "r3")
        self.assertEqual(failed[0]["match_percentage"], 0)
        self.assertEqual(len(results), 3)

    def test_empty_batch(self):
        self.assertEqual(match_resumes(SAMPLE_JOB_DESCRIPTION, []), [])


class TestHelpers(unittest.TestCase):

    def test_combine_skills(self):
        self.assertEqual(combine_skills(["React", "Vue"], None, ["Vue", " ", "Go"]), ["React", "Vue", "Go"])

    def test_save_result_without_store(self):
        self.assertFalse(save_result(None, "u", "j", "r", {"match_percentage": 0}))

    def test_save_result_failure(self):
        self.assertFalse(save_result(FailingStore(), "u", "j", "r", {"match_percentage": 0}))


if __name__ == "__main__":
    unittest.main()
