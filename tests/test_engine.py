"""Tests for the ATS scoring engine."""

import pytest

from resumeforge.engine import (
    ATSEngine,
    FormatAnalyzer,
    ReadabilityAnalyzer,
    TFIDFAnalyzer,
    get_ats_engine,
    round_half_up,
    tfidf_cosine,
)


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(1.49) == 1
    assert round_half_up(7) == 7


def test_tokenize_drops_short_and_stop_words():
    assert TFIDFAnalyzer().tokenize("The Python and AWS, a go") == ["python", "aws"]


def test_tfidf_analyzer_scores_overlap():
    analyzer = TFIDFAnalyzer()

    score, keywords = analyzer.analyze("python docker python", "python docker python")
    assert score == 100.0
    assert set(keywords) == {"python", "docker"}

    score, keywords = analyzer.analyze("gardening pottery", "python docker")
    assert score == 0.0
    assert keywords == {}


def test_calculate_tf_empty():
    assert TFIDFAnalyzer().calculate_tf("a an") == {}


def test_format_analyzer_clean_resume(sample_resume):
    score, issues = FormatAnalyzer().analyze(sample_resume)
    assert score == 100
    assert issues == []


def test_format_analyzer_penalties():
    score, issues = FormatAnalyzer().analyze("plain text")
    assert score == 15
    assert "Missing experience section" in issues
    assert "Add email address" in issues
    assert "Add phone number" in issues

    score, issues = FormatAnalyzer().analyze("NAME | ROLE")
    assert "Avoid tables and complex formatting" in issues


def test_readability_analyzer():
    score, suggestions = ReadabilityAnalyzer().analyze("Led a team. Improved speed by 20%.")
    assert score == 100
    assert suggestions == []

    long_sentence = " ".join(["word"] * 30)
    score, suggestions = ReadabilityAnalyzer().analyze(long_sentence)
    assert score == 60
    assert len(suggestions) == 3


def test_score_resume_without_job(sample_resume):
    result = ATSEngine().score_resume(sample_resume)

    assert result.breakdown["keyword_match"] == 15
    assert set(result.breakdown) == {"keyword_match", "formatting", "readability", "sections", "australian"}
    assert result.overall_score == sum(result.breakdown.values())
    assert result.missing_keywords == []
    assert result.suggestions[0].startswith(("Your resume", "Excellent"))


def test_score_resume_with_job(sample_resume, sample_job):
    result = ATSEngine().score_resume(sample_resume, sample_job)

    assert 0 <= result.breakdown["keyword_match"] <= 30
    assert "agile" in result.missing_keywords
    assert any(s.startswith("Add these keywords:") for s in result.suggestions)
    assert 0 <= result.overall_score <= 100


def test_extract_important_words():
    words = ATSEngine().extract_important_words("Python, AWS and Agile with leadership; python again")
    assert words == ["python", "aws", "agile", "leadership"]


def test_analyze_sections(sample_resume):
    engine = ATSEngine()
    assert engine.analyze_sections(sample_resume) == pytest.approx(15.0)
    assert engine.analyze_sections("nothing here") == 0


def test_australian_relevance():
    engine = ATSEngine()
    assert engine.analyze_australian_relevance("PR holder in Sydney with a bachelor degree, Australia") == 10
    assert engine.analyze_australian_relevance("Improved project delivery") == 0


def test_industry_suggestions():
    engine = ATSEngine()
    assert engine.get_industry_suggestions("cloud and agile work", "tech") == [
        "Consider adding tech keywords: NBN, scrum, DevOps"
    ]
    assert engine.get_industry_suggestions("anything", "space") == []


def test_tfidf_cosine():
    assert tfidf_cosine("python developer", "python developer") == pytest.approx(1.0)
    assert tfidf_cosine("python developer", "gardening pottery") == 0.0
    assert tfidf_cosine("", "python") == 0.0
    assert tfidf_cosine("the and", "of the") == 0.0


def test_get_ats_engine_is_shared():
    assert get_ats_engine() is get_ats_engine()


def test_found_keywords_need_meaningful_weight():
    result = ATSEngine().score_resume("python docker", "python docker")
    assert result.found_keywords == ["python", "docker"]
