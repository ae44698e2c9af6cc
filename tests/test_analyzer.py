"""Tests for ATS analysis, enhanced semantic analysis and optimization."""

import pytest

from resumeforge.analyzer import (
    ATSAnalysis,
    ATSAnalyzer,
    ATSIssue,
    EnhancedATSAnalyzer,
    FormattingAnalysis,
    KeywordAnalysis,
    ResumeOptimizer,
    analyze_resume_with_semantics,
)
from resumeforge.engine import round_half_up
from resumeforge.integrator import KeywordIntegrator
from resumeforge.semantic import SemanticMatcher

PLAIN_RESUME = """Jane Citizen
Email: jane@example.com
Phone: 0412 345 678

SUMMARY
Engineer who builds cloud services for banks and retailers across Australia.

EXPERIENCE
Engineer at Acme
Built internal tools
"""


def _formatting(flag: bool) -> FormattingAnalysis:
    return FormattingAnalysis(flag, flag, flag, flag)


def test_analyze_without_job(sample_resume):
    analysis = ATSAnalyzer().analyze(sample_resume)

    assert analysis.engine_score is None
    assert 60 <= analysis.score <= 100
    assert "Docker" in analysis.keywords.found
    assert analysis.formatting.has_headers
    assert analysis.formatting.has_bullet_points
    assert analysis.formatting.has_clean_layout
    assert analysis.formatting.has_parsable_contact


def test_analyze_with_job_blends_engine_score(sample_resume, sample_job):
    analyzer = ATSAnalyzer()
    analysis = analyzer.analyze(sample_resume, sample_job)

    assert analysis.engine_score is not None
    local = analyzer.calculate_score(analysis.keywords, analysis.formatting, analysis.issues)
    assert analysis.score == round_half_up(analysis.engine_score.overall_score * 0.6 + local * 0.4)
    assert any("keywords" in suggestion for suggestion in analysis.suggestions)


def test_missing_keywords_are_capped(isolated_config, sample_resume, sample_job):
    isolated_config.set("scoring", "max_missing_keywords", 3)
    analysis = ATSAnalyzer().analyze(sample_resume, sample_job)
    assert len(analysis.keywords.missing) == 3


def test_analyze_formatting():
    formatting = ATSAnalyzer().analyze_formatting("plain words only")

    assert not formatting.has_headers
    assert not formatting.has_bullet_points
    assert formatting.has_clean_layout
    assert not formatting.has_parsable_contact
    assert len(formatting.issues) == 3

    assert not ATSAnalyzer().analyze_formatting("<table><tr><td>Skills</td></tr></table>").has_clean_layout


def test_calculate_score_bounds():
    analyzer = ATSAnalyzer()
    empty = KeywordAnalysis(found=[], missing=[], density=0.0, relevance=0)
    rich = KeywordAnalysis(found=[f"k{i}" for i in range(15)], missing=[], density=2.0, relevance=100)

    assert analyzer.calculate_score(empty, _formatting(False), []) == 70
    assert analyzer.calculate_score(rich, _formatting(True), []) == 100

    critical = [ATSIssue(severity="critical", category="format", message="bad")] * 10
    assert analyzer.calculate_score(empty, _formatting(False), critical) == 60


def test_extract_job_keywords():
    keywords = ATSAnalyzer.extract_job_keywords("We need Python developers with AWS and Python skills")
    assert keywords == ["need", "python", "developers", "skills"]


def test_generate_optimizations():
    analysis = ATSAnalysis(
        score=40,
        issues=[],
        suggestions=[],
        keywords=KeywordAnalysis(found=[], missing=["x"] * 11, density=0.0, relevance=0),
        formatting=FormattingAnalysis(False, False, True, False),
    )
    optimizations = ATSAnalyzer.generate_optimizations(analysis)

    assert optimizations[0] == "Major improvements needed for ATS compatibility"
    assert len(optimizations) == 5


def test_enhanced_without_job(sample_resume):
    analysis = EnhancedATSAnalyzer(use_semantic=False).analyze(sample_resume)

    assert analysis.enhanced_score == analysis.score
    assert analysis.score_breakdown["semantic"] == 0
    assert analysis.semantic_method == "none"
    assert analysis.recommendations[0] == "Add a job description to get semantic matching analysis"


def test_enhanced_uses_tfidf_when_disabled(sample_resume, sample_job):
    analysis = EnhancedATSAnalyzer(use_semantic=False).analyze(sample_resume, sample_job)
    breakdown = analysis.score_breakdown

    assert analysis.semantic_method == "tfidf"
    assert analysis.semantic_analysis is None
    assert breakdown["formatting"] == 100
    assert 0 < breakdown["semantic"] <= 100
    assert analysis.enhanced_score == round_half_up(
        breakdown["keyword"] * 0.3 + breakdown["semantic"] * 0.5 + breakdown["formatting"] * 0.2
    )
    assert analysis.confidence_level in ("low", "medium", "high")
    assert "Add work authorization status for Australian employers." in analysis.recommendations


def test_enhanced_with_embeddings(sample_resume, sample_job, fake_client):
    matcher = SemanticMatcher(embedding_client=fake_client)
    analysis = EnhancedATSAnalyzer(semantic_matcher=matcher, use_semantic=True).analyze(sample_resume, sample_job)

    assert analysis.semantic_method == "embedding"
    assert analysis.semantic_analysis is not None
    assert analysis.score_breakdown["semantic"] == round_half_up(analysis.semantic_analysis.similarity_score * 100)
    assert fake_client.calls > 0


def test_enhanced_falls_back_when_service_fails(sample_resume, sample_job, failing_client):
    matcher = SemanticMatcher(embedding_client=failing_client)
    analysis = EnhancedATSAnalyzer(semantic_matcher=matcher, use_semantic=True).analyze(sample_resume, sample_job)

    assert analysis.semantic_method == "tfidf"
    assert analysis.semantic_analysis is None
    assert failing_client.calls == 1


def test_calculate_confidence_levels():
    assert EnhancedATSAnalyzer.calculate_confidence(0.9, {"keyword": 80, "semantic": 80, "formatting": 80}) == "high"
    assert EnhancedATSAnalyzer.calculate_confidence(0.7, {"keyword": 10, "semantic": 10, "formatting": 10}) == "medium"
    assert EnhancedATSAnalyzer.calculate_confidence(0.1, {"keyword": 10, "semantic": 10, "formatting": 10}) == "low"


def test_quick_score_matches_analysis(sample_resume, sample_job):
    analyzer = EnhancedATSAnalyzer(use_semantic=False)
    assert analyzer.quick_score(sample_resume, sample_job) == analyzer.analyze(sample_resume, sample_job).enhanced_score


def test_detailed_insights(sample_resume, sample_job):
    insights = EnhancedATSAnalyzer(use_semantic=False).get_detailed_insights(sample_resume, sample_job)

    assert insights.improvement_potential == 95 - insights.analysis.enhanced_score
    assert insights.industry_insights[0] == "Australian employers value local experience and cultural fit"
    assert any(insight.startswith("Consider adding tech keywords") for insight in insights.industry_insights)


def test_analyze_resume_with_semantics_respects_config(isolated_config, sample_resume, sample_job):
    isolated_config.set("semantic", "enabled", False)
    assert analyze_resume_with_semantics(sample_resume, sample_job).semantic_method == "tfidf"


def test_convert_to_bullet_points():
    converted = ResumeOptimizer.convert_to_bullet_points("- one\n  - two\nno-dash")
    assert converted == "• one\n• two\nno-dash"


def test_optimize_resume_adds_missing_keywords():
    optimizer = ResumeOptimizer(integrator=KeywordIntegrator(seed=1))
    result = optimizer.optimize_resume(PLAIN_RESUME)

    assert result.analysis is not None
    assert not result.converted_bullets
    assert 1 <= len(result.added_keywords) <= 5
    for keyword in result.added_keywords:
        assert keyword.lower() in result.content.lower()
    assert result.content.startswith("Jane Citizen")


@pytest.mark.parametrize("max_keywords", [1, 2])
def test_optimize_keyword_limit(max_keywords, sample_resume, sample_job):
    optimizer = ResumeOptimizer(integrator=KeywordIntegrator(seed=1), max_keywords=max_keywords)
    assert len(optimizer.optimize_resume(sample_resume, sample_job).added_keywords) <= max_keywords
    assert isinstance(optimizer.optimize(sample_resume, sample_job), str)
