"""Tests for industry detection."""

from resumeforge.industry import IndustryDetector, detect_industry
from resumeforge.industry_keywords import INDUSTRY_DATABASE


def test_detects_technology_resume(sample_resume):
    result = IndustryDetector().detect(sample_resume)

    assert result.primary.industry == "technology"
    assert result.primary.confidence == 1.0
    assert any(reason.startswith("Job title:") for reason in result.primary.reasons)
    assert any("Company: Atlassian" == reason for reason in result.primary.reasons)
    assert result.all_detected[0] == "technology"


def test_secondary_is_limited_and_ranked(sample_resume):
    result = IndustryDetector().detect(sample_resume)

    assert len(result.secondary) <= 3
    assert [match.industry for match in result.secondary] == result.all_detected[1:4]
    confidences = [result.primary.confidence] + [match.confidence for match in result.secondary]
    assert confidences == sorted(confidences, reverse=True)


def test_empty_resume_is_general():
    result = IndustryDetector().detect("")

    assert result.primary.industry == "general"
    assert result.primary.confidence == 0.1
    assert result.primary.reasons == ["No specific industry detected"]
    assert result.secondary == []
    assert result.all_detected == []


def test_job_description_adds_indicator_phrases():
    resume = "Worked on things"
    without_job = IndustryDetector().detect(resume)
    with_job = IndustryDetector().detect(resume, "Patient care role at a busy hospital")

    assert "healthcare" not in without_job.all_detected
    assert with_job.primary.industry == "healthcare"
    assert any(reason.startswith("Keywords:") for reason in with_job.primary.reasons)


def test_title_phrases_are_case_insensitive():
    result = IndustryDetector().detect("Current role: Financial Analyst\nPrepared monthly reports")

    assert "finance" in result.all_detected
    finance = next(match for match in [result.primary] + result.secondary if match.industry == "finance")
    assert 'Job title: "Financial Analyst"' in finance.reasons


def test_certifications_score():
    result = IndustryDetector().detect("holds cpa and cfa designations")
    assert result.primary.industry == "finance"
    assert any(reason.startswith("Certifications:") for reason in result.primary.reasons)


def test_confidence_is_capped():
    text = " ".join(["docker kubernetes terraform aws devops"] * 20)
    result = detect_industry(text)
    assert 0 < result.primary.confidence <= 1.0


def test_relevant_keywords():
    keywords = IndustryDetector.get_relevant_keywords(["technology", "unknown"])
    technology = INDUSTRY_DATABASE["technology"]["keywords"]

    assert keywords[:len(technology["technical"])] == technology["technical"]
    assert "Git" in keywords
    assert technology["tools"][5] not in keywords
    assert INDUSTRY_DATABASE["general"]["keywords"]["soft"][0] in keywords
    assert len(keywords) == len(set(keywords))


def test_short_keywords_match_whole_words_only():
    result = IndustryDetector().detect("Registered nurse providing care for older residents\n"
                                       "Worked rotating roster shifts")

    assert "finance" not in result.all_detected
    assert "data_science" not in result.all_detected


def test_short_keywords_still_count_as_words():
    result = IndustryDetector().detect("Statistical work in R and SQL for the CA practice")

    top_matches = [result.primary] + result.secondary
    assert any("Certifications: CA" in match.reasons for match in top_matches if match.industry == "finance")
    assert "data_science" in result.all_detected
