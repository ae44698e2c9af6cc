"""Tests for keyword integration."""

from resumeforge.integrator import (
    GENERIC_SENTENCES,
    SKILLS_HEADERS,
    SUMMARY_HEADERS,
    KeywordIntegrator,
    SimpleKeywordIntegrator,
    find_section,
)

SKILLS_LIST_RESUME = """Jane Citizen

SKILLS
Python, Docker

EXPERIENCE
Engineer at Acme
"""

SUMMARY_ONLY_RESUME = """Jane Citizen

PROFESSIONAL SUMMARY
Engineer building reliable platforms.

EDUCATION
BSc
"""

EXPERIENCE_ONLY_RESUME = """Jane Citizen

WORK EXPERIENCE
Engineer at Acme
Built internal tools for finance teams

EDUCATION
BSc
"""

CAPITALISED_SKILLS_RESUME = """Jane Citizen

SKILLS
SQL, Python, Excel

EDUCATION
BSc
"""

CAPITALISED_EXPERIENCE_RESUME = """Jane Citizen

WORK EXPERIENCE
ACME Pty Ltd - Software Engineer
Built internal tools

EDUCATION
BSc
"""

BARE_RESUME = """Jane Citizen
jane@example.com
Built many things over the years."""


def test_find_section_stops_at_blank_line(sample_resume):
    match = find_section(sample_resume, SKILLS_HEADERS)

    assert match.group(0) == "SKILLS\n• Python\n• Docker\n• AWS"


def test_find_section_ignores_headers_mid_line():
    assert find_section("Strong summary writer\nnothing else", SUMMARY_HEADERS) is None
    assert find_section("Summary:\nGreat engineer", SUMMARY_HEADERS).group(0) == "Summary:\nGreat engineer"


def test_simple_integration_adds_bullets_under_skills(sample_resume):
    result = SimpleKeywordIntegrator().integrate_keywords(sample_resume, ["Terraform", "python"])

    assert result.added_keywords == ["Terraform"]
    assert result.message == "Successfully added 1 keywords"
    assert "SKILLS\n• Terraform\n• Python" in result.updated_resume


def test_simple_integration_nothing_to_add(sample_resume):
    result = SimpleKeywordIntegrator().integrate_keywords(sample_resume, ["Python", "aws"])

    assert result.added_keywords == []
    assert result.updated_resume == sample_resume
    assert result.message == "All keywords already present in resume"


def test_simple_integration_invalid_content():
    result = SimpleKeywordIntegrator().integrate_keywords("", ["Python"])
    assert result.message == "Invalid resume content"
    assert result.updated_resume == ""


def test_simple_integration_creates_core_competencies_after_summary():
    result = SimpleKeywordIntegrator().integrate_keywords(SUMMARY_ONLY_RESUME, ["Terraform"])
    updated = result.updated_resume

    assert "CORE COMPETENCIES\n• Terraform\n" in updated
    assert updated.index("Engineer building") < updated.index("CORE COMPETENCIES") < updated.index("EDUCATION")


def test_simple_integration_extends_inline_core_competencies():
    resume = "Jane Citizen\n\nMy core competencies are listed here\n• Python\n\nEDUCATION\nBSc"
    result = SimpleKeywordIntegrator().integrate_keywords(resume, ["Terraform"])

    assert "• Python\n• Terraform\n\nEDUCATION" in result.updated_resume


def test_append_keywords(sample_resume):
    integrator = SimpleKeywordIntegrator()

    result = integrator.append_keywords(sample_resume, ["Go", "Rust"])
    assert result.updated_resume.endswith("ADDITIONAL SKILLS AND KEYWORDS\n• Go\n• Rust\n")
    assert result.message == "Added 2 keywords to the end of resume"

    assert integrator.append_keywords(sample_resume, []).message == "No keywords to add"


def test_simple_replace():
    integrator = SimpleKeywordIntegrator()

    assert "Python, Docker\n\nGo, Rust\nEXPERIENCE" in integrator.simple_replace(SKILLS_LIST_RESUME, ["Go", "Rust"])
    assert integrator.simple_replace("Jane\nEXPERIENCE\nStuff", ["Go"]).endswith("\n\nKEY SKILLS\nGo")


def test_keyword_already_present(sample_resume):
    result = KeywordIntegrator(seed=1).integrate_keyword(sample_resume, "python")

    assert result.integration_method == "already_exists"
    assert result.updated_resume == sample_resume
    assert result.added_keywords == []


def test_invalid_and_empty_content():
    integrator = KeywordIntegrator(seed=1)
    assert integrator.integrate_keyword("", "Python").integration_method == "invalid_content"
    assert integrator.integrate_keyword("   ", "Python").integration_method == "empty_content"


def test_skills_bullet(sample_resume):
    result = KeywordIntegrator(seed=1).integrate_keyword(sample_resume, "Terraform")
    updated = result.updated_resume

    assert result.integration_method == "skills_bullet"
    assert result.added_keywords == ["Terraform"]
    assert "• AWS\n• " in updated
    assert updated.index("• AWS") < updated.index("Terraform") < updated.index("WORK EXPERIENCE")
    assert len(result.suggested_sentences) == 6


def test_skills_list():
    result = KeywordIntegrator(seed=1).integrate_keyword(SKILLS_LIST_RESUME, "Terraform")

    assert result.integration_method == "skills_list"
    assert "Python, Docker, Terraform" in result.updated_resume


def test_summary_addition():
    result = KeywordIntegrator(seed=1).integrate_keyword(SUMMARY_ONLY_RESUME, "Terraform")
    summary = find_section(result.updated_resume, SUMMARY_HEADERS).group(0)

    assert result.integration_method == "summary_addition"
    assert summary.startswith("PROFESSIONAL SUMMARY\nEngineer building reliable platforms. ")
    assert "Terraform" in summary


def test_experience_achievement():
    result = KeywordIntegrator(seed=1).integrate_keyword(EXPERIENCE_ONLY_RESUME, "Terraform")

    assert result.integration_method == "experience_achievement"
    assert "Engineer at Acme\n• " in result.updated_resume
    assert "Terraform" in result.updated_resume.split("Engineer at Acme\n• ")[1].split("\n")[0]


def test_new_skills_section():
    result = KeywordIntegrator(seed=1).integrate_keyword(BARE_RESUME, "Terraform")

    assert result.integration_method == "new_skills_section"
    assert "CORE COMPETENCIES\n• Technical Expertise: Terraform" in result.updated_resume
    assert result.updated_resume.startswith("Jane Citizen\n")


def test_integrate_keywords_modes(isolated_config, sample_resume):
    integrator = KeywordIntegrator(seed=3)

    smart = integrator.integrate_keywords(sample_resume, ["Terraform", "Jenkins"])
    assert smart.integration_method == "smart"
    assert smart.added_keywords == ["Terraform", "Jenkins"]

    simple = integrator.integrate_keywords(sample_resume, ["Terraform"], use_smart_integration=False)
    assert simple.integration_method == "simple"
    assert "• Terraform" in simple.updated_resume

    short = integrator.integrate_keywords("Jane\nSKILLS\nPython", ["Go"])
    assert short.integration_method == "simple"

    isolated_config.set("integration", "smart", False)
    assert integrator.integrate_keywords(sample_resume, ["Go"]).integration_method == "simple"


def test_integrate_multiple_keywords(sample_resume):
    result = KeywordIntegrator(seed=3).integrate_multiple_keywords(sample_resume, ["Terraform", "Python"])

    assert result.integration_method == "batch_integration"
    assert result.added_keywords == ["Terraform"]
    assert len(result.suggested_sentences) == 6


def test_seed_makes_output_repeatable(sample_resume):
    first = KeywordIntegrator(seed=7).integrate_keywords(sample_resume, ["Terraform", "Jenkins"])
    second = KeywordIntegrator(seed=7).integrate_keywords(sample_resume, ["Terraform", "Jenkins"])

    assert first.updated_resume == second.updated_resume


def test_seed_from_config(isolated_config, sample_resume):
    isolated_config.set("integration", "random_seed", 11)

    first = KeywordIntegrator().generate_natural_sentences("Terraform", "technology")
    second = KeywordIntegrator().generate_natural_sentences("Terraform", "technology")

    assert first == second


def test_natural_sentences():
    sentences = KeywordIntegrator(seed=1).generate_natural_sentences("Terraform", "technology")

    assert len(sentences) == 6
    assert all("Terraform" in sentence for sentence in sentences)
    assert sentences[3:] == [template.format(keyword="Terraform") for template in GENERIC_SENTENCES]


def test_related_skills():
    integrator = KeywordIntegrator(seed=1)

    related = integrator.get_related_skills("API", "technology")
    assert related == ["API development", "REST APIs"]
    assert integrator.get_related_skills("Terraform", "unknown") == []


def test_professional_skills_content_for_unknown_industry():
    content = KeywordIntegrator(seed=1).create_professional_skills_content("Go", [], "space_tourism")

    assert content == ("• Technical Expertise: Go\n"
                       "• Professional Skills: Communication, Problem Solving, Team Collaboration\n"
                       "• Industry Knowledge: Space tourism best practices")


def test_find_section_body_starting_with_capitals():
    match = find_section(CAPITALISED_SKILLS_RESUME, SKILLS_HEADERS)
    assert match.group(0) == "SKILLS\nSQL, Python, Excel"


def test_find_section_header_on_last_line():
    assert find_section("Jane Citizen\nSKILLS", SKILLS_HEADERS).group(0) == "SKILLS"


def test_skills_list_with_capitalised_first_skill():
    result = KeywordIntegrator(seed=1).integrate_keyword(CAPITALISED_SKILLS_RESUME, "Terraform")

    assert result.integration_method == "skills_list"
    assert "SKILLS\nSQL, Python, Excel, Terraform" in result.updated_resume


def test_experience_achievement_after_capitalised_employer():
    result = KeywordIntegrator(seed=1).integrate_keyword(CAPITALISED_EXPERIENCE_RESUME, "Terraform")
    updated = result.updated_resume

    assert result.integration_method == "experience_achievement"
    assert "WORK EXPERIENCE\nACME Pty Ltd - Software Engineer\n• " in updated
    assert "Terraform" in updated.split("Software Engineer\n• ")[1].split("\n")[0]
