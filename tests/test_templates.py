"""Tests for the Australian resume templates."""

import json

from resumeforge.industry_keywords import INDUSTRY_DATABASE
from resumeforge.templates import (
    AUSTRALIAN_TEMPLATES,
    export_template,
    generate_from_template,
    get_available_industries,
    get_template_by_industry,
)


def test_templates_link_to_keyword_database():
    assert len(AUSTRALIAN_TEMPLATES) == 6
    assert len({template.id for template in AUSTRALIAN_TEMPLATES}) == 6
    for template in AUSTRALIAN_TEMPLATES:
        assert template.industry_id in INDUSTRY_DATABASE
        assert template.sections[0].title == "PROFESSIONAL SUMMARY"


def test_lookup_by_label_id_and_alias():
    assert get_template_by_industry("mining & resources").id == "mining-fifo"
    assert get_template_by_industry("  Healthcare ").id == "healthcare-nurse"
    assert get_template_by_industry("tech-sydney").industry == "Technology"
    assert get_template_by_industry("agriculture_mining").id == "mining-fifo"
    assert get_template_by_industry("banking").id == "finance-accounting"


def test_lookup_without_template():
    assert get_template_by_industry("data_science") is None
    assert get_template_by_industry("underwater basket weaving") is None


def test_available_industries():
    assert get_available_industries() == [
        "Technology", "Mining & Resources", "Healthcare",
        "Finance & Accounting", "Construction", "Education",
    ]


def test_generate_orders_sections_and_prefers_content():
    text = generate_from_template(get_template_by_industry("technology"))

    assert text.startswith("PROFESSIONAL SUMMARY\n====================\n\nResults-driven Software Engineer")
    assert text.index("CORE TECHNICAL SKILLS") < text.index("PROFESSIONAL EXPERIENCE") < text.index("EDUCATION")
    assert "Programming: Python, JavaScript, TypeScript, Java" in text
    assert text.endswith("no sponsorship required\n\n")


def test_generate_with_contact_block():
    template = get_template_by_industry("education")
    text = generate_from_template(template, {
        "name": "Jane Citizen", "email": "jane@example.com", "location": "Sydney, NSW",
    })

    assert text.startswith("Jane Citizen\njane@example.com | Sydney, NSW\n\nPROFESSIONAL SUMMARY\n")


def test_contact_block_needs_a_name():
    template = get_template_by_industry("construction")
    text = generate_from_template(template, {"email": "jane@example.com"})

    assert "jane@example.com" not in text
    assert text.startswith("PROFESSIONAL SUMMARY\n")


def test_export_template_round_trips_fields():
    template = get_template_by_industry("construction")
    data = json.loads(export_template(template))

    assert data["id"] == "construction-trades"
    assert data["visa_optimized"] is False
    assert data["ats_score"] == 88
    assert data["sections"][1]["content"].startswith("• White Card")
    assert data["sections"][1]["placeholder"] is None
