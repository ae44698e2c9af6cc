"""
Australian industry resume templates for ResumeForge.

Each template lists ordered sections with starter content or placeholder text,
writing tips and the keywords recruiters in that industry search for.
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from .industry_keywords import INDUSTRY_DATABASE, get_industry_by_name


@dataclass
class TemplateSection:
    """One section of a resume template."""
    title: str
    order: int
    required: bool
    content: Optional[str] = None
    placeholder: Optional[str] = None
    tips: List[str] = field(default_factory=list)


@dataclass
class ResumeTemplate:
    """An industry-specific resume layout."""
    id: str
    name: str
    industry: str
    industry_id: str
    description: str
    sections: List[TemplateSection]
    keywords: List[str]
    visa_optimized: bool
    ats_score: int


AUSTRALIAN_TEMPLATES: List[ResumeTemplate] = [
    ResumeTemplate(
        id="tech-sydney",
        name="Tech Professional - Sydney/Melbourne",
        industry="Technology",
        industry_id="technology",
        description="Optimized for Australian tech companies and startups",
        visa_optimized=True,
        ats_score=95,
        sections=[
            TemplateSection(
                title="PROFESSIONAL SUMMARY",
                order=1,
                required=True,
                placeholder=("Results-driven Software Engineer with [X] years of experience in [technologies]. "
                             "Australian Permanent Resident with full work rights."),
                tips=[
                    "Mention visa status upfront if favorable",
                    "Include years of Australian experience",
                    "Highlight tech stack relevant to AU market (AWS, .NET, React)",
                ],
            ),
            TemplateSection(
                title="CORE TECHNICAL SKILLS",
                order=2,
                required=True,
                content=("Programming: Python, JavaScript, TypeScript, Java\n"
                         "Frameworks: React, Node.js, Django, Spring Boot\n"
                         "Cloud: AWS (Sydney region), Azure, Google Cloud\n"
                         "Databases: PostgreSQL, MongoDB, DynamoDB\n"
                         "DevOps: Docker, Kubernetes, CI/CD, Jenkins\n"
                         "Agile: Scrum, Kanban, JIRA, Confluence"),
                tips=[
                    "List AWS Sydney region experience",
                    "Include Australian compliance knowledge (Privacy Act, CDR)",
                    "Mention NBN or Australian infrastructure experience",
                ],
            ),
            TemplateSection(
                title="PROFESSIONAL EXPERIENCE",
                order=3,
                required=True,
                placeholder=("Senior Software Engineer | Company Name | Sydney, NSW\n"
                             "Month Year - Present\n"
                             "\n"
                             "• Led development of microservices architecture serving 100K+ Australian users\n"
                             "• Reduced infrastructure costs by 40% using AWS Sydney region optimization\n"
                             "• Mentored team of 5 engineers in Agile best practices\n"
                             "• Integrated with Australian payment gateways (Afterpay, BPAY)"),
                tips=[
                    "Use Australian date format (DD/MM/YYYY)",
                    "Include city and state abbreviation",
                    "Highlight Australian client projects",
                    "Mention work with Australian regulations",
                ],
            ),
            TemplateSection(
                title="EDUCATION",
                order=4,
                required=True,
                placeholder=("Bachelor of Computer Science\n"
                             "University of Sydney | Sydney, NSW\n"
                             "Graduated: 2020\n"
                             "\n"
                             "• Relevant Coursework: Data Structures, Algorithms, Cloud Computing\n"
                             "• GPA: 6.5/7.0 (Distinction Average)"),
                tips=[
                    "Use Australian GPA scale (HD/D/C/P)",
                    "Include Australian university if applicable",
                    "Mention any Australian certifications",
                ],
            ),
            TemplateSection(
                title="AUSTRALIAN WORK AUTHORIZATION",
                order=5,
                required=False,
                content="✓ Australian Permanent Resident - Full work rights, no sponsorship required",
                tips=[
                    "Clear statement about visa status",
                    "Reduces employer concerns about sponsorship",
                ],
            ),
        ],
        keywords=["Sydney", "Melbourne", "AWS", "React", "Python", "Agile", "PR", "work rights",
                  "Australian experience"],
    ),
    ResumeTemplate(
        id="mining-fifo",
        name="Mining Engineer - FIFO",
        industry="Mining & Resources",
        industry_id="agriculture_mining",
        description="Designed for FIFO/DIDO roles in Australian mining sector",
        visa_optimized=True,
        ats_score=92,
        sections=[
            TemplateSection(
                title="PROFESSIONAL SUMMARY",
                order=1,
                required=True,
                placeholder=("Experienced Mining Engineer with [X] years in Australian open-pit and underground "
                             "operations. Current FIFO availability with medical clearance and site-ready "
                             "certifications."),
                tips=[
                    "Mention FIFO/DIDO availability upfront",
                    "Include years of Australian mining experience",
                    "Highlight specific commodities (iron ore, coal, gold)",
                ],
            ),
            TemplateSection(
                title="LICENSES & CERTIFICATIONS",
                order=2,
                required=True,
                content=("• Queensland Mining Safety Induction (S11)\n"
                         "• Western Australia Mining Induction (MARCSTA)\n"
                         "• Working at Heights (RIIWHS204D)\n"
                         "• Confined Spaces (RIIWHS202D)\n"
                         "• First Aid & CPR (HLTAID011)\n"
                         "• HR License\n"
                         "• Coal Board Medical - Current"),
                tips=[
                    "List state-specific mining tickets",
                    "Include expiry dates if current",
                    "Highlight site-specific inductions",
                ],
            ),
            TemplateSection(
                title="TECHNICAL COMPETENCIES",
                order=3,
                required=True,
                content=("Mine Planning: Surpac, Vulcan, MineSight, Deswik\n"
                         "Scheduling: Primavera P6, MS Project\n"
                         "Geotechnical: Rocscience Suite, FLAC3D\n"
                         "Equipment: CAT, Komatsu, Liebherr fleet management\n"
                         "Safety: ICAM investigations, Risk assessments, JSAs"),
                tips=[
                    "Include software specific to Australian mines",
                    "Mention equipment brands common in Australia",
                    "Highlight safety management systems",
                ],
            ),
            TemplateSection(
                title="PROFESSIONAL EXPERIENCE",
                order=4,
                required=True,
                placeholder=("Senior Mining Engineer | BHP Iron Ore | Port Hedland, WA\n"
                             "FIFO Roster: 2/1 | January 2020 - Present\n"
                             "\n"
                             "• Managed short-term mine planning for 35Mtpa operation\n"
                             "• Reduced drilling costs by 25% through blast optimization\n"
                             "• Led team of 8 engineers and 20 operators\n"
                             "• Achieved zero LTIs over 18-month period"),
                tips=[
                    "Include roster pattern (2/1, 8/6, etc.)",
                    "Specify mine location and commodity",
                    "Highlight safety achievements (LTIs, TRIFRs)",
                    "Use Australian mining terminology",
                ],
            ),
        ],
        keywords=["FIFO", "DIDO", "mining", "BHP", "Rio Tinto", "Port Hedland", "Pilbara", "safety",
                  "open pit", "underground"],
    ),
    ResumeTemplate(
        id="healthcare-nurse",
        name="Registered Nurse - Healthcare",
        industry="Healthcare",
        industry_id="healthcare",
        description="For nurses seeking roles in Australian hospitals and aged care",
        visa_optimized=True,
        ats_score=93,
        sections=[
            TemplateSection(
                title="PROFESSIONAL SUMMARY",
                order=1,
                required=True,
                placeholder=("Compassionate Registered Nurse with [X] years in Australian healthcare settings. "
                             "Current AHPRA registration with experience in public hospitals and aged care "
                             "facilities."),
                tips=[
                    "Lead with AHPRA registration status",
                    "Mention specific Australian healthcare experience",
                    "Include specializations (ED, ICU, aged care)",
                ],
            ),
            TemplateSection(
                title="REGISTRATION & CREDENTIALS",
                order=2,
                required=True,
                content=("• AHPRA Registration: RN0000000 (Current until 05/2025)\n"
                         "• Working with Children Check: NSW00000000\n"
                         "• Police Check: Current (2024)\n"
                         "• Immunization: Up to date including COVID-19\n"
                         "• CPR Certification: Current"),
                tips=[
                    "Include AHPRA number",
                    "List state-specific requirements",
                    "Mention NDIS worker screening if applicable",
                ],
            ),
            TemplateSection(
                title="CLINICAL COMPETENCIES",
                order=3,
                required=True,
                content=("Clinical Skills: IV cannulation, medication administration, wound care\n"
                         "Specialties: Emergency, Medical/Surgical, Aged Care, Palliative\n"
                         "Systems: Cerner, EPIC, Best Practice, MedChart\n"
                         "Standards: NSQHS, Aged Care Quality Standards\n"
                         "Languages: English (Native), Mandarin (Professional)"),
                tips=[
                    "Include Australian healthcare systems",
                    "Mention NSQHS standards knowledge",
                    "List additional languages (valuable in multicultural Australia)",
                ],
            ),
        ],
        keywords=["AHPRA", "registered nurse", "RN", "healthcare", "hospital", "aged care", "NDIS",
                  "Sydney", "Melbourne"],
    ),
    ResumeTemplate(
        id="finance-accounting",
        name="Accountant - Finance Professional",
        industry="Finance & Accounting",
        industry_id="finance",
        description="For CPA/CA qualified professionals in Australian finance sector",
        visa_optimized=True,
        ats_score=91,
        sections=[
            TemplateSection(
                title="PROFESSIONAL SUMMARY",
                order=1,
                required=True,
                placeholder=("CPA-qualified Accountant with [X] years in Australian taxation and compliance. "
                             "Expertise in GST, FBT, and superannuation legislation."),
                tips=[
                    "Mention CPA/CA qualification status",
                    "Highlight Australian tax knowledge",
                    "Include Big 4 experience if applicable",
                ],
            ),
            TemplateSection(
                title="QUALIFICATIONS & MEMBERSHIPS",
                order=2,
                required=True,
                content=("• CPA Australia - Full Member (2020)\n"
                         "• Bachelor of Commerce (Accounting) - University of Melbourne\n"
                         "• Registered Tax Agent - TPB No: 00000000\n"
                         "• ASIC Agent - Current"),
                tips=[
                    "Include professional body membership numbers",
                    "List Tax Agent registration",
                    "Mention SMSF qualifications if applicable",
                ],
            ),
            TemplateSection(
                title="TECHNICAL EXPERTISE",
                order=3,
                required=True,
                content=("Software: Xero, MYOB, QuickBooks, SAP\n"
                         "Taxation: GST, FBT, Income Tax, International Tax\n"
                         "Compliance: ATO reporting, ASIC lodgements, STP\n"
                         "Financial: Financial statements, Budgeting, Cashflow\n"
                         "Audit: Internal controls, Risk assessment, SOX"),
                tips=[
                    "List Australian accounting software",
                    "Include ATO and ASIC experience",
                    "Mention Single Touch Payroll (STP)",
                ],
            ),
        ],
        keywords=["CPA", "CA", "accountant", "GST", "tax", "ATO", "ASIC", "superannuation", "SMSF",
                  "Xero", "MYOB"],
    ),
    ResumeTemplate(
        id="construction-trades",
        name="Construction - Trades Professional",
        industry="Construction",
        industry_id="construction",
        description="For tradies and construction workers in Australian building industry",
        visa_optimized=False,
        ats_score=88,
        sections=[
            TemplateSection(
                title="PROFESSIONAL SUMMARY",
                order=1,
                required=True,
                placeholder=("Licensed Carpenter with [X] years on Australian commercial and residential "
                             "projects. White Card holder with extensive high-rise experience."),
                tips=[
                    "Mention specific trade license",
                    "Include White Card status",
                    "Highlight project types (commercial, residential, infrastructure)",
                ],
            ),
            TemplateSection(
                title="LICENSES & TICKETS",
                order=2,
                required=True,
                content=("• White Card - NSW000000\n"
                         "• Carpenter License - NSW Building License 000000\n"
                         "• Working at Heights - Current\n"
                         "• Elevated Work Platform (EWP) - Current\n"
                         "• Forklift License (LF) - Current\n"
                         "• Asbestos Awareness - Current"),
                tips=[
                    "List all construction tickets",
                    "Include license numbers",
                    "Mention state-specific requirements",
                ],
            ),
        ],
        keywords=["White Card", "construction", "builder", "carpenter", "electrician", "plumber",
                  "Sydney", "Melbourne", "Brisbane"],
    ),
    ResumeTemplate(
        id="education-teacher",
        name="Teacher - Education Professional",
        industry="Education",
        industry_id="education",
        description="For teachers in Australian schools (primary/secondary)",
        visa_optimized=True,
        ats_score=90,
        sections=[
            TemplateSection(
                title="PROFESSIONAL SUMMARY",
                order=1,
                required=True,
                placeholder=("Passionate Secondary Mathematics Teacher with [X] years in NSW public schools. "
                             "Full registration with NESA and proven HSC results."),
                tips=[
                    "Mention state registration (NESA, VIT, QCT)",
                    "Include subject areas and year levels",
                    "Highlight NAPLAN/HSC/VCE experience",
                ],
            ),
            TemplateSection(
                title="REGISTRATION & ACCREDITATION",
                order=2,
                required=True,
                content=("• NESA Registration: Full Registration (000000)\n"
                         "• Working with Children Check: NSW00000000\n"
                         "• First Aid & CPR: Current\n"
                         "• Anaphylaxis Training: Current\n"
                         "• Child Protection Training: Completed 2024"),
                tips=[
                    "Include teacher registration number",
                    "List mandatory training",
                    "Mention additional accreditations",
                ],
            ),
        ],
        keywords=["teacher", "NESA", "VIT", "education", "school", "HSC", "VCE", "NAPLAN", "curriculum",
                  "classroom"],
    ),
]

CONTACT_FIELDS = ("email", "phone", "location")


def get_template_by_industry(industry: str) -> Optional[ResumeTemplate]:
    """
    Find the template for an industry.

    Accepts the template's industry label ("Mining & Resources"), its id
    ("mining-fifo"), or any identifier or alias of the keyword database
    ("agriculture_mining", "banking"). Matching is case-insensitive.
    """
    normalized = industry.lower().strip()

    for template in AUSTRALIAN_TEMPLATES:
        if normalized in (template.industry.lower(), template.id, template.industry_id):
            return template

    industry_data = get_industry_by_name(normalized)
    if industry_data is None:
        return None

    for template in AUSTRALIAN_TEMPLATES:
        if INDUSTRY_DATABASE[template.industry_id] is industry_data:
            return template

    return None


def get_available_industries() -> List[str]:
    """Industry labels that have a template, in template order."""
    return list(dict.fromkeys(template.industry for template in AUSTRALIAN_TEMPLATES))


def generate_from_template(template: ResumeTemplate, user_data: Optional[Dict[str, str]] = None) -> str:
    """
    Render a template as plain resume text.

    Args:
        template: Template to render
        user_data: Optional name, email, phone and location for the contact block;
            the block is only written when a name is given

    Returns:
        Resume text with underlined section headers in section order
    """
    lines: List[str] = []

    if user_data and user_data.get("name"):
        lines.append(user_data["name"])
        contact = [user_data[key] for key in CONTACT_FIELDS if user_data.get(key)]
        if contact:
            lines.append(" | ".join(contact))
        lines.append("")

    for section in sorted(template.sections, key=lambda s: s.order):
        lines.append(section.title)
        lines.append("=" * len(section.title))
        lines.append("")
        body = section.content or section.placeholder
        if body:
            lines.append(body)
            lines.append("")

    return "\n".join(lines) + "\n"


def export_template(template: ResumeTemplate) -> str:
    """Serialize a template as indented JSON for customization."""
    return json.dumps(asdict(template), indent=2, ensure_ascii=False)
