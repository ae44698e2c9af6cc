"""
Keyword integration for ResumeForge.

Adds missing keywords to resume text as natural sentences placed in the most
suitable section (skills, summary, experience), or in a new CORE COMPETENCIES
section. SimpleKeywordIntegrator offers plain bullet-list alternatives.
"""

import random
import re
from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console

from .config import get_config_manager
from .industry import IndustryDetector
from .industry_keywords import INDUSTRY_DATABASE

console = Console()

SKILLS_HEADERS = "CORE COMPETENCIES|TECHNICAL SKILLS?|KEY SKILLS?|COMPETENCIES|SKILLS?"
SUMMARY_HEADERS = "PROFESSIONAL SUMMARY|SUMMARY|PROFILE|OBJECTIVE"
EXPERIENCE_HEADERS = "PROFESSIONAL EXPERIENCE|WORK EXPERIENCE|EMPLOYMENT HISTORY|EXPERIENCE"
SIMPLE_SUMMARY_HEADERS = "PROFESSIONAL SUMMARY|SUMMARY|PROFILE"

# A section body stops at a line opening with 3+ capitals, a blank line or the end of text
SECTION_END = r"(?=\n[A-Z]{3,}|\n\n|\Z)"

ENHANCED_BULLET_TEMPLATES = {
    "technology": [
        "{keyword} development and implementation",
        "Proficient in {keyword} with production experience",
        "{keyword} (3+ years professional experience)",
    ],
    "finance": [
        "{keyword} analysis and reporting",
        "Advanced {keyword} capabilities",
        "{keyword} compliance and best practices",
    ],
    "healthcare": [
        "{keyword} protocols and procedures",
        "Certified in {keyword} methodologies",
        "{keyword} patient care standards",
    ],
    "marketing": [
        "{keyword} strategy and execution",
        "{keyword} campaign management",
        "Data-driven {keyword} optimization",
    ],
    "default": [
        "{keyword} implementation and optimization",
        "Strong {keyword} capabilities",
        "{keyword} best practices",
    ],
}

SUMMARY_TEMPLATES = [
    "Demonstrated expertise in {keyword} with proven track record of success.",
    "Strong background in {keyword} and related technologies.",
    "Experienced professional with comprehensive {keyword} skills.",
    "Proven ability to leverage {keyword} for business impact.",
]

ACHIEVEMENT_TEMPLATES = {
    "technology": [
        "Implemented {keyword} solutions resulting in 30% efficiency improvement",
        "Led {keyword} initiatives across cross-functional teams",
        "Optimized processes using {keyword} methodologies",
    ],
    "finance": [
        "Applied {keyword} to improve financial reporting accuracy by 25%",
        "Utilized {keyword} for risk assessment and mitigation",
        "Streamlined {keyword} processes reducing cycle time by 40%",
    ],
    "healthcare": [
        "Implemented {keyword} protocols improving patient satisfaction scores",
        "Trained team members on {keyword} best practices",
        "Enhanced quality measures through {keyword} implementation",
    ],
    "default": [
        "Successfully utilized {keyword} to achieve project objectives",
        "Applied {keyword} skills to improve operational efficiency",
        "Demonstrated proficiency in {keyword} through successful project delivery",
    ],
}

GENERIC_SENTENCES = [
    "Extensive experience with {keyword} in professional settings",
    "Certified and proficient in {keyword} methodologies",
    "Track record of successful {keyword} implementation",
]

DEFAULT_CORE_SKILLS = ["Communication", "Problem Solving", "Team Collaboration"]


def find_section(content: str, headers: str) -> Optional[re.Match]:
    """
    Locate a section introduced by one of the given header names.

    Headers are matched case-insensitively at the start of a line and may be
    followed by a colon. The match covers the header line and the body.
    """
    pattern = rf"^(?i:{headers})[ \t:]*(?:\n(?s:.*?))?{SECTION_END}"
    return re.search(pattern, content, re.MULTILINE)


def _bullets(keywords: List[str]) -> str:
    return "\n".join(f"• {keyword}" for keyword in keywords)


def _format_industry(industry: str) -> str:
    label = industry.replace("_", " ")
    return label[:1].upper() + label[1:]


@dataclass
class KeywordIntegrationResult:
    """Outcome of adding keywords to a resume."""
    updated_resume: str
    added_keywords: List[str] = field(default_factory=list)
    integration_method: str = "none"
    suggested_sentences: List[str] = field(default_factory=list)


@dataclass
class SimpleIntegrationResult:
    """Outcome of the plain bullet-list integration."""
    updated_resume: str
    added_keywords: List[str] = field(default_factory=list)
    message: str = ""


class SimpleKeywordIntegrator:
    """Adds keywords as plain bullets without rewriting existing text."""

    def integrate_keywords(self, resume_content: str, keywords: List[str]) -> SimpleIntegrationResult:
        """
        Add absent keywords as bullets under the skills section.

        Creates a CORE COMPETENCIES section after the summary (or after the
        contact lines) when no skills section exists.
        """
        if not resume_content or not isinstance(resume_content, str):
            return SimpleIntegrationResult("", [], "Invalid resume content")

        content_lower = resume_content.lower()
        new_keywords = [keyword for keyword in keywords if keyword.lower() not in content_lower]

        if not new_keywords:
            return SimpleIntegrationResult(resume_content, [], "All keywords already present in resume")

        header = re.search(rf"^(?i:{SKILLS_HEADERS})[ \t:]*\n", resume_content, re.MULTILINE)
        has_core_competencies = "core competencies" in content_lower

        if header:
            position = header.end()
            updated = resume_content[:position] + _bullets(new_keywords) + "\n" + resume_content[position:]
        elif not has_core_competencies:
            updated = self._insert_core_competencies(resume_content, new_keywords)
        else:
            updated = self._extend_core_competencies(resume_content, new_keywords)

        return SimpleIntegrationResult(
            updated,
            new_keywords,
            f"Successfully added {len(new_keywords)} keywords",
        )

    def _insert_core_competencies(self, content: str, keywords: List[str]) -> str:
        skills_section = f"\n\nCORE COMPETENCIES\n{_bullets(keywords)}\n"

        summary = find_section(content, SIMPLE_SUMMARY_HEADERS)
        if summary:
            return content[:summary.end()] + skills_section + content[summary.end():]

        lines = content.split("\n")
        insert_line = min(5, len(lines))
        lines[insert_line:insert_line] = skills_section.split("\n")
        return "\n".join(lines)

    def _extend_core_competencies(self, content: str, keywords: List[str]) -> str:
        """Add bullets to a CORE COMPETENCIES block the header pattern missed."""
        index = content.lower().find("core competencies")
        newline = content.find("\n", index)
        if newline == -1:
            return content + f"\n{_bullets(keywords)}"

        after_header = newline + 1
        insert_position = len(content)
        if not content.endswith("\n"):
            keywords_block = "\n" + _bullets(keywords)
        else:
            keywords_block = _bullets(keywords) + "\n"

        offset = after_header
        for i, line in enumerate(content[after_header:].split("\n")):
            if re.match(r"[A-Z]{3,}", line) or (not line.strip() and i > 0):
                insert_position = offset
                keywords_block = _bullets(keywords) + "\n"
                break
            offset += len(line) + 1

        return content[:insert_position] + keywords_block + content[insert_position:]

    def append_keywords(self, resume_content: str, keywords: List[str]) -> SimpleIntegrationResult:
        """Append an ADDITIONAL SKILLS AND KEYWORDS section at the end."""
        if not resume_content or not keywords:
            return SimpleIntegrationResult(resume_content or "", [], "No keywords to add")

        section = f"\n\nADDITIONAL SKILLS AND KEYWORDS\n{_bullets(keywords)}\n"
        return SimpleIntegrationResult(
            resume_content + section,
            list(keywords),
            f"Added {len(keywords)} keywords to the end of resume",
        )

    def simple_replace(self, resume_content: str, keywords: List[str]) -> str:
        """Append a comma list to the SKILLS block, or add a KEY SKILLS section."""
        match = re.search(r"(?i:SKILLS)(?s:.*?)(?=\n[A-Z]{3,}|\Z)", resume_content)
        if match:
            return (resume_content[:match.end()] + "\n" + ", ".join(keywords)
                    + resume_content[match.end():])
        return resume_content + "\n\nKEY SKILLS\n" + ", ".join(keywords)


class KeywordIntegrator:
    """Places keywords into resume sections as natural sentences."""

    def __init__(self, seed: Optional[int] = None, min_content_length: Optional[int] = None):
        config = get_config_manager()
        if seed is None:
            seed = config.get('integration', 'random_seed')
        if min_content_length is None:
            min_content_length = config.get('integration', 'min_content_length')

        self.random = random.Random(seed)
        self.min_content_length = min_content_length
        self.detector = IndustryDetector()
        self.simple_integrator = SimpleKeywordIntegrator()

    def integrate_keywords(self,
                           resume_content: str,
                           keywords: List[str],
                           job_description: Optional[str] = None,
                           use_smart_integration: Optional[bool] = None) -> KeywordIntegrationResult:
        """
        Integrate several keywords, choosing smart or simple placement.

        Args:
            resume_content: Resume plain text
            keywords: Keywords to add
            job_description: Optional job description used for industry detection
            use_smart_integration: Force smart (True) or simple (False) mode;
                defaults to the integration.smart setting

        Returns:
            KeywordIntegrationResult with method "smart" or "simple"
        """
        if use_smart_integration is None:
            use_smart_integration = get_config_manager().get('integration', 'smart')

        if (not use_smart_integration or not resume_content
                or len(resume_content) < self.min_content_length):
            simple = self.simple_integrator.integrate_keywords(resume_content, keywords)
            return KeywordIntegrationResult(
                updated_resume=simple.updated_resume,
                added_keywords=simple.added_keywords,
                integration_method="simple",
            )

        result = self._integrate_each(resume_content, keywords, job_description)
        result.integration_method = "smart"
        return result

    def integrate_multiple_keywords(self,
                                    resume_content: str,
                                    keywords: List[str],
                                    job_description: Optional[str] = None) -> KeywordIntegrationResult:
        """Integrate keywords one after another with smart placement."""
        result = self._integrate_each(resume_content, keywords, job_description)
        result.integration_method = "batch_integration"
        return result

    def _integrate_each(self, resume_content: str, keywords: List[str],
                        job_description: Optional[str]) -> KeywordIntegrationResult:
        combined = KeywordIntegrationResult(updated_resume=resume_content)

        for keyword in keywords:
            result = self.integrate_keyword(combined.updated_resume, keyword, job_description)
            if result.added_keywords:
                combined.updated_resume = result.updated_resume
                combined.added_keywords.extend(result.added_keywords)
                combined.suggested_sentences.extend(result.suggested_sentences)

        return combined

    def integrate_keyword(self,
                          resume_content: str,
                          keyword: str,
                          job_description: Optional[str] = None) -> KeywordIntegrationResult:
        """
        Add one keyword to the most suitable resume section.

        Tries the skills section, then the summary, then the experience
        section, and finally creates a CORE COMPETENCIES section.
        """
        if not resume_content or not isinstance(resume_content, str):
            console.print("[yellow]Warning: invalid resume content provided for keyword integration[/yellow]")
            return KeywordIntegrationResult(
                updated_resume=resume_content if isinstance(resume_content, str) else "",
                integration_method="invalid_content",
            )

        if not resume_content.strip():
            console.print("[yellow]Warning: resume content is empty[/yellow]")
            return KeywordIntegrationResult(updated_resume=resume_content, integration_method="empty_content")

        if keyword.lower() in resume_content.lower():
            return KeywordIntegrationResult(updated_resume=resume_content, integration_method="already_exists")

        industry = self.detector.detect(resume_content, job_description).primary.industry

        for strategy in (self._try_skills_section,
                         self._try_summary_section,
                         self._try_experience_section,
                         self._create_new_skills_section):
            outcome = strategy(resume_content, keyword, industry)
            if outcome:
                updated, method = outcome
                return KeywordIntegrationResult(
                    updated_resume=updated,
                    added_keywords=[keyword],
                    integration_method=method,
                    suggested_sentences=self.generate_natural_sentences(keyword, industry),
                )

        return KeywordIntegrationResult(
            updated_resume=resume_content,
            suggested_sentences=self.generate_natural_sentences(keyword, industry),
        )

    def _try_skills_section(self, content: str, keyword: str, industry: str):
        match = find_section(content, SKILLS_HEADERS)
        if not match:
            return None

        section = match.group(0)
        if "•" in section or "-" in section:
            new_section = section.rstrip() + "\n• " + self.create_enhanced_bullet(keyword, industry)
            method = "skills_bullet"
        else:
            header_line, _, skill_lines = section.partition("\n")
            related = self.get_related_skills(keyword, industry)
            skill_group = f"{keyword} (including {', '.join(related[:2])})" if related else keyword
            if skill_lines.strip():
                new_section = header_line + "\n" + skill_lines.rstrip() + ", " + skill_group
            else:
                new_section = header_line + "\n" + skill_group
            method = "skills_list"

        return content[:match.start()] + new_section + content[match.end():], method

    def _try_summary_section(self, content: str, keyword: str, industry: str):
        match = find_section(content, SUMMARY_HEADERS)
        if not match:
            return None

        new_section = match.group(0).rstrip() + " " + self.create_summary_sentence(keyword, industry)
        return content[:match.start()] + new_section + content[match.end():], "summary_addition"

    def _try_experience_section(self, content: str, keyword: str, industry: str):
        match = find_section(content, EXPERIENCE_HEADERS)
        if not match:
            return None

        section = match.group(0)
        header_end = section.find("\n")
        if header_end == -1:
            return None
        first_entry = re.search(r"^[A-Z][^\n]*$", section[header_end + 1:], re.MULTILINE)
        if not first_entry:
            return None

        insert_at = header_end + 1 + first_entry.end()
        achievement = self.create_achievement_bullet(keyword, industry)
        new_section = section[:insert_at] + "\n• " + achievement + section[insert_at:]
        return content[:match.start()] + new_section + content[match.end():], "experience_achievement"

    def _create_new_skills_section(self, content: str, keyword: str, industry: str):
        summary = find_section(content, SUMMARY_HEADERS)
        if summary:
            insert_at = summary.end()
        else:
            insert_at = len("\n".join(content.split("\n")[:5]))

        related = self.get_related_skills(keyword, industry)
        section = ("\n\nCORE COMPETENCIES\n"
                   + self.create_professional_skills_content(keyword, related, industry)
                   + "\n")
        return content[:insert_at] + section + content[insert_at:], "new_skills_section"

    def create_enhanced_bullet(self, keyword: str, industry: str) -> str:
        templates = ENHANCED_BULLET_TEMPLATES.get(industry, ENHANCED_BULLET_TEMPLATES["default"])
        return self.random.choice(templates).format(keyword=keyword)

    def create_summary_sentence(self, keyword: str, industry: str) -> str:
        return self.random.choice(SUMMARY_TEMPLATES).format(keyword=keyword)

    def create_achievement_bullet(self, keyword: str, industry: str) -> str:
        templates = ACHIEVEMENT_TEMPLATES.get(industry, ACHIEVEMENT_TEMPLATES["default"])
        return self.random.choice(templates).format(keyword=keyword)

    def get_related_skills(self, keyword: str, industry: str) -> List[str]:
        """Up to 3 technical skills or tools of the industry related to the keyword."""
        industry_data = INDUSTRY_DATABASE.get(industry)
        if not industry_data:
            return []

        keyword_lower = keyword.lower()
        keyword_head = keyword_lower.split(" ")[0]
        related = []

        for skill in industry_data["keywords"]["technical"] + industry_data["keywords"]["tools"]:
            skill_lower = skill.lower()
            if skill_lower == keyword_lower:
                continue
            if keyword_head in skill_lower or skill_lower.split(" ")[0] in keyword_lower:
                related.append(skill)

        return related[:3]

    def create_professional_skills_content(self, keyword: str, related_skills: List[str], industry: str) -> str:
        industry_data = INDUSTRY_DATABASE.get(industry)
        core_skills = industry_data["keywords"]["soft"][:3] if industry_data else DEFAULT_CORE_SKILLS

        expertise = ", ".join([keyword] + related_skills)
        return (f"• Technical Expertise: {expertise}\n"
                f"• Professional Skills: {', '.join(core_skills)}\n"
                f"• Industry Knowledge: {_format_industry(industry)} best practices")

    def generate_natural_sentences(self, keyword: str, industry: str) -> List[str]:
        """Sentence options a user could paste into their resume."""
        sentences = [
            self.create_summary_sentence(keyword, industry),
            self.create_achievement_bullet(keyword, industry),
            self.create_enhanced_bullet(keyword, industry),
        ]
        sentences.extend(template.format(keyword=keyword) for template in GENERIC_SENTENCES)
        return sentences
