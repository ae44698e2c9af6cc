"""
Industry detection for ResumeForge.

Scores every industry in the keyword database against a resume (and optional
job description) using job titles, skills, tools, certifications, indicator
phrases, employer names and keyword density.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .industry_keywords import INDUSTRY_DATABASE


# Phrases that point strongly at one industry; searched in resume + job description
STRONG_INDICATORS: Dict[str, List[str]] = {
    "technology": ["software engineer", "developer", "programmer", "coding", "tech stack"],
    "data_science": ["data scientist", "machine learning", "ai model", "data analysis"],
    "finance": ["financial analyst", "investment", "portfolio", "trading", "banking"],
    "healthcare": ["patient care", "clinical", "medical", "hospital", "healthcare"],
    "marketing": ["marketing campaign", "seo", "social media", "brand", "advertising"],
    "sales": ["sales target", "revenue", "client acquisition", "business development"],
    "hr": ["recruitment", "talent acquisition", "employee relations", "hr"],
    "education": ["teaching", "curriculum", "students", "classroom", "education"],
    "construction": ["construction site", "building", "contractor", "safety compliance"],
    "retail": ["retail", "store management", "customer service", "merchandising"],
    "manufacturing": ["production", "manufacturing", "quality control", "assembly"],
    "hospitality": ["hotel", "restaurant", "guest service", "hospitality"],
    "legal": ["legal", "compliance", "contracts", "litigation", "law firm"],
    "government": ["government", "public service", "policy", "department"],
    "logistics": ["supply chain", "logistics", "warehouse", "freight", "distribution"],
    "real_estate": ["real estate", "property", "leasing", "tenant", "realtor"],
    "media": ["journalism", "media", "content creation", "broadcasting", "publishing"],
    "creative": ["design", "creative", "ui/ux", "graphic", "visual"],
    "engineering": ["engineer", "cad", "technical design", "mechanical", "electrical"],
    "agriculture_mining": ["mining", "agriculture", "farming", "resources", "extraction"],
    "nonprofit": ["nonprofit", "charity", "fundraising", "volunteer", "ngo"],
}

TITLE_PATTERNS = [
    re.compile(r"\b(?:current|previous|position|role|title)[\s:]+([^\n,]+)", re.IGNORECASE),
    re.compile(r"\b(?:working as|worked as|employed as)\s+(?:an?\s+)?([^\n,]+)", re.IGNORECASE),
]
CAPITALISED_LINE = re.compile(r"^([A-Z][^•\n]+)$", re.MULTILINE)

MAX_TITLE_LENGTH = 50


@dataclass
class IndustryMatch:
    """A scored industry with the reasons it was picked."""
    industry: str
    confidence: float
    reasons: List[str] = field(default_factory=list)


@dataclass
class IndustryDetectionResult:
    """Outcome of industry detection."""
    primary: IndustryMatch
    secondary: List[IndustryMatch] = field(default_factory=list)
    all_detected: List[str] = field(default_factory=list)


class _IndustryScore:
    __slots__ = ("score", "reasons")

    def __init__(self):
        self.score = 0.0
        self.reasons: List[str] = []

    def add(self, points: float, reason: Optional[str] = None):
        self.score += points
        if reason:
            self.reasons.append(reason)


def _confidence(score: float) -> float:
    return min(score / 10, 1.0)


def _term_pattern(term: str) -> str:
    # Terms may end in symbols, e.g. "C++" or "UI/UX"
    return rf"(?<!\w){re.escape(term.lower())}(?!\w)"


def _has_term(term: str, content: str) -> bool:
    return re.search(_term_pattern(term), content) is not None


def _count_term(term: str, content: str) -> int:
    """Whole-word occurrences of a keyword in lower-cased content."""
    return len(re.findall(_term_pattern(term), content))


class IndustryDetector:
    """Detects the industries a resume belongs to."""

    def detect(self, resume_text: str, job_description: Optional[str] = None) -> IndustryDetectionResult:
        """
        Detect industries from resume content.

        Args:
            resume_text: Resume plain text
            job_description: Optional job description used for indicator phrases

        Returns:
            IndustryDetectionResult with primary, up to 3 secondary industries
            and every industry that scored
        """
        resume_text = resume_text or ""
        content = resume_text.lower()
        combined = content + " " + (job_description or "").lower()

        scores = {industry: _IndustryScore() for industry in INDUSTRY_DATABASE}

        self._detect_by_job_titles(resume_text, scores)
        self._detect_by_skills_and_tools(content, scores)
        self._detect_by_certifications(content, scores)
        self._detect_by_keywords(combined, scores)
        self._detect_by_companies(content, scores)
        self._boost_by_keyword_density(content, scores)

        ranked = sorted(
            ((industry, data) for industry, data in scores.items() if data.score > 0),
            key=lambda item: item[1].score,
            reverse=True,
        )

        if ranked:
            industry, data = ranked[0]
            primary = IndustryMatch(industry, _confidence(data.score), data.reasons)
        else:
            primary = IndustryMatch("general", 0.1, ["No specific industry detected"])

        secondary = [
            IndustryMatch(industry, _confidence(data.score), data.reasons)
            for industry, data in ranked[1:4]
        ]

        return IndustryDetectionResult(
            primary=primary,
            secondary=secondary,
            all_detected=[industry for industry, _ in ranked],
        )

    def _extract_candidate_titles(self, text: str) -> List[str]:
        found = []
        for pattern in TITLE_PATTERNS:
            for match in pattern.finditer(text):
                found.append(match.group(1))
        for match in CAPITALISED_LINE.finditer(text):
            found.append(match.group(1))

        return [title.strip().lower() for title in found
                if title.strip() and len(title) < MAX_TITLE_LENGTH]

    def _detect_by_job_titles(self, text: str, scores: Dict[str, _IndustryScore]):
        """Score industries whose job titles appear in the resume."""
        candidates = self._extract_candidate_titles(text)
        if not candidates:
            return

        for industry_key, industry in INDUSTRY_DATABASE.items():
            for job_title in industry["job_titles"]:
                title_lower = job_title.lower()
                if any(title_lower in found or found in title_lower for found in candidates):
                    scores[industry_key].add(5, f'Job title: "{job_title}"')

    def _detect_by_skills_and_tools(self, content: str, scores: Dict[str, _IndustryScore]):
        for industry_key, industry in INDUSTRY_DATABASE.items():
            matched_skills = [skill for skill in industry["keywords"]["technical"]
                              if _has_term(skill, content)]
            matched_tools = [tool for tool in industry["keywords"]["tools"]
                             if _has_term(tool, content)]

            if not matched_skills and not matched_tools:
                continue

            data = scores[industry_key]
            data.add(len(matched_skills) * 2 + len(matched_tools) * 3)
            if matched_skills:
                data.reasons.append(f"Skills: {', '.join(matched_skills[:3])}")
            if matched_tools:
                data.reasons.append(f"Tools: {', '.join(matched_tools[:3])}")

    def _detect_by_certifications(self, content: str, scores: Dict[str, _IndustryScore]):
        for industry_key, industry in INDUSTRY_DATABASE.items():
            matched = [cert for cert in industry["keywords"]["certifications"]
                       if _has_term(cert, content)]
            if matched:
                scores[industry_key].add(len(matched) * 4, f"Certifications: {', '.join(matched)}")

    def _detect_by_keywords(self, content: str, scores: Dict[str, _IndustryScore]):
        for industry_key, indicators in STRONG_INDICATORS.items():
            matched = [indicator for indicator in indicators if _has_term(indicator, content)]
            if matched:
                scores[industry_key].add(len(matched) * 3, f"Keywords: {', '.join(matched[:3])}")

    def _detect_by_companies(self, content: str, scores: Dict[str, _IndustryScore]):
        for industry_key, industry in INDUSTRY_DATABASE.items():
            for company in industry.get("companies", []):
                if _has_term(company, content):
                    scores[industry_key].add(4, f"Company: {company}")
                    break

    def _boost_by_keyword_density(self, content: str, scores: Dict[str, _IndustryScore]):
        """Boost industries whose keywords make up more than 1% of the words."""
        word_count = len(content.split())
        if word_count == 0:
            return

        for industry_key, industry in INDUSTRY_DATABASE.items():
            keywords = industry["keywords"]
            all_keywords = keywords["technical"] + keywords["tools"] + keywords.get("australian", [])

            keyword_count = sum(_count_term(keyword, content) for keyword in all_keywords)
            density = keyword_count / word_count * 100

            if density > 1:
                boost = min(density * 2, 10)
                reason = f"High keyword density ({density:.1f}%)" if boost > 2 else None
                scores[industry_key].add(boost, reason)

    @staticmethod
    def get_relevant_keywords(industries: List[str]) -> List[str]:
        """
        Keywords worth targeting for the given industries.

        Technical keywords, the first 5 tools and first 3 Australian terms of
        each industry, plus the first 5 general soft skills.
        """
        keywords: Dict[str, None] = {}

        for industry_name in industries:
            industry = INDUSTRY_DATABASE.get(industry_name)
            if not industry:
                continue
            for keyword in industry["keywords"]["technical"]:
                keywords.setdefault(keyword, None)
            for keyword in industry["keywords"]["tools"][:5]:
                keywords.setdefault(keyword, None)
            for keyword in industry["keywords"].get("australian", [])[:3]:
                keywords.setdefault(keyword, None)

        for keyword in INDUSTRY_DATABASE["general"]["keywords"]["soft"][:5]:
            keywords.setdefault(keyword, None)

        return list(keywords)


def detect_industry(resume_text: str, job_description: Optional[str] = None) -> IndustryDetectionResult:
    """Convenience wrapper around IndustryDetector.detect."""
    return IndustryDetector().detect(resume_text, job_description)
