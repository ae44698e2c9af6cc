"""
ATS scoring engine for ResumeForge.

Combines term-frequency keyword overlap, format checks, readability checks,
section completeness and Australian market relevance into a 0-100 score.
"""

import math
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity


AUSTRALIAN_KEYWORDS = {
    "visa": ["PR", "permanent resident", "citizen", "work rights", "visa status", "eligible to work"],
    "locations": ["Sydney", "Melbourne", "Brisbane", "Perth", "Adelaide", "Canberra", "Darwin", "Hobart"],
    "qualifications": ["TAFE", "VET", "university", "bachelor", "master", "diploma", "certificate"],
    "industries": {
        "mining": ["FIFO", "DIDO", "mine site", "resources", "iron ore", "coal", "LNG"],
        "healthcare": ["AHPRA", "registration", "Medicare", "PBS", "aged care", "NDIS"],
        "construction": ["white card", "blue card", "working at heights", "confined spaces"],
        "finance": ["CPA", "CA", "ASIC", "ATO", "superannuation", "SMSF"],
        "tech": ["NBN", "cloud", "agile", "scrum", "DevOps", "cybersecurity"],
    },
}

STOP_WORDS = frozenset(["the", "and", "for", "are", "but", "has", "had", "was", "were", "been"])

IMPORTANT_WORD_PATTERNS = [
    re.compile(r"\b(python|java|javascript|react|node|aws|azure|docker|kubernetes)\b", re.IGNORECASE),
    re.compile(r"\b(agile|scrum|kanban|waterfall)\b", re.IGNORECASE),
    re.compile(r"\b(leadership|management|communication|teamwork)\b", re.IGNORECASE),
    re.compile(r"\b(bachelor|master|degree|certification)\b", re.IGNORECASE),
]

SECTION_PATTERNS = {
    "contact": re.compile(r"email|phone|address|linkedin", re.IGNORECASE),
    "summary": re.compile(r"summary|objective|profile", re.IGNORECASE),
    "experience": re.compile(r"experience|employment|work history", re.IGNORECASE),
    "education": re.compile(r"education|qualification|degree", re.IGNORECASE),
    "skills": re.compile(r"skills|competencies|expertise", re.IGNORECASE),
}

ACTION_VERBS = ["managed", "led", "developed", "created", "improved", "achieved", "delivered"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


@dataclass
class ATSScore:
    """Multi-signal ATS score for a resume."""
    overall_score: int
    breakdown: Dict[str, int]
    suggestions: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    found_keywords: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class TFIDFAnalyzer:
    """Term-frequency overlap between a resume and a job description."""

    def tokenize(self, text: str) -> List[str]:
        words = re.sub(r"[^\w\s]", " ", text.lower()).split()
        return [word for word in words if len(word) > 2 and word not in STOP_WORDS]

    def calculate_tf(self, text: str) -> Dict[str, float]:
        """Normalised term frequency of each token."""
        words = self.tokenize(text)
        if not words:
            return {}
        total = len(words)
        return {word: count / total for word, count in Counter(words).items()}

    def analyze(self, resume: str, job_description: str) -> Tuple[float, Dict[str, float]]:
        """
        Score term overlap.

        Returns:
            (score in 0-100, weight of every job term also in the resume)
        """
        resume_tf = self.calculate_tf(resume)
        job_tf = self.calculate_tf(job_description)

        keywords = {}
        for word, tf_score in job_tf.items():
            if word in resume_tf:
                keywords[word] = tf_score * resume_tf[word]

        match_score = sum(keywords.values())
        score = min(100.0, match_score / max(len(job_tf), 1) * 500)
        return score, keywords


class FormatAnalyzer:
    """Checks resume formatting for ATS compatibility."""

    def analyze(self, resume_text: str) -> Tuple[int, List[str]]:
        issues = []
        score = 100

        if "|" in resume_text or "│" in resume_text:
            issues.append("Avoid tables and complex formatting")
            score -= 15

        if not re.search(r"[A-Z]{2,}", resume_text):
            issues.append("Add clear section headers in CAPS")
            score -= 10

        if "•" not in resume_text and "-" not in resume_text:
            issues.append("Use bullet points for better readability")
            score -= 10

        lowered = resume_text.lower()
        for section in ("experience", "education", "skills"):
            if section not in lowered:
                issues.append(f"Missing {section} section")
                score -= 15

        if not re.search(r"\S+@\S+\.\S+", resume_text):
            issues.append("Add email address")
            score -= 10

        if not re.search(r"\d{10}|\d{4}\s\d{3}\s\d{3}", resume_text):
            issues.append("Add phone number")
            score -= 10

        return max(0, score), issues


class ReadabilityAnalyzer:
    """Checks sentence length, action verbs and quantified achievements."""

    def analyze(self, text: str) -> Tuple[int, List[str]]:
        sentences = [s for s in re.split(r"[.!?]+", text) if s.strip()]
        words = text.split()

        avg_words_per_sentence = len(words) / max(len(sentences), 1)
        suggestions = []
        score = 100

        if avg_words_per_sentence > 20:
            suggestions.append("Use shorter sentences (aim for 15-20 words)")
            score -= 15

        lowered = text.lower()
        if not any(verb in lowered for verb in ACTION_VERBS):
            suggestions.append("Start bullet points with action verbs")
            score -= 10

        if not re.search(r"\d", text):
            suggestions.append("Add quantifiable achievements (numbers, percentages)")
            score -= 15

        return max(0, score), suggestions


class ATSEngine:
    """Scores resumes the way applicant tracking systems filter them."""

    def __init__(self):
        self.tfidf_analyzer = TFIDFAnalyzer()
        self.format_analyzer = FormatAnalyzer()
        self.readability_analyzer = ReadabilityAnalyzer()

    def score_resume(self, resume: str, job_description: Optional[str] = None) -> ATSScore:
        """
        Comprehensive ATS scoring.

        Args:
            resume: Resume plain text
            job_description: Optional job description for keyword matching

        Returns:
            ATSScore with a 0-100 overall score and per-component breakdown
        """
        suggestions: List[str] = []
        warnings: List[str] = []

        keyword_score = 15.0
        found_keywords: List[str] = []
        missing_keywords: List[str] = []

        if job_description:
            tfidf_score, keywords = self.tfidf_analyzer.analyze(resume, job_description)
            keyword_score = min(30.0, tfidf_score * 0.3)

            top_keywords = sorted(keywords.items(), key=lambda item: item[1], reverse=True)[:10]
            found_keywords = [word for word, weight in top_keywords if weight > 0.01]

            resume_lower = resume.lower()
            missing_keywords = [word for word in self.extract_important_words(job_description)
                                if word not in resume_lower]
            if missing_keywords:
                suggestions.append(f"Add these keywords: {', '.join(missing_keywords[:5])}")

        format_score, format_issues = self.format_analyzer.analyze(resume)
        warnings.extend(format_issues)

        readability_score, readability_suggestions = self.readability_analyzer.analyze(resume)
        suggestions.extend(readability_suggestions)

        breakdown = {
            "keyword_match": round_half_up(keyword_score),
            "formatting": round_half_up(format_score / 100 * 25),
            "readability": round_half_up(readability_score / 100 * 20),
            "sections": round_half_up(self.analyze_sections(resume)),
            "australian": round_half_up(self.analyze_australian_relevance(resume)),
        }
        overall_score = sum(breakdown.values())

        if overall_score < 70:
            suggestions.insert(0, "Your resume needs significant improvement for ATS systems")
        elif overall_score < 85:
            suggestions.insert(0, "Your resume is good but can be optimized further")
        else:
            suggestions.insert(0, "Excellent! Your resume is well-optimized for ATS")

        return ATSScore(
            overall_score=overall_score,
            breakdown=breakdown,
            suggestions=suggestions,
            missing_keywords=missing_keywords,
            found_keywords=found_keywords,
            warnings=warnings,
        )

    def extract_important_words(self, text: str) -> List[str]:
        """Skill, method, soft-skill and degree words named in a job description."""
        important: Dict[str, None] = {}
        for pattern in IMPORTANT_WORD_PATTERNS:
            for match in pattern.findall(text):
                important.setdefault(match.lower(), None)
        return list(important)

    def analyze_sections(self, resume: str) -> float:
        per_section = 15 / len(SECTION_PATTERNS)
        return sum(per_section for pattern in SECTION_PATTERNS.values() if pattern.search(resume))

    def analyze_australian_relevance(self, resume: str) -> int:
        """Score (0-10) for Australian visa, location and qualification cues."""
        resume_lower = resume.lower()
        score = 0

        # Whole words only, "pr" would otherwise match inside "project"
        if any(re.search(rf"\b{re.escape(term.lower())}\b", resume_lower)
               for term in AUSTRALIAN_KEYWORDS["visa"]):
            score += 3
        if any(city.lower() in resume_lower for city in AUSTRALIAN_KEYWORDS["locations"]):
            score += 3
        if any(qual.lower() in resume_lower for qual in AUSTRALIAN_KEYWORDS["qualifications"]):
            score += 2
        if "australia" in resume_lower:
            score += 2

        return min(10, score)

    def get_industry_suggestions(self, resume: str, industry: str) -> List[str]:
        """Suggest regional keywords of an industry missing from the resume."""
        industry_keywords = AUSTRALIAN_KEYWORDS["industries"].get(industry)
        if not industry_keywords:
            return []

        resume_lower = resume.lower()
        missing = [keyword for keyword in industry_keywords if keyword.lower() not in resume_lower]
        if not missing:
            return []
        return [f"Consider adding {industry} keywords: {', '.join(missing[:3])}"]


def tfidf_cosine(text_a: str, text_b: str) -> float:
    """
    TF-IDF cosine similarity of two texts.

    Returns:
        Similarity in [0, 1]; 0.0 when either text has no usable terms
    """
    if not text_a or not text_b or not text_a.strip() or not text_b.strip():
        return 0.0

    vectorizer = TfidfVectorizer(stop_words="english", ngram_range=(1, 2))
    try:
        matrix = vectorizer.fit_transform([text_a, text_b])
    except ValueError:
        # Raised when both documents contain only stop words
        return 0.0

    similarity = float(cosine_similarity(matrix[0:1], matrix[1:2])[0][0])
    return max(0.0, min(1.0, similarity))


_engine: Optional[ATSEngine] = None


def get_ats_engine() -> ATSEngine:
    """Get the shared ATS engine instance."""
    global _engine
    if _engine is None:
        _engine = ATSEngine()
    return _engine
