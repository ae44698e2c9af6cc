"""
ATS compatibility analysis for ResumeForge.

ATSAnalyzer blends industry keyword coverage and formatting checks with the
ATSEngine score. EnhancedATSAnalyzer adds semantic similarity from the
embedding model (or TF-IDF cosine when the model is unavailable).
ResumeOptimizer applies automatic fixes.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from rich.console import Console

from .config import get_config_manager
from .engine import ATSScore, get_ats_engine, round_half_up, tfidf_cosine
from .industry import IndustryDetector
from .industry_keywords import get_keywords_for_industries
from .integrator import KeywordIntegrator
from .semantic import SemanticMatchResult, get_semantic_matcher

console = Console()

# Australian terms that apply to every industry
UNIVERSAL_AU_KEYWORDS = [
    "Australian Standards", "Fair Work Act", "WHS", "OH&S",
    "GST", "ABN", "superannuation", "local experience",
    "permanent resident", "working rights", "Australian market"
]

UNIVERSAL_SOFT_SKILLS = [
    "communication", "teamwork", "problem solving", "time management",
    "attention to detail", "adaptability", "leadership", "critical thinking"
]

COMMON_JOB_WORDS = frozenset(["the", "and", "for", "with", "this", "that", "have", "from"])

WORK_AUTHORIZATION_TERMS = ["visa", "PR", "citizen", "work rights"]

# Regional keyword groups used by ATSEngine.get_industry_suggestions
ENGINE_INDUSTRY_GROUPS = {
    "technology": "tech",
    "data_science": "tech",
    "finance": "finance",
    "healthcare": "healthcare",
    "construction": "construction",
    "agriculture_mining": "mining",
}

HEADER_PATTERN = re.compile(r"\b(experience|education|skills|summary|objective)\b", re.IGNORECASE)
BULLET_PATTERN = re.compile(r"[•·▪▫◦‣⁃]|^\s*[-*]\s+", re.MULTILINE)
LAYOUT_PATTERN = re.compile(r"<table|<img|<graph", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(r"(?:\+61|\b0)[0-9\s-]{8,}\b")


@dataclass
class ATSIssue:
    """A problem found in a resume."""
    severity: str  # critical | warning | info
    category: str
    message: str
    fix: Optional[str] = None


@dataclass
class KeywordAnalysis:
    """Keyword coverage of a resume."""
    found: List[str]
    missing: List[str]
    density: float
    relevance: int


@dataclass
class FormattingAnalysis:
    """ATS-relevant formatting flags."""
    has_headers: bool
    has_bullet_points: bool
    has_clean_layout: bool
    has_parsable_contact: bool
    issues: List[str] = field(default_factory=list)


@dataclass
class ATSAnalysis:
    """Result of ATSAnalyzer.analyze."""
    score: int
    issues: List[ATSIssue]
    suggestions: List[str]
    keywords: KeywordAnalysis
    formatting: FormattingAnalysis
    engine_score: Optional[ATSScore] = None


@dataclass
class EnhancedATSAnalysis(ATSAnalysis):
    """ATS analysis extended with semantic scoring."""
    semantic_analysis: Optional[SemanticMatchResult] = None
    enhanced_score: int = 0
    score_breakdown: Dict[str, int] = field(default_factory=dict)
    confidence_level: str = "low"
    recommendations: List[str] = field(default_factory=list)
    semantic_method: str = "none"


@dataclass
class DetailedInsights:
    """Enhanced analysis plus industry advice."""
    analysis: EnhancedATSAnalysis
    industry_insights: List[str]
    improvement_potential: int


@dataclass
class OptimizationResult:
    """Resume text after automatic fixes."""
    content: str
    added_keywords: List[str] = field(default_factory=list)
    converted_bullets: bool = False
    analysis: Optional[ATSAnalysis] = None


class ATSAnalyzer:
    """Analyzes resume content for ATS compatibility."""

    def __init__(self, engine=None, detector: Optional[IndustryDetector] = None):
        self.engine = engine or get_ats_engine()
        self.detector = detector or IndustryDetector()

    def analyze(self, resume_content: str, job_description: Optional[str] = None) -> ATSAnalysis:
        """
        Analyze a resume.

        Args:
            resume_content: Resume plain text
            job_description: Optional job description; enables the engine score

        Returns:
            ATSAnalysis with a 0-100 score, issues, suggestions, keyword and
            formatting analysis
        """
        config = get_config_manager()
        issues: List[ATSIssue] = []
        suggestions: List[str] = []
        engine_result = None

        if job_description:
            engine_result = self.engine.score_resume(resume_content, job_description)
            suggestions = list(engine_result.suggestions)
            for warning in engine_result.warnings:
                issues.append(ATSIssue(severity="warning", category="formatting", message=warning))

        keywords = self.analyze_keywords(resume_content, job_description)
        formatting = self.analyze_formatting(resume_content)
        local_score = self.calculate_score(keywords, formatting, issues)

        if engine_result is not None:
            engine_weight = config.get('scoring', 'engine_weight')
            score = round_half_up(engine_result.overall_score * engine_weight
                                  + local_score * (1 - engine_weight))
        else:
            score = local_score

        if keywords.missing and not any("keywords" in s for s in suggestions):
            suggestions.append(f"Add these important keywords: {', '.join(keywords.missing[:5])}")

        if not formatting.has_headers:
            suggestions.append('Use clear section headers like "Experience", "Education", "Skills"')

        if not formatting.has_bullet_points:
            suggestions.append("Use bullet points to list your achievements and responsibilities")

        return ATSAnalysis(
            score=score,
            issues=issues,
            suggestions=suggestions,
            keywords=keywords,
            formatting=formatting,
            engine_score=engine_result,
        )

    def analyze_keywords(self, content: str, job_description: Optional[str] = None) -> KeywordAnalysis:
        """Coverage of detected-industry, regional and soft-skill keywords."""
        content_lower = content.lower()

        detection = self.detector.detect(content, job_description)
        industries = [detection.primary.industry] + [s.industry for s in detection.secondary[:2]]

        candidates = get_keywords_for_industries(industries) + UNIVERSAL_AU_KEYWORDS + UNIVERSAL_SOFT_SKILLS
        unique_keywords = list(dict.fromkeys(candidates))

        found = [keyword for keyword in unique_keywords if keyword.lower() in content_lower]
        missing = [keyword for keyword in unique_keywords if keyword.lower() not in content_lower]

        if job_description:
            for keyword in self.extract_job_keywords(job_description):
                if keyword not in content_lower and keyword not in found and keyword not in missing:
                    missing.append(keyword)

        word_count = max(len(content.split()), 1)
        density = len(found) / word_count * 100
        total = len(found) + len(missing)
        relevance = len(found) / total * 100 if total else 0

        max_missing = get_config_manager().get('scoring', 'max_missing_keywords')
        return KeywordAnalysis(
            found=found,
            missing=missing[:max_missing],
            density=math.floor(density * 10 + 0.5) / 10,
            relevance=round_half_up(relevance),
        )

    def analyze_formatting(self, content: str) -> FormattingAnalysis:
        issues = []

        has_headers = bool(HEADER_PATTERN.search(content))
        if not has_headers:
            issues.append("Missing standard section headers")

        has_bullet_points = bool(BULLET_PATTERN.search(content))
        if not has_bullet_points:
            issues.append("No bullet points detected")

        has_clean_layout = not LAYOUT_PATTERN.search(content)
        if not has_clean_layout:
            issues.append("Contains complex formatting that ATS cannot parse")

        has_parsable_contact = bool(EMAIL_PATTERN.search(content)) and bool(PHONE_PATTERN.search(content))
        if not has_parsable_contact:
            issues.append("Contact information may not be properly formatted")

        return FormattingAnalysis(
            has_headers=has_headers,
            has_bullet_points=has_bullet_points,
            has_clean_layout=has_clean_layout,
            has_parsable_contact=has_parsable_contact,
            issues=issues,
        )

    def calculate_score(self, keywords: KeywordAnalysis, formatting: FormattingAnalysis,
                        issues: List[ATSIssue]) -> int:
        """Local score: base 70 with keyword and formatting bonuses, clamped to 60-100."""
        score = 70
        found_count = len(keywords.found)

        if found_count >= 15:
            score += 20
        elif found_count >= 10:
            score += 15
        elif found_count >= 5:
            score += 10
        else:
            score += found_count * 2

        if formatting.has_headers:
            score += 5
        if formatting.has_bullet_points:
            score += 4
        if formatting.has_clean_layout:
            score += 3
        if formatting.has_parsable_contact:
            score += 3

        penalties = {"critical": 5, "warning": 2, "info": 1}
        for issue in issues:
            score -= penalties.get(issue.severity, 0)

        if 1 <= keywords.density <= 3:
            score += 5

        return max(60, min(100, score))

    @staticmethod
    def extract_job_keywords(job_description: str) -> List[str]:
        """First 30 distinct longer words of a job description."""
        words = re.sub(r"[^\w\s]", " ", job_description.lower()).split()
        keywords = [word for word in words if len(word) > 3 and word not in COMMON_JOB_WORDS]
        return list(dict.fromkeys(keywords))[:30]

    @staticmethod
    def generate_optimizations(analysis: ATSAnalysis) -> List[str]:
        """High-level optimization advice for an analysis."""
        optimizations = []

        if analysis.score < 50:
            optimizations.append("Major improvements needed for ATS compatibility")
        elif analysis.score < 75:
            optimizations.append("Good foundation, but needs optimization")
        else:
            optimizations.append("Resume is well-optimized for ATS systems")

        if len(analysis.keywords.missing) > 10:
            optimizations.append("Add more industry-relevant keywords from the job description")

        if not analysis.formatting.has_headers:
            optimizations.append("Structure your resume with clear section headers")

        if analysis.keywords.density < 2:
            optimizations.append("Increase keyword density by incorporating relevant terms naturally")

        if not any(keyword in UNIVERSAL_AU_KEYWORDS for keyword in analysis.keywords.found):
            optimizations.append("Consider mentioning your work rights or local experience in Australia")

        return optimizations


class EnhancedATSAnalyzer:
    """ATS analysis combined with semantic similarity."""

    def __init__(self, base_analyzer: Optional[ATSAnalyzer] = None, semantic_matcher=None,
                 use_semantic: Optional[bool] = None):
        self.base_analyzer = base_analyzer or ATSAnalyzer()
        self.engine = self.base_analyzer.engine
        self._semantic_matcher = semantic_matcher
        if use_semantic is None:
            use_semantic = get_config_manager().get('semantic', 'enabled')
        self.use_semantic = use_semantic

    @property
    def semantic_matcher(self):
        if self._semantic_matcher is None:
            self._semantic_matcher = get_semantic_matcher()
        return self._semantic_matcher

    def analyze(self, resume_content: str, job_description: Optional[str] = None) -> EnhancedATSAnalysis:
        """
        Perform analysis with semantic matching.

        Falls back to TF-IDF cosine similarity when embeddings are disabled
        or the embedding service is unavailable.
        """
        base = self.base_analyzer.analyze(resume_content, job_description)

        if not job_description:
            return EnhancedATSAnalysis(
                **vars(base),
                enhanced_score=base.score,
                score_breakdown={"keyword": base.score, "semantic": 0, "formatting": base.score},
                confidence_level="low",
                recommendations=[
                    "Add a job description to get semantic matching analysis",
                    "Semantic analysis can improve matching accuracy by 15-20%",
                ],
            )

        semantic_analysis, semantic_score, semantic_method = self._semantic_score(resume_content, job_description)

        engine_result = base.engine_score or self.engine.score_resume(resume_content, job_description)

        found = len(base.keywords.found)
        total = found + len(base.keywords.missing)
        keyword_score = min(100, round_half_up(found / total * 100)) if total else 0
        if not keyword_score:
            keyword_score = base.score

        formatting = base.formatting
        formatting_score = 25 * sum([
            formatting.has_headers,
            formatting.has_bullet_points,
            formatting.has_clean_layout,
            formatting.has_parsable_contact,
        ])

        breakdown = {
            "keyword": keyword_score,
            "semantic": semantic_score,
            "formatting": formatting_score,
        }

        scoring = get_config_manager().get('scoring')
        enhanced_score = round_half_up(
            breakdown["keyword"] * scoring["keyword_weight"]
            + breakdown["semantic"] * scoring["semantic_weight"]
            + breakdown["formatting"] * scoring["formatting_weight"]
        )

        semantic_confidence = semantic_analysis.confidence if semantic_analysis else 0.0

        suggestions = list(dict.fromkeys(
            base.suggestions
            + (semantic_analysis.suggestions if semantic_analysis else [])
            + engine_result.suggestions
        ))

        fields = vars(base).copy()
        fields.update(suggestions=suggestions, engine_score=engine_result)

        return EnhancedATSAnalysis(
            **fields,
            semantic_analysis=semantic_analysis,
            enhanced_score=enhanced_score,
            score_breakdown=breakdown,
            confidence_level=self.calculate_confidence(semantic_confidence, breakdown),
            recommendations=self.generate_recommendations(base, semantic_analysis, breakdown),
            semantic_method=semantic_method,
        )

    def _semantic_score(self, resume_content: str, job_description: str):
        """Return (semantic analysis, 0-100 score, method name)."""
        if self.use_semantic:
            try:
                console.print("[cyan]Performing semantic analysis...[/cyan]")
                result = self.semantic_matcher.calculate_similarity(resume_content, job_description)
                score = round_half_up(result.similarity_score * 100)
                console.print(f"[green]✓ Semantic analysis complete. Score: {score}[/green]")
                return result, score, "embedding"
            except (RuntimeError, ValueError) as e:
                console.print(f"[yellow]Semantic analysis failed, using TF-IDF similarity: {e}[/yellow]")

        score = round_half_up(tfidf_cosine(resume_content, job_description) * 100)
        return None, score, "tfidf"

    @staticmethod
    def calculate_confidence(semantic_confidence: float, breakdown: Dict[str, int]) -> str:
        average = (breakdown["keyword"] + breakdown["semantic"] + breakdown["formatting"]) / 3

        if semantic_confidence > 0.8 and average > 70:
            return "high"
        if semantic_confidence > 0.6 or average > 50:
            return "medium"
        return "low"

    @staticmethod
    def generate_recommendations(base: ATSAnalysis,
                                 semantic_analysis: Optional[SemanticMatchResult],
                                 breakdown: Dict[str, int]) -> List[str]:
        recommendations = []

        if semantic_analysis:
            if semantic_analysis.similarity_score < 0.5:
                recommendations.append(
                    "Low semantic match: Your resume content doesn't align well with the job requirements. "
                    "Consider rewriting key sections to better match the role."
                )
            elif semantic_analysis.similarity_score < 0.7:
                recommendations.append(
                    "Moderate semantic match: Good foundation, but incorporate more role-specific "
                    "language and concepts."
                )
            else:
                recommendations.append("Strong semantic match: Your resume aligns well with the job conceptually.")

            if semantic_analysis.missing_concepts:
                recommendations.append(
                    f"Add these missing concepts: {', '.join(semantic_analysis.missing_concepts[:3])}"
                )

        if breakdown["keyword"] < 50:
            recommendations.append(
                "Keyword optimization needed: Include more industry-specific terms and skills "
                "from the job description."
            )

        if breakdown["formatting"] < 60:
            recommendations.append("Improve formatting: Ensure clear headers, bullet points, and ATS-friendly layout.")

        has_work_rights = any(term in keyword
                              for keyword in base.keywords.found
                              for term in WORK_AUTHORIZATION_TERMS)
        if not has_work_rights:
            recommendations.append("Add work authorization status for Australian employers.")

        if breakdown["semantic"] > breakdown["keyword"] + 20:
            recommendations.append(
                "Your content is conceptually strong but lacks specific keywords. "
                "Add exact terms from the job posting."
            )
        elif breakdown["keyword"] > breakdown["semantic"] + 20:
            recommendations.append(
                "You have the right keywords but lack depth. Expand on your experience and achievements."
            )

        return recommendations

    def quick_score(self, resume_content: str, job_description: str) -> int:
        """Enhanced score, or the base score when the enhanced analysis fails."""
        try:
            return self.analyze(resume_content, job_description).enhanced_score
        except Exception as e:
            console.print(f"[red]Quick score failed: {e}[/red]")
            return self.base_analyzer.analyze(resume_content, job_description).score

    def get_detailed_insights(self, resume_content: str, job_description: str) -> DetailedInsights:
        """Enhanced analysis with industry advice and improvement potential."""
        analysis = self.analyze(resume_content, job_description)

        industry_insights = [
            "Australian employers value local experience and cultural fit",
            "Quantify achievements with specific metrics and outcomes",
            "Include relevant Australian certifications and standards",
        ]

        primary = self.base_analyzer.detector.detect(resume_content, job_description).primary.industry
        group = ENGINE_INDUSTRY_GROUPS.get(primary)
        if group:
            industry_insights.extend(self.engine.get_industry_suggestions(resume_content, group))

        return DetailedInsights(
            analysis=analysis,
            industry_insights=industry_insights,
            improvement_potential=95 - analysis.enhanced_score,
        )


class ResumeOptimizer:
    """Applies automatic ATS fixes to resume text."""

    def __init__(self, analyzer: Optional[ATSAnalyzer] = None,
                 integrator: Optional[KeywordIntegrator] = None,
                 max_keywords: int = 5):
        self.analyzer = analyzer or ATSAnalyzer()
        self.integrator = integrator or KeywordIntegrator()
        self.max_keywords = max_keywords

    def optimize_resume(self, content: str, target_job: Optional[str] = None) -> OptimizationResult:
        """
        Convert dash lists to bullets and integrate missing keywords.

        Args:
            content: Resume plain text
            target_job: Optional job description

        Returns:
            OptimizationResult with the updated text and what changed
        """
        analysis = self.analyzer.analyze(content, target_job)
        optimized = content
        converted = False

        if not analysis.formatting.has_bullet_points:
            optimized = self.convert_to_bullet_points(optimized)
            converted = optimized != content

        added: List[str] = []
        if analysis.keywords.missing:
            result = self.integrator.integrate_keywords(
                optimized, analysis.keywords.missing[:self.max_keywords], target_job
            )
            optimized = result.updated_resume
            added = result.added_keywords

        return OptimizationResult(content=optimized, added_keywords=added,
                                  converted_bullets=converted, analysis=analysis)

    def optimize(self, content: str, target_job: Optional[str] = None) -> str:
        """Optimized resume text."""
        return self.optimize_resume(content, target_job).content

    @staticmethod
    def convert_to_bullet_points(content: str) -> str:
        return re.sub(r"^[ \t]*-[ \t]+", "• ", content, flags=re.MULTILINE)


def analyze_resume_with_semantics(resume: str, job_description: Optional[str] = None) -> EnhancedATSAnalysis:
    """Convenience wrapper around EnhancedATSAnalyzer.analyze."""
    return EnhancedATSAnalyzer().analyze(resume, job_description)
