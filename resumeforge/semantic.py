"""
Semantic similarity matching between resumes and job descriptions.

Embeds whole documents and short concepts with the Ollama client and compares
them by cosine similarity to find matched and missing job concepts.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np
from rich.console import Console

from .config import get_config_manager
from .embeddings import get_embedding_client

console = Console()

SKILL_PHRASE_PATTERN = re.compile(
    r"(?:experience with|knowledge of|proficient in|skilled in|expertise in)\s+([^,.]+)",
    re.IGNORECASE,
)

MIN_CONCEPT_SECTION_LENGTH = 50
CONCEPT_PREVIEW_LENGTH = 100


@dataclass
class SemanticMatchResult:
    """Result of comparing a resume with a job description by meaning."""
    similarity_score: float
    confidence: float
    top_matched_concepts: List[str] = field(default_factory=list)
    missing_concepts: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)


class SemanticMatcher:
    """Embedding-based resume to job description matcher."""

    def __init__(self,
                 embedding_client=None,
                 match_threshold: Optional[float] = None,
                 missing_threshold: Optional[float] = None,
                 max_concepts: Optional[int] = None,
                 max_chars: Optional[int] = None,
                 use_cache: Optional[bool] = None):
        config = get_config_manager()

        self.match_threshold = match_threshold if match_threshold is not None else config.get('semantic', 'match_threshold')
        self.missing_threshold = missing_threshold if missing_threshold is not None else config.get('semantic', 'missing_threshold')
        self.max_concepts = max_concepts if max_concepts is not None else config.get('semantic', 'max_concepts')
        self.max_chars = max_chars if max_chars is not None else config.get('semantic', 'max_chars')
        self.use_cache = use_cache if use_cache is not None else config.get('semantic', 'use_cache')

        self._embedding_client = embedding_client
        self._embedding_cache: Dict[str, np.ndarray] = {}

    @property
    def embedding_client(self):
        if self._embedding_client is None:
            self._embedding_client = get_embedding_client()
        return self._embedding_client

    def preprocess_text(self, text: str) -> str:
        """Lowercase, strip punctuation, collapse whitespace and truncate."""
        cleaned = re.sub(r"[^\w\s]", " ", text.lower())
        cleaned = re.sub(r"\s+", " ", cleaned).strip()
        return cleaned[:self.max_chars]

    def generate_embedding(self, text: str) -> np.ndarray:
        """
        Embed a text, using the cache when enabled.

        Raises:
            RuntimeError: If the embedding service returns no vector
        """
        if self.use_cache and text in self._embedding_cache:
            return self._embedding_cache[text]

        embedding = self.embedding_client.generate_embedding(self.preprocess_text(text))
        if embedding is None:
            raise RuntimeError("Embedding service unavailable; semantic matching cannot continue")

        embedding = np.asarray(embedding, dtype=np.float32)
        if self.use_cache:
            self._embedding_cache[text] = embedding
        return embedding

    @staticmethod
    def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
        """Calculate cosine similarity between two vectors."""
        if a.shape != b.shape:
            raise ValueError("Embeddings must have the same dimension")

        norm_product = np.linalg.norm(a) * np.linalg.norm(b)
        if norm_product == 0:
            return 0.0

        return float(np.dot(a, b) / norm_product)

    def extract_concepts(self, text: str) -> List[str]:
        """Paragraph previews plus phrases like 'experience with X'."""
        concepts = [section[:CONCEPT_PREVIEW_LENGTH]
                    for section in re.split(r"\n\n+", text)
                    if len(section) > MIN_CONCEPT_SECTION_LENGTH]

        concepts.extend(match.group(1).strip() for match in SKILL_PHRASE_PATTERN.finditer(text))
        return [concept for concept in concepts if concept]

    def calculate_similarity(self, resume: str, job_description: str) -> SemanticMatchResult:
        """
        Calculate semantic similarity between a resume and a job description.

        Args:
            resume: Resume plain text
            job_description: Job description plain text

        Returns:
            SemanticMatchResult with overall similarity and concept gaps

        Raises:
            RuntimeError: If embeddings cannot be generated
        """
        resume_embedding = self.generate_embedding(resume)
        job_embedding = self.generate_embedding(job_description)
        overall_similarity = self.cosine_similarity(resume_embedding, job_embedding)

        resume_concepts = self.extract_concepts(resume)
        job_concepts = self.extract_concepts(job_description)
        resume_concept_embeddings = [self.generate_embedding(concept) for concept in resume_concepts]

        matched: List[str] = []
        missing: List[str] = []

        for job_concept in job_concepts[:self.max_concepts]:
            job_concept_embedding = self.generate_embedding(job_concept)

            best_match = 0.0
            for resume_concept_embedding in resume_concept_embeddings:
                similarity = self.cosine_similarity(job_concept_embedding, resume_concept_embedding)
                best_match = max(best_match, similarity)

            if best_match > self.match_threshold:
                matched.append(job_concept)
            elif best_match < self.missing_threshold:
                missing.append(job_concept)

        return SemanticMatchResult(
            similarity_score=overall_similarity,
            confidence=self.calculate_confidence(overall_similarity, len(matched)),
            top_matched_concepts=matched[:5],
            missing_concepts=missing[:5],
            suggestions=self.generate_suggestions(overall_similarity, matched, missing),
        )

    def generate_suggestions(self, similarity: float, matched: List[str], missing: List[str]) -> List[str]:
        suggestions = []

        if similarity < 0.5:
            suggestions.append("Your resume has low semantic alignment with the job description. "
                               "Consider restructuring to better match the role.")
        elif similarity < 0.7:
            suggestions.append("Good alignment, but there's room for improvement. "
                               "Focus on incorporating missing concepts.")
        else:
            suggestions.append("Excellent semantic match! Your resume aligns well with the job requirements.")

        if missing:
            suggestions.append(f"Add these missing concepts: {', '.join(missing[:3])}")

        if len(matched) < 3:
            suggestions.append("Strengthen the connection between your experience and the job requirements.")

        return suggestions

    @staticmethod
    def calculate_confidence(similarity: float, matched_count: int) -> float:
        """Similarity nudged by +/-0.1 depending on how many concepts matched."""
        confidence = similarity
        if matched_count >= 5:
            confidence = min(confidence + 0.1, 1.0)
        elif matched_count <= 2:
            confidence = max(confidence - 0.1, 0.0)
        return round(max(0.0, min(confidence, 1.0)), 2)

    def clear_cache(self) -> None:
        """Clear the embedding cache."""
        self._embedding_cache.clear()

    def get_cache_stats(self) -> Dict[str, int]:
        """Get embedding cache statistics."""
        return {
            "size": len(self._embedding_cache),
            "entries": len(self._embedding_cache),
        }


def get_semantic_matcher() -> SemanticMatcher:
    """Get the shared semantic matcher instance."""
    if not hasattr(get_semantic_matcher, '_instance'):
        get_semantic_matcher._instance = SemanticMatcher()
    return get_semantic_matcher._instance


def check_semantic_similarity(resume: str, job_description: str) -> float:
    """Quick similarity score between a resume and a job description."""
    return get_semantic_matcher().calculate_similarity(resume, job_description).similarity_score
