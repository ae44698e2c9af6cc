"""Shared fixtures for the ResumeForge test suite."""

import hashlib
import os
import re

import numpy as np
import pytest

from resumeforge.config import reload_config
from resumeforge.semantic import get_semantic_matcher


SAMPLE_RESUME = """Jane Citizen
Email: jane.citizen@example.com
Phone: 0412 345 678
Sydney, NSW

PROFESSIONAL SUMMARY
Software engineer with 6 years of experience building cloud platforms.

SKILLS
• Python
• Docker
• AWS

WORK EXPERIENCE
Senior Software Engineer, Atlassian
• Led migration of 40 microservices to Kubernetes
• Improved deployment time by 35%

EDUCATION
Bachelor of Computer Science, University of Sydney
"""

SAMPLE_JOB = """Senior Software Engineer - Sydney

We are looking for an engineer with experience with Python, Docker and Kubernetes.
Knowledge of Terraform and AWS is essential. You will work in agile scrum teams
and need strong communication and leadership skills.
"""


class FakeEmbeddingClient:
    """Deterministic bag-of-words embeddings for tests."""

    dimensions = 512

    def __init__(self):
        self.calls = 0

    def generate_embedding(self, text):
        self.calls += 1
        vector = np.zeros(self.dimensions, dtype=np.float32)
        for word in re.findall(r"\w+", text.lower()):
            index = int(hashlib.md5(word.encode()).hexdigest(), 16) % self.dimensions
            vector[index] += 1.0
        return vector


class FailingEmbeddingClient:
    """Behaves like an unreachable Ollama server."""

    def __init__(self):
        self.calls = 0

    def generate_embedding(self, text):
        self.calls += 1
        return None


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Fresh configuration rooted in a temporary directory for every test."""
    for key in list(os.environ):
        if key.startswith("RESUMEFORGE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    if hasattr(get_semantic_matcher, '_instance'):
        monkeypatch.delattr(get_semantic_matcher, '_instance')

    config_manager = reload_config(str(tmp_path))
    yield config_manager

    # set_env_var writes straight to os.environ
    for key in list(os.environ):
        if key.startswith("RESUMEFORGE_"):
            os.environ.pop(key)


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def sample_job():
    return SAMPLE_JOB


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text(SAMPLE_RESUME, encoding="utf-8")
    return path


@pytest.fixture
def job_file(tmp_path):
    path = tmp_path / "job.txt"
    path.write_text(SAMPLE_JOB, encoding="utf-8")
    return path


@pytest.fixture
def fake_client():
    return FakeEmbeddingClient()


@pytest.fixture
def failing_client():
    return FailingEmbeddingClient()
