"""
ResumeForge - ATS resume scoring and keyword optimization.

A local command-line tool that:
- Parses resume documents (PDF, DOCX, TXT, Markdown) into plain text
- Detects the industry a resume targets
- Scores resumes against ATS heuristics and a target job description
- Integrates missing keywords back into the resume text
"""

__version__ = "0.1.0"
__author__ = "ResumeForge Project"
