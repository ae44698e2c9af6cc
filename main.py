#!/usr/bin/env python3
"""
ResumeForge - ATS resume analysis and keyword optimization
"""

from resumeforge.cli import main

if __name__ == "__main__":
    main()
