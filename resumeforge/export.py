"""
Export functionality for ResumeForge - write analysis reports in CSV, JSON and HTML.

Also writes optimized resume text (plain text or Markdown) and industry
detection results.
"""

import csv
import json
import re
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console

from .analyzer import ATSAnalysis
from .config import get_config_manager
from .industry import IndustryDetectionResult
from .industry_keywords import format_industry_name
from .templates import ResumeTemplate, export_template, generate_from_template

console = Console()

ANALYSIS_FORMATS = ('csv', 'json', 'html')
DETECTION_FORMATS = ('csv', 'json')
TEXT_FORMATS = ('txt', 'md')
TEMPLATE_FORMATS = ('json', 'txt')


class ReportExporter:
    """Handles report export in multiple formats."""

    def __init__(self, output_directory: Optional[str] = None, include_timestamps: Optional[bool] = None):
        config = get_config_manager()
        if output_directory is None:
            output_directory = config.get('export', 'output_directory')
        if include_timestamps is None:
            include_timestamps = config.get('export', 'include_timestamps')
        self.output_directory = Path(output_directory or ".")
        self.include_timestamps = include_timestamps

    def _resolve_output(self, output_path: Optional[str], prefix: str, format: str) -> Path:
        """Use the given path or build a default file name, creating parent directories."""
        if output_path:
            output_file = Path(output_path)
        else:
            suffix = f"_{datetime.now().strftime('%Y%m%d_%H%M%S')}" if self.include_timestamps else ""
            output_file = self.output_directory / f"resumeforge_{prefix}{suffix}.{format}"

        output_file.parent.mkdir(parents=True, exist_ok=True)
        return output_file

    def export_analysis(self, analysis: ATSAnalysis, format: str, output_path: Optional[str] = None,
                        resume_name: Optional[str] = None) -> str:
        """
        Export an ATS analysis in the specified format.

        Args:
            analysis: ATSAnalysis or EnhancedATSAnalysis
            format: Export format ('csv', 'json', 'html')
            output_path: Custom output file path
            resume_name: Optional label for the analysed resume

        Returns:
            Path to generated file
        """
        if format not in ANALYSIS_FORMATS:
            raise ValueError(f"Unsupported export format: {format}")

        output_file = self._resolve_output(output_path, "analysis", format)

        if format == 'csv':
            self._export_analysis_csv(analysis, output_file)
        elif format == 'json':
            self._export_analysis_json(analysis, output_file, resume_name)
        else:
            self._export_analysis_html(analysis, output_file, resume_name)

        console.print(f"[green]Exported analysis report to {output_file}[/green]")
        return str(output_file)

    def _export_analysis_json(self, analysis: ATSAnalysis, output_file: Path, resume_name: Optional[str]):
        export_data = {
            'generated_at': datetime.now().isoformat(),
            'resume': resume_name,
            'analysis': asdict(analysis),
        }

        with open(output_file, 'w', encoding='utf-8') as jsonfile:
            json.dump(export_data, jsonfile, indent=2, ensure_ascii=False)

    def _export_analysis_csv(self, analysis: ATSAnalysis, output_file: Path):
        with open(output_file, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=['section', 'name', 'value'])
            writer.writeheader()
            for row in self._analysis_rows(analysis):
                writer.writerow(row)

    def _analysis_rows(self, analysis: ATSAnalysis) -> List[Dict[str, Any]]:
        """Flatten an analysis into one row per metric, keyword and message."""
        rows = [{'section': 'score', 'name': 'ats_score', 'value': analysis.score}]

        enhanced_score = getattr(analysis, 'enhanced_score', None)
        if enhanced_score is not None:
            rows.append({'section': 'score', 'name': 'enhanced_score', 'value': enhanced_score})
            rows.append({'section': 'score', 'name': 'confidence_level', 'value': analysis.confidence_level})
            rows.append({'section': 'score', 'name': 'semantic_method', 'value': analysis.semantic_method})
            for name, value in analysis.score_breakdown.items():
                rows.append({'section': 'score_breakdown', 'name': name, 'value': value})

        if analysis.engine_score is not None:
            rows.append({'section': 'engine', 'name': 'overall_score', 'value': analysis.engine_score.overall_score})
            for name, value in analysis.engine_score.breakdown.items():
                rows.append({'section': 'engine', 'name': name, 'value': value})

        rows.append({'section': 'keywords', 'name': 'density', 'value': analysis.keywords.density})
        rows.append({'section': 'keywords', 'name': 'relevance', 'value': analysis.keywords.relevance})
        rows.extend({'section': 'keyword_found', 'name': k, 'value': 1} for k in analysis.keywords.found)
        rows.extend({'section': 'keyword_missing', 'name': k, 'value': 0} for k in analysis.keywords.missing)

        formatting = analysis.formatting
        for flag in ('has_headers', 'has_bullet_points', 'has_clean_layout', 'has_parsable_contact'):
            rows.append({'section': 'formatting', 'name': flag, 'value': getattr(formatting, flag)})

        rows.extend({'section': 'issue', 'name': issue.severity, 'value': issue.message}
                    for issue in analysis.issues)
        rows.extend({'section': 'suggestion', 'name': '', 'value': s} for s in analysis.suggestions)
        rows.extend({'section': 'recommendation', 'name': '', 'value': r}
                    for r in getattr(analysis, 'recommendations', []))
        return rows

    def _export_analysis_html(self, analysis: ATSAnalysis, output_file: Path, resume_name: Optional[str]):
        with open(output_file, 'w', encoding='utf-8') as htmlfile:
            htmlfile.write(self._generate_analysis_html(analysis, resume_name))

    @staticmethod
    def _score_class(score: float) -> str:
        if score >= 75:
            return 'high-score'
        if score >= 50:
            return 'medium-score'
        return 'low-score'

    def _generate_analysis_html(self, analysis: ATSAnalysis, resume_name: Optional[str]) -> str:
        """Generate HTML content for an analysis report."""
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        headline = getattr(analysis, 'enhanced_score', None)
        if headline is None:
            headline = analysis.score

        subtitle = f"<p>{self._html_escape(resume_name)}</p>" if resume_name else ""

        html = f"""
<!DOCTYPE html>
<html>
<head>
    <title>ResumeForge ATS Report</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 20px; }}
        .header {{ text-align: center; margin-bottom: 30px; }}
        .summary-card {{ background: #f5f5f5; padding: 20px; border-radius: 8px; margin-bottom: 20px; text-align: center; }}
        .summary-card .number {{ font-size: 2.5em; font-weight: bold; }}
        .section h2 {{ color: #333; border-bottom: 2px solid #4CAF50; padding-bottom: 10px; }}
        table {{ width: 100%; border-collapse: collapse; margin-top: 20px; }}
        th, td {{ padding: 12px; text-align: left; border-bottom: 1px solid #ddd; }}
        th {{ background-color: #4CAF50; color: white; }}
        tr:nth-child(even) {{ background-color: #f2f2f2; }}
        .keyword {{ display: inline-block; padding: 4px 10px; margin: 3px; border-radius: 12px; }}
        .found {{ background: #e8f5e9; color: #2e7d32; }}
        .missing {{ background: #ffebee; color: #d32f2f; }}
        .high-score {{ color: #2e7d32; }}
        .medium-score {{ color: #f57c00; }}
        .low-score {{ color: #d32f2f; }}
        .footer {{ text-align: center; margin-top: 30px; color: #666; font-size: 0.9em; }}
    </style>
</head>
<body>
    <div class="header">
        <h1>ResumeForge ATS Report</h1>
        {subtitle}
        <p>Generated on {timestamp}</p>
    </div>

    <div class="summary-card">
        <div>ATS Score</div>
        <div class="number {self._score_class(headline)}">{headline}</div>
    </div>
"""

        breakdown_rows = [("ATS score", analysis.score)]
        breakdown_rows.extend((name.replace('_', ' ').title(), value)
                              for name, value in getattr(analysis, 'score_breakdown', {}).items())
        if analysis.engine_score is not None:
            breakdown_rows.extend((f"Engine {name.replace('_', ' ')}", value)
                                  for name, value in analysis.engine_score.breakdown.items())
        breakdown_rows.append(("Keyword density (%)", analysis.keywords.density))
        breakdown_rows.append(("Keyword relevance (%)", analysis.keywords.relevance))

        html += """
    <div class="section">
        <h2>Score Breakdown</h2>
        <table>
            <thead><tr><th>Metric</th><th>Value</th></tr></thead>
            <tbody>
"""
        for name, value in breakdown_rows:
            html += f"                <tr><td>{self._html_escape(name)}</td><td>{value}</td></tr>\n"
        html += """            </tbody>
        </table>
    </div>
"""

        found = "".join(f'<span class="keyword found">{self._html_escape(k)}</span>'
                        for k in analysis.keywords.found)
        missing = "".join(f'<span class="keyword missing">{self._html_escape(k)}</span>'
                          for k in analysis.keywords.missing)
        html += f"""
    <div class="section">
        <h2>Keywords</h2>
        <h3>Found ({len(analysis.keywords.found)})</h3>
        <div>{found or 'None'}</div>
        <h3>Missing ({len(analysis.keywords.missing)})</h3>
        <div>{missing or 'None'}</div>
    </div>
"""

        for title, items in (("Suggestions", analysis.suggestions),
                             ("Recommendations", getattr(analysis, 'recommendations', [])),
                             ("Issues", [f"[{i.severity}] {i.message}" for i in analysis.issues])):
            if not items:
                continue
            entries = "".join(f"<li>{self._html_escape(item)}</li>" for item in items)
            html += f"""
    <div class="section">
        <h2>{title}</h2>
        <ul>{entries}</ul>
    </div>
"""

        html += """
    <div class="footer">
        <p>ResumeForge ATS Analysis</p>
    </div>
</body>
</html>
"""
        return html

    def export_resume_text(self, text: str, output_path: Optional[str] = None, format: str = "txt") -> str:
        """Write resume text as plain text or Markdown."""
        if format not in TEXT_FORMATS:
            raise ValueError(f"Unsupported resume format: {format}")

        output_file = self._resolve_output(output_path, "resume", format)
        content = self.to_markdown(text) if format == 'md' else text

        with open(output_file, 'w', encoding='utf-8') as outfile:
            outfile.write(content.rstrip() + "\n")

        console.print(f"[green]Saved resume to {output_file}[/green]")
        return str(output_file)

    @staticmethod
    def to_markdown(text: str) -> str:
        """Upper-case header lines become headings and bullets become list items."""
        lines = []
        for line in text.split('\n'):
            stripped = line.strip()
            if re.fullmatch(r"[A-Z][A-Z &/-]{2,}:?", stripped):
                lines.append(f"## {stripped.rstrip(':').title()}")
            elif stripped.startswith('•'):
                lines.append(f"- {stripped.lstrip('•').strip()}")
            else:
                lines.append(line)
        return "\n".join(lines)

    def export_detection(self, result: IndustryDetectionResult, format: str,
                         output_path: Optional[str] = None) -> str:
        """Export an industry detection result as JSON or CSV."""
        if format not in DETECTION_FORMATS:
            raise ValueError(f"Unsupported export format: {format}")

        output_file = self._resolve_output(output_path, "industries", format)

        if format == 'json':
            export_data = {
                'generated_at': datetime.now().isoformat(),
                **asdict(result),
            }
            with open(output_file, 'w', encoding='utf-8') as jsonfile:
                json.dump(export_data, jsonfile, indent=2, ensure_ascii=False)
        else:
            with open(output_file, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=['rank', 'industry', 'name', 'confidence', 'reasons'])
                writer.writeheader()
                for rank, match in enumerate([result.primary] + result.secondary, 1):
                    writer.writerow({
                        'rank': rank,
                        'industry': match.industry,
                        'name': format_industry_name(match.industry),
                        'confidence': round(match.confidence, 2),
                        'reasons': '; '.join(match.reasons),
                    })

        console.print(f"[green]Exported industry detection to {output_file}[/green]")
        return str(output_file)

    def export_template(self, template: ResumeTemplate, format: str = "json", output_path: Optional[str] = None,
                        user_data: Optional[Dict[str, str]] = None) -> str:
        """Write a resume template as editable JSON or as rendered plain text."""
        if format not in TEMPLATE_FORMATS:
            raise ValueError(f"Unsupported template format: {format}")

        output_file = self._resolve_output(output_path, f"template_{template.id}", format)

        if format == 'json':
            content = export_template(template)
        else:
            content = generate_from_template(template, user_data)

        with open(output_file, 'w', encoding='utf-8') as outfile:
            outfile.write(content.rstrip() + "\n")

        console.print(f"[green]Exported template {template.id} to {output_file}[/green]")
        return str(output_file)

    def _html_escape(self, text: Any) -> str:
        """Basic HTML escaping."""
        if text is None or text == "":
            return ""
        return (str(text)
                .replace("&", "&amp;")
                .replace("<", "&lt;")
                .replace(">", "&gt;")
                .replace('"', "&quot;")
                .replace("'", "&#x27;"))


def get_report_exporter() -> ReportExporter:
    """Get report exporter instance."""
    return ReportExporter()
