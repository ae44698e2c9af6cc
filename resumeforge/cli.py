#!/usr/bin/env python3
"""
ResumeForge CLI - Main command-line interface for ATS resume analysis and optimization.
"""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def _read_document(path: str) -> str:
    """Extract text from a resume or job description file, aborting on failure."""
    from .resumes import get_resume_parser

    result = get_resume_parser().parse_file(path)
    if not result.success:
        console.print(f"[red]Could not read {path}: {result.error}[/red]")
        raise click.Abort()
    return result.text


def _score_style(score: float) -> str:
    if score >= 75:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _print_list(title: str, items, style: str = "white", limit: int = 20):
    if not items:
        return
    console.print(f"\n[bold]{title}:[/bold]")
    for item in list(items)[:limit]:
        console.print(f"  [{style}]• {escape(str(item))}[/{style}]")


@click.group()
@click.version_option(version="0.1.0")
def main():
    """ResumeForge - ATS resume scoring, industry detection and keyword optimization."""
    pass


@main.command("analyze")
@click.argument("resume", type=click.Path(exists=True))
@click.option("--job", "-j", type=click.Path(exists=True), help="Job description file to match against")
@click.option("--semantic/--no-semantic", default=None,
              help="Use embedding similarity (defaults to the semantic.enabled setting)")
@click.option("--output", "-o", type=click.Path(), help="Export the report to this file")
@click.option("--format", "-f", "export_format", type=click.Choice(["json", "csv", "html"]),
              help="Report format (defaults to the export.default_format setting)")
def analyze(resume, job, semantic, output, export_format):
    """Score a resume for ATS compatibility."""
    from .analyzer import EnhancedATSAnalyzer
    from .config import get_config_manager

    resume_text = _read_document(resume)
    job_text = _read_document(job) if job else None

    try:
        analyzer = EnhancedATSAnalyzer(use_semantic=semantic)
        analysis = analyzer.analyze(resume_text, job_text)
        limit = get_config_manager().get('cli', 'default_table_limit')

        style = _score_style(analysis.enhanced_score)
        console.print(f"\n[bold]ATS Score:[/bold] [{style}]{analysis.enhanced_score}/100[/{style}] "
                      f"[dim](confidence: {analysis.confidence_level})[/dim]")

        table = Table(title="Score Breakdown")
        table.add_column("Component", style="cyan")
        table.add_column("Score", style="magenta", justify="right")
        table.add_column("Details", style="green")

        table.add_row("ATS analysis", str(analysis.score), "Keyword coverage and formatting")
        for name, value in analysis.score_breakdown.items():
            details = f"method: {analysis.semantic_method}" if name == "semantic" and job_text else ""
            table.add_row(name.title(), str(value), details)
        if analysis.engine_score is not None:
            for name, value in analysis.engine_score.breakdown.items():
                table.add_row(f"Engine {name.replace('_', ' ')}", str(value), "")
        table.add_row("Keyword density", f"{analysis.keywords.density}%", "")
        table.add_row("Keyword relevance", f"{analysis.keywords.relevance}%", "")
        console.print(table)

        _print_list("Found keywords", analysis.keywords.found, "green", limit)
        _print_list("Missing keywords", analysis.keywords.missing, "yellow", limit)
        _print_list("Suggestions", analysis.suggestions, "cyan", limit)
        _print_list("Recommendations", analysis.recommendations, "white", limit)
        _print_list("Issues", [f"({i.severity}) {i.message}" for i in analysis.issues], "red", limit)

        if output or export_format:
            from .export import get_report_exporter
            export_format = export_format or get_config_manager().get('export', 'default_format')
            get_report_exporter().export_analysis(analysis, export_format, output, resume_name=Path(resume).name)

    except Exception as e:
        console.print(f"[red]Error analyzing resume: {e}[/red]")
        raise click.Abort()


@main.command("detect")
@click.argument("resume", type=click.Path(exists=True))
@click.option("--job", "-j", type=click.Path(exists=True), help="Job description file")
@click.option("--output", "-o", type=click.Path(), help="Export the detection result to this file")
@click.option("--format", "-f", "export_format", type=click.Choice(["json", "csv"]), default="json",
              help="Export format")
def detect(resume, job, output, export_format):
    """Detect the industries a resume belongs to."""
    from .industry import IndustryDetector
    from .industry_keywords import format_industry_name

    resume_text = _read_document(resume)
    job_text = _read_document(job) if job else None

    try:
        result = IndustryDetector().detect(resume_text, job_text)

        table = Table(title="Industry Detection")
        table.add_column("Rank", style="dim", justify="right")
        table.add_column("Industry", style="cyan")
        table.add_column("Confidence", style="magenta", justify="right")
        table.add_column("Reasons", style="green")

        for rank, match in enumerate([result.primary] + result.secondary, 1):
            table.add_row(
                str(rank),
                format_industry_name(match.industry),
                f"{match.confidence:.0%}",
                "\n".join(match.reasons[:4])
            )

        console.print(table)
        if len(result.all_detected) > 4:
            console.print(f"[dim]{len(result.all_detected)} industries scored in total[/dim]")

        if output:
            from .export import get_report_exporter
            get_report_exporter().export_detection(result, export_format, output)

    except Exception as e:
        console.print(f"[red]Error detecting industry: {e}[/red]")
        raise click.Abort()


def _write_resume(text: str, output: str):
    from .export import get_report_exporter

    text_format = "md" if Path(output).suffix.lower() == ".md" else "txt"
    get_report_exporter().export_resume_text(text, output, text_format)


@main.command("integrate")
@click.argument("resume", type=click.Path(exists=True))
@click.argument("keywords", nargs=-1, required=True)
@click.option("--job", "-j", type=click.Path(exists=True), help="Job description file for industry context")
@click.option("--simple", is_flag=True, help="Add keywords as plain bullets instead of sentences")
@click.option("--output", "-o", type=click.Path(), help="Write the updated resume to this file (.txt or .md)")
def integrate(resume, keywords, job, simple, output):
    """Add KEYWORDS to a resume as natural sentences."""
    from .integrator import KeywordIntegrator

    resume_text = _read_document(resume)
    job_text = _read_document(job) if job else None

    try:
        integrator = KeywordIntegrator()
        result = integrator.integrate_keywords(
            resume_text, list(keywords), job_text,
            use_smart_integration=False if simple else None
        )

        if result.added_keywords:
            console.print(f"[green]✓ Added {len(result.added_keywords)} keywords "
                          f"({result.integration_method})[/green]")
        else:
            console.print("[yellow]No keywords added; they may already be present[/yellow]")

        _print_list("Added", result.added_keywords, "green")
        _print_list("Sentence ideas", result.suggested_sentences, "cyan", 6)

        if output:
            _write_resume(result.updated_resume, output)
        else:
            console.print("\n[bold]Updated resume:[/bold]")
            console.print(result.updated_resume, markup=False)

    except Exception as e:
        console.print(f"[red]Error integrating keywords: {e}[/red]")
        raise click.Abort()


@main.command("optimize")
@click.argument("resume", type=click.Path(exists=True))
@click.option("--job", "-j", type=click.Path(exists=True), help="Target job description file")
@click.option("--output", "-o", type=click.Path(), help="Write the optimized resume to this file (.txt or .md)")
def optimize(resume, job, output):
    """Auto-format a resume and add its most important missing keywords."""
    from .analyzer import ResumeOptimizer

    resume_text = _read_document(resume)
    job_text = _read_document(job) if job else None

    try:
        result = ResumeOptimizer().optimize_resume(resume_text, job_text)

        if result.analysis is not None:
            console.print(f"[cyan]Score before optimization: {result.analysis.score}/100[/cyan]")
        if result.converted_bullets:
            console.print("[green]✓ Converted dash lists to bullet points[/green]")
        if result.added_keywords:
            console.print(f"[green]✓ Added keywords: {', '.join(result.added_keywords)}[/green]")
        if not result.converted_bullets and not result.added_keywords:
            console.print("[yellow]No changes were needed[/yellow]")

        if output:
            _write_resume(result.content, output)
        else:
            console.print("\n[bold]Optimized resume:[/bold]")
            console.print(result.content, markup=False)

    except Exception as e:
        console.print(f"[red]Error optimizing resume: {e}[/red]")
        raise click.Abort()


@main.command("parse")
@click.argument("file", type=click.Path(exists=True))
@click.option("--info", is_flag=True, help="Show structured information instead of the text")
@click.option("--preview", type=int, help="Only show the first N characters")
def parse(file, info, preview):
    """Extract plain text from a resume document."""
    from .resumes import get_resume_parser

    parser = get_resume_parser()
    result = parser.parse_file(file)

    if not result.success:
        console.print(f"[red]Error parsing {file}: {result.error}[/red]")
        raise click.Abort()

    if not info:
        text = parser.get_preview(result.text, preview) if preview else result.text
        console.print(text, markup=False)
        return

    resume_info = parser.extract_resume_info(result.text)

    table = Table(title=f"Resume: {Path(file).name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Name", resume_info.name)
    table.add_row("Email", resume_info.email or "Not found")
    table.add_row("Phone", resume_info.phone or "Not found")
    table.add_row("Sections", ", ".join(resume_info.sections) or "None detected")
    for key, value in result.metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    console.print(table)


@main.command("industries")
@click.argument("name", required=False)
@click.option("--template", "show_template", is_flag=True, help="Show the Australian resume template instead")
@click.option("--output", "-o", help="Write the template to a file (.json for the editable template)")
@click.option("--name", "person_name", help="Candidate name for the template contact block")
@click.option("--email", help="Candidate email for the template contact block")
@click.option("--phone", help="Candidate phone for the template contact block")
@click.option("--location", help="Candidate location for the template contact block")
def industries(name, show_template, output, person_name, email, phone, location):
    """List industries in the keyword database, or show one in detail."""
    from .industry_keywords import INDUSTRY_DATABASE, get_industry_by_name

    if show_template:
        _show_template(name, output, {
            "name": person_name, "email": email, "phone": phone, "location": location,
        })
        return

    if not name:
        table = Table(title="Industry Keyword Database")
        table.add_column("ID", style="cyan")
        table.add_column("Name", style="green")
        table.add_column("Aliases", style="dim")
        table.add_column("Keywords", style="magenta", justify="right")

        for industry_id, industry in INDUSTRY_DATABASE.items():
            keyword_count = sum(len(values) for values in industry["keywords"].values())
            table.add_row(industry_id, industry["name"], ", ".join(industry["aliases"]), str(keyword_count))

        console.print(table)
        return

    industry = get_industry_by_name(name)
    if not industry:
        console.print(f"[red]Industry '{name}' not found[/red]")
        raise click.Abort()

    console.print(f"[bold cyan]{industry['name']}[/bold cyan]")
    for category, values in industry["keywords"].items():
        console.print(f"\n[bold]{category.title()}:[/bold] {', '.join(values)}")
    console.print(f"\n[bold]Job titles:[/bold] {', '.join(industry['job_titles'])}")
    if industry.get("companies"):
        console.print(f"\n[bold]Companies:[/bold] {', '.join(industry['companies'])}")


def _show_template(name, output, user_data):
    from .templates import (
        AUSTRALIAN_TEMPLATES,
        generate_from_template,
        get_available_industries,
        get_template_by_industry,
    )

    if not name:
        table = Table(title="Australian Resume Templates")
        table.add_column("ID", style="cyan")
        table.add_column("Industry", style="green")
        table.add_column("Name")
        table.add_column("ATS", style="magenta", justify="right")
        table.add_column("Visa", justify="center")

        for template in AUSTRALIAN_TEMPLATES:
            table.add_row(template.id, template.industry, template.name, str(template.ats_score),
                          "✓" if template.visa_optimized else "")

        console.print(table)
        return

    template = get_template_by_industry(name)
    if template is None:
        console.print(f"[red]No resume template for '{escape(name)}'[/red]")
        console.print(f"Templates exist for: {', '.join(get_available_industries())}")
        raise click.Abort()

    if output:
        from .export import get_report_exporter

        try:
            template_format = "json" if Path(output).suffix.lower() == ".json" else "txt"
            get_report_exporter().export_template(template, template_format, output, user_data)
        except Exception as e:
            console.print(f"[red]Error exporting template: {e}[/red]")
            raise click.Abort()
        return

    console.print(f"[bold cyan]{escape(template.name)}[/bold cyan] [dim]({template.id}, ATS {template.ats_score})[/dim]")
    console.print(f"[dim]{escape(template.description)}[/dim]\n")
    console.print(generate_from_template(template, user_data), markup=False)

    console.print("[bold]Tips:[/bold]")
    for section in sorted(template.sections, key=lambda s: s.order):
        for tip in section.tips:
            console.print(f"  [yellow]• {escape(section.title.title())}: {escape(tip)}[/yellow]")
    console.print(f"\n[bold]Keywords:[/bold] {escape(', '.join(template.keywords))}")


@main.group()
def config():
    """Configure system settings."""
    pass


@config.command("show")
@click.option("--section", help="Show specific configuration section only")
def show_config(section):
    """Display current configuration."""
    from .config import get_config_manager

    try:
        config_manager = get_config_manager()

        if section:
            section_data = config_manager.get(section)
            if section_data:
                console.print(f"[bold cyan]{section.title()} Configuration:[/bold cyan]")
                for key, value in section_data.items():
                    console.print(f"  {key}: {value}")
            else:
                console.print(f"[red]Configuration section '{section}' not found[/red]")
        else:
            config_manager.display_config()

    except Exception as e:
        console.print(f"[red]Error showing configuration: {e}[/red]")
        raise click.Abort()


@config.command("set")
@click.argument("section")
@click.argument("key")
@click.argument("value")
def set_config(section, key, value):
    """Set configuration value (format: section key value)."""
    from .config import ConfigManager, get_config_manager

    try:
        config_manager = get_config_manager()

        # Convert value to the type of the existing or default setting
        reference = config_manager.get(section, key)
        if reference is None:
            reference = ConfigManager.DEFAULT_CONFIG.get(section, {}).get(key)
        if reference is not None or key in ConfigManager.DEFAULT_CONFIG.get(section, {}):
            try:
                value = ConfigManager._convert_value(value, reference)
            except ValueError:
                console.print(f"[red]Invalid value for {section}.{key}: {value}[/red]")
                return

        success = config_manager.set(section, key, value)
        if success:
            console.print(f"[green]✓ Set {section}.{key} = {value}[/green]")
        else:
            console.print("[red]✗ Failed to set configuration[/red]")

    except Exception as e:
        console.print(f"[red]Error setting configuration: {e}[/red]")
        raise click.Abort()


@config.command("env")
@click.argument("key")
@click.argument("value")
def set_env_var(key, value):
    """Set environment variable in .env file."""
    from .config import get_config_manager

    try:
        config_manager = get_config_manager()
        success = config_manager.set_env_var(key, value)
        if success:
            console.print(f"[green]✓ Set environment variable {key} = {value}[/green]")
            console.print("[dim]Configuration reloaded with new environment variable[/dim]")
        else:
            console.print("[red]✗ Failed to set environment variable[/red]")

    except Exception as e:
        console.print(f"[red]Error setting environment variable: {e}[/red]")
        raise click.Abort()


@config.command("unset")
@click.argument("key")
def unset_env_var(key):
    """Remove environment variable from .env file."""
    from .config import get_config_manager

    try:
        config_manager = get_config_manager()
        success = config_manager.unset_env_var(key)
        if success:
            console.print(f"[green]✓ Removed environment variable {key}[/green]")
        else:
            console.print("[red]✗ Failed to remove environment variable[/red]")

    except Exception as e:
        console.print(f"[red]Error removing environment variable: {e}[/red]")
        raise click.Abort()


@config.command("validate")
def validate_config():
    """Validate current configuration."""
    from .config import get_config_manager

    try:
        config_manager = get_config_manager()
        issues = config_manager.validate_config()

        if not issues:
            console.print("[green]✓ Configuration validation passed[/green]")
        else:
            console.print("[red]Configuration validation failed:[/red]")
            for issue in issues:
                console.print(f"[red]• {issue}[/red]")

    except Exception as e:
        console.print(f"[red]Error validating configuration: {e}[/red]")
        raise click.Abort()


@config.command("reset")
@click.option("--confirm", is_flag=True, help="Skip confirmation prompt")
def reset_config(confirm):
    """Reset configuration to default values."""
    from .config import get_config_manager

    try:
        if not confirm:
            if not click.confirm("Reset all configuration to defaults?"):
                console.print("[yellow]Reset cancelled[/yellow]")
                return

        config_manager = get_config_manager()
        success = config_manager.reset_to_defaults()
        if success:
            console.print("[green]✓ Configuration reset to defaults[/green]")
        else:
            console.print("[red]✗ Failed to reset configuration[/red]")

    except Exception as e:
        console.print(f"[red]Error resetting configuration: {e}[/red]")
        raise click.Abort()


@config.command("template")
@click.option("--output", "-o", help="Output file path")
def export_template(output):
    """Export .env template file."""
    from .config import get_config_manager

    try:
        config_manager = get_config_manager()
        success = config_manager.export_env_template(output)
        if success:
            console.print("[cyan]Edit the template file and rename to .env to use[/cyan]")

    except Exception as e:
        console.print(f"[red]Error exporting template: {e}[/red]")
        raise click.Abort()


@config.command("info")
def connection_info():
    """Show connection information for configured services."""
    from .config import get_config_manager

    try:
        info = get_config_manager().get_connection_info()

        console.print("[bold cyan]Service Connection Information[/bold cyan]")

        console.print("\n[bold]Ollama:[/bold]")
        console.print(f"  Host: {info['ollama']['host']}")
        console.print(f"  Port: {info['ollama']['port']}")
        console.print(f"  URL: {info['ollama']['url']}")
        console.print(f"  Model: {info['ollama']['model']}")

        console.print("\n[bold]Semantic matching:[/bold]")
        console.print(f"  Enabled: {'✓' if info['semantic']['enabled'] else '✗'}")
        console.print(f"  Cache: {'✓' if info['semantic']['cache'] else '✗'}")

    except Exception as e:
        console.print(f"[red]Error getting connection info: {e}[/red]")
        raise click.Abort()


@main.command("status")
def status():
    """Show system status."""
    from .config import get_config_manager
    from .industry_keywords import INDUSTRY_DATABASE

    console.print("[bold green]ResumeForge System Status[/bold green]")

    table = Table(title="System Overview")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Status", style="magenta")
    table.add_column("Details", style="green")

    config_manager = get_config_manager()
    issues = config_manager.validate_config()
    if issues:
        table.add_row("Configuration", "Invalid", f"{len(issues)} issue(s); run 'config validate'")
    else:
        table.add_row("Configuration", "Valid", str(config_manager.config_file))

    table.add_row("Keyword database", str(len(INDUSTRY_DATABASE)), "Industries available")

    if not config_manager.get('semantic', 'enabled'):
        table.add_row("Semantic matching", "Disabled", "TF-IDF similarity is used instead")
    else:
        try:
            from .embeddings import get_embedding_client
            status_info = get_embedding_client().get_status()

            if status_info["connection"] and status_info["model_ready"]:
                table.add_row("Ollama", "Ready", f"Model: {status_info['model']}")
            elif status_info["connection"]:
                table.add_row("Ollama", "Connected", f"Model not ready: {status_info['model']}")
            else:
                table.add_row("Ollama", "Offline", status_info.get("error") or "Connection failed")
        except Exception as e:
            table.add_row("Ollama", "Error", f"Status check failed: {str(e)[:50]}")

    console.print(table)


@main.command("test-embedding")
@click.option("--text", default="Experienced software engineer skilled in Python and cloud platforms.",
              help="Text to use for testing embeddings")
def test_embedding(text):
    """Test the ollama embedding functionality."""
    from .embeddings import test_embedding_client

    success = test_embedding_client(text)
    if success:
        console.print("[bold green]Embedding test completed successfully![/bold green]")
    else:
        console.print("[bold red]Embedding test failed![/bold red]")


if __name__ == "__main__":
    main()
