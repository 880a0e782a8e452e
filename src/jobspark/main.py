"""CLI entry point for JobSpark."""

import logging
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
load_dotenv(".env.local")

import typer  # noqa: E402
from pydantic import TypeAdapter, ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from jobspark.billing.credits import (  # noqa: E402
    CREDIT_COSTS,
    CREDIT_PACKAGES,
    format_credits,
    has_enough_credits,
)
from jobspark.config import get_settings  # noqa: E402
from jobspark.models.career import CareerProfile, JobPosting  # noqa: E402
from jobspark.models.cv import ParsedCV, StructuredCV  # noqa: E402
from jobspark.output.markdown import cv_to_markdown, save_markdown  # noqa: E402
from jobspark.output.pdf import GENERIC_FAILURE_MESSAGE, export_cv_pdf  # noqa: E402
from jobspark.parsing.cv_parser import parse_cv_markdown  # noqa: E402
from jobspark.scoring.career import CareerScorer  # noqa: E402
from jobspark.scoring.jobs import rank_jobs  # noqa: E402

app = typer.Typer(
    name="jobspark",
    help="JobSpark - CV parsing, PDF export and career readiness scoring",
    add_completion=False,
)
console = Console()

STATUS_COLORS = {"excellent": "green", "good": "yellow", "needs-work": "red"}


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def read_file(path: Path) -> str:
    """Read file content as text."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def load_profile(path: Path) -> CareerProfile:
    """Load and validate a career profile JSON file."""
    try:
        return CareerProfile.model_validate_json(read_file(path))
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid profile {path}:\n{e}")
        raise typer.Exit(1) from e


def load_cv(path: Path) -> ParsedCV | StructuredCV:
    """Load a Markdown CV, or a structured CV from JSON."""
    text = read_file(path)
    if path.suffix.lower() != ".json":
        return parse_cv_markdown(text)
    try:
        return StructuredCV.model_validate_json(text)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid CV {path}:\n{e}")
        raise typer.Exit(1) from e


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """JobSpark command line tools."""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@app.command()
def parse(
    cv: Annotated[Path, typer.Argument(help="Path to a Markdown CV")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also save the CV as normalized Markdown"),
    ] = None,
) -> None:
    """Split a Markdown CV into name, contact and sections."""
    parsed = parse_cv_markdown(read_file(cv))
    if output:
        save_markdown(cv_to_markdown(parsed), output)

    if as_json:
        typer.echo(parsed.model_dump_json(indent=2))
        return

    console.print(
        Panel.fit(
            f"[bold]{parsed.name or '(no name)'}[/bold]\n[dim]{parsed.contact}[/dim]",
            border_style="blue",
        )
    )
    table = Table(title=f"{len(parsed.sections)} sections", show_lines=True)
    table.add_column("Section", style="bold")
    table.add_column("Content")
    for section in parsed.sections:
        table.add_row(section.title, section.content.rstrip())
    console.print(table)

    if output:
        console.print(f"\n[green]Normalized CV saved to:[/green] {output}")


@app.command()
def pdf(
    source: Annotated[Path, typer.Argument(help="Markdown CV, or structured CV as JSON")],
    title: Annotated[
        str | None, typer.Option("--title", "-t", help="Document title used for the file name")
    ] = None,
    output_dir: Annotated[
        Path | None, typer.Option("--output-dir", "-o", help="Directory to save the PDF in")
    ] = None,
) -> None:
    """Export a CV as a paginated A4 PDF."""
    settings = get_settings()
    cv = load_cv(source)

    if title is None:
        name = cv.name if isinstance(cv, ParsedCV) else cv.personal_info.full_name
        title = f"{name} CV" if name else source.stem

    path = export_cv_pdf(
        cv,
        title,
        output_dir=output_dir or settings.output_dir,
        font_dir=settings.font_dir,
    )
    if path is None:
        console.print(f"[red]Error:[/red] {GENERIC_FAILURE_MESSAGE}")
        raise typer.Exit(1)

    console.print(f"[green]Saved to:[/green] {path}")


@app.command()
def score(
    profile: Annotated[Path, typer.Argument(help="Career profile JSON")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the report as JSON")] = False,
) -> None:
    """Compute the career readiness score."""
    data = load_profile(profile)
    report = CareerScorer(in_demand_skills=get_settings().in_demand_skills).compute(data)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return

    console.print(
        Panel.fit(
            f"[bold blue]Career Score:[/bold blue] {report.overall}/100\n"
            f"[dim]Profile completion {report.profile_completion}% - "
            f"last activity: {report.last_activity}[/dim]",
            border_style="blue",
        )
    )

    table = Table()
    table.add_column("Category", style="bold")
    table.add_column("Score", justify="right")
    table.add_column("Status")
    table.add_column("Next steps")
    for category in report.categories:
        color = STATUS_COLORS[category.status]
        table.add_row(
            category.name,
            str(category.score),
            f"[{color}]{category.description}[/{color}]",
            "\n".join(category.improvements),
        )
    console.print(table)

    if report.recommendations:
        console.print("\n[bold]Recommendations[/bold]")
        for rec in report.recommendations:
            console.print(f"  - {rec.title} [dim]({rec.impact}, {rec.priority})[/dim]")


@app.command()
def match(
    profile: Annotated[Path, typer.Argument(help="Career profile JSON")],
    jobs: Annotated[Path, typer.Argument(help="JSON list of job postings")],
    limit: Annotated[int, typer.Option("--limit", "-n", help="Show at most N jobs")] = 10,
) -> None:
    """Rank job postings by relevance to a profile."""
    data = load_profile(profile)
    try:
        postings = TypeAdapter(list[JobPosting]).validate_json(read_file(jobs))
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid jobs file {jobs}:\n{e}")
        raise typer.Exit(1) from e

    ranked = rank_jobs(postings, [s.name for s in data.skills], data.experiences)

    table = Table(title=f"Top {min(limit, len(ranked))} of {len(ranked)} jobs")
    table.add_column("Match", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Company")
    table.add_column("Location")
    for item in ranked[:limit]:
        table.add_row(f"{item.match}%", item.job.title, item.job.company, item.job.location or "")
    console.print(table)


@app.command()
def credits(
    balance: Annotated[
        int | None, typer.Option("--balance", "-b", help="Current credit balance to check")
    ] = None,
) -> None:
    """Show credit packages and what each action costs."""
    table = Table(title="Credit packages")
    table.add_column("Package", style="bold")
    table.add_column("Credits", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Credits per rand", justify="right")
    table.add_column("Description")
    for package in CREDIT_PACKAGES:
        label = f"{package.id} [yellow](popular)[/yellow]" if package.popular else package.id
        table.add_row(
            label,
            format_credits(package.credits),
            package.price_label,
            f"{package.credits_per_rand:g}",
            package.description,
        )
    console.print(table)

    console.print("\n[bold]Costs[/bold]")
    for action, cost in CREDIT_COSTS.items():
        line = f"  - {action.replace('_', ' ')}: {cost} credits"
        if balance is not None:
            ok = has_enough_credits(balance, cost)
            line += " [green](affordable)[/green]" if ok else " [red](not enough credits)[/red]"
        console.print(line)

    if balance is not None:
        console.print(f"\n[bold blue]Balance:[/bold blue] {format_credits(balance)} credits")


if __name__ == "__main__":
    app()
