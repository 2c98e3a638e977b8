"""SFC CLI — submit feedback and work the moderation queue from a terminal."""

from __future__ import annotations

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from sfc import __version__
from sfc.errors import ConfigurationError, InvalidFeedbackError, MissingConfigurationError
from sfc.feedback.models import FeedbackRecord, ReviewState

console = Console()

_STATE_STYLE = {
    ReviewState.PENDING: "[yellow]pending[/]",
    ReviewState.APPROVED: "[green]approved[/]",
    ReviewState.REJECTED: "[red]rejected[/]",
}


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", default=None, help="Path to an sfc.yaml configuration file")
@click.pass_context
def main(ctx: click.Context, config_path: str | None):
    """SFC — Smart Feedback Collector.

    Screens feedback for unsafe content, enriches it with sentiment,
    key phrases and language, and manages the moderator review queue.
    """
    ctx.ensure_object(dict)
    ctx.obj.setdefault("config_path", config_path)


def _load_settings(ctx: click.Context):
    from sfc.config import ConfigurationProvider, load_settings

    try:
        return load_settings(ConfigurationProvider(ctx.obj.get("config_path")))
    except MissingConfigurationError as exc:
        console.print("[red]Configuration incomplete.[/] Missing keys:")
        for key in exc.missing_keys:
            console.print(f"  [red]x[/] {key}")
        if exc.sources:
            console.print(f"  Checked: {', '.join(exc.sources)}")
        ctx.exit(2)
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error:[/] {exc}")
        ctx.exit(2)


def _services(ctx: click.Context):
    """Return the services for this invocation, building them on first use."""
    services = ctx.obj.get("services")
    if services is None:
        from sfc.logging_config import configure_logging
        from sfc.services import build_services

        settings = _load_settings(ctx)
        configure_logging(settings.logging.level, settings.logging.json_output)
        services = build_services(settings)
        ctx.obj["services"] = services
    return services


def _feedback_table(title: str, records: list[FeedbackRecord]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim", no_wrap=True, min_width=8)
    table.add_column("Submitted")
    table.add_column("State")
    table.add_column("Sentiment")
    table.add_column("Flags")
    table.add_column("Content")
    for r in records:
        table.add_row(
            r.id[:8],
            r.submission_time.strftime("%Y-%m-%d %H:%M"),
            _STATE_STYLE[r.state],
            r.sentiment_category.value if r.sentiment_category else "-",
            r.moderation_category or "",
            r.content[:50],
        )
    return table


def _print_record(record: FeedbackRecord) -> None:
    lines = [
        f"[bold]ID:[/] {record.id}",
        f"[bold]Submitted:[/] {record.submission_time.isoformat()}",
        f"[bold]State:[/] {_STATE_STYLE[record.state]}",
        f"[bold]Content safe:[/] {'yes' if record.is_content_safe else 'no'}"
        f" (severity {record.severity_level})",
    ]
    if record.moderation_category:
        lines.append(f"[bold]Flagged:[/] {record.moderation_category}")
    if record.sentiment_category:
        lines.append(
            f"[bold]Sentiment:[/] {record.sentiment_category.value} ({record.sentiment_score:.2f})"
        )
    if record.language:
        lines.append(f"[bold]Language:[/] {record.language}")
    if record.key_phrases:
        lines.append(f"[bold]Key phrases:[/] {', '.join(record.key_phrases)}")
    if record.review_notes:
        lines.append(f"[bold]Review notes:[/] {record.review_notes}")
    lines.append("")
    lines.append(record.content)
    console.print(Panel("\n".join(lines), title="Feedback"))


# ── Submit ───────────────────────────────────────────────────────────


@main.command()
@click.argument("content")
@click.pass_context
def submit(ctx: click.Context, content: str):
    """Submit a piece of feedback."""
    services = _services(ctx)
    try:
        record = services.pipeline.submit(content)
    except InvalidFeedbackError as exc:
        console.print(f"[red]Rejected:[/] {exc}")
        ctx.exit(1)

    if record.is_content_safe:
        console.print("[green]Your feedback has been submitted and analyzed. Thank you![/]")
    else:
        console.print(
            "[yellow]Your feedback contains content that requires review. "
            "It has been submitted for moderation.[/]"
        )
    console.print(f"  ID: {record.id}")


# ── Browse ───────────────────────────────────────────────────────────


@main.command(name="list")
@click.option("--all", "show_all", is_flag=True, help="Include pending and rejected feedback")
@click.pass_context
def list_feedback(ctx: click.Context, show_all: bool):
    """List published feedback, newest first."""
    pipeline = _services(ctx).pipeline
    records = pipeline.list_all() if show_all else pipeline.list_approved()
    if not records:
        console.print("[yellow]No feedback found.[/]")
        return
    console.print(_feedback_table(f"Feedback ({len(records)})", records))


@main.command()
@click.argument("feedback_id")
@click.pass_context
def show(ctx: click.Context, feedback_id: str):
    """Show a single feedback record."""
    record = _services(ctx).pipeline.get(feedback_id)
    if record is None:
        console.print(f"[red]Feedback not found:[/] {feedback_id}")
        ctx.exit(1)
    _print_record(record)


# ── Review ───────────────────────────────────────────────────────────


@main.command()
@click.pass_context
def pending(ctx: click.Context):
    """List feedback awaiting moderation."""
    records = _services(ctx).review.pending_review()
    if not records:
        console.print("[green]Review queue is empty.[/]")
        return
    console.print(_feedback_table(f"Pending review ({len(records)})", records))


@main.command()
@click.pass_context
def rejected(ctx: click.Context):
    """List rejected feedback."""
    records = _services(ctx).review.rejected()
    if not records:
        console.print("[yellow]No rejected feedback.[/]")
        return
    console.print(_feedback_table(f"Rejected ({len(records)})", records))


@main.command()
@click.argument("feedback_id")
@click.option("--notes", "-n", default="", help="Moderator notes")
@click.pass_context
def approve(ctx: click.Context, feedback_id: str, notes: str):
    """Approve a pending feedback record."""
    record = _services(ctx).review.approve(feedback_id, notes)
    if record is None:
        console.print(f"[red]Feedback not found:[/] {feedback_id}")
        ctx.exit(1)
    if record.state is not ReviewState.APPROVED:
        console.print(f"[yellow]Feedback already {record.state.value}; nothing changed.[/]")
        return
    console.print("[green]Feedback approved successfully.[/]")


@main.command()
@click.argument("feedback_id")
@click.option("--notes", "-n", default="", help="Moderator notes, e.g. the reason for rejection")
@click.pass_context
def reject(ctx: click.Context, feedback_id: str, notes: str):
    """Reject a pending feedback record."""
    record = _services(ctx).review.reject(feedback_id, notes)
    if record is None:
        console.print(f"[red]Feedback not found:[/] {feedback_id}")
        ctx.exit(1)
    if record.state is not ReviewState.REJECTED:
        console.print(f"[yellow]Feedback already {record.state.value}; nothing changed.[/]")
        return
    console.print("[green]Feedback rejected successfully.[/]")


# ── Dashboard ────────────────────────────────────────────────────────


@main.command()
@click.pass_context
def dashboard(ctx: click.Context):
    """Show sentiment, language and key phrase statistics."""
    from sfc.dashboard import build_dashboard

    services = _services(ctx)
    summary = build_dashboard(services.all_feedback())

    console.print(
        Panel(
            f"Total: {summary.total_count}   "
            f"[green]Positive: {summary.positive_count}[/]   "
            f"Neutral: {summary.neutral_count}   "
            f"[red]Negative: {summary.negative_count}[/]   "
            f"[yellow]Pending review: {services.review.pending_count()}[/]",
            title="Feedback dashboard",
        )
    )

    for title, data in (
        ("Submissions by day", summary.submissions_by_day),
        ("Languages", summary.language_distribution),
        ("Top key phrases", summary.top_key_phrases),
    ):
        if not data:
            continue
        table = Table(title=title)
        table.add_column("Value", style="cyan")
        table.add_column("Count", justify="right")
        for key, count in data.items():
            table.add_row(key, str(count))
        console.print(table)


# ── Config ───────────────────────────────────────────────────────────


@main.command(name="check-config")
@click.pass_context
def check_config(ctx: click.Context):
    """Validate configuration and print the resolved settings."""
    settings = _load_settings(ctx)

    table = Table(title="Resolved configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for section, values in settings.model_dump().items():
        if values is None:
            continue
        for key, value in values.items():
            shown = "********" if key == "api_key" and value else str(value)
            table.add_row(f"{section}:{key}", shown)
    console.print(table)
    console.print("[green]Configuration OK[/]")


if __name__ == "__main__":
    main()
