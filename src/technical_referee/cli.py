"""CLI for the Technical Referee.

Provides a command-line interface for comparing technical options
against a set of user constraints.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import (
    CONFIG_ENV_VAR,
    RefereeConfig,
    config_search_paths,
    resolve_config,
    write_default_config,
)
from .engine import (
    RefereeEngine,
    load_constraints,
    load_options,
    validate_constraints_file,
    validate_options_file,
)
from .knowledge import sample_technologies
from .report import build_comparison_output
from .schema import Category, ComparisonOutput, EvaluationResult, UserConstraints

console = Console()


@click.group()
@click.version_option(version="1.0.0", prog_name="technical-referee")
def main():
    """Technical Referee - compare technical options.

    Scores 2-3 candidate technologies against weighted priorities and
    explains the trade-offs behind the recommendation.
    """
    pass


@main.command("compare")
@click.option(
    "--options", "-i",
    "options_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to options file (JSON or YAML)"
)
@click.option(
    "--constraints", "-c",
    "constraints_path",
    type=click.Path(exists=True),
    help="Path to constraints file (JSON or YAML, default: neutral constraints)"
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    help="Path to referee configuration YAML"
)
@click.option(
    "--out", "-o",
    type=click.Path(),
    help="Output file for JSON results"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show detailed output"
)
@click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output raw JSON instead of formatted text"
)
def compare_cmd(
    options_path: str,
    constraints_path: Optional[str],
    config_path: Optional[str],
    out: Optional[str],
    verbose: bool,
    json_output: bool,
):
    """Compare options and recommend one.

    Examples:
        technical-referee compare -i options.json
        technical-referee compare -i options.json -c constraints.yaml -v
        technical-referee compare -i options.yaml -c constraints.yaml -j -o result.json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = resolve_config(Path(config_path) if config_path else None)

        options = load_options(options_path)
        constraints = load_constraints(constraints_path) if constraints_path else UserConstraints()

        engine = RefereeEngine(config=config)
        result = engine.evaluate(options, constraints)
        report = build_comparison_output(result, constraints, engine.config)

        if json_output:
            output_json(result, report, out)
        else:
            display_report(result, report, verbose)
            if out:
                output_json(result, report, out)
                console.print(f"\n[green]Results saved to {out}[/green]")

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("validate")
@click.option(
    "--options", "-i",
    "options_path",
    type=click.Path(),
    help="Path to options file"
)
@click.option(
    "--constraints", "-c",
    "constraints_path",
    type=click.Path(),
    help="Path to constraints file"
)
def validate_cmd(options_path: Optional[str], constraints_path: Optional[str]):
    """Validate options and/or constraints files.

    Examples:
        technical-referee validate -i options.json
        technical-referee validate -c constraints.yaml
        technical-referee validate -i options.json -c constraints.yaml
    """
    if not options_path and not constraints_path:
        console.print("[yellow]Please specify --options and/or --constraints to validate[/yellow]")
        return

    all_valid = True

    if options_path:
        is_valid, issues = validate_options_file(options_path)
        if is_valid:
            console.print(f"[green]✓ Options valid: {options_path}[/green]")
            for issue in issues:
                console.print(f"  [yellow]- {issue}[/yellow]")
        else:
            console.print(f"[red]✗ Options invalid: {options_path}[/red]")
            for issue in issues:
                console.print(f"  - {issue}")
            all_valid = False

    if constraints_path:
        is_valid, issues = validate_constraints_file(constraints_path)
        if is_valid:
            console.print(f"[green]✓ Constraints valid: {constraints_path}[/green]")
        else:
            console.print(f"[red]✗ Constraints invalid: {constraints_path}[/red]")
            for issue in issues:
                console.print(f"  - {issue}")
            all_valid = False

    sys.exit(0 if all_valid else 1)


@main.command("samples")
@click.option(
    "--category", "-g",
    type=click.Choice(["cloud", "backend", "database"]),
    help="Only show one category"
)
@click.option(
    "--out", "-o",
    type=click.Path(),
    help="Write the sample options of the chosen category as an options file"
)
def samples_cmd(category: Optional[str], out: Optional[str]):
    """List the built-in sample technologies.

    Examples:
        technical-referee samples
        technical-referee samples -g database -o options.json
    """
    samples = sample_technologies()
    if category:
        samples = {Category(category): samples[Category(category)]}

    if out:
        options = [option for group in samples.values() for option in group]
        with open(out, "w", encoding="utf-8") as f:
            json.dump([option.model_dump(mode="json") for option in options], f, indent=2)
        console.print(f"[green]✓[/green] {len(options)} sample options saved to: {out}")
        return

    for group_category, options in samples.items():
        table = Table(title=group_category.value, show_header=True, header_style="bold")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Attributes")
        for option in options:
            attributes = ", ".join(
                f"{key}={value}" for key, value in (option.attributes or {}).items()
                if not isinstance(value, list)
            )
            table.add_row(option.name, attributes)
        console.print(table)


@main.command("init-config")
@click.option(
    "--out", "-o",
    type=click.Path(),
    default="referee-config.yaml",
    help="Output path for the configuration file"
)
@click.option(
    "--force", "-f",
    is_flag=True,
    help="Overwrite existing config file"
)
def init_config_cmd(out: str, force: bool):
    """Write the default referee configuration, with comments, to a file.

    Example:
        technical-referee init-config --out my-config.yaml
    """
    try:
        write_default_config(Path(out), force=force)
    except FileExistsError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("Use --force to overwrite")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Error creating config:[/red] {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Config file created: {out}")

    table = Table(title="Sections")
    table.add_column("Section", style="cyan")
    table.add_column("Controls")
    for name, field in RefereeConfig.model_fields.items():
        table.add_row(name, (field.annotation.__doc__ or "").strip().splitlines()[0])
    console.print(table)

    console.print("\nSearch order when --config is not given:")
    for position, path in enumerate(config_search_paths(), start=1):
        console.print(f"  {position}. {path}")
    if not os.environ.get(CONFIG_ENV_VAR):
        console.print(f"  [dim]Set {CONFIG_ENV_VAR} to put a file of your own first.[/dim]")


def display_report(result: EvaluationResult, report: ComparisonOutput, verbose: bool):
    """Display the comparison in formatted text."""
    recommendation = report.final_recommendation
    confidence_color = (
        "green" if recommendation.confidence >= 0.75
        else "yellow" if recommendation.confidence >= 0.5
        else "red"
    )

    console.print(Panel(
        f"Recommended: [bold cyan]{recommendation.recommended_option.name}[/bold cyan]\n"
        f"Confidence: [{confidence_color}]{recommendation.confidence:.0%}[/{confidence_color}]\n\n"
        f"{recommendation.reasoning}",
        title="Recommendation",
    ))

    table = Table(show_header=True, header_style="bold")
    for header in report.comparison_table.headers:
        table.add_column(header)
    for row in report.comparison_table.rows:
        table.add_row(*row)
    console.print(table)

    if recommendation.key_factors:
        console.print("\n[bold]Key Factors:[/bold]")
        for factor in recommendation.key_factors:
            console.print(f"  [green]•[/green] {factor}")

    if recommendation.warnings:
        console.print("\n[bold]Watch Out:[/bold]")
        for warning in recommendation.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    for pros_cons in report.pros_and_cons:
        option = pros_cons.option
        console.print(f"\n[bold cyan]{option.name}[/bold cyan] [dim]({option.category.value})[/dim]")
        for pro in pros_cons.pros:
            console.print(f"  [green]+[/green] {pro}")
        for con in pros_cons.cons:
            console.print(f"  [red]-[/red] {con}")

    if report.alternative_scenarios:
        console.print("\n[bold]Alternative Scenarios:[/bold]")
        for scenario in report.alternative_scenarios:
            console.print(
                f"  • {scenario.scenario}: [cyan]{scenario.recommended_option.name}[/cyan]"
            )
            if verbose:
                console.print(f"    [dim]{scenario.reasoning}[/dim]")

    if verbose:
        console.print()
        console.print(report.trade_off_explanation)

        if result.trade_offs.compromises:
            console.print("\n[bold]Compromises:[/bold]")
            for compromise in result.trade_offs.compromises:
                console.print(f"  ({compromise.impact.value}) {compromise.description}")

    if result.warnings:
        console.print("\n[dim]Warnings:[/dim]")
        for warning in result.warnings:
            console.print(f"  [dim]• {warning}[/dim]")


def output_json(result: EvaluationResult, report: ComparisonOutput, out_path: Optional[str]):
    """Output evaluation and report as JSON."""
    payload = {
        "evaluation": result.model_dump(mode="json"),
        "comparison": report.model_dump(mode="json"),
    }
    json_str = json.dumps(payload, indent=2)

    if out_path:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(json_str)
    else:
        print(json_str)


if __name__ == "__main__":
    main()
