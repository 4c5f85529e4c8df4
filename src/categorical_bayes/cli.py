"""Command-line interface for categorical Naive Bayes classification.

Provides ``info``, ``classify``, and ``interactive`` commands with rich
terminal output using the ``click`` and ``rich`` libraries.

Usage::

    categorical-bayes info examples/food_freshness.yaml
    categorical-bayes classify examples/food_freshness.yaml examples/food_freshness.csv \\
        freezer short meat vacuum_packed
    categorical-bayes interactive examples/career_success.yaml examples/career_success.csv
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .classifier import NaiveBayesClassifier
from .config import ModelConfig, load_config
from .errors import NaiveBayesError
from .models import ClassificationResult, TrainingSet

console = Console()


def _load_classifier(config_file: Path, data_file: Path) -> NaiveBayesClassifier:
    classifier = NaiveBayesClassifier(load_config(config_file))
    classifier.load_training_data(data_file)
    return classifier


def _fail(error: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.version_option(package_name="categorical-bayes")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Categorical Naive Bayes classifier.

    Train on a delimited file of labeled discrete feature vectors and
    classify new vectors by maximum posterior probability.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def info(config_file: Path) -> None:
    """Show the features and classes of a model configuration.

    Example: categorical-bayes info examples/food_freshness.yaml
    """
    try:
        config = load_config(config_file)
    except (ValueError, OSError) as e:
        _fail(e)
    _render_model_info(config)


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("values", nargs=-1, required=True)
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.option("--show-data", is_flag=True, help="Also print the training data.")
def classify(
    config_file: Path,
    data_file: Path,
    values: tuple[str, ...],
    output: str,
    show_data: bool,
) -> None:
    """Classify one feature vector given as VALUES.

    Example: categorical-bayes classify model.yaml data.csv high low no
    """
    try:
        classifier = _load_classifier(config_file, data_file)
        result = classifier.classify(list(values))
    except (NaiveBayesError, ValueError, OSError) as e:
        _fail(e)

    if output == "json":
        payload = result.to_dict()
        payload["predicted_label"] = classifier.class_name(result.predicted_class)
        click.echo(json.dumps(payload, indent=2))
        return

    if show_data:
        _render_training_data(classifier.training_set, classifier.config)
    _render_result(result, classifier.config)


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("data_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def interactive(config_file: Path, data_file: Path) -> None:
    """Prompt for feature values and classify them, repeatedly.

    Example: categorical-bayes interactive model.yaml data.csv
    """
    try:
        classifier = _load_classifier(config_file, data_file)
    except (NaiveBayesError, ValueError, OSError) as e:
        _fail(e)

    config = classifier.config
    _render_model_info(config)

    while True:
        query = []
        for j, name in enumerate(config.attribute_names):
            domain = config.attribute_values(j)
            choice = click.Choice(domain) if domain else None
            query.append(click.prompt(name, type=choice).strip())

        try:
            result = classifier.classify(query)
        except NaiveBayesError as e:
            _fail(e)
        _render_result(result, config)

        if not click.confirm("Classify another item?", default=False):
            break


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_model_info(config: ModelConfig) -> None:
    """Render the model's features, domains and classes."""
    lines = [
        f"Number of predictor variables: {config.num_features}",
        f"Number of class labels: {config.num_classes}",
    ]
    console.print()
    console.print(Panel("\n".join(lines), title=config.title, border_style="blue"))

    table = Table(title="Attributes", show_lines=False)
    table.add_column("#", justify="right", width=4)
    table.add_column("Attribute", style="cyan")
    table.add_column("Values", style="white")
    for j, name in enumerate(config.attribute_names):
        values = config.attribute_values(j)
        table.add_row(str(j), name, ", ".join(values) if values else "-")
    console.print(table)

    classes = ", ".join(
        f"{k} = {config.class_name(k)}" for k in range(config.num_classes)
    )
    console.print(f"Classes: {classes}")
    console.print()


def _render_training_data(training_set: TrainingSet, config: ModelConfig) -> None:
    """Render the training rows as a table."""
    table = Table(title=f"Training data ({len(training_set)} rows)")
    table.add_column("#", justify="right", width=4)
    for name in config.attribute_names:
        table.add_column(name, style="white")
    table.add_column("Class", style="cyan", justify="center")

    for i, row in enumerate(training_set):
        table.add_row(str(i), *row.features, config.class_name(row.label))

    console.print(table)
    console.print()


def _render_result(result: ClassificationResult, config: ModelConfig) -> None:
    """Render a ClassificationResult with rich formatting."""
    console.print()
    console.print(Panel(
        "  ".join(result.query),
        title="Classification Results",
        subtitle="Input to classify",
        border_style="blue",
    ))

    counts = Table(title="Joint counts (before / after Laplacian smoothing)")
    counts.add_column("Attribute", style="cyan")
    for k in range(result.num_classes):
        counts.add_column(config.class_name(k), justify="center")
    for name, raw, smoothed in zip(
        config.attribute_names, result.raw_joint_counts, result.joint_counts
    ):
        counts.add_row(name, *(f"{r} / {s}" for r, s in zip(raw, smoothed)))
    console.print(counts)

    table = Table(show_lines=False)
    table.add_column("Class", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Evidence term", justify="right")
    table.add_column("Probability", justify="right")
    for k in range(result.num_classes):
        style = "bold green" if k == result.predicted_class else ""
        table.add_row(
            f"{k} ({config.class_name(k)})",
            str(result.class_counts[k]),
            f"{result.scores[k]:.4f}",
            f"{result.probabilities[k]:.4f}",
            style=style,
        )
    console.print(table)

    if result.confidence > 0.7:
        conf_style = "bold green"
    elif result.confidence > 0.5:
        conf_style = "bold yellow"
    else:
        conf_style = "bold red"

    console.print(
        f"Predicted class: [bold]{result.predicted_class}[/] "
        f"({config.class_name(result.predicted_class)})"
    )
    console.print(f"Confidence: [{conf_style}]{result.confidence:.1%}[/]")
    console.print()


if __name__ == "__main__":
    main()
