"""Training data parsers for delimited text files.

Each line holds F feature values followed by an integer class label::

    freezer,short,meat,vacuum_packed,1
    left_outside,very_long,vegetable,damaged,0

Fields are whitespace-trimmed and blank lines are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from .errors import InvalidLabel, SchemaMismatch
from .models import TrainingRow, TrainingSet

logger = logging.getLogger(__name__)


def parse_lines(
    lines: Iterable[str],
    num_features: int,
    num_classes: int,
    delimiter: str = ",",
    source: str = "<input>",
) -> TrainingSet:
    """Parse delimited training rows from an iterable of text lines.

    Args:
        lines: Raw text lines.
        num_features: Number of predictor slots (F).
        num_classes: Number of class labels (C).
        delimiter: Field separator.
        source: Name used in error messages.

    Returns:
        A validated TrainingSet.

    Raises:
        SchemaMismatch: If a line does not have F + 1 fields.
        InvalidLabel: If a label is not an integer in ``[0, C)``.
    """
    rows: list[TrainingRow] = []
    for line_no, line in enumerate(lines, 1):
        if not line.strip():
            continue
        fields = [f.strip() for f in line.rstrip("\r\n").split(delimiter)]
        if len(fields) != num_features + 1:
            raise SchemaMismatch(
                f"{source}:{line_no}: expected {num_features} feature values and a label, "
                f"got {len(fields)} fields"
            )
        try:
            label = int(fields[-1])
        except ValueError as exc:
            raise InvalidLabel(
                f"{source}:{line_no}: label {fields[-1]!r} is not an integer"
            ) from exc
        if not 0 <= label < num_classes:
            raise InvalidLabel(
                f"{source}:{line_no}: label {label} outside valid range [0, {num_classes})"
            )
        rows.append(TrainingRow(features=tuple(fields[:-1]), label=label))

    return TrainingSet(rows=tuple(rows), num_features=num_features, num_classes=num_classes)


class DelimitedTextParser:
    """Parser for comma-separated training files.

    Args:
        delimiter: Field separator. Defaults to the parser's own.
    """

    supported_extensions: tuple[str, ...] = (".csv", ".txt", ".data")
    default_delimiter = ","

    def __init__(self, delimiter: Optional[str] = None) -> None:
        self.delimiter = delimiter or self.default_delimiter

    def can_handle(self, path: Path) -> bool:
        """Check if this parser can handle the given file."""
        return path.suffix.lower() in self.supported_extensions

    def parse(self, path: Path, num_features: int, num_classes: int) -> TrainingSet:
        """Parse a training file.

        Raises:
            FileNotFoundError: If the file does not exist.
            SchemaMismatch: If a line has the wrong number of fields.
            InvalidLabel: If a label is missing or out of range.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with open(path, "r", encoding="utf-8-sig") as f:
            training_set = parse_lines(
                f, num_features, num_classes, delimiter=self.delimiter, source=path.name
            )

        logger.info("Loaded %d training rows from %s", len(training_set), path)
        logger.debug("Class distribution: %s", training_set.class_counts())
        return training_set


class TabSeparatedParser(DelimitedTextParser):
    """Parser for tab-separated training files."""

    supported_extensions = (".tsv", ".tab")
    default_delimiter = "\t"


def get_parser(path: Path, delimiter: Optional[str] = None) -> DelimitedTextParser:
    """Get the appropriate parser for a training file.

    An explicit ``delimiter`` overrides extension-based selection.

    Raises:
        ValueError: If no parser supports the file extension.
    """
    if delimiter is not None:
        return DelimitedTextParser(delimiter)

    parsers: list[DelimitedTextParser] = [TabSeparatedParser(), DelimitedTextParser()]
    for parser in parsers:
        if parser.can_handle(path):
            return parser

    supported = set()
    for p in parsers:
        supported.update(p.supported_extensions)

    raise ValueError(
        f"No parser available for '{path.suffix}'. "
        f"Supported formats: {', '.join(sorted(supported))}"
    )


def load_training_data(
    file_path: str | Path,
    num_features: int,
    num_classes: int,
    delimiter: Optional[str] = None,
) -> TrainingSet:
    """Load and validate a training file."""
    path = Path(file_path)
    return get_parser(path, delimiter).parse(path, num_features, num_classes)
