"""
Loading labeled series from delimited text files.

Each row is ``label, v1, v2, ..., vn``. There is no header unless
``skip_header`` is set, in which case the first non-blank row is dropped.
Rows are not required to have the same number of values; that is checked
when series are compared. Files are decoded as UTF-8.
"""

import csv
import logging
from pathlib import Path
from typing import List, Union

import numpy as np

from .errors import SeriesLoadError, SeriesParseError
from .series import Dataset, LabeledSeries

logger = logging.getLogger(__name__)


def _parse_row(row: List[str], path: str, line: int) -> LabeledSeries:
    label = row[0].strip()
    fields = row[1:]
    if not fields:
        raise SeriesParseError(f"row {label!r} has no values", path=path, line=line)

    values = np.empty(len(fields), dtype=np.float64)
    for k, field in enumerate(fields):
        try:
            values[k] = float(field)
        except ValueError:
            raise SeriesParseError(
                f"field {k + 2} is not a number: {field!r}",
                path=path, line=line, field=field,
            ) from None
    return LabeledSeries(label, values)


def read_series_csv(path: Union[str, Path], delimiter: str = ",",
                    skip_header: bool = False) -> Dataset:
    """
    Read a dataset of labeled series from a delimited file.

    Args:
        path: Input file
        delimiter: Field separator
        skip_header: Drop the first non-blank row instead of parsing it

    Returns:
        Dataset in file order

    Raises:
        SeriesLoadError: The file is missing or unreadable
        SeriesParseError: A row is malformed; the message carries the line number
    """
    path = str(path)
    series = []
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f, delimiter=delimiter)
            header_pending = skip_header
            for row in reader:
                if not row or all(not cell.strip() for cell in row):
                    continue
                if header_pending:
                    header_pending = False
                    continue
                series.append(_parse_row(row, path, reader.line_num))
    except OSError as e:
        raise SeriesLoadError(f"Cannot read {path}: {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise SeriesParseError(str(e), path=path) from e

    dataset = Dataset(series)
    logger.info(f"Loaded {len(dataset)} series from {path}")
    if not dataset.is_uniform():
        logger.warning(f"Series in {path} have differing lengths: {sorted(set(dataset.lengths))}")
    return dataset
