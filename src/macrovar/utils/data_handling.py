"""
Table formatting for model summaries.

Renders labelled numeric blocks (coefficients, information criteria,
covariance matrices) as plain-text tables for console reports.
"""

from typing import Dict, Optional, Sequence, Union
import numpy as np
import pandas as pd


def table_print(data: Union[np.ndarray, pd.DataFrame],
                row_names: Optional[Sequence[str]] = None,
                col_names: Optional[Sequence[str]] = None,
                precision: int = 4,
                title: Optional[str] = None,
                marks: Optional[Dict[str, int]] = None) -> str:
    """Create formatted string table from data.

    Args:
        data: Input array/DataFrame
        row_names: Optional list of row names
        col_names: Optional list of column names
        precision: Number of decimal places (default=4)
        title: Optional table title
        marks: Optional mapping column name -> row position whose cell is
            flagged with a trailing '*' (e.g. the minimum of a criterion)

    Returns:
        Formatted string table
    """
    x = data.values if isinstance(data, pd.DataFrame) else np.asarray(data)
    if x.ndim == 1:
        x = x.reshape(-1, 1)
    nrows, ncols = x.shape

    if isinstance(data, pd.DataFrame):
        row_names = row_names or data.index.astype(str).tolist()
        col_names = col_names or data.columns.astype(str).tolist()
    else:
        row_names = row_names or [f"Row{i+1}" for i in range(nrows)]
        col_names = col_names or [f"Col{i+1}" for i in range(ncols)]
    marks = marks or {}

    fmt = f"{{:.{precision}f}}"
    cells = []
    for i in range(nrows):
        row = []
        for j, col in enumerate(col_names):
            cell = fmt.format(x[i, j])
            if marks.get(col) == i:
                cell += "*"
            row.append(cell)
        cells.append(row)

    col_widths = [max([len(str(col))] + [len(row[j]) for row in cells])
                  for j, col in enumerate(col_names)]
    row_width = max(len(str(row)) for row in row_names)

    table = [title] if title else []

    header = " " * row_width + " | "
    header += " | ".join(f"{col:>{width}}" for col, width in zip(col_names, col_widths))
    table.append(header)

    separator = "-" * row_width + "-+-" + "-+-".join("-" * width for width in col_widths)
    table.append(separator)

    for row_name, row in zip(row_names, cells):
        line = f"{row_name:>{row_width}} | "
        line += " | ".join(f"{cell:>{width}}" for cell, width in zip(row, col_widths))
        table.append(line)

    return "\n".join(table)
