"""
Dataset loading.

Reads a tabular dataset whose first row is a header into an (n, m) tensor.
"""

from pathlib import Path
import zipfile
from typing import Optional, Union
import torch
from torch import Tensor
import pandas as pd

from ..base.exceptions import InvalidInput
from .validation import validate_data


SPREADSHEET_SUFFIXES = ('.xlsx', '.xlsm', '.xls')
TEXT_SUFFIXES = ('.csv',)


def read_table(path: Union[str, Path], sheet: Union[int, str] = 0) -> pd.DataFrame:
    """Read the raw table at ``path``; the first row is used as the header.

    Args:
        path: Spreadsheet (.xlsx, .xlsm, .xls) or .csv file
        sheet: Worksheet index or name (spreadsheets only)

    Returns:
        DataFrame with one row per observation
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    if suffix not in TEXT_SUFFIXES + SPREADSHEET_SUFFIXES:
        raise InvalidInput(f"Unsupported dataset format: {path.suffix or path.name}")

    try:
        if suffix in TEXT_SUFFIXES:
            return pd.read_csv(path, header=0)
        engine = None if suffix == '.xls' else 'openpyxl'
        return pd.read_excel(path, sheet_name=sheet, header=0, engine=engine)
    except (pd.errors.ParserError, pd.errors.EmptyDataError,
            zipfile.BadZipFile, ValueError, KeyError) as e:
        raise InvalidInput(f"Cannot read {path}: {e}") from e


def table_to_matrix(table: pd.DataFrame,
                    dtype: torch.dtype = torch.float64,
                    device: Optional[torch.device] = None) -> Tensor:
    """Convert every cell of ``table`` to a float.

    Empty cells become 0.0. A cell that is not a number raises InvalidInput
    naming its data row (1-based, header excluded) and column.
    """
    if table.shape[0] == 0 or table.shape[1] == 0:
        raise InvalidInput(f"Table has {table.shape[0]} data rows and {table.shape[1]} columns")

    converted = table.apply(pd.to_numeric, errors='coerce')
    bad = converted.isna() & table.notna()

    if bad.to_numpy().any():
        row, col = next(zip(*bad.to_numpy().nonzero()))
        raise InvalidInput(f"Non-numeric value {table.iat[row, col]!r} "
                           f"at row {row + 1}, column {table.columns[col]!r}")

    return validate_data(converted.fillna(0.0).to_numpy(dtype=float),
                         dtype=dtype, device=device)


def load_matrix(path: Union[str, Path],
                sheet: Union[int, str] = 0,
                dtype: torch.dtype = torch.float64,
                device: Optional[torch.device] = None) -> Tensor:
    """Load a dataset file into an (n, m) observation matrix.

    Args:
        path: Spreadsheet or .csv file; first row is a header
        sheet: Worksheet index or name (spreadsheets only)
        dtype: Target data type
        device: Target device

    Returns:
        Validated (n, m) tensor

    Raises:
        FileNotFoundError: If ``path`` does not exist
        InvalidInput: If the format is unsupported, the file cannot be
            parsed, a cell is not numeric, or the table has no data rows
    """
    return table_to_matrix(read_table(path, sheet=sheet), dtype=dtype, device=device)
