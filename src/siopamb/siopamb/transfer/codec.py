"""Spreadsheet codec: xlsx bytes <-> list of row mappings (pandas + openpyxl)."""
from __future__ import annotations

import io
from typing import Any, Dict, List, Sequence

import pandas as pd

from ..core.constants import EXPORT_SHEET_NAME
from ..core.exceptions import ValidationError


def write_workbook(rows: Sequence[Dict[str, Any]], *, columns: Sequence[str], sheet_name: str = EXPORT_SHEET_NAME) -> bytes:
    df = pd.DataFrame(list(rows), columns=list(columns))

    # In memory only, nothing touches the disk
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def parse_workbook(data: bytes) -> List[Dict[str, Any]]:
    """First sheet only; empty cells come back as None."""
    try:
        df = pd.read_excel(io.BytesIO(data), sheet_name=0, dtype=object, engine="openpyxl")
    except Exception as exc:
        raise ValidationError("Arquivo de planilha inválido") from exc

    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")
