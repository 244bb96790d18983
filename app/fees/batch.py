from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import pandas as pd

from app.core.config import Settings, get_settings
from app.core.logging import configure_logging, get_logger
from app.services.fee_calculator import FeeCalculationInput, calculate_service_fee, validate_fee_input

logger = get_logger()

INPUT_COLUMNS = ("car_price", "vat_rate", "currency", "fee_model")
RESULT_COLUMNS = (
    "net_fee",
    "vat_on_fee",
    "total_customer_pays",
    "business_keeps",
    "fee_model_description",
)


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower().replace(" ", "_").replace("-", "_") for c in df.columns]
    return df


def _clean(value: Any) -> Any:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _row_input(row: dict[str, Any]) -> dict[str, Any]:
    partial = {name: _clean(row.get(name)) for name in INPUT_COLUMNS}
    for name in ("car_price", "vat_rate"):
        value = partial[name]
        if isinstance(value, str):
            try:
                partial[name] = float(value)
            except ValueError:
                pass
        elif value is not None:
            partial[name] = float(value)
    return partial


def calculate_fees_frame(
    df: pd.DataFrame,
    default_vat_rate: float | None = None,
    default_currency: str | None = None,
    default_fee_model: str | None = None,
) -> pd.DataFrame:
    """Validate and price every listing row.

    Invalid rows keep empty fee columns and carry their problems in ``errors``.
    """
    df = _normalize_columns(df)
    defaults = {
        "vat_rate": default_vat_rate,
        "currency": default_currency,
        "fee_model": default_fee_model,
    }
    for name, default in defaults.items():
        if default is None:
            continue
        if name not in df.columns:
            df[name] = default
        else:
            df[name] = df[name].where(df[name].notna(), default)

    results: list[dict[str, Any]] = []
    for row in df.to_dict(orient="records"):
        partial = _row_input(row)
        errors = validate_fee_input(partial)
        if errors:
            results.append({**{c: None for c in RESULT_COLUMNS}, "errors": "; ".join(errors)})
            continue
        result = calculate_service_fee(FeeCalculationInput(**partial))
        results.append({**{c: getattr(result, c) for c in RESULT_COLUMNS}, "errors": ""})

    out = df.copy()
    result_df = pd.DataFrame(results, columns=[*RESULT_COLUMNS, "errors"], index=df.index)
    for column in result_df.columns:
        out[column] = result_df[column]
    return out


def run_batch(
    input_csv: Path,
    output_csv: Path,
    default_vat_rate: float | None = None,
    default_currency: str | None = None,
    default_fee_model: str | None = None,
) -> dict[str, Any]:
    df = pd.read_csv(input_csv)
    out = calculate_fees_frame(
        df,
        default_vat_rate=default_vat_rate,
        default_currency=default_currency,
        default_fee_model=default_fee_model,
    )
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(output_csv, index=False)

    invalid = int((out["errors"] != "").sum())
    summary = {
        "status": "ok",
        "input_csv": str(input_csv),
        "output_csv": str(output_csv),
        "rows": int(len(out)),
        "invalid_rows": invalid,
        "total_net_fee": float(out["net_fee"].fillna(0).sum()),
        "total_customer_pays": float(out["total_customer_pays"].fillna(0).sum()),
    }
    logger.info("fee_batch_complete", **summary)
    return summary


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    configure_logging()
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(prog="wexcars-fees-batch", description="Calculate service fees for a CSV of listings.")
    parser.add_argument("--input", required=True, help="CSV with car_price, vat_rate, currency, fee_model columns.")
    parser.add_argument("--output", required=True)
    parser.add_argument("--default-vat-rate", type=float, default=settings.default_vat_rate)
    parser.add_argument("--default-currency", default=settings.default_currency)
    parser.add_argument("--default-fee-model", default=settings.default_fee_model)
    args = parser.parse_args(argv)

    summary = run_batch(
        Path(args.input),
        Path(args.output),
        default_vat_rate=args.default_vat_rate,
        default_currency=args.default_currency,
        default_fee_model=args.default_fee_model,
    )
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
