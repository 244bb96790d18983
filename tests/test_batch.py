import json

import pandas as pd
import pytest

from app.core.config import Settings
from app.fees.batch import calculate_fees_frame, main, run_batch


def test_calculate_fees_frame():
    df = pd.DataFrame(
        {
            "Car Price": [250000, 0, 4000000],
            "VAT Rate": [25, 25, 19],
            "Currency": ["EUR", "EUR", "GBP"],
            "Fee Model": ["higher_vat_included", "tiered", "tiered"],
        }
    )
    out = calculate_fees_frame(df)
    assert out.loc[0, "net_fee"] == pytest.approx(3125)
    assert out.loc[0, "total_customer_pays"] == pytest.approx(3906.25)
    assert out.loc[0, "errors"] == ""
    assert pd.isna(out.loc[1, "net_fee"])
    assert out.loc[1, "errors"] == "Car price must be greater than 0"
    assert out.loc[2, "fee_model_description"] == "1.00% (>3M)"


def test_defaults_fill_missing_columns():
    df = pd.DataFrame({"car_price": [1000000, 2000000]})
    out = calculate_fees_frame(df, default_vat_rate=25, default_currency="EUR", default_fee_model="flat_minimum")
    assert list(out["net_fee"]) == pytest.approx([30000, 30000])
    assert list(out["errors"]) == ["", ""]


def test_run_batch_writes_csv(tmp_path):
    src = tmp_path / "listings.csv"
    pd.DataFrame(
        {
            "car_price": [250000, 500000],
            "vat_rate": [25, None],
            "currency": ["EUR", "EUR"],
            "fee_model": ["vat_on_top", "bogus"],
        }
    ).to_csv(src, index=False)
    dst = tmp_path / "out" / "fees.csv"

    summary = run_batch(src, dst)

    assert summary["rows"] == 2
    assert summary["invalid_rows"] == 1
    assert summary["total_net_fee"] == pytest.approx(2500)
    written = pd.read_csv(dst)
    assert list(written.columns[-6:]) == [
        "net_fee",
        "vat_on_fee",
        "total_customer_pays",
        "business_keeps",
        "fee_model_description",
        "errors",
    ]


def test_main_prints_summary(tmp_path, capsys):
    src = tmp_path / "listings.csv"
    pd.DataFrame({"car_price": [1500000]}).to_csv(src, index=False)
    dst = tmp_path / "fees.csv"

    code = main(
        [
            "--input",
            str(src),
            "--output",
            str(dst),
            "--default-vat-rate",
            "21",
            "--default-currency",
            "EUR",
            "--default-fee-model",
            "tiered",
        ]
    )

    assert code == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["total_net_fee"] == pytest.approx(18750)


def test_main_takes_defaults_from_settings(tmp_path, capsys):
    src = tmp_path / "listings.csv"
    pd.DataFrame({"car_price": [2000000]}).to_csv(src, index=False)
    dst = tmp_path / "fees.csv"
    settings = Settings(default_vat_rate=20, default_currency="GBP", default_fee_model="flat_minimum")

    code = main(["--input", str(src), "--output", str(dst)], settings=settings)

    assert code == 0
    summary = json.loads(capsys.readouterr().out)
    assert summary["invalid_rows"] == 0
    assert summary["total_net_fee"] == pytest.approx(30000)
    assert summary["total_customer_pays"] == pytest.approx(36000)
    written = pd.read_csv(dst)
    assert written.loc[0, "currency"] == "GBP"
