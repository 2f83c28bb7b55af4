#!/usr/bin/env python3
"""
Integration tests for the cash flow and cards CLI commands.
"""

import pandas as pd
import pytest
from click.testing import CliRunner

from a2b.cli.main import main
from a2b.core.json_utils import read_json

from tests.fixtures.synthetic_data import sample_service_dict, write_services_file


@pytest.mark.integration
@pytest.mark.cli
class TestCashFlowReport:
    """Test `a2b cashflow report`."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_table_defaults_to_latest_year(self, services_file):
        result = self.runner.invoke(main, ["cashflow", "report", "--data-file", str(services_file)])

        assert result.exit_code == 0, result.output
        assert "Cash Flow 2024 by Month" in result.output
        assert "Jan 2024" in result.output
        assert "Mar 2024" in result.output
        assert "Jun 2023" not in result.output
        assert "$3,400.50" in result.output
        assert "Total" in result.output

    def test_explicit_year(self, services_file):
        result = self.runner.invoke(
            main, ["cashflow", "report", "--data-file", str(services_file), "--year", "2023"]
        )

        assert result.exit_code == 0, result.output
        assert "Jun 2023" in result.output
        assert "Jan 2024" not in result.output

    def test_json_output(self, services_file, temp_dir):
        output = temp_dir / "report.json"

        result = self.runner.invoke(
            main,
            ["cashflow", "report", "--data-file", str(services_file), "--format", "json", "--output", str(output)],
        )

        assert result.exit_code == 0, result.output
        data = read_json(output)
        assert data["year"] == 2024
        assert data["scale"] == "month"
        assert [p["period_key"] for p in data["periods"]] == ["2024-01", "2024-03"]
        assert data["periods"][0]["net"] == "900.000"
        assert data["periods"][1]["cosp"] == "0"
        assert data["totals"]["net"] == "3400.500"

    def test_week_scale_csv(self, services_file, temp_dir):
        output = temp_dir / "report.csv"

        result = self.runner.invoke(
            main,
            [
                "cashflow",
                "report",
                "--data-file",
                str(services_file),
                "--scale",
                "week",
                "--format",
                "csv",
                "--output",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        df = pd.read_csv(output, index_col="period_key")
        assert list(df.index) == ["2024-W03", "2024-W04", "2024-W10"]
        assert df["net"].sum() == pytest.approx(3400.50)

    def test_missing_file(self, temp_dir):
        result = self.runner.invoke(
            main, ["cashflow", "report", "--data-file", str(temp_dir / "missing.json")]
        )

        assert result.exit_code == 1
        assert "Services file not found" in result.output

    def test_no_dated_services(self, temp_dir):
        path = write_services_file(temp_dir / "undated.json", [{"id": "x"}])

        result = self.runner.invoke(main, ["cashflow", "report", "--data-file", str(path)])

        assert result.exit_code == 0
        assert "No services with due dates found." in result.output

    def test_uses_configured_services_file(self, monkeypatch, services_file):
        monkeypatch.setenv("A2B_SERVICES_FILE", str(services_file))

        result = self.runner.invoke(main, ["cashflow", "report"])

        assert result.exit_code == 0, result.output
        assert "Jan 2024" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestCashFlowYearsAndChart:
    """Test `a2b cashflow years` and `a2b cashflow chart`."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_years(self, services_file):
        result = self.runner.invoke(main, ["cashflow", "years", "--data-file", str(services_file)])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[-2:] == ["2023", "2024"]

    def test_chart(self, services_file, temp_dir):
        result = self.runner.invoke(
            main,
            [
                "cashflow",
                "chart",
                "--data-file",
                str(services_file),
                "--output-dir",
                str(temp_dir),
                "--format",
                "svg",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Chart saved to" in result.output
        assert list(temp_dir.glob("*.svg"))

    def test_chart_without_periods(self, services_file, temp_dir):
        result = self.runner.invoke(
            main,
            ["cashflow", "chart", "--data-file", str(services_file), "--year", "1999", "--output-dir", str(temp_dir)],
        )

        assert result.exit_code == 1
        assert "No cash flow periods" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestCardsCommands:
    """Test `a2b cards` commands."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_receivables(self, temp_dir):
        path = write_services_file(
            temp_dir / "services.json",
            [sample_service_dict(), sample_service_dict(id="svc-002", cospCleared=True)],
        )

        result = self.runner.invoke(main, ["cards", "receivables", "--data-file", str(path)])

        assert result.exit_code == 0, result.output
        assert result.output.count("Receivable (GSPR)") == 2
        assert result.output.count("Payable (COSP)") == 1
        assert "Client: Alex Example" in result.output

    def test_receivables_include_cleared(self, temp_dir):
        path = write_services_file(temp_dir / "services.json", [sample_service_dict(cospCleared=True)])

        result = self.runner.invoke(
            main, ["cards", "receivables", "--data-file", str(path), "--include-cleared"]
        )

        assert result.exit_code == 0, result.output
        assert "[cleared]" in result.output

    def test_commissions(self, temp_dir):
        path = write_services_file(
            temp_dir / "services.json",
            [sample_service_dict(), sample_service_dict(id="svc-002", commissionReceived=True)],
        )

        pending = self.runner.invoke(main, ["cards", "commissions", "--data-file", str(path), "--pending-only"])
        everything = self.runner.invoke(main, ["cards", "commissions", "--data-file", str(path)])

        assert pending.exit_code == 0, pending.output
        assert pending.output.count("$100.00") == 1
        assert everything.output.count("$100.00") == 2
        assert "[x]" in everything.output

    def test_revshares(self, temp_dir):
        path = write_services_file(
            temp_dir / "services.json",
            [
                sample_service_dict(revenueSharePayable="250", revShareDueDate="2024-02-01"),
                sample_service_dict(
                    id="svc-002", revenueSharePayable="75", revShareDueDate="2024-03-01", revSharePaid=True
                ),
            ],
        )

        everything = self.runner.invoke(main, ["cards", "revshares", "--data-file", str(path)])
        unpaid = self.runner.invoke(main, ["cards", "revshares", "--data-file", str(path), "--unpaid-only"])

        assert everything.exit_code == 0, everything.output
        assert "$250.00  Agent One" in everything.output
        assert "[x] 2024-03-01" in everything.output
        assert "$75.00" not in unpaid.output

    def test_show(self, services_file):
        result = self.runner.invoke(main, ["cards", "show", "svc-002", "--data-file", str(services_file)])

        assert result.exit_code == 0, result.output
        assert '"grossSalesPriceReceivable": "2,500.50"' in result.output

    def test_show_unknown(self, services_file):
        result = self.runner.invoke(main, ["cards", "show", "nope", "--data-file", str(services_file)])

        assert result.exit_code == 1
        assert "Service not found: nope" in result.output

    def test_duplicate_ids_rejected(self, temp_dir):
        path = write_services_file(temp_dir / "services.json", [sample_service_dict(), sample_service_dict()])

        result = self.runner.invoke(main, ["cards", "receivables", "--data-file", str(path)])

        assert result.exit_code == 1
        assert "Duplicate service id: svc-001" in result.output


@pytest.mark.integration
@pytest.mark.cli
class TestMainCommands:
    """Test top-level commands."""

    def test_version(self):
        result = CliRunner().invoke(main, ["version"])

        assert result.exit_code == 0
        assert "A2B Cash Flow v" in result.output

    def test_config(self):
        result = CliRunner().invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert "Default Scale: Month" in result.output
