#!/usr/bin/env python3
"""Tests for service record and period bucket models."""

from datetime import date
from decimal import Decimal

import pytest

from a2b.core.models import CashFlowLeg, FinancialRecord, LegKind, PeriodBucket

from tests.fixtures.synthetic_data import sample_service_dict


class TestFinancialRecordLegs:
    """Test leg derivation from a record."""

    def test_all_three_legs(self, sample_record):
        legs = sample_record.legs()

        assert legs == [
            CashFlowLeg(LegKind.GSPR, date(2024, 1, 15), Decimal("1000.00")),
            CashFlowLeg(LegKind.COMMISSION, date(2024, 1, 20), Decimal("100")),
            CashFlowLeg(LegKind.COSP, date(2024, 1, 25), Decimal("200.00")),
        ]

    def test_missing_due_dates_omit_legs(self):
        record = FinancialRecord(
            gross_sales_price_receivable="100",
            cost_of_sales_payable="50",
            cosp_due_date=date(2024, 2, 1),
        )

        legs = record.legs()

        assert [leg.kind for leg in legs] == [LegKind.COSP]

    def test_malformed_amount_is_zero_leg(self):
        record = FinancialRecord(gross_sales_price_receivable="abc", gspr_due_date=date(2024, 2, 1))

        assert record.legs()[0].amount == 0

    def test_leg_direction(self):
        assert LegKind.GSPR.is_inflow
        assert LegKind.COMMISSION.is_inflow
        assert not LegKind.COSP.is_inflow


class TestFinancialRecordSerialization:
    """Test dict conversion."""

    def test_from_dict(self):
        record = FinancialRecord.from_dict(sample_service_dict(gsprCleared=True))

        assert record.id == "svc-001"
        assert record.gross_sales_price_receivable == "1000.00"
        assert record.commission_percent == "10"
        assert record.gspr_due_date == date(2024, 1, 15)
        assert record.client_last_name == "Example"
        assert record.gspr_cleared is True
        assert record.cosp_cleared is False

    def test_from_dict_revenue_share(self):
        record = FinancialRecord.from_dict(
            sample_service_dict(
                revenueSharePayable="400.00",
                revShareDueDate="2024-02-10",
                revShareCounterparty="Partner Brokerage",
                revSharePaid=True,
            )
        )

        assert record.revshare_amount == Decimal("400.00")
        assert record.revshare_due_date == date(2024, 2, 10)
        assert record.revshare_counterparty == "Partner Brokerage"
        assert record.revshare_paid is True
        assert record.to_dict()["revShareDueDate"] == "2024-02-10"
        assert len(record.legs()) == 3

    def test_from_dict_missing_keys_default(self):
        record = FinancialRecord.from_dict({})

        assert record == FinancialRecord()
        assert record.legs() == []

    def test_numeric_amounts_kept_as_text(self):
        record = FinancialRecord.from_dict({"grossSalesPriceReceivable": 750, "gsprDueDate": "2024-01-01"})

        assert record.gross_sales_price_receivable == "750"
        assert record.gspr_amount == Decimal("750")

    def test_invalid_due_date_names_field(self):
        with pytest.raises(ValueError, match="cospDueDate"):
            FinancialRecord.from_dict({"cospDueDate": "next tuesday"})

    def test_round_trip_preserves_record(self, sample_record):
        assert FinancialRecord.from_dict(sample_record.to_dict()) == sample_record

    def test_to_dict_uses_iso_dates(self, sample_record):
        data = sample_record.to_dict()

        assert data["gsprDueDate"] == "2024-01-15"
        assert data["grossSalesCommissionable"] == "1000.00"

    def test_with_changes_returns_copy(self, sample_record):
        updated = sample_record.with_changes(gspr_cleared=True)

        assert updated.gspr_cleared is True
        assert sample_record.gspr_cleared is False


class TestPeriodBucket:
    """Test derived bucket values."""

    def test_derived_totals(self):
        bucket = PeriodBucket(
            "2024-01", "Jan 2024", 2024, gspr=Decimal("1000"), commission=Decimal("100"), cosp=Decimal("200")
        )

        assert bucket.inflows == Decimal("1100")
        assert bucket.outflows == Decimal("200")
        assert bucket.net == Decimal("900")

    def test_negative_net(self):
        bucket = PeriodBucket("2024-W05", "2024-W05", 2024, cosp=Decimal("75.25"))

        assert bucket.net == Decimal("-75.25")

    def test_to_dict(self):
        bucket = PeriodBucket("2024-01", "Jan 2024", 2024, gspr=Decimal("10.50"))

        assert bucket.to_dict() == {
            "period_key": "2024-01",
            "display_string": "Jan 2024",
            "year": 2024,
            "inflows": "10.50",
            "outflows": "0",
            "net": "10.50",
            "gspr": "10.50",
            "commission": "0",
            "cosp": "0",
        }
