"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import date
from pathlib import Path

import pytest

from a2b.core.models import FinancialRecord

from tests.fixtures.synthetic_data import sample_service_dict, write_services_file


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_record() -> FinancialRecord:
    """Service with all three legs due in January 2024."""
    return FinancialRecord(
        id="svc-001",
        gross_sales_price_receivable="1000.00",
        gross_sales_commissionable="1000.00",
        commission_percent="10",
        cost_of_sales_payable="200.00",
        gspr_due_date=date(2024, 1, 15),
        comm_due_date=date(2024, 1, 20),
        cosp_due_date=date(2024, 1, 25),
        client_first_name="Alex",
        client_last_name="Example",
        service_type="Listing",
        notes="Synthetic",
        agent="Agent One",
    )


@pytest.fixture
def services_file(temp_dir) -> Path:
    """Services JSON file with records in 2023 and 2024."""
    services = [
        sample_service_dict(),
        sample_service_dict(
            id="svc-002",
            grossSalesPriceReceivable="2,500.50",
            gsprDueDate="2024-03-04",
            commDueDate=None,
            cospDueDate="2024-03-10",
            costOfSalesPayable="abc",
        ),
        sample_service_dict(
            id="svc-003",
            gsprDueDate="2023-06-01",
            commDueDate="2023-06-02",
            cospDueDate="2023-06-03",
        ),
    ]
    return write_services_file(temp_dir / "services.json", services)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a throwaway data directory."""
    monkeypatch.setenv("A2B_ENV", "test")
    monkeypatch.setenv("A2B_DATA_DIR", str(tmp_path / "a2b_data"))
    monkeypatch.delenv("A2B_SERVICES_FILE", raising=False)
    monkeypatch.delenv("A2B_DEFAULT_SCALE", raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr("a2b.core.config._config", None)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "cli: Tests for command-line commands")
