"""Tests for business commands and business resolution."""

import pytest
from datetime import date
from bukukas.cli.main import cli
from bukukas.domain.entities import TransactionKind
from bukukas.domain.errors import NotFoundError, ValidationError
from bukukas.utils.business_resolver import resolve_business


def test_business_add(cli_runner, temp_db):
    """Test creating a business."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "business", "add", "Teh Desa Cijati"]
    )

    assert result.exit_code == 0
    assert "Created business 'Teh Desa Cijati'" in result.output
    assert "ID:" in result.output


def test_business_add_duplicate(cli_runner, temp_db, sample_business):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "business", "add", "Teh Desa Cijati"]
    )

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_business_list_empty(cli_runner, temp_db):
    """Test listing businesses when none exist."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "business", "list"])

    assert result.exit_code == 0
    assert "No businesses found" in result.output


def test_business_list(cli_runner, temp_db, sample_business, second_business):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "business", "list"])

    assert result.exit_code == 0
    assert "Teh Desa Cijati" in result.output
    assert "Teh Desa Kartini" in result.output
    assert sample_business.id in result.output


def test_business_rename_by_partial_name(cli_runner, temp_db, sample_business, business_service):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "business", "rename", "cijati", "Cijati Baru"],
    )

    assert result.exit_code == 0
    assert "Renamed business to 'Cijati Baru'" in result.output
    # drop objects cached by the fixture session before re-reading
    temp_db.disconnect()
    assert business_service.get_business(sample_business.id).name == "Cijati Baru"


def test_business_delete(cli_runner, temp_db, sample_business, business_service):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "business", "delete", sample_business.id, "--yes"],
    )

    assert result.exit_code == 0
    assert "Deleted business 'Teh Desa Cijati'" in result.output
    assert business_service.get_business(sample_business.id) is None


def test_business_delete_blocked_by_transactions(
    cli_runner, temp_db, sample_business, transaction_service
):
    transaction_service.create_transaction(
        sample_business.id, date(2024, 3, 5), TransactionKind.INCOME, "OmsetUsaha", "Penjualan", 1000
    )

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "business", "delete", "Teh Desa Cijati", "--yes"],
    )

    assert result.exit_code == 1
    assert "Please delete them first" in result.output


def test_business_delete_cancelled(cli_runner, temp_db, sample_business):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "business", "delete", sample_business.id],
        input="n\n",
    )

    assert result.exit_code == 0
    assert "Deletion cancelled" in result.output


class TestResolveBusiness:
    """Tests for name/ID resolution."""

    def test_by_id_and_name(self, business_service, sample_business):
        assert resolve_business(business_service, sample_business.id) == sample_business.id
        assert resolve_business(business_service, "Teh Desa Cijati") == sample_business.id
        assert resolve_business(business_service, "teh desa cijati") == sample_business.id
        assert resolve_business(business_service, "Cija") == sample_business.id

    def test_ambiguous_partial_name(self, business_service, sample_business, second_business):
        with pytest.raises(NotFoundError, match="ambiguous"):
            resolve_business(business_service, "Teh Desa")

    def test_unknown_name(self, business_service, sample_business):
        with pytest.raises(NotFoundError, match="Business 'Sukamaju' not found"):
            resolve_business(business_service, "Sukamaju")


def test_create_business_requires_name(business_service):
    with pytest.raises(ValidationError, match="Business name is required"):
        business_service.create_business("   ")
