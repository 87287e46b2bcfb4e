"""Indonesian display labels and amount formatting for CLI output.

Canonical enum values stay in the domain model; only this module knows how
they are shown to the user.
"""

from bukukas.domain.entities import (
    Category,
    ComparisonMetric,
    ExpenseCategory,
    IncomeCategory,
    TransactionKind,
)

KIND_LABELS: dict[TransactionKind, str] = {
    TransactionKind.INCOME: "Pendapatan",
    TransactionKind.EXPENSE: "Pengeluaran",
}

BALANCE_LABEL = "Saldo"

COUNT_LABEL = "Jumlah Transaksi"

EMPLOYEE_LABEL = "Nama"

WORK_DAYS_LABEL = "Jumlah Hari Kerja"

CATEGORY_LABELS: dict[Category, str] = {
    IncomeCategory.OMSET_USAHA: "Omset Usaha",
    IncomeCategory.KONSINYASI_USAHA: "Konsinyasi Usaha",
    IncomeCategory.LAINNYA: "Lainnya",
    ExpenseCategory.BAGI_HASIL: "Bagi Hasil",
    ExpenseCategory.BELANJA_BAHAN: "Belanja Bahan",
    ExpenseCategory.IURAN: "Iuran",
    ExpenseCategory.MAINTENANCE: "Maintenance",
    ExpenseCategory.MARKETING: "Marketing",
    ExpenseCategory.UPAH_PEGAWAI: "Upah Pegawai",
    ExpenseCategory.LAINNYA: "Lainnya",
}

METRIC_LABELS: dict[ComparisonMetric, str] = {
    ComparisonMetric.INCOME: KIND_LABELS[TransactionKind.INCOME],
    ComparisonMetric.EXPENSE: KIND_LABELS[TransactionKind.EXPENSE],
    ComparisonMetric.NET: BALANCE_LABEL,
}


def category_label(category: Category) -> str:
    """Display label of a category."""
    return CATEGORY_LABELS.get(category, category.value)


def format_amount(amount: int) -> str:
    """Format an amount as rupiah with "." thousands separators.

    Examples: 1500000 -> "Rp 1.500.000", -30000 -> "-Rp 30.000".
    """
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"


def format_days(days: int) -> str:
    """Format a work-day count, e.g. 3 -> "3 hari"."""
    return f"{days} hari"
