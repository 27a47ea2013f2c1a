from asset_ledger.services.csv_export import (
    CSVExportService,
    csv_template,
    export_records,
)
from asset_ledger.services.csv_import import CSVImportService
from asset_ledger.services.reconciliation import DuplicateKey, DuplicateReconciler

__all__ = [
    "CSVExportService",
    "CSVImportService",
    "DuplicateKey",
    "DuplicateReconciler",
    "csv_template",
    "export_records",
]
