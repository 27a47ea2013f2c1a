"""Command-line interface for Asset Ledger."""

import argparse
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from asset_ledger import __version__
from asset_ledger.config import Settings, get_settings
from asset_ledger.container import Container
from asset_ledger.domain.entities import Asset
from asset_ledger.domain.value_objects import AssetType, CurrencyCode
from asset_ledger.exceptions import (
    AssetLedgerError,
    CSVError,
    DuplicateCountError,
    ImportRowsError,
)
from asset_ledger.logging_config import configure_logging
from asset_ledger.services.csv_export import csv_template


def get_settings_for(args: argparse.Namespace) -> Settings:
    """Settings from the environment, with --database taking precedence."""
    settings = get_settings()
    database = getattr(args, "database", None)
    if database:
        settings = settings.model_copy(update={"sqlite_path": Path(database)})
    return settings


def _require_database(settings: Settings) -> bool:
    if not settings.sqlite_path.exists():
        print(f"No database found at {settings.sqlite_path}")
        print("Run 'asset-ledger init' to create a new database")
        return False
    return True


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize a new database."""
    settings = get_settings_for(args)
    db_path = settings.sqlite_path

    if db_path.exists() and not args.force:
        print(f"Database already exists at {db_path}")
        print("Use --force to reinitialize (WARNING: will delete existing data)")
        return 1

    if db_path.exists() and args.force:
        db_path.unlink()

    with Container(settings) as container:
        container.database.initialize()

    print(f"Initialized database at {db_path}")
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    """Show database status."""
    settings = get_settings_for(args)
    if not _require_database(settings):
        return 1

    with Container(settings) as container:
        assets = list(container.asset_repo.list_all())
        categories = list(container.category_repo.list_all())
        operations = list(container.operation_repo.list_all())

    print(f"Database: {settings.sqlite_path}")
    print(f"Assets: {len(assets)}")
    print(f"Categories: {len(categories)}")
    print(f"Operations: {len(operations)}")
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"Asset Ledger v{__version__}")
    return 0


def cmd_asset_add(args: argparse.Namespace) -> int:
    """Add an asset that imported operations can reference."""
    settings = get_settings_for(args)
    if not _require_database(settings):
        return 1

    try:
        currency = CurrencyCode.parse(args.currency)
        initial_balance = Decimal(args.initial_balance)
        asset = Asset(
            name=args.name.strip(),
            currency=currency,
            icon=args.icon,
            asset_type=AssetType(args.type),
            initial_balance=initial_balance,
        )
        with Container(settings) as container:
            container.asset_repo.add(asset)
    except InvalidOperation:
        print(f"Error: Invalid initial balance: {args.initial_balance}")
        return 1
    except AssetLedgerError as e:
        print(f"Error: {e.message}")
        return 1

    print(f"✓ Added asset {asset.display_name} ({asset.currency.value})")
    return 0


def cmd_asset_list(args: argparse.Namespace) -> int:
    """List known assets."""
    settings = get_settings_for(args)
    if not _require_database(settings):
        return 1

    with Container(settings) as container:
        assets = list(container.asset_repo.list_all())

    if not assets:
        print("No assets found")
        return 0

    for asset in assets:
        print(
            f"  - {asset.display_name} [{asset.asset_type.value}] "
            f"{asset.currency.value} {asset.initial_balance}"
        )
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    """Import operations from a CSV file."""
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}")
        return 1

    settings = get_settings_for(args)
    if not _require_database(settings):
        return 1

    with Container(settings) as container:
        try:
            result = container.import_service.import_file(file_path)
        except ImportRowsError as e:
            print(f"Import failed. {e.message}")
            return 1
        except DuplicateCountError as e:
            print(f"⚠ {e.message}")
            return 1
        except CSVError as e:
            print(f"Error: {e.message}")
            return 1

    print(f"✓ Imported {len(result.accepted)} operations")
    if result.created_categories:
        names = ", ".join(category.name for category in result.created_categories)
        print(f"  New categories: {names}")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Export all operations as CSV."""
    settings = get_settings_for(args)
    if not _require_database(settings):
        return 1

    with Container(settings) as container:
        if args.output:
            count = container.export_service.export_to_file(args.output)
            print(f"✓ Exported {count} operations to {args.output}")
            return 0

        text, count = container.export_service.export_all()

    sys.stdout.write(text)
    print(f"✓ Exported {count} operations", file=sys.stderr)
    return 0


def cmd_template(args: argparse.Namespace) -> int:
    """Write an example CSV file showing the expected format."""
    text = csv_template()
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"✓ Template written to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="asset-ledger",
        description="Asset Ledger - CSV import and export of asset operations",
    )
    parser.add_argument(
        "--database",
        "-d",
        help="Path to SQLite database file",
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init command
    init_parser = subparsers.add_parser("init", help="Initialize a new database")
    init_parser.add_argument(
        "--force",
        "-f",
        action="store_true",
        help="Force reinitialization (deletes existing data)",
    )
    init_parser.set_defaults(func=cmd_init)

    # status command
    status_parser = subparsers.add_parser("status", help="Show database status")
    status_parser.set_defaults(func=cmd_status)

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # asset command group
    asset_parser = subparsers.add_parser("asset", help="Asset commands")
    asset_subparsers = asset_parser.add_subparsers(
        dest="asset_command", help="Asset commands"
    )

    asset_add_parser = asset_subparsers.add_parser("add", help="Add an asset")
    asset_add_parser.add_argument("name", help="Asset name")
    asset_add_parser.add_argument(
        "--currency", "-c", default="USD", help="Currency code (default: USD)"
    )
    asset_add_parser.add_argument("--icon", default="", help="Display icon")
    asset_add_parser.add_argument(
        "--type",
        choices=[t.value for t in AssetType],
        default=AssetType.CASH.value,
        help="Asset type (default: cash)",
    )
    asset_add_parser.add_argument(
        "--initial-balance", default="0", help="Opening balance (default: 0)"
    )
    asset_add_parser.set_defaults(func=cmd_asset_add)

    asset_list_parser = asset_subparsers.add_parser("list", help="List assets")
    asset_list_parser.set_defaults(func=cmd_asset_list)

    # import command
    import_parser = subparsers.add_parser("import", help="Import operations from CSV")
    import_parser.add_argument("file", help="CSV file to import")
    import_parser.set_defaults(func=cmd_import)

    # export command
    export_parser = subparsers.add_parser("export", help="Export operations to CSV")
    export_parser.add_argument(
        "--output", "-o", help="Output file (default: standard output)"
    )
    export_parser.set_defaults(func=cmd_export)

    # template command
    template_parser = subparsers.add_parser(
        "template", help="Print an example CSV file"
    )
    template_parser.add_argument(
        "--output", "-o", help="Output file (default: standard output)"
    )
    template_parser.set_defaults(func=cmd_template)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "asset" and (
        not hasattr(args, "asset_command") or args.asset_command is None
    ):
        asset_parser.print_help()
        return 0

    configure_logging(get_settings_for(args))

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
