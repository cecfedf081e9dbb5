"""CLI commands for database operations."""

import argparse
import sys
from typing import NoReturn

from app import create_app
from app.app import App
from app.database import (
    check_db_connection,
    get_current_revision,
    get_pending_migrations,
    upgrade_database,
)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Parts Marketplace CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # upgrade-db command
    upgrade_parser = subparsers.add_parser(
        "upgrade-db",
        help="Apply database migrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Apply pending database migrations using Alembic.

Examples:
  marketplace-cli upgrade-db                    Apply pending migrations
  marketplace-cli upgrade-db --recreate --yes-i-am-sure  Drop all tables and recreate from migrations
        """,
    )
    upgrade_parser.add_argument(
        "--recreate",
        action="store_true",
        help="Drop all tables first, then run all migrations from scratch",
    )
    upgrade_parser.add_argument(
        "--yes-i-am-sure",
        action="store_true",
        help="Required safety flag when using --recreate",
    )

    # load-test-data command
    load_test_data_parser = subparsers.add_parser(
        "load-test-data",
        help="Recreate database and load the demo marketplace",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Recreate database from scratch and load the demo marketplace dataset.

This command:
1. Drops all tables and recreates the database schema (like upgrade-db --recreate)
2. Loads users, sellers, parts, reviews, searches and contacts from app/data/test_data/
3. Verifies sellers and derives their ratings from the loaded reviews

Examples:
  marketplace-cli load-test-data --yes-i-am-sure    Load complete demo dataset
        """,
    )
    load_test_data_parser.add_argument(
        "--yes-i-am-sure",
        action="store_true",
        help="Required safety flag to confirm database recreation",
    )

    return parser


def _ensure_connection(app: App) -> None:
    if not check_db_connection():
        print(
            "❌ Cannot connect to database. Check your DATABASE_URL configuration.",
            file=sys.stderr,
        )
        sys.exit(1)

    # Let operator know which database is targeted
    print(f"🗄  Using database: {app.config['SQLALCHEMY_DATABASE_URI']}")


def handle_upgrade_db(
    app: App, recreate: bool = False, confirmed: bool = False
) -> None:
    """Handle upgrade-db command."""
    with app.app_context():
        _ensure_connection(app)

        # Safety check for recreate
        if recreate and not confirmed:
            print(
                "❌ --recreate requires --yes-i-am-sure flag for safety",
                file=sys.stderr,
            )
            print(
                "   This will DROP ALL TABLES and recreate from migrations!",
                file=sys.stderr,
            )
            sys.exit(1)

        if recreate:
            print("⚠️  WARNING: About to drop all tables and recreate from migrations!")
            print("   This will permanently delete all data in the database.")

        # Show current state
        current_rev = get_current_revision()
        pending = get_pending_migrations()

        if current_rev:
            print(f"📍 Current database revision: {current_rev}")
        else:
            print("📍 Database has no migration version (empty or new database)")

        if not (recreate or pending):
            print("✅ Database is up to date. No migrations to apply.")
            return

        if recreate:
            print("🔄 Recreating database from scratch...")
        else:
            print(f"📦 Found {len(pending)} pending migration(s)")

        try:
            applied = upgrade_database(recreate=recreate)
        except Exception as e:
            print(f"❌ Migration failed: {e}", file=sys.stderr)
            sys.exit(1)

        if applied:
            print(f"✅ Successfully applied {len(applied)} migration(s)")
            for revision, description in applied:
                print(f"   • {revision}: {description}")
        else:
            print("✅ Database migration completed")


def handle_load_test_data(app: App, confirmed: bool = False) -> None:
    """Handle load-test-data command."""
    with app.app_context():
        _ensure_connection(app)

        # Safety check for confirmation
        if not confirmed:
            print(
                "❌ --yes-i-am-sure flag is required for safety",
                file=sys.stderr,
            )
            print(
                "   This will DROP ALL TABLES and recreate with test data!",
                file=sys.stderr,
            )
            sys.exit(1)

        print("⚠️  WARNING: About to drop all tables and load test data!")
        print("   This will permanently delete all existing data in the database.")

        try:
            print("🔄 Recreating database from scratch...")
            applied = upgrade_database(recreate=True)
            if applied:
                print(f"✅ Database recreated with {len(applied)} migration(s)")
            else:
                print("✅ Database recreated successfully")

            print("📦 Loading demo marketplace dataset...")
            try:
                stats = app.container.test_data_service().load_demo_dataset()
            finally:
                app.container.db_session().close()
                app.container.db_session.reset()
            print("✅ Test data loaded successfully")

        except Exception as e:
            print(f"❌ Failed to load test data: {e}", file=sys.stderr)
            sys.exit(1)

        print("📊 Dataset summary:")
        print(f"   👥 {stats['users']} users")
        print(f"   🏪 {stats['sellers']} sellers listing {stats['parts']} parts")
        print(f"   ⭐ {stats['reviews']} reviews")
        print(f"   🔍 {stats['searches']} searches, 📞 {stats['contacts']} contacts")


def main() -> NoReturn:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Create Flask app for database operations
    app = create_app()

    if args.command == "upgrade-db":
        handle_upgrade_db(
            app=app,
            recreate=args.recreate,
            confirmed=args.yes_i_am_sure,
        )
    elif args.command == "load-test-data":
        handle_load_test_data(
            app=app,
            confirmed=args.yes_i_am_sure,
        )
    else:
        print(f"❌ Unknown command: {args.command}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
