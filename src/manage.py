"""OrderDesk database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables

Set PROTEAN_ENV=production to target the PostgreSQL provider.
"""

import argparse
import sys


def setup_database():
    from sales.domain import sales
    from sales.utils.db import setup_db

    print("Initializing sales domain...")
    sales.init()
    print("Creating sales database schema...")
    setup_db(sales)
    print("Done.")


def drop_database():
    from sales.domain import sales
    from sales.utils.db import drop_db

    print("Initializing sales domain...")
    sales.init()
    print("Dropping sales database schema...")
    drop_db(sales)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="OrderDesk database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
