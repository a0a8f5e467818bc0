"""
Export the database tables to CSV files.

Usage:
    fitness-export-csv --output-dir ./exports
    fitness-export-csv --db /srv/fitness/fitness_events.db

Without ``--db`` the database configured by ``DATABASE_URL`` is used.
"""

import argparse
import sys

from dotenv import load_dotenv


def main(argv=None) -> int:
    load_dotenv()
    from fitness_events_api.app.core.config import settings
    from fitness_events_api.app.core.logging_config import setup_logging
    from fitness_events_api.app.services.export_service import EXPORT_TABLES, export_all

    ap = argparse.ArgumentParser(description="Export Fitness Events tables to CSV.")
    ap.add_argument("--output-dir", default=".", help="Directory for the CSV files (default: current directory)")
    ap.add_argument("--db", help="Path to the SQLite database file (overrides DATABASE_URL)")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level)
    if args.db:
        settings.database_url = args.db

    written = export_all(args.output_dir)
    for model, path in written.items():
        print(f"[+] Exported {model} to {path}")
    failed = [model for model, _ in EXPORT_TABLES if model not in written]
    for model in failed:
        print(f"[!] Failed to export {model}", file=sys.stderr)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
