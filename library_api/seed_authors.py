import argparse
import logging

import pandas as pd

from .core.config import get_settings
from .core.logging_config import configure_logging
from .db_connection import get_engine
from .models.author import create_schema

logger = logging.getLogger(__name__)

NAME_COLUMNS = ["first_name", "family_name"]
DATE_COLUMNS = ["date_of_birth", "date_of_death"]


def parse_dates(values: pd.Series) -> pd.Series:
    """Parse a column of date strings, each row in whatever format it uses.

    Blank cells become NaT silently; unparseable ones become NaT with a warning.
    """
    # keep bare years like 1564 as text, numbers would be read as epoch offsets
    raw = values.where(values.isna(), values.astype(str).str.strip())
    raw = raw.where(raw != "")
    parsed = pd.to_datetime(raw, format="mixed", errors="coerce")

    dropped = int((raw.notna() & parsed.isna()).sum())
    if dropped:
        logger.warning("Could not parse %d value(s) in %s, stored as empty", dropped, values.name)
    return parsed


def load_authors_csv(csv_path) -> pd.DataFrame:
    """Read an authors CSV and return only the rows that can be stored."""
    # engine="python" + on_bad_lines="skip" tolerates malformed rows
    authors_df = pd.read_csv(csv_path, engine="python", on_bad_lines="skip")

    missing = [c for c in NAME_COLUMNS if c not in authors_df.columns]
    if missing:
        raise ValueError(f"CSV is missing required columns: {missing}")

    existing_cols = [c for c in NAME_COLUMNS + DATE_COLUMNS if c in authors_df.columns]
    authors_df = authors_df[existing_cols].dropna(how="all")

    # both names are required by the table
    authors_df = authors_df[authors_df["first_name"].notna() & authors_df["family_name"].notna()].copy()
    for col in NAME_COLUMNS:
        authors_df[col] = authors_df[col].astype(str).str.strip()
    authors_df = authors_df[(authors_df["first_name"] != "") & (authors_df["family_name"] != "")].copy()

    for col in DATE_COLUMNS:
        if col in authors_df.columns:
            authors_df[col] = parse_dates(authors_df[col])
        else:
            authors_df[col] = pd.NaT

    return authors_df.reset_index(drop=True)


def seed_authors(csv_path, engine) -> int:
    """Append the authors found in `csv_path` to the `authors` table."""
    authors_df = load_authors_csv(csv_path)
    create_schema(engine)
    authors_df.to_sql("authors", if_exists="append", con=engine, index=False)
    logger.info("Seeded %d authors from %s", len(authors_df), csv_path)
    return len(authors_df)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load authors from a CSV file into the database.")
    parser.add_argument("csv_path", help="CSV with first_name, family_name, date_of_birth, date_of_death columns")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings["log_level"])
    return seed_authors(args.csv_path, get_engine(settings))


if __name__ == "__main__":
    main()
