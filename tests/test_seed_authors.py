import asyncio
import logging

import pytest

from library_api.author_store import SqlAuthorStore
from library_api.seed_authors import load_authors_csv, seed_authors


CSV_TEXT = """first_name,family_name,date_of_birth,date_of_death,notes
Alice,Williams,1970-01-01,2020-01-01,x
  Jane ,Smith,1980-05-02,,
John,,1990-01-01,,missing family name
,,,,
Bob,Doe,not-a-date,,
"""


@pytest.fixture
def authors_csv(tmp_path):
    path = tmp_path / "authors.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def test_load_authors_csv_drops_incomplete_rows(authors_csv):
    df = load_authors_csv(authors_csv)

    assert list(df["family_name"]) == ["Williams", "Smith", "Doe"]
    assert list(df["first_name"]) == ["Alice", "Jane", "Bob"]
    assert "notes" not in df.columns


def test_load_authors_csv_coerces_bad_dates(authors_csv):
    df = load_authors_csv(authors_csv)

    assert df.loc[0, "date_of_birth"].year == 1970
    assert df["date_of_birth"].isna().tolist() == [False, False, True]
    assert df["date_of_death"].isna().tolist() == [False, True, True]


def test_load_authors_csv_requires_name_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("name,born\nAlice,1970\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_authors_csv(path)


def test_seed_authors_appends_rows(authors_csv, engine):
    assert seed_authors(authors_csv, engine) == 3

    result = asyncio.run(SqlAuthorStore(engine).get_all_authors({"family_name": 1}))

    assert [a.name for a in result] == ["Doe, Bob", "Smith, Jane", "Williams, Alice"]
    assert result[2].lifespan == "1970 - 2020"
    assert result[1].lifespan == "1980 - "


def test_load_authors_csv_mixed_formats_and_early_dates(tmp_path, caplog):
    path = tmp_path / "classics.csv"
    path.write_text(
        "first_name,family_name,date_of_birth,date_of_death\n"
        "Jane,Austen,1775-12-16,1817-07-18\n"
        "Virginia,Woolf,25 January 1882,28 March 1941\n"
        "William,Shakespeare,1564-04-26,1616-04-23\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING, logger="library_api.seed_authors"):
        df = load_authors_csv(path)

    assert df["date_of_birth"].notna().all()
    assert df["date_of_death"].notna().all()
    assert [d.year for d in df["date_of_birth"]] == [1775, 1882, 1564]
    assert [d.year for d in df["date_of_death"]] == [1817, 1941, 1616]
    assert not [r for r in caplog.records if r.name == "library_api.seed_authors"]


def test_load_authors_csv_warns_about_unparseable_dates(authors_csv, caplog):
    with caplog.at_level(logging.WARNING, logger="library_api.seed_authors"):
        load_authors_csv(authors_csv)

    messages = [r.getMessage() for r in caplog.records]
    assert any("1 value(s) in date_of_birth" in m for m in messages)
    assert not any("date_of_death" in m for m in messages)


def test_seed_authors_keeps_early_lifespans(tmp_path, engine):
    path = tmp_path / "bard.csv"
    path.write_text(
        "first_name,family_name,date_of_birth,date_of_death\n"
        "William,Shakespeare,1564-04-26,1616-04-23\n",
        encoding="utf-8",
    )

    seed_authors(path, engine)
    result = asyncio.run(SqlAuthorStore(engine).get_all_authors({"family_name": 1}))

    assert result[0].lifespan == "1564 - 1616"
