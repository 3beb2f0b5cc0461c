from sqlalchemy import Column, Date, Integer, MetaData, String, Table

metadata = MetaData()

authors = Table(
    "authors",
    metadata,
    Column("author_id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(100), nullable=False),
    Column("family_name", String(100), nullable=False),
    Column("date_of_birth", Date, nullable=True),
    Column("date_of_death", Date, nullable=True),
)

AUTHOR_COLUMNS = tuple(c.name for c in authors.columns)


def create_schema(engine):
    """Create the `authors` table if it does not exist yet."""
    metadata.create_all(engine, tables=[authors])
