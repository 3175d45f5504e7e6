# creates database schema for the local/demo store
from rieno.config import load_settings
from rieno.db import Base, make_engine
from rieno.models import User, Category, Entry, DebtCredit  # noqa: F401 registers tables

engine = make_engine(load_settings().database_url)

# Drop all tables
Base.metadata.drop_all(engine)

# Create tables based on existing models
Base.metadata.create_all(bind=engine)
print("Schema created.")
