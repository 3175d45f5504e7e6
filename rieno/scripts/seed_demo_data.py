# rieno/scripts/seed_demo_data.py

from sqlalchemy.orm import Session
from rieno.config import load_settings
from rieno.db import Base, make_engine
from rieno.services.demo_store import seed

engine = make_engine(load_settings().database_url)
Base.metadata.create_all(bind=engine)

with Session(engine) as session:
    seed(session)
    print("Demo data seeded.")
