from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, asc, desc

from rieno.db import Base, make_engine, make_sessionlocal
from rieno.errors import AuthenticationError, NotFoundError
from rieno.models import TABLE_MODELS, User
from rieno.services import demo_data
from rieno.utils.logging_utils import get_logger

logger = get_logger("demo")

LABELS = {
    "entries": "Entry",
    "categories": "Category",
    "debts_credits": "Debt or credit",
}


def seed(db):
    """Load the sample user and their rows, skipping anything already present."""
    if db.query(User).filter_by(id=demo_data.DEMO_USER["id"]).first():
        return
    user = demo_data.DEMO_USER
    db.add(User(
        id=user["id"],
        email=user["email"],
        created_at=datetime(2024, 1, 1),
    ))
    db.flush()
    for table, rows in (
        ("categories", demo_data.categories),
        ("entries", demo_data.entries),
        ("debts_credits", demo_data.debts_credits),
    ):
        model = TABLE_MODELS[table]
        for row in rows:
            db.add(model(user_id=user["id"], **_coerce(model, row)))
    db.commit()


def _coerce(model, values):
    coerced = {}
    for key, value in values.items():
        column = model.__table__.columns.get(key)
        if column is None or key in ("id", "user_id", "created_at"):
            if key == "id" and value:
                coerced[key] = value
            continue
        if isinstance(column.type, Date) and isinstance(value, str):
            value = date.fromisoformat(value)
        coerced[key] = value
    return coerced


def _as_row(obj):
    row = {}
    for column in obj.__table__.columns:
        value = getattr(obj, column.name)
        if isinstance(value, Decimal):
            value = float(value)
        elif isinstance(value, (date, datetime)):
            value = value.isoformat()
        row[column.name] = value
    return row


class DemoStore:
    """Local stand-in for the remote service, backed by SQLAlchemy.

    Everybody signs in as the one demo user; writes last as long as the
    database does (the process, for the default in-memory URL).
    """

    demo = True

    def __init__(self, settings, engine=None):
        self.engine = engine or make_engine(settings.database_url)
        self.sessionlocal = make_sessionlocal(self.engine)
        Base.metadata.create_all(bind=self.engine)
        with self.sessionlocal() as db:
            seed(db)

    # Auth
    def sign_in(self, email, password):
        if email == demo_data.DEMO_USER["email"] or "demo" in email.lower():
            logger.info(f"Demo login for {email}")
            return dict(demo_data.DEMO_USER)
        raise AuthenticationError("Invalid demo credentials")

    def sign_up(self, email, password, first_name=None, last_name=None):
        return dict(demo_data.DEMO_USER)

    def get_user(self, user_id):
        with self.sessionlocal() as db:
            user = db.query(User).filter_by(id=user_id).first()
            if not user:
                raise NotFoundError("User not found")
            return {
                "id": user.id,
                "email": user.email,
                "created_at": user.created_at.isoformat(),
            }

    def sign_out(self, user_id):
        logger.info(f"Demo logout for {user_id}")

    # Rows
    def list_rows(self, table, user_id, order=None, descending=False):
        model = TABLE_MODELS[table]
        with self.sessionlocal() as db:
            query = db.query(model).filter_by(user_id=user_id)
            if order:
                column = getattr(model, order)
                query = query.order_by(desc(column) if descending else asc(column))
            return [_as_row(obj) for obj in query.all()]

    def insert_row(self, table, user_id, values):
        model = TABLE_MODELS[table]
        with self.sessionlocal() as db:
            obj = model(user_id=user_id, **_coerce(model, values))
            db.add(obj)
            db.commit()
            db.refresh(obj)
            return _as_row(obj)

    def update_row(self, table, user_id, row_id, values):
        model = TABLE_MODELS[table]
        with self.sessionlocal() as db:
            obj = db.query(model).filter_by(id=row_id, user_id=user_id).first()
            if not obj:
                raise NotFoundError(f"{LABELS[table]} not found")
            for key, value in _coerce(model, values).items():
                setattr(obj, key, value)
            db.commit()
            db.refresh(obj)
            return _as_row(obj)

    def delete_row(self, table, user_id, row_id):
        model = TABLE_MODELS[table]
        with self.sessionlocal() as db:
            obj = db.query(model).filter_by(id=row_id, user_id=user_id).first()
            if not obj:
                raise NotFoundError(f"{LABELS[table]} not found")
            db.delete(obj)
            db.commit()
