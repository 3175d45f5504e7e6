from rieno.models.user import User
from rieno.models.category import Category
from rieno.models.entry import Entry
from rieno.models.debt_credit import DebtCredit

# table name used by the remote service -> model
TABLE_MODELS = {
    "categories": Category,
    "entries": Entry,
    "debts_credits": DebtCredit,
}
