from rieno.errors import NotFoundError
from rieno.schemas.finance_schemas import CategoryRecord, DebtCreditRecord, EntryRecord
from rieno.services import report_service


# ENTRIES
def get_entries(store, user_id):
    rows = store.list_rows("entries", user_id, order="date", descending=True)
    return [EntryRecord(**row) for row in rows]


def entry_payload(entry):
    data = entry.model_dump(mode="json")
    data["profit"] = entry.profit
    return data


def add_entry(store, user_id, form):
    row = store.insert_row("entries", user_id, form.model_dump(mode="json"))
    return EntryRecord(**row)


def edit_entry(store, user_id, entry_id, form):
    row = store.update_row("entries", user_id, entry_id, form.model_dump(mode="json"))
    return EntryRecord(**row)


def delete_entry(store, user_id, entry_id):
    store.delete_row("entries", user_id, entry_id)
    return {"message": "Entry deleted successfully"}


# CATEGORIES
def get_categories(store, user_id):
    rows = store.list_rows("categories", user_id, order="name")
    return [CategoryRecord(**row) for row in rows]


def add_category(store, user_id, form):
    row = store.insert_row("categories", user_id, form.model_dump())
    return CategoryRecord(**row)


def edit_category(store, user_id, category_id, form):
    row = store.update_row("categories", user_id, category_id, form.model_dump())
    return CategoryRecord(**row)


def delete_category(store, user_id, category_id):
    store.delete_row("categories", user_id, category_id)
    return {"message": "Category deleted successfully"}


# DEBTS AND CREDITS
def get_debts_credits(store, user_id):
    rows = store.list_rows("debts_credits", user_id, order="due_date")
    return [DebtCreditRecord(**row) for row in rows]


def filter_debts_credits(items, type=None, status="all", search=""):
    search = (search or "").lower()

    def matches(item):
        if type and item.type != type:
            return False
        if status and status != "all" and item.status != status:
            return False
        if search and search not in item.name.lower() and search not in item.reason.lower():
            return False
        return True

    return [item for item in items if matches(item)]


def get_transactions_page(store, user_id, type=None, status="all", search=""):
    items = get_debts_credits(store, user_id)
    return {
        "items": [i.model_dump(mode="json") for i in filter_debts_credits(items, type, status, search)],
        # totals always cover every unpaid row, whatever the filter
        "totals": report_service.debt_totals(items),
    }


def add_debt_credit(store, user_id, form):
    row = store.insert_row("debts_credits", user_id, form.model_dump(mode="json"))
    return DebtCreditRecord(**row)


def edit_debt_credit(store, user_id, item_id, form):
    row = store.update_row("debts_credits", user_id, item_id, form.model_dump(mode="json", exclude_none=True))
    return DebtCreditRecord(**row)


def toggle_debt_credit_status(store, user_id, item_id):
    current = next((i for i in get_debts_credits(store, user_id) if i.id == item_id), None)
    if current is None:
        raise NotFoundError("Debt or credit not found")
    new_status = "unpaid" if current.status == "paid" else "paid"
    row = store.update_row("debts_credits", user_id, item_id, {"status": new_status})
    return DebtCreditRecord(**row)


def delete_debt_credit(store, user_id, item_id):
    store.delete_row("debts_credits", user_id, item_id)
    return {"message": "Entry deleted successfully"}
