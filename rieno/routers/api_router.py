from datetime import date
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Response

from rieno.dependencies import get_current_user, get_store
from rieno.schemas.auth_schemas import public_profile
from rieno.schemas.finance_schemas import CategoryForm, DebtCreditForm, DebtCreditUpdateForm, EntryForm
from rieno.services import finance_service, report_service

api_router = APIRouter(prefix="/api")

# Profile
@api_router.get("/profile")
def get_profile(store=Depends(get_store), user=Depends(get_current_user)):
    profile = public_profile(store.get_user(user.user_id))
    profile["demoMode"] = store.demo
    return {"success": True, "data": profile}

# Debts and credits
@api_router.get("/transactions")
def get_transactions(
    type: Optional[Literal["receivable", "payable"]] = None,
    status: Literal["all", "paid", "unpaid"] = "all",
    search: str = "",
    store=Depends(get_store),
    user=Depends(get_current_user),
):
    data = finance_service.get_transactions_page(store, user.user_id, type, status, search)
    return {"success": True, "data": data}

@api_router.post("/transactions", status_code=201)
def add_transaction(body: DebtCreditForm, store=Depends(get_store), user=Depends(get_current_user)):
    item = finance_service.add_debt_credit(store, user.user_id, body)
    return {"success": True, "data": item.model_dump(mode="json"), "message": "Entry added successfully"}

@api_router.put("/transactions/{item_id}")
def edit_transaction(item_id: str, body: DebtCreditUpdateForm, store=Depends(get_store), user=Depends(get_current_user)):
    item = finance_service.edit_debt_credit(store, user.user_id, item_id, body)
    return {"success": True, "data": item.model_dump(mode="json"), "message": "Entry updated successfully"}

@api_router.patch("/transactions/{item_id}/status")
def toggle_transaction_status(item_id: str, store=Depends(get_store), user=Depends(get_current_user)):
    item = finance_service.toggle_debt_credit_status(store, user.user_id, item_id)
    return {"success": True, "data": item.model_dump(mode="json"), "message": f"Marked as {item.status}"}

@api_router.delete("/transactions/{item_id}")
def delete_transaction(item_id: str, store=Depends(get_store), user=Depends(get_current_user)):
    return {"success": True, **finance_service.delete_debt_credit(store, user.user_id, item_id)}

# Entries
@api_router.get("/entries")
def get_entries(store=Depends(get_store), user=Depends(get_current_user)):
    entries = finance_service.get_entries(store, user.user_id)
    return {"success": True, "data": [finance_service.entry_payload(e) for e in entries]}

@api_router.post("/entries", status_code=201)
def add_entry(body: EntryForm, store=Depends(get_store), user=Depends(get_current_user)):
    entry = finance_service.add_entry(store, user.user_id, body)
    return {"success": True, "data": finance_service.entry_payload(entry), "message": "Entry added successfully"}

@api_router.put("/entries/{entry_id}")
def edit_entry(entry_id: str, body: EntryForm, store=Depends(get_store), user=Depends(get_current_user)):
    entry = finance_service.edit_entry(store, user.user_id, entry_id, body)
    return {"success": True, "data": finance_service.entry_payload(entry), "message": "Entry updated successfully"}

@api_router.delete("/entries/{entry_id}")
def delete_entry(entry_id: str, store=Depends(get_store), user=Depends(get_current_user)):
    return {"success": True, **finance_service.delete_entry(store, user.user_id, entry_id)}

# Categories
@api_router.get("/categories")
def get_categories(store=Depends(get_store), user=Depends(get_current_user)):
    categories = finance_service.get_categories(store, user.user_id)
    return {"success": True, "data": [c.model_dump() for c in categories]}

@api_router.post("/categories", status_code=201)
def add_category(body: CategoryForm, store=Depends(get_store), user=Depends(get_current_user)):
    category = finance_service.add_category(store, user.user_id, body)
    return {"success": True, "data": category.model_dump(), "message": "Category added successfully"}

@api_router.put("/categories/{category_id}")
def edit_category(category_id: str, body: CategoryForm, store=Depends(get_store), user=Depends(get_current_user)):
    category = finance_service.edit_category(store, user.user_id, category_id, body)
    return {"success": True, "data": category.model_dump(), "message": "Category updated successfully"}

@api_router.delete("/categories/{category_id}")
def delete_category(category_id: str, store=Depends(get_store), user=Depends(get_current_user)):
    return {"success": True, **finance_service.delete_category(store, user.user_id, category_id)}

# Reports
def _monthly_summaries(store, user_id):
    entries = finance_service.get_entries(store, user_id)
    categories = finance_service.get_categories(store, user_id)
    return report_service.generate_monthly_summaries(entries, categories)

@api_router.get("/reports")
def get_reports(period: str = "6months", store=Depends(get_store), user=Depends(get_current_user)):
    summaries = report_service.filter_period(_monthly_summaries(store, user.user_id), period)
    return {
        "success": True,
        "data": {
            "period": period,
            "summaries": summaries,
            "chart": report_service.chart_series(summaries),
            "categories": report_service.category_totals(summaries),
            "totals": report_service.overall_totals(summaries),
        },
    }

@api_router.get("/reports/export")
def export_report(period: str = "6months", store=Depends(get_store), user=Depends(get_current_user)):
    summaries = report_service.filter_period(_monthly_summaries(store, user.user_id), period)
    filename = report_service.export_filename()
    return Response(
        content=report_service.export_csv(summaries),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

# Dashboard
@api_router.get("/dashboard")
def get_dashboard(store=Depends(get_store), user=Depends(get_current_user)):
    today = date.today()
    entries = finance_service.get_entries(store, user.user_id)
    debts_credits = finance_service.get_debts_credits(store, user.user_id)
    return {
        "success": True,
        "data": {
            "summary": report_service.dashboard_summary(entries, debts_credits, today),
            "recent_entries": [finance_service.entry_payload(e) for e in entries[:3]],
            "daily": report_service.daily_series(entries, today),
        },
    }
