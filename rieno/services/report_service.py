import csv
import io
from collections import defaultdict
from datetime import date, datetime, timedelta

from rieno.errors import BadRequestError
from rieno.schemas.finance_schemas import DEFAULT_CATEGORY_COLOR

UNCATEGORIZED = "Uncategorized"

PERIODS = {"6months": 6, "12months": 12, "all": None}

CSV_HEADER = ["Month", "Total Revenue", "Total Cost", "Total Profit", "Entry Count"]


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def generate_monthly_summaries(entries, categories):
    """Group entries by calendar month, with per-category subtotals.

    Months come back newest first. Entries whose category is unknown are
    counted under "Uncategorized". Buckets are keyed by category name, so
    categories sharing a name share a bucket.
    """
    category_map = {c.id: c for c in categories}
    monthly_data = {}

    for entry in entries:
        entry_date = _as_date(entry.date)
        month_key = entry_date.strftime('%Y-%m')

        summary = monthly_data.get(month_key)
        if summary is None:
            summary = monthly_data[month_key] = {
                "month": entry_date.strftime('%b %Y'),
                "month_key": month_key,
                "year": entry_date.year,
                "total_revenue": 0,
                "total_cost": 0,
                "total_profit": 0,
                "entry_count": 0,
                "categories": {},
            }

        category = category_map.get(entry.category_id)
        category_name = category.name if category else UNCATEGORIZED
        category_color = (category.color if category else None) or DEFAULT_CATEGORY_COLOR
        profit = entry.revenue - entry.cost

        summary["total_revenue"] += entry.revenue
        summary["total_cost"] += entry.cost
        summary["total_profit"] += profit
        summary["entry_count"] += 1

        bucket = summary["categories"].setdefault(category_name, {
            "revenue": 0,
            "cost": 0,
            "profit": 0,
            "count": 0,
            "color": category_color,
        })
        if category and category.color:
            # a user category named "Uncategorized" shares the bucket; its color wins
            bucket["color"] = category.color
        bucket["revenue"] += entry.revenue
        bucket["cost"] += entry.cost
        bucket["profit"] += profit
        bucket["count"] += 1

    return sorted(monthly_data.values(), key=lambda s: s["month_key"], reverse=True)


def filter_period(summaries, period="6months"):
    if period not in PERIODS:
        raise BadRequestError("period must be one of 6months, 12months, all")
    limit = PERIODS[period]
    if limit is None:
        return list(summaries)
    return list(summaries[:limit])


def chart_series(summaries):
    # oldest first, for the bar chart
    return [
        {
            "month": s["month"],
            "revenue": s["total_revenue"],
            "cost": s["total_cost"],
            "profit": s["total_profit"],
        }
        for s in reversed(summaries)
    ]


def category_totals(summaries, limit=8):
    totals = {}
    for summary in summaries:
        for name, data in summary["categories"].items():
            if name not in totals:
                totals[name] = {"name": name, "value": 0, "color": data["color"]}
            totals[name]["value"] += data["revenue"]

    ranked = sorted(totals.values(), key=lambda x: x["value"], reverse=True)
    return ranked[:limit]


def overall_totals(summaries):
    return {
        "revenue": sum(s["total_revenue"] for s in summaries),
        "cost": sum(s["total_cost"] for s in summaries),
        "profit": sum(s["total_profit"] for s in summaries),
        "entries": sum(s["entry_count"] for s in summaries),
    }


def export_csv(summaries):
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for s in summaries:
        writer.writerow([s["month"], s["total_revenue"], s["total_cost"], s["total_profit"], s["entry_count"]])
    return buffer.getvalue()


def export_filename(today=None):
    today = today or date.today()
    return f"financial-report-{today.strftime('%Y-%m-%d')}.csv"


# DASHBOARD
def debt_totals(debts_credits):
    receivable = 0
    payable = 0
    for item in debts_credits:
        if item.status != "unpaid":
            continue
        if item.type == "receivable":
            receivable += item.amount
        elif item.type == "payable":
            payable += item.amount
    return {"receivable": receivable, "payable": payable}


def daily_streak(entries, today):
    """Consecutive days with at least one entry, ending today.

    A day without entries yet today does not break a streak that ran
    through yesterday.
    """
    days = {_as_date(e.date) for e in entries}
    day = today if today in days else today - timedelta(days=1)
    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def dashboard_summary(entries, debts_credits, today):
    totals = debt_totals(debts_credits)
    return {
        "total_revenue": sum(e.revenue for e in entries),
        "total_profit": sum(e.revenue - e.cost for e in entries),
        "amount_owed": totals["receivable"],
        "amount_you_owe": totals["payable"],
        "daily_streak": daily_streak(entries, today),
    }


def daily_series(entries, today, days=30):
    by_day = defaultdict(lambda: {"revenue": 0, "profit": 0})
    for entry in entries:
        bucket = by_day[_as_date(entry.date)]
        bucket["revenue"] += entry.revenue
        bucket["profit"] += entry.revenue - entry.cost

    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append({
            "name": day.strftime('%b %d'),
            "date": day.isoformat(),
            "revenue": by_day[day]["revenue"] if day in by_day else 0,
            "profit": by_day[day]["profit"] if day in by_day else 0,
        })
    return series
