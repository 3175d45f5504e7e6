# Sample data served in demo mode

DEMO_USER = {
    "id": "demo_user_id",
    "email": "demo@rieno.app",
    "created_at": "2024-01-01T00:00:00.000Z",
}

categories = [
    {"id": "cat-1", "name": "Design Services", "type": "income", "color": "#10B981"},
    {"id": "cat-2", "name": "Consulting", "type": "income", "color": "#3B82F6"},
    {"id": "cat-3", "name": "Product Sales", "type": "income", "color": "#8B5CF6"},
    {"id": "cat-4", "name": "Software", "type": "expense", "color": "#EF4444"},
    {"id": "cat-5", "name": "Marketing", "type": "expense", "color": "#F59E0B"},
]

entries = [
    {"id": "entry-1", "date": "2024-01-05", "product_or_service": "Website Design", "revenue": 2500, "cost": 500, "category_id": "cat-1", "notes": "Landing page and blog"},
    {"id": "entry-2", "date": "2024-01-12", "product_or_service": "Logo Design", "revenue": 800, "cost": 100, "category_id": "cat-1", "notes": None},
    {"id": "entry-3", "date": "2024-01-20", "product_or_service": "Consulting", "revenue": 1200, "cost": 0, "category_id": "cat-2", "notes": None},
    {"id": "entry-4", "date": "2024-02-02", "product_or_service": "Brand Strategy", "revenue": 1800, "cost": 200, "category_id": "cat-2", "notes": None},
    {"id": "entry-5", "date": "2024-02-14", "product_or_service": "Template Pack", "revenue": 450, "cost": 50, "category_id": "cat-3", "notes": "Online store"},
    {"id": "entry-6", "date": "2024-02-25", "product_or_service": "Design Tool Licenses", "revenue": 0, "cost": 299, "category_id": "cat-4", "notes": None},
    {"id": "entry-7", "date": "2024-03-03", "product_or_service": "Mobile App Design", "revenue": 3200, "cost": 700, "category_id": "cat-1", "notes": None},
    {"id": "entry-8", "date": "2024-03-18", "product_or_service": "Ad Campaign", "revenue": 0, "cost": 400, "category_id": "cat-5", "notes": None},
]

debts_credits = [
    {"id": "dc-1", "name": "Acme Corp", "amount": 2500, "reason": "Website redesign project", "date": "2024-01-15", "due_date": "2024-02-15", "status": "unpaid", "type": "receivable"},
    {"id": "dc-2", "name": "Jane Smith", "amount": 800, "reason": "Logo design", "date": "2024-01-20", "due_date": "2024-02-20", "status": "paid", "type": "receivable"},
    {"id": "dc-3", "name": "Software Vendor", "amount": 299, "reason": "Annual software license", "date": "2024-01-10", "due_date": "2024-02-10", "status": "unpaid", "type": "payable"},
]
