from modaflex.utils import clock
from modaflex.utils.fines import effective_status


def _iso(value):
    return value.isoformat() if value else None


def _money(value):
    return float(value) if value is not None else None


def clothing_to_dict(c):
    return {
        "id": c.id,
        "name": c.name,
        "type": c.type,
        "size": c.size,
        "color": c.color,
        "photo": c.photo,
        "price": _money(c.price),
        "status": c.status,
        "notes": c.notes,
        "quantity": c.quantity,
        "min_quantity": c.min_quantity,
        "category": c.category,
        "season": c.season,
        "occasion": c.occasion,
        "brand": c.brand,
        "material": c.material,
        "last_maintenance": _iso(c.last_maintenance),
        "next_maintenance": _iso(c.next_maintenance),
        "created_at": _iso(c.created_at),
        "updated_at": _iso(c.updated_at),
    }


def customer_to_dict(c):
    return {
        "id": c.id,
        "name": c.name,
        "cpf": c.cpf,
        "phone": c.phone,
        "email": c.email,
        "address": c.address,
        "notes": c.notes,
        "created_at": _iso(c.created_at),
        "updated_at": _iso(c.updated_at),
    }


def rental_to_dict(r, today=None):
    today = today or clock.today()
    return {
        "id": r.id,
        "customer_id": r.customer_id,
        "customer_name": r.customer.name if r.customer else None,
        "clothing_ids": r.clothing_ids,
        "items": [
            {
                "clothing_id": i.clothing_id,
                "name": i.clothing.name if i.clothing else None,
                "unit_price": _money(i.unit_price),
            }
            for i in r.items
        ],
        "rent_date": _iso(r.rent_date),
        "return_date": _iso(r.return_date),
        "actual_return_date": _iso(r.actual_return_date),
        "total_value": _money(r.total_value),
        "status": r.status,
        "effective_status": effective_status(r.status, r.return_date, today),
        "fine": _money(r.fine),
        "notes": r.notes,
        "created_at": _iso(r.created_at),
        "updated_at": _iso(r.updated_at),
    }


def movement_to_dict(m):
    return {
        "id": m.id,
        "clothing_id": m.clothing_id,
        "type": m.type,
        "quantity": m.quantity,
        "previous_quantity": m.previous_quantity,
        "new_quantity": m.new_quantity,
        "reason": m.reason,
        "notes": m.notes,
        "date": _iso(m.date),
        "user_id": m.user_id,
    }


def fine_to_dict(result):
    return {"days_late": result.days_late, "fine": _money(result.amount), "is_late": result.is_late}
