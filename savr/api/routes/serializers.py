"""Shape grouped rows for JSON responses."""
from savr.domain.InventoryCategory import get_category_emoji


def grouped_response(grouped):
    return {
        "categories": [
            {
                "category": category,
                "emoji": get_category_emoji(category),
                "items": [dict(item.to_dict(), index=index) for _, item, index in rows],
            }
            for category, rows in grouped.items()
        ]
    }
