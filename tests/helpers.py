from store_admin.db.models import Billboard, Category, Subcategory, Size, Color, Product

OWNER_ID = "user_1"
OTHER_USER_ID = "user_2"
OWNER_HEADERS = {"X-User-Id": OWNER_ID}
OTHER_HEADERS = {"X-User-Id": OTHER_USER_ID}

# Per entity: seeded id, model, a valid PATCH body and its required fields in check order
ENTITIES = {
    "billboards": {
        "id": "bb1",
        "model": Billboard,
        "body": {"label": "Winter", "imageUrl": "https://img.test/winter.jpg", "isFeatured": True},
        "required": [("label", "Label is required"), ("imageUrl", "Image URL is required")],
    },
    "categories": {
        "id": "cat1",
        "model": Category,
        "body": {"name": "T-Shirts", "billboardId": "bb1"},
        "required": [("name", "Name is required"), ("billboardId", "Billboard id is required")],
    },
    "subcategories": {
        "id": "sub1",
        "model": Subcategory,
        "body": {"name": "V-neck", "categoryId": "cat1"},
        "required": [("name", "Name is required"), ("categoryId", "Category id is required")],
    },
    "sizes": {
        "id": "size1",
        "model": Size,
        "body": {"name": "Extra large", "value": "XL"},
        "required": [("name", "Name is required"), ("value", "Value is required")],
    },
    "colors": {
        "id": "color1",
        "model": Color,
        "body": {"name": "Red", "value": "#F00"},
        "required": [("name", "Name is required"), ("value", "Value is required")],
    },
    "products": {
        "id": "prod1",
        "model": Product,
        "body": {
            "name": "Polo shirt v2",
            "price": "24.50",
            "categoryId": "cat1",
            "subcategoryId": "sub1",
            "images": [{"url": "https://img.test/polo-new.jpg"}],
        },
        "required": [
            ("name", "Name is required"),
            ("images", "Images are required"),
            ("price", "Price is required"),
            ("categoryId", "Category id is required"),
            ("subcategoryId", "Subcategory id is required"),
        ],
    },
}

REQUIRED_CASES = [
    (entity, field, message)
    for entity, config in ENTITIES.items()
    for field, message in config["required"]
]


def lock(db, model, entity_id):
    db.query(model).filter(model.id == entity_id).update({"is_locked": True})
    db.commit()


def fetch(db, model, entity_id):
    db.expire_all()
    return db.query(model).filter(model.id == entity_id).first()


def snapshot(row):
    """Column values of a row, for before/after comparisons."""
    return {column.name: getattr(row, column.name) for column in row.__table__.columns}
