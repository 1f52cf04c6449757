from flask import Blueprint
from cutsistent.utils.auth import require_auth
from cutsistent.controllers.food_entry_controller import (
    list_food_entries_handler,
    create_food_entry_handler,
    update_food_entry_handler,
    delete_food_entry_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api")

@food_bp.get("/food-entries")
@require_auth
def list_food_entries():
    return list_food_entries_handler()


@food_bp.post("/food-entries")
@require_auth
def create_food_entry():
    return create_food_entry_handler()


@food_bp.put("/food-entries/<int:id>")
@require_auth
def update_food_entry(id):
    return update_food_entry_handler(id)


@food_bp.delete("/food-entries/<int:id>")
@require_auth
def delete_food_entry(id):
    return delete_food_entry_handler(id)
