"""Product catalog pages and form endpoints."""
import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from catalog.api.deps import read_input, require_user
from catalog.database import get_db
from catalog.exceptions import ValidationFailed
from catalog.schemas.product import ProductProps
from catalog.services import inertia, product_store
from catalog.services.validator import validate_product

router = APIRouter(
    prefix="/products", tags=["products"], dependencies=[Depends(require_user)]
)

logger = logging.getLogger(__name__)


@router.get("", name="products.index")
def index(request: Request, db: Session = Depends(get_db)):
    """List all products, newest first."""
    products = product_store.list_products(db)
    return inertia.render(
        request,
        "products/Index",
        {"products": [ProductProps.model_validate(product) for product in products]},
    )


@router.get("/create", name="products.create")
def create(request: Request):
    """Show the empty product form."""
    return inertia.render(request, "products/Create")


@router.post("", name="products.store")
async def store(request: Request, db: Session = Depends(get_db)):
    """
    Create a product.

    Invalid input redirects back to the form with field errors.
    """
    try:
        fields = validate_product(await read_input(request))
    except ValidationFailed as exc:
        return inertia.redirect_back(
            request,
            fallback=request.app.url_path_for("products.create"),
            errors=exc.first_messages(),
        )

    product_store.create_product(db, fields)

    inertia.flash(request, "message", "Product added successfully")
    return inertia.redirect(request.app.url_path_for("products.index"))


@router.get("/{product_id}/edit", name="products.edit")
def edit(product_id: str, request: Request, db: Session = Depends(get_db)):
    """Show the form for an existing product."""
    product = product_store.get_product(db, product_id)
    return inertia.render(
        request, "products/Edit", {"product": ProductProps.model_validate(product)}
    )


@router.put("/{product_id}", name="products.update")
async def update(product_id: str, request: Request, db: Session = Depends(get_db)):
    """
    Update a product.

    Only submitted fields are overwritten. Invalid input redirects back to
    the edit form with field errors and leaves the row untouched.
    """
    product_store.get_product(db, product_id)

    try:
        fields = validate_product(await read_input(request))
    except ValidationFailed as exc:
        return inertia.redirect_back(
            request,
            fallback=request.app.url_path_for("products.edit", product_id=product_id),
            errors=exc.first_messages(),
        )

    product_store.update_product(db, product_id, fields)

    inertia.flash(request, "message", "Product updated successfully")
    return inertia.redirect(request.app.url_path_for("products.index"))


@router.delete("/{product_id}", name="products.destroy")
def destroy(product_id: str, request: Request, db: Session = Depends(get_db)):
    """Delete a product."""
    product_store.get_product(db, product_id)
    product_store.delete_product(db, product_id)

    inertia.flash(request, "message", "Product deleted successfully")
    return inertia.redirect(request.app.url_path_for("products.index"))
