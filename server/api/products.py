# server/api/products.py

import logging
from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from database import get_db
from api.schemas import Message
from core.errors import NotFoundError, StoreFault, ValidationError
from models.product import Product


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

# bounds of the INT columns in the products table
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
TEXT_MAX = 255


# -------------------------------
# Schemas
# -------------------------------

class ProductRequest(BaseModel):
    """
    Body of create and update calls. Every field must be present and truthy,
    so a price of 0 is rejected the same way as a missing one.
    """
    name: str | None = Field(None, alias="productName", max_length=TEXT_MAX)
    price: int | None = Field(None, alias="productPrice", ge=INT_MIN, le=INT_MAX)
    category: str | None = Field(None, alias="productCategory", max_length=TEXT_MAX)
    description: str | None = Field(None, alias="productDescription", max_length=TEXT_MAX)

    def is_complete(self) -> bool:
        return all([self.name, self.price, self.category, self.description])


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str = Field(alias="productName")
    price: int = Field(alias="productPrice")
    category: str = Field(alias="productCategory")
    description: str = Field(alias="productDescription")
    user_id: int | None = Field(None, alias="userId")
    is_admin: bool | None = Field(None, alias="isAdmin")


class ProductCreated(BaseModel):
    message: str
    id: int


def _fields(req: ProductRequest) -> dict:
    if not req.is_complete():
        raise ValidationError()
    return {
        "name": req.name,
        "price": req.price,
        "category": req.category,
        "description": req.description,
    }


def _stored_id(product_id: int) -> bool:
    """An id outside the INT column range can never match a row."""
    return INT_MIN <= product_id <= INT_MAX


# -------------------------------
# Endpoints
# -------------------------------

@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductCreated)
def create_product(req: ProductRequest, db: Session = Depends(get_db)):
    product = Product(**_fields(req))
    try:
        db.add(product)
        db.commit()
        db.refresh(product)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error inserting product: {e}", exc_info=True)
        raise StoreFault() from e

    logger.info(f"Product created with id {product.id}")
    return {"message": "Product created successfully", "id": product.id}


@router.get("", response_model=list[ProductOut])
def list_products(db: Session = Depends(get_db)):
    try:
        products = db.query(Product).order_by(Product.id).all()
    except SQLAlchemyError as e:
        logger.error(f"Error getting products: {e}", exc_info=True)
        raise StoreFault() from e
    return [ProductOut.model_validate(p) for p in products]


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    if not _stored_id(product_id):
        raise NotFoundError("Product not found")

    try:
        product = db.get(Product, product_id)
    except SQLAlchemyError as e:
        logger.error(f"Error getting product {product_id}: {e}", exc_info=True)
        raise StoreFault() from e

    if product is None:
        raise NotFoundError("Product not found")
    return ProductOut.model_validate(product)


@router.put("/{product_id}", response_model=Message)
def update_product(product_id: int, req: ProductRequest, db: Session = Depends(get_db)):
    """
    Overwrites all four fields. An unknown id is not an error: the
    update simply touches no rows.
    """
    values = _fields(req)
    if not _stored_id(product_id):
        logger.info(f"Product {product_id} updated (0 row(s) affected)")
        return {"message": "Product updated successfully"}

    try:
        updated = (
            db.query(Product)
            .filter(Product.id == product_id)
            .update(values, synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating product {product_id}: {e}", exc_info=True)
        raise StoreFault() from e

    logger.info(f"Product {product_id} updated ({updated} row(s) affected)")
    return {"message": "Product updated successfully"}


@router.delete("/{product_id}", response_model=Message)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    """
    Deletes the row if it exists. Repeating the call still succeeds.
    """
    if not _stored_id(product_id):
        logger.info(f"Product {product_id} deleted (0 row(s) affected)")
        return {"message": "Product deleted successfully"}

    try:
        deleted = (
            db.query(Product)
            .filter(Product.id == product_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
        raise StoreFault() from e

    logger.info(f"Product {product_id} deleted ({deleted} row(s) affected)")
    return {"message": "Product deleted successfully"}
