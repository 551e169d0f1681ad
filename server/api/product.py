# server/api/product.py

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from core import products
from core.uploads import save_image
from database import get_db


router = APIRouter()


@router.post("/add_product", status_code=status.HTTP_201_CREATED)
def add_product(
    name: str | None = Form(None),
    category: str | None = Form(None),
    price: float | None = Form(None, allow_inf_nan=False),
    img: UploadFile | None = File(None),
    db: Session = Depends(get_db)
):
    # the image is stored before the row; a failed insert leaves it on disk
    img_path = save_image(img) or ""
    product = products.create_product(db, name, category, price, img_path)
    return {"message": "Product added successfully", "product": product.to_dict()}


@router.put("/edit_product/{product_id}")
def edit_product(
    product_id: str,
    name: str | None = Form(None),
    category: str | None = Form(None),
    price: float | None = Form(None, allow_inf_nan=False),
    img: UploadFile | None = File(None),
    db: Session = Depends(get_db)
):
    img_path = save_image(img) or ""
    product = products.update_product(db, product_id, name, category, price, img_path)
    return {"message": "Product updated successfully", "product": product.to_dict()}


@router.delete("/delete_product/{product_id}")
def delete_product(product_id: str, db: Session = Depends(get_db)):
    products.delete_product(db, product_id)
    return {"message": "Product deleted successfully"}


@router.get("/get_products")
def get_products(db: Session = Depends(get_db)):
    return {"products": [p.to_dict() for p in products.list_products(db)]}


@router.get("/get_products/{category_id}")
def get_products_by_category(category_id: str, db: Session = Depends(get_db)):
    return {"products": [p.to_dict() for p in products.list_products_by_category(db, category_id)]}
