# product_api/products.py
from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Annotated, List

from .database import get_session
from .errors import ProductValidationError
from .schemas import ProductIn, ProductOut
from .store import ProductStore
from .validation import validate_product, validate_products

router = APIRouter(tags=["Product Management"])

# product ids fit a 32-bit INTEGER column
ProductId = Annotated[int, Path(ge=-2**31, le=2**31 - 1)]


def get_store(session: AsyncSession = Depends(get_session)) -> ProductStore:
    return ProductStore(session)


def _require_valid(payload: ProductIn) -> None:
    violations = validate_product(payload)
    if violations:
        raise ProductValidationError(violations)


@router.post("/products", response_model=ProductOut, summary="Create a new product")
async def add_product(payload: ProductIn, store: ProductStore = Depends(get_store)):
    _require_valid(payload)
    return await store.save(payload)


@router.post("/addProducts", response_model=List[ProductOut], summary="Create several products")
async def add_products(payload: List[ProductIn], store: ProductStore = Depends(get_store)):
    violations = validate_products(payload)
    if violations:
        raise ProductValidationError(violations)
    return await store.save_all(payload)


@router.get("/products", response_model=List[ProductOut], summary="Get all products")
async def find_all_products(store: ProductStore = Depends(get_store)):
    return await store.find_all()


@router.get("/products/{product_id}", response_model=ProductOut, summary="Get product by ID")
async def find_product_by_id(product_id: ProductId, store: ProductStore = Depends(get_store)):
    return await store.find_by_id(product_id)


@router.get("/productByName/{name}", response_model=ProductOut, summary="Get product by name")
async def find_product_by_name(name: str, store: ProductStore = Depends(get_store)):
    return await store.find_by_name(name)


@router.put("/products/{product_id}", response_model=ProductOut, summary="Update product")
async def update_product(
    product_id: ProductId,
    payload: ProductIn,
    store: ProductStore = Depends(get_store),
):
    # the id in the path is authoritative
    payload.id = product_id
    _require_valid(payload)
    return await store.update(product_id, payload)


@router.delete("/products/{product_id}", response_class=PlainTextResponse, summary="Delete product")
async def delete_product(product_id: ProductId, store: ProductStore = Depends(get_store)):
    return await store.delete_by_id(product_id)
