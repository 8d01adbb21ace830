# product_api/store.py
import logging
from typing import List, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import ProductNotFound
from .models import Product
from .schemas import ProductIn

logger = logging.getLogger(__name__)


class ProductStore:
    """Data access for the product table.

    The store works on the session it is given and commits after each
    mutating call. Not-found lookups raise ProductNotFound; database errors
    propagate untouched.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def _new_row(data: ProductIn) -> Product:
        # ids are always generated by the database on insert
        return Product(name=data.name, description=data.description, price=data.price)

    async def save(self, data: ProductIn) -> Product:
        product = self._new_row(data)
        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)
        logger.info("Created product id=%s", product.id)
        return product

    async def save_all(self, items: Sequence[ProductIn]) -> List[Product]:
        # One commit for the whole batch: either every row lands or none does.
        products = [self._new_row(item) for item in items]
        self.session.add_all(products)
        await self.session.flush()
        await self.session.commit()
        for product in products:
            await self.session.refresh(product)
        logger.info("Created %d products ids=%s", len(products), [p.id for p in products])
        return products

    async def find_all(self) -> List[Product]:
        result = await self.session.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def find_by_id(self, product_id: int) -> Product:
        product = await self.session.get(Product, product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    async def find_by_name(self, name: str) -> Product:
        # duplicate names resolve to the first one inserted
        result = await self.session.execute(
            select(Product).where(Product.name == name).order_by(Product.id).limit(1)
        )
        product = result.scalar_one_or_none()
        if product is None:
            raise ProductNotFound(name)
        return product

    async def update(self, product_id: int, data: ProductIn) -> Product:
        product = await self.find_by_id(product_id)

        product.name = data.name
        product.description = data.description
        product.price = data.price

        await self.session.commit()
        await self.session.refresh(product)
        logger.info("Updated product id=%s", product.id)
        return product

    async def delete_by_id(self, product_id: int) -> str:
        product = await self.find_by_id(product_id)

        await self.session.delete(product)
        await self.session.commit()
        logger.info("Deleted product id=%s", product_id)
        return f"product removed !! {product_id}"
