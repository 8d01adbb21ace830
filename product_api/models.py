from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint

from .database import Base


class Product(Base):
    __tablename__ = "product_tbl"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    price = Column(Numeric(19, 2), nullable=False)  # exact money

    __table_args__ = (
        CheckConstraint("price >= 0.01", name="ck_product_tbl_price_min"),
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
