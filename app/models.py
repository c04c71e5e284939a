# app/models.py
from pydantic import BaseModel
from typing import List, Union

class Product(BaseModel):
    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    inStock: bool

SEED_PRODUCTS: List[Product] = [
    Product(
        id="1",
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200,
        category="electronics",
        inStock=True,
    ),
    Product(
        id="2",
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800,
        category="electronics",
        inStock=True,
    ),
    Product(
        id="3",
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50,
        category="kitchen",
        inStock=False,
    ),
]
