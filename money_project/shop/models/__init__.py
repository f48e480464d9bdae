from .product import DummyProduct, Product
from .transaction import Transaction
