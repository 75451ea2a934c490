"""Infrastructure ORM Models"""

from .user_model import UserModel
from .product_model import ProductModel
from .order_form_model import OrderFormModel

__all__ = [
    'UserModel',
    'ProductModel',
    'OrderFormModel',
]
