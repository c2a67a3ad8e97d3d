#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.user import UserModel
from storefront.data.models.product import ProductModel
from storefront.data.models.shopping_cart import ShoppingCartModel

__all__ = ["UserModel", "ProductModel", "ShoppingCartModel"]
