from .store import Store
from .billboard import Billboard
from .category import Category
from .subcategory import Subcategory
from .size import Size
from .color import Color
from .product import Product
from .image import Image

__all__ = ['Store', 'Billboard', 'Category', 'Subcategory', 'Size', 'Color', 'Product', 'Image']
