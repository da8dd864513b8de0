from lazy_product.odometer import Odometer
from lazy_product.product_conf import ProductConfig
from lazy_product.repeat_product import RepeatProductIter, product_with_repeat
from lazy_product.fixed_repeat_product import FixedRepeatProductIter, fixed_product_with_repeat
from lazy_product.multi_product import MultiProductIter, product

__all__ = [
    "Odometer",
    "ProductConfig",
    "RepeatProductIter",
    "product_with_repeat",
    "FixedRepeatProductIter",
    "fixed_product_with_repeat",
    "MultiProductIter",
    "product",
]
