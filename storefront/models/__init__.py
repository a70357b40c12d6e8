from storefront.models.menu_item import MenuItem
from storefront.models.order import Order
from storefront.models.order_item import OrderItem
from storefront.models.store_settings import StoreSettings
from storefront.models.category import Category
from storefront.models.promotion import Promotion
from storefront.models.scheduled_order import ScheduledOrder
from storefront.models.item_review import ItemReview
