from wishlist_api.common.logging_setup import get_logger

logger = get_logger("wishlist_api.user")
