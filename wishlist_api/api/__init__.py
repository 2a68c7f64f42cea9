from wishlist_api import __version__

cur_version = __version__

# routes are served unversioned, e.g. /users, /merchants, /products
version_prefix = ""
