from .shopify_service import ShopifyService, describe_http_error, describe_request_error
from .tools import (
    DEFAULT_LIMIT,
    GET_CUSTOMERS,
    GET_ORDERS,
    GET_PRODUCT_DETAILS,
    GET_PRODUCTS,
    SEARCH_PRODUCTS,
    ShopifyTools,
    register_shopify_tools,
)

__all__ = [
    'ShopifyService',
    'describe_http_error',
    'describe_request_error',
    'DEFAULT_LIMIT',
    'GET_CUSTOMERS',
    'GET_ORDERS',
    'GET_PRODUCT_DETAILS',
    'GET_PRODUCTS',
    'SEARCH_PRODUCTS',
    'ShopifyTools',
    'register_shopify_tools',
]
