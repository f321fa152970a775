# storefront/domain/errors.py
"""
Wyjatki domenowe. Kazdy niesie status HTTP, routery nie musza ich tlumaczyc -
handlery w storefront.api.errors zamieniaja je na odpowiedz {"message": ...}.
"""


class StorefrontError(Exception):
    status_code = 500

    def __init__(self, message: str, **extra):
        super().__init__(message)
        self.message = message
        self.extra = extra


class Unauthorized(StorefrontError):
    status_code = 401


class Forbidden(StorefrontError):
    status_code = 403


class NotFound(StorefrontError):
    status_code = 404


class Conflict(StorefrontError):
    status_code = 409


class ValidationFailed(StorefrontError):
    status_code = 400


class NotAvailable(ValidationFailed):
    pass


class EmptyCart(ValidationFailed):
    pass


class ProductsUnavailable(ValidationFailed):
    def __init__(self, product_ids: list[int]):
        super().__init__(
            "Some products in your cart are no longer available",
            inactive_product_ids=product_ids,
        )
        self.product_ids = product_ids


class InvalidTransition(ValidationFailed):
    pass


class AlreadyActive(ValidationFailed):
    pass
