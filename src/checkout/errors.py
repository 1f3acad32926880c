"""Structured checkout error taxonomy used for fail-fast construction errors."""

from __future__ import annotations


class CheckoutError(Exception):
    """Base class for all checkout domain exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class ConfigurationError(CheckoutError):
    def __init__(self, explanation: str, error_code: str = "CONFIGURATION"):
        super().__init__(error_code, "CONFIG", explanation)


class UnknownOptionError(ConfigurationError):
    """Raised when a cart is constructed with an option it does not recognise."""

    def __init__(self, options: list[str], known: tuple[str, ...]):
        self.options = options
        self.known = known
        super().__init__(
            f"unknown option(s) {', '.join(options)}; expected one of: {', '.join(known)}",
            error_code="UNKNOWN_OPTION",
        )


class DiscountDefinitionError(CheckoutError):
    def __init__(self, explanation: str):
        super().__init__("DISCOUNT_DEFINITION", "DISCOUNT", explanation)


class ResolverContractError(CheckoutError):
    def __init__(self, explanation: str):
        super().__init__("RESOLVER_CONTRACT", "RESOLVER", explanation)
