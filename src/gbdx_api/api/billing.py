"""
Billing operations for the GBDX API.

Handles customers, subscriptions, plans, payment sources and invoices.
"""

from typing import Any, Dict

from ..core import constants
from .client import ResourceAPI


class BillingAPI(ResourceAPI):
    """Billing operations, keyed by GBDX account ID."""

    path = constants.BILLING_PATH

    def fetch_customer(self, account_id: Any) -> Any:
        """
        Fetch the billing customer for an account.

        Args:
            account_id: GBDX account ID

        Returns:
            Customer payload
        """
        return self._fetch_parse("GET", f"/accounts/{account_id}")

    def validate_coupon_code(self, code: str) -> Any:
        """Validate a coupon code; unknown codes raise APIError."""
        return self._fetch_parse("GET", f"/coupons/{code}")

    def create_subscription(self, account_id: Any, params: Dict[str, Any]) -> Any:
        """
        Subscribe an account to a plan.

        Args:
            account_id: GBDX account ID
            params: Subscription details (plan, coupon, ...)

        Returns:
            Created subscription payload
        """
        return self._fetch_parse("POST", f"/accounts/{account_id}/subscriptions", params)

    def cancel_subscription(self, account_id: Any, subscription_id: Any) -> Any:
        """Cancel a subscription of an account."""
        return self._fetch_parse(
            "DELETE",
            f"/accounts/{account_id}/subscriptions/{subscription_id}"
        )

    def fetch_plans(self) -> Any:
        """List available plans."""
        return self._fetch_parse("GET", "/plans")

    def update_default_payment_source(self, account_id: Any, params: Dict[str, Any]) -> Any:
        """Set the default payment source of an account."""
        return self._fetch_parse(
            "POST",
            f"/accounts/{account_id}/default_payment_source",
            params
        )

    def fetch_history(self, account_id: Any) -> Any:
        """Fetch the invoice history of an account."""
        return self._fetch_parse("GET", f"/accounts/{account_id}/invoices")
