from __future__ import annotations

import logging
from typing import Optional, Protocol

import razorpay
import requests
from razorpay.errors import BadRequestError, GatewayError, ServerError, SignatureVerificationError

from ..core.constants import DEFAULT_CURRENCY, PAISE_PER_RUPEE
from ..core.exceptions import ConfigurationError, PaymentGatewayError, SignatureMismatch, ValidationError
from .signature import clean_signature

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def create_order(self, *, amount: int, currency: str = DEFAULT_CURRENCY, receipt: Optional[str] = None) -> str:
        """Create an order for `amount` rupees; returns the gateway order id."""

        raise NotImplementedError

    def verify_payment_signature(self, *, order_id: str, payment_id: str, signature: str) -> None:
        """Raise SignatureMismatch unless the signature is authentic."""

        raise NotImplementedError


class RazorpayGateway(PaymentGateway):
    def __init__(self, key_id: str, key_secret: str, *, client: Optional[razorpay.Client] = None):
        self._key_id = key_id
        self._key_secret = key_secret
        self._client = client

    def _get_client(self) -> razorpay.Client:
        if self._client is None:
            if not self._key_id or not self._key_secret:
                raise ConfigurationError("Razorpay keys are not configured")
            self._client = razorpay.Client(auth=(self._key_id, self._key_secret))
        return self._client

    def create_order(self, *, amount: int, currency: str = DEFAULT_CURRENCY, receipt: Optional[str] = None) -> str:
        if int(amount) <= 0:
            raise ValidationError("Amount must be greater than 0")

        data = {"amount": int(amount) * PAISE_PER_RUPEE, "currency": currency}
        if receipt:
            data["receipt"] = receipt

        try:
            order = self._get_client().order.create(data=data)
        except (BadRequestError, GatewayError, ServerError, requests.RequestException) as e:
            logger.error("Razorpay order creation failed: %s", e)
            raise PaymentGatewayError("Error creating order") from e

        logger.info("Created Razorpay order %s for %s %s", order.get("id"), amount, currency)
        return str(order["id"])

    def verify_payment_signature(self, *, order_id: str, payment_id: str, signature: str) -> None:
        if not self._key_secret:
            raise ConfigurationError("Payment gateway secret is not configured")
        # The SDK compares str digests, which fails on non-ASCII input.
        signature = clean_signature(signature)
        try:
            self._get_client().utility.verify_payment_signature(
                {
                    "razorpay_order_id": order_id,
                    "razorpay_payment_id": payment_id,
                    "razorpay_signature": signature,
                }
            )
        except SignatureVerificationError as e:
            logger.warning("Signature mismatch for order %s payment %s", order_id, payment_id)
            raise SignatureMismatch("Invalid payment signature") from e
