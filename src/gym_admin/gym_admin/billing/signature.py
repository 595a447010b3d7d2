from __future__ import annotations

import hashlib
import hmac

from ..core.exceptions import ConfigurationError, SignatureMismatch


def compute_signature(order_id: str, payment_id: str, secret: str) -> str:
    """Hex HMAC-SHA256 of "<order_id>|<payment_id>" keyed by the gateway secret."""
    message = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def clean_signature(signature) -> str:
    """Return the signature as a stripped ASCII string or raise SignatureMismatch.

    A hex digest is always ASCII, so anything else can never match.
    """
    if not isinstance(signature, str):
        raise SignatureMismatch("Invalid payment signature")
    signature = signature.strip()
    if not signature or not signature.isascii():
        raise SignatureMismatch("Invalid payment signature")
    return signature


def verify_signature(order_id: str, payment_id: str, signature, secret: str) -> None:
    if not secret:
        raise ConfigurationError("Payment gateway secret is not configured")
    signature = clean_signature(signature)
    expected = compute_signature(order_id, payment_id, secret)
    if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
        raise SignatureMismatch("Invalid payment signature")
