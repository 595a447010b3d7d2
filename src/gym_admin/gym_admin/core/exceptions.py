class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidPlan(ValidationError):
    """Raised when a plan name is not in the catalogue."""

    def __init__(self, plan_name: str):
        super().__init__(f"Invalid plan: {plan_name}")
        self.plan_name = plan_name


class MemberNotFound(DomainError):
    def __init__(self, member_id):
        super().__init__(f"Member not found: {member_id}")
        self.member_id = member_id


class StaffNotFound(DomainError):
    def __init__(self, staff_id):
        super().__init__(f"Staff not found: {staff_id}")
        self.staff_id = staff_id


class SignatureMismatch(DomainError):
    """Raised when a payment signature does not match the expected HMAC."""


class PaymentGatewayError(DomainError):
    """Raised when the payment gateway rejects or fails a request."""


class NotificationError(DomainError):
    """Raised by notifiers when a message could not be delivered."""


class ConfigurationError(DomainError):
    """Raised when a required setting (API key, secret) is missing."""
