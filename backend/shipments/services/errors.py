class ShipmentRequestError(Exception):
    """Base exception for shipment request submission errors"""
    pass


class AuthenticationRequiredError(ShipmentRequestError):
    """Raised when there is no signed-in, approved client to submit for"""
    pass


class InsufficientStockError(ShipmentRequestError):
    """Raised when one or more lines ask for more than the client holds"""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(" ".join(str(e) for e in self.errors))


class SubmissionError(ShipmentRequestError):
    """Raised when the shipment request could not be stored"""
    pass
