# app/utils/errors.py
"""
Domain exceptions raised by the service layer.
Each carries the HTTP status it maps to; app/main.py turns them into JSON.
"""


class ControleError(Exception):
    """Base class for expected, client-facing failures."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class NotFoundError(ControleError):
    status_code = 404


class BusinessRuleError(ControleError):
    status_code = 400


class CorrectionRequired(ControleError):
    """
    Raised when a movement contradicts the vehicle's current status.
    The client must resend the movement with forceCorrection=true to
    have the opposite movement inserted automatically.
    """
    status_code = 409

    def __init__(self, message: str, suggested_action: str):
        super().__init__(message)
        self.suggested_action = suggested_action

    def to_dict(self) -> dict:
        return {
            "status": self.status_code,
            "message": self.message,
            "correctionRequired": True,
            "suggestedAction": self.suggested_action,
        }
