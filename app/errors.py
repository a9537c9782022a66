from fastapi import HTTPException


class LabError(HTTPException):
    """Base for errors raised by the registries and the allocation ledger."""

    status_code = 500
    default_detail = "Interní chyba"

    def __init__(self, detail: str | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class ValidationError(LabError):
    status_code = 422
    default_detail = "Povinné pole chybí"


class NotFound(LabError):
    status_code = 404
    default_detail = "Záznam nenalezen"


class ConflictError(LabError):
    """A concurrent assign for the same student won; the caller may retry."""

    status_code = 409
    default_detail = "Souběžná změna přiřazení, zkuste to znovu"


class BackendError(LabError):
    status_code = 503
    default_detail = "Databáze není dostupná"
