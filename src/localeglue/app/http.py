"""Problem payloads returned when a translation request cannot be served."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import jsonify

from localeglue.localization import CatalogLoadError, LocalizationError, UnboundDomainError


@dataclass(frozen=True)
class ProblemResponse:
    """JSON error body paired with the HTTP status it is sent with."""

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the JSON body; ``message`` and extras appear only when set."""

        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        """Convert the problem into a Flask ``(body, status)`` response tuple."""

        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Build a problem, collecting keyword arguments into ``extra``."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


def localization_problem(error: LocalizationError) -> ProblemResponse:
    """Map an activation failure to the problem payload clients receive.

    Unbound domains are client mistakes and report the domain name. Catalogue
    failures are server-side and carry only the reason, never the file path.
    """

    if isinstance(error, UnboundDomainError):
        return problem_response(
            "unknown_domain", status=404, message=str(error), domain=error.domain
        )
    if isinstance(error, CatalogLoadError):
        return problem_response("catalog_unavailable", status=500, message=error.reason)
    return problem_response("localization_error", status=500, message=str(error))


__all__ = ["ProblemResponse", "localization_problem", "problem_response"]
