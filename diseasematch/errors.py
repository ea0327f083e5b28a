class DiseaseMatchError(Exception):
    """Base class for every error raised by diseasematch."""


class InvalidInput(DiseaseMatchError):
    """Symptom input arity or emptiness precondition was violated."""


class CatalogUnavailable(DiseaseMatchError):
    """The disease catalog store could not be reached. Safe to retry."""


class MalformedCatalogEntry(DiseaseMatchError):
    """A single catalog record could not be decoded; it gets skipped."""

    def __init__(self, name, reason):
        super().__init__(f"{name!r}: {reason}")
        self.name = name
        self.reason = reason


class LogWriteFailed(DiseaseMatchError):
    """A prediction query could not be persisted."""
