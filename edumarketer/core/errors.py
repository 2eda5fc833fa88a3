class InstitutionNotFoundError(LookupError):
    """No institution with the given id"""


class ResultNotFoundError(LookupError):
    """No stored result for the institution in this content domain"""


class ItemNotFoundError(LookupError):
    """No status item with the given id in the result"""


class SectionNotFoundError(LookupError):
    """The content domain has no section with this key"""


class InvalidRequestError(ValueError):
    """Request is well-formed JSON but cannot be acted on"""
