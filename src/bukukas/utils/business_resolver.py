"""Utility for resolving business names to IDs."""

from bukukas.domain.business import BusinessService
from bukukas.domain.errors import (
    NotFoundError,
    business_name_ambiguous,
    business_name_not_found,
)


def resolve_business(business_service: BusinessService, business: str) -> str:
    """Resolve a business ID or name to a business ID.

    Lookup order: exact ID, exact name, case-insensitive name, then a
    case-insensitive partial name that matches exactly one business.

    Args:
        business_service: BusinessService instance
        business: Business ID or (partial) name

    Returns:
        Business ID

    Raises:
        NotFoundError: If no business matches, or a partial name matches several
    """
    business = business.strip()
    if business_service.get_business(business) is not None:
        return business

    businesses = business_service.list_businesses()
    for candidate in businesses:
        if candidate.name == business:
            return candidate.id

    wanted = business.casefold()
    for candidate in businesses:
        if candidate.name.casefold() == wanted:
            return candidate.id

    matches = [candidate for candidate in businesses if wanted in candidate.name.casefold()]
    if len(matches) == 1:
        return matches[0].id
    if len(matches) > 1:
        raise NotFoundError(business_name_ambiguous(business, [m.name for m in matches]))

    raise NotFoundError(business_name_not_found(business))
