"""DealList construction from a fixed commercial-terms catalog.

The catalog is a static template, not a rules engine: every release gets
the same stanzas, scoped worldwide and valid from the release date.
Territory- or price-differentiated licensing would need a data-driven
template and is deliberately not modelled here.
"""

from __future__ import annotations

from typing import NamedTuple

from lxml import etree

from ddex_ern.models.options import DealProfile
from ddex_ern.models.release import Release
from ddex_ern.services.release_builder import release_reference
from ddex_ern.utils.dates import format_release_date
from ddex_ern.utils.xml_helpers import sub_element

WORLDWIDE = "Worldwide"


class DealTemplate(NamedTuple):
    """One commercial-terms stanza of the catalog."""

    commercial_model: str
    use_type: str
    wholesale_price: str | None = None
    currency: str = "USD"


DEAL_CATALOG: tuple[DealTemplate, ...] = (
    DealTemplate("SubscriptionModel", "OnDemandStream"),
    DealTemplate("PayAsYouGoModel", "PermanentDownload", wholesale_price="0.99"),
    DealTemplate("AdvertisementSupportedModel", "OnDemandStream"),
    DealTemplate("SubscriptionModel", "ConditionalDownload"),
    DealTemplate("AdvertisementSupportedModel", "UserMadeClip"),
)

# Number of leading catalog entries emitted per profile.
_PROFILE_SIZE: dict[DealProfile, int] = {
    DealProfile.FULL: len(DEAL_CATALOG),
    DealProfile.REDUCED: 2,
}


def deal_templates(profile: DealProfile = DealProfile.FULL) -> tuple[DealTemplate, ...]:
    """Return the catalog slice for *profile*."""
    return DEAL_CATALOG[: _PROFILE_SIZE[DealProfile(profile)]]


def _build_deal(parent: etree._Element, template: DealTemplate, start_date: str) -> None:
    deal = sub_element(parent, "Deal")
    terms = sub_element(deal, "DealTerms")
    sub_element(terms, "CommercialModelType", template.commercial_model)
    usage = sub_element(terms, "Usage")
    sub_element(usage, "UseType", template.use_type)
    sub_element(terms, "TerritoryCode", WORLDWIDE)
    validity = sub_element(terms, "ValidityPeriod")
    sub_element(validity, "StartDate", start_date)
    if template.wholesale_price is not None:
        price = sub_element(terms, "PriceInformation")
        sub_element(
            price,
            "BulkOrderWholesalePricePerUnit",
            template.wholesale_price,
            CurrencyCode=template.currency,
        )


def build_deal_list(
    parent: etree._Element,
    release: Release,
    profile: DealProfile = DealProfile.FULL,
) -> etree._Element:
    """Append ``DealList`` with one ``ReleaseDeal`` covering *release*."""
    deal_list = sub_element(parent, "DealList")
    release_deal = sub_element(deal_list, "ReleaseDeal")
    sub_element(release_deal, "DealReleaseReference", release_reference(release))

    start_date = format_release_date(release.release_date)
    for template in deal_templates(profile):
        _build_deal(release_deal, template, start_date)
    return deal_list
