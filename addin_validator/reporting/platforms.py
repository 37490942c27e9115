"""Platform summary renderer for passing manifests."""

from typing import Sequence

from rich.console import Console

from ..schemas import SupportedProduct
from .console import emit

PLATFORMS_INTRO = (
    "Based on the requirements specified in your manifest, your add-in can run on "
    "the following platforms; your add-in will be tested on these platforms when "
    "you submit it to the Office Store:"
)

AVAILABILITY_NOTE = (
    "Important: This analysis is based on the requirements specified in your "
    "manifest and does not account for any runtime JavaScript calls within your "
    "add-in. For information about which API sets and features are supported on "
    "each platform, see Office Add-in host and platform availability. "
    "(https://dev.office.com/add-in-availability)."
)

MOBILE_NOTE = (
    "*This does not include mobile apps. You can opt-in to support mobile apps "
    "when you submit your add-in."
)


def unique_platforms(products: Sequence[SupportedProduct]) -> list[str]:
    """Product titles without duplicates, in order of first appearance."""
    return list(dict.fromkeys(product.title for product in products))


def render_supported_products(
    console: Console, products: Sequence[SupportedProduct]
) -> None:
    """
    Render the platform availability summary.

    Callers only pass products from a passing report; nothing is printed
    when the list is empty.
    """
    if not products:
        return

    emit(console, PLATFORMS_INTRO)
    for title in unique_platforms(products):
        emit(console, f"  - {title}")
    emit(console, AVAILABILITY_NOTE)
    console.print()
    emit(console, MOBILE_NOTE)
