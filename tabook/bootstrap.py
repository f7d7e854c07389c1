"""Bootstrap: the single entry point collaborators use to obtain a core.

Invariants:
    - Logging configured from Settings before the first AddressBook exists
    - Returned AddressBook is empty, or an independent copy of the given snapshot

Design Decisions:
    - Plain function instead of a framework lifespan: the core has no server loop
"""

import logging

from tabook.config import Settings, get_settings
from tabook.core.address_book import AddressBook
from tabook.core.boundary_protocols import ReadOnlyAddressBook
from tabook.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_address_book(
    snapshot: ReadOnlyAddressBook | None = None,
    settings: Settings | None = None,
) -> AddressBook:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    book = AddressBook(snapshot)
    logger.info(
        "Address book ready",
        extra={"event": "bootstrap"},
    )
    return book
