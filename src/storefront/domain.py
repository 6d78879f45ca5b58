"""Domain initialization and configuration.

A single domain hosts every aggregate touched by checkout so that order
creation, stock decrements, ledger entries and cart clearing commit in one
unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
