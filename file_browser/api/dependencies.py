"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from file_browser.container import container
from file_browser.use_cases.files.browsing_service import BrowsingService


def get_browsing_service() -> BrowsingService:
    """
    Get the browsing service from the container.

    Returns:
        BrowsingService: The browsing service instance
    """
    return container.get_browsing_service()
