"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from file_browser.adapters.files.local_directory_lister import LocalDirectoryLister
from file_browser.adapters.files.local_file_accessor import LocalFileAccessor
from file_browser.config.settings import Settings, settings as default_settings
from file_browser.entities.RootContext import RootContext
from file_browser.ports.files.directory_lister_port import DirectoryListerPort
from file_browser.ports.files.file_accessor_port import FileAccessorPort
from file_browser.use_cases.files.browsing_service import BrowsingService
from file_browser.utils.path_resolver import PathResolver


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_root_context(self) -> RootContext:
        """
        Get the root context, creating the root directory on first use.

        Returns:
            RootContext built from settings
        """
        if "root_context" not in self._instances:
            root = RootContext.from_config(
                self._settings.root_path, self._settings.base_dir
            )
            self._logger.info(f"Serving files from {root}")
            self._instances["root_context"] = root
        return self._instances["root_context"]

    def get_path_resolver(self) -> PathResolver:
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = PathResolver(self.get_root_context())
        return self._instances["path_resolver"]

    def get_directory_lister(self) -> DirectoryListerPort:
        """
        Get directory lister adapter instance.

        Returns:
            DirectoryListerPort implementation
        """
        if "directory_lister" not in self._instances:
            self._instances["directory_lister"] = LocalDirectoryLister(
                self.get_path_resolver(), self._logger
            )
        return self._instances["directory_lister"]

    def get_file_accessor(self) -> FileAccessorPort:
        """
        Get file accessor adapter instance.

        Returns:
            FileAccessorPort implementation
        """
        if "file_accessor" not in self._instances:
            self._instances["file_accessor"] = LocalFileAccessor(
                self.get_path_resolver(), self._logger
            )
        return self._instances["file_accessor"]

    def get_browsing_service(self) -> BrowsingService:
        """
        Get browsing service with injected dependencies.

        Returns:
            Configured BrowsingService
        """
        if "browsing_service" not in self._instances:
            self._instances["browsing_service"] = BrowsingService(
                self.get_directory_lister(), self.get_file_accessor()
            )
        return self._instances["browsing_service"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
