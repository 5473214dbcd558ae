"""
Unified scan command.
Single entry point for running one scan from validated parameters; used by the CLI
and by library callers that only want the duplicate groups.
"""
import time
import logging
from typing import List, Optional, Tuple

from dupfinder.core.finder import DuplicateFinder
from dupfinder.core.models import DuplicateGroup, ScanParams, ScanStats

logger = logging.getLogger(__name__)


class ScanCommand:
    """
    Orchestrates one scan:
    1. Bootstrap the app directory (done by DuplicateFinder)
    2. Walk the root directory and fill the key index
    3. Collect duplicate groups and statistics

    Usage:
        params = ScanParams(root_dir="/photos", search_style=SearchStyle.BY_CONTENTS)
        groups, stats = ScanCommand().execute(params)
    """

    def __init__(self):
        self._finder: Optional[DuplicateFinder] = None

    def execute(self, params: ScanParams) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Run a scan with the given parameters.

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            DirectoryBootstrapFailure: If the app directory cannot be used
            InvalidSearchDirectory: If the root directory is missing or not a directory
            FileReadFailure: If a file cannot be read during a content scan
        """
        start_time = time.time()

        self._finder = DuplicateFinder(
            app_dir=params.app_dir,
            search_style=params.search_style,
            algorithm=params.algorithm,
            min_size=params.min_size_bytes,
            max_size=params.max_size_bytes,
            prefilter_by_size=params.prefilter_by_size,
        )
        self._finder.find_duplicate_files(params.root_dir)
        groups = list(self._finder.groups())

        stats = ScanStats()
        stats.files_scanned = self._finder.files_scanned
        stats.distinct_keys = len(self._finder.index)
        stats.groups_found = len(groups)
        stats.duplicate_files = sum(g.duplicate_count for g in groups)
        stats.total_time = time.time() - start_time

        logger.debug("Scan command finished: %r", stats)
        return groups, stats

    @property
    def finder(self) -> Optional[DuplicateFinder]:
        """Finder used by the last execution, for inspecting its index."""
        return self._finder
