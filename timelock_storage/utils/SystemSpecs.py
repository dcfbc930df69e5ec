"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes(num_jobs: int = 0) -> int:
        """
        Number of worker processes for batch store/prove runs.

        CPU cores divided by the PARALLELISM_DIVISOR environment variable
        (default 2), at least 1, and never more than num_jobs when given.

        Args:
            num_jobs: Number of independent jobs to run, 0 for no cap

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = EnvironmentManager.get_int(
            EnvironmentVariables.PARALLELISM_DIVISOR
        )
        workers = multiprocessing.cpu_count() // max(parallelism_divisor, 1) or 1
        if num_jobs > 0:
            return min(workers, num_jobs)
        return workers
