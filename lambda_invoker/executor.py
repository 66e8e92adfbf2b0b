import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .constants import DEFAULT_MAX_WORKERS, THREAD_NAME_PREFIX


# Shared thread pool for all invocations
class ExecutorManager:
    _executor: Optional[ThreadPoolExecutor] = None
    _lock = threading.Lock()

    @classmethod
    def get_executor(cls, max_workers: int = DEFAULT_MAX_WORKERS) -> ThreadPoolExecutor:
        # max_workers only applies to the first call; later callers share that pool
        if cls._executor is None:
            with cls._lock:
                if cls._executor is None:
                    cls._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=THREAD_NAME_PREFIX)
        return cls._executor
