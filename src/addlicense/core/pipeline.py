# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Walk the roots and process every file on a pool of worker threads.

The walker runs on the calling thread and feeds a bounded queue; once the
queue is full the walk blocks until a worker frees a slot. Workers stop when
they receive the sentinel pushed after the last root has been walked, and the
verdict is only read after every worker has returned.
"""

import queue
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Iterable, List, Optional

from addlicense.core.config import LicenseConfig
from addlicense.core.logger import get_logger
from addlicense.core.processor import ProcessingOutcome, process_file
from addlicense.core.walker import walk_all

logger = get_logger("pipeline")

QUEUE_SIZE = 1000

_STOP = object()

Reporter = Callable[[ProcessingOutcome], None]


class PipelineVerdict:
    """Thread-safe tally of every outcome in a run."""

    def __init__(self):
        self._lock = threading.Lock()
        self.processed = 0
        self.modified = 0
        self.missing = 0
        self.errors = 0
        self.failed_paths: List[str] = []

    def record(self, outcome: ProcessingOutcome) -> None:
        with self._lock:
            self.processed += 1
            if outcome.modified:
                self.modified += 1
            if outcome.missing:
                self.missing += 1
            if outcome.error is not None:
                self.errors += 1
            if outcome.failed:
                self.failed_paths.append(outcome.path)

    @property
    def ok(self) -> bool:
        with self._lock:
            return not self.failed_paths

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def _worker(
    files: "queue.Queue",
    config: LicenseConfig,
    verdict: PipelineVerdict,
    reporter: Optional[Reporter],
) -> None:
    while True:
        item = files.get()
        if item is _STOP:
            return
        try:
            outcome = process_file(item, config)
        except Exception as e:
            logger.exception(f"Unexpected failure processing {item.path}")
            outcome = ProcessingOutcome(item.path, error=e)
        verdict.record(outcome)
        if reporter is not None:
            try:
                reporter(outcome)
            except Exception:
                logger.exception(f"Reporter failed for {item.path}")


def run_pipeline(
    roots: Iterable[str],
    config: LicenseConfig,
    reporter: Optional[Reporter] = None,
) -> PipelineVerdict:
    """
    Process every file under ``roots`` and return the aggregated verdict.

    No failure cancels other work: all files are processed before this
    returns.
    """
    verdict = PipelineVerdict()
    files: "queue.Queue" = queue.Queue(maxsize=QUEUE_SIZE)

    logger.info(f"Starting pipeline with {config.workers} worker(s)")
    with ThreadPoolExecutor(max_workers=config.workers, thread_name_prefix="addlicense") as executor:
        workers = [
            executor.submit(_worker, files, config, verdict, reporter)
            for _ in range(config.workers)
        ]
        try:
            for descriptor in walk_all(roots, config.patterns):
                files.put(descriptor)
        finally:
            for _ in workers:
                files.put(_STOP)
        wait(workers)

    for future in workers:
        # Worker loops only end on the sentinel; surface anything else.
        future.result()

    logger.info(
        f"Processed {verdict.processed} file(s): {verdict.modified} modified, "
        f"{verdict.missing} missing a header, {verdict.errors} error(s)"
    )
    return verdict
