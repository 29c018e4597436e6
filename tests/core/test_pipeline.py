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

import threading
from dataclasses import replace
from unittest.mock import patch

from addlicense.core import pipeline
from addlicense.core.pipeline import PipelineVerdict, run_pipeline
from addlicense.core.processor import ProcessingOutcome
from addlicense.core.walker import SkipPatternSet, compile_patterns


def test_verdict_records_outcomes():
    verdict = PipelineVerdict()
    verdict.record(ProcessingOutcome("a.go", modified=True))
    verdict.record(ProcessingOutcome("b.go"))
    assert verdict.ok
    assert verdict.exit_code == 0

    verdict.record(ProcessingOutcome("c.go", missing=True))
    verdict.record(ProcessingOutcome("d.go", error=OSError("boom")))
    assert not verdict.ok
    assert verdict.exit_code == 1
    assert verdict.processed == 4
    assert verdict.modified == 1
    assert verdict.missing == 1
    assert verdict.errors == 1
    assert sorted(verdict.failed_paths) == ["c.go", "d.go"]


def test_verdict_concurrent_records():
    verdict = PipelineVerdict()

    def contribute():
        for i in range(500):
            verdict.record(ProcessingOutcome(f"{i}.go", error=OSError() if i % 2 else None))

    threads = [threading.Thread(target=contribute) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert verdict.processed == 4000
    assert verdict.errors == 2000
    assert len(verdict.failed_paths) == 2000


def test_pipeline_mutate(source_tree, apache_config):
    outcomes = []
    verdict = run_pipeline([str(source_tree)], apache_config, reporter=outcomes.append)

    assert verdict.ok
    assert verdict.processed == 5
    # main.go, script.sh, vendor/lib.go; done.go already licensed, data.bin unsupported
    assert verdict.modified == 3
    assert len(outcomes) == 5
    assert (source_tree / "pkg" / "done.go").read_text() == "// Copyright 2020 Someone\nfunc main(){}\n"
    assert (source_tree / "data.bin").read_bytes() == b"\x00\x01\x02"
    assert (source_tree / "script.sh").read_text().startswith("#!/bin/bash\n\n# Copyright 2024 Acme Inc\n")


def test_pipeline_second_run_changes_nothing(source_tree, apache_config):
    run_pipeline([str(source_tree)], apache_config)
    before = {p: p.read_bytes() for p in source_tree.rglob("*") if p.is_file()}

    verdict = run_pipeline([str(source_tree)], apache_config)

    assert verdict.ok
    assert verdict.modified == 0
    assert {p: p.read_bytes() for p in source_tree.rglob("*") if p.is_file()} == before


def test_pipeline_check_mode(source_tree, check_config):
    config = replace(check_config, patterns=SkipPatternSet(dirs=compile_patterns(["vendor"])))
    before = {p: p.read_bytes() for p in source_tree.rglob("*") if p.is_file()}

    verdict = run_pipeline([str(source_tree)], config)

    assert not verdict.ok
    assert sorted(verdict.failed_paths) == sorted([
        str(source_tree / "pkg" / "main.go"),
        str(source_tree / "script.sh"),
    ])
    assert {p: p.read_bytes() for p in source_tree.rglob("*") if p.is_file()} == before


def test_pipeline_multiple_roots(source_tree, apache_config):
    roots = [str(source_tree / "pkg"), str(source_tree / "script.sh")]
    verdict = run_pipeline(roots, apache_config)
    assert verdict.processed == 3
    assert verdict.modified == 2
    assert (source_tree / "vendor" / "lib.go").read_text() == "package lib\n"


def test_pipeline_failure_does_not_stop_other_files(source_tree, apache_config):
    real = pipeline.process_file

    def flaky(descriptor, config):
        if descriptor.path.endswith("main.go"):
            raise RuntimeError("unexpected")
        return real(descriptor, config)

    with patch("addlicense.core.pipeline.process_file", side_effect=flaky):
        verdict = run_pipeline([str(source_tree)], apache_config)

    assert not verdict.ok
    assert verdict.failed_paths == [str(source_tree / "pkg" / "main.go")]
    assert verdict.modified == 2


def test_pipeline_backpressure_with_small_queue(tmp_path, apache_config):
    for i in range(50):
        (tmp_path / f"f{i}.py").write_text("x = 1\n")

    with patch.object(pipeline, "QUEUE_SIZE", 2):
        verdict = run_pipeline([str(tmp_path)], replace(apache_config, workers=1))

    assert verdict.processed == 50
    assert verdict.modified == 50


def test_pipeline_reporter_failure_is_contained(source_tree, apache_config):
    def broken(outcome):
        raise ValueError("reporter broke")

    verdict = run_pipeline([str(source_tree)], apache_config, reporter=broken)
    assert verdict.processed == 5
    assert verdict.ok
