"""pytest-benchmark configuration for pluralengine benchmarks.

Python 3.13+.
"""

from __future__ import annotations


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add pluralengine metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "pluralengine"
    output_json["python_version"] = "3.13+"
