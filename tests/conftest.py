"""Shared pytest configuration for pluralengine.

Hypothesis profiles (the only place example counts are set):
    dev      500 examples, random seed; the default for local runs
    ci       50 examples, derandomized; picked when CI=true
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked ``fuzz`` are long-running robustness properties. They are
skipped unless selected with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from pluralengine.runtime import PluralRules

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]
_PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=500, phases=_ALL_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_ALL_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_ALL_PHASES, verbosity=Verbosity.verbose
)


def _selected_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_selected_profile())


@pytest.fixture(autouse=True)
def _isolated_engine_cache() -> None:
    """Start every test with an empty process-wide engine cache."""
    PluralRules.clear_cache()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running robustness properties (run with: pytest -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
