import os
import sys

import pytest

# Flat layout: make the project root importable without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from titles import analyze_title


@pytest.fixture
def pet_title():
    return analyze_title("Cat Dog")


@pytest.fixture
def engine_title():
    return analyze_title("Distributed Consensus Engine")


@pytest.fixture
def cache_title():
    return analyze_title("Data Cache Engine")
