#!/usr/bin/env python3
"""
Test suite for the scoring core.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that need a live Redis
    python -m pytest tests/ -v -m "not redis"

    # Using unittest (unittest.TestCase modules only)
    python -m unittest discover tests -v

Redis Setup:
    Tests marked `redis` run against REDIS_URL when it is set, e.g.

    export TEST_REDIS_URL="redis://localhost:6379/15"
"""

import os

TEST_REDIS_URL = os.environ.get("TEST_REDIS_URL")
