#!/usr/bin/env python3
"""
Test loading and merging TOML configuration.
"""

import logging

from devutils.shared import load_config

BASE = """
[general]
title = "devutils"

[logging]
level = "warning"

[paths]
logs = "logs"
output = "output"

[network]
host = "127.0.0.1"
port = 8000
reload = false

[network.rate_limit]
timeout_period = 5
requests_per_second = 10
"""


def test_load_shared_config(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text(BASE)

    config = load_config(shared)
    assert config.general.title == "devutils"
    assert config.logging.level == logging.WARNING
    assert config.limits.max_file_size == 50 * 1024 * 1024
    assert config.cron.default_runs == 10
    assert config.network.rate_limit.requests_per_second == 10


def test_specific_config_overrides_tables(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text(BASE)
    specific = tmp_path / "local.toml"
    specific.write_text('[limits]\nmax_file_size = 1024\n\n[logging]\nlevel = "bogus"\n')

    config = load_config(shared, specific)
    assert config.limits.max_file_size == 1024
    assert config.limits.max_encode_chars == 10_000_000
    assert config.logging.level == logging.INFO


def test_repository_config_loads():
    config = load_config()
    assert config.network.port == 8000
    assert config.uuid.max_count == 1000
