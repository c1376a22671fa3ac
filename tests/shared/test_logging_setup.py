"""Tests for logging helpers."""

import logging
from unittest.mock import patch

from maptiler_cloud.shared.logging_setup import mask_api_key, setup_logging


class TestMaskApiKey:
    """Tests for mask_api_key."""

    def test_keeps_prefix(self):
        assert mask_api_key('abcdefgh') == 'abcd****'

    def test_short_key_fully_masked(self):
        assert mask_api_key('abc') == '***'
        assert mask_api_key('abcd') == '****'

    def test_empty(self):
        assert mask_api_key('') == ''


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_passed_to_basic_config(self):
        with patch('maptiler_cloud.shared.logging_setup.logging.basicConfig') as basic:
            setup_logging('debug')
        assert basic.call_args.kwargs['level'] == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        with patch('maptiler_cloud.shared.logging_setup.logging.basicConfig') as basic:
            setup_logging('chatty')
        assert basic.call_args.kwargs['level'] == logging.INFO

    def test_aiohttp_quietened(self):
        with patch('maptiler_cloud.shared.logging_setup.logging.basicConfig'):
            setup_logging('DEBUG')
        assert logging.getLogger('aiohttp').level == logging.WARNING
