"""
Shared fixtures for the Reflector client test suite.
"""
import logging

import pytest

from helpers import I128_VECTORS
from reflector_client.codec import CodecConfig, Int128Codec


@pytest.fixture
def codec():
    """Provide a codec with the default (range-checked) config."""
    return Int128Codec()


@pytest.fixture
def unchecked_codec():
    """Provide a codec that encodes values outside the i128 range."""
    return Int128Codec(CodecConfig(check_range=False))


@pytest.fixture
def i128_vectors():
    """Known-good (value, hi, lo) triples."""
    return list(I128_VECTORS)


@pytest.fixture
def restore_codec_logger():
    """Yield the codec logger and put its level back afterwards."""
    logger = logging.getLogger("reflector_client.codec.int128")
    level = logger.level
    yield logger
    logger.setLevel(level)
