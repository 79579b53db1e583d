"""
Pytest configuration and shared fixtures.

Key fixtures:
- fixed_now: deterministic clock for header date fallbacks
- pipeline: TranscriptPipeline using fixed_now and the +852 country code
- dealer_chat: a small multi-seller export with English and Chinese quotes
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Load environment variables
from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from watch_quotes.pipeline.pipeline import TranscriptPipeline

FIXED_NOW = datetime(2024, 5, 1, 9, 0, 0)


@pytest.fixture
def fixed_now():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def pipeline(fixed_now) -> TranscriptPipeline:
    """Pipeline with a deterministic clock."""
    return TranscriptPipeline(country_code='+852', now=fixed_now)


@pytest.fixture
def dealer_chat() -> str:
    """Sample dealer group export."""
    return """
Messages and calls are end-to-end encrypted.
01/12/2023, 10:30 - Seller A: I have Rolex 116500LN, price $150000, 保卡 2022-06-15
01/12/2023, 10:35 - Buyer: Interested
01/12/2023, 10:40 - Seller B: Patek 5711/1A available, HKD 800,000
01/12/2023, 10:41 - +852 9123 4567: 勞力士 126710BLRO 15.5萬
full set, 保卡 2023年3月
""".strip()
