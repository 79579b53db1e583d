"""
Tests for watch reference extraction.
"""

import pytest

from watch_quotes.pipeline.watch_model import MODEL_RULES, extract_watch_models


class TestReferenceFamilies:
    """Each family on its own."""

    def test_rule_order(self):
        assert [rule.name for rule in MODEL_RULES] == [
            'six_digit',
            'slash_reference',
            'five_digit_letters',
            'brand_prefixed',
        ]

    def test_six_digit_reference(self):
        assert extract_watch_models('I have a Rolex 116500LN for sale') == ['116500LN']

    def test_six_digit_reference_without_letters(self):
        assert extract_watch_models('124060 new') == ['124060']

    def test_slash_reference(self):
        assert '5711/1A' in extract_watch_models('Patek 5711/1A available')

    def test_slash_reference_with_suffix(self):
        assert extract_watch_models('5990/1A-001 full set') == ['5990/1A-001']

    def test_five_digit_letters(self):
        assert extract_watch_models('AP 15500ST blue') == ['15500ST']

    def test_brand_prefixed_token(self):
        assert extract_watch_models('Cartier WSSA0018 new') == ['WSSA0018']

    def test_chinese_brand_name(self):
        assert extract_watch_models('勞力士 116500LN 有貨') == ['116500LN']

    def test_brand_token_without_digits(self):
        assert extract_watch_models('Rolex DAYTONA $200k') == ['DAYTONA']

    def test_brand_token_cut_to_fifteen_characters(self):
        assert extract_watch_models('Omega SEAMASTER-300M-BLUE-EXTRA $5k') == ['SEAMASTER-300M-']

    def test_brand_token_too_short(self):
        assert extract_watch_models('Rolex new') == []

    def test_brand_inside_word_is_ignored(self):
        assert extract_watch_models('cheap A1234 deal') == []


class TestExtractWatchModels:
    """Union and deduplication across families."""

    def test_multiple_models(self):
        models = extract_watch_models('I have 116500LN and 126710BLRO')
        assert models == ['116500LN', '126710BLRO']

    def test_duplicates_collapsed(self):
        assert extract_watch_models('116500LN, 116500LN again, Rolex 116500LN') == ['116500LN']

    def test_prices_are_not_models(self):
        assert extract_watch_models('Rolex 116500LN, price $150000') == ['116500LN']

    @pytest.mark.parametrize(
        'text',
        ['HKD 150,000 only', '¥300000', 'US$ 120000', '€150000'],
    )
    def test_currency_amounts_masked(self, text):
        assert extract_watch_models(text) == []

    def test_currency_keyword_inside_word_not_masked(self):
        assert extract_watch_models('chk 126710BLRO $150k') == ['126710BLRO']

    def test_reference_after_amount_and_comma(self):
        assert extract_watch_models('$150000,126710BLRO') == ['126710BLRO']

    def test_lowercase_suffix_not_captured(self):
        """Family patterns are case-sensitive: 116500ln is not a reference token."""
        assert extract_watch_models('116500ln') == []

    def test_no_models(self):
        assert extract_watch_models('Hello, anyone selling?') == []
