"""
Tests for warranty card date extraction.
"""

import pytest

from watch_quotes.pipeline.warranty import DATE_RULES, extract_warranty_date, has_warranty_keyword


class TestKeywordGate:
    """Dates are only returned when a warranty card is mentioned."""

    def test_keyword_present(self):
        assert extract_warranty_date('保卡 2023-01-15') == '2023-01-15'

    def test_keyword_absent(self):
        assert extract_warranty_date('Just a date 2023-01-15') is None

    @pytest.mark.parametrize('text', ['保卡', '保修卡', 'WARRANTY', 'Card Date', '卡日期', 'guarantee'])
    def test_keywords_case_insensitive(self, text):
        assert has_warranty_keyword(text)

    def test_keyword_without_date(self):
        assert extract_warranty_date('full set with warranty card') is None


class TestDateShapes:
    """Date rules in priority order, returned unnormalized."""

    def test_rule_order(self):
        assert [rule.name for rule in DATE_RULES] == ['iso_like', 'slash_dmy', 'chinese', 'month_name']

    def test_iso_like_with_dots(self):
        assert extract_warranty_date('warranty 2022.6.15') == '2022.6.15'

    def test_iso_like_with_slashes(self):
        assert extract_warranty_date('保卡2021/11/03') == '2021/11/03'

    def test_slash_date_kept_literal(self):
        assert extract_warranty_date('warranty card date: 01/15/2023') == '01/15/2023'

    def test_chinese_year_month(self):
        assert extract_warranty_date('保卡 2023年3月') == '2023年3月'

    def test_chinese_year_month_day(self):
        assert extract_warranty_date('保修卡日期 2023年3月8日') == '2023年3月8日'

    def test_month_name(self):
        assert extract_warranty_date('Warranty card Jan 2023') == 'Jan 2023'
        assert extract_warranty_date('warranty: September 2021') == 'September 2021'

    def test_iso_wins_over_month_name(self):
        assert extract_warranty_date('warranty Mar 2020, card 2020-03-01') == '2020-03-01'
