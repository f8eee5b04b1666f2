"""Tests for dates embedded in article URLs."""

from datetime import date

import pytest

from pubdate.tools.parsing import parse_date
from pubdate.tools.url import extract_from_url

CNN = "http://edition.cnn.com/2015/11/28/opinions/sutter-cop21-paris-preview-two-degrees/index.html"


class TestExtractFromUrl:
    def test_slash_delimited_date(self):
        assert extract_from_url(CNN) == "/2015/11/28/"

    def test_empty_url(self):
        assert extract_from_url("") is None

    def test_url_without_date(self):
        assert extract_from_url("http://www.bbc.com/news/world-middle-east-39298218") is None
        assert extract_from_url("http://theklog.co/type-of-water-to-wash-face-with/") is None

    def test_leftmost_match_wins(self):
        url = "http://example.com/2016/01/02/archive/2017/05/06/"
        assert extract_from_url(url) == "/2016/01/02/"

    def test_month_name_segment(self):
        url = "https://www.theguardian.com/world/2015/nov/30/paris-climate-talks"
        assert extract_from_url(url) == "/2015/nov/30/"

    def test_dash_separators_kept_verbatim(self):
        url = "https://example.com/news/2017-03-16-some-title"
        assert extract_from_url(url) == "/2017-03-16-"

    def test_year_out_of_range(self):
        assert extract_from_url("https://example.com/1850/11/28/story") is None


class TestUrlCandidatesParse:
    @pytest.mark.parametrize(
        "url,expected",
        [
            (CNN, date(2015, 11, 28)),
            ("https://www.nytimes.com/2017/03/15/style/meditation-studio.html", date(2017, 3, 15)),
            ("https://example.com/blog/2014/31/12/new-year/", date(2014, 12, 31)),
        ],
    )
    def test_numeric_fields_in_order(self, url, expected):
        assert parse_date(extract_from_url(url)) == expected
