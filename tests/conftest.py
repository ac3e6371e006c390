import pytest

HEADER = ["timestamp", "original", "statuscode", "mimetype"]


@pytest.fixture
def raw_rows():
    return [
        HEADER,
        ["20200101000000", "http://example.com", "200", "text/html"],
        ["20210601120000", "http://example.com", "404", "text/html"],
    ]


@pytest.fixture
def mixed_rows():
    return [
        HEADER,
        ["20150312080000", "http://example.com/", "200", "text/html"],
        ["20180704101500", "http://example.com/About", "301", "text/html"],
        ["20180704101500", "http://example.com/about", "200", "text/html"],
        ["20190101000000", "http://example.com/contact", "404", "text/html"],
        ["20221231235959", "http://example.com/", "200", "text/html"],
        ["20221231235959", "http://example.com/feed", "-", "warc/revisit"],
    ]
