"""Shared call-number fixtures for unit tests."""

import pytest


@pytest.fixture
def a() -> str:
    """Call number in class AM."""
    return "AM101 .S3533 L58 1987b"


@pytest.fixture
def b() -> str:
    """Call number in class HF."""
    return "HF5381 .S5145 2008"


@pytest.fixture
def c() -> str:
    """Call number in class PE with two cutters."""
    return "PE1479 .B87 O93 1993"


@pytest.fixture
def lower() -> str:
    """Lowercase form of fixture ``a``."""
    return "am101 .s3533 l58 1987b"


@pytest.fixture
def lower_short() -> str:
    """Less specific lowercase call number sharing the class and first cutter of ``a``."""
    return "am101 .s3533"


@pytest.fixture
def mixed_case() -> list[str]:
    """Call numbers whose letters differ only or partly in case, plus one unparsable."""
    return [
        "am101 .s3533",
        "AM101 .S3533 L58 1987b",
        "Am101 .S35",
        "aM101 .s35 l58",
        "hf5381 .s5145 2008",
        "HF5381 .S5145 2008",
        "HF5381 .s5145 2008B",
        "qa76 .S4",
        "QA76 .s35",
        "QA76.73 .p98 L88 2013",
        "pe1479 .b87 o93 1993",
        "!!! bad",
        "Lorem ipsum",
    ]
