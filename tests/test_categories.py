"""Tests for byte classification."""
import pytest

from hexc.categories import (
    ByteCategory, classify, listing_char,
    PUNCTUATION_BYTES, DIGIT_BYTES, NEWLINE_BYTES,
)


def test_every_byte_gets_exactly_one_category():
    buckets = {category: set() for category in ByteCategory}
    for byte in range(256):
        buckets[classify(byte)].add(byte)

    assert sum(len(b) for b in buckets.values()) == 256
    assert set().union(*buckets.values()) == set(range(256))


@pytest.mark.parametrize('char', list(".,?!:&'\"$#@-_"))
def test_punctuation(char):
    assert classify(ord(char)) is ByteCategory.PUNCTUATION


@pytest.mark.parametrize('char', list('0123456789'))
def test_digits(char):
    assert classify(ord(char)) is ByteCategory.DIGIT


@pytest.mark.parametrize('byte', [0x09, 0x0A, 0x0D])
def test_newline_controls(byte):
    assert classify(byte) is ByteCategory.NEWLINE_CONTROL


@pytest.mark.parametrize('byte', [0x00, 0x07, 0x0B, 0x0C, 0x1B, 0x1F, 0x20])
def test_other_controls(byte):
    assert classify(byte) is ByteCategory.OTHER_CONTROL


@pytest.mark.parametrize('byte', [ord('*'), ord('A'), ord('z'), ord('('), ord('~'), 0x7F, 0x80, 0xFF])
def test_printable(byte):
    assert classify(byte) is ByteCategory.PRINTABLE


def test_exclamation_is_punctuation_not_control_boundary():
    # 0x21 is the first non-control byte and also punctuation
    assert classify(0x21) is ByteCategory.PUNCTUATION
    assert classify(0x22) is ByteCategory.PUNCTUATION
    assert classify(0x25) is ByteCategory.PRINTABLE


def test_tables_are_immutable():
    for table in (PUNCTUATION_BYTES, DIGIT_BYTES, NEWLINE_BYTES):
        assert isinstance(table, frozenset)
    assert len(PUNCTUATION_BYTES) == 13
    assert len(DIGIT_BYTES) == 10


@pytest.mark.parametrize('byte', [-1, 256, 1000])
def test_out_of_range_rejected(byte):
    with pytest.raises(ValueError):
        classify(byte)


def test_listing_char():
    assert listing_char(ord('A')) == 'A'
    assert listing_char(ord('.')) == '.'
    assert listing_char(ord('7')) == '7'
    assert listing_char(0x0A) == ' '
    assert listing_char(0x00) == ' '
    assert listing_char(0x20) == ' '
    assert listing_char(0xE9) == 'é'
