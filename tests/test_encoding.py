import json

import pytest

from primeshare import Share, ShareFormatError, join, split
from primeshare.encoding import (
    dump_shares,
    format_secret,
    load_shares,
    parse_secret,
    share_from_dict,
    share_to_dict,
)
from primeshare.field import MERSENNE_3217


def test_share_dict_uses_decimal_x_and_hex_y():
    assert share_to_dict(Share(3, 255)) == {"x": "3", "y": "0xff"}
    assert share_from_dict({"x": "3", "y": "0xff"}) == Share(3, 255)
    assert share_from_dict({"x": 3, "y": "FF"}) == Share(3, 255)


def test_document_preserves_full_precision():
    secret = parse_secret("0xe9873d79c6d87dc0fb6a5778633389f4453213303da61f20bd67fc233aa33262")
    shares = split(secret, 5, 3, MERSENNE_3217)
    text = dump_shares(shares, MERSENNE_3217)
    assert json.loads(text)["modulus"] == "mersenne-3217"
    loaded, modulus = load_shares(text)
    assert loaded == shares
    assert modulus == MERSENNE_3217
    assert join(loaded[2:], modulus) == secret


def test_bare_list_has_no_modulus():
    loaded, modulus = load_shares('[{"x": "1", "y": "0x2"}]')
    assert loaded == [Share(1, 2)]
    assert modulus is None


def test_custom_modulus_written_as_hex():
    text = dump_shares([Share(1, 2)], 101, indent=None)
    assert '"modulus": "0x65"' in text
    assert load_shares(text)[1] == 101


@pytest.mark.parametrize(
    "text",
    ["not json", '{"shares": 5}', '[{"x": "1"}]', '[{"x": "one", "y": "0x1"}]', '[{"x": "1", "y": "zz"}]', "[3]"],
)
def test_malformed_documents(text):
    with pytest.raises(ShareFormatError):
        load_shares(text)


def test_parse_and_format_secret():
    assert parse_secret("0xABC") == 0xABC
    assert parse_secret(" 2748 ") == 2748
    assert parse_secret("1_000") == 1000
    assert format_secret(2748) == "0xabc"
    with pytest.raises(ShareFormatError):
        parse_secret("0xnope")
