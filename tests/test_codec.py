import dataclasses

import pytest

from ipnav.exceptions import (
    ErrorKind,
    InvalidAddress,
    InvalidBinary,
    InvalidCIDR,
    InvalidMask,
    OutOfRange,
)
from ipnav.ip.codec import (
    IPv4Address,
    SubnetMask,
    cidr_to_mask,
    from_binary_string,
    from_integer,
    mask_to_cidr,
    parse_address,
    parse_cidr,
    parse_integer,
    parse_mask,
    parse_prefix,
    to_binary_string,
    to_hex,
    to_integer,
)


class TestParseAddress:
    def test_valid(self):
        addr = parse_address("192.168.1.1")
        assert addr.value == 3232235777
        assert addr.octets == (192, 168, 1, 1)
        assert str(addr) == "192.168.1.1"

    def test_bounds(self):
        assert parse_address("0.0.0.0").value == 0
        assert parse_address("255.255.255.255").value == 4294967295

    def test_leading_zeros_are_decimal(self):
        assert str(parse_address("010.001.000.009")) == "10.1.0.9"

    @pytest.mark.parametrize("text", [
        "",
        "1.2.3",
        "1.2.3.4.5",
        "256.0.0.1",
        "1.2.3.256",
        "a.b.c.d",
        "-1.0.0.0",
        "+1.0.0.0",
        " 1.2.3.4",
        "1.2.3.4 ",
        "1.2. 3.4",
        "1.2.3.0x1",
        "1.2.3.1e0",
        "1.2.3.4.",
        "1..3.4",
        "1.2.3.4/24",
        "0001.2.3.4",
        "1.2.3.٣",
    ])
    def test_invalid(self, text):
        with pytest.raises(InvalidAddress) as exc_info:
            parse_address(text)
        assert exc_info.value.kind is ErrorKind.INVALID_ADDRESS
        assert exc_info.value.value == text

    def test_non_string(self):
        with pytest.raises(InvalidAddress):
            parse_address(16843009)


class TestIPv4Address:
    def test_numeric_ordering(self):
        assert parse_address("10.0.0.1") > parse_address("9.255.255.255")
        assert parse_address("1.2.3.4") < parse_address("1.2.3.10")
        assert sorted([parse_address("10.0.0.10"), parse_address("10.0.0.9")])[0].value == 167772169

    def test_equality_and_hash(self):
        a = parse_address("172.16.0.1")
        b = IPv4Address(a.value)
        assert a == b
        assert len({a, b}) == 1

    def test_immutable(self):
        addr = parse_address("1.1.1.1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            addr.value = 0

    def test_repr_and_int(self):
        addr = parse_address("8.8.8.8")
        assert repr(addr) == "IPv4Address('8.8.8.8')"
        assert int(addr) == 134744072

    @pytest.mark.parametrize("value", [-1, 4294967296, True, "1"])
    def test_rejects_bad_values(self, value):
        with pytest.raises(OutOfRange):
            IPv4Address(value)


class TestParseMask:
    @pytest.mark.parametrize("text,prefix", [
        ("255.255.255.0", 24),
        ("255.255.255.255", 32),
        ("0.0.0.0", 0),
        ("255.255.240.0", 20),
        ("128.0.0.0", 1),
        ("255.255.255.254", 31),
    ])
    def test_valid(self, text, prefix):
        mask = parse_mask(text)
        assert isinstance(mask, SubnetMask)
        assert mask.prefix_length == prefix
        assert str(mask) == text

    @pytest.mark.parametrize("text", ["255.0.255.0", "255.255.255.1", "0.255.255.255", "254.255.255.0"])
    def test_non_contiguous(self, text):
        with pytest.raises(InvalidMask) as exc_info:
            parse_mask(text)
        assert exc_info.value.kind is ErrorKind.INVALID_MASK

    def test_malformed_is_mask_error(self):
        with pytest.raises(InvalidMask) as exc_info:
            parse_mask("255.255.255.256")
        assert isinstance(exc_info.value.__cause__, InvalidAddress)

    def test_host_mask(self):
        assert str(parse_mask("255.255.255.0").host_mask) == "0.0.0.255"
        assert str(parse_mask("0.0.0.0").host_mask) == "255.255.255.255"

    def test_constructor_checks_contiguity(self):
        with pytest.raises(InvalidMask):
            SubnetMask(0xFF00FF00)


class TestParseCIDR:
    def test_valid(self):
        address, prefix = parse_cidr("192.168.1.0/24")
        assert str(address) == "192.168.1.0"
        assert prefix == 24

    def test_bounds(self):
        assert parse_cidr("0.0.0.0/0")[1] == 0
        assert parse_cidr("10.1.2.3/32")[1] == 32

    @pytest.mark.parametrize("text", [
        "192.168.1.0",
        "192.168.1.0/",
        "192.168.1.0/33",
        "192.168.1.0/-1",
        "192.168.1.0/+8",
        "192.168.1.0/ 24",
        "192.168.1.0/24/1",
        "/24",
        "256.1.1.1/24",
        "192.168.1.0/abc",
    ])
    def test_invalid(self, text):
        with pytest.raises(InvalidCIDR) as exc_info:
            parse_cidr(text)
        assert exc_info.value.kind is ErrorKind.INVALID_CIDR


class TestIntegerConversion:
    def test_to_integer(self):
        assert to_integer("192.168.1.1") == 3232235777
        assert to_integer(parse_address("0.0.0.1")) == 1

    def test_from_integer(self):
        assert str(from_integer(3232235777)) == "192.168.1.1"
        assert str(from_integer(0)) == "0.0.0.0"
        assert str(from_integer(4294967295)) == "255.255.255.255"

    @pytest.mark.parametrize("value", [-1, 4294967296, 2 ** 40])
    def test_from_integer_out_of_range(self, value):
        with pytest.raises(OutOfRange) as exc_info:
            from_integer(value)
        assert exc_info.value.kind is ErrorKind.OUT_OF_RANGE

    @pytest.mark.parametrize("text", ["0.0.0.0", "10.20.30.40", "172.31.255.1", "255.255.255.255"])
    def test_round_trip(self, text):
        assert str(from_integer(to_integer(text))) == text

    def test_parse_integer(self):
        assert parse_integer("4294967295") == 4294967295
        assert parse_integer("0") == 0

    @pytest.mark.parametrize("text", ["4294967296", "-1", "abc", "", "1.5", "0x10", " 1"])
    def test_parse_integer_invalid(self, text):
        with pytest.raises(OutOfRange):
            parse_integer(text)

    def test_hex(self):
        assert to_hex("192.168.1.1") == "0xC0A80101"
        assert to_hex("0.0.0.0") == "0x0"


class TestBinaryConversion:
    def test_to_binary(self):
        assert to_binary_string("192.168.1.1") == "11000000.10101000.00000001.00000001"
        assert to_binary_string("10.0.0.1", " ") == "00001010 00000000 00000000 00000001"

    @pytest.mark.parametrize("text", [
        "11000000.10101000.00000001.00000001",
        "11000000 10101000 00000001 00000001",
        "11000000\t10101000  00000001.00000001",
    ])
    def test_from_binary_separators(self, text):
        assert str(from_binary_string(text)) == "192.168.1.1"

    @pytest.mark.parametrize("text", ["0.0.0.0", "1.2.3.4", "255.255.255.255", "100.64.7.200"])
    def test_round_trip(self, text):
        assert str(from_binary_string(to_binary_string(text))) == text

    @pytest.mark.parametrize("text", [
        "",
        "11000000.10101000.00000001",
        "11000000.10101000.00000001.00000001.00000000",
        "1100000.10101000.00000001.00000001",
        "110000000.10101000.00000001.00000001",
        "11000000.10101000.00000001.00000002",
        "11000000..10101000.00000001.00000001",
        " 11000000.10101000.00000001.00000001",
        "11000000101010000000000100000001",
        "11000000 10101000\u300000000001 00000001",
        "11000000\u00a010101000.00000001.00000001",
    ])
    def test_invalid(self, text):
        with pytest.raises(InvalidBinary) as exc_info:
            from_binary_string(text)
        assert exc_info.value.kind is ErrorKind.INVALID_BINARY


class TestPrefixConversion:
    def test_cidr_to_mask(self):
        assert str(cidr_to_mask(24)) == "255.255.255.0"
        assert str(cidr_to_mask(0)) == "0.0.0.0"
        assert str(cidr_to_mask(32)) == "255.255.255.255"
        assert str(cidr_to_mask(12)) == "255.240.0.0"

    @pytest.mark.parametrize("prefix", [-1, 33, 100, "24", True, 24.0])
    def test_cidr_to_mask_out_of_range(self, prefix):
        with pytest.raises(OutOfRange):
            cidr_to_mask(prefix)

    def test_round_trip_all_prefixes(self):
        for prefix in range(33):
            assert mask_to_cidr(cidr_to_mask(prefix)) == prefix

    def test_mask_round_trip(self):
        for prefix in range(33):
            mask = cidr_to_mask(prefix)
            assert cidr_to_mask(mask_to_cidr(mask)) == mask

    def test_mask_to_cidr_accepts_text_and_addresses(self):
        assert mask_to_cidr("255.255.0.0") == 16
        assert mask_to_cidr(parse_address("255.255.255.128")) == 25

    def test_mask_to_cidr_non_contiguous(self):
        with pytest.raises(InvalidMask):
            mask_to_cidr("255.0.255.0")

    def test_parse_prefix(self):
        assert parse_prefix("0") == 0
        assert parse_prefix("32") == 32

    @pytest.mark.parametrize("text", ["33", "-1", "", "x", "/24"])
    def test_parse_prefix_invalid(self, text):
        with pytest.raises(OutOfRange):
            parse_prefix(text)
