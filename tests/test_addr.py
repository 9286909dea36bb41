import pytest
from pydantic import ValidationError

from macipr.addr import add, decrement, increment, parse_ipv4, parse_ipv6, parse_mac, parse_number, render, render_number
from macipr.core.errors import InvalidIPv4, InvalidIPv6, InvalidMac, InvalidNumberArgument
from macipr.core.models import AddressKind, AddressValue, DirectiveKind, PadChar


def test_parse_mac():
    assert parse_mac("00:11:22:33:44:55").value == 0x001122334455
    assert parse_mac("aa:bb:cc:dd:ee:ff").value == 0xAABBCCDDEEFF
    assert parse_mac("AA:BB:CC:DD:EE:FF").value == 0xAABBCCDDEEFF


def test_parse_mac_integer():
    assert parse_mac("16").value == 0x10
    assert parse_mac("0x10").value == 0x10
    assert parse_mac(str(2**48 + 5)).value == 5


def test_parse_mac_err():
    for text in ["00:11:22:33:44:5", "aa:bb:cc:dd:ee:0ff", "aa:bb:cc:dd:ee:fg", "not-a-mac", "", "0xg"]:
        with pytest.raises(InvalidMac):
            parse_mac(text)


def test_render_mac():
    assert render(AddressValue(kind=AddressKind.MAC, value=0x000102030405)) == "00:01:02:03:04:05"
    assert render(parse_mac("AA:BB:CC:DD:EE:FF")) == "aa:bb:cc:dd:ee:ff"


def test_parse_ipv4():
    assert parse_ipv4("192.168.1.0").value == 0xC0A80100
    assert parse_ipv4("0").value == 0


def test_parse_ipv4_integer_wraps():
    addr = parse_ipv4("180000000")
    assert addr.value == 180000000 % 2**32
    assert render(addr) == "10.186.149.0"
    assert render(parse_ipv4(str(2**32 + 1))) == "0.0.0.1"


def test_parse_ipv4_err():
    for text in ["256.0.0.1", "1.2.3", "1.2.3.4.5", "a.b.c.d", "::1", ""]:
        with pytest.raises(InvalidIPv4):
            parse_ipv4(text)


def test_parse_ipv6():
    assert parse_ipv6("::").value == 0
    assert parse_ipv6("fe80::1").value == (0xFE80 << 112) | 1
    assert parse_ipv6("ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff").value == 2**128 - 1


def test_parse_ipv6_integer():
    assert render(parse_ipv6("100000")) == "::1:86a0"
    assert parse_ipv6("340282366920938463463374607431768211455").value == 2**128 - 1
    assert parse_ipv6("340282366920938463463374607431768211456").value == 0


def test_parse_ipv6_err():
    for text in ["::0::1", "::10000", "::fgff", "ff801", "fe80::1%eth0", "1.2.3.4", ""]:
        with pytest.raises(InvalidIPv6):
            parse_ipv6(text)


def test_render_ipv6():
    assert render(parse_ipv6("2001:0db8:0000:0000:0000:0000:0000:0001")) == "2001:db8::1"
    assert render(parse_ipv6("2001:db8:0:1:0:0:0:1")) == "2001:db8:0:1::1"
    assert render(parse_ipv6("::1"), DirectiveKind.IPV6_FULL) == "0000:0000:0000:0000:0000:0000:0000:0001"
    assert render(parse_ipv6("2001:DB8::A"), DirectiveKind.IPV6_FULL) == "2001:0db8:0000:0000:0000:0000:0000:000a"


def test_parse_number():
    assert parse_number("123").value == 123
    assert parse_number(str(2**64)).value == 0
    with pytest.raises(InvalidNumberArgument):
        parse_number("12a")


def test_round_trip():
    for text in ["00:00:00:00:00:00", "02:42:ac:11:00:02", "ff:ff:ff:ff:ff:ff"]:
        assert render(parse_mac(text)) == text
    for text in ["0.0.0.0", "10.186.149.0", "255.255.255.255"]:
        assert render(parse_ipv4(text)) == text
    for text in ["::", "::1", "fe80::1:2", "2001:db8:0:1::1", "1:2:3:4:5:6:7:8"]:
        assert render(parse_ipv6(text)) == text
    full = "2001:0db8:0000:0000:0000:ff00:0042:8329"
    assert render(parse_ipv6(full), DirectiveKind.IPV6_FULL) == full


def test_render_number():
    assert render_number(123, pad_width=5, pad_char=PadChar.SPACE) == "  123"
    assert render_number(45, pad_width=5, pad_char=PadChar.ZERO) == "00045"
    assert render_number(123456, pad_width=5, pad_char=PadChar.SPACE) == "123456"
    assert render_number(7) == "7"


def test_add_wraps():
    assert render(add(parse_ipv4("10.11.12.13"), 0x01010101)) == "11.12.13.14"
    assert render(increment(parse_ipv4("255.255.255.255"))) == "0.0.0.0"
    assert render(decrement(parse_ipv4("0.0.0.0"))) == "255.255.255.255"
    assert render(increment(parse_mac("ff:ff:ff:ff:ff:ff"))) == "00:00:00:00:00:00"
    assert render(add(parse_mac("09:0a:0b:0c:0d:0e"), 0x010101010101)) == "0a:0b:0c:0d:0e:0f"
    assert increment(parse_ipv6("ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff")).value == 0
    assert render(decrement(parse_ipv6("::"))) == "ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff"


def test_address_value_width():
    AddressValue(kind=AddressKind.IPV4, value=2**32 - 1)
    with pytest.raises(ValidationError):
        AddressValue(kind=AddressKind.IPV4, value=2**32)
    with pytest.raises(ValidationError):
        AddressValue(kind=AddressKind.MAC, value=-1)


def test_parse_long_decimal_wraps():
    text = "1" * 5000
    repunit = (10**5000 - 1) // 9
    assert parse_ipv4(text).value == repunit % 2**32
    assert parse_mac(text).value == repunit % 2**48
    assert parse_ipv6(text).value == repunit % 2**128
    assert parse_number(text).value == repunit % 2**64
