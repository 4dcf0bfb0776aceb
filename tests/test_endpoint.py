import pytest

from ftping.endpoint import Endpoint, parse_endpoint, verbose_banner


def test_host_only():
    assert parse_endpoint(["example.com"]) == Endpoint("example.com", False, 0)


def test_verbose_host_and_port():
    assert parse_endpoint(["-v", "example.com", "8080"]) == Endpoint("example.com", True, 8080)


def test_non_numeric_port_reads_as_zero():
    assert parse_endpoint(["example.com", "abc"]).port == 0


def test_only_exact_flag_counts():
    endpoint = parse_endpoint(["-vv", "example.com"])
    assert endpoint.flag is False
    assert endpoint.ip == "-vv"


@pytest.mark.parametrize("args", [[], ["-v"]])
def test_missing_host_raises(args):
    with pytest.raises(ValueError):
        parse_endpoint(args)


def test_verbose_banner_names_host():
    banner = verbose_banner(Endpoint("example.com", True))
    assert banner.startswith("ping: sock4.fd: 3 (socktype: SOCK_RAW)")
    assert banner.endswith("ai->ai_canonname: 'example.com'\n")