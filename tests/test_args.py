import pytest

from ftping.args import USAGE, UsageError, read_args


def test_single_host():
    assert read_args(["google.com"]) == ["google.com"]


def test_arguments_with_spaces_are_split():
    assert read_args(["-v", "a b", "", "c"]) == ["-v", "a", "b", "c"]


def test_no_arguments_is_usage_error():
    with pytest.raises(UsageError) as info:
        read_args([])
    assert str(info.value) == USAGE


def test_blank_arguments_is_usage_error():
    with pytest.raises(UsageError):
        read_args(["", "   "])