import pytest

from cliparts.errors import BadNameString
from cliparts.split import (
    get_default_flag_values,
    get_names,
    split_long,
    split_names,
    split_short,
    split_windows_style,
)


def test_split_short():
    assert split_short("-a") == ("a", "")
    assert split_short("-i4") == ("i", "4")
    assert split_short("-zzyzyz") == ("z", "zyzyz")


@pytest.mark.parametrize("arg", ["a", "-", "--a", "-=x", ""])
def test_split_short_rejects(arg):
    assert split_short(arg) is None


def test_split_long():
    assert split_long("--string=mystring") == ("string", "mystring")
    assert split_long("--count") == ("count", "")
    assert split_long("--a=b=c") == ("a", "b=c")


@pytest.mark.parametrize("arg", ["-c", "--", "--=x", "---x", "plain"])
def test_split_long_rejects(arg):
    assert split_long(arg) is None


def test_split_windows_style():
    assert split_windows_style("/string:mystring") == ("string", "mystring")
    assert split_windows_style("/c") == ("c", "")
    assert split_windows_style("-c") is None
    assert split_windows_style("/") is None


def test_split_names_trims():
    assert split_names("-a, --all ,  pos") == ["-a", "--all", "pos"]
    assert split_names("single") == ["single"]


def test_get_default_flag_values_braces():
    assert get_default_flag_values("-c{v1},--count{v2}") == [("c", "v1"), ("count", "v2")]


def test_get_default_flag_values_negation():
    assert get_default_flag_values("-c,--count,--ncount{false}") == [("ncount", "false")]
    assert get_default_flag_values("-c,--count{true},!--ncount") == [
        ("count", "true"),
        ("ncount", "false"),
    ]


def test_get_default_flag_values_none():
    assert get_default_flag_values("-c,--count") == []


def test_get_names_sorts_kinds():
    shorts, longs, pos = get_names(["-c", "--count", "pos", ""])
    assert shorts == ["c"]
    assert longs == ["count"]
    assert pos == "pos"


def test_get_names_number_short():
    shorts, longs, pos = get_names(split_names("-1,-7"))
    assert shorts == ["1", "7"]
    assert longs == []
    assert pos == ""


@pytest.mark.parametrize("names", [["-ab"], ["-"], ["--"], ["---x"], ["one", "two"], ["--a b"]])
def test_get_names_errors(names):
    with pytest.raises(BadNameString):
        get_names(names)


def test_get_names_bad_long_message():
    with pytest.raises(BadNameString) as info:
        get_names(["--a b"])
    assert str(info.value) == "Bad long name: a b"