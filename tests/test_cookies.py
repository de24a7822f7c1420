import time
from unittest import mock

import pytest

from siegekit.cookies import CookieJar

FUTURE = "expires=Fri, 01 Jan 2100 00:00:00 GMT"


@pytest.fixture
def jar(tmp_path):
    return CookieJar(tmp_path / "cookies.txt")


def test_header_for_domain_level_cookie(jar):
    assert jar.add("a=1", "www.example.com", owner=1)
    assert jar.header("www.example.com", owner=1) == "Cookie: a=1\r\n"


def test_header_is_per_owner(jar):
    jar.add("a=1", "www.example.com", owner=1)
    assert jar.header("www.example.com", owner=2) == ""


def test_header_joins_cookies(jar):
    jar.add("a=1", "www.example.com", owner=1)
    jar.add("b=2", "www.example.com", owner=1)
    assert jar.header("www.example.com", owner=1) == "Cookie: a=1;b=2\r\n"


def test_add_replaces_value_of_same_name(jar):
    jar.add("a=1", "www.example.com", owner=1)
    jar.add("A=2", "www.example.com", owner=1)
    assert len(jar) == 1
    assert jar.header("www.example.com", owner=1) == "Cookie: a=2\r\n"


def test_add_without_pair_is_rejected(jar):
    assert jar.add("garbage", "www.example.com", owner=1) is False
    assert len(jar) == 0


def test_header_ignores_other_domains(jar):
    jar.add("a=1; domain=.example.com", "www.example.com", owner=1)
    assert jar.header("www.example.org", owner=1) == ""


def test_delete(jar):
    jar.add("a=1", "www.example.com", owner=1)
    assert jar.delete("a", owner=1) is True
    assert jar.delete("a", owner=1) is False
    assert jar.header("www.example.com", owner=1) == ""


def test_delete_all_only_touches_owner(jar):
    jar.add("a=1", "www.example.com", owner=1)
    jar.add("b=2", "www.example.com", owner=1)
    jar.add("c=3", "www.example.com", owner=2)
    assert jar.delete_all(owner=1) is True
    assert len(jar) == 1
    assert jar.header("www.example.com", owner=2) == "Cookie: c=3\r\n"


def test_expired_cookie_dropped_from_header(jar):
    jar.add("a=1; " + FUTURE, "www.example.com", owner=1)
    with mock.patch.object(time, "time", return_value=1e10):
        assert jar.header("www.example.com", owner=1) == ""
    assert len(jar) == 0


def test_listing_mentions_cookie(jar):
    jar.add("a=1", "www.example.com", owner=7)
    text = jar.listing()
    assert text.startswith("7: NAME: a\n   VALUE: 1\n")


def test_save_and_load_round_trip(jar):
    jar.add("a=1; " + FUTURE, "www.example.com", owner=5)
    jar.add("s=1", "www.example.com", owner=5)
    assert jar.save() is True
    loaded = jar.load()
    assert list(loaded) == [0]
    assert len(loaded[0]) == 1
    assert loaded[0][0].startswith("a=1; domain=.example.com; path=/; expires=")


def test_saved_file_starts_with_header(jar):
    jar.save()
    assert jar.path.read_text().startswith("#\n# Siege cookies file.")


def test_load_groups_by_owner(tmp_path):
    path = tmp_path / "cookies.txt"
    path.write_text("# comment\n1 | x=1\n\n1 | y=2 # note\n2 | z=3\nnopipe\n")
    assert CookieJar(path).load() == {0: ["x=1", "y=2"], 1: ["z=3"]}


def test_load_missing_file(tmp_path):
    assert CookieJar(tmp_path / "absent.txt").load() == {}


def test_context_manager_saves_and_empties(tmp_path):
    path = tmp_path / "cookies.txt"
    with CookieJar(path) as jar:
        jar.add("a=1; " + FUTURE, "www.example.com", owner=3)
    assert len(jar) == 0
    assert "3 | a=1;" in path.read_text()


def test_default_owner_is_current_thread(jar):
    jar.add("a=1", "www.example.com")
    assert jar.header("www.example.com") == "Cookie: a=1\r\n"