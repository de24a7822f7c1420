from siegekit.creds import Credentials, Scheme, parse_credentials


def test_full_entry():
    creds = parse_credentials(Scheme.HTTP, "user:password:myrealm")
    assert creds.username == "user"
    assert creds.password == "password"
    assert creds.realm == "myrealm"
    assert creds.scheme is Scheme.HTTP


def test_realm_defaults_to_any():
    creds = parse_credentials(Scheme.PROXY, "user:password")
    assert creds.realm == "any"
    assert creds.scheme is Scheme.PROXY


def test_trailing_colon_gives_empty_realm():
    creds = parse_credentials(Scheme.HTTP, "user:password:")
    assert creds.realm == ""


def test_realm_keeps_extra_colons():
    creds = parse_credentials(Scheme.FTP, "user:password:a:b")
    assert creds.realm == "a:b"
    assert creds.password == "password"


def test_username_only():
    creds = parse_credentials(Scheme.HTTP, "user")
    assert (creds.username, creds.password, creds.realm) == ("user", "", "any")


def test_equality_of_parsed_entries():
    password = "password"
    expected = Credentials(Scheme.HTTPS, "user", password, "any")
    assert parse_credentials(Scheme.HTTPS, "user:password") == expected