import pytest

from textcraft.text import camel_case, kebab_case, snake_case, to_slug


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Café Déjà Vu!", "cafe-deja-vu"),
        ("  --Hello, World--  ", "hello-world"),
        ("Version 2.0 Release", "version-2-0-release"),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_to_slug(text, expected):
    assert to_slug(text) == expected


def test_kebab_case_matches_slug():
    assert kebab_case("Hello World Foo") == "hello-world-foo"
    assert kebab_case("Café Déjà Vu!") == to_slug("Café Déjà Vu!")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World-Foo", "hello_world_foo"),
        ("Crème Brûlée", "creme_brulee"),
        ("__already_snake__", "already_snake"),
    ],
)
def test_snake_case(text, expected):
    assert snake_case(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world_foo", "helloWorldFoo"),
        ("HELLO World", "helloWorld"),
        ("Café au lait", "cafeAuLait"),
        ("version 2 beta", "version2Beta"),
        ("  --leading separators", "leadingSeparators"),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_camel_case(text, expected):
    assert camel_case(text) == expected
