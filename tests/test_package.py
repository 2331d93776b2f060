import textcraft


def test_top_level_exports():
    for name in textcraft.__all__:
        assert hasattr(textcraft, name), name


def test_examples_through_top_level():
    assert textcraft.to_slug("Café Déjà Vu!") == "cafe-deja-vu"
    assert textcraft.pad("hi", 7, "*") == "**hi***"
    assert textcraft.wrap("one two three four", 7) == "one two\nthree\nfour"
    assert textcraft.stylize("Sao", "weird") == "Säö"
    assert textcraft.STYLES == ("upper", "lower", "leet", "weird")
