from mdtoc.parsing.utils import AnchorRegistry, slugify


def test_slugify_matches_github_rules():
    assert slugify("Title") == "title"
    assert slugify("Section 1") == "section-1"
    assert slugify("Subsection 1.1") == "subsection-11"
    assert slugify("Hello, World!") == "hello-world"
    assert slugify("snake_case name") == "snake_case-name"
    assert slugify("C++ & Go") == "c--go"
    assert slugify("pre-existing-hyphens") == "pre-existing-hyphens"


def test_slugify_keeps_unicode_letters():
    assert slugify("测试文档") == "测试文档"
    assert slugify("Café Menu") == "café-menu"
    assert slugify("Привет мир") == "привет-мир"


def test_anchor_registry_numbers_repeats():
    registry = AnchorRegistry()

    anchors = [registry.assign(text) for text in ["Section", "Section", "Other", "Section"]]

    assert anchors == ["section", "section-1", "other", "section-2"]


def test_anchor_registry_counts_per_slug_not_per_text():
    registry = AnchorRegistry()

    assert registry.assign("Hello World") == "hello-world"
    assert registry.assign("hello world!") == "hello-world-1"
