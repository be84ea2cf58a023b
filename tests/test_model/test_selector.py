"""Tests for the category ordering and the selector fragment store."""

from selectorkit.model import Category, SINGLETON_CATEGORIES, Selector


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


class TestCategoryOrder:
    def test_grammar_order(self):
        assert [c.value for c in Category] == [
            "element",
            "id",
            "class",
            "attribute",
            "pseudo-class",
            "pseudo-element",
        ]

    def test_positions(self):
        assert Category.ELEMENT.position == 0
        assert Category.PSEUDO_ELEMENT.position == 5

    def test_follows(self):
        assert Category.ID.follows(Category.ELEMENT)
        assert not Category.ELEMENT.follows(Category.ID)
        assert not Category.CLASS.follows(Category.CLASS)

    def test_singletons(self):
        assert SINGLETON_CATEGORIES == {
            Category.ELEMENT,
            Category.ID,
            Category.PSEUDO_ELEMENT,
        }
        assert Category.ID.is_singleton
        assert not Category.CLASS.is_singleton


# ---------------------------------------------------------------------------
# Selector state
# ---------------------------------------------------------------------------


class TestSelectorState:
    def test_new_selector_is_empty(self):
        sel = Selector()
        assert sel.is_empty
        assert sel.populated() == []

    def test_populated_in_grammar_order(self):
        sel = Selector()
        sel.add(Category.PSEUDO_CLASS, "hover")
        sel.add(Category.ELEMENT, "a")
        assert sel.populated() == [Category.ELEMENT, Category.PSEUDO_CLASS]

    def test_empty_singleton_is_unset(self):
        sel = Selector()
        sel.add(Category.ID, "")
        sel.add(Category.PSEUDO_ELEMENT, "")
        assert not sel.has(Category.ID)
        assert not sel.has(Category.PSEUDO_ELEMENT)
        assert sel.is_empty
        assert sel.render() == ""

    def test_reset(self):
        sel = Selector(element="a", id="x", classes=["b"], attrs=["c"],
                       pseudo_classes=["d"], pseudo_element="e")
        sel.reset()
        assert sel == Selector()

    def test_add_appends_repeating_categories(self):
        sel = Selector()
        sel.add(Category.CLASS, "x")
        sel.add(Category.CLASS, "x")
        assert sel.classes == ["x", "x"]


class TestSelectorRender:
    def test_empty(self):
        assert Selector().render() == ""

    def test_full(self):
        sel = Selector(
            element="a",
            id="x",
            classes=["b", "c"],
            attrs=['href$=".png"', "target"],
            pseudo_classes=["focus", "hover"],
            pseudo_element="before",
        )
        assert sel.render() == 'a#x.b.c[href$=".png"][target]:focus:hover::before'

    def test_render_does_not_reset(self):
        sel = Selector(element="p")
        sel.render()
        assert sel.render() == "p"
